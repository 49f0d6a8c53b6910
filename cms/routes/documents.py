"""
Document routes: index, sorting, viewing and managing documents.
"""
from flask import Blueprint, request

from cms.models import SortMode
from cms.routes.shared import get_controller, request_context, respond

bp = Blueprint('documents', __name__)


# ============================================================================
# INDEX
# ============================================================================

@bp.route('/', methods=['GET'])
def index():
    """List documents in the session's sort order."""
    return respond(get_controller().index(request_context()))


@bp.route('/sort/abc', methods=['POST'])
def sort_by_name():
    return respond(get_controller().set_sort(request_context(), SortMode.ABC))


@bp.route('/sort/date', methods=['POST'])
def sort_by_date():
    return respond(get_controller().set_sort(request_context(), SortMode.DATE))


# ============================================================================
# CREATE
# ============================================================================

@bp.route('/new', methods=['GET'])
def new_document():
    """Render the new document form."""
    return respond(get_controller().new_form(request_context()))


@bp.route('/create', methods=['POST'])
def create_document():
    """Create an empty document."""
    filename = request.form.get('filename', '')
    return respond(get_controller().create(request_context(), filename))


# ============================================================================
# SINGLE DOCUMENT
# ============================================================================

@bp.route('/<filename>', methods=['GET'])
def show_document(filename):
    """Display a document (plain text or rendered markdown)."""
    return respond(get_controller().show(request_context(), filename))


@bp.route('/<filename>', methods=['POST'])
def update_document(filename):
    """Overwrite a document with the submitted content."""
    content = request.form.get('content', '')
    return respond(get_controller().update(request_context(), filename, content))


@bp.route('/<filename>/edit', methods=['GET'])
def edit_document(filename):
    """Render the edit form."""
    return respond(get_controller().edit_form(request_context(), filename))


@bp.route('/<filename>/rename', methods=['GET'])
def rename_form(filename):
    """Render the rename form."""
    return respond(get_controller().rename_form(request_context(), filename))


@bp.route('/<filename>/rename', methods=['POST'])
def rename_document(filename):
    new_filename = request.form.get('new_filename', '')
    return respond(get_controller().rename(request_context(), filename, new_filename))


@bp.route('/<filename>/duplicate', methods=['POST'])
def duplicate_document(filename):
    return respond(get_controller().duplicate(request_context(), filename))


@bp.route('/<filename>/delete', methods=['POST'])
def delete_document(filename):
    return respond(get_controller().delete(request_context(), filename))
