"""
Sign-in and sign-out routes.
"""
from flask import Blueprint, request

from cms.routes.shared import get_controller, request_context, respond

bp = Blueprint('users', __name__, url_prefix='/users')


@bp.route('/signin', methods=['GET'])
def signin_form():
    """Render the sign-in form."""
    return respond(get_controller().signin_form(request_context()))


@bp.route('/signin', methods=['POST'])
def signin():
    """Check credentials and sign the user in."""
    username = request.form.get('username', '').strip()
    password = request.form.get('password', '')
    return respond(get_controller().signin(request_context(), username, password))


@bp.route('/signout', methods=['POST'])
def signout():
    """Sign out; succeeds whether or not anyone was signed in."""
    return respond(get_controller().signout(request_context()))
