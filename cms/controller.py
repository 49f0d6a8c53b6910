"""
Document controller: the request-independent logic behind every route.

Handlers receive the request's RequestContext and form inputs and return an
ActionResult. They never touch the Flask session directly.
"""
from functools import wraps
from typing import Optional

from cms.models import ActionResult, CLEAR, RequestContext, SortMode
from cms.services.auth_service import CredentialStore
from cms.services.document_store import DocumentStore
from cms.utils.formatters import render_markdown
from cms.utils.validators import validate_filename

SIGNED_IN_REQUIRED_MESSAGE = 'You must be signed in to perform this action.'
INVALID_CREDENTIALS_MESSAGE = 'Invalid credentials'
WELCOME_MESSAGE = 'Welcome'
SIGNED_OUT_MESSAGE = 'You have been signed out.'
RENAMED_MESSAGE = 'File has been renamed.'

INDEX_URL = '/'


def signed_in_required(func):
    """Decorator that short-circuits a controller method for anonymous sessions."""
    @wraps(func)
    def wrapper(self, ctx: RequestContext, *args, **kwargs):
        denied = self.require_signed_in(ctx)
        if denied is not None:
            return denied
        return func(self, ctx, *args, **kwargs)
    return wrapper


class DocumentController:
    """Business rules for listing, viewing and managing documents."""

    def __init__(self, store: DocumentStore, credentials: CredentialStore):
        self.store = store
        self.credentials = credentials

    # ------------------------------------------------------------------
    # Access gate
    # ------------------------------------------------------------------

    @staticmethod
    def require_signed_in(ctx: RequestContext) -> Optional[ActionResult]:
        """Return a redirect for anonymous sessions, None when the user may proceed."""
        if ctx.signed_in:
            return None
        return ActionResult.redirect(INDEX_URL, flash=SIGNED_IN_REQUIRED_MESSAGE)

    # ------------------------------------------------------------------
    # Read-only
    # ------------------------------------------------------------------

    def index(self, ctx: RequestContext) -> ActionResult:
        documents = self.store.list_documents(ctx.sort)
        return ActionResult.render(
            'index.html',
            documents=documents,
            files=[doc.name for doc in documents],
            sort=ctx.sort.value if ctx.sort else None
        )

    def set_sort(self, ctx: RequestContext, mode: SortMode) -> ActionResult:
        return ActionResult.redirect(INDEX_URL, sort=mode.value)

    def show(self, ctx: RequestContext, filename: str) -> ActionResult:
        """
        Display a document.

        Text files are returned as-is, markdown is converted to HTML inside
        the page layout, and missing files send the user back to the index.
        """
        if not self.store.exists(filename):
            return ActionResult.redirect(INDEX_URL, flash=f"{filename} does not exist.")

        document = self.store.get_document(filename)
        content = self.store.read(filename)
        if document.extension == '.md':
            html = render_markdown(content.decode('utf-8', errors='replace'))
            return ActionResult.render('document.html', filename=filename, content=html)
        return ActionResult.raw(content, 'text/plain')

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    @signed_in_required
    def new_form(self, ctx: RequestContext) -> ActionResult:
        return ActionResult.render('new.html')

    @signed_in_required
    def edit_form(self, ctx: RequestContext, filename: str) -> ActionResult:
        content = self.store.read(filename).decode('utf-8', errors='replace')
        return ActionResult.render('edit.html', filename=filename, content=content)

    @signed_in_required
    def rename_form(self, ctx: RequestContext, filename: str) -> ActionResult:
        return ActionResult.render('rename.html', filename=filename)

    def signin_form(self, ctx: RequestContext) -> ActionResult:
        return ActionResult.render('signin.html')

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @signed_in_required
    def create(self, ctx: RequestContext, filename: str) -> ActionResult:
        check = validate_filename(filename, self.store.taken_names(), self.store.allowed_extensions)
        if not check.ok:
            return ActionResult.render('new.html', status=422, flash=check.message, filename=filename)

        self.store.create(filename)
        return ActionResult.redirect(INDEX_URL, flash=f"{filename} has been created.")

    @signed_in_required
    def update(self, ctx: RequestContext, filename: str, content: str) -> ActionResult:
        self.store.write(filename, content)
        return ActionResult.redirect(INDEX_URL, flash=f"{filename} has been updated.")

    @signed_in_required
    def rename(self, ctx: RequestContext, filename: str, new_filename: str) -> ActionResult:
        check = validate_filename(new_filename, self.store.taken_names(), self.store.allowed_extensions)
        if not check.ok:
            return ActionResult.render(
                'rename.html', status=422, flash=check.message,
                filename=filename, new_filename=new_filename
            )

        self.store.rename(filename, new_filename)
        return ActionResult.redirect(INDEX_URL, flash=RENAMED_MESSAGE)

    @signed_in_required
    def duplicate(self, ctx: RequestContext, filename: str) -> ActionResult:
        self.store.duplicate(filename)
        return ActionResult.redirect(INDEX_URL)

    @signed_in_required
    def delete(self, ctx: RequestContext, filename: str) -> ActionResult:
        self.store.delete(filename)
        return ActionResult.redirect(INDEX_URL, flash=f"{filename} has been deleted.")

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def signin(self, ctx: RequestContext, username: str, password: str) -> ActionResult:
        if self.credentials.authenticate(username, password):
            return ActionResult.redirect(INDEX_URL, flash=WELCOME_MESSAGE, username=username)

        return ActionResult.render(
            'signin.html', status=422, flash=INVALID_CREDENTIALS_MESSAGE, username=username
        )

    def signout(self, ctx: RequestContext) -> ActionResult:
        return ActionResult.redirect(INDEX_URL, flash=SIGNED_OUT_MESSAGE, username=CLEAR)
