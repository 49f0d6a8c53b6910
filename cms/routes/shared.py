"""
Shared helpers for translating between Flask requests and the controller.
"""
from flask import Response, flash, make_response, redirect, render_template, session

from cms.controller import DocumentController
from cms.models import ActionResult, CLEAR, RequestContext
from cms.services.auth_service import get_credential_store
from cms.services.document_store import get_document_store


def get_controller() -> DocumentController:
    """Controller bound to the current app's stores."""
    return DocumentController(get_document_store(), get_credential_store())


def request_context() -> RequestContext:
    """Snapshot of the session for the current request."""
    return RequestContext.from_session(session)


def respond(result: ActionResult) -> Response:
    """
    Apply an ActionResult to the session and build the HTTP response.

    Session updates and the flash message are applied before rendering so
    that a re-rendered form shows the message on the same page.
    """
    for key, value in result.session_updates.items():
        if value is CLEAR:
            session.pop(key, None)
        else:
            session[key] = value

    if result.flash:
        flash(result.flash)

    if result.is_redirect:
        return redirect(result.redirect_to, code=result.status)

    if result.body is not None:
        return Response(result.body, status=result.status, content_type=result.content_type)

    return make_response(render_template(result.template, **result.context), result.status)
