"""
Error-to-response mapping for tracker views.

Installed as DRF's EXCEPTION_HANDLER. Each recognised error is classified
into a kind, and the response comes from a table keyed by
``(kind, negotiated format)``:

    kind            html                          json                      atom
    not_found       404 page                      404, empty                404, empty
    disallowed      redirect to root + warning    400, {"error": ...}       400, empty
    invalid         form re-rendered, 200         422, {model: {field: []}} 422, empty
    unauthenticated strategy (login redirect)     401, empty                401, empty
    forbidden       redirect to root + alert      403, empty                403, empty

Anything else is left to DRF's default handler.
"""

import logging

from django.contrib import messages
from django.core.exceptions import ObjectDoesNotExist
from django.http import Http404, HttpResponseRedirect
from django.shortcuts import render
from django.urls import reverse
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated, NotFound
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from tracker.apps import get_services
from tracker.exceptions import DisallowedParameters, RoleRequired, ValidationFailed

logger = logging.getLogger(__name__)

NOT_FOUND = "not_found"
DISALLOWED = "disallowed"
INVALID = "invalid"
UNAUTHENTICATED = "unauthenticated"
FORBIDDEN = "forbidden"

ERROR_KINDS = (
    (ObjectDoesNotExist, NOT_FOUND),
    (Http404, NOT_FOUND),
    (NotFound, NOT_FOUND),
    (DisallowedParameters, DISALLOWED),
    (ValidationFailed, INVALID),
    (NotAuthenticated, UNAUTHENTICATED),
    (AuthenticationFailed, UNAUTHENTICATED),
    (RoleRequired, FORBIDDEN),
)


def classify(exc):
    """Return the error kind for ``exc``, or None if it is not one we map."""
    for error_class, kind in ERROR_KINDS:
        if isinstance(exc, error_class):
            return kind
    return None


def negotiated_format(request):
    renderer = getattr(request, "accepted_renderer", None)
    return getattr(renderer, "format", None) or "html"


def _django_request(request):
    return getattr(request, "_request", request)


def _empty(status_code):
    def respond(exc, request, view):
        return Response(status=status_code)

    return respond


def _not_found_page(exc, request, view):
    return render(_django_request(request), "404.html", status=status.HTTP_404_NOT_FOUND)


def _disallowed_redirect(exc, request, view):
    messages.warning(_django_request(request), f"Your request was malformed. {exc.message}")
    return HttpResponseRedirect(reverse("root"))


def _disallowed_body(exc, request, view):
    return Response({"error": exc.message}, status=status.HTTP_400_BAD_REQUEST)


def _form_rerender(exc, request, view):
    if view is not None and hasattr(view, "form_invalid"):
        return view.form_invalid(request, exc)
    return Response(status=status.HTTP_422_UNPROCESSABLE_ENTITY)


def _validation_body(exc, request, view):
    return Response(exc.as_dict(), status=status.HTTP_422_UNPROCESSABLE_ENTITY)


def _unauthenticated(exc, request, view):
    strategy = getattr(view, "authentication", None) or get_services().authentication
    return strategy.unauthenticated_response(request, negotiated_format(request))


def _forbidden_redirect(exc, request, view):
    messages.error(_django_request(request), str(exc.detail))
    return HttpResponseRedirect(reverse("root"))


RESPONSES = {
    (NOT_FOUND, "html"): _not_found_page,
    (NOT_FOUND, "json"): _empty(status.HTTP_404_NOT_FOUND),
    (NOT_FOUND, "atom"): _empty(status.HTTP_404_NOT_FOUND),
    (DISALLOWED, "html"): _disallowed_redirect,
    (DISALLOWED, "json"): _disallowed_body,
    (DISALLOWED, "atom"): _empty(status.HTTP_400_BAD_REQUEST),
    (INVALID, "html"): _form_rerender,
    (INVALID, "json"): _validation_body,
    (INVALID, "atom"): _empty(status.HTTP_422_UNPROCESSABLE_ENTITY),
    (UNAUTHENTICATED, "html"): _unauthenticated,
    (UNAUTHENTICATED, "json"): _unauthenticated,
    (UNAUTHENTICATED, "atom"): _unauthenticated,
    (FORBIDDEN, "html"): _forbidden_redirect,
    (FORBIDDEN, "json"): _empty(status.HTTP_403_FORBIDDEN),
    (FORBIDDEN, "atom"): _empty(status.HTTP_403_FORBIDDEN),
}


def exception_handler(exc, context):
    """
    Map ``exc`` to a response for the format the client negotiated.

    Formats other than html/atom are answered like json.
    """
    kind = classify(exc)
    if kind is None:
        return drf_exception_handler(exc, context)

    request = context.get("request")
    view = context.get("view")
    fmt = negotiated_format(request)
    respond = RESPONSES.get((kind, fmt)) or RESPONSES[(kind, "json")]
    response = respond(exc, request, view)

    log = logger.warning if kind in (FORBIDDEN, DISALLOWED) else logger.info
    log(
        f"{kind} ({type(exc).__name__}) for {request.method} {request.path} "
        f"as {fmt}: {response.status_code}"
    )
    return response
