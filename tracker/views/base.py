"""
Base view for the tracker.

Every tracker view inherits from TrackerView, which applies the shared
request-handling policy.

Formats
-------
HTML (``text/html``), JSON (``application/json``) and Atom
(``application/atom+xml``). The format comes from the URL suffix
(``/projects/squash.json``) or the ``Accept`` header; HTML is assumed when
neither is given. JSON requests are "API requests".

Typical responses
-----------------
- Created: HTML 302 to the record, API 201 with the representation.
- Updated: HTML 302 to the record, API 200 with the representation.
- Destroyed: HTML 302 to a relevant page, API 204 with no body.
- Not found: 404; HTML renders the 404 page, other formats have no body.
- Disallowed field in a write: HTML 302 to the root with a flash warning,
  API 400 naming the fields.
- Failed validation: HTML re-renders the form (200), API 422 with
  ``{"comment": {"body": ["This field is required."]}}``.
- Not signed in: decided by the authentication strategy.
- Missing project role: HTML 302 to the root with a flash alert, API 403.

CSRF
----
Unsafe requests from a signed-in browser session must include the CSRF
token (``{% csrf_token %}`` or the ``X-CSRFToken`` header).
"""

from django.http import HttpResponseRedirect
from rest_framework import status
from rest_framework.renderers import JSONRenderer, TemplateHTMLRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.apps import get_services
from tracker.exceptions import RoleRequired, ValidationFailed
from tracker.models import Project
from tracker.renderers import AtomRenderer
from tracker.serializers import resource_name


class TrackerView(APIView):
    """
    Abstract base of all tracker views.

    Request handling runs in this order: content negotiation, the login gate
    of the configured authentication strategy, the resource lookups named in
    ``lookups`` (``find_project``, ``find_environment``...), then the role
    gates in ``permission_classes`` (or ``method_permission_classes`` for the
    current HTTP method).
    """

    renderer_classes = [TemplateHTMLRenderer, JSONRenderer, AtomRenderer]
    permission_classes = []
    method_permission_classes = {}
    lookups = ()
    template_name = None
    form_template_name = None

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        services = get_services()
        self.authentication = services.authentication
        self.markdown = services.markdown

    # Authentication and authorization

    def get_authenticators(self):
        return self.authentication.get_authenticators()

    def get_permissions(self):
        permission_classes = self.method_permission_classes.get(
            self.request.method, self.permission_classes
        )
        return [permission() for permission in permission_classes]

    def check_permissions(self, request):
        self.authentication.login_required(request)
        self.find_resources()
        super().check_permissions(request)

    def permission_denied(self, request, message=None, code=None):
        if code == RoleRequired.default_code:
            raise RoleRequired(detail=message)
        super().permission_denied(request, message=message, code=code)

    def handle_exception(self, exc):
        response = super().handle_exception(exc)
        if isinstance(exc, ValidationFailed) and isinstance(response, Response):
            # A re-rendered form is an ordinary page, not an error template.
            response.exception = False
        return response

    # Resource lookups

    def find_resources(self):
        for name in self.lookups:
            getattr(self, f"find_{name}")()

    def find_project(self):
        self.project = Project.objects.find_from_slug(self.kwargs["project_slug"])

    def find_environment(self):
        self.environment = self.project.environments.with_name(
            self.kwargs["environment_name"]
        ).get()

    def find_bug(self):
        self.bug = self.environment.bugs.find_by_number(self.kwargs["bug_number"])

    def find_comment(self):
        self.comment = self.bug.comments.find_by_number(self.kwargs["comment_number"])

    # Responses

    @property
    def response_format(self):
        renderer = getattr(self.request, "accepted_renderer", None)
        return getattr(renderer, "format", None) or "html"

    def get_serializer_context(self):
        return {
            "request": self.request,
            "view": self,
            "markdown": self.markdown,
            "project": getattr(self, "project", None),
        }

    def get_template_context(self, **extra):
        context = {name: getattr(self, name) for name in self.lookups if hasattr(self, name)}
        context.update(extra)
        return context

    def validated(self, serializer):
        """Validate ``serializer`` or raise ValidationFailed with its errors."""
        if not serializer.is_valid():
            raise ValidationFailed(resource_name(serializer), serializer.errors)
        return serializer.validated_data

    def form_invalid(self, request, exc):
        """Re-render the form with its errors (HTML responses to ValidationFailed)."""
        if self.form_template_name is None:
            return Response(status=status.HTTP_422_UNPROCESSABLE_ENTITY)
        context = self.get_template_context(errors=exc.errors, form_data=request.data)
        return Response(context, template_name=self.form_template_name)

    def respond_created(self, data, location):
        if self.response_format == "html":
            return HttpResponseRedirect(location)
        return Response(data, status=status.HTTP_201_CREATED, headers={"Location": location})

    def respond_updated(self, data, location):
        if self.response_format == "html":
            return HttpResponseRedirect(location)
        return Response(data, status=status.HTTP_200_OK)

    def respond_destroyed(self, location):
        if self.response_format == "html":
            return HttpResponseRedirect(location)
        return Response(status=status.HTTP_204_NO_CONTENT)
