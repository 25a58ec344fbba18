"""
Project views for the tracker.
"""

import logging

from django.db.models import Count
from django.urls import reverse
from rest_framework.renderers import JSONRenderer, TemplateHTMLRenderer
from rest_framework.response import Response

from tracker.models import Project
from tracker.permissions import AdminLoginRequired, MembershipRequired, OwnerLoginRequired
from tracker.serializers import (
    EnvironmentSerializer,
    ProjectCreateSerializer,
    ProjectSerializer,
    ProjectUpdateSerializer,
)

from .base import TrackerView

logger = logging.getLogger(__name__)


class ProjectListView(TrackerView):
    """
    GET /projects/
    List the projects the current user owns or belongs to.

    POST /projects/
    Create a project owned by the current user.
    """

    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]
    template_name = "tracker/project_list.html"
    form_template_name = "tracker/project_list.html"

    def get_projects(self):
        return Project.objects.visible_to(self.request.user).select_related("owner").order_by("name")

    def get_template_context(self, **extra):
        context = super().get_template_context(**extra)
        context.setdefault("projects", self.get_projects())
        return context

    def get(self, request, **kwargs):
        projects = self.get_projects()
        if self.response_format == "json":
            serializer = ProjectSerializer(projects, many=True, context=self.get_serializer_context())
            return Response(serializer.data)
        return Response(self.get_template_context())

    def post(self, request, **kwargs):
        serializer = ProjectCreateSerializer(data=request.data)
        self.validated(serializer)
        project = serializer.save(owner=request.user)

        logger.info(f"Project {project.slug} created by {request.user.username}")

        data = ProjectSerializer(project, context=self.get_serializer_context()).data
        return self.respond_created(data, project.get_absolute_url())


class ProjectDetailView(TrackerView):
    """
    GET /projects/<slug>/
    Show a project. Members only.

    PATCH /projects/<slug>/
    Rename a project or change its repository. Owner and admins only.

    DELETE /projects/<slug>/
    Delete a project with all of its environments and bugs. Owner only.
    """

    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]
    lookups = ("project",)
    permission_classes = [MembershipRequired]
    method_permission_classes = {
        "PATCH": [AdminLoginRequired],
        "DELETE": [OwnerLoginRequired],
    }
    template_name = "tracker/project_detail.html"
    form_template_name = "tracker/project_detail.html"

    def get_template_context(self, **extra):
        context = super().get_template_context(**extra)
        context.setdefault(
            "environments",
            self.project.environments.annotate(bugs_count=Count("bugs")).order_by("name"),
        )
        context.setdefault("role", self.request.user.role(self.project))
        return context

    def get(self, request, **kwargs):
        if self.response_format == "json":
            return Response(ProjectSerializer(self.project, context=self.get_serializer_context()).data)
        return Response(self.get_template_context())

    def patch(self, request, **kwargs):
        serializer = ProjectUpdateSerializer(self.project, data=request.data, partial=True)
        self.validated(serializer)
        project = serializer.save()

        logger.info(f"Project {project.slug} updated by {request.user.username}")

        data = ProjectSerializer(project, context=self.get_serializer_context()).data
        return self.respond_updated(data, project.get_absolute_url())

    def delete(self, request, **kwargs):
        slug = self.project.slug
        self.project.delete()
        logger.info(f"Project {slug} deleted by {request.user.username}")
        return self.respond_destroyed(reverse("root"))


class EnvironmentListView(TrackerView):
    """
    GET /projects/<slug>/environments/
    List a project's environments with their bug counts. Members only.
    """

    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]
    lookups = ("project",)
    permission_classes = [MembershipRequired]
    template_name = "tracker/environment_list.html"

    def get(self, request, **kwargs):
        environments = self.project.environments.annotate(bugs_count=Count("bugs")).order_by("name")
        if self.response_format == "json":
            return Response(EnvironmentSerializer(environments, many=True).data)
        return Response(self.get_template_context(environments=environments))
