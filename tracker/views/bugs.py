"""
Bug views for the tracker.
"""

import logging

from rest_framework.renderers import JSONRenderer, TemplateHTMLRenderer
from rest_framework.response import Response

from tracker.pagination import scroll
from tracker.permissions import MembershipRequired
from tracker.serializers import BugSerializer, BugUpdateSerializer, ScrollParamsSerializer

from .base import TrackerView

logger = logging.getLogger(__name__)


class BugListView(TrackerView):
    """
    GET /projects/<slug>/environments/<name>/bugs/
    One page of an environment's bugs. Members only.

    Query params:
        sort: latest_occurrence (default), first_occurrence, occurrences_count or number
        dir: ASC or DESC (default)
        last: number of the last bug on the previous page
        limit: page size, 1-100
    """

    lookups = ("project", "environment")
    permission_classes = [MembershipRequired]
    template_name = "tracker/bug_list.html"

    def get_bugs(self):
        params = ScrollParamsSerializer(data=self.request.query_params)
        params.is_valid(raise_exception=True)
        options = params.validated_data

        bugs = self.environment.bugs.select_related("assigned_user")
        last = None
        if "last" in options:
            last = bugs.filter(number=options["last"]).first()

        # number is already unique within an environment.
        key = None if options["sort"] == "number" else "number"
        return scroll(bugs, options["sort"], options["dir"], last, key=key, limit=options.get("limit"))

    def get(self, request, **kwargs):
        bugs = list(self.get_bugs())
        if self.response_format == "json":
            return Response(BugSerializer(bugs, many=True).data)
        if self.response_format == "atom":
            return Response(self.feed(bugs))
        return Response(self.get_template_context(bugs=bugs, next_query=self.next_query(bugs)))

    def next_query(self, bugs):
        """Query string of the page after ``bugs``, keeping the other parameters."""
        if not bugs:
            return None
        params = self.request.query_params.copy()
        params["last"] = bugs[-1].number
        return params.urlencode()

    def feed(self, bugs):
        request = self.request
        return {
            "title": f"{self.project.name}: {self.environment.name} bugs",
            "link": request.build_absolute_uri(self.environment.get_absolute_url()),
            "description": f"Bugs in the {self.environment.name} environment of {self.project.name}",
            "feed_url": request.build_absolute_uri(),
            "items": [
                {
                    "title": f"#{bug.number} {bug.class_name}",
                    "link": request.build_absolute_uri(bug.get_absolute_url()),
                    "description": bug.message,
                    "unique_id": request.build_absolute_uri(bug.get_absolute_url()),
                    "pubdate": bug.first_occurrence,
                    "updateddate": bug.latest_occurrence,
                }
                for bug in bugs
            ],
        }


class BugDetailView(TrackerView):
    """
    GET /projects/<slug>/environments/<name>/bugs/<number>/
    Show a bug and its comments. Members only.

    PATCH /projects/<slug>/environments/<name>/bugs/<number>/
    Triage a bug: fixed, irrelevant, assigned_user. Members only.
    """

    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]
    lookups = ("project", "environment", "bug")
    permission_classes = [MembershipRequired]
    template_name = "tracker/bug_detail.html"
    form_template_name = "tracker/bug_detail.html"

    def get_template_context(self, **extra):
        context = super().get_template_context(**extra)
        context.setdefault("comments", self.bug.comments.select_related("user").order_by("number"))
        return context

    def get(self, request, **kwargs):
        if self.response_format == "json":
            return Response(BugSerializer(self.bug).data)
        return Response(self.get_template_context())

    def patch(self, request, **kwargs):
        serializer = BugUpdateSerializer(
            self.bug, data=request.data, partial=True, context=self.get_serializer_context()
        )
        self.validated(serializer)
        bug = serializer.save()

        logger.info(
            f"Bug {bug.number} in {self.project.slug}/{self.environment.name} "
            f"updated by {request.user.username}"
        )
        return self.respond_updated(BugSerializer(bug).data, bug.get_absolute_url())
