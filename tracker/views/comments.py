"""
Comment views for the tracker.
"""

import logging

from rest_framework.renderers import JSONRenderer, TemplateHTMLRenderer
from rest_framework.response import Response

from tracker.pagination import scroll
from tracker.permissions import AuthorOrAdminRequired, MembershipRequired
from tracker.serializers import (
    CommentScrollParamsSerializer,
    CommentSerializer,
    CommentWriteSerializer,
)

from .base import TrackerView

logger = logging.getLogger(__name__)


class CommentListView(TrackerView):
    """
    GET /projects/<slug>/environments/<name>/bugs/<number>/comments/
    One page of a bug's comments, newest first. Members only.

    POST /projects/<slug>/environments/<name>/bugs/<number>/comments/
    Comment on a bug. Members only.
    """

    lookups = ("project", "environment", "bug")
    permission_classes = [MembershipRequired]
    template_name = "tracker/comment_list.html"
    form_template_name = "tracker/bug_detail.html"

    def get_template_context(self, **extra):
        context = super().get_template_context(**extra)
        context.setdefault("comments", self.bug.comments.select_related("user").order_by("number"))
        return context

    def get_comments(self):
        params = CommentScrollParamsSerializer(data=self.request.query_params)
        params.is_valid(raise_exception=True)
        options = params.validated_data

        comments = self.bug.comments.select_related("user")
        last = None
        if "last" in options:
            last = comments.filter(number=options["last"]).first()
        return scroll(comments, "created_at", "DESC", last, key="number", limit=options.get("limit"))

    def get(self, request, **kwargs):
        comments = list(self.get_comments())
        if self.response_format == "json":
            serializer = CommentSerializer(comments, many=True, context=self.get_serializer_context())
            return Response(serializer.data)
        if self.response_format == "atom":
            return Response(self.feed(comments))
        return Response(self.get_template_context(comments=comments))

    def post(self, request, **kwargs):
        serializer = CommentWriteSerializer(data=request.data)
        self.validated(serializer)
        comment = serializer.save(bug=self.bug, user=request.user)

        logger.info(f"Comment {comment.number} added to bug {self.bug.number} by {request.user.username}")

        data = CommentSerializer(comment, context=self.get_serializer_context()).data
        return self.respond_created(data, comment.get_absolute_url())

    def feed(self, comments):
        request = self.request
        bug_url = request.build_absolute_uri(self.bug.get_absolute_url())
        return {
            "title": f"Comments on #{self.bug.number} {self.bug.class_name}",
            "link": bug_url,
            "description": f"Comments on bug #{self.bug.number} of {self.project.name}",
            "feed_url": request.build_absolute_uri(),
            "items": [
                {
                    "title": f"Comment by {comment.user.username if comment.user else 'a former member'}",
                    "link": f"{bug_url}#comment-{comment.number}",
                    "description": self.markdown.render(comment.body),
                    "unique_id": f"{bug_url}#comment-{comment.number}",
                    "pubdate": comment.created_at,
                    "updateddate": comment.updated_at,
                    "author_name": comment.user.name if comment.user else None,
                }
                for comment in comments
            ],
        }


class CommentDetailView(TrackerView):
    """
    PATCH /projects/<slug>/environments/<name>/bugs/<number>/comments/<number>/
    Edit a comment. Its author, or a project owner or admin.

    DELETE /projects/<slug>/environments/<name>/bugs/<number>/comments/<number>/
    Delete a comment. Its author, or a project owner or admin.
    """

    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]
    lookups = ("project", "environment", "bug", "comment")
    permission_classes = [MembershipRequired, AuthorOrAdminRequired]
    form_template_name = "tracker/bug_detail.html"

    def get_template_context(self, **extra):
        context = super().get_template_context(**extra)
        context.setdefault("comments", self.bug.comments.select_related("user").order_by("number"))
        return context

    def patch(self, request, **kwargs):
        serializer = CommentWriteSerializer(self.comment, data=request.data, partial=True)
        self.validated(serializer)
        comment = serializer.save()

        logger.info(f"Comment {comment.number} on bug {self.bug.number} edited by {request.user.username}")

        data = CommentSerializer(comment, context=self.get_serializer_context()).data
        return self.respond_updated(data, comment.get_absolute_url())

    def delete(self, request, **kwargs):
        number = self.comment.number
        self.comment.delete()
        logger.info(f"Comment {number} on bug {self.bug.number} deleted by {request.user.username}")
        return self.respond_destroyed(self.bug.get_absolute_url())
