"""
Comment serializers for the tracker.
"""

from rest_framework import serializers

from tracker.models import Comment

from .base import StrictFieldsMixin


class CommentSerializer(serializers.ModelSerializer):
    """
    Full comment serializer.

    ``body_html`` is rendered by the MarkdownRenderer passed in the
    serializer context as ``markdown``.
    """

    user = serializers.SlugRelatedField(slug_field="username", read_only=True)
    body_html = serializers.SerializerMethodField()

    class Meta:
        model = Comment
        fields = ["number", "user", "body", "body_html", "created_at", "updated_at"]
        read_only_fields = ["number", "body", "created_at", "updated_at"]

    def get_body_html(self, obj):
        markdown = self.context.get("markdown")
        if markdown is None:
            return None
        return markdown.render(obj.body)


class CommentWriteSerializer(StrictFieldsMixin, serializers.ModelSerializer):
    """Serializer for creating or editing a comment."""

    body = serializers.CharField(max_length=10000)

    class Meta:
        model = Comment
        fields = ["body"]


class CommentScrollParamsSerializer(serializers.Serializer):
    """Query parameters accepted by the comment list (newest first)."""

    last = serializers.IntegerField(required=False, min_value=1)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=100)
