"""
Bug serializers for the tracker.
"""

from rest_framework import serializers

from tracker.models import Bug, User
from tracker.exceptions import InvalidSortDirection
from tracker.pagination import SortDirection

from .base import StrictFieldsMixin

SORTABLE_COLUMNS = ["latest_occurrence", "first_occurrence", "occurrences_count", "number"]


class BugSerializer(serializers.ModelSerializer):
    """Full bug serializer."""

    assigned_user = serializers.SlugRelatedField(slug_field="username", read_only=True)

    class Meta:
        model = Bug
        fields = [
            "number",
            "class_name",
            "message",
            "file",
            "line",
            "first_occurrence",
            "latest_occurrence",
            "occurrences_count",
            "fixed",
            "irrelevant",
            "assigned_user",
        ]
        read_only_fields = [
            "number",
            "class_name",
            "message",
            "file",
            "line",
            "first_occurrence",
            "latest_occurrence",
            "occurrences_count",
            "fixed",
            "irrelevant",
        ]


class BugUpdateSerializer(StrictFieldsMixin, serializers.ModelSerializer):
    """
    Serializer for triaging a bug.

    Only the triage fields can change; everything else about a bug comes from
    its occurrences.
    """

    assigned_user = serializers.SlugRelatedField(
        slug_field="username",
        queryset=User.objects.all(),
        allow_null=True,
        required=False,
    )

    class Meta:
        model = Bug
        fields = ["fixed", "irrelevant", "assigned_user"]

    def validate_assigned_user(self, value):
        project = self.context.get("project")
        if value is not None and project is not None and value.role(project) is None:
            raise serializers.ValidationError("is not a member of this project")
        return value


class ScrollParamsSerializer(serializers.Serializer):
    """Query parameters accepted by infinite-scroll list views."""

    sort = serializers.ChoiceField(choices=SORTABLE_COLUMNS, default="latest_occurrence")
    dir = serializers.CharField(default="DESC")
    last = serializers.IntegerField(required=False, min_value=1)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=100)

    def validate_dir(self, value):
        try:
            return SortDirection.parse(value)
        except InvalidSortDirection:
            raise serializers.ValidationError("must be ASC or DESC") from None
