"""
Unit tests for tracker serializers.
"""

import pytest

from tracker.exceptions import DisallowedParameters, ValidationFailed
from tracker.markup import MarkdownRenderer
from tracker.pagination import SortDirection
from tracker.serializers import (
    BugUpdateSerializer,
    CommentSerializer,
    CommentWriteSerializer,
    ProjectCreateSerializer,
    ScrollParamsSerializer,
    resource_name,
)


class TestStrictFields:
    """Tests for rejecting fields that cannot be written."""

    def test_unknown_field(self):
        serializer = CommentWriteSerializer(data={"body": "Hi", "number": 3, "bug": 1})
        with pytest.raises(DisallowedParameters) as excinfo:
            serializer.is_valid()
        assert excinfo.value.params == ["bug", "number"]
        assert excinfo.value.message == "The following parameters cannot be modified: bug, number"

    def test_form_helpers_are_ignored(self):
        """CSRF tokens and method overrides are not model fields."""
        serializer = CommentWriteSerializer(data={"body": "Hi", "csrfmiddlewaretoken": "x"})
        assert serializer.is_valid()

    def test_allowed_fields(self):
        serializer = CommentWriteSerializer(data={"body": "Hi"})
        assert serializer.is_valid()
        assert serializer.validated_data == {"body": "Hi"}


@pytest.mark.django_db
class TestProjectCreateSerializer:
    """Tests for creating projects."""

    def test_slug_from_name(self):
        serializer = ProjectCreateSerializer(data={"name": "My Project"})
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data["slug"] == "my-project"

    def test_slug_taken(self, project):
        serializer = ProjectCreateSerializer(data={"name": project.name})
        assert not serializer.is_valid()
        assert serializer.errors["slug"] == ["is already taken"]

    def test_html_name(self):
        serializer = ProjectCreateSerializer(data={"name": "<b>Bold</b>"})
        assert not serializer.is_valid()
        assert "name" in serializer.errors

    def test_owner_cannot_be_set(self, member):
        with pytest.raises(DisallowedParameters):
            ProjectCreateSerializer(data={"name": "X", "owner": member.username}).is_valid()


@pytest.mark.django_db
class TestBugUpdateSerializer:
    """Tests for triaging bugs."""

    def test_assign_member(self, project, bug, member):
        serializer = BugUpdateSerializer(
            bug, data={"assigned_user": member.username}, partial=True, context={"project": project}
        )
        assert serializer.is_valid(), serializer.errors
        assert serializer.save().assigned_user == member

    def test_assign_outsider(self, project, bug, outsider):
        serializer = BugUpdateSerializer(
            bug, data={"assigned_user": outsider.username}, partial=True, context={"project": project}
        )
        assert not serializer.is_valid()
        assert serializer.errors["assigned_user"] == ["is not a member of this project"]

    def test_occurrence_fields_are_read_only(self, project, bug):
        serializer = BugUpdateSerializer(
            bug, data={"occurrences_count": 0}, partial=True, context={"project": project}
        )
        with pytest.raises(DisallowedParameters):
            serializer.is_valid()


class TestScrollParamsSerializer:
    """Tests for list query parameters."""

    def test_defaults(self):
        serializer = ScrollParamsSerializer(data={})
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data["sort"] == "latest_occurrence"
        assert serializer.validated_data["dir"] is SortDirection.DESC

    def test_direction_any_case(self):
        serializer = ScrollParamsSerializer(data={"dir": "asc"})
        assert serializer.is_valid()
        assert serializer.validated_data["dir"] is SortDirection.ASC

    def test_invalid_direction(self):
        serializer = ScrollParamsSerializer(data={"dir": "UP"})
        assert not serializer.is_valid()
        assert serializer.errors["dir"] == ["must be ASC or DESC"]

    def test_unknown_sort_column(self):
        serializer = ScrollParamsSerializer(data={"sort": "message"})
        assert not serializer.is_valid()
        assert "sort" in serializer.errors


@pytest.mark.django_db
class TestCommentSerializer:
    """Tests for comment output."""

    def test_body_html(self, comment):
        data = CommentSerializer(comment, context={"markdown": MarkdownRenderer()}).data
        assert data["user"] == "mia"
        assert data["body_html"] == "<p>Seen this <strong>twice</strong> today.</p>"

    def test_body_html_without_renderer(self, comment):
        assert CommentSerializer(comment).data["body_html"] is None


class TestValidationFailed:
    """Tests for the validation error body."""

    def test_as_dict(self):
        exc = ValidationFailed("project", {"name": ["is required"]})
        assert exc.as_dict() == {"project": {"name": ["is required"]}}

    def test_resource_name(self):
        assert resource_name(CommentWriteSerializer()) == "comment"
