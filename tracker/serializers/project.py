"""
Project serializers for the tracker.
"""

from django.utils.text import slugify
from rest_framework import serializers

from tracker.models import Environment, Project
from tracker.validators import PlainTextField

from .base import StrictFieldsMixin


class ProjectSerializer(serializers.ModelSerializer):
    """Full project serializer."""

    owner = serializers.SlugRelatedField(slug_field="username", read_only=True)
    role = serializers.SerializerMethodField()

    class Meta:
        model = Project
        fields = ["name", "slug", "owner", "repository_url", "created_at", "role"]
        read_only_fields = ["name", "slug", "repository_url", "created_at"]

    def get_role(self, obj):
        request = self.context.get("request")
        if request is None:
            return None
        return request.user.role(obj)


class ProjectCreateSerializer(StrictFieldsMixin, serializers.ModelSerializer):
    """Serializer for creating a project."""

    name = PlainTextField(max_length=126)
    slug = serializers.SlugField(max_length=126, required=False)

    class Meta:
        model = Project
        fields = ["name", "slug", "repository_url"]

    def validate(self, attrs):
        slug = attrs.get("slug") or slugify(attrs.get("name", ""))
        if not slug:
            raise serializers.ValidationError({"slug": "could not be derived from the name"})
        if Project.objects.filter(slug=slug).exists():
            raise serializers.ValidationError({"slug": "is already taken"})
        attrs["slug"] = slug
        return attrs


class ProjectUpdateSerializer(StrictFieldsMixin, serializers.ModelSerializer):
    """Serializer for updating a project. The slug and owner are fixed."""

    name = PlainTextField(max_length=126, required=False)

    class Meta:
        model = Project
        fields = ["name", "repository_url"]


class EnvironmentSerializer(serializers.ModelSerializer):
    """Environment serializer."""

    bugs_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Environment
        fields = ["name", "created_at", "bugs_count"]
        read_only_fields = ["name", "created_at"]
