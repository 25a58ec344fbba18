"""
Project model for the tracker.
"""

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.urls import reverse
from django.utils import timezone
from django.utils.text import slugify


class ProjectQuerySet(models.QuerySet):
    def find_from_slug(self, slug):
        """Return the project with ``slug``; raises Project.DoesNotExist."""
        return self.get(slug=slug)

    def visible_to(self, user):
        """Projects the user owns or is a member of."""
        return self.filter(Q(owner=user) | Q(memberships__user=user)).distinct()


class Project(models.Model):
    """A codebase whose bugs are tracked, owned by a single user."""

    name = models.CharField(max_length=126)
    slug = models.SlugField(max_length=126, unique=True)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="owned_projects",
    )
    repository_url = models.URLField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(default=timezone.now)

    objects = ProjectQuerySet.as_manager()

    class Meta:
        app_label = "tracker"
        db_table = "projects"

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse("project-detail", kwargs={"project_slug": self.slug})
