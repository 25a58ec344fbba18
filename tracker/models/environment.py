"""
Environment model for the tracker.
"""

from django.db import models
from django.urls import reverse
from django.utils import timezone


class EnvironmentQuerySet(models.QuerySet):
    def with_name(self, name):
        return self.filter(name=name)


class Environment(models.Model):
    """A deployment of a project (production, staging...) that bugs occur in."""

    project = models.ForeignKey(
        "tracker.Project",
        on_delete=models.CASCADE,
        related_name="environments",
    )
    name = models.CharField(max_length=100)
    created_at = models.DateTimeField(default=timezone.now)

    objects = EnvironmentQuerySet.as_manager()

    class Meta:
        app_label = "tracker"
        db_table = "environments"
        constraints = [
            models.UniqueConstraint(fields=["project", "name"], name="unique_environment_name"),
        ]

    def __str__(self):
        return f"{self.project_id}/{self.name}"

    def get_absolute_url(self):
        return reverse(
            "bug-list",
            kwargs={"project_slug": self.project.slug, "environment_name": self.name},
        )
