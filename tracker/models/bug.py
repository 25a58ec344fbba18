"""
Bug model for the tracker.
"""

from functools import partial

from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils import timezone

from tracker.utils import save_numbered

from .environment import Environment


class BugQuerySet(models.QuerySet):
    def find_by_number(self, number):
        """Return the bug numbered ``number``; raises Bug.DoesNotExist."""
        return self.get(number=number)


class Bug(models.Model):
    """
    A distinct error in one environment, grouped from its occurrences.

    Bugs are numbered sequentially within their environment; the number is
    what users see in URLs.
    """

    environment = models.ForeignKey(
        "tracker.Environment",
        on_delete=models.CASCADE,
        related_name="bugs",
    )
    number = models.PositiveIntegerField(editable=False)
    class_name = models.CharField(max_length=128)
    message = models.TextField(blank=True, default="")
    file = models.CharField(max_length=255, blank=True, default="")
    line = models.PositiveIntegerField(null=True, blank=True)
    first_occurrence = models.DateTimeField(default=timezone.now)
    latest_occurrence = models.DateTimeField(default=timezone.now)
    occurrences_count = models.PositiveIntegerField(default=1)
    fixed = models.BooleanField(default=False)
    irrelevant = models.BooleanField(default=False)
    assigned_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="assigned_bugs",
    )

    objects = BugQuerySet.as_manager()

    class Meta:
        app_label = "tracker"
        db_table = "bugs"
        constraints = [
            models.UniqueConstraint(fields=["environment", "number"], name="unique_bug_number"),
        ]

    def __str__(self):
        return f"#{self.number} {self.class_name}"

    def save(self, *args, **kwargs):
        if self.number is not None:
            return super().save(*args, **kwargs)
        save_numbered(
            self,
            siblings=Bug.objects.filter(environment_id=self.environment_id),
            parent=Environment.objects.filter(pk=self.environment_id),
            save=partial(super().save, *args, **kwargs),
        )

    def get_absolute_url(self):
        return reverse(
            "bug-detail",
            kwargs={
                "project_slug": self.environment.project.slug,
                "environment_name": self.environment.name,
                "bug_number": self.number,
            },
        )

    @property
    def project(self):
        return self.environment.project
