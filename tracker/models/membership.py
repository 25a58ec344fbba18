"""
Project membership model for the tracker.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class Role(models.TextChoices):
    """A user's permission level within a single project."""

    OWNER = "owner", "Owner"
    ADMIN = "admin", "Administrator"
    MEMBER = "member", "Member"


class Membership(models.Model):
    """
    Grants a user access to a project.

    Members can read and comment; admins can also change project settings.
    The project owner does not need a membership row.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    project = models.ForeignKey(
        "tracker.Project",
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    admin = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = "tracker"
        db_table = "memberships"
        constraints = [
            models.UniqueConstraint(fields=["user", "project"], name="unique_project_membership"),
        ]

    def __str__(self):
        return f"{self.user_id} in {self.project_id} ({self.role})"

    @property
    def role(self):
        return Role.ADMIN if self.admin else Role.MEMBER
