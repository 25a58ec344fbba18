"""
Comment model for the tracker.
"""

from functools import partial

from django.conf import settings
from django.db import models
from django.utils import timezone

from tracker.utils import save_numbered

from .bug import Bug


class CommentQuerySet(models.QuerySet):
    def find_by_number(self, number):
        return self.get(number=number)


class Comment(models.Model):
    """A Markdown note left on a bug by a project member."""

    bug = models.ForeignKey(
        "tracker.Bug",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="comments",
    )
    number = models.PositiveIntegerField(editable=False)
    body = models.TextField()
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CommentQuerySet.as_manager()

    class Meta:
        app_label = "tracker"
        db_table = "comments"
        constraints = [
            models.UniqueConstraint(fields=["bug", "number"], name="unique_comment_number"),
        ]

    def __str__(self):
        return f"Comment {self.number} on bug {self.bug_id}"

    def save(self, *args, **kwargs):
        if self.number is not None:
            return super().save(*args, **kwargs)
        save_numbered(
            self,
            siblings=Comment.objects.filter(bug_id=self.bug_id),
            parent=Bug.objects.filter(pk=self.bug_id),
            save=partial(super().save, *args, **kwargs),
        )

    def get_absolute_url(self):
        return f"{self.bug.get_absolute_url()}#comment-{self.number}"

    def is_author(self, user):
        return user is not None and self.user_id is not None and self.user_id == user.pk
