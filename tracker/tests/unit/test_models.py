"""
Unit tests for tracker models.
"""

import pytest
from django.db import IntegrityError

from tracker import utils
from tracker.models import Bug, Comment


def stale_numbers(monkeypatch, stale, times=1):
    """Make next_number return ``stale`` for its first ``times`` calls."""
    real_next_number = utils.next_number
    calls = []

    def next_number(queryset, field="number"):
        calls.append(field)
        if len(calls) <= times:
            return stale
        return real_next_number(queryset, field)

    monkeypatch.setattr(utils, "next_number", next_number)
    return calls


@pytest.mark.django_db
class TestSequentialNumbers:
    """Tests for per-parent bug and comment numbers."""

    def test_bugs_numbered_per_environment(self, project, environment):
        other = project.environments.create(name="staging")
        first = Bug.objects.create(environment=environment, class_name="A")
        second = Bug.objects.create(environment=environment, class_name="B")
        elsewhere = Bug.objects.create(environment=other, class_name="C")
        assert [first.number, second.number, elsewhere.number] == [1, 2, 1]

    def test_comments_numbered_per_bug(self, bug, member):
        numbers = [Comment.objects.create(bug=bug, user=member, body=b).number for b in "xyz"]
        assert numbers == [1, 2, 3]

    def test_number_kept_on_update(self, comment):
        comment.body = "Edited"
        comment.save()
        comment.refresh_from_db()
        assert comment.number == 1

    def test_comment_number_clash_is_retried(self, monkeypatch, comment, member):
        """A writer that read a stale maximum should get the next free number."""
        calls = stale_numbers(monkeypatch, stale=comment.number)
        reply = Comment.objects.create(bug=comment.bug, user=member, body="Me too")
        assert reply.number == 2
        assert len(calls) == 2

    def test_bug_number_clash_is_retried(self, monkeypatch, environment, bug):
        stale_numbers(monkeypatch, stale=bug.number)
        new_bug = Bug.objects.create(environment=environment, class_name="RaceError")
        assert new_bug.number == Bug.objects.filter(environment=environment).count()

    def test_gives_up_after_repeated_clashes(self, monkeypatch, comment, member):
        stale_numbers(monkeypatch, stale=comment.number, times=utils.NUMBERING_ATTEMPTS)
        with pytest.raises(IntegrityError):
            Comment.objects.create(bug=comment.bug, user=member, body="Me too")
        assert Comment.objects.count() == 1
