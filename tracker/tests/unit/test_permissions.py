"""
Unit tests for project roles and role gates.
"""

from types import SimpleNamespace

import pytest
from django.test import RequestFactory

from tracker.models import Comment, Role
from tracker.permissions import (
    AdminLoginRequired,
    AuthorOrAdminRequired,
    MembershipRequired,
    OwnerLoginRequired,
)


def request_as(user, method="get"):
    request = getattr(RequestFactory(), method)("/")
    request.user = user
    return request


@pytest.mark.django_db
class TestUserRole:
    """Tests for User.role()."""

    def test_owner(self, owner, project):
        assert owner.role(project) == Role.OWNER

    def test_admin(self, admin_user, project):
        assert admin_user.role(project) == Role.ADMIN

    def test_member(self, member, project):
        assert member.role(project) == Role.MEMBER

    def test_no_role(self, outsider, project):
        assert outsider.role(project) is None


@pytest.mark.django_db
class TestRoleGates:
    """Tests for the project role gates."""

    @pytest.mark.parametrize(
        "gate, expected",
        [
            (MembershipRequired, {"owner": True, "admin_user": True, "member": True, "outsider": False}),
            (AdminLoginRequired, {"owner": True, "admin_user": True, "member": False, "outsider": False}),
            (OwnerLoginRequired, {"owner": True, "admin_user": False, "member": False, "outsider": False}),
        ],
    )
    def test_gates(self, request, project, gate, expected):
        """Each gate should allow exactly the roles it names."""
        view = SimpleNamespace(project=project)
        for fixture, allowed in expected.items():
            user = request.getfixturevalue(fixture)
            assert gate().has_permission(request_as(user), view) is allowed, fixture

    def test_admin_is_not_owner(self, admin_user, project):
        """An admin passes the admin gate but not the owner gate."""
        view = SimpleNamespace(project=project)
        assert AdminLoginRequired().has_permission(request_as(admin_user), view)
        assert not OwnerLoginRequired().has_permission(request_as(admin_user), view)

    def test_gate_denies_without_project(self, owner):
        """Without a loaded project nobody has a role."""
        view = SimpleNamespace(project=None)
        assert not MembershipRequired().has_permission(request_as(owner), view)

    def test_author_may_edit_own_comment(self, project, comment, member):
        view = SimpleNamespace(project=project, comment=comment)
        assert AuthorOrAdminRequired().has_permission(request_as(member, "patch"), view)

    def test_admin_may_edit_any_comment(self, project, comment, admin_user):
        view = SimpleNamespace(project=project, comment=comment)
        assert AuthorOrAdminRequired().has_permission(request_as(admin_user, "patch"), view)

    def test_other_member_may_not_edit_comment(self, project, bug, comment, owner, member):
        """A member may not edit someone else's comment."""
        other = Comment.objects.create(bug=bug, user=owner, body="Mine")
        view = SimpleNamespace(project=project, comment=other)
        assert not AuthorOrAdminRequired().has_permission(request_as(member, "delete"), view)
