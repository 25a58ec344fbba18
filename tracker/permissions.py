"""
Project role gates for tracker views.

Each gate runs after the login gate and after the view has loaded its
project, so ``view.project`` is always set when a gate is consulted.
"""

import logging

from rest_framework.permissions import BasePermission

from tracker.exceptions import RoleRequired
from tracker.models import Role

security_logger = logging.getLogger("security")


class ProjectRolePermission(BasePermission):
    """Allows the request when the user's role on ``view.project`` is in ``roles``."""

    roles = ()
    message = RoleRequired.default_detail
    code = RoleRequired.default_code

    def has_permission(self, request, view):
        project = getattr(view, "project", None)
        user = request.user
        role = user.role(project) if project is not None and hasattr(user, "role") else None
        if role in self.roles:
            return True
        security_logger.warning(
            f"{type(self).__name__} denied {request.method} {request.path} "
            f"for user {getattr(user, 'pk', None)} (role {role})"
        )
        return False


class MembershipRequired(ProjectRolePermission):
    roles = (Role.OWNER, Role.ADMIN, Role.MEMBER)
    message = "You must be a member of this project to do that."


class AdminLoginRequired(ProjectRolePermission):
    roles = (Role.OWNER, Role.ADMIN)
    message = "You must be an administrator of this project to do that."


class OwnerLoginRequired(ProjectRolePermission):
    roles = (Role.OWNER,)
    message = "You must be the owner of this project to do that."


class AuthorOrAdminRequired(ProjectRolePermission):
    """The comment's author, or a project owner or admin."""

    roles = (Role.OWNER, Role.ADMIN)
    message = "You can only change your own comments."

    def has_permission(self, request, view):
        comment = getattr(view, "comment", None)
        if comment is not None and comment.is_author(request.user):
            return True
        return super().has_permission(request, view)
