from .bug import Bug
from .comment import Comment
from .environment import Environment
from .membership import Membership, Role
from .project import Project
from .user import User

__all__ = [
    "User",
    "Role",
    "Project",
    "Membership",
    "Environment",
    "Bug",
    "Comment",
]
