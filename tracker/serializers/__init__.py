from .base import StrictFieldsMixin, resource_name
from .bug import BugSerializer, BugUpdateSerializer, ScrollParamsSerializer
from .comment import CommentScrollParamsSerializer, CommentSerializer, CommentWriteSerializer
from .project import (
    EnvironmentSerializer,
    ProjectCreateSerializer,
    ProjectSerializer,
    ProjectUpdateSerializer,
)

__all__ = [
    "StrictFieldsMixin",
    "resource_name",
    "ProjectSerializer",
    "ProjectCreateSerializer",
    "ProjectUpdateSerializer",
    "EnvironmentSerializer",
    "BugSerializer",
    "BugUpdateSerializer",
    "ScrollParamsSerializer",
    "CommentSerializer",
    "CommentWriteSerializer",
    "CommentScrollParamsSerializer",
]
