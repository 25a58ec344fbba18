from .auth import LoginView, LogoutView
from .base import TrackerView
from .bugs import BugDetailView, BugListView
from .comments import CommentDetailView, CommentListView
from .projects import EnvironmentListView, ProjectDetailView, ProjectListView

__all__ = [
    "TrackerView",
    "ProjectListView",
    "ProjectDetailView",
    "EnvironmentListView",
    "BugListView",
    "BugDetailView",
    "CommentListView",
    "CommentDetailView",
    "LoginView",
    "LogoutView",
]
