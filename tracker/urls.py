"""
URL configuration for the tracker app.

Every resource URL also answers with a format suffix (``.json``, ``.atom``,
``.html``) that overrides the Accept header.
"""

from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns

from .views import (
    BugDetailView,
    BugListView,
    CommentDetailView,
    CommentListView,
    EnvironmentListView,
    LoginView,
    LogoutView,
    ProjectDetailView,
    ProjectListView,
)

BUG = "projects/<slug:project_slug>/environments/<str:environment_name>/bugs/<int:bug_number>"

urlpatterns = [
    # Projects
    path("projects/", ProjectListView.as_view(), name="project-list"),
    path("projects/<slug:project_slug>/", ProjectDetailView.as_view(), name="project-detail"),
    # Environments
    path(
        "projects/<slug:project_slug>/environments/",
        EnvironmentListView.as_view(),
        name="environment-list",
    ),
    # Bugs
    path(
        "projects/<slug:project_slug>/environments/<str:environment_name>/bugs/",
        BugListView.as_view(),
        name="bug-list",
    ),
    path(f"{BUG}/", BugDetailView.as_view(), name="bug-detail"),
    # Comments
    path(f"{BUG}/comments/", CommentListView.as_view(), name="comment-list"),
    path(
        f"{BUG}/comments/<int:comment_number>/",
        CommentDetailView.as_view(),
        name="comment-detail",
    ),
]

urlpatterns = format_suffix_patterns(urlpatterns, allowed=["html", "json", "atom"])

urlpatterns += [
    path("", ProjectListView.as_view(), name="root"),
    path("login/", LoginView.as_view(), name="login"),
    path("logout/", LogoutView.as_view(), name="logout"),
]
