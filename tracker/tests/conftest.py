"""
Pytest fixtures for tracker tests.
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from tracker.models import Bug, Comment, Environment, Membership, Project, User


@pytest.fixture
def api_client():
    """Return an API client for testing."""
    return APIClient()


@pytest.fixture
def owner(db):
    """Create the owner of the test project."""
    return User.objects.create_user("olivia", "olivia@example.com", "password", first_name="Olivia")


@pytest.fixture
def admin_user(db):
    """Create a user with an admin membership."""
    return User.objects.create_user("adam", "adam@example.com", "password")


@pytest.fixture
def member(db):
    """Create a user with a regular membership."""
    return User.objects.create_user("mia", "mia@example.com", "password")


@pytest.fixture
def outsider(db):
    """Create a user with no role on the test project."""
    return User.objects.create_user("otto", "otto@example.com", "password")


@pytest.fixture
def project(db, owner, admin_user, member):
    """Create a project with an owner, an admin and a member."""
    project = Project.objects.create(name="Squash", owner=owner)
    Membership.objects.create(project=project, user=admin_user, admin=True)
    Membership.objects.create(project=project, user=member)
    return project


@pytest.fixture
def environment(db, project):
    """Create the production environment of the test project."""
    return Environment.objects.create(project=project, name="production")


@pytest.fixture
def bugs(db, environment):
    """Create five bugs; bugs 2 and 3 share their latest occurrence."""
    now = timezone.now()
    offsets = [50, 40, 40, 20, 10]
    return [
        Bug.objects.create(
            environment=environment,
            class_name=f"Error{index}",
            message=f"Something broke ({index})",
            latest_occurrence=now - timedelta(minutes=offset),
            first_occurrence=now - timedelta(days=1),
            occurrences_count=index,
        )
        for index, offset in enumerate(offsets, start=1)
    ]


@pytest.fixture
def bug(bugs):
    """Return the first test bug."""
    return bugs[0]


@pytest.fixture
def comment(db, bug, member):
    """Create a comment written by the member."""
    return Comment.objects.create(bug=bug, user=member, body="Seen this **twice** today.")


@pytest.fixture
def client_for(api_client):
    """Return a function that signs the API client in as a user."""

    def sign_in(user):
        api_client.force_login(user)
        return api_client

    return sign_in
