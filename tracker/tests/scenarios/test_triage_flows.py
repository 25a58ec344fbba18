"""
Scenario tests for complete triage flows.
"""

import pytest
from rest_framework import status
from rest_framework.test import APIClient

from tracker.models import Environment, Membership, User

JSON = {"HTTP_ACCEPT": "application/json"}


@pytest.mark.django_db
class TestTriageFlow:
    """
    Scenario: a team triages a bug.
    1. The owner creates a project and adds a member
    2. The member browses the environment's bugs
    3. The member comments on a bug and assigns it to themselves
    4. The owner marks the bug fixed
    """

    def test_complete_triage_flow(self):
        owner = User.objects.create_user("olga", password="password")
        member = User.objects.create_user("max", password="password")
        owner_client = APIClient()
        owner_client.force_login(owner)
        member_client = APIClient()
        member_client.force_login(member)

        # Step 1: Create the project
        response = owner_client.post("/projects/", {"name": "Checkout"}, format="json", **JSON)
        assert response.status_code == status.HTTP_201_CREATED
        project_url = response["Location"]
        project = owner.owned_projects.get()
        environment = Environment.objects.create(project=project, name="staging")
        bug = environment.bugs.create(class_name="KeyError", message="'sku'")

        # The member cannot see it yet
        assert member_client.get(project_url, **JSON).status_code == status.HTTP_403_FORBIDDEN
        Membership.objects.create(project=project, user=member)

        # Step 2: Browse bugs
        bugs_url = f"{project_url}environments/staging/bugs/"
        response = member_client.get(bugs_url, **JSON)
        assert [b["number"] for b in response.data] == [1]

        # Step 3: Comment and take the bug
        response = member_client.post(
            f"{bugs_url}1/comments/", {"body": "Taking this one."}, format="json", **JSON
        )
        assert response.status_code == status.HTTP_201_CREATED
        response = member_client.patch(f"{bugs_url}1/", {"assigned_user": "max"}, format="json", **JSON)
        assert response.status_code == status.HTTP_200_OK

        # A member may not rename the project
        response = member_client.patch(project_url, {"name": "Mine"}, format="json", **JSON)
        assert response.status_code == status.HTTP_403_FORBIDDEN

        # Step 4: The owner closes the bug
        response = owner_client.patch(f"{bugs_url}1/", {"fixed": True}, format="json", **JSON)
        assert response.status_code == status.HTTP_200_OK
        bug.refresh_from_db()
        assert bug.fixed
        assert bug.assigned_user == member
        assert bug.comments.get().user == member
