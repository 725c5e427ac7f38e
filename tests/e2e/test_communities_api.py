"""End-to-end tests for community and membership endpoints."""

import base64

import pytest
from fastapi.testclient import TestClient

from comicraft.interface.api.app import create_app
from comicraft.util.di.container import setup_di
from tests.di import build_test_container
from tests.factories import auth_cookies, make_user


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


ALICE = make_user("alice")
BOB = make_user("bob")


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCommunityEndpoints:
    """End-to-end tests for community API endpoints."""

    def test_create_community(self, client):
        """Creating should return the community with one member."""
        # Act
        response = client.post(
            "/communities",
            json={"name": "Comics", "privacy_type": "restricted"},
            cookies=auth_cookies(ALICE),
        )

        # Assert
        assert response.status_code == 201
        community = response.json()["community"]
        assert community["community_id"] == "Comics"
        assert community["creator_id"] == ALICE.user_id
        assert community["number_of_members"] == 1
        assert community["privacy_type"] == "restricted"

    def test_create_community_then_fetch(self, client):
        """A fetched community should match what was created."""
        # Arrange
        client.post(
            "/communities",
            json={"name": "Manga", "privacy_type": "private"},
            cookies=auth_cookies(ALICE),
        )

        # Act
        response = client.get("/communities/Manga", cookies=auth_cookies(ALICE))

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["community"]["privacy_type"] == "private"
        assert data["community"]["creator_id"] == ALICE.user_id
        assert data["community"]["number_of_members"] == 1
        assert data["is_member"] is True

    def test_create_without_auth_fails(self, client):
        response = client.post("/communities", json={"name": "Comics"})

        assert response.status_code == 401

    def test_create_with_invalid_name(self, client):
        response = client.post(
            "/communities", json={"name": "no spaces!"}, cookies=auth_cookies(ALICE)
        )

        assert response.status_code == 400
        assert "3-21 characters" in response.json()["detail"]

    def test_create_duplicate_name(self, client):
        # Arrange
        client.post("/communities", json={"name": "Comics"}, cookies=auth_cookies(ALICE))

        # Act
        response = client.post(
            "/communities", json={"name": "Comics"}, cookies=auth_cookies(BOB)
        )

        # Assert
        assert response.status_code == 409
        assert "already exists" in response.json()["detail"]

    def test_get_missing_community(self, client):
        response = client.get("/communities/Nowhere")

        assert response.status_code == 404

    def test_top_communities(self, client):
        """Top communities should be ordered by member count."""
        # Arrange
        client.post("/communities", json={"name": "Quiet"}, cookies=auth_cookies(ALICE))
        client.post("/communities", json={"name": "Busy"}, cookies=auth_cookies(ALICE))
        client.post("/communities/Busy/join", cookies=auth_cookies(BOB))

        # Act
        response = client.get("/communities")

        # Assert
        assert response.status_code == 200
        names = [c["community_id"] for c in response.json()["communities"]]
        assert names == ["Busy", "Quiet"]

    def test_community_named_top_is_reachable(self, client):
        """A community called 'top' should be fetched like any other."""
        # Arrange
        client.post("/communities", json={"name": "top"}, cookies=auth_cookies(ALICE))

        # Act
        response = client.get("/communities/top")

        # Assert
        assert response.status_code == 200
        assert response.json()["community"]["community_id"] == "top"

    def test_update_image(self, client):
        # Arrange
        client.post("/communities", json={"name": "Comics"}, cookies=auth_cookies(ALICE))
        data_url = "data:image/png;base64," + base64.b64encode(b"png").decode()

        # Act
        response = client.put(
            "/communities/Comics/image",
            json={"image": data_url},
            cookies=auth_cookies(ALICE),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["community"]["image_url"].endswith("communities/Comics/image")

    def test_update_image_not_creator(self, client):
        # Arrange
        client.post("/communities", json={"name": "Comics"}, cookies=auth_cookies(ALICE))
        data_url = "data:image/png;base64," + base64.b64encode(b"png").decode()

        # Act
        response = client.put(
            "/communities/Comics/image",
            json={"image": data_url},
            cookies=auth_cookies(BOB),
        )

        # Assert
        assert response.status_code == 403


class TestMembershipEndpoints:
    """End-to-end tests for joining and leaving."""

    def test_join_leave_scenario(self, client):
        """A creates test1, B joins then leaves; counts follow."""
        # A creates: one member, A is moderator
        response = client.post(
            "/communities", json={"name": "test1"}, cookies=auth_cookies(ALICE)
        )
        assert response.json()["community"]["number_of_members"] == 1
        snippets = client.get("/users/me/snippets", cookies=auth_cookies(ALICE)).json()
        assert snippets["snippets"] == [
            {"community_id": "test1", "is_moderator": True, "image_url": None}
        ]

        # B joins: two members, B is not a moderator
        response = client.post("/communities/test1/join", cookies=auth_cookies(BOB))
        assert response.status_code == 200
        assert response.json()["community"]["number_of_members"] == 2
        assert response.json()["snippet"]["is_moderator"] is False

        # B leaves: back to one member, B's snippet gone
        response = client.delete("/communities/test1/join", cookies=auth_cookies(BOB))
        assert response.status_code == 200
        assert response.json()["community"]["number_of_members"] == 1
        snippets = client.get("/users/me/snippets", cookies=auth_cookies(BOB)).json()
        assert snippets["snippets"] == []

    def test_join_twice_conflicts(self, client):
        # Arrange
        client.post("/communities", json={"name": "Comics"}, cookies=auth_cookies(ALICE))
        client.post("/communities/Comics/join", cookies=auth_cookies(BOB))

        # Act
        response = client.post("/communities/Comics/join", cookies=auth_cookies(BOB))

        # Assert
        assert response.status_code == 409
        community = client.get("/communities/Comics").json()["community"]
        assert community["number_of_members"] == 2

    def test_join_missing_community(self, client):
        response = client.post("/communities/Nowhere/join", cookies=auth_cookies(BOB))

        assert response.status_code == 404

    def test_leave_without_membership(self, client):
        client.post("/communities", json={"name": "Comics"}, cookies=auth_cookies(ALICE))

        response = client.delete("/communities/Comics/join", cookies=auth_cookies(BOB))

        assert response.status_code == 409

    def test_join_requires_auth(self, client):
        response = client.post("/communities/Comics/join")

        assert response.status_code == 401


class TestUserEndpoints:
    def test_me(self, client):
        response = client.get("/users/me", cookies=auth_cookies(ALICE))

        assert response.status_code == 200
        assert response.json() == {
            "user_id": ALICE.user_id,
            "email": ALICE.email,
            "display_name": "alice",
        }

    def test_me_with_invalid_token(self, client):
        response = client.get("/users/me", cookies={"auth_token": "invalid-token"})

        assert response.status_code == 401
