"""End-to-end tests for voting and reputation endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from qna.interface.api.app import create_app
from tests.conftest import make_token, register_via_api
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


def ask(client, headers, title="How do I fix this?") -> str:
    response = client.post(
        "/questions",
        json={"title": title, "content": "Details of the problem"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["question_id"]


def reputation(client, user_id: str) -> int:
    return client.get(f"/users/{user_id}/reputation").json()["reputation"]


class TestVotingEndpoints:
    """End-to-end tests for the vote ledger over HTTP."""

    def test_upvote_then_retract(self, client):
        # Arrange
        alice_id, alice = register_via_api(client, "alice")
        _, bob = register_via_api(client, "bob")
        question_id = ask(client, alice)

        # Act
        response = client.post(
            f"/questions/{question_id}/vote", json={"direction": "up"}, headers=bob
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 1
        assert body["upvotes"] == 1
        assert body["user_vote"] == "up"
        assert reputation(client, alice_id) == 11
        unread = client.get("/notifications/unread-count", headers=alice).json()
        assert unread["unread_count"] == 1

        # Same direction again retracts
        response = client.post(
            f"/questions/{question_id}/vote", json={"direction": "up"}, headers=bob
        )
        assert response.json()["score"] == 0
        assert response.json()["user_vote"] is None
        assert reputation(client, alice_id) == 1

    def test_answer_vote_state_is_per_user(self, client):
        _, alice = register_via_api(client, "alice")
        bob_id, bob = register_via_api(client, "bob")
        question_id = ask(client, alice)
        answer = client.post(
            f"/questions/{question_id}/answers", json={"content": "Mine"}, headers=bob
        )
        assert answer.status_code == 201
        answer_id = answer.json()["answer_id"]

        client.post(f"/answers/{answer_id}/vote", json={"direction": "down"}, headers=alice)

        own_view = client.get(f"/answers/{answer_id}/vote", headers=alice).json()
        other_view = client.get(f"/answers/{answer_id}/vote", headers=bob).json()
        assert own_view["user_vote"] == "down"
        assert other_view["user_vote"] is None
        assert other_view["score"] == -1
        # Reputation never drops below the floor
        assert reputation(client, bob_id) == 1

    def test_vote_without_token_fails(self, client):
        response = client.post(
            f"/questions/{uuid4()}/vote", json={"direction": "up"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required to vote"

    def test_vote_with_invalid_token_fails(self, client):
        response = client.post(
            f"/questions/{uuid4()}/vote",
            json={"direction": "up"},
            headers={"Authorization": "Bearer invalid-token"},
        )

        assert response.status_code == 401

    def test_vote_on_missing_question(self, client):
        _, bob = register_via_api(client, "bob")

        response = client.post(
            f"/questions/{uuid4()}/vote", json={"direction": "up"}, headers=bob
        )

        assert response.status_code == 404

    def test_invalid_direction(self, client):
        _, alice = register_via_api(client, "alice")
        _, bob = register_via_api(client, "bob")
        question_id = ask(client, alice)

        response = client.post(
            f"/questions/{question_id}/vote", json={"direction": "sideways"}, headers=bob
        )

        assert response.status_code == 422

    def test_vote_on_deleted_question(self, client):
        _, alice = register_via_api(client, "alice")
        _, bob = register_via_api(client, "bob")
        question_id = ask(client, alice)
        assert client.delete(f"/questions/{question_id}", headers=alice).status_code == 200

        response = client.post(
            f"/questions/{question_id}/vote", json={"direction": "up"}, headers=bob
        )

        assert response.status_code == 404

    def test_reputation_of_unknown_user(self, client):
        assert client.get(f"/users/{uuid4()}/reputation").status_code == 404

    def test_register_twice_fails(self, client):
        _, alice = register_via_api(client, "alice")

        response = client.post("/users", json={"username": "alice2"}, headers=alice)

        assert response.status_code == 422

    def test_unregistered_identity_cannot_ask_or_vote(self, client):
        # Arrange
        alice_id, alice = register_via_api(client, "alice")
        question_id = ask(client, alice)
        stranger = {"Authorization": f"Bearer {make_token(uuid4())}"}

        # Act
        asked = client.post(
            "/questions",
            json={"title": "Anyone?", "content": "Never registered"},
            headers=stranger,
        )
        voted = client.post(
            f"/questions/{question_id}/vote", json={"direction": "up"}, headers=stranger
        )

        # Assert
        assert asked.status_code == 404
        assert voted.status_code == 404
        state = client.get(f"/questions/{question_id}/vote", headers=alice).json()
        assert state["score"] == 0
        assert reputation(client, alice_id) == 1
