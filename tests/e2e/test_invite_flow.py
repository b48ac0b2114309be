"""End-to-end tests for the invite link flow."""

import pytest
from fastapi.testclient import TestClient

from breakloop.interface.api.app import create_app
from tests.di import build_test_container

ALICE = {"X-User-Id": "alice", "X-User-Name": "Alice"}
BOB = {"X-User-Id": "bob", "X-User-Name": "Bob"}


@pytest.fixture
def client():
    """Create test client over a fresh mocked container."""
    return TestClient(create_app(build_test_container()))


class TestInviteFlow:
    """End-to-end tests for creating and redeeming invites."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_and_list(self, client):
        # Act
        created = client.post("/invites", headers=ALICE)
        listed = client.get("/invites", headers=ALICE)

        # Assert
        assert created.status_code == 201
        invite = created.json()
        assert invite["status"] == "active"
        assert invite["link"].endswith(invite["token"])
        assert listed.status_code == 200
        assert [item["token"] for item in listed.json()["invites"]] == [invite["token"]]

    def test_redeem_sends_friend_request(self, client):
        # Arrange
        token = client.post("/invites", headers=ALICE).json()["token"]

        # Act
        preview = client.get(f"/invites/{token}", headers=BOB)
        accepted = client.post(f"/invites/{token}/accept", headers=BOB)

        # Assert
        assert preview.json()["valid"] is True
        assert preview.json()["from_user_name"] == "Alice"
        data = accepted.json()
        assert data["accepted"] is True
        assert data["inviter_id"] == "alice"

        received = client.get("/friends/requests", headers=ALICE).json()["received"]
        assert [item["request_id"] for item in received] == [data["friend_request_id"]]
        inbox = client.get("/inbox").json()
        assert inbox["count"] == 1
        assert inbox["updates"][0]["type"] == "friend_request"

    def test_invite_is_single_use(self, client):
        token = client.post("/invites", headers=ALICE).json()["token"]
        client.post(f"/invites/{token}/accept", headers=BOB)

        second = client.post(
            f"/invites/{token}/accept", headers={"X-User-Id": "carol"}
        )

        assert second.status_code == 200
        assert second.json()["accepted"] is False
        assert second.json()["reason"] == "already used"

    def test_own_invite_rejected(self, client):
        token = client.post("/invites", headers=ALICE).json()["token"]

        preview = client.get(f"/invites/{token}", headers=ALICE)
        accepted = client.post(f"/invites/{token}/accept", headers=ALICE)

        assert preview.json()["valid"] is False
        assert preview.json()["reason"] == "own invite"
        assert accepted.json()["accepted"] is False

    def test_unknown_token(self, client):
        response = client.get("/invites/doesnotexist")

        assert response.status_code == 200
        assert response.json() == {
            "valid": False,
            "reason": "not found",
            "message": "Invite not found",
            "status": None,
            "from_user_id": None,
            "from_user_name": None,
        }

    def test_expire(self, client):
        token = client.post("/invites", headers=ALICE).json()["token"]

        forbidden = client.post(f"/invites/{token}/expire", headers=BOB)
        expired = client.post(f"/invites/{token}/expire", headers=ALICE)
        preview = client.get(f"/invites/{token}")

        assert forbidden.status_code == 400
        assert expired.status_code == 200
        assert expired.json()["status"] == "expired"
        assert preview.json()["reason"] == "expired"

    def test_expire_unknown_token(self, client):
        response = client.post("/invites/doesnotexist/expire", headers=ALICE)

        assert response.status_code == 404

    def test_missing_identity(self, client):
        response = client.post("/invites")

        assert response.status_code == 401
        assert response.json() == {"detail": "Missing X-User-Id header"}
