"""End-to-end tests for the vote endpoints."""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

from forumhub.persistence.repository.inmemory import InMemoryPostRepository
from tests.harness import create_client_fixture, login

client = create_client_fixture()

# Unhandled errors come back as the app's 500 response
lenient_client = create_client_fixture(raise_server_exceptions=False)


def _create_post(client, title: str = "Vote on me") -> str:
    response = client.post(
        "/new-post",
        json={"title": title, "description": "Body", "tags": ["general"]},
    )
    assert response.status_code == 200
    return response.json()["postId"]


class TestVoteAPI:
    """End-to-end tests for /post-upvote and /post-downvote."""

    def test_upvote_then_toggle_off(self, client):
        """Should add and then remove an upvote."""
        # Arrange
        login(client, "alice@example.com")
        post_id = _create_post(client)

        # Act
        first = client.post(
            f"/post-upvote/{post_id}", json={"userEmail": "alice@example.com"}
        )
        second = client.post(
            f"/post-upvote/{post_id}", json={"userEmail": "alice@example.com"}
        )

        # Assert
        assert first.status_code == 200
        assert first.json() == {
            "message": "Upvote added",
            "upVotes": 1,
            "downVotes": 0,
            "votesCount": 1,
        }
        assert second.json()["message"] == "Upvote removed"
        assert second.json()["upVotes"] == 0

    def test_switch_vote_updates_post_details(self, client):
        """Should switch an upvote to a downvote."""
        login(client, "alice@example.com")
        post_id = _create_post(client)
        client.post(f"/post-upvote/{post_id}", json={"userEmail": "alice@example.com"})

        response = client.post(
            f"/post-downvote/{post_id}", json={"userEmail": "alice@example.com"}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Vote switched to downvote"

        details = client.get(f"/post-details/{post_id}").json()
        assert details["upVotes"] == 0
        assert details["downVotes"] == 1
        assert details["votesCount"] == -1
        assert details["votes"] == [
            {"userEmail": "alice@example.com", "voteType": "down"}
        ]

    def test_unknown_post_is_404(self, client):
        login(client, "alice@example.com")

        response = client.post(
            f"/post-upvote/{uuid4()}", json={"userEmail": "alice@example.com"}
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}

    def test_malformed_post_id_is_400(self, client):
        login(client, "alice@example.com")

        response = client.post(
            "/post-upvote/not-a-uuid", json={"userEmail": "alice@example.com"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid post id"}

    def test_missing_user_email_is_400(self, client):
        login(client, "alice@example.com")
        post_id = _create_post(client)

        response = client.post(f"/post-downvote/{post_id}", json={})

        assert response.status_code == 400
        assert response.json() == {"message": "userEmail is required"}

        # Ledger unchanged
        details = client.get(f"/post-details/{post_id}").json()
        assert details["downVotes"] == 0
        assert details["votes"] == []

    def test_requires_auth_cookie(self, client):
        response = client.post(
            f"/post-upvote/{uuid4()}", json={"userEmail": "alice@example.com"}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Access Denied! unauthorized user"}

    def test_invalid_token_is_400(self, client):
        client.cookies.set("token", "garbage")

        response = client.post(
            f"/post-upvote/{uuid4()}", json={"userEmail": "alice@example.com"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid Token"}

    def test_two_users_votes_are_summed(self, client):
        login(client, "alice@example.com")
        post_id = _create_post(client)
        client.post(f"/post-upvote/{post_id}", json={"userEmail": "alice@example.com"})

        login(client, "bob@example.com")
        response = client.post(
            f"/post-upvote/{post_id}", json={"userEmail": "bob@example.com"}
        )

        assert response.json()["upVotes"] == 2
        assert response.json()["votesCount"] == 2


class TestVoteStorageFailure:
    """A failing store surfaces as a 500 and leaves the post untouched."""

    def test_storage_failure_is_500_and_post_unchanged(self, lenient_client):
        # Arrange
        login(lenient_client, "alice@example.com")
        post_id = _create_post(lenient_client)

        # Act
        with patch.object(
            InMemoryPostRepository,
            "apply_vote",
            new_callable=AsyncMock,
            side_effect=RuntimeError("connection reset"),
        ):
            response = lenient_client.post(
                f"/post-upvote/{post_id}", json={"userEmail": "alice@example.com"}
            )

        # Assert
        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}

        details = lenient_client.get(f"/post-details/{post_id}").json()
        assert details["upVotes"] == 0
        assert details["downVotes"] == 0
        assert details["votes"] == []
