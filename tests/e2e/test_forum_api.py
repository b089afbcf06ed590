"""End-to-end tests for posts, comments, announcements, tags and health."""

from tests.harness import create_client_fixture, login

client = create_client_fixture()


def _create_post(client, title: str, tags: list[str], visibility: str = "public") -> str:
    response = client.post(
        "/new-post",
        json={
            "title": title,
            "description": "Body",
            "tags": tags,
            "visibility": visibility,
            "authorName": "Alice",
        },
    )
    assert response.status_code == 200
    return response.json()["postId"]


class TestHealth:
    """Liveness endpoints."""

    def test_root_says_hello(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "Hello World!"

    def test_health(self, client):
        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert set(data) == {"status", "timestamp", "version", "git_sha"}


class TestPosts:
    """Post endpoints."""

    def test_feed_hides_private_and_filters_by_tag(self, client):
        login(client, "alice@example.com")
        public_id = _create_post(client, "Public", ["Python"])
        _create_post(client, "Private", ["python"], visibility="private")
        _create_post(client, "Cooking", ["food"])

        feed = client.get("/all-posts", params={"searchTerm": "pyth"}).json()

        assert [p["id"] for p in feed] == [public_id]
        assert feed[0]["authorEmail"] == "alice@example.com"
        assert feed[0]["votesCount"] == 0
        assert client.get("/post-count").json() == {"count": 3}

    def test_my_posts_include_private(self, client):
        login(client, "alice@example.com")
        _create_post(client, "Private", ["misc"], visibility="private")

        mine = client.get("/my-posts", params={"email": "alice@example.com"}).json()
        count = client.get("/user-post-count", params={"email": "alice@example.com"})

        assert len(mine) == 1
        assert count.json() == {"count": 1}

    def test_popularity_sort(self, client):
        login(client, "alice@example.com")
        first = _create_post(client, "First", ["a"])
        second = _create_post(client, "Second", ["a"])
        client.post(f"/post-upvote/{first}", json={"userEmail": "alice@example.com"})
        client.post(f"/post-downvote/{second}", json={"userEmail": "alice@example.com"})

        feed = client.get("/all-posts/sort-by-popularity").json()

        assert [p["id"] for p in feed] == [first, second]

    def test_only_owner_or_admin_can_delete(self, client):
        login(client, "alice@example.com")
        post_id = _create_post(client, "Mine", ["a"])

        login(client, "mallory@example.com")
        denied = client.delete(f"/delete-post/{post_id}")
        assert denied.status_code == 403

        login(client, "root@example.com", admin=True)
        assert client.delete(f"/delete-post/{post_id}").status_code == 200
        assert client.get(f"/post-details/{post_id}").status_code == 404

    def test_update_visibility(self, client):
        login(client, "alice@example.com")
        post_id = _create_post(client, "Soon hidden", ["a"])

        response = client.patch(
            f"/update-post-visibility/{post_id}", json={"visibility": "private"}
        )

        assert response.status_code == 200
        assert client.get("/all-posts").json() == []


class TestComments:
    """Comment endpoints."""

    def test_comment_lifecycle(self, client):
        login(client, "alice@example.com")
        post_id = _create_post(client, "Discuss", ["a"])

        created = client.post(
            "/new-comment",
            json={"comment": {"postId": post_id, "commentText": "Great post"}},
        )
        assert created.status_code == 200
        comment_id = created.json()["commentId"]
        assert client.get(f"/post-details/{post_id}").json()["commentsCount"] == 1
        assert client.get(f"/post-comment-count/{post_id}").json() == {"count": 1}

        reported = client.patch(
            f"/report-comment/{comment_id}", json={"feedbacks": "Off topic"}
        )
        assert reported.status_code == 200

        login(client, "root@example.com", admin=True)
        queue = client.get("/all-reported-comments").json()
        assert [c["feedbacks"] for c in queue] == ["Off topic"]
        assert client.patch(f"/resolve-comment/{comment_id}").status_code == 200
        assert client.get("/all-reported-comments").json() == []

        counts = client.get("/comment-count").json()
        assert counts == {"count": 1, "userCount": 2, "postCount": 1}

        deleted = client.request(
            "DELETE", f"/delete-comment/{comment_id}", json={"postId": post_id}
        )
        assert deleted.status_code == 200
        assert client.get(f"/post-details/{post_id}").json()["commentsCount"] == 0

    def test_comment_on_unknown_post_is_404(self, client):
        login(client, "alice@example.com")

        response = client.post(
            "/new-comment",
            json={
                "comment": {
                    "postId": "00000000-0000-0000-0000-000000000000",
                    "commentText": "Hello?",
                }
            },
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}


class TestAnnouncementsAndTags:
    """Admin-curated content."""

    def test_announcements_newest_three(self, client):
        login(client, "root@example.com", admin=True)
        for i in range(4):
            response = client.post(
                "/new-announcement", json={"title": f"News {i}", "description": "..."}
            )
            assert response.status_code == 200

        announcements = client.get("/all-announcements").json()

        assert len(announcements) == 3
        assert client.get("/announcement-count").json() == {"count": 4}

    def test_new_tag_reports_duplicates(self, client):
        login(client, "root@example.com", admin=True)

        first = client.post("/new-tag", json={"tagName": "python"})
        second = client.post("/new-tag", json={"tagName": "python"})

        assert first.json() == {"success": True}
        assert second.json() == {"success": False}
        assert [t["tagName"] for t in client.get("/all-tags").json()] == ["python"]

    def test_new_tag_requires_admin(self, client):
        login(client, "alice@example.com")

        response = client.post("/new-tag", json={"tagName": "python"})

        assert response.status_code == 401
