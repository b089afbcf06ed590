"""Unit tests for post owner actions."""

import pytest

from forumhub.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    UpdateVisibilityRequest,
    UpdateVisibilityUseCase,
)
from forumhub.domain.error import NotAuthorizedError
from forumhub.domain.repository import CommentRepository, PostRepository
from forumhub.domain.value import Role, Visibility
from tests.conftest import make_actor, make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

OWNER = make_user("owner@example.com")
STRANGER = make_user("stranger@example.com")
ADMIN = make_user("admin@example.com", role=Role.ADMIN)


class TestCreatePost:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_is_the_actor(self, unit_env):
        """A spoofed authorEmail does not change the post's author."""
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)

        response = await use_case.execute(
            CreatePostRequest(
                actor=make_actor(OWNER),
                title="Hello",
                tags=["python", "  asyncio "],
                author_email="spoof@example.com",
            )
        )

        post = (await post_repo.find_by_author(OWNER.email))[0]
        assert response.success is True
        assert response.post_id == str(post.id)
        assert [t.root for t in post.tags] == ["python", "asyncio"]
        assert post.up_votes == 0
        assert post.down_votes == 0
        assert post.comments_count == 0


class TestUpdateVisibility:
    """Tests for UpdateVisibilityUseCase."""

    @pytest.mark.asyncio
    async def test_owner_can_hide_post(self, unit_env):
        use_case = await unit_env.get(UpdateVisibilityUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(author=OWNER.email.root))

        await use_case.execute(
            UpdateVisibilityRequest(
                actor=make_actor(OWNER),
                post_id=str(post.id),
                visibility=Visibility.PRIVATE,
            )
        )

        assert (await post_repo.find_by_id(post.id)).is_private

    @pytest.mark.asyncio
    async def test_stranger_cannot_change_visibility(self, unit_env):
        use_case = await unit_env.get(UpdateVisibilityUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(author=OWNER.email.root))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateVisibilityRequest(
                    actor=make_actor(STRANGER),
                    post_id=str(post.id),
                    visibility=Visibility.PRIVATE,
                )
            )


class TestDeletePost:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_admin_delete_removes_post_and_comments(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(author=OWNER.email.root))
        await comment_repo.save(make_comment(post.id))

        await use_case.execute(
            DeletePostRequest(actor=make_actor(ADMIN), post_id=str(post.id))
        )

        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.count_by_post(post.id) == 0

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(author=OWNER.email.root))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeletePostRequest(actor=make_actor(STRANGER), post_id=str(post.id))
            )

        assert await post_repo.find_by_id(post.id) is not None
