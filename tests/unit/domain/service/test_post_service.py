"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from forumhub.domain.error import NotFoundError
from forumhub.domain.repository import PostSortOrder
from forumhub.domain.service import PostService
from forumhub.domain.value import Email, PostId, Visibility
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPostService:
    """Tests for PostService."""

    @pytest.mark.asyncio
    async def test_list_public_hides_private_posts(self, unit_env):
        post_service = await unit_env.get(PostService)
        public = await post_service.save_post(make_post(title="Public"))
        await post_service.save_post(
            make_post(title="Hidden", visibility=Visibility.PRIVATE)
        )

        posts = await post_service.list_public(
            PostSortOrder.RECENT, tag_search=None, limit=10, offset=0
        )

        assert [p.id for p in posts] == [public.id]

    @pytest.mark.asyncio
    async def test_list_by_author_includes_private(self, unit_env):
        post_service = await unit_env.get(PostService)
        await post_service.save_post(
            make_post(author="me@example.com", visibility=Visibility.PRIVATE)
        )

        posts = await post_service.list_by_author(
            Email("me@example.com"), limit=10, offset=0
        )

        assert len(posts) == 1
        assert await post_service.count_by_author(Email("me@example.com")) == 1

    @pytest.mark.asyncio
    async def test_update_visibility(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        updated = await post_service.update_visibility(post.id, Visibility.PRIVATE)

        assert updated.is_private

    @pytest.mark.asyncio
    async def test_update_visibility_unknown_post_raises(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.update_visibility(PostId(uuid4()), Visibility.PRIVATE)

    @pytest.mark.asyncio
    async def test_comment_count_never_below_zero(self, unit_env):
        """Decrementing a post with no comments leaves the count at 0."""
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        await post_service.increment_comment_count(post.id)
        await post_service.decrement_comment_count(post.id)
        await post_service.decrement_comment_count(post.id)

        stored = await post_service.require_post(post.id)
        assert stored.comments_count == 0

    @pytest.mark.asyncio
    async def test_increment_comment_count_unknown_post_raises(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.increment_comment_count(PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_post(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        await post_service.delete_post(post.id)

        assert await post_service.get_post_by_id(post.id) is None
        with pytest.raises(NotFoundError):
            await post_service.delete_post(post.id)
