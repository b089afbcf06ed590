"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from forumhub.domain.error import NotFoundError
from forumhub.domain.service import CommentService
from forumhub.domain.value import CommentId, PostId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCommentModeration:
    """Tests for reporting and resolving comments."""

    @pytest.mark.asyncio
    async def test_report_then_resolve(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())
        comment = await comment_service.save_comment(make_comment(post_id))

        reported = await comment_service.report(comment.id, "Spam")
        assert reported.feedbacks == "Spam"
        assert [c.id for c in await comment_service.list_reported()] == [comment.id]

        resolved = await comment_service.resolve(comment.id)
        assert resolved.feedbacks == ""
        assert await comment_service.list_reported() == []

    @pytest.mark.asyncio
    async def test_report_unknown_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.report(CommentId(uuid4()), "Spam")

    @pytest.mark.asyncio
    async def test_delete_for_post_removes_only_that_post(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())
        other_post_id = PostId(uuid4())
        await comment_service.save_comment(make_comment(post_id))
        await comment_service.save_comment(make_comment(post_id))
        await comment_service.save_comment(make_comment(other_post_id))

        deleted = await comment_service.delete_for_post(post_id)

        assert deleted == 2
        assert await comment_service.count_for_post(post_id) == 0
        assert await comment_service.count_for_post(other_post_id) == 1
