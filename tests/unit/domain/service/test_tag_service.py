"""Unit tests for TagService."""

import pytest

from forumhub.domain.service import TagService
from forumhub.domain.value import TagName
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_create_tag_once(unit_env):
    """A second tag with the same name is not created."""
    tag_service = await unit_env.get(TagService)

    first = await tag_service.create_tag(TagName("python"))
    second = await tag_service.create_tag(TagName("python"))

    assert first is not None
    assert second is None
    assert [t.name.root for t in await tag_service.list_tags()] == ["python"]
