"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagUseCase
from .list_tags import ListTagsUseCase, TagItem

__all__ = ["CreateTagRequest", "CreateTagUseCase", "ListTagsUseCase", "TagItem"]
