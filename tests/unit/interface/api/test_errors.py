"""Unit tests for domain error to HTTP mapping."""

from fastapi import status

from forumhub.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
    VoteConflictError,
)
from forumhub.domain.value import TagName
from forumhub.interface.api.errors import to_http_error


class TestToHttpError:
    """Tests for to_http_error."""

    def test_not_found(self):
        error = to_http_error(NotFoundError("Post", "123"))

        assert error.status_code == status.HTTP_404_NOT_FOUND
        assert error.detail == "Post not found"

    def test_validation(self):
        error = to_http_error(ValidationError("Invalid post id"))

        assert error.status_code == status.HTTP_400_BAD_REQUEST
        assert error.detail == "Invalid post id"

    def test_pydantic_validation_is_bad_request(self):
        try:
            TagName("")
        except ValueError as e:
            error = to_http_error(e)

        assert error.status_code == status.HTTP_400_BAD_REQUEST
        assert "Tag name must be 1-50 characters" in error.detail

    def test_not_authorized(self):
        error = to_http_error(NotAuthorizedError("post", "1", "a@example.com"))

        assert error.status_code == status.HTTP_403_FORBIDDEN

    def test_vote_conflict_is_internal_error(self):
        error = to_http_error(VoteConflictError("1", "a@example.com"))

        assert error.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert error.detail == "Internal server error"
