"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed identifiers, missing fields)."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_email: str):
        super().__init__(
            f"User {user_email} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class VoteConflictError(DomainError):
    """Raised when a vote write no longer matches the voter's recorded state.

    The whole vote unit is rolled back; callers may retry.
    """

    def __init__(self, post_id: str, voter: str):
        self.post_id = post_id
        self.voter = voter
        super().__init__(f"Concurrent vote change on post {post_id} by {voter}")
