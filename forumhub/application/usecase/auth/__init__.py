"""Authentication use cases."""

from .authenticate import AuthenticateRequest, AuthenticateUseCase
from .issue_token import IssueTokenRequest, IssueTokenResponse, IssueTokenUseCase

__all__ = [
    "AuthenticateRequest",
    "AuthenticateUseCase",
    "IssueTokenRequest",
    "IssueTokenResponse",
    "IssueTokenUseCase",
]
