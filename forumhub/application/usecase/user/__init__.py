"""User use cases."""

from .get_profile import GetProfileRequest, GetProfileUseCase, UserItem
from .list_users import ListUsersRequest, ListUsersUseCase
from .register_user import RegisterUserRequest, RegisterUserUseCase
from .update_user import (
    ToggleAdminRequest,
    ToggleAdminUseCase,
    UpdateAboutMeRequest,
    UpdateAboutMeUseCase,
    UpgradeBadgeRequest,
    UpgradeBadgeUseCase,
)

__all__ = [
    "GetProfileRequest",
    "GetProfileUseCase",
    "UserItem",
    "ListUsersRequest",
    "ListUsersUseCase",
    "RegisterUserRequest",
    "RegisterUserUseCase",
    "ToggleAdminRequest",
    "ToggleAdminUseCase",
    "UpdateAboutMeRequest",
    "UpdateAboutMeUseCase",
    "UpgradeBadgeRequest",
    "UpgradeBadgeUseCase",
]
