"""Announcement use cases."""

from .announcements import (
    AnnouncementItem,
    CreateAnnouncementRequest,
    CreateAnnouncementUseCase,
    ListAnnouncementsRequest,
    ListAnnouncementsUseCase,
)

__all__ = [
    "AnnouncementItem",
    "CreateAnnouncementRequest",
    "CreateAnnouncementUseCase",
    "ListAnnouncementsRequest",
    "ListAnnouncementsUseCase",
]
