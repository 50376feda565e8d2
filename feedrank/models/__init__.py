"""Data models for the feed ranking engine."""

from .content import ContentItem, EngagementCounts
from .profile import UserProfile

__all__ = ["ContentItem", "EngagementCounts", "UserProfile"]
