"""Shared fixtures for ranking tests."""

from typing import List, Optional

import pendulum
import pytest

from feedrank.models import ContentItem, EngagementCounts, UserProfile

NOW = pendulum.datetime(2026, 1, 15, 12, 0, 0, tz="UTC")

LONG_TEXT = "A thoughtful post about gardening, weekend plans and a good book I finished."


def make_item(
    item_id: str,
    author_id: str = "alice",
    text: str = LONG_TEXT,
    minutes_ago: float = 120,
    likes: int = 0,
    replies: int = 0,
    reposts: int = 0,
    liked_by: Optional[List[str]] = None,
) -> ContentItem:
    return ContentItem(
        id=item_id,
        author_id=author_id,
        text=text,
        created_at=NOW.subtract(seconds=int(minutes_ago * 60)),
        engagement=EngagementCounts(likes=likes, replies=replies, reposts=reposts),
        liked_by=liked_by or [],
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def warm_profile():
    """Viewer with enough history for personalization."""
    return UserProfile(
        user_id="viewer",
        followed_author_ids=["alice", "bob"],
        liked_author_counts={"alice": 4, "carol": 1},
        topic_interests={"technology": 0.8, "economic": 0.4},
        total_interactions=50,
    )


@pytest.fixture
def cold_profile():
    return UserProfile(user_id="newcomer", total_interactions=0)
