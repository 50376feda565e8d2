"""Personalized feed ranking engine."""

from .config import RankingConfig, RankingWeights
from .models import ContentItem, EngagementCounts, UserProfile
from .ranking import FeedRanker, rank_items

__version__ = "0.1.0"

__all__ = [
    "ContentItem",
    "EngagementCounts",
    "UserProfile",
    "RankingConfig",
    "RankingWeights",
    "FeedRanker",
    "rank_items",
]
