"""Signal aggregation and cold-start scoring."""

from datetime import datetime
from typing import Optional

from ..config import DEFAULT_CONFIG, RankingConfig
from ..models import ContentItem, UserProfile
from .models import FeedContext, RankingSignals
from .signals import (
    compute_author_affinity,
    compute_base_hot_score,
    compute_diversity_penalty,
    compute_freshness_bonus,
    compute_quality_score,
    compute_social_proof,
    compute_topic_relevance,
)

# Cold start relies on global popularity, quality and freshness only
COLD_START_HOT_WEIGHT = 0.5
COLD_START_QUALITY_WEIGHT = 0.3
COLD_START_FRESHNESS_WEIGHT = 0.2

# Reported as topic relevance for cold-start items; not a measurement
COLD_START_TOPIC_PLACEHOLDER = 0.3


def compute_signals(
    item: ContentItem,
    profile: UserProfile,
    feed_context: FeedContext,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> RankingSignals:
    """Compute all ranking signals for an item."""
    return RankingSignals(
        base_hot_score=compute_base_hot_score(item, now),
        author_affinity=compute_author_affinity(item.author_id, profile),
        topic_relevance=compute_topic_relevance(item, profile),
        social_proof=compute_social_proof(item, profile),
        diversity_penalty=compute_diversity_penalty(item, feed_context),
        quality_score=compute_quality_score(item, now),
        freshness_bonus=compute_freshness_bonus(
            item,
            config.fresh_content_window_minutes,
            config.max_age_hours,
            now,
        ),
    )


def calculate_personalized_score(
    signals: RankingSignals,
    config: RankingConfig = DEFAULT_CONFIG,
) -> float:
    """
    Combine signals into one score.

    The diversity penalty is the only cost signal: it is inverted before
    weighting, so a full penalty contributes nothing from that term.
    """
    weights = config.weights

    weighted_score = (
        signals.base_hot_score * weights.base_hot_score
        + signals.author_affinity * weights.author_affinity
        + signals.topic_relevance * weights.topic_relevance
        + signals.social_proof * weights.social_proof
        + (1 - signals.diversity_penalty) * weights.diversity_penalty
        + signals.quality_score * weights.quality_score
        + signals.freshness_bonus * weights.freshness_bonus
    )

    return max(0.0, min(1.0, weighted_score))


def is_user_cold_start(profile: UserProfile, threshold: int = DEFAULT_CONFIG.cold_start_threshold) -> bool:
    """Check if a viewer has too little history for personalization."""
    return profile.total_interactions < threshold


def get_cold_start_score(
    item: ContentItem,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> float:
    """Viewer-independent score used for cold-start viewers."""
    return calculate_cold_start_score(cold_start_signals(item, config, now))


def calculate_cold_start_score(signals: RankingSignals) -> float:
    """Fixed 0.5/0.3/0.2 blend of hot score, quality and freshness."""
    score = (
        signals.base_hot_score * COLD_START_HOT_WEIGHT
        + signals.quality_score * COLD_START_QUALITY_WEIGHT
        + signals.freshness_bonus * COLD_START_FRESHNESS_WEIGHT
    )
    return max(0.0, min(1.0, score))


def cold_start_signals(
    item: ContentItem,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> RankingSignals:
    """Signals reported for a cold-start item; personalization signals are zeroed."""
    return RankingSignals(
        base_hot_score=compute_base_hot_score(item, now),
        author_affinity=0.0,
        topic_relevance=COLD_START_TOPIC_PLACEHOLDER,
        social_proof=0.0,
        diversity_penalty=0.0,
        quality_score=compute_quality_score(item, now),
        freshness_bonus=compute_freshness_bonus(
            item, config.fresh_content_window_minutes, config.max_age_hours, now
        ),
    )
