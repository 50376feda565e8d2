"""Individual ranking signals.

Every signal is a pure function of its inputs and returns a value in
[0.0, 1.0]. Time-dependent signals take an optional ``now`` so callers can
score a whole candidate pool against one instant.
"""

import math
import re
from datetime import datetime
from typing import Dict, List, Optional

import pendulum

from ..models import ContentItem, UserProfile
from .models import FeedContext

# Engagement weights for the hot score
LIKE_WEIGHT = 1.0
REPLY_WEIGHT = 2.0
REPOST_WEIGHT = 1.5

# Hot score: engagement / (age + offset) ** gravity, normalized
HOT_AGE_OFFSET_HOURS = 2.0
HOT_GRAVITY = 1.5
HOT_NORMALIZER = 50.0

SOCIAL_PROOF_PER_FOLLOWER = 0.25

SHORT_TEXT_LENGTH = 20
BRIEF_TEXT_LENGTH = 50
BOT_LIKES_PER_HOUR = 100.0
CAPS_RATIO_LIMIT = 0.7

TOPIC_KEYWORDS: Dict[str, List[str]] = {
    "technology": ["ai", "tech", "software", "digital", "robot", "algorithm", "crypto", "blockchain", "nft"],
    "economic": ["economy", "market", "inflation", "recession", "stock", "finance", "money", "debt"],
    "climate": ["climate", "warming", "environment", "carbon", "weather", "pollution", "green"],
    "social": ["society", "culture", "political", "government", "democracy", "election", "policy"],
    "health": ["virus", "pandemic", "health", "disease", "medical", "vaccine", "outbreak"],
    "doom": ["doom", "apocalypse", "collapse", "crisis", "disaster", "end", "catastrophe"],
}

_TOPIC_PATTERNS = {
    topic: re.compile(r"\b(?:" + "|".join(re.escape(k) for k in keywords) + r")\b")
    for topic, keywords in TOPIC_KEYWORDS.items()
}
_HASHTAG_PATTERN = re.compile(r"#(\w+)")


def resolve_now(now: Optional[datetime] = None) -> pendulum.DateTime:
    """Return ``now`` as a pendulum instance, defaulting to the current UTC time."""
    if now is None:
        return pendulum.now("UTC")
    return pendulum.instance(now, tz="UTC")


def item_age_minutes(item: ContentItem, now: Optional[datetime] = None) -> float:
    """Age of an item in minutes, clamped to zero for future timestamps."""
    created = pendulum.instance(item.created_at, tz="UTC")
    age_seconds = (resolve_now(now) - created).total_seconds()
    return max(0.0, age_seconds / 60.0)


def item_age_hours(item: ContentItem, now: Optional[datetime] = None) -> float:
    """Age of an item in hours, clamped to zero for future timestamps."""
    return item_age_minutes(item, now) / 60.0


def weighted_engagement(item: ContentItem) -> float:
    """Engagement with replies and reposts weighted above likes."""
    counts = item.engagement
    return (
        counts.likes * LIKE_WEIGHT
        + counts.replies * REPLY_WEIGHT
        + counts.reposts * REPOST_WEIGHT
    )


def compute_base_hot_score(item: ContentItem, now: Optional[datetime] = None) -> float:
    """Engagement per unit of time, decayed by age and normalized."""
    age_hours = item_age_hours(item, now)
    raw_score = weighted_engagement(item) / math.pow(age_hours + HOT_AGE_OFFSET_HOURS, HOT_GRAVITY)
    return max(0.0, min(1.0, raw_score / HOT_NORMALIZER))


def compute_author_affinity(author_id: str, profile: UserProfile) -> float:
    """Saturating affinity from past likes: 1 like is 0.5, 3+ likes are 1.0."""
    like_count = profile.likes_for(author_id)
    if like_count <= 0:
        return 0.0
    return min(1.0, math.log2(like_count + 1) / 2.0)


def extract_topics(text: str) -> List[str]:
    """
    Extract topics from content text.

    Keyword categories come first in a fixed order, followed by hashtags in
    the order they appear. Topics are lowercased and de-duplicated.
    """
    if not text:
        return []

    text_lower = text.lower()
    topics = [topic for topic, pattern in _TOPIC_PATTERNS.items() if pattern.search(text_lower)]

    for tag in _HASHTAG_PATTERN.findall(text_lower):
        if tag not in topics:
            topics.append(tag)

    return topics


def compute_topic_relevance(item: ContentItem, profile: UserProfile) -> float:
    """Mean interest weight of the item's topics that the viewer has an interest in."""
    matched = [
        profile.topic_interests[topic]
        for topic in extract_topics(item.text)
        if topic in profile.topic_interests
    ]
    if not matched:
        return 0.0
    return max(0.0, min(1.0, sum(matched) / len(matched)))


def engaged_followers(item: ContentItem, profile: UserProfile) -> List[str]:
    """Users who liked the item and whom the viewer follows, in like order."""
    followed = {author.lower() for author in profile.followed_author_ids}
    return [user_id for user_id in item.liked_by if user_id.lower() in followed]


def compute_social_proof(item: ContentItem, profile: UserProfile) -> float:
    """Grows with each followed user that liked the item, saturating at 1.0."""
    return min(1.0, len(engaged_followers(item, profile)) * SOCIAL_PROOF_PER_FOLLOWER)


def compute_diversity_penalty(item: ContentItem, feed_context: FeedContext) -> float:
    """Penalty for author repetition, 1.0 once the author reached the cap."""
    author_count = feed_context.count_for(item.author_id)
    if author_count >= feed_context.max_per_author:
        return 1.0
    return author_count / feed_context.max_per_author


def compute_quality_score(item: ContentItem, now: Optional[datetime] = None) -> float:
    """Viewer-independent quality heuristic: length, bot-like engagement and shouting."""
    text = item.text
    score = 1.0

    # Too short = low effort
    if len(text) < SHORT_TEXT_LENGTH:
        score *= 0.5
    elif len(text) < BRIEF_TEXT_LENGTH:
        score *= 0.8

    # Too many likes too fast
    age_hours = max(0.1, item_age_hours(item, now))
    if item.engagement.likes / age_hours > BOT_LIKES_PER_HOUR:
        score *= 0.5

    if len(text) > 10:
        caps_ratio = sum(1 for c in text if c.isupper()) / len(text)
        if caps_ratio > CAPS_RATIO_LIMIT:
            score *= 0.7

    return max(0.0, min(1.0, score))


def compute_freshness_bonus(
    item: ContentItem,
    fresh_window_minutes: float = 240.0,
    max_age_hours: float = 48.0,
    now: Optional[datetime] = None,
) -> float:
    """Full bonus inside the fresh window, then linear decay to zero at max age."""
    age_minutes = item_age_minutes(item, now)
    max_age_minutes = max_age_hours * 60.0

    if age_minutes >= max_age_minutes:
        return 0.0
    if age_minutes <= fresh_window_minutes:
        return 1.0

    decay_span = max_age_minutes - fresh_window_minutes
    return max(0.0, min(1.0, 1.0 - (age_minutes - fresh_window_minutes) / decay_span))
