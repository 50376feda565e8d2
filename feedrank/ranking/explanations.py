"""Human-readable explanations for ranked items."""

from datetime import datetime
from typing import List, Optional

from ..models import ContentItem, UserProfile
from .models import (
    AuthorAffinityReason,
    ExplanationReason,
    FollowingReason,
    FreshContentReason,
    PopularReason,
    RankingExplanation,
    RankingSignals,
    SocialProofReason,
    TopicInterestReason,
    TrendingReason,
)
from .signals import extract_topics, item_age_minutes

AFFINITY_REASON_MIN_LIKES = 3
TOPIC_REASON_MIN_INTEREST = 0.5
MAX_LISTED_FOLLOWERS = 3
TRENDING_MIN_HOT_SCORE = 0.6
FRESH_REASON_MAX_MINUTES = 60
JUST_POSTED_MINUTES = 5


def explain_ranking(
    item: ContentItem,
    profile: UserProfile,
    signals: RankingSignals,
    now: Optional[datetime] = None,
) -> RankingExplanation:
    """
    Explain why an item is shown to a viewer.

    Reasons are checked in a fixed priority order; the first one that
    triggers becomes the primary reason. ``popular`` is only used when
    nothing else triggers, so the explanation is never empty.
    """
    reasons: List[ExplanationReason] = []
    author = item.author_id

    if profile.follows(author):
        reasons.append(FollowingReason(author=author))

    author_likes = profile.likes_for(author)
    if author_likes >= AFFINITY_REASON_MIN_LIKES:
        reasons.append(AuthorAffinityReason(author=author, like_count=author_likes))

    # Only one topic is shown
    for topic in extract_topics(item.text):
        if profile.topic_interests.get(topic, 0.0) > TOPIC_REASON_MIN_INTEREST:
            reasons.append(TopicInterestReason(topic=topic))
            break

    # Named followers must match exactly; the signal itself ignores case
    followed = set(profile.followed_author_ids)
    followers = [user_id for user_id in item.liked_by if user_id in followed]
    if followers:
        reasons.append(SocialProofReason(engaged_followers=followers[:MAX_LISTED_FOLLOWERS]))

    if signals.base_hot_score > TRENDING_MIN_HOT_SCORE:
        reasons.append(TrendingReason(engagement_rate=signals.base_hot_score))

    age_minutes = item_age_minutes(item, now)
    if age_minutes < FRESH_REASON_MAX_MINUTES:
        reasons.append(FreshContentReason(age_minutes=round(age_minutes)))

    if not reasons:
        reasons.append(
            PopularReason(total_engagement=item.engagement.likes + item.engagement.replies)
        )

    return RankingExplanation(
        item_id=item.id,
        primary_reason=reasons[0],
        secondary_reasons=reasons[1:],
        signals=signals,
    )


def get_explanation_text(reason: ExplanationReason) -> str:
    """Render a reason as display text."""
    if reason.type == "following":
        return f"You follow @{reason.author}"
    if reason.type == "author_affinity":
        return f"You've liked {reason.like_count} posts from @{reason.author}"
    if reason.type == "topic_interest":
        return f"Based on your interest in {reason.topic}"
    if reason.type == "social_proof":
        followers = reason.engaged_followers
        if len(followers) == 1:
            return f"@{followers[0]} liked this"
        return f"@{followers[0]} and {len(followers) - 1} others you follow liked this"
    if reason.type == "trending":
        return "Trending now"
    if reason.type == "fresh_content":
        if reason.age_minutes < JUST_POSTED_MINUTES:
            return "Just posted"
        return f"Posted {reason.age_minutes}m ago"
    if reason.type == "popular":
        return "Popular post"
    return "Recommended for you"


def explanation_texts(explanation: RankingExplanation) -> List[str]:
    """Render every reason of an explanation, primary first."""
    return [get_explanation_text(reason) for reason in explanation.reasons]
