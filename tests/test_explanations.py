"""Tests for ranking explanations."""

import pytest

from feedrank.models import UserProfile
from feedrank.ranking.explanations import explain_ranking, explanation_texts, get_explanation_text
from feedrank.ranking.models import (
    FreshContentReason,
    RankingExplanation,
    RankingSignals,
    SocialProofReason,
)


def _types(explanation):
    return [reason.type for reason in explanation.reasons]


class TestExplainRanking:

    def test_popular_fallback(self, item_factory, now):
        item = item_factory("p1", author_id="zed", likes=7, replies=2, reposts=4)
        explanation = explain_ranking(item, UserProfile(), RankingSignals(), now)

        assert explanation.item_id == "p1"
        assert explanation.primary_reason.type == "popular"
        assert explanation.primary_reason.total_engagement == 9
        assert explanation.secondary_reasons == []

    def test_following_outranks_trending(self, item_factory, now):
        profile = UserProfile(followed_author_ids=["xavier"])
        item = item_factory("p1", author_id="xavier")
        explanation = explain_ranking(item, profile, RankingSignals(base_hot_score=0.7), now)

        assert explanation.primary_reason.type == "following"
        assert _types(explanation) == ["following", "trending"]

    def test_full_priority_order(self, item_factory, now):
        profile = UserProfile(
            followed_author_ids=["alice", "bob", "carol", "dave", "erin"],
            liked_author_counts={"alice": 3},
            topic_interests={"technology": 0.9, "economic": 0.9},
        )
        item = item_factory(
            "p1",
            author_id="alice",
            text="AI meets the stock market",
            minutes_ago=12,
            liked_by=["bob", "carol", "dave", "erin"],
        )
        explanation = explain_ranking(item, profile, RankingSignals(base_hot_score=0.9), now)

        assert _types(explanation) == [
            "following", "author_affinity", "topic_interest", "social_proof", "trending", "fresh_content",
        ]
        reasons = explanation.reasons
        assert reasons[1].like_count == 3
        assert reasons[2].topic == "technology"
        assert reasons[3].engaged_followers == ["bob", "carol", "dave"]
        assert reasons[5].age_minutes == 12

    def test_social_proof_reason_needs_exact_follower_id(self, item_factory, now):
        profile = UserProfile(followed_author_ids=["bob"])
        mismatched = item_factory("p1", author_id="zed", liked_by=["BOB"])
        exact = item_factory("p2", author_id="zed", liked_by=["bob"])

        assert explain_ranking(mismatched, profile, RankingSignals(), now).primary_reason.type == "popular"
        explanation = explain_ranking(exact, profile, RankingSignals(), now)
        assert explanation.primary_reason.type == "social_proof"
        assert explanation.primary_reason.engaged_followers == ["bob"]

    def test_affinity_needs_three_likes(self, item_factory, now):
        profile = UserProfile(liked_author_counts={"alice": 2})
        explanation = explain_ranking(item_factory("p1"), profile, RankingSignals(), now)
        assert _types(explanation) == ["popular"]

    def test_topic_interest_must_exceed_half(self, item_factory, now):
        profile = UserProfile(topic_interests={"technology": 0.5, "economic": 0.6})
        item = item_factory("p1", text="AI in the market")
        explanation = explain_ranking(item, profile, RankingSignals(), now)
        assert explanation.primary_reason.type == "topic_interest"
        assert explanation.primary_reason.topic == "economic"

    def test_trending_threshold_is_exclusive(self, item_factory, now):
        explanation = explain_ranking(item_factory("p1"), UserProfile(), RankingSignals(base_hot_score=0.6), now)
        assert _types(explanation) == ["popular"]

    def test_fresh_content_boundary(self, item_factory, now):
        fresh = explain_ranking(item_factory("p1", minutes_ago=59), UserProfile(), RankingSignals(), now)
        stale = explain_ranking(item_factory("p2", minutes_ago=60), UserProfile(), RankingSignals(), now)
        assert _types(fresh) == ["fresh_content"]
        assert _types(stale) == ["popular"]

    def test_signals_attached(self, item_factory, now):
        signals = RankingSignals(quality_score=0.4)
        explanation = explain_ranking(item_factory("p1"), UserProfile(), signals, now)
        assert explanation.signals == signals

    @pytest.mark.parametrize("hot", [0.0, 0.5, 0.61, 1.0])
    @pytest.mark.parametrize("minutes_ago", [-5, 0, 30, 600])
    def test_never_empty(self, item_factory, now, hot, minutes_ago):
        item = item_factory("p1", text="", minutes_ago=minutes_ago)
        explanation = explain_ranking(item, UserProfile(), RankingSignals(base_hot_score=hot), now)
        assert explanation.primary_reason is not None
        assert len(explanation.reasons) >= 1


class TestExplanationText:

    def test_following(self):
        explanation = RankingExplanation.model_validate(
            {"item_id": "p1", "primary_reason": {"type": "following", "author": "alice"}}
        )
        assert get_explanation_text(explanation.primary_reason) == "You follow @alice"

    def test_author_affinity(self):
        reason = RankingExplanation.model_validate({
            "item_id": "p1",
            "primary_reason": {"type": "author_affinity", "author": "alice", "like_count": 4},
        }).primary_reason
        assert get_explanation_text(reason) == "You've liked 4 posts from @alice"

    def test_topic_interest(self):
        reason = RankingExplanation.model_validate(
            {"item_id": "p1", "primary_reason": {"type": "topic_interest", "topic": "climate"}}
        ).primary_reason
        assert get_explanation_text(reason) == "Based on your interest in climate"

    def test_single_follower(self):
        reason = SocialProofReason(engaged_followers=["bob"])
        assert get_explanation_text(reason) == "@bob liked this"

    @pytest.mark.parametrize(
        "followers,expected",
        [
            (["bob", "carol"], "@bob and 1 others you follow liked this"),
            (["bob", "carol", "dave"], "@bob and 2 others you follow liked this"),
        ],
    )
    def test_multiple_followers(self, followers, expected):
        assert get_explanation_text(SocialProofReason(engaged_followers=followers)) == expected

    @pytest.mark.parametrize(
        "age,expected",
        [(0, "Just posted"), (4, "Just posted"), (5, "Posted 5m ago"), (42, "Posted 42m ago")],
    )
    def test_fresh_content(self, age, expected):
        assert get_explanation_text(FreshContentReason(age_minutes=age)) == expected

    def test_explanation_texts(self, item_factory, now):
        profile = UserProfile(followed_author_ids=["alice"])
        explanation = explain_ranking(
            item_factory("p1", minutes_ago=2), profile, RankingSignals(base_hot_score=0.8), now
        )
        assert explanation_texts(explanation) == ["You follow @alice", "Trending now", "Just posted"]
