"""Feed ranking and scoring."""

from .explanations import explain_ranking, explanation_texts, get_explanation_text
from .models import (
    ExplanationReason,
    FeedContext,
    RankingExplanation,
    RankingResult,
    RankingSignals,
    ScoredItem,
)
from .ranker import FeedRanker, print_ranking_summary, rank_items
from .scoring import (
    calculate_cold_start_score,
    calculate_personalized_score,
    cold_start_signals,
    compute_signals,
    get_cold_start_score,
    is_user_cold_start,
)
from .selector import select_diverse
from .signals import (
    compute_author_affinity,
    compute_base_hot_score,
    compute_diversity_penalty,
    compute_freshness_bonus,
    compute_quality_score,
    compute_social_proof,
    compute_topic_relevance,
    extract_topics,
)

__all__ = [
    "FeedRanker",
    "FeedContext",
    "RankingSignals",
    "RankingExplanation",
    "RankingResult",
    "ScoredItem",
    "ExplanationReason",
    "rank_items",
    "select_diverse",
    "compute_signals",
    "calculate_personalized_score",
    "calculate_cold_start_score",
    "is_user_cold_start",
    "get_cold_start_score",
    "cold_start_signals",
    "explain_ranking",
    "explanation_texts",
    "get_explanation_text",
    "compute_base_hot_score",
    "compute_author_affinity",
    "compute_topic_relevance",
    "compute_social_proof",
    "compute_diversity_penalty",
    "compute_quality_score",
    "compute_freshness_bonus",
    "extract_topics",
    "print_ranking_summary",
]
