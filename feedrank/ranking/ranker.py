"""Feed ranker that combines signals, cold start and diversity selection."""

import logging
from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from ..config import DEFAULT_CONFIG, RankingConfig
from ..models import ContentItem, UserProfile
from .explanations import explain_ranking, get_explanation_text
from .models import FeedContext, RankingResult, ScoredItem
from .scoring import (
    calculate_cold_start_score,
    calculate_personalized_score,
    cold_start_signals,
    compute_signals,
    is_user_cold_start,
)
from .selector import select_diverse
from .signals import resolve_now

logger = logging.getLogger(__name__)

console = Console()


def rank_items(
    items: List[ContentItem],
    profile: UserProfile,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
    explain: bool = True,
) -> List[ScoredItem]:
    """
    Rank candidate items for a viewer's feed.

    Args:
        items: Candidate items (a stable snapshot of the content pool)
        profile: Requesting viewer's profile
        config: Ranking configuration
        now: Instant to score against (default: current UTC time)
        explain: Attach explanations to personalized results

    Returns:
        Every candidate, scored and ordered for display
    """
    if not items:
        return []

    now = resolve_now(now)
    cold_start = is_user_cold_start(profile, config.cold_start_threshold)
    feed_context = FeedContext(
        max_per_author=config.max_per_author,
        diversity_window=config.diversity_window,
    )

    scored_items = []
    for item in items:
        if cold_start:
            signals = cold_start_signals(item, config, now)
            scored_items.append(
                ScoredItem(
                    item=item,
                    score=calculate_cold_start_score(signals),
                    signals=signals,
                )
            )
            continue

        # Authors are counted in candidate order, so an item's diversity
        # penalty depends on how many same-author items precede it in `items`
        signals = compute_signals(item, profile, feed_context, config, now)
        feed_context.record(item.author_id)
        scored_items.append(
            ScoredItem(
                item=item,
                score=calculate_personalized_score(signals, config),
                signals=signals,
                explanation=explain_ranking(item, profile, signals, now) if explain else None,
            )
        )

    logger.debug(
        "Scored %d items for %s (cold_start=%s)",
        len(scored_items),
        profile.user_id or "anonymous",
        cold_start,
    )

    return select_diverse(scored_items, config.max_per_author)


class FeedRanker:
    """Rank feeds for viewers with a fixed configuration."""

    def __init__(self, config: Optional[RankingConfig] = None) -> None:
        """
        Initialize feed ranker.

        Args:
            config: Ranking configuration (default: built-in defaults)
        """
        self.config = config or DEFAULT_CONFIG

    def rank(
        self,
        items: List[ContentItem],
        profile: UserProfile,
        now: Optional[datetime] = None,
        explain: bool = True,
    ) -> RankingResult:
        """Rank items for a viewer and wrap the ordering in a result."""
        now = resolve_now(now)
        ranked = rank_items(items, profile, self.config, now=now, explain=explain)
        cold_start = is_user_cold_start(profile, self.config.cold_start_threshold)

        logger.info(
            "Ranked %d items for %s%s",
            len(ranked),
            profile.user_id or "anonymous",
            " (cold start)" if cold_start else "",
        )

        return RankingResult(
            user_id=profile.user_id,
            total_items=len(items),
            cold_start=cold_start,
            ranked_items=ranked,
            ranking_timestamp=now,
            config_used=self.config.model_dump(),
        )


def print_ranking_summary(result: RankingResult, top_n: int = 10, show_signals: bool = True) -> None:
    """Print ranking summary."""
    console.print(f"\n[bold]Ranking Summary:[/bold]")
    console.print(f"  Viewer: {escape(result.user_id or 'anonymous')}")
    console.print(f"  Total items: {result.total_items}")
    if result.cold_start:
        console.print("  [yellow]Cold start: ranking by popularity, quality and freshness[/yellow]")

    if result.ranked_items:
        console.print(f"\n[bold]Top Items:[/bold]")
        for i, scored in enumerate(result.ranked_items[:top_n], 1):
            item = scored.item
            console.print(f"{i}. [yellow]{escape(item.id)}[/yellow] by @{escape(item.author_id)}")
            reason = (
                get_explanation_text(scored.explanation.primary_reason)
                if scored.explanation
                else "Popular with new viewers"
            )
            console.print(f"   Score: {scored.score:.3f} - {escape(reason)}")
            if show_signals:
                signals = scored.signals
                console.print(
                    f"   Breakdown: H:{signals.base_hot_score:.2f} "
                    f"A:{signals.author_affinity:.2f} T:{signals.topic_relevance:.2f} "
                    f"S:{signals.social_proof:.2f} D:{signals.diversity_penalty:.2f} "
                    f"Q:{signals.quality_score:.2f} F:{signals.freshness_bonus:.2f}"
                )
