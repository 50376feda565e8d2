"""Diversity-constrained selection of scored items."""

import logging
from typing import Dict, List

from .models import ScoredItem

logger = logging.getLogger(__name__)


def select_diverse(scored_items: List[ScoredItem], max_per_author: int = 3) -> List[ScoredItem]:
    """
    Order scored items by score while spreading authors out.

    Repeatedly takes the best remaining item whose author is still under
    ``max_per_author``. When every remaining author has reached the cap the
    best remaining item is taken anyway, so the result is always a
    permutation of the input.

    Args:
        scored_items: Scored candidates in input order
        max_per_author: Soft cap on items per author

    Returns:
        All items in final feed order
    """
    # sorted() is stable: equal scores keep input order
    remaining = sorted(scored_items, key=lambda x: x.score, reverse=True)
    author_counts: Dict[str, int] = {}
    result: List[ScoredItem] = []

    while remaining:
        selected_index = -1
        for i, candidate in enumerate(remaining):
            if author_counts.get(candidate.item.author_id, 0) < max_per_author:
                selected_index = i
                break

        # All remaining authors are capped, take the best one anyway
        if selected_index == -1:
            selected_index = 0
            logger.debug(
                "Diversity cap reached for all remaining authors, falling back to %s",
                remaining[0].item.id,
            )

        selected = remaining.pop(selected_index)
        result.append(selected)
        author_id = selected.item.author_id
        author_counts[author_id] = author_counts.get(author_id, 0) + 1

    return result
