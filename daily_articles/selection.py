"""Source-diverse top-N selection over scored articles."""

from __future__ import annotations

import logging
from typing import Iterable, List, Set

from .models import ScoredArticle, SelectedArticle
from .scoring import EXCLUSION_SCORE

logger = logging.getLogger(__name__)


def qualifying_articles(
    scored: Iterable[ScoredArticle], *, drop_non_positive: bool = False
) -> List[ScoredArticle]:
    """Drop excluded articles (and non-positive ones when requested)."""
    floor = 0 if drop_non_positive else EXCLUSION_SCORE
    return [item for item in scored if item.score > floor]


def rank_articles(scored: Iterable[ScoredArticle]) -> List[ScoredArticle]:
    """Sort by score, highest first; equal scores keep their pool order."""
    return sorted(scored, key=lambda item: item.score, reverse=True)


def select_articles(
    scored: Iterable[ScoredArticle],
    max_count: int,
    relaxation_point: int,
    *,
    drop_non_positive: bool = False,
    mark_featured: bool = True,
) -> List[SelectedArticle]:
    """Pick up to ``max_count`` articles, spreading the top picks across sources.

    The first pass only takes one article per source until ``relaxation_point``
    articles have been accepted; after that repeats are allowed. A second pass
    tops the list up from the remaining ranked articles so the result is full
    whenever the pool allows.
    """
    if max_count < 0:
        raise ValueError("max_count must not be negative.")
    if relaxation_point < 0:
        raise ValueError("relaxation_point must not be negative.")

    ranked = rank_articles(
        qualifying_articles(scored, drop_non_positive=drop_non_positive)
    )

    chosen: List[ScoredArticle] = []
    chosen_urls: Set[str] = set()
    used_sources: Set[str] = set()

    for item in ranked:
        if len(chosen) >= max_count:
            break
        if item.url in chosen_urls:
            continue
        if item.source_id not in used_sources or len(chosen) >= relaxation_point:
            chosen.append(item)
            chosen_urls.add(item.url)
            used_sources.add(item.source_id)

    diverse_count = len(chosen)
    for item in ranked:
        if len(chosen) >= max_count:
            break
        if item.url not in chosen_urls:
            chosen.append(item)
            chosen_urls.add(item.url)

    if len(chosen) > diverse_count:
        logger.debug(
            "Filled %d slots after the diversity pass", len(chosen) - diverse_count
        )
    if len(chosen) < max_count:
        logger.info(
            "Only %d qualifying articles available (requested %d)",
            len(chosen),
            max_count,
        )

    return [
        SelectedArticle(
            title=item.article.title,
            url=item.url,
            featured=(index == 0) if mark_featured else None,
        )
        for index, item in enumerate(chosen[:max_count])
    ]
