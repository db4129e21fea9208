"""Heuristic quality scoring for feed articles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .models import RawArticle, ScoredArticle

logger = logging.getLogger(__name__)

EXCLUSION_SCORE = -1000

DEPTH_MODES = ("flat", "per_match")


@dataclass(frozen=True)
class ScoringConfig:
    """Point bands and vocabularies driving :func:`score_article`.

    ``recency_bands`` holds ``(max_age_hours, points)`` pairs ordered from the
    newest band to the oldest; an article falls into the first band whose
    bound exceeds its age.
    """

    exclusion_enabled: bool = False
    exclusion_markers: Tuple[str, ...] = (
        "gift guide",
        "gift ideas",
        "roundup",
        "round-up",
        "top 10",
        "sponsored",
        "newsletter",
        "podcast",
        "video",
        "deals",
    )
    min_title_length: int = 25

    recency_bands: Tuple[Tuple[float, int], ...] = (
        (24, 30),
        (72, 25),
        (168, 20),
        (336, 15),
        (720, 10),
    )

    essay_terms: Tuple[str, ...] = (
        "essay",
        "reflection",
        "meditation",
        "exploration",
        "perspective",
        "understanding",
    )
    essay_weight: int = 5
    essay_cap: int = 15
    longform_phrases: Tuple[str, ...] = (
        "deep dive",
        "comprehensive",
        "understanding",
        "complete guide",
        "everything you need",
    )
    longform_weight: int = 5
    longform_cap: int = 10

    category_relevance_enabled: bool = True
    keyword_weight: int = 5
    keyword_cap: int = 20

    title_band: Tuple[int, int] = (40, 150)
    title_band_points: int = 10
    clickbait_phrases: Tuple[str, ...] = (
        "shocking",
        "breaking",
        "unbelievable",
        "you won't believe",
        "this one trick",
        "hate him",
    )
    clickbait_penalty: int = 15
    analytical_words: Tuple[str, ...] = (
        "how",
        "why",
        "rethinking",
        "analysis",
        "exploring",
        "behind",
    )
    analytical_weight: int = 5
    analytical_cap: int = 15
    structure_bonus: int = 5

    depth_terms: Tuple[str, ...] = (
        "revolution",
        "transformation",
        "evolution",
        "crisis",
        "future of",
        "reimagining",
        "unprecedented",
    )
    depth_mode: str = "flat"
    depth_points: int = 10
    depth_cap: int = 10

    def __post_init__(self) -> None:
        if self.depth_mode not in DEPTH_MODES:
            raise ValueError(f"Unsupported depth mode: {self.depth_mode}")
        bounds = [bound for bound, _points in self.recency_bands]
        if bounds != sorted(bounds):
            raise ValueError("Recency bands must be ordered by ascending age.")


CATEGORY_PROFILE = ScoringConfig()
ESSAY_PROFILE = replace(
    CATEGORY_PROFILE, exclusion_enabled=True, category_relevance_enabled=False
)

SCORING_PROFILES: Dict[str, ScoringConfig] = {
    "category": CATEGORY_PROFILE,
    "essay": ESSAY_PROFILE,
}


def count_matches(text: str, terms: Iterable[str]) -> int:
    """Return how many distinct terms occur in ``text`` (case-insensitive)."""
    haystack = text.lower()
    return sum(1 for term in set(t.lower() for t in terms) if term and term in haystack)


def is_excluded(title: str, config: ScoringConfig) -> bool:
    """Return True when a title looks like a listicle, promo or short headline."""
    lowered = title.lower()
    if any(marker.lower() in lowered for marker in config.exclusion_markers):
        return True
    if "!" in title:
        return True
    return len(title) < config.min_title_length


def recency_points(
    published_at: Optional[datetime], now: datetime, config: ScoringConfig
) -> int:
    if published_at is None:
        return 0
    if published_at.tzinfo is None:
        published_at = published_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    age_hours = (now - published_at).total_seconds() / 3600.0
    for max_age, points in config.recency_bands:
        if age_hours < max_age:
            return points
    return 0


def _capped(hits: int, weight: int, cap: int) -> int:
    return min(hits * weight, cap)


def _title_points(title: str, config: ScoringConfig) -> int:
    lowered = title.lower()
    points = 0

    low, high = config.title_band
    if low <= len(title) <= high:
        points += config.title_band_points

    if any(phrase.lower() in lowered for phrase in config.clickbait_phrases):
        points -= config.clickbait_penalty

    points += _capped(
        count_matches(lowered, config.analytical_words),
        config.analytical_weight,
        config.analytical_cap,
    )

    if ":" in title or "?" in title:
        points += config.structure_bonus

    return points


def _depth_points(text: str, config: ScoringConfig) -> int:
    hits = count_matches(text, config.depth_terms)
    if not hits:
        return 0
    if config.depth_mode == "flat":
        return config.depth_points
    return _capped(hits, config.depth_points, config.depth_cap)


def score_breakdown(
    article: RawArticle,
    *,
    now: datetime,
    keywords: Sequence[str] = (),
    config: ScoringConfig = CATEGORY_PROFILE,
) -> Dict[str, int]:
    """Return the individual score components for an article.

    An excluded article yields a single ``excluded`` component holding the
    sentinel value.
    """
    title = article.title or ""
    if config.exclusion_enabled and is_excluded(title, config):
        return {"excluded": EXCLUSION_SCORE}

    text = f"{title} {article.snippet or ''}"
    components = {
        "recency": recency_points(article.published_at, now, config),
        "essay": _capped(
            count_matches(text, config.essay_terms),
            config.essay_weight,
            config.essay_cap,
        )
        + _capped(
            count_matches(text, config.longform_phrases),
            config.longform_weight,
            config.longform_cap,
        ),
        "title": _title_points(title, config),
        "depth": _depth_points(text, config),
    }
    if config.category_relevance_enabled:
        components["relevance"] = _capped(
            count_matches(text, keywords), config.keyword_weight, config.keyword_cap
        )
    return components


def score_article(
    article: RawArticle,
    *,
    now: datetime,
    keywords: Sequence[str] = (),
    config: ScoringConfig = CATEGORY_PROFILE,
) -> int:
    """Score an article; higher is better, the exclusion sentinel is final."""
    return sum(
        score_breakdown(article, now=now, keywords=keywords, config=config).values()
    )


def score_articles(
    articles: Iterable[RawArticle],
    *,
    now: datetime,
    keywords: Sequence[str] = (),
    config: ScoringConfig = CATEGORY_PROFILE,
) -> List[ScoredArticle]:
    """Score every article in pool order."""
    scored: List[ScoredArticle] = []
    for article in articles:
        components = score_breakdown(
            article, now=now, keywords=keywords, config=config
        )
        total = sum(components.values())
        logger.debug("Scored %s -> %d %s", article.url, total, components)
        scored.append(ScoredArticle(article=article, score=total))
    return scored
