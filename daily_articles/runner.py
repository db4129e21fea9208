"""High-level orchestration for the daily_articles application."""

from __future__ import annotations

import concurrent.futures
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Set

from .categories import DEFAULT_CATEGORIES
from .config import AppConfig, Layout, OrchestrationPolicy, parse_categories_config
from .feeds import fetch_feed_articles
from .models import CategoryConfig, CategoryResult, RawArticle, SelectedArticle
from .scoring import CATEGORY_PROFILE, ScoringConfig, score_articles
from .selection import select_articles

logger = logging.getLogger(__name__)

Fetcher = Callable[..., List[RawArticle]]


@dataclass
class RunConfig:
    """Runtime options for executing the pipeline."""

    categories_file: Optional[str] = None
    layout: Layout = Layout.CATEGORIES
    policy: OrchestrationPolicy = OrchestrationPolicy.PARALLEL
    scoring: ScoringConfig = field(default_factory=lambda: CATEGORY_PROFILE)
    max_articles: int = 9
    diversity_relaxation: int = 6
    items_per_feed: int = 10
    fetch_timeout: float = 10.0
    concurrency: int = 10

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> "RunConfig":
        return cls(
            categories_file=app_config.categories_file,
            layout=app_config.layout,
            policy=app_config.policy,
            scoring=app_config.scoring,
            max_articles=app_config.max_articles,
            diversity_relaxation=app_config.diversity_relaxation,
            items_per_feed=app_config.items_per_feed,
            fetch_timeout=app_config.fetch_timeout,
            concurrency=app_config.concurrency,
        )


@dataclass
class RunResult:
    """Returned data after executing the pipeline."""

    output_text: str
    payload: Any


def load_categories(config: RunConfig) -> List[CategoryConfig]:
    if config.categories_file:
        categories = parse_categories_config(config.categories_file)
    else:
        categories = list(DEFAULT_CATEGORIES)
    if not categories:
        raise RuntimeError("No categories found in the configuration.")
    return categories


def _fetch_pool(
    feeds: Sequence[str], config: RunConfig, fetcher: Fetcher
) -> List[RawArticle]:
    """Fetch all feeds concurrently and concatenate them in feed order."""

    def process_feed(url: str) -> List[RawArticle]:
        try:
            articles = fetcher(
                url, limit=config.items_per_feed, timeout=config.fetch_timeout
            )
            if not articles:
                logger.info("No articles retrieved for feed %s", url)
            return list(articles)
        except Exception:
            logger.exception("Failed to process feed %s", url)
            return []

    if not feeds:
        return []

    with concurrent.futures.ThreadPoolExecutor(
        max_workers=min(config.concurrency, len(feeds))
    ) as executor:
        per_feed = list(executor.map(process_feed, feeds))

    return [article for articles in per_feed for article in articles]


def _select_for_category(
    category: CategoryConfig,
    pool: List[RawArticle],
    config: RunConfig,
    now: datetime,
) -> List[SelectedArticle]:
    scored = score_articles(
        pool, now=now, keywords=category.keywords, config=config.scoring
    )
    selected = select_articles(
        scored,
        config.max_articles,
        config.diversity_relaxation,
        mark_featured=True,
    )
    logger.info(
        "Selected %d of %d articles for category '%s'",
        len(selected),
        len(pool),
        category.key,
    )
    return selected


def run_categories(
    categories: Sequence[CategoryConfig],
    config: RunConfig,
    *,
    now: Optional[datetime] = None,
    used_urls: Optional[Set[str]] = None,
    fetcher: Optional[Fetcher] = None,
) -> Dict[str, CategoryResult]:
    """Run fetch, score and select for every category.

    Under the sequential policy ``used_urls`` collects every URL selected so
    far in the run, and later categories never reuse them. The parallel policy
    keeps categories independent and rejects a shared set.
    """
    now = now or datetime.now(timezone.utc)
    fetcher = fetcher or fetch_feed_articles

    keys = [category.key for category in categories]
    if len(set(keys)) != len(keys):
        raise ValueError(f"Duplicate category keys: {keys}")

    if config.policy is OrchestrationPolicy.PARALLEL:
        if used_urls is not None:
            raise ValueError("used_urls is only supported by the sequential policy.")

        def process_category(category: CategoryConfig) -> CategoryResult:
            pool = _fetch_pool(category.feeds, config, fetcher)
            return CategoryResult(
                category, _select_for_category(category, pool, config, now)
            )

        logger.info("Processing %d categories in parallel", len(categories))
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=max(1, min(config.concurrency, len(categories)))
        ) as executor:
            results = list(executor.map(process_category, categories))
        return {result.category.key: result for result in results}

    used = used_urls if used_urls is not None else set()
    output: Dict[str, CategoryResult] = {}

    logger.info("Processing %d categories sequentially", len(categories))
    for category in categories:
        pool = _fetch_pool(category.feeds, config, fetcher)
        fresh = [article for article in pool if article.url not in used]
        if len(fresh) < len(pool):
            logger.debug(
                "Dropped %d articles already used earlier in this run for '%s'",
                len(pool) - len(fresh),
                category.key,
            )
        selected = _select_for_category(category, fresh, config, now)
        used.update(article.url for article in selected)
        output[category.key] = CategoryResult(category, selected)

    return output


def run_flat(
    categories: Sequence[CategoryConfig],
    config: RunConfig,
    *,
    now: Optional[datetime] = None,
    fetcher: Optional[Fetcher] = None,
) -> List[SelectedArticle]:
    """Select a single list from the feeds of all categories combined."""
    now = now or datetime.now(timezone.utc)
    fetcher = fetcher or fetch_feed_articles

    feeds: List[str] = []
    for category in categories:
        for url in category.feeds:
            if url not in feeds:
                feeds.append(url)

    pool = _fetch_pool(feeds, config, fetcher)
    scored = score_articles(pool, now=now, config=config.scoring)
    selected = select_articles(
        scored,
        config.max_articles,
        config.diversity_relaxation,
        drop_non_positive=True,
        mark_featured=False,
    )
    logger.info(
        "Selected %d of %d articles from %d feeds", len(selected), len(pool), len(feeds)
    )
    return selected


def build_payload(config: RunConfig, *, now: Optional[datetime] = None) -> Any:
    """Run the configured layout and return a JSON-ready payload."""
    categories = load_categories(config)

    if config.layout is Layout.FLAT:
        return [item.to_dict() for item in run_flat(categories, config, now=now)]

    results = run_categories(categories, config, now=now)
    return {key: result.to_dict() for key, result in results.items()}


def execute(config: RunConfig, *, now: Optional[datetime] = None) -> RunResult:
    """Run the pipeline and return the payload along with its JSON text."""
    payload = build_payload(config, now=now)
    return RunResult(
        output_text=json.dumps(payload, indent=2, ensure_ascii=False),
        payload=payload,
    )
