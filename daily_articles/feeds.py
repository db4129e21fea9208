"""Feed retrieval helpers."""

from __future__ import annotations

import logging
import re
import time
from datetime import datetime, timezone
from typing import List, Optional

import feedparser
import requests
from bs4 import BeautifulSoup

from .models import RawArticle

logger = logging.getLogger(__name__)


def to_datetime(value: Optional[time.struct_time]) -> Optional[datetime]:
    """Convert feedparser timestamps to timezone-aware datetimes."""
    if value is None:
        return None
    try:
        return datetime(*value[:6], tzinfo=timezone.utc)
    except (TypeError, ValueError):
        return None


def fetch_feed_articles(
    url: str, *, limit: Optional[int] = None, timeout: float = 10.0
) -> List[RawArticle]:
    """Fetch items from a single RSS feed, keeping at most ``limit`` of them."""
    logger.info("Fetching feed %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        content = response.content
    except requests.RequestException as e:
        logger.warning("Failed to fetch feed %s: %s", url, e)
        return []

    parsed = feedparser.parse(content)
    entries = list(parsed.entries)
    if limit is not None:
        entries = entries[:limit]

    articles: List[RawArticle] = []
    for entry in entries:
        link = getattr(entry, "link", None)
        title = getattr(entry, "title", None)

        if not link or not title:
            logger.debug("Skipping entry without link or title in feed '%s'", url)
            continue

        articles.append(
            RawArticle(
                title=title.strip(),
                url=link,
                published_at=to_datetime(_published_struct(entry)),
                source_id=url,
                snippet=_snippet(entry),
            )
        )

    logger.info("Collected %d articles from feed %s", len(articles), url)
    return articles


def _published_struct(entry) -> Optional[time.struct_time]:
    for attr in ("published_parsed", "updated_parsed", "created_parsed"):
        value = getattr(entry, attr, None)
        if value:
            return value
    return None


def _snippet(entry) -> str:
    summary = getattr(entry, "summary", None)
    if not summary:
        summary_detail = getattr(entry, "summary_detail", None)
        if summary_detail:
            summary = summary_detail.get("value")
    if not summary:
        content = getattr(entry, "content", None)
        if content:
            try:
                summary = content[0].get("value")
            except (TypeError, KeyError, IndexError, AttributeError):
                summary = None
    if not summary:
        return ""
    return _strip_html(summary)


def _strip_html(raw_value: str) -> str:
    """Return text content extracted from HTML fragments."""
    soup = BeautifulSoup(raw_value, "html.parser")
    text = soup.get_text(separator=" ", strip=True)
    text = re.sub(r"\s+([.,;:!?])", r"\1", text)
    text = re.sub(r"\s{2,}", " ", text)
    return text.strip()
