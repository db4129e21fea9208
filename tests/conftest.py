from datetime import datetime, timedelta, timezone

import pytest

from daily_articles.models import RawArticle, ScoredArticle

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_article():
    def factory(
        title="A Long Considered Look at Quiet Public Libraries",
        url="https://example.com/a",
        source="https://feed.example.com/rss",
        age_hours=10,
        snippet="",
    ):
        published = None if age_hours is None else NOW - timedelta(hours=age_hours)
        return RawArticle(
            title=title,
            url=url,
            published_at=published,
            source_id=source,
            snippet=snippet,
        )

    return factory


@pytest.fixture
def make_scored(make_article):
    def factory(url, score, source="https://feed.example.com/rss", title=None):
        article = make_article(title=title or f"Title for {url}", url=url, source=source)
        return ScoredArticle(article=article, score=score)

    return factory
