import time
import types
from datetime import datetime, timezone

from daily_articles import feeds

FEED_URL = "https://feed.example.com/rss"


def _stub_network(monkeypatch, entries):
    mock_response = types.SimpleNamespace(
        content=b"mock content",
        raise_for_status=lambda: None,
    )
    stub_requests = types.SimpleNamespace(
        get=lambda url, timeout=None: mock_response,
        RequestException=Exception,
    )
    stub_feedparser = types.SimpleNamespace(
        parse=lambda content: types.SimpleNamespace(entries=entries),
    )
    monkeypatch.setattr(feeds, "requests", stub_requests)
    monkeypatch.setattr(feeds, "feedparser", stub_feedparser)


def test_fetch_feed_articles_strips_html_from_summary(monkeypatch):
    entry = types.SimpleNamespace(
        link="https://example.com/a",
        title="  Example Article ",
        summary="  <p>Summary <strong>text</strong> with a <a href='#'>link</a>.</p> ",
        published_parsed=time.gmtime(0),
    )
    _stub_network(monkeypatch, [entry])

    results = feeds.fetch_feed_articles(FEED_URL)

    assert len(results) == 1
    article = results[0]
    assert article.url == "https://example.com/a"
    assert article.title == "Example Article"
    assert article.snippet == "Summary text with a link."
    assert article.source_id == FEED_URL
    assert article.published_at == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_fetch_feed_articles_falls_back_to_content(monkeypatch):
    entry = types.SimpleNamespace(
        link="https://example.com/a",
        title="Example Article",
        summary=None,
        summary_detail=None,
        content=[{"value": "<div>content <em>summary</em></div>"}],
        published_parsed=time.gmtime(),
    )
    _stub_network(monkeypatch, [entry])

    results = feeds.fetch_feed_articles(FEED_URL)

    assert results[0].snippet == "content summary"


def test_fetch_feed_articles_uses_summary_detail(monkeypatch):
    entry = types.SimpleNamespace(
        link="https://example.com/b",
        title="Example Article",
        summary=None,
        summary_detail={"value": "<p>Detail <span>summary</span></p>"},
        content=None,
        published_parsed=time.gmtime(),
    )
    _stub_network(monkeypatch, [entry])

    results = feeds.fetch_feed_articles(FEED_URL)

    assert results[0].snippet == "Detail summary"


def test_fetch_feed_articles_tolerates_missing_date_and_summary(monkeypatch):
    entry = types.SimpleNamespace(link="https://example.com/c", title="No Date")
    _stub_network(monkeypatch, [entry])

    results = feeds.fetch_feed_articles(FEED_URL)

    assert results[0].published_at is None
    assert results[0].snippet == ""


def test_fetch_feed_articles_prefers_updated_when_published_missing(monkeypatch):
    entry = types.SimpleNamespace(
        link="https://example.com/d",
        title="Updated Only",
        updated_parsed=time.gmtime(86400),
    )
    _stub_network(monkeypatch, [entry])

    results = feeds.fetch_feed_articles(FEED_URL)

    assert results[0].published_at == datetime(1970, 1, 2, tzinfo=timezone.utc)


def test_fetch_feed_articles_skips_entries_without_link_and_applies_limit(monkeypatch):
    entries = [
        types.SimpleNamespace(link=None, title="No link"),
        types.SimpleNamespace(link="https://example.com/1", title="One"),
        types.SimpleNamespace(link="https://example.com/2", title="Two"),
    ]
    _stub_network(monkeypatch, entries)

    results = feeds.fetch_feed_articles(FEED_URL, limit=2)

    assert [article.url for article in results] == ["https://example.com/1"]


def test_fetch_feed_articles_handles_request_exception(monkeypatch):
    class MockRequestException(Exception):
        pass

    def failing_get(url, timeout=None):
        raise MockRequestException("Timeout")

    monkeypatch.setattr(
        feeds,
        "requests",
        types.SimpleNamespace(get=failing_get, RequestException=MockRequestException),
    )

    assert feeds.fetch_feed_articles("https://timeout.example.com") == []


def test_fetch_feed_articles_passes_timeout(monkeypatch):
    captured = {}

    def fake_get(url, timeout=None):
        captured["timeout"] = timeout
        return types.SimpleNamespace(content=b"", raise_for_status=lambda: None)

    monkeypatch.setattr(
        feeds, "requests", types.SimpleNamespace(get=fake_get, RequestException=Exception)
    )
    monkeypatch.setattr(
        feeds,
        "feedparser",
        types.SimpleNamespace(parse=lambda content: types.SimpleNamespace(entries=[])),
    )

    feeds.fetch_feed_articles(FEED_URL, timeout=3.0)

    assert captured["timeout"] == 3.0


def test_to_datetime_handles_none():
    assert feeds.to_datetime(None) is None
