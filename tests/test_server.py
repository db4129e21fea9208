import daily_articles.runner as runner
import daily_articles.server as server
from daily_articles.runner import RunConfig


def test_endpoint_returns_payload_with_cache_and_cors_headers(monkeypatch):
    payload = {
        "zeta": {"name": "Zeta", "gradient": "g", "articles": []},
        "alpha": {"name": "Alpha", "gradient": "g", "articles": []},
    }
    monkeypatch.setattr(server, "build_payload", lambda config: payload)

    client = server.create_app(RunConfig()).test_client()
    response = client.get("/daily-articles")

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Cache-Control"] == "public, max-age=3600"
    assert response.headers["Content-Type"].startswith("application/json")
    assert list(response.get_json()) == ["zeta", "alpha"]


def test_root_path_serves_same_payload(monkeypatch):
    monkeypatch.setattr(server, "build_payload", lambda config: [{"title": "t", "url": "u"}])

    client = server.create_app().test_client()

    assert client.get("/").get_json() == [{"title": "t", "url": "u"}]


def test_endpoint_reports_pipeline_failure(monkeypatch):
    def explode(config):
        raise RuntimeError("scoring exploded")

    monkeypatch.setattr(server, "build_payload", explode)

    client = server.create_app().test_client()
    response = client.get("/daily-articles")

    assert response.status_code == 500
    assert response.get_json() == {"error": "scoring exploded"}


def test_endpoint_runs_full_pipeline(monkeypatch, make_article):
    article = make_article(
        title="How Technology Is Reshaping Democracy: A Reflection",
        url="https://example.com/essay",
    )
    monkeypatch.setattr(
        runner,
        "fetch_feed_articles",
        lambda url, **kwargs: [article] if url == "https://techcrunch.com/feed/" else [],
    )

    client = server.create_app(RunConfig()).test_client()
    body = client.get("/daily-articles").get_json()

    assert body["technology"]["name"] == "Technology"
    assert body["technology"]["articles"] == [
        {
            "title": "How Technology Is Reshaping Democracy: A Reflection",
            "url": "https://example.com/essay",
            "featured": True,
        }
    ]
    assert body["science"]["articles"] == []
    assert list(body)[0] == "artsculture"
