"""Shared data models for daily_articles."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class CategoryConfig:
    """Configuration for a single topical category."""

    key: str
    name: str
    feeds: Tuple[str, ...]
    keywords: Tuple[str, ...] = ()
    gradient: str = ""


@dataclass(frozen=True)
class RawArticle:
    """Simplified RSS feed item used throughout the app."""

    title: str
    url: str
    published_at: Optional[datetime]
    source_id: str
    snippet: str = ""


@dataclass(frozen=True)
class ScoredArticle:
    """A feed item together with its heuristic quality score."""

    article: RawArticle
    score: int

    @property
    def url(self) -> str:
        return self.article.url

    @property
    def source_id(self) -> str:
        return self.article.source_id


@dataclass(frozen=True)
class SelectedArticle:
    """An entry of the final, display-ready selection."""

    title: str
    url: str
    featured: Optional[bool] = None

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"title": self.title, "url": self.url}
        if self.featured is not None:
            payload["featured"] = self.featured
        return payload


@dataclass
class CategoryResult:
    """Selection produced for one category during a run."""

    category: CategoryConfig
    articles: List[SelectedArticle] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.category.name,
            "gradient": self.category.gradient,
            "articles": [article.to_dict() for article in self.articles],
        }
