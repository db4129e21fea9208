"""Built-in category table used when no OPML file is configured."""

from __future__ import annotations

from typing import Tuple

from .models import CategoryConfig

DEFAULT_CATEGORIES: Tuple[CategoryConfig, ...] = (
    CategoryConfig(
        key="artsculture",
        name="Arts & Culture",
        feeds=(
            "https://www.theguardian.com/artanddesign/rss",
            "https://hyperallergic.com/feed/",
        ),
        keywords=(
            "art",
            "artist",
            "exhibition",
            "museum",
            "gallery",
            "painting",
            "culture",
            "design",
        ),
        gradient="linear-gradient(135deg, #b71c1c 0%, #ff6b6b 100%)",
    ),
    CategoryConfig(
        key="literature",
        name="Literature",
        feeds=(
            "https://lithub.com/feed/",
            "https://www.theguardian.com/books/rss",
        ),
        keywords=(
            "book",
            "novel",
            "poetry",
            "poet",
            "writer",
            "fiction",
            "literary",
            "author",
        ),
        gradient="linear-gradient(135deg, #e65100 0%, #ffb74d 100%)",
    ),
    CategoryConfig(
        key="philosophy",
        name="Philosophy",
        feeds=(
            "https://aeon.co/feed.rss",
            "https://dailynous.com/feed/",
        ),
        keywords=(
            "philosophy",
            "philosopher",
            "ethics",
            "moral",
            "mind",
            "consciousness",
            "meaning",
            "truth",
        ),
        gradient="linear-gradient(135deg, #f57f17 0%, #fff176 100%)",
    ),
    CategoryConfig(
        key="politics",
        name="Politics",
        feeds=(
            "https://www.theguardian.com/politics/rss",
            "https://foreignpolicy.com/feed/",
        ),
        keywords=(
            "election",
            "government",
            "democracy",
            "policy",
            "parliament",
            "minister",
            "vote",
            "diplomacy",
        ),
        gradient="linear-gradient(135deg, #1b5e20 0%, #81c784 100%)",
    ),
    CategoryConfig(
        key="science",
        name="Science",
        feeds=(
            "https://www.sciencedaily.com/rss/all.xml",
            "https://www.theguardian.com/science/rss",
        ),
        keywords=(
            "research",
            "scientist",
            "study",
            "physics",
            "biology",
            "climate",
            "space",
            "discovery",
        ),
        gradient="linear-gradient(135deg, #01579b 0%, #4fc3f7 100%)",
    ),
    CategoryConfig(
        key="society",
        name="Society",
        feeds=(
            "https://www.theguardian.com/society/rss",
            "https://www.theatlantic.com/feed/channel/health/",
        ),
        keywords=(
            "community",
            "health",
            "inequality",
            "housing",
            "family",
            "education",
            "social",
            "welfare",
        ),
        gradient="linear-gradient(135deg, #4a148c 0%, #9c27b0 100%)",
    ),
    CategoryConfig(
        key="sports",
        name="Sports",
        feeds=(
            "https://www.theguardian.com/sport/rss",
            "https://www.theatlantic.com/feed/channel/health/",
        ),
        keywords=(
            "sport",
            "football",
            "athlete",
            "olympic",
            "tennis",
            "cricket",
            "league",
            "coach",
        ),
        gradient="linear-gradient(135deg, #880e4f 0%, #f06292 100%)",
    ),
    CategoryConfig(
        key="technology",
        name="Technology",
        feeds=(
            "https://techcrunch.com/feed/",
            "https://www.theverge.com/rss/index.xml",
        ),
        keywords=(
            "technology",
            "software",
            "ai",
            "artificial intelligence",
            "internet",
            "digital",
            "computer",
            "startup",
        ),
        gradient="linear-gradient(135deg, #1a237e 0%, #5c6bc0 100%)",
    ),
    CategoryConfig(
        key="theology",
        name="Theology",
        feeds=(
            "https://www.christianitytoday.com/ct.rss",
            "https://religionnews.com/feed/",
        ),
        keywords=(
            "faith",
            "church",
            "religion",
            "religious",
            "god",
            "theology",
            "spiritual",
            "belief",
        ),
        gradient="linear-gradient(135deg, #880e4f 0%, #ec407a 100%)",
    ),
)
