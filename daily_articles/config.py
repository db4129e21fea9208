"""Configuration loading for categories and the selection pipeline."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional, Tuple
from xml.etree import ElementTree as ET

from .models import CategoryConfig
from .scoring import SCORING_PROFILES, ScoringConfig

logger = logging.getLogger(__name__)


class OrchestrationPolicy(enum.Enum):
    """How categories are processed within one run."""

    PARALLEL = "parallel"
    SEQUENTIAL = "sequential"


class Layout(enum.Enum):
    """Shape of the response payload."""

    CATEGORIES = "categories"
    FLAT = "flat"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class AppConfig:
    categories_file: Optional[str] = None
    layout: Layout = Layout.CATEGORIES
    policy: OrchestrationPolicy = OrchestrationPolicy.PARALLEL
    profile: str = "category"
    scoring: ScoringConfig = field(
        default_factory=lambda: SCORING_PROFILES["category"]
    )
    max_articles: int = 9
    diversity_relaxation: int = 6
    items_per_feed: int = 10
    fetch_timeout: float = 10.0
    concurrency: int = 10
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def parse_categories_config(path: str) -> List[CategoryConfig]:
    """Parse an OPML file whose top-level outlines are categories."""
    logger.info("Loading category configuration from %s", path)
    tree = ET.parse(path)
    root = tree.getroot()
    body = root.find("body")

    if body is None:
        raise ValueError("Categories file is missing the <body> section.")

    categories: List[CategoryConfig] = []
    seen_keys = set()

    for outline in body.findall("outline"):
        name = outline.attrib.get("text") or outline.attrib.get("title")
        key = outline.attrib.get("key") or (name or "").lower().replace(" ", "")
        if not key:
            raise ValueError("Category outline needs a 'key' or 'text' attribute.")
        if key in seen_keys:
            raise ValueError(f"Duplicate category key: {key}")
        seen_keys.add(key)

        feeds: List[str] = []

        def walk(node: ET.Element) -> None:
            feed_url = node.attrib.get("xmlUrl")
            if node.attrib.get("type") == "rss" and feed_url:
                feeds.append(feed_url)
                logger.debug("Registered feed '%s' (category='%s')", feed_url, key)
                return
            for child in node.findall("outline"):
                walk(child)

        walk(outline)

        categories.append(
            CategoryConfig(
                key=key,
                name=name or key,
                feeds=tuple(feeds),
                keywords=_split_keywords(outline.attrib.get("keywords", "")),
                gradient=outline.attrib.get("gradient", ""),
            )
        )

    logger.info("Loaded %d categories from configuration", len(categories))
    return categories


def _split_keywords(raw_value: str) -> Tuple[str, ...]:
    return tuple(part.strip().lower() for part in raw_value.split(",") if part.strip())


def _resolve_path(base_path: Path, target_path: str) -> str:
    """Resolve a path relative to the base config file if it's not absolute."""
    target = Path(target_path)
    if target.is_absolute():
        return str(target)
    return str((base_path.parent / target).resolve())


def _parse_enum(enum_cls, raw_value: Optional[str], default):
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return enum_cls(raw_value.strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValueError(
            f"Unsupported value '{raw_value.strip()}' (expected one of: {choices})"
        ) from None


def _parse_number(root: ET.Element, tag: str, default, cast):
    raw_value = root.findtext(tag)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return cast(raw_value.strip())
    except ValueError:
        raise ValueError(f"<{tag}> must be a number, got '{raw_value}'") from None


def _parse_scoring(node: Optional[ET.Element], base: ScoringConfig) -> ScoringConfig:
    if node is None:
        return base

    overrides = {}

    recency_node = node.find("recency")
    if recency_node is not None:
        bands = []
        for band in recency_node.findall("band"):
            try:
                bands.append(
                    (float(band.attrib["max-hours"]), int(band.attrib["points"]))
                )
            except (KeyError, ValueError):
                raise ValueError(
                    "Recency <band> needs numeric 'max-hours' and 'points'."
                ) from None
        overrides["recency_bands"] = tuple(bands)

    depth_mode = node.findtext("depth-mode")
    if depth_mode:
        overrides["depth_mode"] = depth_mode.strip().lower()

    min_title = _parse_number(node, "min-title-length", None, int)
    if min_title is not None:
        overrides["min_title_length"] = min_title

    exclusion = node.findtext("exclusion")
    if exclusion:
        overrides["exclusion_enabled"] = exclusion.strip().lower() == "true"

    return replace(base, **overrides)


def parse_app_config(path: str) -> AppConfig:
    """Parse the main application configuration XML."""
    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    logger.info("Loading application configuration from %s", config_path)
    tree = ET.parse(config_path)
    root = tree.getroot()

    categories_node = root.find("categories")
    categories_file = (
        _resolve_path(config_path, categories_node.text.strip())
        if categories_node is not None and categories_node.text
        else None
    )

    layout = _parse_enum(Layout, root.findtext("layout"), Layout.CATEGORIES)
    policy = _parse_enum(
        OrchestrationPolicy, root.findtext("policy"), OrchestrationPolicy.PARALLEL
    )

    default_profile = "essay" if layout is Layout.FLAT else "category"
    profile = (root.findtext("profile") or default_profile).strip().lower()
    if profile not in SCORING_PROFILES:
        raise ValueError(f"Unknown scoring profile: {profile}")
    scoring = _parse_scoring(root.find("scoring"), SCORING_PROFILES[profile])

    max_articles = _parse_number(root, "max-articles", 9, int)
    relaxation = _parse_number(root, "diversity-relaxation", 6, int)
    items_per_feed = _parse_number(root, "items-per-feed", 10, int)
    fetch_timeout = _parse_number(root, "fetch-timeout", 10.0, float)
    concurrency = _parse_number(root, "concurrency", 10, int)

    if max_articles < 0 or relaxation < 0:
        raise ValueError("<max-articles> and <diversity-relaxation> must be >= 0.")
    if concurrency < 1:
        raise ValueError("<concurrency> must be at least 1.")
    if items_per_feed < 0:
        raise ValueError("<items-per-feed> must be >= 0.")
    if fetch_timeout <= 0:
        raise ValueError("<fetch-timeout> must be positive.")

    log_node = root.find("logging")
    logging_config = LoggingConfig()
    if log_node is not None:
        logging_config.level = log_node.findtext("level", "INFO")
        log_file = log_node.findtext("file")
        if log_file:
            logging_config.file = _resolve_path(config_path, log_file)

    return AppConfig(
        categories_file=categories_file,
        layout=layout,
        policy=policy,
        profile=profile,
        scoring=scoring,
        max_articles=max_articles,
        diversity_relaxation=relaxation,
        items_per_feed=items_per_feed,
        fetch_timeout=fetch_timeout,
        concurrency=concurrency,
        logging=logging_config,
    )
