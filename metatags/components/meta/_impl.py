"""
LinkMetadataBuilder - head tag builder for a single response.

Holds the canonical URL, pagination links, title, description, robots
directive and Open Graph properties for one page, and renders them as
HTML fragments.

Key behaviors:
- Values are cleaned once when set (markup stripped, outer whitespace trimmed)
- Getters return None for unset values, a renderable tag otherwise
- Setters return the builder so calls can be chained
- Pagination links are derived from a PaginatorPort
"""

from __future__ import annotations

import logging

from metatags.domain.sanitize import clean_string, clean_url
from metatags.rules.loader import default_rules
from metatags.rules.models import MetaRules

from .models import HeadTag, LinkTag, MetaTag, TitleTag
from .ports import PaginatorPort

logger = logging.getLogger(__name__)


# --- Truncation ---


def truncate_title(text: str, max_length: int) -> str:
    """Cut a title to max_length characters."""
    if len(text) <= max_length:
        return text
    logger.debug("Truncating title to %d characters", max_length)
    return text[:max_length].rstrip()


def truncate_description(text: str, max_length: int = 160) -> str:
    """
    Truncate description to fit meta description limits.

    Breaks at word boundary if possible. The result, ellipsis included,
    is never longer than max_length.
    """
    if len(text) <= max_length:
        return text

    logger.debug("Truncating description to %d characters", max_length)
    if max_length <= 3:
        # No room for an ellipsis
        return text[:max_length]
    limit = max(max_length - 3, 0)
    truncated = text[:limit]
    last_space = truncated.rfind(" ")

    if last_space > limit * 0.6:  # At least 60% of the text
        truncated = truncated[:last_space]

    return truncated.rstrip() + "..."


def _og_property(name: str) -> str:
    name = name.strip()
    return name if name.startswith("og:") else f"og:{name}"


# --- Builder ---


class LinkMetadataBuilder:
    """
    Head tag builder.

    One instance per request. Every setter cleans its input and returns
    the same builder; every getter returns None or a renderable tag.
    """

    def __init__(self, rules: MetaRules | None = None) -> None:
        """
        Initialize builder.

        Args:
            rules: Defaults for title, description, robots and Open Graph
        """
        self._rules = rules or default_rules()
        self._canonical: str | None = None
        self._prev_href: str | None = None
        self._next_href: str | None = None
        self._title: str | None = None
        self._description: str | None = None
        self._robots: str | None = None
        self._og: dict[str, str] = {}
        self._apply_defaults()

    def _apply_defaults(self) -> None:
        rules = self._rules
        self.set_title(rules.title.default)
        self.set_description(rules.description.default)
        self.set_robots(rules.robots)
        for name, content in rules.og.items():
            self.set_og(name, content)

    def reset(self) -> LinkMetadataBuilder:
        """Clear every value and re-apply the configured defaults."""
        self._canonical = None
        self._prev_href = None
        self._next_href = None
        self._title = None
        self._description = None
        self._robots = None
        self._og = {}
        self._apply_defaults()
        return self

    # --- Links ---

    def set_canonical(self, url: str | None) -> LinkMetadataBuilder:
        self._canonical = clean_url(url)
        return self

    def get_canonical(self) -> LinkTag | None:
        if self._canonical is None:
            return None
        return LinkTag(rel="canonical", href=self._canonical)

    def set_prev_href(self, url: str | None) -> LinkMetadataBuilder:
        self._prev_href = clean_url(url)
        return self

    def get_prev_href(self) -> LinkTag | None:
        if self._prev_href is None:
            return None
        return LinkTag(rel="prev", href=self._prev_href)

    def set_next_href(self, url: str | None) -> LinkMetadataBuilder:
        self._next_href = clean_url(url)
        return self

    def get_next_href(self) -> LinkTag | None:
        if self._next_href is None:
            return None
        return LinkTag(rel="next", href=self._next_href)

    def set_pagination_links(self, paginator: PaginatorPort) -> LinkMetadataBuilder:
        """
        Derive next, prev and canonical links from a paginator.

        Prev/next are only written when the paginator has them. The
        canonical URL is url(current_page); for page 1 the paginator
        returns the bare resource URL, so no page=1 reaches the tag.

        Raises:
            ValueError: If the paginator reports a page number below 1.
        """
        next_url = paginator.next_page_url()
        prev_url = paginator.previous_page_url()
        current = paginator.current_page()

        if current < 1:
            raise ValueError(f"Paginator reported invalid current page: {current}")

        if next_url is not None:
            self.set_next_href(next_url)
        if prev_url is not None:
            self.set_prev_href(prev_url)

        self.set_canonical(paginator.url(current))

        logger.debug(
            "Derived pagination links for page %d (prev=%s, next=%s)",
            current,
            prev_url is not None,
            next_url is not None,
        )
        return self

    # --- Title / description / robots ---

    def set_title(self, title: str | None) -> LinkMetadataBuilder:
        text = clean_string(title)
        if text is None:
            self._title = None
            return self

        site_title = clean_string(self._rules.title.site_title)
        if text and site_title and text != site_title:
            text = f"{text}{self._rules.title.separator}{site_title}"

        self._title = truncate_title(text, self._rules.title.max_length)
        return self

    def get_title(self) -> TitleTag | None:
        if self._title is None:
            return None
        return TitleTag(text=self._title)

    def set_description(self, description: str | None) -> LinkMetadataBuilder:
        text = clean_string(description)
        if text is not None:
            text = truncate_description(text, self._rules.description.max_length)
        self._description = text
        return self

    def get_description(self) -> MetaTag | None:
        if self._description is None:
            return None
        return MetaTag(name="description", content=self._description)

    def set_robots(self, robots: str | None) -> LinkMetadataBuilder:
        self._robots = clean_string(robots)
        return self

    def get_robots(self) -> MetaTag | None:
        if self._robots is None:
            return None
        return MetaTag(name="robots", content=self._robots)

    # --- Open Graph ---

    def set_og(self, name: str, content: str | None) -> LinkMetadataBuilder:
        """Set an Open Graph property; None removes it. The og: prefix is optional."""
        prop = _og_property(name)
        value = clean_string(content)
        if value is None:
            self._og.pop(prop, None)
        else:
            self._og[prop] = value
        return self

    def get_og(self) -> tuple[MetaTag, ...]:
        """Open Graph tags in insertion order; og:url falls back to the canonical URL."""
        tags = [MetaTag(property=prop, content=value) for prop, value in self._og.items()]
        if "og:url" not in self._og and self._canonical is not None:
            tags.append(MetaTag(property="og:url", content=self._canonical))
        return tuple(tags)

    # --- Rendering ---

    def tags(self) -> tuple[HeadTag, ...]:
        """All present tags in head order."""
        candidates: list[HeadTag | None] = [
            self.get_title(),
            self.get_description(),
            self.get_robots(),
            self.get_canonical(),
            self.get_prev_href(),
            self.get_next_href(),
        ]
        present: list[HeadTag] = [tag for tag in candidates if tag is not None]
        present.extend(self.get_og())
        return tuple(present)

    def to_html(self, separator: str = "\n") -> str:
        return separator.join(tag.to_html() for tag in self.tags())

    def __html__(self) -> str:
        return self.to_html()


# --- Factory ---


def create_link_metadata_builder(rules: MetaRules | None = None) -> LinkMetadataBuilder:
    """
    Create a head tag builder.

    Args:
        rules: Meta tag defaults (built-in defaults if None)

    Returns:
        Empty LinkMetadataBuilder with defaults applied
    """
    return LinkMetadataBuilder(rules)
