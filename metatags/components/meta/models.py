"""
Meta component input/output models.

Tag models render to the exact HTML fragment placed in <head>. Each one
exposes __html__ so template engines embed it without escaping it twice.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field

from .ports import PaginatorPort

# --- Validation Error ---


@dataclass(frozen=True)
class MetaValidationError:
    """Meta tag validation error."""

    code: str
    message: str
    field: str | None = None


# --- Tag Models ---


@dataclass(frozen=True)
class LinkTag:
    """
    <link> tag with a rel and href.

    The href is embedded as stored; values are cleaned when they are set.
    """

    rel: str
    href: str

    def to_html(self) -> str:
        return f'<link rel="{self.rel}" href="{self.href}">'

    def __str__(self) -> str:
        return self.to_html()

    def __html__(self) -> str:
        return self.to_html()


@dataclass(frozen=True)
class MetaTag:
    """HTML meta tag representation."""

    name: str | None = None
    property: str | None = None  # For OG tags
    content: str = ""

    def to_html(self) -> str:
        content = html.escape(self.content)
        if self.property:
            return f'<meta property="{self.property}" content="{content}">'
        return f'<meta name="{self.name}" content="{content}">'

    def __str__(self) -> str:
        return self.to_html()

    def __html__(self) -> str:
        return self.to_html()


@dataclass(frozen=True)
class TitleTag:
    """<title> element."""

    text: str

    def to_html(self) -> str:
        return f"<title>{html.escape(self.text, quote=False)}</title>"

    def __str__(self) -> str:
        return self.to_html()

    def __html__(self) -> str:
        return self.to_html()


HeadTag = TitleTag | MetaTag | LinkTag


# --- Input Models ---


@dataclass(frozen=True)
class PaginationLinksInput:
    """Input for deriving canonical/prev/next links from a paginator."""

    paginator: PaginatorPort


@dataclass(frozen=True)
class HeadTagsInput:
    """
    Input for building a full set of head tags.

    Explicit values win over values derived from the paginator.
    """

    title: str | None = None
    description: str | None = None
    robots: str | None = None
    canonical: str | None = None
    prev_href: str | None = None
    next_href: str | None = None
    og: tuple[tuple[str, str], ...] = ()
    paginator: PaginatorPort | None = None


# --- Output Models ---


@dataclass(frozen=True)
class HeadTagsOutput:
    """Output containing rendered head tags."""

    tags: tuple[HeadTag, ...] = ()
    html: str = ""
    errors: list[MetaValidationError] = field(default_factory=list)
    success: bool = True
