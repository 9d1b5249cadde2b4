"""
Meta component port definitions.

The paginator is owned by the host application; the builder only reads it.
"""

from __future__ import annotations

from typing import Protocol

from metatags.rules.models import MetaRules


class PaginatorPort(Protocol):
    """
    Read-only view of a paginated result set.

    Contract: url(1) returns the bare resource URL, without a page query
    parameter. The canonical URL of the first page relies on this.
    """

    def next_page_url(self) -> str | None:
        """URL of the next page, None on the last page."""
        ...

    def previous_page_url(self) -> str | None:
        """URL of the previous page, None on the first page."""
        ...

    def current_page(self) -> int:
        """Current page number, starting at 1."""
        ...

    def url(self, page: int) -> str:
        """URL for the given page number."""
        ...


class MetaRulesPort(Protocol):
    """Port for accessing meta tag defaults."""

    def get_meta_rules(self) -> MetaRules:
        """Get meta tag rules."""
        ...
