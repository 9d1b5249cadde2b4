from collections.abc import Callable

import pytest

from metatags.components.meta import LinkMetadataBuilder, create_link_metadata_builder
from metatags.rules.models import DescriptionRules, MetaRules, TitleRules


class StubPaginator:
    """Paginator double that records which page URLs were requested."""

    def __init__(
        self,
        current: int,
        urls: dict[int, str],
        next_url: str | None = None,
        prev_url: str | None = None,
    ) -> None:
        self._current = current
        self._urls = urls
        self._next_url = next_url
        self._prev_url = prev_url
        self.requested_pages: list[int] = []

    @classmethod
    def numbered(cls, base_url: str, current: int, last: int) -> "StubPaginator":
        """Pages 1..last of base_url; page 1 has no page parameter."""

        def page_url(page: int) -> str:
            return base_url if page == 1 else f"{base_url}?page={page}"

        return cls(
            current=current,
            urls={page: page_url(page) for page in range(1, last + 1)},
            next_url=page_url(current + 1) if current < last else None,
            prev_url=page_url(current - 1) if current > 1 else None,
        )

    def next_page_url(self) -> str | None:
        return self._next_url

    def previous_page_url(self) -> str | None:
        return self._prev_url

    def current_page(self) -> int:
        return self._current

    def url(self, page: int) -> str:
        self.requested_pages.append(page)
        return self._urls[page]


@pytest.fixture
def stub_paginator() -> type[StubPaginator]:
    """Paginator double with explicit URLs."""
    return StubPaginator


@pytest.fixture
def numbered_paginator() -> Callable[[str, int, int], StubPaginator]:
    """Paginator double over numbered pages of one URL."""
    return StubPaginator.numbered


@pytest.fixture
def meta() -> LinkMetadataBuilder:
    """Builder without defaults."""
    return LinkMetadataBuilder()


@pytest.fixture
def site_rules() -> MetaRules:
    """Rules with a site title and defaults."""
    return MetaRules(
        title=TitleRules(site_title="Example", max_length=70),
        description=DescriptionRules(max_length=160),
        robots="index, follow",
        og={"type": "website"},
    )


@pytest.fixture
def site_meta(site_rules: MetaRules) -> LinkMetadataBuilder:
    """Builder with site_rules defaults applied."""
    return create_link_metadata_builder(site_rules)
