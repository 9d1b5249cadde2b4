"""
Meta component - head tag builder entry points.

Builds canonical, pagination, title, description, robots and Open Graph
tags for one page and returns them rendered.

Invariants:
- Values are cleaned (markup stripped, trimmed) before storage
- Unset values produce no tag
- Page 1 canonical comes from url(1), which carries no page parameter
"""

from __future__ import annotations

from ._impl import LinkMetadataBuilder, create_link_metadata_builder
from .models import (
    HeadTagsInput,
    HeadTagsOutput,
    MetaValidationError,
    PaginationLinksInput,
)
from .ports import MetaRulesPort


def _create_builder(rules: MetaRulesPort | None) -> LinkMetadataBuilder:
    """Create builder from ports."""
    return create_link_metadata_builder(rules.get_meta_rules() if rules else None)


def _output(builder: LinkMetadataBuilder) -> HeadTagsOutput:
    return HeadTagsOutput(
        tags=builder.tags(),
        html=builder.to_html(),
        errors=[],
        success=True,
    )


def _invalid_page(error: ValueError) -> HeadTagsOutput:
    return HeadTagsOutput(
        errors=[
            MetaValidationError(
                code="invalid_current_page",
                message=str(error),
                field="paginator",
            )
        ],
        success=False,
    )


# --- Component Entry Points ---


def run_pagination_links(
    inp: PaginationLinksInput,
    *,
    rules: MetaRulesPort | None = None,
) -> HeadTagsOutput:
    """
    Build canonical/prev/next links from a paginator.

    Args:
        inp: Input containing the paginator.
        rules: Optional rules port for meta tag defaults.

    Returns:
        HeadTagsOutput with the rendered tags, or an invalid_current_page
        error if the paginator reports a page below 1.
    """
    builder = _create_builder(rules)

    try:
        builder.set_pagination_links(inp.paginator)
    except ValueError as e:
        return _invalid_page(e)

    return _output(builder)


def run_head_tags(
    inp: HeadTagsInput,
    *,
    rules: MetaRulesPort | None = None,
) -> HeadTagsOutput:
    """
    Build a full set of head tags.

    Paginator-derived links are applied first; explicit values in the
    input then override them.
    """
    builder = _create_builder(rules)

    if inp.paginator is not None:
        try:
            builder.set_pagination_links(inp.paginator)
        except ValueError as e:
            return _invalid_page(e)

    if inp.title is not None:
        builder.set_title(inp.title)
    if inp.description is not None:
        builder.set_description(inp.description)
    if inp.robots is not None:
        builder.set_robots(inp.robots)
    if inp.canonical is not None:
        builder.set_canonical(inp.canonical)
    if inp.prev_href is not None:
        builder.set_prev_href(inp.prev_href)
    if inp.next_href is not None:
        builder.set_next_href(inp.next_href)
    for name, content in inp.og:
        builder.set_og(name, content)

    return _output(builder)


def run(
    inp: PaginationLinksInput | HeadTagsInput,
    *,
    rules: MetaRulesPort | None = None,
) -> HeadTagsOutput:
    """
    Main entry point for the meta component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, PaginationLinksInput):
        return run_pagination_links(inp, rules=rules)
    elif isinstance(inp, HeadTagsInput):
        return run_head_tags(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
