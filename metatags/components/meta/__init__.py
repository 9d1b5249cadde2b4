"""
Meta component - canonical, pagination and head tag builder.
"""

from ._impl import (
    LinkMetadataBuilder,
    create_link_metadata_builder,
    truncate_description,
    truncate_title,
)
from .component import (
    run,
    run_head_tags,
    run_pagination_links,
)
from .models import (
    HeadTag,
    HeadTagsInput,
    HeadTagsOutput,
    LinkTag,
    MetaTag,
    MetaValidationError,
    PaginationLinksInput,
    TitleTag,
)
from .ports import MetaRulesPort, PaginatorPort

__all__ = [
    # Entry points
    "run",
    "run_head_tags",
    "run_pagination_links",
    # Input models
    "HeadTagsInput",
    "PaginationLinksInput",
    # Output models
    "HeadTag",
    "HeadTagsOutput",
    "LinkTag",
    "MetaTag",
    "MetaValidationError",
    "TitleTag",
    # Builder
    "LinkMetadataBuilder",
    "create_link_metadata_builder",
    "truncate_description",
    "truncate_title",
    # Ports
    "MetaRulesPort",
    "PaginatorPort",
]
