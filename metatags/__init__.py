"""
metatags - head tag builder for server-rendered pages.

Builds <title>, <meta> and <link> tags (canonical, pagination, Open Graph).
"""

from metatags.components.meta import (
    LinkMetadataBuilder,
    LinkTag,
    MetaTag,
    PaginatorPort,
    TitleTag,
    create_link_metadata_builder,
)
from metatags.domain.sanitize import clean_string
from metatags.rules.loader import default_rules, load_meta_rules
from metatags.rules.models import MetaRules

__all__ = [
    "LinkMetadataBuilder",
    "LinkTag",
    "MetaTag",
    "MetaRules",
    "PaginatorPort",
    "TitleTag",
    "clean_string",
    "create_link_metadata_builder",
    "default_rules",
    "load_meta_rules",
]
