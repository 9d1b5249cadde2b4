import logging
from html.parser import HTMLParser

logger = logging.getLogger(__name__)


class _TextExtractor(HTMLParser):
    """Collects text content; tags, attributes and comments are dropped."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._parts: list[str] = []

    def handle_data(self, data: str) -> None:
        self._parts.append(data)

    def text(self) -> str:
        return "".join(self._parts)


def strip_markup(text: str) -> str:
    """Remove HTML tags and comments, keeping the text between them."""
    parser = _TextExtractor()
    # Escaping every & makes the parser hand entities back exactly as written.
    parser.feed(text.replace("&", "&amp;"))
    # An unterminated tag or comment at the end stays buffered; drop it.
    if not parser.rawdata.startswith("<"):
        parser.close()
    return parser.text()


def clean_string(value: str | None) -> str | None:
    """
    Clean a value before it is stored as head tag data.

    Markup is stripped and outer whitespace trimmed. Entities are kept as
    written. None passes through unchanged.
    """
    if value is None:
        return None

    text = str(value)
    cleaned = strip_markup(text).strip()
    if cleaned != text.strip():
        logger.debug("Stripped markup from head tag value: %r", value)

    return cleaned


def clean_url(value: str | None) -> str | None:
    """clean_string for link hrefs; markup in a URL is logged as a warning."""
    cleaned = clean_string(value)
    if cleaned is not None and cleaned != str(value).strip():
        logger.warning("Stripped markup from URL: %r", value)
    return cleaned
