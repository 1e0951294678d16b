from typing import NamedTuple


class PageContent(NamedTuple):
    """What the crawler needs from a fetched page."""
    text: str
    """Plain text of the rendered page; terms are counted against this only"""

    anchors: tuple[str, ...]
    """Raw href attribute values of the page's anchors, in page order"""
