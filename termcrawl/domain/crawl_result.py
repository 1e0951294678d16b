"""Crawl result data model."""
from enum import Enum


class CrawlResult(Enum):
    """Terminal status of a crawl run, mapped onto the process exit code."""

    NO_MORE_PAGES = "no_more_pages"
    DEPTH_LIMIT_REACHED = "depth_limit_reached"
    VISIT_LIMIT_REACHED = "visit_limit_reached"
    CONSTRUCTION_FAILED = "construction_failed"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    CrawlResult.NO_MORE_PAGES: 0,
    CrawlResult.DEPTH_LIMIT_REACHED: 1,
    CrawlResult.VISIT_LIMIT_REACHED: 2,
    CrawlResult.CONSTRUCTION_FAILED: -1,
}
