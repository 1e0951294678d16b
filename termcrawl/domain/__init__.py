"""Domain objects for termcrawl - explicit re-exports to satisfy linters."""
from .config import CrawlConfig as CrawlConfig
from .config import FetchOptions as FetchOptions
from .crawl_result import CrawlResult as CrawlResult
from .crawl_state import CrawlState as CrawlState
from .page_content import PageContent as PageContent
from .visit_record import VisitRecord as VisitRecord

__all__ = ["CrawlConfig", "FetchOptions", "CrawlResult", "CrawlState", "PageContent", "VisitRecord"]
