import logging
import os
from typing import Optional

from termcrawl.domain.config import CrawlConfig
from termcrawl.domain.crawl_result import CrawlResult
from termcrawl.exceptions import CrawlConstructionError, FetcherUnavailableError, PageFetchError
from termcrawl.services.crawl_scheduler import CrawlScheduler
from termcrawl.services.record_sink import RawTableSink
from termcrawl.services.top_ranker import TopRanker

logger = logging.getLogger(__name__)


class WebCrawler:
    """One crawl run: setup checks, traversal into the raw table, then the top-N pass.

    Construction fails fast (before anything is crawled) with a
    `CrawlConstructionError` if either output file can't be written or the
    seed page can't be fetched.
    """

    def __init__(self, config: CrawlConfig, page_fetcher, scheduler: Optional[CrawlScheduler] = None, ranker: Optional[TopRanker] = None):
        self.config = config
        self.page_fetcher = page_fetcher
        self.scheduler = scheduler or CrawlScheduler(page_fetcher)
        self.ranker = ranker or TopRanker()
        self.result: Optional[CrawlResult] = None

        self._check_writable(config.raw_path)
        self._check_writable(config.top_path)
        self._check_seed(config.seed_url)

    def _check_writable(self, path: str) -> None:
        try:
            with open(path, "w", encoding="utf-8"):
                pass
            os.remove(path)
        except OSError as e:
            raise CrawlConstructionError(f"Can't write to file: {path}") from e

    def _check_seed(self, seed_url: str) -> None:
        try:
            self.page_fetcher.fetch(seed_url, self.config.fetch_options())
        except FetcherUnavailableError as e:
            raise CrawlConstructionError(f"page fetcher unavailable: {e.original}") from e
        except PageFetchError as e:
            raise CrawlConstructionError("Illegal startUrl argument") from e

    def start(self) -> CrawlResult:
        """Crawl, close the raw table, then rank it into the top table."""
        cfg = self.config
        header = cfg.header_line() if cfg.print_header else None

        with RawTableSink(cfg.raw_path, header) as sink:
            self.result = self.scheduler.run(cfg, sink)
        logger.info("Crawl finished with %s after %s pages", self.result.name, sink.records_written)

        self.ranker.publish(cfg.raw_path, cfg.top_path, cfg.top_n, header)
        return self.result
