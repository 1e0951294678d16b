import logging
from typing import Optional

from termcrawl.domain.config import CrawlConfig, FetchOptions
from termcrawl.domain.crawl_result import CrawlResult
from termcrawl.domain.crawl_state import CrawlState
from termcrawl.domain.page_content import PageContent
from termcrawl.domain.visit_record import VisitRecord
from termcrawl.exceptions import PageFetchError
from termcrawl.services.term_counter import TermCounter
from termcrawl.services.url_normalizer import UrlNormalizer

logger = logging.getLogger(__name__)


class CrawlScheduler:
    """Drives a level-by-level breadth-first crawl.

    This class owns the traversal control flow (level ordering, limits,
    deduplication and the terminal status). It does NOT construct its
    collaborators or open output files; the page fetcher and the record sink
    are handed in.
    """

    def __init__(self, page_fetcher, normalizer: Optional[UrlNormalizer] = None):
        self.page_fetcher = page_fetcher
        self.normalizer = normalizer or UrlNormalizer()
        self.state: Optional[CrawlState] = None

    def run(self, config: CrawlConfig, sink) -> CrawlResult:
        """Crawl from `config.seed_url`, writing one record per fetched page to `sink`.

        The seed is visited regardless of limits. After that, each pass of the
        loop processes one full level; the loop stops when the level counter
        equals `max_depth` (so `max_depth - 1` link-following levels are
        crawled, and `max_depth == 0` is bounded only by the visit limit or by
        running out of links).
        """
        state = CrawlState()
        self.state = state
        counter = TermCounter(config.terms, config.case_sensitive)
        options = config.fetch_options()

        state.mark_visited(config.seed_url)
        self.visit(config.seed_url, state, counter, options, sink)

        while state.level != config.max_depth:
            level_urls = state.promote_next_level()
            if not level_urls:
                logger.info("Level %s is empty; nothing left to crawl", state.level)
                return CrawlResult.NO_MORE_PAGES
            logger.info("Crawling level %s: %s pages queued", state.level, len(level_urls))
            for url in level_urls:
                if state.visited_count >= config.max_visited:
                    logger.info("Visit limit %s reached at level %s", config.max_visited, state.level)
                    return CrawlResult.VISIT_LIMIT_REACHED
                state.mark_visited(url)
                self.visit(url, state, counter, options, sink)
            state.advance_level()

        if state.has_next_level:
            logger.info("Depth limit %s reached with %s pages undiscovered", config.max_depth, len(state.next_level))
            return CrawlResult.DEPTH_LIMIT_REACHED
        return CrawlResult.NO_MORE_PAGES

    def visit(self, url: str, state: CrawlState, counter: TermCounter, options: FetchOptions, sink) -> Optional[VisitRecord]:
        """Fetch one page, record its counts and queue its links for the next level.

        Returns the record, or None when the fetch failed and the page was skipped.
        """
        page = self._fetch(url, options)
        if page is None:
            return None

        visited = state.record_visit()
        # a path-less URL is recorded the way links on it are resolved
        record = VisitRecord.of(self.normalizer.with_host_slash(url), counter.count(page.text))
        sink.write(record)
        logger.info("Visited #%s %s total=%s", visited, record.url, record.total)

        queued = 0
        for href in page.anchors:
            target = self.normalizer.normalize(href, url)
            if target is None:
                continue
            if state.enqueue_next(target):
                queued += 1
        logger.debug("Queued %s new links from %s", queued, url)
        return record

    def _fetch(self, url: str, options: FetchOptions) -> Optional[PageContent]:
        try:
            return self.page_fetcher.fetch(url, options)
        except PageFetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            return None
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            return None
