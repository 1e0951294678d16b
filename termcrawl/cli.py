"""
Command-line interface for the crawler.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from termcrawl import config as env
from termcrawl.container import Container
from termcrawl.domain import config as defaults
from termcrawl.domain.config import CrawlConfig
from termcrawl.domain.crawl_result import CrawlResult
from termcrawl.exceptions import CrawlConfigError, CrawlConstructionError, RankingError, RecordSinkError
from termcrawl.services.crawler import WebCrawler

logger = logging.getLogger(__name__)

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

EPILOG = """\
exit status:
   0  successful completion (no pages to process)
   1  successful completion (maximum depth (-d) reached)
   2  successful completion (page visit limit (-v) reached)
  -1  unsuccessful completion
"""


class UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_arg_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="termcrawl",
        description=(
            "Visit web pages starting from a seed and following links (bounded by depth and a page visit "
            "limit), counting occurrences of the given terms on every page."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    p.add_argument("-?", "-help", "--help", action="help", help="print this help message")
    p.add_argument("-s", dest="start_url", required=True, help="URL from which the crawl starts (seed)")
    p.add_argument("-t", dest="terms", required=True, help="comma-separated terms (regular expressions) to count")
    p.add_argument("-d", dest="max_depth", type=int, default=defaults.DEFAULT_MAX_DEPTH,
                   help="maximum number of link levels relative to the seed (default: %(default)s)")
    p.add_argument("-v", dest="max_visited", type=int, default=defaults.DEFAULT_MAX_VISITED,
                   help="maximum number of pages to visit (default: %(default)s)")
    p.add_argument("-to", dest="timeout_ms", type=int, default=defaults.DEFAULT_TIMEOUT_MS,
                   help="milliseconds to wait for a server response (default: %(default)s)")
    p.add_argument("-tojsb", dest="js_quiet_before_ms", type=int, default=defaults.DEFAULT_JS_QUIET_BEFORE_MS,
                   help="milliseconds to let scripts start before waiting on them (default: %(default)s)")
    p.add_argument("-tojs", dest="js_max_wait_ms", type=int, default=defaults.DEFAULT_JS_MAX_WAIT_MS,
                   help="maximum milliseconds to wait for background scripts (default: %(default)s)")
    p.add_argument("-nt", dest="top_n", type=int, default=defaults.DEFAULT_TOP_N,
                   help="number of records in the top file (default: %(default)s)")
    p.add_argument("-tf", dest="top_path", default=defaults.DEFAULT_TOP_PATH,
                   help="CSV file for the top pages sorted by total hits (default: %(default)s)")
    p.add_argument("-f", dest="raw_path", default=defaults.DEFAULT_RAW_PATH,
                   help="CSV file for all statistics, unsorted (default: %(default)s)")
    p.add_argument("-static", dest="js_enabled", action="store_false", help="disable JavaScript")
    p.add_argument("-noheader", dest="print_header", action="store_false", help="do not write table headers")
    p.add_argument("-cs", dest="case_sensitive", action="store_true", help="case sensitive search")
    p.add_argument("--log-level", default=None, help="log level (DEBUG, INFO, WARNING, ERROR)")
    return p


def setup_logging(level: str | int | None = None) -> None:
    if level is None:
        level = env.LOG_LEVEL
    if isinstance(level, str):
        level = _LEVELS.get(level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def config_from_args(args: argparse.Namespace) -> CrawlConfig:
    return CrawlConfig.from_term_string(
        args.start_url,
        args.terms,
        case_sensitive=args.case_sensitive,
        max_depth=args.max_depth,
        max_visited=args.max_visited,
        top_n=args.top_n,
        timeout_ms=args.timeout_ms,
        js_quiet_before_ms=args.js_quiet_before_ms,
        js_max_wait_ms=args.js_max_wait_ms,
        js_enabled=args.js_enabled,
        print_header=args.print_header,
        raw_path=args.raw_path,
        top_path=args.top_path,
    )


def main(argv: Optional[List[str]] = None, container=None) -> int:
    """Run one crawl and return the process exit code."""
    try:
        args = build_arg_parser().parse_args(argv)
    except UsageError as e:
        print(e)
        print("use key -? to get help")
        return CrawlResult.CONSTRUCTION_FAILED.exit_code

    setup_logging(args.log_level)

    if container is None:
        container = Container()

    try:
        try:
            cfg = config_from_args(args)
        except CrawlConfigError as e:
            raise CrawlConstructionError(str(e)) from e
        crawler = WebCrawler(
            cfg,
            container.page_fetcher(),
            scheduler=container.crawl_scheduler(),
            ranker=container.top_ranker(),
        )
    except CrawlConstructionError as e:
        logger.debug("Construction failed", exc_info=True)
        print(e)
        return CrawlResult.CONSTRUCTION_FAILED.exit_code

    try:
        result = crawler.start()
    except (RankingError, RecordSinkError) as e:
        logger.error("Crawl failed: %s", e)
        print(e)
        return CrawlResult.CONSTRUCTION_FAILED.exit_code
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
