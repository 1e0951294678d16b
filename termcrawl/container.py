"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from termcrawl import config as env
from termcrawl.services.crawl_scheduler import CrawlScheduler
from termcrawl.services.fetcher import HtmlPageFetcher, HttpServiceFetcher
from termcrawl.services.fetcher_factory import FetcherFactory
from termcrawl.services.headless_browser_fetcher import PlaywrightHeadlessFetcher, PlaywrightHeadlessOptions
from termcrawl.services.html_text_extractor import HtmlTextExtractor
from termcrawl.services.http_service import HttpService
from termcrawl.services.top_ranker import TopRanker
from termcrawl.services.url_normalizer import UrlNormalizer


# Environment variables used by the container (read via `termcrawl.config` helpers).
#
# TERMCRAWL_USER_AGENT (str, default: "termcrawl/0.1")
#   User-Agent header for plain HTTP fetches and the headless browser.
#
# TERMCRAWL_VERIFY_TLS (bool, default: false)
#   Verify TLS certificates. Off by default so self-signed sites are still
#   crawled; the headless browser follows the same setting.
ENV = {
    "USER_AGENT": env.USER_AGENT,
    "VERIFY_TLS": env.VERIFY_TLS,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for termcrawl."""

    config = providers.Configuration(default=ENV)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        verify=config.VERIFY_TLS.as_(bool),
    )

    http_fetcher = providers.Singleton(
        HttpServiceFetcher,
        http_service=http_service,
    )

    headless_fetcher = providers.Singleton(
        PlaywrightHeadlessFetcher,
        user_agent=config.USER_AGENT.as_(str),
        options=providers.Factory(
            PlaywrightHeadlessOptions,
            ignore_https_errors=providers.Callable(lambda verify: not verify, config.VERIFY_TLS.as_(bool)),
        ),
    )

    fetcher_factory = providers.Singleton(
        FetcherFactory,
        http_fetcher=http_fetcher,
        headless_fetcher=headless_fetcher,
    )

    text_extractor = providers.Singleton(HtmlTextExtractor)

    page_fetcher = providers.Singleton(
        HtmlPageFetcher,
        fetcher_factory=fetcher_factory,
        text_extractor=text_extractor,
    )

    url_normalizer = providers.Singleton(UrlNormalizer)

    crawl_scheduler = providers.Factory(
        CrawlScheduler,
        page_fetcher=page_fetcher,
        normalizer=url_normalizer,
    )

    top_ranker = providers.Factory(TopRanker)
