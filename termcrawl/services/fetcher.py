from __future__ import annotations

import logging
from typing import Optional, Protocol

from termcrawl.domain.config import FetchOptions
from termcrawl.domain.http_response import HttpResponse
from termcrawl.domain.page_content import PageContent
from termcrawl.exceptions import PageFetchError

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Fetch a URL and return its HTML as an HTTP-like response.

    Implementations raise `PageFetchError` when the page cannot be loaded.
    """

    def fetch(self, url: str, fetch_options: Optional[FetchOptions] = None) -> HttpResponse: ...


class PageFetcher(Protocol):
    """The crawler's only view of the web: URL in, page text and raw hrefs out.

    Any failure is reported as `PageFetchError`; the crawler skips the page.
    """

    def fetch(self, url: str, options: FetchOptions) -> PageContent: ...


class HttpServiceFetcher:
    def __init__(self, http_service):
        self._http_service = http_service

    def fetch(self, url: str, fetch_options: Optional[FetchOptions] = None) -> HttpResponse:
        timeout_ms = fetch_options.timeout_ms if fetch_options is not None else None
        return self._http_service.fetch(url, timeout_ms=timeout_ms)


def fetch_mode_for(options: FetchOptions) -> str:
    return "headless_chromium" if options.js_enabled else "http"


class HtmlPageFetcher:
    """PageFetcher that loads HTML through a transport and extracts text and anchors from it."""

    def __init__(self, fetcher_factory, text_extractor):
        self.fetcher_factory = fetcher_factory
        self.text_extractor = text_extractor

    def fetch(self, url: str, options: FetchOptions) -> PageContent:
        transport = self.fetcher_factory.get(fetch_mode_for(options))
        response = transport.fetch(url, options)
        try:
            return self.text_extractor.extract(response.text)
        except Exception as e:
            # parser failures on broken markup are page-local, like transport errors
            raise PageFetchError(url, e) from e
