from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from termcrawl.domain.config import FetchOptions
from termcrawl.domain.http_response import HttpResponse
from termcrawl.exceptions import FetcherUnavailableError, PageFetchError


@dataclass(frozen=True)
class PlaywrightHeadlessOptions:
    wait_until: str = "load"  # domcontentloaded | load | networkidle
    ignore_https_errors: bool = True


class PlaywrightHeadlessFetcher:
    """Headless browser fetcher backed by Playwright.

    Renders JavaScript-heavy pages and returns the final DOM HTML via
    page.content(). After navigation it lets background scripts settle:
    first a fixed quiet period of `js_quiet_before_ms`, then up to
    `js_max_wait_ms` for the network to go idle. Pages that never go idle
    are still returned as rendered so far.

    Notes:
    - A browser is launched per request; crawls are strictly sequential.
    - Playwright is imported lazily; a missing package or browser raises
      `FetcherUnavailableError` rather than a plain page failure.
    """

    def __init__(self, *, user_agent: str, options: Optional[PlaywrightHeadlessOptions] = None):
        self._user_agent = user_agent
        self._options = options or PlaywrightHeadlessOptions()

    def fetch(self, url: str, fetch_options: Optional[FetchOptions] = None) -> HttpResponse:
        fetch_options = fetch_options or FetchOptions()
        try:
            from playwright.sync_api import Error as PlaywrightError  # type: ignore
            from playwright.sync_api import TimeoutError as PlaywrightTimeoutError  # type: ignore
            from playwright.sync_api import sync_playwright  # type: ignore
        except ImportError as e:
            raise FetcherUnavailableError(
                url,
                "Headless fetch requested but Playwright is not installed. "
                "Install 'playwright' and run 'python -m playwright install chromium'.",
            ) from e

        try:
            with sync_playwright() as p:
                try:
                    browser = p.chromium.launch(headless=True)
                except PlaywrightError as e:
                    raise FetcherUnavailableError(
                        url, f"Chromium could not be launched ({e}). Run 'python -m playwright install chromium'."
                    ) from e
                try:
                    context = browser.new_context(
                        user_agent=self._user_agent,
                        ignore_https_errors=self._options.ignore_https_errors,
                    )
                    page = context.new_page()
                    resp = page.goto(url, wait_until=self._options.wait_until, timeout=fetch_options.timeout_ms)
                    status = int(resp.status) if resp is not None else 0
                    if status >= 400:
                        raise PageFetchError(url, f"HTTP status {status}")
                    if fetch_options.js_quiet_before_ms:
                        page.wait_for_timeout(fetch_options.js_quiet_before_ms)
                    if fetch_options.js_max_wait_ms:
                        try:
                            page.wait_for_load_state("networkidle", timeout=fetch_options.js_max_wait_ms)
                        except PlaywrightTimeoutError:
                            pass  # scripts still busy; keep what has rendered so far
                    return HttpResponse(status_code=status, text=page.content(), content_type="text/html")
                finally:
                    browser.close()
        except PlaywrightError as e:
            raise PageFetchError(url, e) from e
