from __future__ import annotations

from dataclasses import dataclass

from termcrawl.services.fetcher import Fetcher

FETCH_MODES = ("http", "headless_chromium")


@dataclass(frozen=True)
class FetcherFactory:
    """Picks the transport for a fetch mode; see `fetch_mode_for`."""

    http_fetcher: Fetcher
    headless_fetcher: Fetcher

    def get(self, fetch_mode: str) -> Fetcher:
        if not fetch_mode or not fetch_mode.strip():
            raise ValueError("fetch_mode is required")
        transports = dict(zip(FETCH_MODES, (self.http_fetcher, self.headless_fetcher)))
        try:
            return transports[fetch_mode.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown fetch_mode: {fetch_mode!r}") from None
