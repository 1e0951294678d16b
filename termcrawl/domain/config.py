from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from termcrawl.exceptions import CrawlConfigError

DEFAULT_MAX_DEPTH = 8
DEFAULT_MAX_VISITED = 10_000
DEFAULT_TIMEOUT_MS = 7_500
DEFAULT_JS_QUIET_BEFORE_MS = 1_000
DEFAULT_JS_MAX_WAIT_MS = 5_000
DEFAULT_TOP_N = 10
DEFAULT_RAW_PATH = "Out.csv"
DEFAULT_TOP_PATH = "OutTop.csv"


@dataclass(frozen=True)
class FetchOptions:
    """Per-request settings handed through to the page fetcher untouched."""

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    js_enabled: bool = True
    js_quiet_before_ms: int = DEFAULT_JS_QUIET_BEFORE_MS
    js_max_wait_ms: int = DEFAULT_JS_MAX_WAIT_MS


@dataclass(frozen=True)
class CrawlConfig:
    """Immutable settings for one crawl run.

    Built once from external input; invariants are checked on construction
    and a `CrawlConfigError` is raised for the first violation found.
    """

    seed_url: str
    terms: tuple[str, ...]
    case_sensitive: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    max_visited: int = DEFAULT_MAX_VISITED
    top_n: int = DEFAULT_TOP_N
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    js_quiet_before_ms: int = DEFAULT_JS_QUIET_BEFORE_MS
    js_max_wait_ms: int = DEFAULT_JS_MAX_WAIT_MS
    js_enabled: bool = True
    print_header: bool = True
    raw_path: str = DEFAULT_RAW_PATH
    top_path: str = DEFAULT_TOP_PATH

    def __post_init__(self):
        # accept any sequence of terms but store a tuple so the value stays hashable
        object.__setattr__(self, "terms", tuple(self.terms))
        self._validate()

    def _validate(self) -> None:
        if not self.seed_url or not self.seed_url.strip():
            raise CrawlConfigError("seed URL is required")
        if not self.terms or any(t == "" for t in self.terms):
            raise CrawlConfigError("at least one non-empty term is required")
        for term in self.terms:
            try:
                re.compile(term)
            except re.error as e:
                raise CrawlConfigError(f"term {term!r} is not a valid pattern: {e}") from e
        if self.max_depth < 0:
            raise CrawlConfigError("maxDepth must be positive")
        if self.max_visited < 1:
            raise CrawlConfigError("maxVisited must be bigger than 0")
        if self.max_visited < self.top_n:
            raise CrawlConfigError("maxVisited can't be lower than the top-N count")
        if self.top_n < 0:
            raise CrawlConfigError("top-N count must be positive")
        for name in ("timeout_ms", "js_quiet_before_ms", "js_max_wait_ms"):
            if getattr(self, name) < 0:
                raise CrawlConfigError(f"{name} must be positive")

    @classmethod
    def from_term_string(cls, seed_url: str, term_string: str, **kwargs) -> "CrawlConfig":
        """Build a config from a comma-separated term list."""
        return cls(seed_url=seed_url, terms=split_terms(term_string), **kwargs)

    def fetch_options(self) -> FetchOptions:
        return FetchOptions(
            timeout_ms=self.timeout_ms,
            js_enabled=self.js_enabled,
            js_quiet_before_ms=self.js_quiet_before_ms,
            js_max_wait_ms=self.js_max_wait_ms,
        )

    def header_line(self) -> str:
        return ",".join(["URL", *self.terms])


def split_terms(term_string: str) -> Sequence[str]:
    if term_string is None:
        raise CrawlConfigError("term list is required")
    return tuple(term_string.split(","))
