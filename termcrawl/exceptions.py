"""Custom exceptions for termcrawl."""


class CrawlConfigError(ValueError):
    """Raised when crawl settings violate a construction-time invariant."""


class CrawlConstructionError(Exception):
    """Raised when a crawler cannot be set up (bad settings, unwritable output, unreachable seed).

    The underlying cause is kept on `__cause__` but deliberately not part of the message.
    """

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Can't construct crawler: {detail}")


class PageFetchError(Exception):
    """Raised when a page cannot be fetched or rendered."""

    def __init__(self, url: str, original: Exception | str):
        self.url = url
        self.original = original
        super().__init__(f"Page fetch failed for {url}: {original}")


class FetcherUnavailableError(PageFetchError):
    """Raised when the fetch backend itself is missing (e.g. Playwright or its browser is not installed)."""


class RecordSinkError(Exception):
    """Raised when the raw table cannot be written."""


class RankingError(Exception):
    """Base class for failures of the top-N ranking pass."""


class RawTableReadError(RankingError):
    """Raised when the raw table is unreadable or holds a malformed line."""

    def __init__(self, path: str, reason: str, line_no: int | None = None):
        self.path = path
        self.reason = reason
        self.line_no = line_no
        where = f"{path}:{line_no}" if line_no is not None else path
        super().__init__(f"Can't read raw table {where}: {reason}")


class TopCountExceededError(RankingError):
    """Raised when more top entries are requested than the raw table holds."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested top {requested} pages but only {available} were recorded"
        )
