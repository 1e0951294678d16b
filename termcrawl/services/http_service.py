import requests
from typing import Callable, Optional

from termcrawl.domain.http_response import HttpResponse
from termcrawl.exceptions import PageFetchError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection.
    This enables easy testing without patching and allows swapping HTTP libraries.
    """

    def __init__(self, user_agent: str, http_client: Callable, verify: bool = True):
        self.user_agent = user_agent
        self.http_client = http_client
        self.verify = verify

    def fetch(self, url: str, timeout_ms: Optional[int] = None) -> HttpResponse:
        """Fetch URL and return response with status code, body text, and Content-Type.

        Transport errors and 4xx/5xx answers raise `PageFetchError`.
        """
        headers = {"User-Agent": self.user_agent}
        # a zero timeout means "wait forever", as requests' None does
        timeout = timeout_ms / 1000 if timeout_ms else None
        try:
            resp = self.http_client(url, headers=headers, timeout=timeout, verify=self.verify)
        except requests.exceptions.RequestException as e:
            raise PageFetchError(url, e) from e

        if resp.status_code >= 400:
            raise PageFetchError(url, f"HTTP status {resp.status_code}")

        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        return HttpResponse(resp.status_code, resp.text, ct)
