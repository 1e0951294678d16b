import logging
from typing import Optional

logger = logging.getLogger(__name__)

# A root-relative href is joined to the page URL cut at the first "/" found at
# or after this index, i.e. past "https://" and the start of the host.
HOST_SEARCH_START = 12


class UrlNormalizer:
    """Rewrites raw anchor hrefs into the absolute form used as the dedup key.

    The rules are textual and applied in a fixed order; no case folding,
    trailing-slash or query normalization happens here, so two hrefs are the
    same page only if their rewritten strings are equal.
    """

    def normalize(self, raw_href: str, current_url: str) -> Optional[str]:
        href = raw_href or ""
        if len(href) < 2 or href.startswith("#"):
            return None

        if "#" in href:
            href = href[: href.index("#")]

        if href.startswith("//"):
            href = "https://" + href[2:]

        # TODO: confirm whether "www." should only be dropped from the host part
        if "www." in href:
            href = href.replace("www.", "", 1)

        slash = href.find("/")
        if slash != -1 and "." in href[:slash]:
            href = "https://" + href

        page_url = self.with_host_slash(current_url)
        if href.startswith("/"):
            href = page_url[: page_url.find("/", HOST_SEARCH_START)] + href

        if "://" not in href:
            href = page_url[: page_url.rfind("/")] + href

        logger.debug("Normalized %r on %s -> %s", raw_href, current_url, href)
        return href

    @staticmethod
    def with_host_slash(url: str) -> str:
        """Append "/" to a URL that has no path, e.g. `https://h.com` -> `https://h.com/`."""
        if url.find("/", HOST_SEARCH_START) == -1:
            return url + "/"
        return url
