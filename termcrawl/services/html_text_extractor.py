import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup

from termcrawl.domain.page_content import PageContent

logger = logging.getLogger(__name__)


class HtmlTextExtractor:
    """Turns an HTML document into the visible text and the ordered list of anchor hrefs."""

    # never rendered as page text by a browser
    NON_TEXT_TAGS = ("script", "style", "noscript", "template")

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract(self, body: Optional[str]) -> PageContent:
        if not body:
            return PageContent(text="", anchors=())

        soup = self._soup_factory(body)
        anchors = tuple(a.get("href") for a in soup.find_all("a", href=True))
        for tag in self.NON_TEXT_TAGS:
            for element in soup.find_all(tag):
                element.decompose()
        text = soup.get_text(separator=" ", strip=True)
        logger.debug("Extracted %s chars of text and %s anchors", len(text), len(anchors))
        return PageContent(text=text, anchors=anchors)
