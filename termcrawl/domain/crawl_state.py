from typing import Iterable


class _OrderedUrlSet:
    """Insertion-ordered set of URLs (dict keys keep discovery order)."""

    def __init__(self, urls: Iterable[str] = ()):
        self._urls: dict[str, None] = dict.fromkeys(urls)

    def add(self, url: str) -> None:
        self._urls[url] = None

    def discard(self, url: str) -> None:
        self._urls.pop(url, None)

    def clear(self) -> None:
        self._urls.clear()

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __iter__(self):
        return iter(list(self._urls))

    def __len__(self) -> int:
        return len(self._urls)

    def __bool__(self) -> bool:
        return bool(self._urls)


class CrawlState:
    """
    Mutable traversal state owned by a single scheduler loop.

    Three disjoint collections are tracked: pages already visited, pages
    pending for the level being processed, and pages discovered for the next
    level. A URL lives in at most one of them and never returns to a queue
    once visited.
    """

    def __init__(self):
        self._visited = _OrderedUrlSet()
        self._current = _OrderedUrlSet()
        self._next = _OrderedUrlSet()
        self.visited_count = 0
        self.level = 1

    def is_known(self, url: str) -> bool:
        """True if `url` was visited or is queued for the current or next level."""
        return url in self._visited or url in self._current or url in self._next

    def enqueue_next(self, url: str) -> bool:
        """Queue `url` for the next level unless already known. Returns True if queued."""
        if self.is_known(url):
            return False
        self._next.add(url)
        return True

    def promote_next_level(self) -> list[str]:
        """Make the next-level queue the current level and return it in discovery order."""
        self._current = self._next
        self._next = _OrderedUrlSet()
        return list(self._current)

    def mark_visited(self, url: str) -> None:
        """Move `url` out of the pending queues into the visited set.

        Called for every attempted URL, fetched or not, so a failed page is
        never queued again.
        """
        self._visited.add(url)
        # keep the three collections disjoint
        self._current.discard(url)
        self._next.discard(url)

    def record_visit(self) -> int:
        self.visited_count += 1
        return self.visited_count

    def advance_level(self) -> int:
        self.level += 1
        return self.level

    @property
    def visited(self) -> list[str]:
        return list(self._visited)

    @property
    def current_level(self) -> list[str]:
        return list(self._current)

    @property
    def next_level(self) -> list[str]:
        return list(self._next)

    @property
    def has_next_level(self) -> bool:
        return bool(self._next)
