import re
from typing import Sequence


class TermCounter:
    """Counts non-overlapping regex matches of each configured term in page text."""

    def __init__(self, terms: Sequence[str], case_sensitive: bool = False):
        flags = 0 if case_sensitive else re.IGNORECASE
        self.terms = tuple(terms)
        self._patterns = [re.compile(term, flags) for term in self.terms]

    def count(self, text: str) -> tuple[int, ...]:
        """Return one count per term, in configured order."""
        text = text or ""
        return tuple(sum(1 for _ in pattern.finditer(text)) for pattern in self._patterns)
