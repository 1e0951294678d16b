from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

FIELD_SEPARATOR = ","
ENCODED_SEPARATOR = "%2C"


def encode_url(url: str) -> str:
    """Percent-encode commas so the URL fits in one raw table field."""
    return url.replace(FIELD_SEPARATOR, ENCODED_SEPARATOR)


@dataclass(frozen=True)
class VisitRecord:
    """Term counts for one successfully fetched page.

    `counts` follows the configured term order. One record is produced per
    visited page and written once to the raw table. The URL is held in its
    table form (commas as `%2C`) and is never decoded, so a parsed line gives
    back the same record that was written.
    """

    url: str
    counts: tuple[int, ...]

    @classmethod
    def of(cls, url: str, counts: Sequence[int]) -> "VisitRecord":
        return cls(url=encode_url(url), counts=tuple(int(c) for c in counts))

    @property
    def total(self) -> int:
        return sum(self.counts)

    def to_line(self) -> str:
        """Render as a raw table line: `<url>,<count1>,<count2>,...`."""
        return FIELD_SEPARATOR.join([encode_url(self.url), *(str(c) for c in self.counts)])

    @classmethod
    def from_line(cls, line: str) -> "VisitRecord":
        """Parse a raw table line. Raises ValueError on malformed input."""
        fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
        if len(fields) < 2 or not fields[0]:
            raise ValueError(f"expected '<url>,<count>,...' but got {line!r}")
        counts = tuple(int(f) for f in fields[1:])
        return cls(url=fields[0], counts=counts)
