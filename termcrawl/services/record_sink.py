import logging
from pathlib import Path
from typing import IO, Iterable, Optional

from termcrawl.domain.visit_record import VisitRecord
from termcrawl.exceptions import RecordSinkError

logger = logging.getLogger(__name__)


class RawTableSink:
    """Append-only writer for the raw statistics table.

    Opening truncates the file and writes the optional header. Every record is
    flushed as soon as it is written so a crash mid-crawl loses nothing that
    was already counted.
    """

    def __init__(self, path: str, header: Optional[str] = None):
        self.path = path
        self.header = header
        self._fh: Optional[IO[str]] = None
        self.records_written = 0

    def open(self) -> "RawTableSink":
        try:
            self._fh = open(self.path, "w", encoding="utf-8", newline="\n")
            if self.header is not None:
                self._fh.write(self.header + "\n")
                self._fh.flush()
        except OSError as e:
            raise RecordSinkError(f"Can't write to file: {self.path}") from e
        return self

    def write(self, record: VisitRecord) -> None:
        if self._fh is None or self._fh.closed:
            raise RecordSinkError(f"Raw table {self.path} is not open for writing")
        try:
            self._fh.write(record.to_line() + "\n")
            self._fh.flush()
        except OSError as e:
            raise RecordSinkError(f"Can't write to file: {self.path}") from e
        self.records_written += 1

    def close(self) -> None:
        if self._fh is not None and not self._fh.closed:
            self._fh.close()
            logger.debug("Closed raw table %s after %s records", self.path, self.records_written)

    @property
    def closed(self) -> bool:
        return self._fh is None or self._fh.closed

    def __enter__(self) -> "RawTableSink":
        if self.closed:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def write_table(path: str, records: Iterable[VisitRecord], header: Optional[str] = None) -> None:
    """Write a complete table (used for the top-N output) in raw table line shape."""
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            if header is not None:
                f.write(header + "\n")
            for record in records:
                f.write(record.to_line() + "\n")
    except OSError as e:
        raise RecordSinkError(f"Can't write to file: {path}") from e
