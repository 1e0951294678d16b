import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from termcrawl.domain.visit_record import VisitRecord
from termcrawl.exceptions import RawTableReadError, TopCountExceededError
from termcrawl.services.record_sink import write_table

logger = logging.getLogger(__name__)


def by_total_descending(record: VisitRecord) -> int:
    """Sort key: highest total first when used with a stable ascending sort."""
    return -record.total


class TopRanker:
    """Re-reads the raw table and produces the top-N pages by total term hits.

    Ties keep their raw-table order because Python's sort is stable.
    """

    def __init__(self, order_key: Callable[[VisitRecord], int] = by_total_descending, report_stream: Optional[TextIO] = None):
        self.order_key = order_key
        self.report_stream = report_stream

    def load(self, path: str, has_header: bool) -> list[VisitRecord]:
        """Parse every data line of the raw table at `path`."""
        records: list[VisitRecord] = []
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line_no, line in enumerate(f, start=1):
                    if has_header and line_no == 1:
                        continue
                    if not line.strip():
                        continue
                    try:
                        records.append(VisitRecord.from_line(line))
                    except ValueError as e:
                        raise RawTableReadError(path, str(e), line_no) from e
        except OSError as e:
            raise RawTableReadError(path, str(e)) from e
        logger.debug("Loaded %s records from %s", len(records), path)
        return records

    def rank(self, records: Sequence[VisitRecord], top_n: int) -> list[VisitRecord]:
        """Return the first `top_n` records ordered by total, descending."""
        if top_n > len(records):
            raise TopCountExceededError(top_n, len(records))
        return sorted(records, key=self.order_key)[:top_n]

    def publish(self, raw_path: str, top_path: str, top_n: int, header: Optional[str] = None) -> list[VisitRecord]:
        """Load, rank, write the top table and echo its lines to the report stream."""
        records = self.load(raw_path, has_header=header is not None)
        top = self.rank(records, top_n)
        write_table(top_path, top, header)
        stream = self.report_stream or sys.stdout
        for record in top:
            line = record.to_line()
            stream.write(line + "\n")
            logger.info("Top page %s total=%s", record.url, record.total)
        stream.flush()
        return top
