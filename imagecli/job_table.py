"""Reading and writing space-delimited job tables."""

import csv
import os
from dataclasses import dataclass, field
from pathlib import Path

from .config import DELIMITER, RESULTS_SUFFIX
from .errors import JobTableUnreadable, ResultsWriteError


@dataclass
class JobTable:
    """A header row plus data rows of string cells."""

    header: list[str]
    rows: list[list[str]] = field(default_factory=list)

    def pairs(self) -> list[tuple[str, str]]:
        """(image A, image B) for each data row, in order."""
        return [(row[0], row[1]) for row in self.rows]

    def all_rows(self) -> list[list[str]]:
        return [self.header] + self.rows


def _expand(path) -> str:
    return os.path.expanduser(str(path))


def _trim(row: list[str]) -> list[str]:
    """Drop empty cells left by trailing spaces."""
    while row and row[-1] == "":
        row.pop()
    return row


def _reader(f):
    return csv.reader(f, delimiter=DELIMITER, quotechar='"', skipinitialspace=True, strict=True)


def read_job_table(path) -> JobTable:
    """
    Load a job table.

    The first non-blank row is the header and is not validated. Every data
    row needs at least two cells; extra cells are kept as-is. Empty cells
    from trailing spaces are dropped. A leading ~ is expanded.
    """
    path = Path(_expand(path))

    try:
        with open(path, newline="", encoding="utf-8") as f:
            rows = [row for row in map(_trim, _reader(f)) if row]
    except (OSError, UnicodeDecodeError) as e:
        raise JobTableUnreadable(str(path), str(e)) from e
    except csv.Error as e:
        raise JobTableUnreadable(str(path), f"malformed table: {e}") from e

    if not rows:
        raise JobTableUnreadable(str(path), "file has no header row")

    header, data = rows[0], rows[1:]
    for row_no, row in enumerate(data, start=1):
        if len(row) < 2:
            raise JobTableUnreadable(
                str(path), f"data row {row_no} has {len(row)} cell(s), need 2 image paths"
            )

    return JobTable(header=header, rows=data)


def write_job_table(path, table: JobTable) -> None:
    """Write a table in the same format read_job_table accepts."""
    try:
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, delimiter=DELIMITER, quotechar='"', lineterminator="\n")
            writer.writerows(table.all_rows())
    except OSError as e:
        raise ResultsWriteError(str(path), str(e)) from e


def results_path(path) -> str:
    """Results go next to the job table: the suffix is appended, not swapped in."""
    return _expand(path) + RESULTS_SUFFIX
