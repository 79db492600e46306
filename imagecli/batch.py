"""
Batch comparison over a job table.

Each data row is compared independently. Failures are recorded per row and
the remaining rows still run, unless fail_fast is set, in which case the
first failure in row order is raised and nothing is returned.

With workers > 1 rows are spread over a process pool. Results land in
pre-sized slots keyed by row index, so completion order never changes the
output order.
"""

import multiprocessing as mp
from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm

from .config import ERROR_CELL, RESULT_COLUMNS, resolve_workers
from .errors import ImageCompareError
from .job_table import JobTable
from .scorer import ComparisonResult, compare_images


@dataclass(frozen=True)
class RowOutcome:
    """Result or error for one data row."""

    index: int
    path_a: str
    path_b: str
    result: Optional[ComparisonResult] = None
    error: Optional[ImageCompareError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def cells(self) -> tuple[str, str]:
        if self.error is not None:
            return ERROR_CELL, str(self.error)
        return self.result.score_cells()


@dataclass
class BatchReport:
    """Output table plus one outcome per data row, in input order."""

    table: JobTable
    outcomes: list[RowOutcome]

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.ok)

    @property
    def compared(self) -> int:
        return len(self.outcomes) - self.failed

    def errors(self) -> list[RowOutcome]:
        return [o for o in self.outcomes if not o.ok]


def compare_row(task: tuple[int, str, str]) -> RowOutcome:
    """Compare one (index, path_a, path_b) task. Module level so it pickles."""
    index, path_a, path_b = task
    try:
        result = compare_images(path_a, path_b)
    except ImageCompareError as e:
        return RowOutcome(index, path_a, path_b, error=e)
    return RowOutcome(index, path_a, path_b, result=result)


def list_pairs(table: JobTable) -> list[tuple[str, str]]:
    """The (image A, image B) pairs compare would process, in row order."""
    return table.pairs()


def _run_serial(tasks, fail_fast: bool, progress) -> list[RowOutcome]:
    outcomes = []
    for task in tasks:
        outcome = compare_row(task)
        if fail_fast and not outcome.ok:
            raise outcome.error
        outcomes.append(outcome)
        progress.update(1)
    return outcomes


def _run_pool(tasks, workers: int, fail_fast: bool, progress) -> list[RowOutcome]:
    slots: list[Optional[RowOutcome]] = [None] * len(tasks)

    with mp.Pool(workers) as pool:
        for outcome in pool.imap_unordered(compare_row, tasks):
            slots[outcome.index] = outcome
            progress.update(1)

    if fail_fast:
        # Report the earliest failing row, as a serial run would have
        for outcome in slots:
            if not outcome.ok:
                raise outcome.error
    return slots


def compare_rows(
    table: JobTable,
    workers: int = 1,
    fail_fast: bool = False,
    show_progress: bool = True,
) -> BatchReport:
    """
    Compare every data row of a job table.

    Returns a new table: the header gains "Similar" and "Elapsed", every data
    row gains a score cell and an elapsed-ms cell (or ERROR and the message).
    The input table is not modified.
    """
    tasks = [(i, row[0], row[1]) for i, row in enumerate(table.rows)]
    workers = min(resolve_workers(workers), max(1, len(tasks)))

    with tqdm(total=len(tasks), desc="Comparing images", unit="pair", disable=not show_progress) as progress:
        if workers == 1:
            outcomes = _run_serial(tasks, fail_fast, progress)
        else:
            outcomes = _run_pool(tasks, workers, fail_fast, progress)

    out = JobTable(
        header=list(table.header) + list(RESULT_COLUMNS),
        rows=[list(row) + list(o.cells()) for row, o in zip(table.rows, outcomes)],
    )
    return BatchReport(table=out, outcomes=outcomes)
