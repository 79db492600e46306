"""
Image CLI: compare the image pairs listed in a job table.

Usage:
    imagecli --path jobs.csv list       # Show the pairs that would be compared
    imagecli --path jobs.csv compare    # Compare and write jobs.csvresults.csv
    imagecli --path jobs.csv c --workers 0 --fail-fast

The job table is space-delimited with a header row; columns 0 and 1 hold the
two image paths. Results are written to the job table path with
"results.csv" appended.
"""

import argparse
import sys

from .batch import compare_rows, list_pairs
from .config import DEFAULT_WORKERS, VERSION
from .errors import ImageCompareError
from .job_table import read_job_table, results_path, write_job_table

MAX_ERRORS_SHOWN = 20


def run_compare(args: argparse.Namespace) -> int:
    """Compare all rows and write the results table."""
    table = read_job_table(args.path)
    out_path = results_path(args.path)

    print("=" * 70)
    print("IMAGE COMPARISON")
    print("=" * 70)
    print()
    print(f"Job table: {args.path}")
    print(f"Found {len(table.rows):,} pairs to compare")
    print()

    report = compare_rows(
        table,
        workers=args.workers,
        fail_fast=args.fail_fast,
        show_progress=not args.quiet,
    )
    write_job_table(out_path, report.table)

    print()
    print("=" * 70)
    print("COMPARISON COMPLETE")
    print("=" * 70)
    print()
    print(f"Pairs compared:  {report.compared:,}")
    print(f"Pairs failed:    {report.failed:,}")
    print(f"Results:         {out_path}")

    failures = report.errors()
    if failures:
        print(f"\nError summary (first {MAX_ERRORS_SHOWN}):", file=sys.stderr)
        for outcome in failures[:MAX_ERRORS_SHOWN]:
            print(f"  row {outcome.index + 1}: Error: {outcome.error}", file=sys.stderr)
        if len(failures) > MAX_ERRORS_SHOWN:
            print(f"  ... and {len(failures) - MAX_ERRORS_SHOWN} more", file=sys.stderr)
        return 1

    print()
    return 0


def run_list(args: argparse.Namespace) -> int:
    """Print the pairs that compare would process."""
    table = read_job_table(args.path)
    for path_a, path_b in list_pairs(table):
        print(f"{path_a} comparing with {path_b}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imagecli",
        description="Image CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--path", required=True,
        help="Required path to csv file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser(
        "compare", aliases=["c"],
        help="Use this to compare the files listed in the csv",
    )
    compare.add_argument(
        "--workers", type=int, default=DEFAULT_WORKERS,
        help="Worker processes (default: %(default)s, 0 = one per spare CPU)",
    )
    compare.add_argument(
        "--fail-fast", action="store_true",
        help="Stop at the first row that fails and write no results",
    )
    compare.add_argument(
        "--quiet", action="store_true",
        help="Hide the progress bar",
    )
    compare.set_defaults(func=run_compare)

    listing = subparsers.add_parser(
        "list", aliases=["l"],
        help="List files that will be compared",
    )
    listing.set_defaults(func=run_list)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "workers", 0) < 0:
        parser.error("--workers must be >= 0")

    try:
        return args.func(args)
    except ImageCompareError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
