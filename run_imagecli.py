#!/usr/bin/env -S uv run --script
# /// script
# requires-python = '>=3.11'
# dependencies = [
#   "pillow",
#   "imagehash",
#   "numpy",
#   "tqdm"
# ]
# ///
"""
Image CLI runner.

Usage:
    ./run_imagecli.py --path jobs.csv compare   # Compare pairs, write jobs.csvresults.csv
    ./run_imagecli.py --path jobs.csv list      # List pairs that will be compared
"""

import sys

from imagecli.cli import main

if __name__ == "__main__":
    sys.exit(main())
