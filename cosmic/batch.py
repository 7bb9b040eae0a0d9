"""Batch tables: many redshifts for one cosmology.

Input is plain text with one redshift per line. Output is a header
(parameter summary and column names) followed by one row per redshift, in
input order. Tab-separated tables mark the header lines with a leading
"# "; comma-separated tables have no marker.

Only text is handled here; reading and writing files is left to the caller.
"""

from enum import Enum
from typing import Iterable

import numpy as np

from .distances import DistanceCalculator
from .formatting import format_header, format_row, show_transverse
from .parameters import ParameterSet, check_range
from .utils.numerics import FormatError


class BatchFormat(Enum):
    """Output table layouts as (separator, header leader)."""

    TXT = ("\t", "# ")
    CSV = (",", "")

    def __init__(self, separator: str, leader: str):
        self.separator = separator
        self.leader = leader

    @classmethod
    def from_suffix(cls, suffix: str) -> "BatchFormat":
        """Pick the format for a file suffix such as '.txt' or 'csv'."""
        key = suffix.lower().lstrip(".")
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown batch format: {suffix!r}; use .txt or .csv") from None


def parse_redshifts(lines: Iterable[str]) -> list[float]:
    """Read one redshift per line.

    Blank lines are skipped. Line numbers in errors count from 1.

    Raises:
        FormatError: If a line is not a finite number
        RangeError: If a redshift is negative
    """
    redshifts = []
    for line_number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            continue
        try:
            z = float(text)
        except ValueError:
            raise FormatError(line_number, text) from None
        if not np.isfinite(z):
            raise FormatError(line_number, text)
        redshifts.append(check_range("redshift", z))
    return redshifts


def format_batch(
    params: ParameterSet,
    redshifts: Iterable[float],
    fmt: BatchFormat = BatchFormat.TXT,
) -> list[str]:
    """Format a table of quantities for each redshift.

    The d_T column appears in the header and in every row when any
    redshift has a transverse distance different from its comoving
    distance, so all rows share the header's columns.

    Returns:
        Lines without terminators: two header lines, then one row per redshift
    """
    calculator = DistanceCalculator(params)
    flat_tol = params.config.flat_tol

    records = [calculator.compute(z) for z in redshifts]
    include_transverse = any(show_transverse(r, flat_tol) for r in records)
    first = records[0] if records else calculator.compute(0.0)

    header = format_header(
        params, first, fmt.leader, fmt.separator, flat_tol, include_transverse
    )
    lines = header.split("\n")
    lines += [
        format_row(params, record, fmt.separator, flat_tol, include_transverse)
        for record in records
    ]
    return lines
