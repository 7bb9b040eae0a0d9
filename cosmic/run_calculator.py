#!/usr/bin/env python3
"""
Cosmology calculator command line.

Prints distance measures for one cosmology at one or more redshifts:
- a human-readable report per redshift (default)
- a tab- or comma-separated table
- JSON records

Usage:
    python -m cosmic.run_calculator [--H0 71] [--omega-m 0.27] [--omega-lambda 0.73]
                                    [--format report|txt|csv|json] z [z ...]
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .batch import BatchFormat, format_batch, parse_redshifts
from .cosmology import Cosmology
from .parameters import ParameterSet
from .utils.constants import WMAP_2003
from .utils.numerics import FormatError, NumericDomainError, RangeError


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser."""
    parser = argparse.ArgumentParser(
        description='Compute cosmological distances, times and scales'
    )
    parser.add_argument(
        'redshifts',
        nargs='*',
        default=['0.1'],
        help='Source redshifts (default: 0.1)'
    )
    parser.add_argument(
        '--H0',
        type=float,
        default=WMAP_2003.H0,
        help='Hubble constant in km/s/Mpc'
    )
    parser.add_argument(
        '--omega-m', '-m',
        type=float,
        default=WMAP_2003.Omega_m,
        help='Matter density Omega_m'
    )
    parser.add_argument(
        '--omega-lambda', '-l',
        type=float,
        default=WMAP_2003.Omega_Lambda,
        help='Vacuum energy density Omega_Lambda'
    )
    parser.add_argument(
        '--format', '-f',
        choices=['report', 'txt', 'csv', 'json'],
        default='report',
        help='Output format'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug messages'
    )
    return parser


def render(
    H0: float,
    Omega_m: float,
    Omega_Lambda: float,
    redshifts: Sequence[float],
    output_format: str = 'report',
) -> str:
    """Render the requested output as a single string."""
    if output_format in ('txt', 'csv'):
        params = ParameterSet(H0, Omega_m, Omega_Lambda)
        lines = format_batch(params, redshifts, BatchFormat.from_suffix(output_format))
        return "\n".join(lines)

    cosmo = Cosmology(H0, Omega_m, Omega_Lambda)

    if output_format == 'json':
        results = {
            'parameters': {
                'H0': cosmo.H0,
                'Omega_m': cosmo.Omega_m,
                'Omega_Lambda': cosmo.Omega_Lambda,
                'Omega_k': cosmo.Omega_k,
                'q0': cosmo.q0,
                'age_s': cosmo.age,
            },
            'records': [],
        }
        for z in redshifts:
            cosmo.redshift = z
            results['records'].append(cosmo.record.as_dict())
        return json.dumps(results, indent=2)

    reports = []
    for z in redshifts:
        cosmo.redshift = z
        reports.append(str(cosmo))
    return "\n\n".join(reports)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        redshifts = parse_redshifts(args.redshifts)
        output = render(
            args.H0,
            args.omega_m,
            args.omega_lambda,
            redshifts,
            args.format,
        )
    except (FormatError, RangeError, NumericDomainError) as e:
        logger.debug("Rejected input", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
