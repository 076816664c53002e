#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
This module is the command line entry point for sidus, a converter
for Yale Bright Star type catalogs.

    sidus -c -s -m -f6 BSC5 > bsc5.h
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from Sidus import __version__
from Sidus.catalog import convert, read_catalog
from Sidus.config import Config
from Sidus.errors import CatalogError
from Sidus.logconf import configure_logging

logger = logging.getLogger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sidus",
        description="Convert Yale Bright Star type catalogs to CSV text or a C header",
    )
    parser.add_argument("input_file", help="Binary catalog file")
    parser.add_argument(
        "-a",
        "--apparent-magnitude",
        help="Specify apparent magnitude, if multiple exist",
        type=int,
        choices=range(10),
        metavar="0-9",
        default=None,
    )
    parser.add_argument(
        "-f",
        "--filter",
        help="Filter magnitudes weaker than specified",
        dest="filter_magnitude",
        type=float,
        default=None,
    )
    parser.add_argument(
        "-B1950",
        help="Expect B1950 epoch",
        dest="epoch",
        action="store_const",
        const="B1950",
        default=None,
    )
    parser.add_argument(
        "-J2000",
        help="Expect J2000 epoch",
        dest="epoch",
        action="store_const",
        const="J2000",
    )
    parser.add_argument(
        "-le",
        help="Expect little-endian format",
        dest="endian",
        action="store_const",
        const="little",
        default=None,
    )
    parser.add_argument(
        "-be",
        help="Expect big-endian format",
        dest="endian",
        action="store_const",
        const="big",
    )
    parser.add_argument(
        "-c",
        "--c-header",
        help="Output a C header instead of a CSV text",
        dest="output_format",
        action="store_const",
        const="c",
        default=None,
    )
    parser.add_argument(
        "-s",
        "--single",
        help="Output single-precision floating point",
        dest="precision",
        action="store_const",
        const="single",
        default=None,
    )
    parser.add_argument(
        "-i",
        "--info",
        help="Output only information from catalog header",
        dest="info_only",
        action="store_const",
        const=True,
        default=None,
    )
    sort_group = parser.add_mutually_exclusive_group()
    sort_group.add_argument(
        "-m",
        "--sort-magnitude",
        help="Sort output by magnitude, brightest first",
        dest="sort",
        action="store_const",
        const="magnitude",
        default=None,
    )
    sort_group.add_argument(
        "-r",
        "--sort-ra",
        help="Sort output by increasing right-ascension",
        dest="sort",
        action="store_const",
        const="ra",
    )
    parser.add_argument(
        "-n",
        "--names",
        help="Output star names",
        action="store_const",
        const=True,
        default=None,
    )
    parser.add_argument(
        "-p",
        "--spectral-type",
        help="Output spectral class",
        action="store_const",
        const=True,
        default=None,
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write output to this file instead of stdout",
        type=Path,
        default=None,
    )
    parser.add_argument(
        "--config",
        help="JSON file with default options",
        type=Path,
        default=None,
    )
    parser.add_argument(
        "-x", "--verbose", help="Set logging to debug mode", action="store_true"
    )
    parser.add_argument("--log", help="Log to file", action="store_true")
    parser.add_argument(
        "--log-conf",
        help="JSON5 logging configuration file",
        type=Path,
        default=None,
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"sidus v{__version__}"
    )
    return parser


def run(args: argparse.Namespace) -> int:
    try:
        options = Config(args.config).resolve(
            apparent_magnitude=args.apparent_magnitude,
            filter_magnitude=args.filter_magnitude,
            epoch=args.epoch,
            endian=args.endian,
            output_format=args.output_format,
            precision=args.precision,
            sort=args.sort,
            names=args.names,
            spectral_type=args.spectral_type,
            info_only=args.info_only,
        )
    except (ValueError, OSError) as e:
        logger.debug("Invalid configuration", exc_info=True)
        print(f"sidus: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Resolved options: {options}")

    try:
        data = read_catalog(Path(args.input_file))
        result = convert(data, args.input_file, options)
    except CatalogError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"sidus: {e}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(result)
        return 0

    try:
        with open(args.output, "w") as f:
            f.write(result)
    except OSError as e:
        print(f"sidus: {args.output}: {e.strerror}", file=sys.stderr)
        return 1
    logger.info(f"Wrote {args.output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_conf, verbose=args.verbose, log_to_file=args.log)
    except (FileNotFoundError, ValueError) as e:
        print(f"sidus: {e}", file=sys.stderr)
        return 1
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
