#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Catalog conversion: header -> star records -> selection -> output

Usage:
    data = read_catalog(Path("BSC5"))
    text = convert(data, "BSC5", ConvertOptions())
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Tuple

from Sidus.catalog_header import CatalogHeader, decode_header, header_summary
from Sidus.config import ConvertOptions
from Sidus.errors import CatalogIOError, TruncatedInput
from Sidus.pipeline import select_stars
from Sidus.serializers import serialize
from Sidus.star_record import StarRecord, iter_stars
from Sidus.utils import Timer

logger = logging.getLogger("Sidus.Catalog")


def read_catalog(path: Path) -> bytes:
    """
    Read a whole catalog file into memory
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise CatalogIOError(f"{path}: failed to read file ({e.strerror})") from e
    if not data:
        raise TruncatedInput(f"{path}: empty")
    logger.info(f"Read {len(data):,} bytes from {path}")
    return data


def load_header(data: bytes, options: ConvertOptions) -> CatalogHeader:
    return decode_header(
        data,
        epoch=options.epoch,
        endian=options.endian,
        apparent_magnitude=options.apparent_magnitude,
    )


def load_stars(
    data: bytes, options: ConvertOptions
) -> Tuple[CatalogHeader, List[Tuple[int, StarRecord]]]:
    """
    Decode, filter and order all stars of a catalog
    """
    header = load_header(data, options)
    with Timer("decode stars"):
        stars = select_stars(
            iter_stars(data, header),
            filter_magnitude=options.filter_magnitude,
            sort=options.sort,
        )
    return header, stars


def convert(data: bytes, input_name: str, options: ConvertOptions) -> str:
    """
    Convert catalog bytes to the configured output, or to the header
    summary when options.info_only is set
    """
    if options.info_only:
        return header_summary(load_header(data, options))

    header, stars = load_stars(data, options)

    output = options.output
    if output.names and not header.has_names:
        logger.info("Catalog has no star names, not writing names")
        output = replace(output, names=False)

    return serialize(stars, output, input_name, header.epoch)
