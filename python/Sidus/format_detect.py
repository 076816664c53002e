#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Byte order and epoch detection for catalog headers

The format has no dedicated flags for either. Byte order is probed
by checking which interpretation gives a sane magnitude count, and
the epoch is carried by the sign bits of the star count and the
magnitude count fields.
"""

import logging
from enum import Enum
from typing import Tuple

from Sidus.byte_reader import read_int32
from Sidus.errors import (
    AmbiguousFormat,
    EpochMismatch,
    TruncatedInput,
    WrongEndianness,
)

logger = logging.getLogger("Sidus.FormatDetect")

HEADER_SIZE = 28
STAR_COUNT_OFFSET = 8
MAGNITUDE_COUNT_OFFSET = 20

# More magnitudes per star than this means the bytes are read in the wrong order
MAX_MAGNITUDE_COUNT = 10


class Epoch(Enum):
    AUTO = "auto"
    J2000 = "J2000"
    B1950 = "B1950"


class Endian(Enum):
    AUTO = "auto"
    LITTLE = "little"
    BIG = "big"


def _probe_magnitude_count(data: bytes, little_endian: bool) -> int:
    return read_int32(data, MAGNITUDE_COUNT_OFFSET, little_endian)


def detect_byte_order(data: bytes, endian: Endian = Endian.AUTO) -> bool:
    """
    Returns True for little-endian, False for big-endian
    """
    if len(data) < HEADER_SIZE:
        raise TruncatedInput(
            f"no header: {len(data)} bytes, need at least {HEADER_SIZE}"
        )

    if endian == Endian.AUTO:
        nmag = _probe_magnitude_count(data, True)
        if abs(nmag) <= MAX_MAGNITUDE_COUNT:
            return True
        nmag_be = _probe_magnitude_count(data, False)
        if abs(nmag_be) <= MAX_MAGNITUDE_COUNT:
            return False
        raise AmbiguousFormat(
            "invalid header, magnitude count is "
            f"{nmag} as little-endian and {nmag_be} as big-endian"
        )

    little_endian = endian == Endian.LITTLE
    nmag = _probe_magnitude_count(data, little_endian)
    if abs(nmag) > MAX_MAGNITUDE_COUNT:
        other = "big-endian" if little_endian else "little-endian"
        raise WrongEndianness(
            f"invalid header (magnitude count {nmag}), maybe try {other}?"
        )
    return little_endian


def detect_format(
    data: bytes, epoch: Epoch = Epoch.AUTO, endian: Endian = Endian.AUTO
) -> Tuple[bool, Epoch]:
    """
    Resolve the effective (little_endian, epoch) of a catalog.

    Args:
        data: raw catalog bytes, at least the 28 byte header
        epoch: expected epoch or Epoch.AUTO
        endian: expected byte order or Endian.AUTO

    Raises:
        TruncatedInput, AmbiguousFormat, WrongEndianness, EpochMismatch
    """
    little_endian = detect_byte_order(data, endian)

    star_count = read_int32(data, STAR_COUNT_OFFSET, little_endian)
    nmag = _probe_magnitude_count(data, little_endian)
    found = Epoch.J2000 if star_count < 0 or nmag < 0 else Epoch.B1950

    if epoch != Epoch.AUTO and epoch != found:
        raise EpochMismatch(
            f"expected {epoch.value} epoch but found {found.value} epoch"
        )

    logger.debug(
        f"Detected {'little' if little_endian else 'big'}-endian, {found.value}"
    )
    return little_endian, found
