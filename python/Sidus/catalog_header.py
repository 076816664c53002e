#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Decoding of the 28 byte catalog preamble

Layout (int32 fields, byte order resolved by format_detect):
    0   reserved
    4   reserved
    8   star count, negative for J2000
    12  star id spec, <0 means names of -value bytes, 0-4 the id kind
    16  proper motion flag, 0 none, 1 proper motion, 2 radial velocity
    20  magnitude count, negative for J2000
    24  bytes per star record

See http://tdc-www.harvard.edu/catalogs/catalogsb.html
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from Sidus.byte_reader import read_int32
from Sidus.errors import InvalidHeader, TooFewMagnitudes, TruncatedInput
from Sidus.format_detect import (
    HEADER_SIZE,
    MAGNITUDE_COUNT_OFFSET,
    STAR_COUNT_OFFSET,
    Endian,
    Epoch,
    detect_format,
)

logger = logging.getLogger("Sidus.CatalogHeader")

ID_SPEC_OFFSET = 12
MOTION_OFFSET = 16
STRIDE_OFFSET = 24


class IdKind(IntEnum):
    NONE = 0
    CATALOG = 1
    GSC = 2
    TYCHO = 3
    INTEGER = 4


class MotionKind(IntEnum):
    NONE = 0
    PROPER_MOTION = 1
    RADIAL_VELOCITY = 2


ID_DESCRIPTIONS = {
    IdKind.NONE: "No",
    IdKind.CATALOG: "Catalog star id",
    IdKind.GSC: "GSC star id",
    IdKind.TYCHO: "Tycho star id",
    IdKind.INTEGER: "Integer star id",
}

MOTION_DESCRIPTIONS = {
    MotionKind.NONE: "No",
    MotionKind.PROPER_MOTION: "Yes",
    MotionKind.RADIAL_VELOCITY: "Radial velocity",
}


@dataclass(frozen=True)
class CatalogHeader:
    star_count: int
    id_kind: IdKind
    name_length: int
    motion_kind: MotionKind
    magnitude_count: int
    apparent_magnitude: int
    bytes_per_record: int
    epoch: Epoch
    little_endian: bool

    @property
    def has_names(self) -> bool:
        return self.name_length > 0

    @property
    def data_size(self) -> int:
        """Size in bytes of header plus all records"""
        return HEADER_SIZE + self.star_count * self.bytes_per_record


def _id_kind(stnum: int):
    if stnum < 0:
        return IdKind.NONE, -stnum
    try:
        return IdKind(stnum), 0
    except ValueError:
        raise InvalidHeader(f"unknown star id kind {stnum}") from None


def _motion_kind(mprop: int) -> MotionKind:
    try:
        return MotionKind(mprop)
    except ValueError:
        raise InvalidHeader(f"unknown proper motion flag {mprop}") from None


def decode_header(
    data: bytes,
    epoch: Epoch = Epoch.AUTO,
    endian: Endian = Endian.AUTO,
    apparent_magnitude: Optional[int] = None,
) -> CatalogHeader:
    """
    Decode and sanity check the catalog header.

    apparent_magnitude selects which of the per star magnitudes is
    kept, None means the last one. Larger indices are clamped.
    """
    little_endian, found_epoch = detect_format(data, epoch, endian)

    starn = read_int32(data, STAR_COUNT_OFFSET, little_endian)
    stnum = read_int32(data, ID_SPEC_OFFSET, little_endian)
    mprop = read_int32(data, MOTION_OFFSET, little_endian)
    nmag = read_int32(data, MAGNITUDE_COUNT_OFFSET, little_endian)
    nbent = read_int32(data, STRIDE_OFFSET, little_endian)

    id_kind, name_length = _id_kind(stnum)
    motion_kind = _motion_kind(mprop)
    if nbent < 0:
        raise InvalidHeader(f"negative bytes per star: {nbent}")

    magnitude_count = abs(nmag)
    if magnitude_count < 1:
        raise TooFewMagnitudes(
            f"expected at least one magnitude per star, found: {magnitude_count}"
        )

    if apparent_magnitude is None:
        apparent_magnitude = magnitude_count - 1
    elif apparent_magnitude < 0:
        raise ValueError(f"apparent magnitude index must be >= 0: {apparent_magnitude}")
    else:
        apparent_magnitude = min(apparent_magnitude, magnitude_count - 1)

    header = CatalogHeader(
        star_count=abs(starn),
        id_kind=id_kind,
        name_length=name_length,
        motion_kind=motion_kind,
        magnitude_count=magnitude_count,
        apparent_magnitude=apparent_magnitude,
        bytes_per_record=nbent,
        epoch=found_epoch,
        little_endian=little_endian,
    )

    if header.data_size > len(data):
        raise TruncatedInput(
            f"number of stars: {header.star_count}, "
            f"bytes per star: {header.bytes_per_record}, "
            f"{len(data)} < {header.data_size}, file too short"
        )

    logger.debug(f"Decoded header: {header}")
    return header


def header_summary(header: CatalogHeader) -> str:
    return (
        "Catalog information:\n"
        f" Number of stars: {header.star_count}\n"
        f" Id: {ID_DESCRIPTIONS[header.id_kind]}\n"
        f" Names: {'Yes' if header.has_names else 'No'}\n"
        f" Proper motion: {MOTION_DESCRIPTIONS[header.motion_kind]}\n"
        f" Number of magnitudes: {header.magnitude_count}\n"
        f" Epoch: {header.epoch.value}\n"
        f" Bytes per star: {header.bytes_per_record}\n"
    )
