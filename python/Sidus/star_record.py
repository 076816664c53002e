#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Decoding of individual star records

Record layout, in order:
    star id         0 or 4 bytes, depending on header id kind
    ra              float64, radians
    dec             float64, radians
    spectral type   2 characters
    magnitudes      int16 * magnitude count, magnitude * 100
    motion          0 or 8 bytes, depending on header motion kind
    name            header name length characters, if any

Records are bytes_per_record apart, whatever the layout above adds
up to. Trailing bytes are padding.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Tuple

import numpy as np
from tqdm import tqdm

from Sidus.byte_reader import RecordCursor
from Sidus.catalog_header import CatalogHeader, IdKind, MotionKind
from Sidus.format_detect import HEADER_SIZE

logger = logging.getLogger("Sidus.StarRecord")


@dataclass(frozen=True)
class StarRecord:
    name: str
    right_ascension: float  # radians
    declination: float  # radians
    identifier: float
    magnitude: np.float32
    proper_motion_ra: np.float32  # radians per year
    proper_motion_dec: np.float32  # radians per year
    radial_velocity: float  # km/s
    spectral_type: str

    @property
    def is_blank(self) -> bool:
        """Catalogs pad unused slots with all zero entries"""
        return (
            self.magnitude == 0
            and self.right_ascension == 0
            and self.declination == 0
        )


_ZERO = np.float32(0.0)

# Star id kind -> reader for the id field
ID_READERS: Dict[IdKind, Callable[[RecordCursor], float]] = {
    IdKind.NONE: lambda cursor: 0.0,
    IdKind.CATALOG: RecordCursor.float32,
    IdKind.GSC: RecordCursor.float32,
    IdKind.TYCHO: RecordCursor.float32,
    IdKind.INTEGER: lambda cursor: float(cursor.int32()),
}


def _no_motion(cursor: RecordCursor) -> Tuple[np.float32, np.float32, float]:
    return _ZERO, _ZERO, 0.0


def _proper_motion(cursor: RecordCursor) -> Tuple[np.float32, np.float32, float]:
    pm_ra = np.float32(cursor.float32())
    pm_dec = np.float32(cursor.float32())
    return pm_ra, pm_dec, 0.0


def _radial_velocity(cursor: RecordCursor) -> Tuple[np.float32, np.float32, float]:
    return _ZERO, _ZERO, cursor.float64()


# Motion kind -> reader returning (pm ra, pm dec, radial velocity)
MOTION_READERS: Dict[
    MotionKind, Callable[[RecordCursor], Tuple[np.float32, np.float32, float]]
] = {
    MotionKind.NONE: _no_motion,
    MotionKind.PROPER_MOTION: _proper_motion,
    MotionKind.RADIAL_VELOCITY: _radial_velocity,
}


def _read_magnitude(cursor: RecordCursor, header: CatalogHeader) -> np.float32:
    mag = 0
    for i in range(header.magnitude_count):
        if i == header.apparent_magnitude:
            mag = cursor.int16()
        else:
            cursor.skip(2)
    return np.float32(mag) / np.float32(100.0)


def _read_name(cursor: RecordCursor, length: int) -> str:
    if length <= 0:
        return ""
    raw = cursor.raw(length)
    return raw.split(b"\x00", 1)[0].decode("ascii", errors="replace")


def decode_star(data: bytes, offset: int, header: CatalogHeader) -> StarRecord:
    """
    Decode the record starting at offset.

    Raises RecordOverrun if the layout described by the header does
    not fit in bytes_per_record.
    """
    cursor = RecordCursor(data, offset, header.bytes_per_record, header.little_endian)

    identifier = ID_READERS[header.id_kind](cursor)
    ra = cursor.float64()
    dec = cursor.float64()
    spectral_type = cursor.raw(2).decode("latin-1")
    magnitude = _read_magnitude(cursor, header)
    pm_ra, pm_dec, radial_velocity = MOTION_READERS[header.motion_kind](cursor)
    name = _read_name(cursor, header.name_length)

    return StarRecord(
        name=name,
        right_ascension=ra,
        declination=dec,
        identifier=identifier,
        magnitude=magnitude,
        proper_motion_ra=pm_ra,
        proper_motion_dec=pm_dec,
        radial_velocity=radial_velocity,
        spectral_type=spectral_type,
    )


def iter_stars(data: bytes, header: CatalogHeader) -> Iterator[Tuple[int, StarRecord]]:
    """
    Yield (index, star) for every record declared by the header
    """
    offset = HEADER_SIZE
    for index in tqdm(
        range(header.star_count), desc="Decoding stars", leave=False, disable=None
    ):
        yield index, decode_star(data, offset, header)
        offset += header.bytes_per_record
    logger.debug(f"Decoded {header.star_count} star records")
