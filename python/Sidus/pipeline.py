#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Filtering and ordering of decoded stars before output
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple

import numpy as np

from Sidus.star_record import StarRecord

logger = logging.getLogger("Sidus.Pipeline")


class SortOrder(Enum):
    NONE = "none"
    MAGNITUDE = "magnitude"
    RIGHT_ASCENSION = "ra"


def keep_star(star: StarRecord, filter_magnitude: Optional[float] = None) -> bool:
    """
    False for stars fainter than filter_magnitude and for blank slots
    """
    if filter_magnitude is not None and star.magnitude > filter_magnitude:
        return False
    return not star.is_blank


def select_stars(
    stars: Iterable[Tuple[int, StarRecord]],
    filter_magnitude: Optional[float] = None,
    sort: SortOrder = SortOrder.NONE,
) -> List[Tuple[int, StarRecord]]:
    """
    Filter and order stars.

    Args:
        stars: (catalog index, star) pairs in catalog order
        filter_magnitude: drop stars with a larger magnitude, None keeps all
        sort: output order, ties keep catalog order

    Returns:
        list of (output index, star), output index counting from 0
    """
    kept: List[StarRecord] = []
    total = 0
    for _, star in stars:
        total += 1
        if keep_star(star, filter_magnitude):
            kept.append(star)

    if sort == SortOrder.MAGNITUDE:
        keys = np.array([s.magnitude for s in kept], dtype=np.float32)
    elif sort == SortOrder.RIGHT_ASCENSION:
        keys = np.array([s.right_ascension for s in kept], dtype=np.float64)
    else:
        keys = np.arange(len(kept))

    order = np.argsort(keys, kind="stable")
    logger.info(f"Kept {len(kept)} of {total} stars, sorted by {sort.value}")
    return [(idx, kept[i]) for idx, i in enumerate(order)]
