# -*- coding: utf-8 -*-
"""
Box Transform Helper - Corner projection with crossing corrections.

A projected box is not the box of its projected corners: where the source
box straddles the central meridian or the equator, the image of its edges
bulges past the corners. Both box transforms (forward and inverse) handle
this the same way. They project the four corners, then add a handful of
synthetic edge points that capture the extremum. This module holds that
shared sequence; each direction supplies its own crossing cases.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import logging
from typing import Callable, Sequence, Tuple

# Third-party
import numpy as np

# tmerc internal
from tmerc.geometry import Box

logger = logging.getLogger(__name__)

PointTransform = Callable[[np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray]]
CrossingCase = Tuple[bool, Tuple[float, float]]


def transform_box(
    box: Box,
    transform: PointTransform,
    crossings: Sequence[CrossingCase],
) -> Box:
    """Return the bounding box of ``box`` under ``transform``.

    Parameters
    ----------
    box : Box
        Source box.
    transform : callable
        Vectorized point transform ``(xs, ys) -> (xs', ys')`` over 1D
        float64 arrays.
    crossings : sequence of (bool, (float, float))
        Crossing cases for this direction. Each entry pairs the condition
        under which the synthetic source point is needed with that point.
        Points whose condition is False are skipped.

    Returns
    -------
    Box
        Smallest box containing the transformed corners and every
        applicable synthetic point. Empty if ``box`` is empty.
    """
    if box.is_empty:
        return Box.empty()

    corners = np.array(box.vertices(), dtype=np.float64)
    xs, ys = transform(corners[:, 0], corners[:, 1])
    result = Box.from_points(xs, ys)

    extra = [point for applies, point in crossings if applies]
    if extra:
        logger.debug("Adding %d crossing point(s) to box %s",
                     len(extra), box.as_tuple())
        points = np.array(extra, dtype=np.float64)
        xs, ys = transform(points[:, 0], points[:, 1])
        result = result.add_points(xs, ys)

    return result
