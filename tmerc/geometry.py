# -*- coding: utf-8 -*-
"""
Geometry Primitives - Point value types and axis-aligned boxes.

Provides the small value types the projection operates on: geodetic and
map points, and ``Box``, an axis-aligned rectangle that can grow by
accumulating points. ``Box.empty()`` is the identity element for that
accumulation, so a bounding box can be built by folding points into an
empty box.

Also holds the scalar/array helpers shared by the vectorized transforms.

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
import math
from dataclasses import dataclass
from typing import Any, NamedTuple, Tuple, Union

# Third-party
import numpy as np

# tmerc internal
from tmerc.exceptions import ValidationError


def _is_scalar(val: Any) -> bool:
    """Check if a value is a scalar (not array-like)."""
    if isinstance(val, np.ndarray):
        return val.ndim == 0
    return isinstance(val, (int, float, np.integer, np.floating))


def _to_array(val: Any) -> np.ndarray:
    """Convert scalar, list, or array to 1D numpy array of float64."""
    arr = np.asarray(val, dtype=np.float64)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    return arr


class GeodeticPoint(NamedTuple):
    """Geodetic position in radians."""

    lon: float
    lat: float


class MapPoint(NamedTuple):
    """Projected position in the projection's linear unit."""

    easting: float
    northing: float


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle given by its min and max corners.

    The same type serves geodetic boxes (x = longitude, y = latitude, in
    radians) and map boxes (x = easting, y = northing).

    Parameters
    ----------
    min_x, min_y : float
        Lower corner.
    max_x, max_y : float
        Upper corner.

    Raises
    ------
    ValidationError
        If a min coordinate exceeds its max, unless the box is the empty
        sentinel returned by ``Box.empty()``.

    Notes
    -----
    Boxes are immutable. ``add_point``, ``add_points`` and ``union``
    return new boxes.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        for name in ('min_x', 'min_y', 'max_x', 'max_y'):
            object.__setattr__(self, name, float(getattr(self, name)))
        if self.is_empty:
            return
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValidationError(
                f"Box min corner ({self.min_x}, {self.min_y}) exceeds "
                f"max corner ({self.max_x}, {self.max_y})"
            )

    @classmethod
    def empty(cls) -> 'Box':
        """Return the empty box, the identity for ``add_point``/``union``."""
        return cls(math.inf, math.inf, -math.inf, -math.inf)

    @classmethod
    def from_points(
        cls,
        xs: Union[float, list, np.ndarray],
        ys: Union[float, list, np.ndarray],
    ) -> 'Box':
        """Return the smallest box containing all given points.

        NaN coordinates are ignored. An empty input (or an all-NaN input)
        yields ``Box.empty()``.
        """
        return cls.empty().add_points(xs, ys)

    @property
    def is_empty(self) -> bool:
        return (self.min_x == math.inf and self.min_y == math.inf
                and self.max_x == -math.inf and self.max_y == -math.inf)

    @property
    def min(self) -> Tuple[float, float]:
        return (self.min_x, self.min_y)

    @property
    def max(self) -> Tuple[float, float]:
        return (self.max_x, self.max_y)

    def size(self) -> Tuple[float, float]:
        """Return ``(width, height)``; ``(0.0, 0.0)`` for an empty box."""
        if self.is_empty:
            return (0.0, 0.0)
        return (self.max_x - self.min_x, self.max_y - self.min_y)

    def center(self) -> Tuple[float, float]:
        if self.is_empty:
            raise ValidationError("Empty box has no center")
        return ((self.min_x + self.max_x) / 2.0,
                (self.min_y + self.max_y) / 2.0)

    def vertex(self, index: int) -> Tuple[float, float]:
        """Return corner ``index`` in ``[0, 4)``.

        Bit ``j`` of ``index`` selects the max coordinate on axis ``j``,
        giving the order (min, min), (max, min), (min, max), (max, max).
        """
        if not 0 <= index < 4:
            raise IndexError(f"Box vertex index must be in [0, 4), got {index}")
        x = self.max_x if index & 1 else self.min_x
        y = self.max_y if index & 2 else self.min_y
        return (x, y)

    def vertices(self) -> Tuple[Tuple[float, float], ...]:
        return tuple(self.vertex(i) for i in range(4))

    def add_point(self, x: float, y: float) -> 'Box':
        """Return this box grown to include ``(x, y)``."""
        return Box(
            min(self.min_x, x), min(self.min_y, y),
            max(self.max_x, x), max(self.max_y, y),
        )

    def add_points(
        self,
        xs: Union[float, list, np.ndarray],
        ys: Union[float, list, np.ndarray],
    ) -> 'Box':
        """Return this box grown to include every ``(xs[i], ys[i])``."""
        xs_arr = _to_array(xs)
        ys_arr = _to_array(ys)
        if xs_arr.shape != ys_arr.shape:
            raise ValidationError(
                f"Coordinate arrays differ in shape: "
                f"{xs_arr.shape} vs {ys_arr.shape}"
            )
        valid = ~(np.isnan(xs_arr) | np.isnan(ys_arr))
        if not np.any(valid):
            return self
        xs_arr = xs_arr[valid]
        ys_arr = ys_arr[valid]
        return Box(
            min(self.min_x, float(np.min(xs_arr))),
            min(self.min_y, float(np.min(ys_arr))),
            max(self.max_x, float(np.max(xs_arr))),
            max(self.max_y, float(np.max(ys_arr))),
        )

    def union(self, other: 'Box') -> 'Box':
        """Return the smallest box containing both boxes."""
        return Box(
            min(self.min_x, other.min_x), min(self.min_y, other.min_y),
            max(self.max_x, other.max_x), max(self.max_y, other.max_y),
        )

    def contains_point(self, x: float, y: float) -> bool:
        return (self.min_x <= x <= self.max_x
                and self.min_y <= y <= self.max_y)

    def contains_box(self, other: 'Box') -> bool:
        """Check whether ``other`` lies inside this box (edges inclusive).

        The empty box is contained in every box.
        """
        if other.is_empty:
            return True
        return (self.min_x <= other.min_x and other.max_x <= self.max_x
                and self.min_y <= other.min_y and other.max_y <= self.max_y)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)``."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

