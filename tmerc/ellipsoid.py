# -*- coding: utf-8 -*-
"""
Reference Ellipsoid - Semi-major axis and flattening of a geodetic datum.

Provides ``Ellipsoid``, an immutable value holding the radius (semi-major
axis) and flattening factor of a reference ellipsoid, plus the derived
eccentricity terms the transverse Mercator series consume. Named
instances cover the common datums.

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

# tmerc internal
from tmerc.exceptions import ValidationError


@dataclass(frozen=True)
class Ellipsoid:
    """Oblate reference ellipsoid of revolution.

    Parameters
    ----------
    radius : float
        Semi-major (equatorial) axis. The unit is chosen by the caller
        and carries through to projected map coordinates.
    flattening : float
        Flattening factor ``f = (a - b) / a``. Zero gives a sphere.

    Raises
    ------
    ValidationError
        If ``radius`` is not a positive finite number or ``flattening``
        is outside ``[0, 1)``.

    Examples
    --------
    >>> Ellipsoid(6378137.0, 1.0 / 298.257223563).squared_eccentricity
    0.0066943799901...
    """

    radius: float
    flattening: float

    def __post_init__(self) -> None:
        radius = float(self.radius)
        flattening = float(self.flattening)
        if not math.isfinite(radius) or radius <= 0.0:
            raise ValidationError(
                f"Ellipsoid radius must be a positive finite number, "
                f"got {self.radius!r}"
            )
        if not (0.0 <= flattening < 1.0):
            raise ValidationError(
                f"Ellipsoid flattening must be in [0, 1), "
                f"got {self.flattening!r}"
            )
        # Normalize ints and numpy scalars to plain floats
        object.__setattr__(self, 'radius', radius)
        object.__setattr__(self, 'flattening', flattening)

    @property
    def squared_eccentricity(self) -> float:
        """First eccentricity squared, ``e2 = f (2 - f)``."""
        return self.flattening * (2.0 - self.flattening)

    @property
    def second_squared_eccentricity(self) -> float:
        """Second eccentricity squared, ``e'2 = e2 / (1 - e2)``."""
        e2 = self.squared_eccentricity
        return e2 / (1.0 - e2)

    @property
    def semi_minor_axis(self) -> float:
        """Polar radius ``b = a (1 - f)``."""
        return self.radius * (1.0 - self.flattening)

    @property
    def is_sphere(self) -> bool:
        return self.flattening == 0.0


WGS84 = Ellipsoid(6378137.0, 1.0 / 298.257223563)
GRS80 = Ellipsoid(6378137.0, 1.0 / 298.257222101)
UNIT_SPHERE = Ellipsoid(1.0, 0.0)

DEFAULT_ELLIPSOID = WGS84
