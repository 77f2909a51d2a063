# -*- coding: utf-8 -*-
"""
Projection Constants - Series coefficients for transverse Mercator.

Derives the truncated meridian-arc series (forward) and footpoint-latitude
series (inverse) coefficients from an ellipsoid's squared eccentricity,
its radius, and the projection's reference latitude. Coefficients follow
Snyder, *Map Projections: A Working Manual* (USGS PP 1395), eqs. 3-21,
3-26 and 7-19.

The coefficients depend only on ``(e2, radius, lat0)``. Anything that
changes one of those must recompute them; scale factor and false offsets
do not enter.

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
from typing import Union

# Third-party
import numpy as np

ArrayLike = Union[float, np.ndarray]


@dataclass(frozen=True)
class SeriesCoefficients:
    """Derived constants of a transverse Mercator projection.

    Attributes
    ----------
    mc1, mc2, mc3, mc4 : float
        Meridian arc length coefficients (dimensionless).
    m0 : float
        Meridian arc length from the equator to the reference latitude,
        in radius units.
    e1 : float
        Auxiliary eccentricity ``(1 - sqrt(1 - e2)) / (1 + sqrt(1 - e2))``.
    imc0 : float
        Rectifying radius; divides an arc length to give the rectifying
        latitude ``mu``.
    imc1, imc2, imc3, imc4 : float
        Footpoint latitude coefficients (dimensionless).
    radius : float
        Semi-major axis the coefficients were derived for.
    """

    mc1: float
    mc2: float
    mc3: float
    mc4: float
    m0: float
    e1: float
    imc0: float
    imc1: float
    imc2: float
    imc3: float
    imc4: float
    radius: float

    def meridian_arc(self, lat: ArrayLike) -> ArrayLike:
        """Return the meridian arc length from the equator to ``lat``.

        Parameters
        ----------
        lat : float or np.ndarray
            Latitude(s) in radians.

        Returns
        -------
        float or np.ndarray
            Arc length(s) in radius units.
        """
        return self.radius * (
            self.mc1 * lat
            - self.mc2 * np.sin(2.0 * lat)
            + self.mc3 * np.sin(4.0 * lat)
            - self.mc4 * np.sin(6.0 * lat)
        )

    def footpoint_latitude(self, arc: ArrayLike) -> ArrayLike:
        """Return the latitude whose meridian arc length is ``arc``.

        Parameters
        ----------
        arc : float or np.ndarray
            Arc length(s) from the equator, in radius units.

        Returns
        -------
        float or np.ndarray
            Footpoint latitude(s) in radians.
        """
        mu = arc / self.imc0
        return (
            mu
            + self.imc1 * np.sin(2.0 * mu)
            + self.imc2 * np.sin(4.0 * mu)
            + self.imc3 * np.sin(6.0 * mu)
            + self.imc4 * np.sin(8.0 * mu)
        )


def compute_series_coefficients(
    squared_eccentricity: float,
    radius: float,
    reference_latitude: float,
) -> SeriesCoefficients:
    """Compute the forward and inverse series coefficients.

    Parameters
    ----------
    squared_eccentricity : float
        Ellipsoid ``e2`` in ``[0, 1)``.
    radius : float
        Ellipsoid semi-major axis.
    reference_latitude : float
        Projection origin latitude ``lat0`` in radians.

    Returns
    -------
    SeriesCoefficients
    """
    e2 = squared_eccentricity
    lat0 = reference_latitude

    mc1 = 1.0 - (1.0 + (3.0 + 1.25 * e2) * e2 / 16.0) * e2 / 4.0
    mc2 = (3.0 + (3.0 + 1.40625 * e2) * e2 / 4.0) * e2 / 8.0
    mc3 = (15.0 + 11.25 * e2) * e2 * e2 / 256.0
    mc4 = 35.0 * e2 * e2 * e2 / 3072.0
    m0 = radius * (
        mc1 * lat0
        - mc2 * math.sin(2.0 * lat0)
        + mc3 * math.sin(4.0 * lat0)
        - mc4 * math.sin(6.0 * lat0)
    )

    root = math.sqrt(1.0 - e2)
    e1 = (1.0 - root) / (1.0 + root)
    imc0 = radius * (((-5.0 / 256.0 * e2 - 3.0 / 64.0) * e2 - 0.25) * e2 + 1.0)
    imc1 = (-27.0 / 32.0 * e1 * e1 + 1.5) * e1
    imc2 = (-55.0 / 32.0 * e1 * e1 + 21.0 / 16.0) * e1 * e1
    imc3 = 151.0 / 96.0 * e1 ** 3
    imc4 = 1097.0 / 512.0 * e1 ** 4

    return SeriesCoefficients(
        mc1=mc1, mc2=mc2, mc3=mc3, mc4=mc4, m0=m0, e1=e1,
        imc0=imc0, imc1=imc1, imc2=imc2, imc3=imc3, imc4=imc4,
        radius=radius,
    )
