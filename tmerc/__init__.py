# -*- coding: utf-8 -*-
"""
tmerc - Transverse Mercator projection for reference ellipsoids.

Converts geodetic longitude/latitude on a reference ellipsoid to planar
map coordinates and back, using the ellipsoidal transverse Mercator
series. Transforms points (scalar or vectorized) and axis-aligned
bounding boxes, with box corrections where a box straddles the central
meridian or the equator.

Dependencies
------------
numpy

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

__version__ = "0.1.0"

from tmerc.exceptions import (
    TmercError,
    ValidationError,
    ProjectionError,
)
from tmerc.ellipsoid import (
    Ellipsoid,
    WGS84,
    GRS80,
    UNIT_SPHERE,
)
from tmerc.geometry import Box, GeodeticPoint, MapPoint
from tmerc.projection import (
    ProjectionParameters,
    SeriesCoefficients,
    TransverseMercatorProjection,
    compute_series_coefficients,
)

__all__ = [
    'TmercError',
    'ValidationError',
    'ProjectionError',
    'Ellipsoid',
    'WGS84',
    'GRS80',
    'UNIT_SPHERE',
    'Box',
    'GeodeticPoint',
    'MapPoint',
    'ProjectionParameters',
    'SeriesCoefficients',
    'TransverseMercatorProjection',
    'compute_series_coefficients',
]
