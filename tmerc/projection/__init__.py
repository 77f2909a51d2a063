# -*- coding: utf-8 -*-
"""
Projection Module - Transverse Mercator map projection.

Key Classes
-----------
- TransverseMercatorProjection: forward/inverse point and box transforms
- ProjectionParameters: serializable projection configuration
- SeriesCoefficients: derived series constants

Usage
-----
    >>> import math
    >>> from tmerc.projection import TransverseMercatorProjection
    >>> proj = TransverseMercatorProjection(math.radians(9.0), 0.0)
    >>> proj.set_stretching(0.9996)
    >>> proj.set_false_easting(500000.0)
    >>> e, n = proj.geodetic_to_map(math.radians(9.5), math.radians(48.0))

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

from tmerc.projection.constants import (
    SeriesCoefficients,
    compute_series_coefficients,
)
from tmerc.projection.parameters import ProjectionParameters
from tmerc.projection.transverse_mercator import TransverseMercatorProjection

__all__ = [
    'SeriesCoefficients',
    'compute_series_coefficients',
    'ProjectionParameters',
    'TransverseMercatorProjection',
]
