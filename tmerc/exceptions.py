# -*- coding: utf-8 -*-
"""
tmerc Exception Hierarchy - Domain-specific exceptions for projection setup.

Lets callers catch tmerc configuration errors distinctly from Python
built-in exceptions. Every tmerc exception subclasses both ``TmercError``
and the matching built-in exception, so existing ``except ValueError``
handlers keep working.

The transforms themselves never raise: out-of-domain coordinates (poles,
points far from the central meridian) propagate as NaN, inf, or inaccurate
values. Validation happens only where a projection or box is built.

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


class TmercError(Exception):
    """Base exception for all tmerc errors."""


class ValidationError(TmercError, ValueError):
    """Invalid projection, ellipsoid, or geometry parameters.

    Raised for non-positive radii, flattening outside ``[0, 1)``,
    non-finite configuration values, inverted boxes, and malformed
    stacked coordinate arrays.
    """


class ProjectionError(TmercError, RuntimeError):
    """Failure to build or restore a projection configuration.

    Raised when a serialized parameter set cannot be turned back into a
    projection (for example, a required key is missing).
    """
