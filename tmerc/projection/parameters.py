# -*- coding: utf-8 -*-
"""
Projection Parameters - Value object describing a transverse Mercator setup.

Bundles everything needed to build a ``TransverseMercatorProjection``:
origin (central meridian and reference latitude), scale factor, false
offsets, and the reference ellipsoid. Parameters can be converted to and
from plain dictionaries for storage alongside other product metadata.

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
import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, Dict

# tmerc internal
from tmerc.ellipsoid import DEFAULT_ELLIPSOID, Ellipsoid
from tmerc.exceptions import ProjectionError, ValidationError

_REQUIRED_KEYS = ('central_meridian', 'reference_latitude')


@dataclass(frozen=True)
class ProjectionParameters:
    """Complete configuration of a transverse Mercator projection.

    Parameters
    ----------
    central_meridian : float
        Longitude of the central meridian ``lng0`` in radians.
    reference_latitude : float
        Latitude of the projection origin ``lat0`` in radians.
    scale_factor : float, default=1.0
        Scale factor ``k0`` along the central meridian.
    false_easting : float, default=0.0
        Easting assigned to the central meridian.
    false_northing : float, default=0.0
        Northing assigned to the reference latitude.
    ellipsoid : Ellipsoid, default=WGS84
        Reference ellipsoid.

    Raises
    ------
    ValidationError
        If any numeric value is not finite, or ``ellipsoid`` is not an
        ``Ellipsoid``.

    Examples
    --------
    >>> params = ProjectionParameters.from_degrees(
    ...     central_meridian=-117.0, reference_latitude=0.0,
    ...     scale_factor=0.9996, false_easting=500000.0,
    ... )
    >>> params.to_dict()['scale_factor']
    0.9996
    """

    central_meridian: float
    reference_latitude: float
    scale_factor: float = 1.0
    false_easting: float = 0.0
    false_northing: float = 0.0
    ellipsoid: Ellipsoid = field(default=DEFAULT_ELLIPSOID)

    def __post_init__(self) -> None:
        for name in ('central_meridian', 'reference_latitude',
                     'scale_factor', 'false_easting', 'false_northing'):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValidationError(
                    f"{name} must be finite, got {getattr(self, name)!r}"
                )
            object.__setattr__(self, name, value)
        if not isinstance(self.ellipsoid, Ellipsoid):
            raise ValidationError(
                f"ellipsoid must be an Ellipsoid instance, "
                f"got {type(self.ellipsoid).__name__}"
            )

    @classmethod
    def from_degrees(
        cls,
        central_meridian: float,
        reference_latitude: float,
        **kwargs: Any,
    ) -> 'ProjectionParameters':
        """Build parameters from an origin given in degrees.

        Remaining keyword arguments are passed through unchanged.
        """
        return cls(
            central_meridian=math.radians(central_meridian),
            reference_latitude=math.radians(reference_latitude),
            **kwargs,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectionParameters':
        """Rebuild parameters from the output of ``to_dict``.

        ``radius`` and ``flattening`` must appear together; when both are
        absent the default ellipsoid is used.

        Raises
        ------
        ProjectionError
            If a required key is missing.
        ValidationError
            If a value is invalid.
        """
        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise ProjectionError(
                f"Projection parameters missing required key(s): "
                f"{', '.join(missing)}"
            )

        has_radius = 'radius' in data
        has_flattening = 'flattening' in data
        if has_radius != has_flattening:
            raise ValidationError(
                "radius and flattening must be given together"
            )
        try:
            if has_radius:
                ellipsoid = Ellipsoid(data['radius'], data['flattening'])
            else:
                ellipsoid = DEFAULT_ELLIPSOID
            return cls(
                central_meridian=data['central_meridian'],
                reference_latitude=data['reference_latitude'],
                scale_factor=data.get('scale_factor', 1.0),
                false_easting=data.get('false_easting', 0.0),
                false_northing=data.get('false_northing', 0.0),
                ellipsoid=ellipsoid,
            )
        except ValidationError:
            raise
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid projection parameters: {e}") from e

    def to_dict(self) -> Dict[str, float]:
        """Return a flat dictionary of plain floats (angles in radians)."""
        return {
            'central_meridian': self.central_meridian,
            'reference_latitude': self.reference_latitude,
            'scale_factor': self.scale_factor,
            'false_easting': self.false_easting,
            'false_northing': self.false_northing,
            'radius': self.ellipsoid.radius,
            'flattening': self.ellipsoid.flattening,
        }

    def with_scale_factor(self, scale_factor: float) -> 'ProjectionParameters':
        return dataclasses.replace(self, scale_factor=scale_factor)

    def with_false_offset(
        self,
        false_easting: float,
        false_northing: float,
    ) -> 'ProjectionParameters':
        return dataclasses.replace(
            self, false_easting=false_easting, false_northing=false_northing
        )
