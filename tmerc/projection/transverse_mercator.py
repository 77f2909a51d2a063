# -*- coding: utf-8 -*-
"""
Transverse Mercator Projection - Ellipsoidal forward/inverse series.

Provides ``TransverseMercatorProjection``, a conformal cylindrical map
projection that converts geodetic longitude/latitude on a reference
ellipsoid to planar easting/northing and back. Uses the truncated series
of Snyder, *Map Projections: A Working Manual* (USGS PP 1395), eqs. 8-9
through 8-11 (forward) and 8-17 through 8-25 (inverse). Accuracy is
sub-millimetre within a few degrees of the central meridian and
degrades further out, where the series diverge.

Coordinate flow:

    geodetic (lon, lat)  --series-->  (x, y) * k0  --offset-->  map (E, N)

Box transforms account for the bulge of projected box edges where a box
straddles the central meridian or the equator.

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
import math
from typing import Callable, Optional, Tuple, Union

# Third-party
import numpy as np

# tmerc internal
from tmerc.ellipsoid import DEFAULT_ELLIPSOID, Ellipsoid
from tmerc.exceptions import ValidationError
from tmerc.geometry import Box, GeodeticPoint, MapPoint, _is_scalar, _to_array
from tmerc.projection._box import transform_box
from tmerc.projection.constants import (
    SeriesCoefficients,
    compute_series_coefficients,
)
from tmerc.projection.parameters import ProjectionParameters

logger = logging.getLogger(__name__)

Coordinates = Union[float, list, np.ndarray]
ArrayTransform = Callable[[np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray]]


def _dispatch(
    transform: ArrayTransform,
    first: Union[Coordinates, tuple],
    second: Optional[Coordinates],
    point_type: type,
):
    """Apply an array transform to scalar, list, array, or stacked input.

    Mirrors the three input forms of the public transforms: two scalars
    give a tuple of floats, two arrays give a tuple of arrays, and a
    single ``(2, N)`` array gives a ``(2, N)`` array. A point namedtuple
    passed as ``first`` gives a ``point_type`` back.
    """
    if second is None:
        if isinstance(first, tuple) and len(first) == 2 and all(
            _is_scalar(v) for v in first
        ):
            # GeodeticPoint / MapPoint (or a plain pair)
            xs, ys = transform(_to_array(first[0]), _to_array(first[1]))
            return point_type(float(xs[0]), float(ys[0]))

        # (2, N) ndarray input
        pts = np.asarray(first, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[0] != 2:
            raise ValidationError(
                f"Expected (2, N) array, got shape {pts.shape}"
            )
        xs, ys = transform(pts[0], pts[1])
        return np.vstack([xs, ys])
    elif _is_scalar(first) and _is_scalar(second):
        xs, ys = transform(_to_array(first), _to_array(second))
        return (float(xs[0]), float(ys[0]))
    else:
        xs_in = _to_array(first)
        ys_in = _to_array(second)
        if xs_in.shape != ys_in.shape:
            raise ValidationError(
                f"Coordinate arrays differ in shape: "
                f"{xs_in.shape} vs {ys_in.shape}"
            )
        return transform(xs_in, ys_in)


class TransverseMercatorProjection:
    """Ellipsoidal transverse Mercator projection.

    The central meridian, reference latitude, and ellipsoid are fixed at
    construction, and the series coefficients are derived from them once.
    Scale factor and false offsets can be changed at any time through the
    ``set_*`` methods; they do not affect the coefficients.

    ``geodetic_to_map`` and ``map_to_geodetic`` accept these input forms:

    - **Scalar:** ``proj.geodetic_to_map(lon, lat)``
    - **Separate arrays:** ``proj.geodetic_to_map(lons, lats)``
    - **Stacked (2, N) array:** ``proj.geodetic_to_map(points_2xN)``
    - **Point:** ``proj.geodetic_to_map(GeodeticPoint(lon, lat))``
    - **Box:** ``proj.geodetic_to_map(Box(...))``

    Parameters
    ----------
    central_meridian : float
        Longitude of the central meridian ``lng0`` in radians.
    reference_latitude : float
        Latitude of the projection origin ``lat0`` in radians.
    radius : float, optional
        Ellipsoid semi-major axis. Must be given together with
        ``flattening``.
    flattening : float, optional
        Ellipsoid flattening factor. Must be given together with
        ``radius``.
    ellipsoid : Ellipsoid, optional
        Reference ellipsoid, as an alternative to ``radius`` and
        ``flattening``. Defaults to WGS84 when no ellipsoid arguments
        are given.

    Raises
    ------
    ValidationError
        If the origin is not finite, only one of ``radius`` and
        ``flattening`` is given, ``ellipsoid`` is combined with them, or
        the ellipsoid parameters are invalid.

    Notes
    -----
    All angles are radians. Map coordinates use the ellipsoid radius
    unit. Transforms do not validate their inputs: points at the poles or
    far from the central meridian give NaN, inf, or inaccurate values.

    Instances are not synchronized. Configure them first (setters), then
    share them across threads for read-only transform calls. Calling a
    setter while another thread transforms is a data race.

    Examples
    --------
    >>> import math
    >>> proj = TransverseMercatorProjection(math.radians(-117.0), 0.0)
    >>> proj.set_stretching(0.9996)
    >>> proj.set_false_easting(500000.0)
    >>> e, n = proj.geodetic_to_map(math.radians(-116.5), math.radians(33.0))
    >>> lon, lat = proj.map_to_geodetic(e, n)
    """

    def __init__(
        self,
        central_meridian: float,
        reference_latitude: float,
        radius: Optional[float] = None,
        flattening: Optional[float] = None,
        *,
        ellipsoid: Optional[Ellipsoid] = None,
    ) -> None:
        if (radius is None) != (flattening is None):
            raise ValidationError(
                "radius and flattening must be given together"
            )
        if radius is not None:
            if ellipsoid is not None:
                raise ValidationError(
                    "Pass either ellipsoid or radius/flattening, not both"
                )
            ellipsoid = Ellipsoid(radius, flattening)
        elif ellipsoid is None:
            ellipsoid = DEFAULT_ELLIPSOID

        lng0 = float(central_meridian)
        lat0 = float(reference_latitude)
        if not (math.isfinite(lng0) and math.isfinite(lat0)):
            raise ValidationError(
                f"Projection origin must be finite, got "
                f"({central_meridian!r}, {reference_latitude!r})"
            )

        self._ellipsoid = ellipsoid
        self._lng0 = lng0
        self._lat0 = lat0
        self._k0 = 1.0
        self._false_easting = 0.0
        self._false_northing = 0.0

        self._e2 = ellipsoid.squared_eccentricity
        self._ep2 = ellipsoid.second_squared_eccentricity
        self._coeffs = compute_series_coefficients(
            self._e2, ellipsoid.radius, lat0
        )

        logger.debug(
            "TransverseMercatorProjection lng0=%.12g lat0=%.12g a=%.12g "
            "e2=%.12g M0=%.12g e1=%.12g",
            lng0, lat0, ellipsoid.radius, self._e2,
            self._coeffs.m0, self._coeffs.e1,
        )

    @classmethod
    def from_parameters(
        cls,
        params: ProjectionParameters,
    ) -> 'TransverseMercatorProjection':
        """Build a projection from a ``ProjectionParameters`` value."""
        proj = cls(
            params.central_meridian,
            params.reference_latitude,
            ellipsoid=params.ellipsoid,
        )
        proj.set_stretching(params.scale_factor)
        proj.set_false_easting(params.false_easting)
        proj.set_false_northing(params.false_northing)
        return proj

    @classmethod
    def from_degrees(
        cls,
        central_meridian: float,
        reference_latitude: float,
        **kwargs,
    ) -> 'TransverseMercatorProjection':
        """Build a projection whose origin is given in degrees.

        Keyword arguments are those of ``ProjectionParameters``
        (``scale_factor``, ``false_easting``, ``false_northing``,
        ``ellipsoid``). Transforms still work in radians.
        """
        return cls.from_parameters(
            ProjectionParameters.from_degrees(
                central_meridian, reference_latitude, **kwargs
            )
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    @property
    def central_meridian(self) -> float:
        return self._lng0

    @property
    def reference_latitude(self) -> float:
        return self._lat0

    @property
    def scale_factor(self) -> float:
        return self._k0

    @property
    def false_easting(self) -> float:
        return self._false_easting

    @property
    def false_northing(self) -> float:
        return self._false_northing

    @property
    def false_offset(self) -> Tuple[float, float]:
        return (self._false_easting, self._false_northing)

    @property
    def coefficients(self) -> SeriesCoefficients:
        """Derived ``SeriesCoefficients`` (read-only)."""
        return self._coeffs

    @property
    def equator_northing(self) -> float:
        """Northing of the equator on the central meridian."""
        return -self._coeffs.m0 * self._k0 + self._false_northing

    @property
    def parameters(self) -> ProjectionParameters:
        """Snapshot of the current configuration.

        Raises
        ------
        ValidationError
            If a setter stored a non-finite value.
        """
        return ProjectionParameters(
            central_meridian=self._lng0,
            reference_latitude=self._lat0,
            scale_factor=self._k0,
            false_easting=self._false_easting,
            false_northing=self._false_northing,
            ellipsoid=self._ellipsoid,
        )

    def set_stretching(self, scale: float) -> None:
        """Set the scale factor ``k0`` along the central meridian."""
        self._k0 = float(scale)
        logger.debug("Scale factor set to %.12g", self._k0)

    def set_false_easting(self, value: float) -> None:
        self._false_easting = float(value)
        logger.debug("False easting set to %.12g", self._false_easting)

    def set_false_northing(self, value: float) -> None:
        self._false_northing = float(value)
        logger.debug("False northing set to %.12g", self._false_northing)

    # ------------------------------------------------------------------
    # Vectorized series
    # ------------------------------------------------------------------

    def _geodetic_to_map_array(
        self,
        lons: np.ndarray,
        lats: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Forward series over 1D float64 arrays."""
        a = self._ellipsoid.radius
        e2 = self._e2
        ep2 = self._ep2

        sin_lat = np.sin(lats)
        cos_lat = np.cos(lats)
        tan_lat = np.tan(lats)

        n = a / np.sqrt(1.0 - e2 * sin_lat * sin_lat)
        t = tan_lat * tan_lat
        c = ep2 * cos_lat * cos_lat
        big_a = (lons - self._lng0) * cos_lat
        a2 = big_a * big_a
        m = self._coeffs.meridian_arc(lats)

        x = n * big_a * (
            1.0
            + (1.0 - t + c) * a2 / 6.0
            + (5.0 - 18.0 * t + t * t + 72.0 * c - 58.0 * ep2) * a2 * a2 / 120.0
        )
        y = m - self._coeffs.m0 + n * tan_lat * a2 * (
            0.5
            + (5.0 - t + 9.0 * c + 4.0 * c * c) * a2 / 24.0
            + (61.0 - 58.0 * t + t * t + 600.0 * c - 330.0 * ep2)
            * a2 * a2 / 720.0
        )

        eastings = self._k0 * x + self._false_easting
        northings = self._k0 * y + self._false_northing
        return eastings, northings

    def _map_to_geodetic_array(
        self,
        eastings: np.ndarray,
        northings: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Inverse series over 1D float64 arrays."""
        a = self._ellipsoid.radius
        e2 = self._e2
        ep2 = self._ep2

        m = self._coeffs.m0 + (northings - self._false_northing) / self._k0
        phi1 = self._coeffs.footpoint_latitude(m)

        sin_phi1 = np.sin(phi1)
        cos_phi1 = np.cos(phi1)
        tan_phi1 = np.tan(phi1)

        c1 = ep2 * cos_phi1 * cos_phi1
        t1 = tan_phi1 * tan_phi1
        w = 1.0 - e2 * sin_phi1 * sin_phi1
        n1 = a / np.sqrt(w)
        r1 = a * (1.0 - e2) / (w * np.sqrt(w))
        d = (eastings - self._false_easting) / (n1 * self._k0)
        d2 = d * d

        lats = phi1 - (n1 * tan_phi1 / r1) * d2 * (
            0.5
            - (5.0 + 3.0 * t1 + 10.0 * c1 - 4.0 * c1 * c1 - 9.0 * ep2)
            * d2 / 24.0
            + (61.0 + 90.0 * t1 + 298.0 * c1 + 45.0 * t1 * t1
               - 252.0 * ep2 - 3.0 * c1 * c1) * d2 * d2 / 720.0
        )
        lons = self._lng0 + d * (
            1.0
            - (1.0 + 2.0 * t1 + c1) * d2 / 6.0
            + (5.0 - 2.0 * c1 + 28.0 * t1 - 3.0 * c1 * c1 + 8.0 * ep2
               + 24.0 * t1 * t1) * d2 * d2 / 120.0
        ) / cos_phi1
        return lons, lats

    def _point_scale_array(
        self,
        lons: np.ndarray,
        lats: np.ndarray,
    ) -> np.ndarray:
        cos_lat = np.cos(lats)
        tan_lat = np.tan(lats)
        t = tan_lat * tan_lat
        c = self._ep2 * cos_lat * cos_lat
        big_a = (lons - self._lng0) * cos_lat
        a2 = big_a * big_a
        return self._k0 * (
            1.0
            + (1.0 + c) * a2 / 2.0
            + (5.0 - 4.0 * t + 42.0 * c + 13.0 * c * c - 28.0 * self._ep2)
            * a2 * a2 / 24.0
            + (61.0 - 148.0 * t + 16.0 * t * t) * a2 * a2 * a2 / 720.0
        )

    # ------------------------------------------------------------------
    # Point transforms
    # ------------------------------------------------------------------

    def geodetic_to_map(
        self,
        lon_or_points: Union[Coordinates, GeodeticPoint, Box],
        lat: Optional[Coordinates] = None,
    ):
        """Project geodetic coordinates to map coordinates.

        Parameters
        ----------
        lon_or_points : float, list, np.ndarray, GeodeticPoint, or Box
            Longitude(s) in radians when ``lat`` is given. Otherwise a
            ``(2, N)`` array of stacked ``[lons; lats]``, a single
            ``GeodeticPoint``, or a geodetic ``Box``.
        lat : float, list, or np.ndarray, optional
            Latitude(s) in radians.

        Returns
        -------
        Tuple[float, float]
            ``(easting, northing)`` for scalar inputs.
        Tuple[np.ndarray, np.ndarray]
            ``(eastings, northings)`` for separate array inputs.
        np.ndarray
            Shape ``(2, N)`` for a stacked input.
        MapPoint
            For a ``GeodeticPoint`` input.
        Box
            Map-space bounding box for a ``Box`` input (see
            ``geodetic_box_to_map``).

        Raises
        ------
        ValidationError
            If a stacked input is not ``(2, N)`` or array shapes differ.
        """
        if isinstance(lon_or_points, Box):
            return self.geodetic_box_to_map(lon_or_points)
        return _dispatch(
            self._geodetic_to_map_array, lon_or_points, lat, MapPoint
        )

    def map_to_geodetic(
        self,
        easting_or_points: Union[Coordinates, MapPoint, Box],
        northing: Optional[Coordinates] = None,
    ):
        """Unproject map coordinates to geodetic coordinates.

        Parameters
        ----------
        easting_or_points : float, list, np.ndarray, MapPoint, or Box
            Easting(s) when ``northing`` is given. Otherwise a ``(2, N)``
            array of stacked ``[eastings; northings]``, a single
            ``MapPoint``, or a map-space ``Box``.
        northing : float, list, or np.ndarray, optional
            Northing(s).

        Returns
        -------
        Tuple[float, float]
            ``(lon, lat)`` in radians for scalar inputs.
        Tuple[np.ndarray, np.ndarray]
            ``(lons, lats)`` for separate array inputs.
        np.ndarray
            Shape ``(2, N)`` for a stacked input.
        GeodeticPoint
            For a ``MapPoint`` input.
        Box
            Geodetic bounding box for a ``Box`` input (see
            ``map_box_to_geodetic``).

        Raises
        ------
        ValidationError
            If a stacked input is not ``(2, N)`` or array shapes differ.
        """
        if isinstance(easting_or_points, Box):
            return self.map_box_to_geodetic(easting_or_points)
        return _dispatch(
            self._map_to_geodetic_array, easting_or_points, northing,
            GeodeticPoint,
        )

    def point_scale(
        self,
        lon: Coordinates,
        lat: Coordinates,
    ) -> Union[float, np.ndarray]:
        """Return the point scale factor ``k`` at geodetic position(s).

        Equals ``k0`` on the central meridian and grows with distance
        from it.
        """
        scale = self._point_scale_array(_to_array(lon), _to_array(lat))
        if _is_scalar(lon) and _is_scalar(lat):
            return float(scale[0])
        return scale

    # ------------------------------------------------------------------
    # Box transforms
    # ------------------------------------------------------------------

    def geodetic_box_to_map(self, box: Box) -> Box:
        """Return the map-space bounding box of a geodetic box.

        Projects the four corners, then adds:

        - where the box straddles the central meridian, the point on the
          meridian at the box edge nearest the equator (the image of that
          edge bulges toward the pole there);
        - where the box straddles the equator, the equator point on each
          box side lying off the central meridian (the northing extremum
          of those sides).
        """
        lng0 = self._lng0
        crosses_meridian = box.min_x < lng0 < box.max_x
        crosses_equator = box.min_y < 0.0 < box.max_y
        crossings = [
            (crosses_meridian and box.min_y > 0.0, (lng0, box.min_y)),
            (crosses_meridian and box.max_y < 0.0, (lng0, box.max_y)),
            (crosses_equator and box.min_x < lng0, (box.min_x, 0.0)),
            (crosses_equator and box.max_x > lng0, (box.max_x, 0.0)),
        ]
        return transform_box(box, self._geodetic_to_map_array, crossings)

    def map_box_to_geodetic(self, box: Box) -> Box:
        """Return the geodetic bounding box of a map-space box.

        The map-space analog of ``geodetic_box_to_map``: the central
        meridian is the line ``easting == false_easting`` and the equator
        crosses it at ``equator_northing``. The easting conditions on the
        equator cases are mirrored with respect to the forward transform.
        """
        fe = self._false_easting
        equator = self.equator_northing
        crosses_meridian = box.min_x < fe < box.max_x
        crosses_equator = box.min_y < equator < box.max_y
        crossings = [
            (crosses_meridian and box.min_y < equator, (fe, box.min_y)),
            (crosses_meridian and box.max_y > equator, (fe, box.max_y)),
            (crosses_equator and box.min_x > fe, (box.min_x, equator)),
            (crosses_equator and box.max_x < fe, (box.max_x, equator)),
        ]
        return transform_box(box, self._map_to_geodetic_array, crossings)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(central_meridian={self._lng0!r}, "
            f"reference_latitude={self._lat0!r}, "
            f"scale_factor={self._k0!r}, "
            f"false_offset={self.false_offset!r}, "
            f"ellipsoid={self._ellipsoid!r})"
        )
