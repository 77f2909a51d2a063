# -*- coding: utf-8 -*-
"""
Ellipsoid Tests - Reference ellipsoid construction and derived terms.

Dependencies
------------
pytest

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

import dataclasses

import pytest

from tmerc.ellipsoid import (
    DEFAULT_ELLIPSOID,
    Ellipsoid,
    GRS80,
    UNIT_SPHERE,
    WGS84,
)
from tmerc.exceptions import TmercError, ValidationError


class TestDerivedTerms:
    """Test eccentricity and axis properties."""

    def test_wgs84_squared_eccentricity(self):
        assert WGS84.squared_eccentricity == pytest.approx(
            0.00669437999014, rel=1e-10
        )

    def test_wgs84_second_eccentricity(self):
        assert WGS84.second_squared_eccentricity == pytest.approx(
            0.00673949674228, rel=1e-10
        )

    def test_wgs84_semi_minor_axis(self):
        assert WGS84.semi_minor_axis == pytest.approx(6356752.314245, abs=1e-6)

    def test_grs80_close_to_wgs84(self):
        assert GRS80.radius == WGS84.radius
        assert GRS80.squared_eccentricity == pytest.approx(
            WGS84.squared_eccentricity, rel=1e-8
        )

    def test_unit_sphere(self):
        assert UNIT_SPHERE.radius == 1.0
        assert UNIT_SPHERE.squared_eccentricity == 0.0
        assert UNIT_SPHERE.second_squared_eccentricity == 0.0
        assert UNIT_SPHERE.is_sphere
        assert not WGS84.is_sphere

    def test_default_is_wgs84(self):
        assert DEFAULT_ELLIPSOID == WGS84


class TestValidation:
    """Test construction-time validation."""

    def test_ints_normalized(self):
        ell = Ellipsoid(2, 0)
        assert isinstance(ell.radius, float)
        assert isinstance(ell.flattening, float)

    @pytest.mark.parametrize('radius', [0.0, -1.0, float('nan'), float('inf')])
    def test_bad_radius(self, radius):
        with pytest.raises(ValidationError, match="radius"):
            Ellipsoid(radius, 0.0)

    @pytest.mark.parametrize('flattening', [-0.1, 1.0, 1.5, float('nan')])
    def test_bad_flattening(self, flattening):
        with pytest.raises(ValidationError, match="flattening"):
            Ellipsoid(1.0, flattening)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            Ellipsoid(-1.0, 0.0)
        with pytest.raises(TmercError):
            Ellipsoid(-1.0, 0.0)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            WGS84.radius = 1.0
