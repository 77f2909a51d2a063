# -*- coding: utf-8 -*-
"""
Projection Parameters Tests - Configuration value object and serialization.

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

import math

import pytest

from tmerc.ellipsoid import Ellipsoid, WGS84
from tmerc.exceptions import ProjectionError, ValidationError
from tmerc.projection import ProjectionParameters, TransverseMercatorProjection


@pytest.fixture
def utm11():
    """UTM zone 11N style parameters."""
    return ProjectionParameters.from_degrees(
        -117.0, 0.0, scale_factor=0.9996, false_easting=500000.0,
    )


class TestConstruction:
    """Test defaults, degree conversion, and validation."""

    def test_defaults(self):
        params = ProjectionParameters(0.1, 0.2)
        assert params.scale_factor == 1.0
        assert params.false_easting == 0.0
        assert params.false_northing == 0.0
        assert params.ellipsoid == WGS84

    def test_from_degrees(self, utm11):
        assert utm11.central_meridian == pytest.approx(math.radians(-117.0))
        assert utm11.reference_latitude == 0.0
        assert utm11.scale_factor == 0.9996
        assert utm11.false_easting == 500000.0

    @pytest.mark.parametrize('field_name', [
        'central_meridian', 'reference_latitude', 'scale_factor',
        'false_easting', 'false_northing',
    ])
    def test_non_finite_rejected(self, field_name):
        kwargs = {'central_meridian': 0.0, 'reference_latitude': 0.0}
        kwargs[field_name] = float('nan')
        with pytest.raises(ValidationError, match=field_name):
            ProjectionParameters(**kwargs)

    def test_bad_ellipsoid_type(self):
        with pytest.raises(ValidationError, match="Ellipsoid"):
            ProjectionParameters(0.0, 0.0, ellipsoid=(6378137.0, 0.003))

    def test_copy_helpers(self, utm11):
        scaled = utm11.with_scale_factor(1.0)
        assert scaled.scale_factor == 1.0
        assert utm11.scale_factor == 0.9996
        shifted = utm11.with_false_offset(1.0, 2.0)
        assert (shifted.false_easting, shifted.false_northing) == (1.0, 2.0)
        assert shifted.central_meridian == utm11.central_meridian


class TestSerialization:
    """Test to_dict / from_dict."""

    def test_round_trip(self, utm11):
        assert ProjectionParameters.from_dict(utm11.to_dict()) == utm11

    def test_dict_contents(self, utm11):
        data = utm11.to_dict()
        assert data['radius'] == WGS84.radius
        assert data['flattening'] == WGS84.flattening
        assert data['scale_factor'] == 0.9996

    def test_custom_ellipsoid(self):
        params = ProjectionParameters(
            0.0, 0.0, ellipsoid=Ellipsoid(1000.0, 0.01)
        )
        restored = ProjectionParameters.from_dict(params.to_dict())
        assert restored.ellipsoid == Ellipsoid(1000.0, 0.01)

    def test_optional_keys_default(self):
        params = ProjectionParameters.from_dict(
            {'central_meridian': 0.5, 'reference_latitude': 0.25}
        )
        assert params.scale_factor == 1.0
        assert params.ellipsoid == WGS84

    def test_missing_required_key(self):
        with pytest.raises(ProjectionError, match="reference_latitude"):
            ProjectionParameters.from_dict({'central_meridian': 0.0})

    def test_radius_without_flattening(self):
        with pytest.raises(ValidationError, match="together"):
            ProjectionParameters.from_dict({
                'central_meridian': 0.0,
                'reference_latitude': 0.0,
                'radius': 1.0,
            })

    def test_unparseable_value(self):
        with pytest.raises(ValidationError, match="Invalid"):
            ProjectionParameters.from_dict({
                'central_meridian': 'east',
                'reference_latitude': 0.0,
            })


class TestProjectionRoundTrip:
    """Parameters flow into and back out of a projection unchanged."""

    def test_from_parameters(self, utm11):
        proj = TransverseMercatorProjection.from_parameters(utm11)
        assert proj.scale_factor == 0.9996
        assert proj.false_offset == (500000.0, 0.0)
        assert proj.parameters == utm11

    def test_parameters_track_setters(self, utm11):
        proj = TransverseMercatorProjection.from_parameters(utm11)
        proj.set_false_northing(10000000.0)
        assert proj.parameters == utm11.with_false_offset(500000.0, 1e7)

    def test_non_finite_setter_surfaces_in_snapshot(self):
        proj = TransverseMercatorProjection(0.0, 0.0)
        proj.set_stretching(float('inf'))
        with pytest.raises(ValidationError):
            proj.parameters
