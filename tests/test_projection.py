"""
Tests for projection building and forward conversion.
"""

import math
import unittest

import numpy as np

from dcsgeo import config
from dcsgeo.errors import OutOfDomainError, ProjectionInitError
from dcsgeo.projection import PyprojEngine, convert_dcs_lat_lon, convert_many, proj_from_map
from dcsgeo.theatre import THEATRE_IDS, lookup

from tests.fakes import InfiniteEngine, RejectingEngine, ScalingEngine


class TestProjFromMap(unittest.TestCase):
    """Test projection handle construction."""

    def test_submits_definition_and_target(self):
        """Test the builder passes the theatre definition and WGS84 target."""
        engine = ScalingEngine()
        proj_from_map(lookup("Syria"), engine)
        self.assertEqual(engine.built, [(lookup("Syria").proj4, "EPSG:4326")])

    def test_target_is_wgs84_geographic(self):
        """Test every handle targets the EPSG:4326 lat/lon system."""
        self.assertEqual(config.TARGET_CRS, "EPSG:4326")

    def test_rejection_is_logged_and_raised(self):
        """Test an engine rejection surfaces as ProjectionInitError."""
        engine = RejectingEngine()
        with self.assertLogs("dcsgeo.projection.builder", level="ERROR") as logs:
            with self.assertRaises(ProjectionInitError) as ctx:
                proj_from_map(lookup("Normandy"), engine)
        self.assertEqual(ctx.exception.definition, lookup("Normandy").proj4)
        self.assertIn("rejected by test engine", logs.output[0])
        self.assertEqual(len(engine.built), 1)

    def test_pyproj_rejects_bad_definition(self):
        """Test pyproj errors are wrapped in ProjectionInitError."""
        with self.assertRaises(ProjectionInitError) as ctx:
            PyprojEngine().build("+proj=no_such_projection", "EPSG:4326")
        self.assertEqual(ctx.exception.definition, "+proj=no_such_projection")
        self.assertTrue(ctx.exception.detail)


class TestForwardConversion(unittest.TestCase):
    """Test planar to geographic conversion."""

    def test_axes_are_swapped(self):
        """Test (x, y) is submitted to the engine as (y, x)."""
        engine = ScalingEngine()
        lat, lon = convert_dcs_lat_lon(2000.0, 5000.0, "handle", engine)
        self.assertEqual(engine.forwarded, [(5000.0, 2000.0)])
        self.assertEqual((lat, lon), (5.0, 2.0))

    def test_engine_domain_error_propagates(self):
        """Test engine domain errors are not swallowed."""
        with self.assertRaises(OutOfDomainError):
            convert_dcs_lat_lon(0.0, 1e9, "handle", ScalingEngine())

    def test_non_finite_result_is_out_of_domain(self):
        """Test infinite engine output is rejected rather than returned."""
        with self.assertRaises(OutOfDomainError):
            convert_dcs_lat_lon(0.0, 0.0, "handle", InfiniteEngine())

    def test_persian_gulf_reference_point(self):
        """Test the PersianGulf reference conversion through PROJ."""
        handle = proj_from_map(lookup("PersianGulf"))
        lat, lon = convert_dcs_lat_lon(-100594.371094, -88875.371094, handle)
        self.assertAlmostEqual(lat, 55.3652612, delta=1e-5)
        self.assertAlmostEqual(lon, 25.25637587, delta=1e-5)

    def test_theatre_origins_convert(self):
        """Test the grid origin of every theatre is inside its domain."""
        for theatre in THEATRE_IDS:
            with self.subTest(theatre=theatre):
                lat, lon = convert_dcs_lat_lon(0.0, 0.0, proj_from_map(lookup(theatre)))
                self.assertTrue(math.isfinite(lat))
                self.assertTrue(math.isfinite(lon))

    def test_far_point_is_out_of_domain(self):
        """Test a point far beyond any theatre raises OutOfDomainError."""
        for theatre in THEATRE_IDS:
            with self.subTest(theatre=theatre):
                with self.assertRaises(OutOfDomainError):
                    convert_dcs_lat_lon(0.0, 1e8, proj_from_map(lookup(theatre)))

    def test_far_northing_is_not_rejected(self):
        """Test far x values come back finite: PROJ wraps northings instead of failing."""
        for theatre in THEATRE_IDS:
            with self.subTest(theatre=theatre):
                lat, lon = convert_dcs_lat_lon(1e7, 1e7, proj_from_map(lookup(theatre)))
                self.assertTrue(math.isfinite(lat))
                self.assertTrue(math.isfinite(lon))


class TestConvertMany(unittest.TestCase):
    """Test batch conversion."""

    def test_matches_single_conversion(self):
        """Test batch results equal point-by-point results."""
        handle = proj_from_map(lookup("Caucasus"))
        xs = np.array([-281713.0, -250000.0, -317948.32727306])
        ys = np.array([647369.0, 600000.0, 636639.61853718])
        lats, lons = convert_many(xs, ys, handle)
        for x, y, lat, lon in zip(xs, ys, lats, lons):
            single = convert_dcs_lat_lon(float(x), float(y), handle)
            self.assertAlmostEqual(lat, single[0], places=9)
            self.assertAlmostEqual(lon, single[1], places=9)

    def test_default_forward_many(self):
        """Test the engine's point-by-point fallback keeps the axis swap."""
        lats, lons = convert_many([1000.0, 2000.0], [3000.0, 4000.0], "handle", ScalingEngine())
        np.testing.assert_allclose(lats, [3.0, 4.0])
        np.testing.assert_allclose(lons, [1.0, 2.0])

    def test_shape_mismatch(self):
        """Test differently sized x and y arrays are rejected."""
        with self.assertRaises(ValueError):
            convert_many([1.0, 2.0], [1.0], "handle", ScalingEngine())

    def test_any_bad_point_fails_batch(self):
        """Test one point outside the domain fails the whole batch."""
        handle = proj_from_map(lookup("Nevada"))
        with self.assertRaises(OutOfDomainError):
            convert_many([0.0, 0.0], [0.0, 1e8], handle)


if __name__ == "__main__":
    unittest.main()
