import skmob as sm
import unittest
from fractions import Fraction

import numpy as npy
from numpy import inf, pi, sin, cos
from numpy.testing import assert_almost_equal, assert_array_equal
import pytest

from skmob import GaussianRational as G


def sphere_points(center=(0., 0., 0.), north_axis=2):
    """Points of the unit sphere around `center`, north pole excluded."""
    points = []
    for theta in npy.linspace(0.2, pi, 5):
        for phi in npy.linspace(0, 2 * pi, 7, endpoint=False):
            u = npy.array([sin(theta) * cos(phi), sin(theta) * sin(phi), cos(theta)])
            # put the polar angle on the north axis
            u = npy.roll(u, north_axis - 2)
            points.append(npy.asarray(center) + u)
    return points


class ProjectionTest(unittest.TestCase):
    """
    Test projection and unprojection on the default sphere.
    """

    def setUp(self):
        self.proj = sm.stereographic_projection()

    def test_poles(self):
        self.assertEqual(self.proj.project((0, 0, 0)), 0)
        self.assertIs(self.proj.project((0, 0, 1)), sm.get_infinity())
        assert_array_equal(self.proj.unproject(0), [0, 0, -1])
        assert_array_equal(self.proj.unproject(complex(inf, 0)), [0, 0, 1])
        assert_array_equal(self.proj.unproject(sm.oo), [0, 0, 1])

    def test_known_values(self):
        # (x + iy) / (1 - z)
        self.assertEqual(self.proj.project((1, 0, 0)), 1)
        self.assertEqual(self.proj.project((0, -1, 0)), -1j)
        assert_almost_equal(self.proj.project((0.6, 0, -0.8)), 1 / 3)
        assert_array_equal(self.proj.unproject(1j), [0, 1, 0])
        assert_almost_equal(self.proj.unproject(2), [0.8, 0, 0.6])

    def test_round_trip(self):
        for P in sphere_points():
            assert_almost_equal(self.proj.unproject(self.proj.project(P)), P)
        for z in [0.5, -3j, 1 + 1j, 100 - 20j]:
            assert_almost_equal(self.proj.project(self.proj.unproject(z)), z)

    def test_call_dispatch(self):
        self.assertEqual(self.proj([1, 0, 0]), 1)
        self.assertEqual(self.proj(npy.array([1., 0., 0.])), 1)
        self.assertEqual(self.proj((1, 0, 0)), 1)
        assert_array_equal(self.proj(1j), [0, 1, 0])

    def test_bad_points(self):
        with pytest.raises(ValueError):
            self.proj.project([1, 2])
        with pytest.raises(ValueError):
            self.proj.project([[1, 0, 0]])

    def test_read_only(self):
        with pytest.raises(ValueError):
            self.proj.center[0] = 1.
        with pytest.raises(ValueError):
            self.proj.north_pole[0] = 1.
        P = self.proj.unproject(sm.oo)
        P[0] = 5.
        assert_array_equal(self.proj.north_pole, [0, 0, 1])


class ProjectionGeometryTest(unittest.TestCase):
    """
    Test other centers and north axes.
    """

    def test_attributes(self):
        proj = sm.stereographic_projection([1., 2., 3.])
        assert_array_equal(proj.center, [1, 2, 3])
        assert_array_equal(proj.north_pole, [1, 2, 4])
        self.assertEqual(proj.north_axis, 2)
        self.assertEqual(proj.plane_axes, (0, 1))
        self.assertEqual(proj.dtype, float)

        proj = sm.stereographic_projection(float, north_axis=1)
        assert_array_equal(proj.north_pole, [0, 1, 0])
        self.assertEqual(proj.plane_axes, (0, 2))

    def test_invalid_axis(self):
        for axis in [-1, 3, 2.5]:
            with pytest.raises(ValueError):
                sm.stereographic_projection(north_axis=axis)

    def test_offset_center(self):
        proj = sm.StereographicProjection(1., 2., 3.)
        self.assertEqual(proj.project((2., 2., 3.)), 5 + 2j)
        assert_array_equal(proj.unproject(5 + 2j), [2, 2, 3])

    def test_north_axis(self):
        proj = sm.stereographic_projection(north_axis=0)
        self.assertEqual(proj.project((0, 1, 0)), 1)
        self.assertEqual(proj.project((0, 0, 1)), 1j)
        self.assertIs(proj.project((1, 0, 0)), sm.get_infinity())
        assert_array_equal(proj.unproject(1), [0, 1, 0])

    def test_round_trips(self):
        for center, axis in [((1., 2., 0.5), 2), ((0., 0., 0.), 0),
                             ((-1., 0.5, 3.), 1), ((0.25, -2., 1.), 0)]:
            proj = sm.stereographic_projection(center, north_axis=axis)
            for P in sphere_points(center, axis):
                assert_almost_equal(proj.unproject(proj.project(P)), P)
            for z in [0, 2.5, -1 + 3j]:
                assert_almost_equal(proj.project(proj.unproject(z)), z)

    def test_equality(self):
        self.assertEqual(sm.stereographic_projection([0, 0, 0]),
                         sm.StereographicProjection(0., 0., 0.))
        self.assertEqual(hash(sm.stereographic_projection([0, 0, 0])),
                         hash(sm.StereographicProjection(0., 0., 0.)))
        self.assertNotEqual(sm.stereographic_projection(north_axis=1),
                            sm.stereographic_projection(north_axis=2))
        self.assertEqual(repr(sm.StereographicProjection(1, 2, 3)),
                         'StereographicProjection(center=(1, 2, 3), north_axis=2)')

    def test_alias(self):
        self.assertIs(sm.stereo, sm.stereographic_projection)


def test_exact_round_trip(exact_projection):
    P = (Fraction(3, 5), Fraction(4, 5), Fraction(0))
    z = exact_projection.project(P)
    assert isinstance(z, G)
    assert z == G(Fraction(3, 5), Fraction(4, 5))
    assert list(exact_projection.unproject(z)) == list(P)


def test_exact_values(exact_projection):
    assert exact_projection.dtype is Fraction
    assert all(type(v) is Fraction for v in exact_projection.north_pole)
    z = exact_projection((Fraction(3, 5), 0, Fraction(-4, 5)))
    assert z == G(Fraction(1, 3))
    assert list(exact_projection(G(2))) == [Fraction(4, 5), 0, Fraction(3, 5)]
    assert list(exact_projection(G(1, 1))) == [Fraction(2, 3), Fraction(2, 3), Fraction(1, 3)]
    assert list(exact_projection.unproject(G(0))) == [0, 0, -1]
    assert all(type(v) is Fraction for v in exact_projection.unproject(G(2)))


def test_exact_infinity(exact_projection):
    with sm.infinity_context(sm.oo):
        assert exact_projection.project((0, 0, 1)) is sm.oo
        assert list(exact_projection.unproject(sm.oo)) == [0, 0, 1]

    bound = sm.stereographic_projection(Fraction, context=sm.InfinityContext(sm.oo))
    assert bound.project((Fraction(0), 0, 1)) is sm.oo


def test_exact_offset_center():
    proj = sm.stereographic_projection([Fraction(1, 2), Fraction(0), Fraction(2)],
                                       north_axis=1)
    P = [Fraction(1, 2) + Fraction(3, 5), Fraction(0), Fraction(2) + Fraction(4, 5)]
    z = proj.project(P)
    assert isinstance(z, G)
    assert z == G(Fraction(11, 10), Fraction(14, 5))
    assert list(proj.unproject(z)) == P
