import skmob as sm
import unittest

import numpy as npy
from numpy import pi, sin, cos
from numpy.testing import assert_allclose
from scipy.spatial.transform import Rotation


def sphere_points(center, north_axis):
    points = []
    for theta in npy.linspace(0.3, pi, 6):
        for phi in npy.linspace(0, 2 * pi, 8, endpoint=False):
            u = npy.array([sin(theta) * cos(phi), sin(theta) * sin(phi), cos(theta)])
            points.append(npy.asarray(center) + npy.roll(u, north_axis - 2))
    return points


class RotationTransformationTest(unittest.TestCase):
    """
    Test that rotating the sphere acts on the plane as a Möbius
    transformation.
    """

    def setUp(self):
        self.rotations = [
            Rotation.from_euler('z', 90, degrees=True),
            Rotation.from_euler('x', 30, degrees=True),
            Rotation.from_euler('xyz', [30, -45, 60], degrees=True),
            Rotation.from_rotvec([0.3, -1.2, 0.7]),
        ]
        self.projections = [
            sm.stereographic_projection(),
            sm.stereographic_projection([1., -2., 0.5]),
            sm.stereographic_projection(north_axis=0),
            sm.stereographic_projection([0.5, 1.5, -2.], north_axis=1),
        ]

    def assert_commutes(self, m, rotation, proj):
        c = proj.center
        n = proj.north_axis
        for P in sphere_points(c, n):
            Q = rotation.apply(P - c) + c
            if abs(Q[n] - proj.north_pole[n]) < 1e-3:
                # image too close to the north pole
                continue
            assert_allclose(m(proj(P)), proj(Q), rtol=1e-9, atol=1e-9)

    def test_commutes_with_projection(self):
        for proj in self.projections:
            for rotation in self.rotations:
                m = sm.rotation_transformation(rotation, proj)
                self.assert_commutes(m, rotation, proj)

    def test_quarter_turn(self):
        m = sm.rotation_transformation(Rotation.from_euler('z', 90, degrees=True))
        assert_allclose(m(1), 1j, atol=1e-12)
        assert_allclose(m(0), 0, atol=1e-12)
        self.assertGreater(abs(m(sm.get_infinity())), 1e12)

    def test_identity(self):
        m = sm.rotation_transformation(Rotation.identity())
        self.assertTrue(m.isclose(sm.identity_transformation()))
        self.assertEqual(m.dtype, complex)

    def test_matrix_input(self):
        rotation = self.rotations[2]
        for proj in self.projections:
            m = sm.rotation_transformation(rotation.as_matrix(), proj)
            self.assertTrue(m.isclose(sm.rotation_transformation(rotation, proj)))

    def test_composition(self):
        r1, r2 = self.rotations[2], self.rotations[3]
        for proj in self.projections:
            m = sm.rotation_transformation(r1 * r2, proj)
            n = sm.rotation_transformation(r1, proj) @ sm.rotation_transformation(r2, proj)
            self.assertTrue(m.isclose(n))

    def test_inverse(self):
        rotation = self.rotations[3]
        proj = self.projections[1]
        m = sm.rotation_transformation(rotation.inv(), proj)
        self.assertTrue(m.isclose(sm.rotation_transformation(rotation, proj).inv))

    def test_context(self):
        exact = sm.InfinityContext(sm.oo)
        proj = sm.stereographic_projection(context=exact)
        m = sm.rotation_transformation(self.rotations[0], proj)
        self.assertIs(m.context, exact)
