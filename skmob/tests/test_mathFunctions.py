import skmob as sm
import unittest
from decimal import Decimal
from fractions import Fraction

import numpy as npy
from numpy import inf
import pytest

from skmob import GaussianRational as G


class PromoteTest(unittest.TestCase):
    """
    Test promotion of scalars to a common type.
    """

    def test_promote(self):
        promoted = sm.promote(1, Fraction(1, 2))
        self.assertEqual(promoted, (Fraction(1), Fraction(1, 2)))
        self.assertTrue(all(type(v) is Fraction for v in promoted))

        promoted = sm.promote(1, 2.5, 1j)
        self.assertEqual(promoted, (1 + 0j, 2.5 + 0j, 1j))
        self.assertTrue(all(type(v) is complex for v in promoted))

        promoted = sm.promote(Fraction(1, 2), G(0, 1))
        self.assertTrue(all(type(v) is G for v in promoted))

        promoted = sm.promote(npy.float64(1), 2)
        self.assertTrue(all(type(v) is npy.float64 for v in promoted))

    def test_promote_nothing(self):
        self.assertEqual(sm.promote(), ())

    def test_type_mismatch(self):
        for values in [(Decimal(1), 1.5), (Decimal(1), Fraction(1, 2)),
                       (G(1), Decimal(1))]:
            with pytest.raises(sm.TypeMismatch):
                sm.promote(*values)
        self.assertTrue(issubclass(sm.TypeMismatch, TypeError))


class ScalarHelpersTest(unittest.TestCase):

    def test_zero_and_one(self):
        self.assertEqual(sm.zero_like(Fraction(3)), 0)
        self.assertIs(type(sm.zero_like(Fraction(3))), Fraction)
        self.assertEqual(sm.one_like(G(1, 1)), G(1))
        self.assertIs(type(sm.one_like(2.5)), float)

    def test_is_zero(self):
        self.assertTrue(sm.is_zero(-0.0))
        self.assertTrue(sm.is_zero(0j))
        self.assertTrue(sm.is_zero(G(0)))
        self.assertFalse(sm.is_zero(1e-300))
        self.assertFalse(sm.is_zero(Fraction(1, 10**30)))

    def test_inv(self):
        self.assertEqual(sm.inv(2), 0.5)
        self.assertEqual(sm.inv(Fraction(2)), Fraction(1, 2))
        self.assertEqual(sm.inv(G(0, 1)), G(0, -1))

    def test_reim(self):
        self.assertEqual(sm.reim(3), (3, 0))
        self.assertEqual(sm.reim(1 + 2j), (1., 2.))
        self.assertEqual(sm.reim(G(1, 2)), (Fraction(1), Fraction(2)))

    def test_make_complex(self):
        self.assertEqual(sm.make_complex(1.0, 2.0), 1 + 2j)
        self.assertIs(type(sm.make_complex(1, 2)), complex)
        self.assertIs(type(sm.make_complex(npy.float64(1), npy.float64(2))), complex)
        z = sm.make_complex(Fraction(1, 2), 0)
        self.assertIsInstance(z, G)
        self.assertEqual(z, Fraction(1, 2))
        self.assertEqual(sm.make_complex(G(1), Fraction(1)), G(1, 1))
        z = sm.make_complex(Fraction(1), G(2))
        self.assertIsInstance(z, G)
        self.assertEqual(z, G(1, 2))

    def test_make_complex_uses_own_unit(self):
        class Symbol:
            i = 'I'

            def __init__(self, name):
                self.name = name

            def __add__(self, other):
                return f'{self.name} + {other}'

            def __mul__(self, other):
                return f'{self.name}*{other}'

        self.assertEqual(sm.make_complex(Symbol('x'), Symbol('y')), 'x + y*I')


class CrossRatioTest(unittest.TestCase):
    """
    Test the cross ratio, including points at infinity.
    """

    def test_finite(self):
        self.assertAlmostEqual(sm.cross_ratio(1, 2, 3, 4), -1 / 3)
        self.assertEqual(sm.cross_ratio(Fraction(1), 2, 3, 4), Fraction(-1, 3))

    def test_infinite_point(self):
        self.assertEqual(sm.cross_ratio(complex(inf, 0), 2., 3., 4.), -1)
        self.assertEqual(sm.cross_ratio(1., 2., 3., sm.oo), -1)

    def test_vanishing_denominator(self):
        self.assertIs(sm.cross_ratio(1, 2, 3, 1), sm.get_infinity())
        exact = sm.InfinityContext(sm.oo)
        self.assertIs(sm.cross_ratio(Fraction(1), 2, 3, 1, context=exact), sm.oo)
