from fractions import Fraction

import pytest

import skmob as sm


@pytest.fixture(autouse=True)
def default_infinity():
    previous = sm.set_infinity(sm.COMPLEX_INF)
    yield sm.COMPLEX_INF
    sm.set_infinity(previous)


@pytest.fixture()
def exact_projection() -> sm.StereographicProjection:
    return sm.stereographic_projection(Fraction)
