"""
.. currentmodule:: skmob.gaussian

========================================
gaussian (:mod:`skmob.gaussian`)
========================================

Exact complex numbers with rational real and imaginary parts.

Built-in complex numbers round every operation, so two transformations
that are mathematically equal rarely compare equal once they have been
composed a few times. :class:`GaussianRational` is a small exact field
(the rationals extended by ``i``) that can be used wherever a scalar is
expected: as transformation coefficients, as points, and as the output
of a stereographic projection of a point with rational coordinates.

Mixing a :class:`GaussianRational` with a float or complex number falls
back to built-in complex arithmetic, like :class:`fractions.Fraction`
does with floats.

.. autosummary::
   :toctree: generated/

   GaussianRational

"""
from __future__ import annotations

import numbers
import operator
import sys
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable, Union

RationalLike = Union[int, Fraction, numbers.Rational]


def _hash_complex(hash_real: int, hash_imag: int) -> int:
    # same combination as CPython's complex.__hash__, so that exact values
    # hash like the built-in numbers they compare equal to
    width = sys.hash_info.width
    combined = hash_real + sys.hash_info.imag * hash_imag
    combined = (combined + 2**(width - 1)) % 2**width - 2**(width - 1)
    return -2 if combined == -1 else combined


@dataclass(frozen=True, eq=False)
class GaussianRational:
    """
    Complex number ``real + imag*i`` with exact rational parts.

    Parameters
    ----------
    real : int, Fraction, str or GaussianRational
        real part, or a GaussianRational to copy
    imag : int, Fraction or str, optional
        imaginary part. Default is 0.

    Examples
    --------
    >>> z = GaussianRational(1, Fraction(1, 2))
    >>> z * z
    GaussianRational(3/4, 1)
    >>> 1 / GaussianRational(0, 1)
    GaussianRational(0, -1)
    """

    real: Fraction
    imag: Fraction = Fraction(0)

    def __post_init__(self) -> None:
        real, imag = self.real, self.imag
        if isinstance(real, GaussianRational):
            real, imag = real.real, real.imag + Fraction(imag)
        object.__setattr__(self, 'real', Fraction(real))
        object.__setattr__(self, 'imag', Fraction(imag))

    @classmethod
    def i(cls) -> 'GaussianRational':
        """The imaginary unit."""
        return cls(0, 1)

    def conjugate(self) -> 'GaussianRational':
        return GaussianRational(self.real, -self.imag)

    def norm(self) -> Fraction:
        """Squared modulus, ``real**2 + imag**2``, which is rational."""
        return self.real * self.real + self.imag * self.imag

    def _add(a, b):
        return GaussianRational(a.real + b.real, a.imag + b.imag)

    def _sub(a, b):
        return GaussianRational(a.real - b.real, a.imag - b.imag)

    def _mul(a, b):
        return GaussianRational(a.real * b.real - a.imag * b.imag,
                                a.real * b.imag + a.imag * b.real)

    def _div(a, b):
        n = b.norm()
        if n == 0:
            raise ZeroDivisionError('GaussianRational division by zero')
        return GaussianRational((a.real * b.real + a.imag * b.imag) / n,
                                (a.imag * b.real - a.real * b.imag) / n)

    def _operator_fallbacks(exact_op: Callable, inexact_op: Callable):
        """
        Build forward and reverse operators, in the manner of
        :mod:`fractions`. Rationals are promoted to GaussianRational,
        floats and complexes demote the exact operand to complex.
        """
        def forward(a, b):
            if isinstance(b, GaussianRational):
                return exact_op(a, b)
            if isinstance(b, numbers.Rational):
                return exact_op(a, GaussianRational(b))
            if isinstance(b, numbers.Complex):
                return inexact_op(complex(a), complex(b))
            return NotImplemented
        forward.__name__ = '__' + inexact_op.__name__ + '__'

        def reverse(b, a):
            if isinstance(a, numbers.Rational):
                return exact_op(GaussianRational(a), b)
            if isinstance(a, numbers.Complex):
                return inexact_op(complex(a), complex(b))
            return NotImplemented
        reverse.__name__ = '__r' + inexact_op.__name__ + '__'

        return forward, reverse

    __add__, __radd__ = _operator_fallbacks(_add, operator.add)
    __sub__, __rsub__ = _operator_fallbacks(_sub, operator.sub)
    __mul__, __rmul__ = _operator_fallbacks(_mul, operator.mul)
    __truediv__, __rtruediv__ = _operator_fallbacks(_div, operator.truediv)

    def __neg__(self) -> 'GaussianRational':
        return GaussianRational(-self.real, -self.imag)

    def __pos__(self) -> 'GaussianRational':
        return self

    def __pow__(self, exponent: int) -> 'GaussianRational':
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        result, base = GaussianRational(1), self
        if exponent < 0:
            base, exponent = 1 / base, -exponent
        for _ in range(int(exponent)):
            result = result * base
        return result

    def __complex__(self) -> complex:
        return complex(float(self.real), float(self.imag))

    def __bool__(self) -> bool:
        return self.real != 0 or self.imag != 0

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, GaussianRational):
            return self.real == other.real and self.imag == other.imag
        if isinstance(other, numbers.Complex):
            return self.real == other.real and self.imag == other.imag
        return NotImplemented

    def __hash__(self) -> int:
        if self.imag == 0:
            return hash(self.real)
        return _hash_complex(hash(self.real), hash(self.imag))

    def __repr__(self) -> str:
        return f'GaussianRational({self.real}, {self.imag})'

    def __str__(self) -> str:
        if self.imag == 0:
            return str(self.real)
        if self.real == 0:
            return f'{self.imag}i'
        sign = '-' if self.imag < 0 else '+'
        return f'({self.real} {sign} {abs(self.imag)}i)'
