"""
mathFunctions (:mod:`skmob.mathFunctions`)
=============================================


Provides the scalar arithmetic shared by transformations and projections.

Any type supporting ``+``, ``-``, ``*`` and ``/``, comparison with zero,
and exposing ``.real``/``.imag`` can be used as a scalar: built-in and
numpy numbers, :class:`fractions.Fraction`, or
:class:`~skmob.gaussian.GaussianRational`. The helpers below are the only
places where the package relies on more than those operators.

Scalar Arithmetic
-----------------
.. autosummary::
        :toctree: generated/

        promote
        zero_like
        one_like
        is_zero
        inv
        reim
        make_complex

Special Functions
---------------------------------
.. autosummary::
        :toctree: generated/

        cross_ratio

Exceptions
----------
.. autosummary::
        :toctree: generated/

        TypeMismatch

"""
from __future__ import annotations

import numbers
import operator
from functools import reduce
from typing import Any, Optional, Tuple

from .gaussian import GaussianRational
from .infinity import InfinityContext, DEFAULT_CONTEXT


class TypeMismatch(TypeError):
    """Raised when scalars share no common representable type."""
    pass


def promote(*values: Any) -> Tuple[Any, ...]:
    """
    Convert values to their least common scalar type.

    The common type is the type that arithmetic between the values
    produces, so ``int`` and ``Fraction`` promote to ``Fraction``, anything
    and ``complex`` to ``complex``, and so on.

    Parameters
    ----------
    *values : numbers
        scalars to unify

    Returns
    -------
    promoted : tuple
        the values, all of the common type

    Raises
    ------
    TypeMismatch
        if the values cannot be combined arithmetically, or a value cannot
        be converted to the common type.

    Examples
    --------
    >>> promote(1, Fraction(1, 2))
    (Fraction(1, 1), Fraction(1, 2))
    >>> promote(1, 2.5, 1j)
    ((1+0j), (2.5+0j), 1j)
    """
    if not values:
        return ()
    try:
        kind = type(reduce(operator.add, (v * 0 for v in values)))
    except TypeError as err:
        names = ', '.join(sorted({type(v).__name__ for v in values}))
        raise TypeMismatch(f'no common scalar type for {names}') from err

    promoted = []
    for v in values:
        if type(v) is not kind:
            try:
                v = kind(v)
            except (TypeError, ValueError) as err:
                raise TypeMismatch(
                    f'cannot convert {v!r} to {kind.__name__}') from err
        promoted.append(v)
    return tuple(promoted)


def zero_like(x: Any) -> Any:
    """The zero of the type of `x`."""
    return type(x)(0)


def one_like(x: Any) -> Any:
    """The one of the type of `x`."""
    return type(x)(1)


def is_zero(x: Any) -> bool:
    """
    Exact zero test, without tolerance.

    ``-0.0`` is zero, tiny values such as ``1e-300`` are not.
    """
    return bool(x == 0)


def inv(x: Any) -> Any:
    """
    Multiplicative inverse of a scalar.

    Integers invert to floats, the way Python divides them.
    """
    return 1 / x


def reim(z: Any) -> Tuple[Any, Any]:
    """
    Return the real and imaginary parts of `z`.

    Real scalars have a zero imaginary part.
    """
    return z.real, z.imag


def make_complex(x: Any, y: Any) -> Any:
    """
    Build the complex scalar ``x + y*i`` in a type suited to `x` and `y`.

    Floating parts give a built-in complex, exact rational parts a
    :class:`~skmob.gaussian.GaussianRational`, so exact inputs are never
    rounded. Other scalar types supply their own imaginary unit as an ``i``
    attribute or classmethod, as GaussianRational does; types without one
    fall back to the built-in ``1j``.

    Parameters
    ----------
    x, y : number
        real and imaginary parts

    Returns
    -------
    z : number

    Examples
    --------
    >>> make_complex(1.0, 2.0)
    (1+2j)
    >>> make_complex(Fraction(1, 2), 0)
    GaussianRational(1/2, 0)
    """
    if isinstance(x, numbers.Rational) and isinstance(y, numbers.Rational):
        if not (isinstance(x, numbers.Integral) and isinstance(y, numbers.Integral)):
            return GaussianRational(x, y)
    for kind in (type(x), type(y)):
        unit = getattr(kind, 'i', None)
        if unit is not None:
            return x + y * (unit() if callable(unit) else unit)
    if isinstance(x, numbers.Real) and isinstance(y, numbers.Real):
        return complex(x, y)
    return x + y * 1j


def cross_ratio(a: Any, b: Any, c: Any, d: Any,
                context: Optional[InfinityContext] = None) -> Any:
    r"""
    Calculate the cross ratio of a quadruple of distinct points on the
    extended plane.


    The cross ratio is defined as:


    .. math::

        r = \frac{ (a-b)(c-d) }{ (a-d)(c-b) }


    Factors involving a point at infinity are dropped, which is the limit
    of the expression as that point goes to infinity. The cross ratio is
    invariant under Möbius transformations.

    Parameters
    ----------
    a,b,c,d :  number
        points, any of which may be infinite
    context : :class:`~skmob.infinity.InfinityContext`, optional
        context giving the representation of infinity

    Returns
    -------
    r : number
        the cross ratio, or infinity if the denominator vanishes

    References
    ----------
    https://en.wikipedia.org/wiki/Cross-ratio

    """
    context = context or DEFAULT_CONTEXT

    def factor(p, q):
        if context.is_infinite(p) or context.is_infinite(q):
            return 1
        return p - q

    numer = factor(a, b) * factor(c, d)
    denom = factor(a, d) * factor(c, b)
    if is_zero(denom):
        return context.infinity
    return numer * inv(denom)
