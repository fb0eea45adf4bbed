r"""
.. currentmodule:: skmob.mobius

========================================
mobius (:mod:`skmob.mobius`)
========================================

Provides the Möbius transformation class and its algebra.

A Möbius transformation is the map

.. math::

    z \mapsto \frac{az + b}{cz + d}

of the extended complex plane onto itself. The coefficients are only
defined up to a common nonzero factor: ``(a, b, c, d)`` and
``(2a, 2b, 2c, 2d)`` are the same map. Transformations are never
normalized behind the caller's back, so equality and hashing are
projective rather than coefficient-wise.

Transformations are immutable. Composition, inversion, scaling and
normalization all return new objects.

MobiusTransformation Class
==========================
.. autosummary::
   :toctree: generated/

   MobiusTransformation

Construction
============
.. autosummary::
   :toctree: generated/

   transformation
   identity_transformation

Algebra
=======
.. autosummary::
   :toctree: generated/

   apply
   compose
   invert
   equals
   isone
   isclose
   determinant
   normalize
   scale
   as_matrix

"""
from __future__ import annotations

import logging
import numbers
from numbers import Number
from typing import Any, Iterator, Optional, Tuple

import numpy as npy

from .gaussian import GaussianRational
from .infinity import InfinityContext, DEFAULT_CONTEXT, oo
from .mathFunctions import promote, is_zero, inv

logger = logging.getLogger(__name__)


class MobiusTransformation:
    """
    A Möbius transformation ``z -> (a*z + b) / (c*z + d)``.

    The four coefficients are promoted to a common scalar type on
    construction. A nonzero determinant ``a*d - b*c`` is required for the
    transformation to be invertible, but is not checked.

    Calling the object applies the transformation. Infinite inputs, and
    finite inputs sent to infinity, are handled through the
    :class:`~skmob.infinity.InfinityContext` of the transformation.

    Parameters
    ----------
    a, b, c, d : number
        coefficients
    context : :class:`~skmob.infinity.InfinityContext`, optional
        representation of infinity used by this transformation. Default is
        the process-wide setting, see :func:`~skmob.infinity.set_infinity`.

    Raises
    ------
    TypeMismatch
        if the coefficients share no common scalar type

    See Also
    --------
    transformation : build a transformation from coefficients or points

    Examples
    --------
    >>> m = MobiusTransformation(0, 1, 1, 0)
    >>> m(2)
    0.5
    >>> m(0)
    (inf+0j)
    >>> print(m)
    z -> (0*z + 1) / (1*z + 0)
    """

    def __init__(self, a: Number, b: Number, c: Number, d: Number,
                 context: Optional[InfinityContext] = None) -> None:
        self._a, self._b, self._c, self._d = promote(a, b, c, d)
        self._context = context

    @property
    def a(self) -> Any:
        return self._a

    @property
    def b(self) -> Any:
        return self._b

    @property
    def c(self) -> Any:
        return self._c

    @property
    def d(self) -> Any:
        return self._d

    @property
    def coefficients(self) -> Tuple[Any, Any, Any, Any]:
        """The coefficients as a tuple ``(a, b, c, d)``."""
        return self._a, self._b, self._c, self._d

    @property
    def dtype(self) -> type:
        """The common type of the coefficients."""
        return type(self._a)

    @property
    def context(self) -> InfinityContext:
        """The infinity context consulted by :meth:`apply`."""
        return self._context or DEFAULT_CONTEXT

    def __iter__(self) -> Iterator[Any]:
        return iter(self.coefficients)

    def with_context(self, context: Optional[InfinityContext]) -> 'MobiusTransformation':
        """Return the same transformation bound to another infinity context."""
        return MobiusTransformation(*self.coefficients, context=context)

    def _derive(self, a, b, c, d, other: Optional['MobiusTransformation'] = None):
        context = self._context
        if context is None and other is not None:
            context = other._context
        return MobiusTransformation(a, b, c, d, context=context)

    def apply(self, z: Any) -> Any:
        """
        Apply the transformation to a point of the extended plane.

        If `z` is infinite the result is ``a/c``, or infinity when ``c`` is
        zero. Otherwise the result is ``(a*z + b) / (c*z + d)``, or infinity
        when the denominator is exactly zero.

        Parameters
        ----------
        z : number, infinity, or array-like
            point(s) to map. Sequences and arrays are mapped elementwise.

        Returns
        -------
        w : number, infinity, or ndarray
        """
        if isinstance(z, (npy.ndarray, list, tuple)):
            w = npy.frompyfunc(self._apply, 1, 1)(npy.asarray(z, dtype=object))
            return npy.array(w.tolist())
        return self._apply(z)

    def _apply(self, z: Any) -> Any:
        context = self.context
        a, b, c, d = self.coefficients
        if context.is_infinite(z):
            numer, denom = a, c
        else:
            numer, denom = a * z + b, c * z + d

        if is_zero(denom):
            logger.debug('%s sends %r to infinity', self, z)
            return context.infinity
        return numer * inv(denom)

    __call__ = apply

    def compose(self, other: 'MobiusTransformation') -> 'MobiusTransformation':
        """
        Compose with another transformation.

        The result maps ``z`` to ``self(other(z))``; its coefficient matrix
        is the product of the two coefficient matrices.
        """
        a, b, c, d = self.coefficients
        e, f, g, h = other.coefficients
        return self._derive(a * e + b * g, a * f + b * h,
                            c * e + d * g, c * f + d * h, other)

    def __matmul__(self, other: Any) -> 'MobiusTransformation':
        if not isinstance(other, MobiusTransformation):
            return NotImplemented
        return self.compose(other)

    def __mul__(self, other: Any) -> 'MobiusTransformation':
        if not isinstance(other, MobiusTransformation):
            return NotImplemented
        return self.compose(other)

    def __rmul__(self, other: Any) -> 'MobiusTransformation':
        if isinstance(other, MobiusTransformation):
            return NotImplemented
        return self.scale(other)

    def invert(self) -> 'MobiusTransformation':
        """
        The inverse transformation, ``(d, -b, -c, a)``.

        This is the adjugate of the coefficient matrix. It is the inverse
        up to the factor ``1/det``, which does not change the map, so no
        division is performed.
        """
        a, b, c, d = self.coefficients
        return self._derive(d, -b, -c, a)

    @property
    def inv(self) -> 'MobiusTransformation':
        """The inverse transformation, see :meth:`invert`."""
        return self.invert()

    def isone(self) -> bool:
        """
        True if the stored coefficients are those of the identity map.

        The test is exact and is made on the stored coefficients, so
        ``(2, 0, 0, 2)`` is the identity but ``(1, 1e-17, 0, 1)`` is not.
        """
        a, b, c, d = self.coefficients
        return is_zero(b) and is_zero(c) and bool(a == d)

    def equals(self, other: 'MobiusTransformation') -> bool:
        """
        Projective equality: True if both transformations are the same map,
        whatever the scale of their coefficients.
        """
        return self.compose(other.invert()).isone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MobiusTransformation):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, MobiusTransformation):
            return NotImplemented
        return not self.equals(other)

    def isclose(self, other: 'MobiusTransformation', rtol: float = 1e-05,
                atol: float = 1e-08) -> bool:
        """
        Approximate projective equality.

        ``self`` composed with the inverse of ``other`` is scaled so that its
        largest diagonal coefficient has unit modulus, then compared to the
        identity with :func:`numpy.isclose`.

        Parameters
        ----------
        other : :class:`MobiusTransformation`
        rtol, atol : float, optional
            relative and absolute tolerances, as in :func:`numpy.isclose`

        Returns
        -------
        close : bool
        """
        a, b, c, d = (complex(k) for k in self.compose(other.invert()))
        size = max(abs(a), abs(d))
        if size == 0:
            return False
        a, b, c, d = a / size, b / size, c / size, d / size
        return bool(npy.isclose(a, d, rtol=rtol, atol=atol)
                    and npy.isclose(b, 0, rtol=rtol, atol=atol)
                    and npy.isclose(c, 0, rtol=rtol, atol=atol))

    def determinant(self) -> Any:
        """The determinant ``a*d - b*c`` of the coefficient matrix."""
        a, b, c, d = self.coefficients
        return a * d - b * c

    def scale(self, factor: Any) -> 'MobiusTransformation':
        """
        Multiply every coefficient by `factor`.

        For a nonzero `factor` the result is the same map as ``self``.
        """
        a, b, c, d = self.coefficients
        return self._derive(factor * a, factor * b, factor * c, factor * d)

    def normalize(self) -> 'MobiusTransformation':
        """
        Return the equal transformation scaled by the inverse of its
        determinant.

        The result is the same map, and its determinant is ``1/det``.
        Reaching a unit determinant would take a square root, which exact
        scalar fields do not provide in general.

        The determinant must be nonzero; for exact scalars a zero
        determinant raises :class:`ZeroDivisionError`.
        """
        return self.scale(inv(self.determinant()))

    def as_matrix(self) -> npy.ndarray:
        """
        The coefficient matrix ``[[a, b], [c, d]]``.

        The returned array is read-only. Exact scalar types give an array of
        ``object`` dtype.
        """
        a, b, c, d = self.coefficients
        if isinstance(a, (int, float, complex, npy.number)):
            h = npy.array([[a, b], [c, d]])
        else:
            h = npy.array([[a, b], [c, d]], dtype=object)
        h.flags.writeable = False
        return h

    def __hash__(self) -> int:
        context = self.context
        values = []
        for w in (self._apply(0), self._apply(1), self._apply(context.infinity)):
            if context.is_infinite(w):
                w = oo
            elif isinstance(w, (numbers.Complex, GaussianRational)):
                # exact and floating values hash alike, -0.0 folds into +0.0
                w = complex(w) + 0j
            values.append(w)
        return hash(tuple(values))

    def __str__(self) -> str:
        a, b, c, d = self.coefficients
        return f'z -> ({a}*z + {b}) / ({c}*z + {d})'

    def __repr__(self) -> str:
        a, b, c, d = self.coefficients
        return f'MobiusTransformation({a!r}, {b!r}, {c!r}, {d!r})'


def transformation(*args: Any, context: Optional[InfinityContext] = None) -> MobiusTransformation:
    """
    Build a Möbius transformation from coefficients or from points.

    The meaning of the arguments depends on how many are given:

    ======================= ==============================================
    arguments               transformation
    ======================= ==============================================
    ``a, b, c, d``          ``z -> (a*z + b) / (c*z + d)``
    ``coeffs``              4-sequence ``(a, b, c, d)`` or 2x2 matrix
    ``x, y, z``             maps ``(0, 1, inf)`` to ``(x, y, z)``
    ``triple``              3-sequence, same as ``x, y, z``
    ``x, y, z, X, Y, Z``    maps ``(x, y, z)`` to ``(X, Y, Z)``
    ``source, target``      two 3-sequences, same as the six points
    ======================= ==============================================

    Points may be infinite. The three points of a triple must be distinct;
    this is not checked and repeated points give a degenerate map.

    Parameters
    ----------
    *args : numbers or sequences
        see above
    context : :class:`~skmob.infinity.InfinityContext`, optional
        representation of infinity used by the result

    Returns
    -------
    m : :class:`MobiusTransformation`

    Raises
    ------
    TypeMismatch
        if the coefficients share no common scalar type
    ValueError
        if the arguments match none of the forms above

    Examples
    --------
    >>> transformation(1, 2, 3, 4)
    MobiusTransformation(1, 2, 3, 4)
    >>> m = transformation([0, 1, 2], [1, 2, 3])
    >>> m(2)
    3.0
    """
    from .triples import from_canonical_triple, from_triples

    if len(args) == 1:
        args = _unpack(args[0])
    elif len(args) == 2:
        source, target = (_unpack(arg) for arg in args)
        if len(source) != 3 or len(target) != 3:
            raise ValueError('source and target must both be triples of points')
        args = (*source, *target)

    if len(args) == 4:
        return MobiusTransformation(*args, context=context)
    elif len(args) == 3:
        return from_canonical_triple(*args, context=context)
    elif len(args) == 6:
        return from_triples(*args, context=context)
    raise ValueError(f'cannot build a transformation from {len(args)} values')


def _unpack(arg: Any) -> Tuple[Any, ...]:
    if isinstance(arg, MobiusTransformation):
        return arg.coefficients
    if npy.shape(arg) == (2, 2):
        return tuple(v for row in arg for v in row)
    try:
        return tuple(arg)
    except TypeError as err:
        raise ValueError(f'expected a sequence of points or coefficients, got {arg!r}') from err


def identity_transformation(dtype: type = complex,
                            context: Optional[InfinityContext] = None) -> MobiusTransformation:
    """
    The identity transformation ``(1, 0, 0, 1)`` with coefficients of type
    `dtype`.

    Parameters
    ----------
    dtype : type, optional
        scalar type of the coefficients. Default is complex.
    context : :class:`~skmob.infinity.InfinityContext`, optional
    """
    return MobiusTransformation(dtype(1), dtype(0), dtype(0), dtype(1), context=context)


def apply(m: MobiusTransformation, z: Any) -> Any:
    """Apply `m` to `z`, see :meth:`MobiusTransformation.apply`."""
    return m.apply(z)


def compose(m: MobiusTransformation, n: MobiusTransformation) -> MobiusTransformation:
    """The composition ``z -> m(n(z))``."""
    return m.compose(n)


def invert(m: MobiusTransformation) -> MobiusTransformation:
    """The inverse of `m`, see :meth:`MobiusTransformation.invert`."""
    return m.invert()


def equals(m: MobiusTransformation, n: MobiusTransformation) -> bool:
    """Projective equality of `m` and `n`."""
    return m.equals(n)


def isone(m: MobiusTransformation) -> bool:
    """True if the coefficients of `m` are those of the identity."""
    return m.isone()


def isclose(m: MobiusTransformation, n: MobiusTransformation,
            rtol: float = 1e-05, atol: float = 1e-08) -> bool:
    """Approximate projective equality, see :meth:`MobiusTransformation.isclose`."""
    return m.isclose(n, rtol=rtol, atol=atol)


def determinant(m: MobiusTransformation) -> Any:
    """The determinant ``a*d - b*c`` of `m`."""
    return m.determinant()


def normalize(m: MobiusTransformation) -> MobiusTransformation:
    """`m` scaled by the inverse of its determinant."""
    return m.normalize()


def scale(m: MobiusTransformation, factor: Any) -> MobiusTransformation:
    """`m` with every coefficient multiplied by `factor`."""
    return m.scale(factor)


def as_matrix(m: MobiusTransformation) -> npy.ndarray:
    """Read-only coefficient matrix of `m`."""
    return m.as_matrix()
