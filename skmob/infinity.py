"""
.. currentmodule:: skmob.infinity

========================================
infinity (:mod:`skmob.infinity`)
========================================

Representation of the point at infinity of the extended complex plane.

Every operation that may divide by zero, or that may receive the point at
infinity as input, consults an :class:`InfinityContext`. Unless a context is
given explicitly, the process-wide value set with :func:`set_infinity` is used.
Floating point scalars use ``complex(inf, 0)`` by default; exact scalar
domains may use :data:`oo` or any value of their own.

.. autosummary::
   :toctree: generated/

   get_infinity
   set_infinity
   infinity_context
   is_infinite
   InfinityContext
   PointAtInfinity

"""
from __future__ import annotations

import contextlib
import logging
from typing import Any, Iterator, Optional

import numpy as npy

from .constants import COMPLEX_INF

logger = logging.getLogger(__name__)


class PointAtInfinity:
    """
    The unsigned point at infinity, for scalar types with no infinity of
    their own.

    There is a single instance, :data:`oo`.
    """
    _instance: Optional['PointAtInfinity'] = None

    def __new__(cls) -> 'PointAtInfinity':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'oo'

    def __hash__(self) -> int:
        return hash(PointAtInfinity)

    def __reduce__(self):
        return (PointAtInfinity, ())


oo = PointAtInfinity()


class _InfinitySetting:
    value: Any = COMPLEX_INF


_infinity_setting = _InfinitySetting()


def get_infinity() -> Any:
    """The current process-wide representation of infinity."""
    return _infinity_setting.value


def set_infinity(infinity: Any) -> Any:
    """
    Change the process-wide representation of infinity (permanently).

    The value is not checked against the scalar type in use, so it is up
    to the caller to choose one that makes sense for the coefficients and
    points at hand.

    Parameters
    ----------
    infinity : object
        New value returned for the point at infinity

    Returns
    -------
    previous_infinity : object
        The value replaced, which can be passed to `set_infinity` to restore it

    Examples
    --------
    >>> from fractions import Fraction
    >>> previous = skmob.set_infinity(skmob.oo)
    >>> skmob.transformation(0, 1, 1, 0)(Fraction(0))
    oo
    >>> skmob.set_infinity(previous)
    oo
    """
    previous_infinity = _infinity_setting.value
    _infinity_setting.value = infinity
    logger.debug('Infinity changed from %r to %r', previous_infinity, infinity)
    return previous_infinity


@contextlib.contextmanager
def infinity_context(infinity: Any) -> Iterator[Any]:
    """
    Change the representation of infinity temporarily via context manager.

    Parameters
    ----------
    infinity : object
        Temporary value of the point at infinity

    Examples
    --------
    >>> with infinity_context(oo):
    ...     skmob.transformation(0, 1, 1, 0)(0)
    oo
    """
    previous_infinity = set_infinity(infinity)
    try:
        yield infinity
    finally:
        set_infinity(previous_infinity)


def _is_infinite(z: Any, infinity: Any) -> bool:
    if z is infinity or z is oo:
        return True
    if isinstance(z, (float, complex, npy.floating, npy.complexfloating)):
        return bool(npy.isinf(z))
    try:
        return bool(z == infinity)
    except TypeError:
        return False


class InfinityContext:
    """
    Configuration deciding what the point at infinity is.

    A context created without a value follows the process-wide setting of
    :func:`set_infinity` at the time it is consulted. A context created
    with a value always uses that value, whatever the global setting is.

    Parameters
    ----------
    infinity : object, optional
        Value used for the point at infinity. Default is None, which defers
        to :func:`get_infinity`.

    Examples
    --------
    >>> exact = skmob.InfinityContext(skmob.oo)
    >>> skmob.transformation(0, 1, 1, 0, context=exact)(0)
    oo
    """
    def __init__(self, infinity: Any = None) -> None:
        self._infinity = infinity

    @property
    def infinity(self) -> Any:
        """The value used for the point at infinity."""
        if self._infinity is None:
            return get_infinity()
        return self._infinity

    @property
    def is_global(self) -> bool:
        """True if this context follows the process-wide setting."""
        return self._infinity is None

    def is_infinite(self, z: Any) -> bool:
        """Test whether `z` denotes the point at infinity."""
        return _is_infinite(z, self.infinity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InfinityContext):
            return NotImplemented
        return self._infinity is other._infinity or self._infinity == other._infinity

    def __hash__(self) -> int:
        return hash((InfinityContext, self._infinity))

    def __repr__(self) -> str:
        if self._infinity is None:
            return 'InfinityContext()'
        return f'InfinityContext({self._infinity!r})'


DEFAULT_CONTEXT = InfinityContext()


def is_infinite(z: Any, context: Optional[InfinityContext] = None) -> bool:
    """
    Test whether a value denotes the point at infinity.

    A value is infinite if it is the configured infinity, if it is
    :data:`oo`, or if it is a floating point number with an infinite
    real or imaginary part.

    Parameters
    ----------
    z : number
        value to test
    context : :class:`InfinityContext`, optional
        context giving the configured infinity. Default is the
        process-wide setting.

    Returns
    -------
    infinite : bool
    """
    return (context or DEFAULT_CONTEXT).is_infinite(z)
