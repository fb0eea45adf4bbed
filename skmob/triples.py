"""
.. currentmodule:: skmob.triples

========================================
triples (:mod:`skmob.triples`)
========================================

Möbius transformations determined by three points.

A Möbius transformation is fixed by the images of three distinct points.
:func:`from_canonical_triple` solves the case where the source points are
``(0, 1, inf)``; any other source triple is handled by composing two such
solutions, so the case analysis for infinite points lives in one place.

.. autosummary::
   :toctree: generated/

   from_canonical_triple
   from_triples

"""
from __future__ import annotations

import logging
from typing import Any, Optional

from .infinity import InfinityContext, DEFAULT_CONTEXT
from .mobius import MobiusTransformation

logger = logging.getLogger(__name__)


def from_canonical_triple(x: Any, y: Any, z: Any,
                          context: Optional[InfinityContext] = None) -> MobiusTransformation:
    """
    Return the transformation mapping ``(0, 1, inf)`` to ``(x, y, z)``.

    Any one of the points may be infinite.

    Parameters
    ----------
    x, y, z : number or infinity
        images of 0, 1 and infinity. They must be pairwise distinct; repeated
        points silently give a degenerate (non-invertible) transformation.
    context : :class:`~skmob.infinity.InfinityContext`, optional
        representation of infinity, used to recognise infinite points and
        carried by the result

    Returns
    -------
    m : :class:`~skmob.mobius.MobiusTransformation`

    Examples
    --------
    >>> m = from_canonical_triple(2, 3, 4)
    >>> m(0), m(1), m(complex('inf'))
    (2.0, 3.0, 4.0)
    """
    is_infinite = (context or DEFAULT_CONTEXT).is_infinite
    if is_infinite(x):
        return MobiusTransformation(z, y - z, 1, 0, context=context)
    elif is_infinite(y):
        return MobiusTransformation(-z, x, -1, 1, context=context)
    elif is_infinite(z):
        return MobiusTransformation(y - x, x, 0, 1, context=context)
    else:
        xy, yz = y - x, z - y
        return MobiusTransformation(z * xy, x * yz, xy, yz, context=context)


def from_triples(x: Any, y: Any, z: Any, X: Any, Y: Any, Z: Any,
                 context: Optional[InfinityContext] = None) -> MobiusTransformation:
    """
    Return the transformation mapping ``(x, y, z)`` to ``(X, Y, Z)``.

    Built as ``from_canonical_triple(X, Y, Z)`` composed with the inverse of
    ``from_canonical_triple(x, y, z)``. No division is performed.

    Parameters
    ----------
    x, y, z : number or infinity
        distinct source points
    X, Y, Z : number or infinity
        distinct target points
    context : :class:`~skmob.infinity.InfinityContext`, optional

    Returns
    -------
    m : :class:`~skmob.mobius.MobiusTransformation`

    See Also
    --------
    from_canonical_triple
    """
    m_source = from_canonical_triple(x, y, z, context=context)  # (0, 1, inf) -> (x, y, z)
    m_image = from_canonical_triple(X, Y, Z, context=context)  # (0, 1, inf) -> (X, Y, Z)
    m = m_image.compose(m_source.invert())
    logger.debug('(%r, %r, %r) -> (%r, %r, %r) solved by %s', x, y, z, X, Y, Z, m)
    return m
