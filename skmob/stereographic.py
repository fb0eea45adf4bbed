r"""
.. currentmodule:: skmob.stereographic

==============================================
stereographic (:mod:`skmob.stereographic`)
==============================================

Stereographic projections between a unit sphere and the extended plane.

The sphere has unit radius and a given center. Its north pole is the
center moved by one along the north axis, and points are projected from
the north pole onto the coordinate plane where the north-axis coordinate
is zero. The two remaining axes, in ascending order, give the real and
imaginary parts of the projected point. The north pole itself projects
to the point at infinity.

For a sphere centred at the origin with the default north axis this is
the textbook projection onto the equatorial plane,

.. math::

    (x, y, z) \mapsto \frac{x + iy}{1 - z}

StereographicProjection Class
=============================
.. autosummary::
   :toctree: generated/

   StereographicProjection
   stereographic_projection

"""
from __future__ import annotations

import logging
from typing import Any, Optional, Tuple, Union

import numpy as npy

from .constants import AXES, NORTH_AXIS, PointLike
from .infinity import InfinityContext, DEFAULT_CONTEXT
from .mathFunctions import promote, inv, make_complex, reim, zero_like, one_like

logger = logging.getLogger(__name__)


def _vector(values: Any) -> npy.ndarray:
    v = npy.array(values)
    if v.dtype.kind not in 'iufc':
        v = npy.array(list(values), dtype=object)
    if v.shape != (3,):
        raise ValueError(f'expected a point in 3-space, got {values!r}')
    return v


def _aligned(*vectors: npy.ndarray) -> Tuple[npy.ndarray, ...]:
    # exact scalars live in object arrays; numeric arrays joining them are
    # converted so that elements are python numbers rather than numpy scalars
    if any(v.dtype == object for v in vectors):
        return tuple(v.astype(object) for v in vectors)
    return vectors


class StereographicProjection:
    """
    Stereographic projection of a unit sphere onto the extended plane.

    The projection is invertible: calling it on a point in 3-space
    projects the point to the plane, calling it on a scalar (or on
    infinity) maps it back onto the sphere.

    Parameters
    ----------
    x, y, z : number
        coordinates of the sphere center
    north_axis : {0, 1, 2}, optional
        index of the axis pointing to the north pole. Default is 2.
    context : :class:`~skmob.infinity.InfinityContext`, optional
        representation of infinity. Default is the process-wide setting.

    Raises
    ------
    ValueError
        if `north_axis` is not 0, 1 or 2
    TypeMismatch
        if the coordinates share no common scalar type

    Examples
    --------
    >>> proj = StereographicProjection(0., 0., 0.)
    >>> proj([0, 0, 0])
    0j
    >>> proj([0, 0, 1])
    (inf+0j)
    >>> proj(1j)
    array([0., 1., 0.])
    """

    def __init__(self, x: Any, y: Any, z: Any, north_axis: int = NORTH_AXIS,
                 context: Optional[InfinityContext] = None) -> None:
        if north_axis not in AXES:
            raise ValueError(f'north_axis must be one of {AXES}, got {north_axis!r}')
        self._coords = promote(x, y, z)
        self._north_axis = int(north_axis)
        self._plane_axes = tuple(k for k in AXES if k != north_axis)
        self._context = context

        self._center = _vector(self._coords)
        zero = zero_like(self._coords[0])
        unit = [zero, zero, zero]
        unit[self._north_axis] = one_like(zero)
        self._north_pole = self._center + _vector(unit)
        for v in (self._center, self._north_pole):
            v.flags.writeable = False

    @property
    def center(self) -> npy.ndarray:
        """Center of the sphere (read-only array)."""
        return self._center

    @property
    def north_pole(self) -> npy.ndarray:
        """Focus of the projection, ``center + e[north_axis]`` (read-only array)."""
        return self._north_pole

    @property
    def north_axis(self) -> int:
        return self._north_axis

    @property
    def plane_axes(self) -> Tuple[int, int]:
        """Axes giving the real and imaginary parts of projected points."""
        return self._plane_axes

    @property
    def dtype(self) -> type:
        """Scalar type of the center coordinates."""
        return type(self._coords[0])

    @property
    def context(self) -> InfinityContext:
        return self._context or DEFAULT_CONTEXT

    def project(self, P: PointLike) -> Any:
        """
        Project a point of the sphere to the extended plane.

        The point is joined to the north pole by a line, which meets the
        plane where the north-axis coordinate is zero. The north pole
        itself goes to infinity.

        Parameters
        ----------
        P : array-like of 3 numbers
            point on the sphere

        Returns
        -------
        w : complex scalar or infinity
            the projected point. Exact coordinates give an exact result,
            see :func:`~skmob.mathFunctions.make_complex`.
        """
        P, north = _aligned(_vector(P), self._north_pole)
        direction = P - north

        if not npy.any(direction):
            logger.debug('north pole %s projected to infinity', north)
            return self.context.infinity

        i = self._north_axis
        t = -north[i] * inv(direction[i])

        j, k = self._plane_axes
        x_proj = north[j] + t * direction[j]
        y_proj = north[k] + t * direction[k]
        return make_complex(x_proj, y_proj)

    def unproject(self, z: Any) -> npy.ndarray:
        """
        Map a point of the extended plane back onto the sphere.

        Infinity goes to the north pole. Any other point is joined to the
        north pole by a line, whose second intersection with the sphere is
        returned.

        Parameters
        ----------
        z : complex scalar or infinity

        Returns
        -------
        P : ndarray of 3 numbers
            point on the sphere
        """
        if self.context.is_infinite(z):
            return self._north_pole.copy()

        x, y = reim(z)
        zero = zero_like(x)
        point = [zero, zero, zero]
        j, k = self._plane_axes
        point[j], point[k] = x, y
        point, north = _aligned(_vector(point), self._north_pole)

        direction = point - north

        # |north - center| = 1 and north lies on the sphere, so the
        # intersection quadratic has roots 0 (the north pole) and t
        i = self._north_axis
        A = 2 * direction[i]
        B = sum(v * v for v in direction)
        t = -A * inv(B)

        return north + t * direction

    def __call__(self, arg: Union[PointLike, Any]) -> Any:
        """
        Project a 3D point, or unproject a scalar, depending on `arg`.
        """
        if isinstance(arg, (npy.ndarray, list, tuple)):
            return self.project(arg)
        return self.unproject(arg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StereographicProjection):
            return NotImplemented
        return (self._coords == other._coords
                and self._north_axis == other._north_axis)

    def __hash__(self) -> int:
        return hash((self._coords, self._north_axis))

    def __repr__(self) -> str:
        x, y, z = self._coords
        return (f'StereographicProjection(center=({x!r}, {y!r}, {z!r}), '
                f'north_axis={self._north_axis})')


def stereographic_projection(center: Union[PointLike, type] = float,
                             north_axis: int = NORTH_AXIS,
                             context: Optional[InfinityContext] = None) -> StereographicProjection:
    """
    Build a stereographic projection.

    Parameters
    ----------
    center : array-like of 3 numbers, or type, optional
        center of the sphere. If a type is given, the sphere is centred at
        the origin with coordinates of that type. Default is float.
    north_axis : {0, 1, 2}, optional
        index of the axis pointing to the north pole. Default is 2.
    context : :class:`~skmob.infinity.InfinityContext`, optional

    Returns
    -------
    proj : :class:`StereographicProjection`

    Examples
    --------
    >>> proj = stereographic_projection([1., 2., 3.])
    >>> proj.north_pole
    array([1., 2., 4.])
    >>> exact = stereographic_projection(Fraction)
    """
    if isinstance(center, type):
        center = (center(0), center(0), center(0))
    x, y, z = center
    return StereographicProjection(x, y, z, north_axis=north_axis, context=context)
