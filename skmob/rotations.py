r"""
.. currentmodule:: skmob.rotations

========================================
rotations (:mod:`skmob.rotations`)
========================================

Möbius transformations induced by rotations of the sphere.

Rotating the sphere of a stereographic projection about its center moves
the projected points by a Möbius transformation. For the unit sphere
projected onto its equatorial plane, the rotation with unit quaternion
``w + x*i + y*j + z*k`` acts as the unitary transformation

.. math::

    \begin{pmatrix} w + iz & -y + ix \\ y + ix & w - iz \end{pmatrix}

Other centers and north axes are handled by relabelling the axes and by
conjugating with the affine map between that plane and the projection's
own plane.

.. autosummary::
   :toctree: generated/

   rotation_transformation

"""
from __future__ import annotations

from typing import Optional, Union

import numpy as npy
from scipy.spatial.transform import Rotation

from .mobius import MobiusTransformation
from .stereographic import StereographicProjection, stereographic_projection


def rotation_transformation(rotation: Union[Rotation, npy.ndarray],
                            projection: Optional[StereographicProjection] = None
                            ) -> MobiusTransformation:
    """
    The Möbius transformation induced by rotating the sphere of a projection.

    The returned transformation ``m`` satisfies
    ``m(projection(P)) == projection(R(P - c) + c)`` for every point ``P`` of
    the sphere, where ``R`` is the rotation and ``c`` the sphere center.

    Parameters
    ----------
    rotation : :class:`scipy.spatial.transform.Rotation` or 3x3 array-like
        rotation of the sphere about its center, in the coordinates of
        3-space. A matrix is converted with
        :meth:`~scipy.spatial.transform.Rotation.from_matrix`.
    projection : :class:`~skmob.stereographic.StereographicProjection`, optional
        projection relating the sphere and the plane. Default is the
        projection of the sphere centred at the origin, north axis 2.

    Returns
    -------
    m : :class:`~skmob.mobius.MobiusTransformation`
        transformation with complex coefficients

    Examples
    --------
    Quarter turn about the north axis:

    >>> from scipy.spatial.transform import Rotation
    >>> m = rotation_transformation(Rotation.from_euler('z', 90, degrees=True))
    >>> abs(m(1) - 1j) < 1e-12
    True
    """
    if not isinstance(rotation, Rotation):
        rotation = Rotation.from_matrix(npy.asarray(rotation, dtype=float))
    if projection is None:
        projection = stereographic_projection(float)

    # express the rotation in the (real, imaginary, north) frame
    j, k = projection.plane_axes
    n = projection.north_axis
    frame = [j, k, n]
    matrix = rotation.as_matrix()[npy.ix_(frame, frame)]
    qx, qy, qz, qw = Rotation.from_matrix(matrix).as_quat()

    su2 = MobiusTransformation(complex(qw, qz), complex(-qy, qx),
                               complex(qy, qx), complex(qw, -qz),
                               context=projection.context)

    # plane of the unit equatorial projection -> plane of `projection`
    center = [complex(v) for v in projection.center]
    height = center[n] + 1
    shift = complex(center[j].real, center[k].real)
    affine = MobiusTransformation(height, shift, 0, 1, context=projection.context)

    return affine.compose(su2).compose(affine.invert())
