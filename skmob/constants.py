"""
.. currentmodule:: skmob.constants

========================================
constants (:mod:`skmob.constants`)
========================================

This module contains constants and type aliases shared by the package.

.. data:: COMPLEX_INF

    Default representation of the point at infinity, ``complex(inf, 0)``.

.. data:: NORTH_AXIS

    Default index of the axis pointing to the north pole of a
    stereographic projection (2, the third axis).

.. data:: AXES

    Valid axis indices of a point in 3-space.

"""
from __future__ import annotations

from numbers import Number
from typing import Literal, Sequence, Union

import numpy as np

COMPLEX_INF = complex(np.inf, 0.)
"""
Floating point complex infinity, the default point at infinity.
"""

NORTH_AXIS = 2
"""
Index of the north axis used when none is given.
"""

AxisT = Literal[0, 1, 2]
AXES: tuple[AxisT, ...] = (0, 1, 2)

PointLike = Union[Sequence[Number], np.ndarray]
