"""
skmob is an object-oriented approach to Möbius transformations and
stereographic projections, implemented in Python.
"""

__version__ = '0.1.0'
## Import all  module names for coherent reference of name-space


from . import (
    constants,
    gaussian,
    infinity,
    mathFunctions,
    mobius,
    rotations,
    stereographic,
    triples,
)
from .constants import *
from .gaussian import *
from .infinity import *
from .mathFunctions import *

# Import contents into current namespace for ease of calling
from .mobius import *
from .rotations import *
from .stereographic import *
from .triples import *

## Shorthand Names
M = MobiusTransformation
Mobius = transformation
Möbius = transformation
stereo = stereographic_projection
