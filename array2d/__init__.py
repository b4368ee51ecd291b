"""Dense two-dimensional array container."""

from array2d.src.core import *  # noqa: F401,F403
from array2d.src.core import __all__

__version__ = "0.1.0"
