"""hopoint: higher-order points.

Points as functions of parameters, composed with arithmetic, lifting,
differencing and reparametrization, and evaluated only at the sample
values a caller chooses.  The submodules are the API; the most common
names are re-exported here.
"""

from importlib.metadata import PackageNotFoundError, version

from hopoint.errors import ShapeError
from hopoint.func import Func
from hopoint.point import Point, PointFunc

try:
    __version__ = version("hopoint")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = ['Func', 'Point', 'PointFunc', 'ShapeError', '__version__']
