"""Main package for the project."""

from . import types
from . import utils
from . import similarity
from . import builders
from . import features
from . import dataset

__all__ = [
    "types",
    "utils",
    "similarity",
    "builders",
    "features",
    "dataset",
]
