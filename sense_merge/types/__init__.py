"""Types module."""

from . import senses, features

__all__ = [
    "senses",
    "features",
]
