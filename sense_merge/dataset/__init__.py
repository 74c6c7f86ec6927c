"""Dataset module."""

from .database import Database
from .features_table import FeaturesTable

__all__ = [
    "Database",
    "FeaturesTable",
]
