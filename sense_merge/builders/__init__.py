"""Functions to build cluster indices and candidate sense pairs."""

from .clusters import ClusterIndex
from .pairs import candidate_pairs

__all__ = [
    "ClusterIndex",
    "candidate_pairs",
]
