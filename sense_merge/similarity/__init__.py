"""Similarity measures between pairs of senses."""

from .base import SynsetSimilarity
from .path import (
    HirstStOngeSimilarity,
    LeacockChodorowScaledSimilarity,
    PathSimilarity,
    WuPalmerSimilarity,
)
from .lesk import LeskSimilarity

__all__ = [
    "SynsetSimilarity",
    "HirstStOngeSimilarity",
    "LeacockChodorowScaledSimilarity",
    "PathSimilarity",
    "WuPalmerSimilarity",
    "LeskSimilarity",
]
