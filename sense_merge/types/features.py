"""Feature vector types."""

from dataclasses import dataclass

import numpy as np


@dataclass
class FeatureRecord:
    """Feature vector computed for a single pair of senses."""

    sense1: str  # the key of the first sense
    sense2: str  # the key of the second sense
    pos: str  # the part of speech of the first sense
    vector: np.ndarray  # the feature values, class label last

    @property
    def label(self) -> int:
        """Return the class label stored in the last slot of the vector."""
        return int(self.vector[-1])


__all__ = ["FeatureRecord"]
