"""Base class for similarity measures between senses."""

from abc import ABC, abstractmethod

from sense_merge.types.senses import SenseType


class SynsetSimilarity(ABC):  # pylint: disable=R0903
    """
    Scores how related two senses are.

    Implementations are pure: they never mutate the senses and return the same
    value for the same pair on a fixed WordNet snapshot. Scores are not assumed
    to be symmetric.
    """

    name: str = ""

    @abstractmethod
    def similarity(self, sense1: SenseType, sense2: SenseType) -> float:
        """Compute the similarity of ``sense1`` to ``sense2``."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return type(self).__name__


__all__ = ["SynsetSimilarity"]
