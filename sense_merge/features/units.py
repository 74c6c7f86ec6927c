"""Named groups of features computed for a pair of senses."""

from abc import ABC, abstractmethod
from typing import Mapping, Sequence, Set, Tuple

from sense_merge.ontology import Ontology
from sense_merge.similarity import LeskSimilarity, SynsetSimilarity
from sense_merge.types.senses import SenseType


class FeatureUnit(ABC):
    """
    Computes one or more adjacent features of a feature vector.

    ``names`` lists the attribute names in output order; the unit's arity is
    its length and ``compute`` must return exactly that many values.
    """

    names: Tuple[str, ...] = ()

    @property
    def arity(self) -> int:
        """Return the number of features this unit contributes."""
        return len(self.names)

    @abstractmethod
    def compute(self, sense1: SenseType, sense2: SenseType) -> Sequence[float]:
        """Compute the feature values for a pair of senses."""
        raise NotImplementedError


class SimilarityFeature(FeatureUnit):
    """A single feature holding the score of a similarity measure."""

    def __init__(self, measure: SynsetSimilarity):
        self.measure = measure
        self.names = (measure.name.upper(),)

    def compute(self, sense1: SenseType, sense2: SenseType) -> Sequence[float]:
        return (self.measure.similarity(sense1, sense2),)


class CommonAncestorFeatures(FeatureUnit):
    """
    Distances from each sense to their lowest common hypernym.

    ``MN`` is the smaller of the two shortest distances. ``MAXMN`` is the
    smaller of the two longest distances. Both stay 0 when the senses share no
    hypernym.
    """

    names = ("MN", "MAXMN")

    def __init__(self, ontology: Ontology):
        self._ontology = ontology

    def compute(self, sense1: SenseType, sense2: SenseType) -> Sequence[float]:
        ancestor = self._ontology.lowest_common_ancestor(sense1, sense2)
        if ancestor is None:
            return (0.0, 0.0)

        shortest = min(
            self._ontology.shortest_path_distance(sense1, ancestor),
            self._ontology.shortest_path_distance(sense2, ancestor),
        )
        longest = min(
            self._ontology.longest_path_distance(sense1, ancestor),
            self._ontology.longest_path_distance(sense2, ancestor),
        )
        return (float(shortest), float(longest))


class SenseCountFeature(FeatureUnit):
    """
    Polysemy of the words the two senses share.

    For every lemma of the second sense that is also a lemma of the first, the
    number of senses that lemma has in the first sense's part of speech is
    looked up; the feature is the largest such count, or 0 if no lemma is
    shared.
    """

    names = ("SENSECOUNT",)

    def __init__(self, ontology: Ontology):
        self._ontology = ontology

    def compute(self, sense1: SenseType, sense2: SenseType) -> Sequence[float]:
        pos = sense1.pos()
        lemma_names: Set[str] = {lemma.name() for lemma in sense1.lemmas()}

        max_senses = 0
        for lemma in sense2.lemmas():
            if lemma.name() in lemma_names:
                max_senses = max(
                    max_senses, len(self._ontology.synsets_for(lemma.name(), pos))
                )

        return (float(max_senses),)


class LeskFeature(SimilarityFeature):
    """Gloss overlap between the two senses, stored as ``LESK``."""

    def __init__(self, ontology: Ontology):  # pylint: disable=unused-argument
        super().__init__(LeskSimilarity())


extra_feature_units: Mapping[str, type[FeatureUnit]] = {
    "lesk": LeskFeature,
}


__all__ = [
    "FeatureUnit",
    "SimilarityFeature",
    "CommonAncestorFeatures",
    "SenseCountFeature",
    "LeskFeature",
    "extra_feature_units",
]
