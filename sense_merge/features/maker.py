"""
Build feature vectors for pairs of senses, following the path based subset of
features from Snow et al. (2007), "Learning to merge word senses".

Only features derived from the hierarchy linking two senses are used, since
senses added to WordNet automatically often lack glosses, information content
and relations other than hypernymy. Extra feature units can be appended to
the base layout without changing the position of any base feature.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import numpy as np

from sense_merge.builders.clusters import ClusterIndex
from sense_merge.ontology import Ontology
from sense_merge.similarity import (
    HirstStOngeSimilarity,
    LeacockChodorowScaledSimilarity,
    PathSimilarity,
    WuPalmerSimilarity,
)
from sense_merge.types.senses import SenseType

from .units import (
    CommonAncestorFeatures,
    FeatureUnit,
    SenseCountFeature,
    SimilarityFeature,
    extra_feature_units,
)

logger = logging.getLogger(__name__)

BASE_ATTRIBUTES = ("HSO", "LCH", "WUP", "PATH", "MN", "MAXMN", "SENSECOUNT")
CLASS_ATTRIBUTE = "class"


class SynsetPairFeatureMaker(ABC):
    """Turns a pair of senses into a feature vector with a fixed attribute layout."""

    @abstractmethod
    def make_attribute_list(self) -> List[str]:
        """Return the attribute names, in the order of the feature vector."""
        raise NotImplementedError

    @abstractmethod
    def make_feature_vector(
        self, sense1: SenseType, sense2: SenseType
    ) -> Optional[np.ndarray]:
        """Return the feature vector for a pair, or None if the pair must be skipped."""
        raise NotImplementedError


class SnowEtAlFeatureMaker(SynsetPairFeatureMaker):
    """
    Feature maker producing ``HSO, LCH, WUP, PATH, MN, MAXMN, SENSECOUNT``,
    then any extra features, then the class label.

    When a ``ClusterIndex`` is given, the label is 1 if both senses belong to
    the same known cluster and 0 otherwise, and pairs whose first sense is not
    clustered are skipped. Without one the label is always 0, which is what
    test vectors need.
    """

    def __init__(
        self,
        ontology: Ontology,
        clusters: Optional[ClusterIndex] = None,
        extra_units: Sequence[FeatureUnit] = (),
    ) -> None:
        self._ontology = ontology
        self._clusters = clusters

        # Built once and shared by every pair
        self._base_units: Sequence[FeatureUnit] = (
            SimilarityFeature(HirstStOngeSimilarity(ontology)),
            SimilarityFeature(LeacockChodorowScaledSimilarity(ontology)),
            SimilarityFeature(WuPalmerSimilarity()),
            SimilarityFeature(PathSimilarity()),
            CommonAncestorFeatures(ontology),
            SenseCountFeature(ontology),
        )
        self._extra_units: Sequence[FeatureUnit] = tuple(extra_units)

    @property
    def clusters(self) -> Optional[ClusterIndex]:
        """Return the cluster index used for class labels, if any."""
        return self._clusters

    @property
    def num_extra_features(self) -> int:
        """Return the number of features contributed by extra units."""
        return sum(unit.arity for unit in self._extra_units)

    def make_attribute_list(self) -> List[str]:
        attribute_list: List[str] = []
        for unit in (*self._base_units, *self._extra_units):
            attribute_list.extend(unit.names)
        attribute_list.append(CLASS_ATTRIBUTE)
        return attribute_list

    def make_feature_vector(
        self, sense1: SenseType, sense2: SenseType
    ) -> Optional[np.ndarray]:
        num_features = sum(unit.arity for unit in (*self._base_units, *self._extra_units))
        values = np.zeros(num_features + 1)

        # Add the class label, 1 when merged according to the known clustering.
        label = self._class_label(sense1, sense2)
        if label is None:
            return None
        values[-1] = label

        # Fill the base features, then any extra features after them.
        index = 0
        for unit in (*self._base_units, *self._extra_units):
            features = unit.compute(sense1, sense2)
            if len(features) != unit.arity:
                raise ValueError(
                    f"{type(unit).__name__} returned {len(features)} values, "
                    f"expected {unit.arity}"
                )
            values[index : index + unit.arity] = features
            index += unit.arity

        return values

    def _class_label(self, sense1: SenseType, sense2: SenseType) -> Optional[int]:
        """Return the class label, or None when the first sense lacks cluster info."""
        if self._clusters is None:
            return 0

        # A data point lacking clustering info when it is required is dropped.
        cluster = self._clusters.cluster_of(sense1.name())
        if cluster is None:
            logger.debug("No cluster for %s; skipping pair", sense1.name())
            return None

        return 1 if sense2.name() in cluster else 0

    def __str__(self) -> str:
        return "SnowEtAlFeatureMaker"


def make_feature_maker(
    ontology: Ontology,
    clusters: Optional[ClusterIndex] = None,
    extra_features: Sequence[str] = (),
) -> SnowEtAlFeatureMaker:
    """
    Build a ``SnowEtAlFeatureMaker`` with extra units looked up by name.

    - `ontology`: the hierarchy used by the path based features.
    - `clusters`: the known clustering used for class labels, if any.
    - `extra_features`: names from ``extra_feature_units``, in output order.

    Raises:
        ValueError: if an extra feature name is unknown.
    """
    units: List[FeatureUnit] = []
    for name in extra_features:
        if name not in extra_feature_units:
            raise ValueError(f"Unknown extra feature: {name}")
        units.append(extra_feature_units[name](ontology))

    return SnowEtAlFeatureMaker(ontology, clusters, units)


__all__ = [
    "BASE_ATTRIBUTES",
    "CLASS_ATTRIBUTE",
    "SynsetPairFeatureMaker",
    "SnowEtAlFeatureMaker",
    "make_feature_maker",
]
