"""Feature vectors for pairs of senses."""

from .maker import (
    BASE_ATTRIBUTES,
    CLASS_ATTRIBUTE,
    SnowEtAlFeatureMaker,
    SynsetPairFeatureMaker,
    make_feature_maker,
)
from .units import (
    CommonAncestorFeatures,
    FeatureUnit,
    LeskFeature,
    SenseCountFeature,
    SimilarityFeature,
    extra_feature_units,
)

__all__ = [
    "BASE_ATTRIBUTES",
    "CLASS_ATTRIBUTE",
    "SnowEtAlFeatureMaker",
    "SynsetPairFeatureMaker",
    "make_feature_maker",
    "CommonAncestorFeatures",
    "FeatureUnit",
    "LeskFeature",
    "SenseCountFeature",
    "SimilarityFeature",
    "extra_feature_units",
]
