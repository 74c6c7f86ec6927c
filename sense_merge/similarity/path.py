"""Similarity measures derived from paths through the WordNet hierarchy."""

import logging
import math
from typing import Callable, Optional

from nltk.corpus.reader.wordnet import WordNetError  # pylint: disable=E0401

from sense_merge.ontology import Ontology
from sense_merge.types.senses import SenseType

from .base import SynsetSimilarity

logger = logging.getLogger(__name__)


def _score(
    measure: Callable[[SenseType], Optional[float]],
    sense1: SenseType,
    sense2: SenseType,
) -> float:
    """
    Call a bound NLTK similarity method and map an undefined score to 0.

    NLTK returns None when no path links the senses and raises
    ``WordNetError`` for some cross part-of-speech comparisons.
    """
    try:
        score = measure(sense2)
    except WordNetError as exc:
        logger.debug("No score for %s and %s: %s", sense1.name(), sense2.name(), exc)
        return 0.0

    return 0.0 if score is None else float(score)


class HirstStOngeSimilarity(SynsetSimilarity):  # pylint: disable=R0903
    """
    Hirst and St-Onge relatedness.

    Identical senses and senses joined by a horizontal relation (antonymy,
    also-see, similar-to, attribute, pertainymy, verb group) are strongly
    related and score ``2 * C``. Otherwise the best path that climbs from the
    first sense to a shared hypernym and descends to the second scores
    ``C - length - K * turns``, provided it is at most ``MAX_PATH_LENGTH``
    edges long.
    """

    name = "hso"

    C = 8.0
    K = 1.0
    MAX_PATH_LENGTH = 5

    def __init__(self, ontology: Ontology):
        self._ontology = ontology

    def similarity(self, sense1: SenseType, sense2: SenseType) -> float:
        if sense1 == sense2 or self._horizontally_linked(sense1, sense2):
            return 2 * self.C

        upward = self._ontology.ancestors(sense1)
        downward = self._ontology.ancestors(sense2)

        best = 0.0
        for node in set(upward) & set(downward):
            length = upward[node] + downward[node]
            if length > self.MAX_PATH_LENGTH:
                continue
            turns = 1 if upward[node] and downward[node] else 0
            best = max(best, self.C - length - self.K * turns)

        return best

    def _horizontally_linked(self, sense1: SenseType, sense2: SenseType) -> bool:
        return sense2 in self._ontology.horizontal_neighbours(
            sense1
        ) or sense1 in self._ontology.horizontal_neighbours(sense2)


class LeacockChodorowScaledSimilarity(SynsetSimilarity):  # pylint: disable=R0903
    """
    Leacock-Chodorow similarity scaled into ``[0, 1]``.

    The raw score ``-log((d + 1) / 2D)`` is divided by its largest possible
    value ``log(2D)``, where ``D`` is the maximum depth of the first sense's
    part of speech. ``D`` is looked up once per part of speech and cached by
    the ontology.
    """

    name = "lch"

    def __init__(self, ontology: Ontology):
        self._ontology = ontology

    def similarity(self, sense1: SenseType, sense2: SenseType) -> float:
        score = _score(sense1.lch_similarity, sense1, sense2)
        # NLTK goes negative once the path is longer than 2D - 1 edges
        if score <= 0.0:
            return 0.0

        depth = self._ontology.max_depth(sense1.pos())
        if depth < 1:
            return 0.0
        return min(1.0, score / math.log(2.0 * depth))


class WuPalmerSimilarity(SynsetSimilarity):  # pylint: disable=R0903
    """Wu-Palmer similarity as computed by NLTK."""

    name = "wup"

    def similarity(self, sense1: SenseType, sense2: SenseType) -> float:
        return _score(sense1.wup_similarity, sense1, sense2)


class PathSimilarity(SynsetSimilarity):  # pylint: disable=R0903
    """Inverse shortest path length as computed by NLTK."""

    name = "path"

    def similarity(self, sense1: SenseType, sense2: SenseType) -> float:
        return _score(sense1.path_similarity, sense1, sense2)


__all__ = [
    "HirstStOngeSimilarity",
    "LeacockChodorowScaledSimilarity",
    "WuPalmerSimilarity",
    "PathSimilarity",
]
