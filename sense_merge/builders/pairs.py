"""Enumerate pairs of senses that are candidates for merging."""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Iterable, Iterator, Set, Tuple

from sense_merge.ontology import Ontology
from sense_merge.types.senses import SenseType

logger = logging.getLogger(__name__)


def candidate_pairs(
    ontology: Ontology, words: Iterable[str], pos: str
) -> Iterator[Tuple[SenseType, SenseType]]:
    """
    Yield every pair of distinct senses that share a target word.

    - `ontology`: the hierarchy the senses are drawn from.
    - `words`: the target words whose senses may be merged.
    - `pos`: the part of speech the senses are restricted to.

    Pairs are yielded in sense order and only once, even when several target
    words lead to the same pair.
    """
    seen: Set[Tuple[str, str]] = set()

    for word in words:
        synsets = ontology.synsets_for(word, pos)
        if len(synsets) < 2:
            logger.warning("Word '%s' has fewer than two senses for pos %s", word, pos)
            continue

        for sense1, sense2 in combinations(synsets, 2):
            key = (sense1.name(), sense2.name())
            if key in seen:
                continue
            seen.add(key)
            yield sense1, sense2


__all__ = ["candidate_pairs"]
