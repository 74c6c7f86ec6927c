"""Gloss overlap similarity."""

from sense_merge.types.senses import SenseType
from sense_merge.utils.tokens import split_gloss, token_overlap

from .base import SynsetSimilarity


class LeskSimilarity(SynsetSimilarity):  # pylint: disable=R0903
    """Counts the whitespace tokens two glosses have in common."""

    name = "lesk"

    def similarity(self, sense1: SenseType, sense2: SenseType) -> float:
        gloss1 = split_gloss(sense1.definition())
        gloss2 = split_gloss(sense2.definition())
        return float(token_overlap(gloss1, gloss2))


__all__ = ["LeskSimilarity"]
