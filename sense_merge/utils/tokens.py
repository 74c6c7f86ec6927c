"""Utilities for tokenizing glosses and counting shared tokens."""

from typing import Iterable, List


def split_gloss(gloss: str) -> List[str]:
    """
    Split a gloss on runs of whitespace.

    No case folding, stemming or punctuation stripping is applied, so
    ``"Cat"`` and ``"cat,"`` are distinct tokens. Leading and trailing
    whitespace yields no empty tokens, so an empty gloss has no tokens and
    two empty glosses share nothing. A regex split on ``\\s+`` would keep a
    leading empty string and count it as one shared token.
    """

    return gloss.split()


def token_overlap(tokens1: Iterable[str], tokens2: Iterable[str]) -> int:
    """
    Count the tokens of ``tokens2`` that also occur in ``tokens1``.

    ``tokens1`` is treated as a set and ``tokens2`` as a multiset, so a token
    repeated in ``tokens2`` is counted once per occurrence.

    Returns:
        int: the number of shared tokens, 0 when nothing is shared.
    """

    vocabulary = set(tokens1)
    return sum(1 for token in tokens2 if token in vocabulary)


__all__ = ["split_gloss", "token_overlap"]
