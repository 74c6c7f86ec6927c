"""Utilities for tokenizing and comparing glosses."""

from .tokens import (
    split_gloss,
    token_overlap,
)

__all__ = [
    "split_gloss",
    "token_overlap",
]
