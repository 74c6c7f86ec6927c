"""Senses types."""

from typing import Dict, FrozenSet, TypeAlias

from nltk.corpus.reader.wordnet import Lemma, Synset

SenseType: TypeAlias = Synset
LemmaType: TypeAlias = Lemma
ClusterType: TypeAlias = FrozenSet[str]
ClusterMapType: TypeAlias = Dict[str, ClusterType]


__all__ = ["SenseType", "LemmaType", "ClusterType", "ClusterMapType"]
