"""Access the WordNet hierarchy through the relations the features depend on."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set

import nltk
from nltk.corpus import wordnet as wn
from nltk.corpus.reader.wordnet import NOUN

from sense_merge.types.senses import SenseType

logger = logging.getLogger(__name__)


class Ontology(ABC):
    """Read-only view of a sense hierarchy linked by hypernym edges."""

    @abstractmethod
    def ancestors(self, node: SenseType) -> Dict[SenseType, int]:
        """Map every hypernym of ``node`` (and ``node`` itself) to its shortest distance."""
        raise NotImplementedError

    @abstractmethod
    def lowest_common_ancestor(
        self, node1: SenseType, node2: SenseType
    ) -> Optional[SenseType]:
        """Return the deepest hypernym shared by both nodes, or None."""
        raise NotImplementedError

    @abstractmethod
    def shortest_path_distance(self, node1: SenseType, node2: SenseType) -> Optional[int]:
        """Return the number of edges on the shortest path linking the nodes."""
        raise NotImplementedError

    @abstractmethod
    def longest_path_distance(self, node: SenseType, ancestor: SenseType) -> Optional[int]:
        """Return the number of edges on the longest hypernym chain up to ``ancestor``."""
        raise NotImplementedError

    @abstractmethod
    def synsets_for(self, lemma_name: str, pos: str) -> Sequence[SenseType]:
        """Return the senses a lemma has for a part of speech."""
        raise NotImplementedError

    @abstractmethod
    def max_depth(self, pos: str) -> int:
        """Return the depth of the deepest sense for a part of speech."""
        raise NotImplementedError

    @abstractmethod
    def horizontal_neighbours(self, node: SenseType) -> Set[SenseType]:
        """Return the senses linked to ``node`` by a non-hierarchical relation."""
        raise NotImplementedError


def _load_wordnet():
    """Return the NLTK WordNet reader, downloading the corpus if it is missing."""
    try:
        wn.ensure_loaded()
    except LookupError:
        logger.info("WordNet corpus not found; downloading")
        nltk.download("wordnet", quiet=True)
        nltk.download("omw-1.4", quiet=True)
        wn.ensure_loaded()
    return wn


def _parents(node: SenseType) -> List[SenseType]:
    return node.hypernyms() + node.instance_hypernyms()


def _upward_distances(node: SenseType) -> Dict[SenseType, int]:
    """Breadth-first walk up the hierarchy recording the first distance each node is reached."""
    distances: Dict[SenseType, int] = {node: 0}
    queue = deque([node])
    while queue:
        current = queue.popleft()
        for parent in _parents(current):
            if parent not in distances:
                distances[parent] = distances[current] + 1
                queue.append(parent)
    return distances


def _chain_length(
    source: SenseType,
    target: SenseType,
    choose: Callable[[Iterable[int]], int],
) -> Optional[int]:
    """
    Length of a hypernym chain from ``source`` up to ``target``.

    - `choose`: ``min`` or ``max``, selecting among the chains that reach ``target``.

    Returns:
        Optional[int]: the chain length, or None if ``target`` is not a hypernym.
    """
    memo: Dict[SenseType, Optional[int]] = {}

    def visit(node: SenseType) -> Optional[int]:
        if node == target:
            return 0
        if node in memo:
            return memo[node]
        lengths = [
            length + 1
            for length in (visit(parent) for parent in _parents(node))
            if length is not None
        ]
        memo[node] = choose(lengths) if lengths else None
        return memo[node]

    return visit(source)


def _root_depth(node: SenseType, memo: Dict[SenseType, int]) -> int:
    """Length of the longest hypernym chain from ``node`` to a root."""
    if node not in memo:
        parents = _parents(node)
        memo[node] = 1 + max(_root_depth(p, memo) for p in parents) if parents else 0
    return memo[node]


class WordNetOntology(Ontology):
    """``Ontology`` backed by an NLTK WordNet corpus reader."""

    def __init__(self, reader=None) -> None:
        self._reader = reader if reader is not None else _load_wordnet()
        self._max_depths: Dict[str, int] = {}

    def ancestors(self, node: SenseType) -> Dict[SenseType, int]:
        return _upward_distances(node)

    def lowest_common_ancestor(
        self, node1: SenseType, node2: SenseType
    ) -> Optional[SenseType]:
        if node1 == node2:
            return node1

        common = set(self.ancestors(node1)) & set(self.ancestors(node2))
        if not common:
            return None

        # Keep the deepest shared hypernyms and break ties by name
        memo: Dict[SenseType, int] = {}
        deepest = max(_root_depth(node, memo) for node in common)
        candidates = [node for node in common if _root_depth(node, memo) == deepest]
        return min(candidates, key=lambda node: node.name())

    def shortest_path_distance(self, node1: SenseType, node2: SenseType) -> Optional[int]:
        if node1 == node2:
            return 0

        distances1 = self.ancestors(node1)
        distances2 = self.ancestors(node2)
        common = set(distances1) & set(distances2)
        if not common:
            return None

        return min(distances1[node] + distances2[node] for node in common)

    def longest_path_distance(self, node: SenseType, ancestor: SenseType) -> Optional[int]:
        return _chain_length(node, ancestor, max)

    def synsets_for(self, lemma_name: str, pos: str) -> Sequence[SenseType]:
        return self._reader.synsets(lemma_name, pos=pos)

    def max_depth(self, pos: str) -> int:
        """
        Return the depth of the deepest sense for ``pos``.

        Parts of speech without a single top node get one extra level for the
        simulated root, matching how NLTK scales Leacock-Chodorow scores.
        """
        if pos not in self._max_depths:
            depth = max(
                (synset.max_depth() for synset in self._reader.all_synsets(pos)),
                default=0,
            )
            if pos != NOUN:
                depth += 1
            logger.debug("Maximum depth for pos %s is %d", pos, depth)
            self._max_depths[pos] = depth

        return self._max_depths[pos]

    def horizontal_neighbours(self, node: SenseType) -> Set[SenseType]:
        neighbours: Set[SenseType] = set()
        neighbours.update(node.also_sees())
        neighbours.update(node.similar_tos())
        neighbours.update(node.attributes())
        neighbours.update(node.verb_groups())
        for lemma in node.lemmas():
            neighbours.update(antonym.synset() for antonym in lemma.antonyms())
            neighbours.update(pertainym.synset() for pertainym in lemma.pertainyms())
        neighbours.discard(node)
        return neighbours


__all__ = ["Ontology", "WordNetOntology"]
