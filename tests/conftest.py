"""Shared fixtures: a tiny in-memory hierarchy standing in for WordNet."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import pytest
from nltk.corpus.reader.wordnet import WordNetError

from sense_merge.ontology import WordNetOntology


class FakeLemma:
    """Lemma exposing the subset of ``nltk`` ``Lemma`` methods the package calls."""

    def __init__(self, name: str, synset: "FakeSynset") -> None:
        self._name = name
        self._synset = synset
        self.antonym_lemmas: List["FakeLemma"] = []

    def name(self) -> str:
        return self._name

    def synset(self) -> "FakeSynset":
        return self._synset

    def antonyms(self) -> List["FakeLemma"]:
        return list(self.antonym_lemmas)

    def pertainyms(self) -> List["FakeLemma"]:
        return []


class FakeSynset:
    """Synset exposing the subset of ``nltk`` ``Synset`` methods the package calls."""

    LCH = 1.5
    WUP = 0.5
    PATH = 0.25

    def __init__(
        self,
        name: str,
        definition: str = "",
        lemma_names: Iterable[str] = (),
        hypernyms: Iterable["FakeSynset"] = (),
    ) -> None:
        self._name = name
        self._pos = name.split(".")[1] if "." in name else "n"
        self._definition = definition
        self._lemmas = [FakeLemma(lemma, self) for lemma in lemma_names]
        self._hypernyms = list(hypernyms)
        self.also_see: List["FakeSynset"] = []

    def name(self) -> str:
        return self._name

    def pos(self) -> str:
        return self._pos

    def definition(self) -> str:
        return self._definition

    def lemmas(self) -> List[FakeLemma]:
        return list(self._lemmas)

    def hypernyms(self) -> List["FakeSynset"]:
        return list(self._hypernyms)

    def instance_hypernyms(self) -> List["FakeSynset"]:
        return []

    def also_sees(self) -> List["FakeSynset"]:
        return list(self.also_see)

    def similar_tos(self) -> List["FakeSynset"]:
        return []

    def attributes(self) -> List["FakeSynset"]:
        return []

    def verb_groups(self) -> List["FakeSynset"]:
        return []

    def max_depth(self) -> int:
        if not self._hypernyms:
            return 0
        return 1 + max(parent.max_depth() for parent in self._hypernyms)

    def lch_similarity(self, other: "FakeSynset") -> Optional[float]:
        if other.pos() != self.pos():
            raise WordNetError("Computing the lch similarity requires the same pos")
        return self.LCH

    def wup_similarity(self, other: "FakeSynset") -> Optional[float]:
        if other.pos() != self.pos():
            return None
        return 1.0 if other is self else self.WUP

    def path_similarity(self, other: "FakeSynset") -> Optional[float]:
        if other.pos() != self.pos():
            return None
        return 1.0 if other is self else self.PATH

    def __repr__(self) -> str:
        return f"FakeSynset('{self._name}')"


class FakeWordNet:
    """Corpus reader answering lemma and part-of-speech lookups over fake synsets."""

    def __init__(self, synsets: Iterable[FakeSynset]) -> None:
        self._synsets = list(synsets)

    def synsets(self, lemma: str, pos: Optional[str] = None) -> List[FakeSynset]:
        return [
            synset
            for synset in self._synsets
            if (pos is None or synset.pos() == pos)
            and lemma in {item.name() for item in synset.lemmas()}
        ]

    def all_synsets(self, pos: Optional[str] = None) -> List[FakeSynset]:
        return [s for s in self._synsets if pos is None or s.pos() == pos]


def _build_hierarchy() -> Dict[str, FakeSynset]:
    """
    Build the test hierarchy::

        entity.n.01
        ├── animal.n.01
        │   ├── mammal.n.01
        │   │   ├── carnivore.n.01
        │   │   │   ├── canine.n.01 ── dog.n.01
        │   │   │   └── feline.n.01 ── cat.n.01
        │   │   └── rodent.n.01 ── mouse.n.01
        │   ├── pet.n.01 ── dog.n.01
        │   └── bird.n.01 ── raptor.n.01 ── hawk.n.01
        ├── person.n.01 ── dog.n.03
        └── artifact.n.01 ── device.n.01 ── mouse.n.04

        hot.a.01 <antonym> cold.a.01
        run.v.01
    """
    entity = FakeSynset("entity.n.01", "that which exists", ["entity"])
    animal = FakeSynset("animal.n.01", "a living organism", ["animal"], [entity])
    mammal = FakeSynset("mammal.n.01", "a warm-blooded animal", ["mammal"], [animal])
    carnivore = FakeSynset("carnivore.n.01", "a flesh eater", ["carnivore"], [mammal])
    canine = FakeSynset("canine.n.01", "a dog-like mammal", ["canine"], [carnivore])
    feline = FakeSynset("feline.n.01", "a cat-like mammal", ["feline"], [carnivore])
    pet = FakeSynset("pet.n.01", "a domesticated animal", ["pet"], [animal])
    dog = FakeSynset(
        "dog.n.01",
        "a member of the genus Canis that has been domesticated by man",
        ["dog", "domestic_dog"],
        [canine, pet],
    )
    cat = FakeSynset(
        "cat.n.01",
        "feline mammal usually having thick soft fur",
        ["cat", "true_cat"],
        [feline],
    )
    rodent = FakeSynset("rodent.n.01", "a gnawing mammal", ["rodent"], [mammal])
    mouse = FakeSynset(
        "mouse.n.01", "any of numerous small rodents", ["mouse"], [rodent]
    )
    bird = FakeSynset("bird.n.01", "a warm-blooded egg-laying vertebrate", ["bird"], [animal])
    raptor = FakeSynset("raptor.n.01", "a bird of prey", ["raptor"], [bird])
    hawk = FakeSynset("hawk.n.01", "a diurnal bird of prey", ["hawk"], [raptor])
    person = FakeSynset("person.n.01", "a human being", ["person"], [entity])
    frump = FakeSynset("dog.n.03", "a dull unattractive person", ["dog", "frump"], [person])
    artifact = FakeSynset("artifact.n.01", "a man-made object", ["artifact"], [entity])
    device = FakeSynset("device.n.01", "an instrumentality", ["device"], [artifact])
    computer_mouse = FakeSynset(
        "mouse.n.04",
        "a hand-operated electronic device",
        ["mouse", "computer_mouse"],
        [device],
    )
    hot = FakeSynset("hot.a.01", "used of physical heat", ["hot"])
    cold = FakeSynset("cold.a.01", "used of physical coldness", ["cold"])
    hot.lemmas()[0].antonym_lemmas.append(cold.lemmas()[0])
    cold.lemmas()[0].antonym_lemmas.append(hot.lemmas()[0])
    run = FakeSynset("run.v.01", "move fast by using one's feet", ["run"])

    synsets = [
        entity, animal, mammal, carnivore, canine, feline, pet, dog, cat,
        rodent, mouse, bird, raptor, hawk, person, frump, artifact, device,
        computer_mouse, hot, cold, run,
    ]  # fmt: skip
    return {synset.name(): synset for synset in synsets}


@pytest.fixture
def senses() -> Dict[str, FakeSynset]:
    """Return the test hierarchy keyed by synset name."""
    return _build_hierarchy()


@pytest.fixture
def reader(senses) -> FakeWordNet:
    """Return a fake corpus reader over the test hierarchy."""
    return FakeWordNet(senses.values())


@pytest.fixture
def ontology(reader) -> WordNetOntology:
    """Return a ``WordNetOntology`` over the test hierarchy."""
    return WordNetOntology(reader)


@pytest.fixture
def cluster_file(tmp_path):
    """Write a cluster file with the clusters ``a b c`` and ``d e``."""
    path = tmp_path / "clusters.txt"
    path.write_text("a b c\nd e\n", encoding="utf-8")
    return path
