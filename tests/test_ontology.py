"""Tests for the hierarchy relations computed by ``WordNetOntology``."""


def test_ancestors_records_shortest_distances(ontology, senses):
    ancestors = ontology.ancestors(senses["dog.n.01"])
    distances = {node.name(): distance for node, distance in ancestors.items()}
    assert distances == {
        "dog.n.01": 0,
        "canine.n.01": 1,
        "pet.n.01": 1,
        "carnivore.n.01": 2,
        "animal.n.01": 2,
        "mammal.n.01": 3,
        "entity.n.01": 3,
    }


def test_lowest_common_ancestor_of_a_sense_with_itself(ontology, senses):
    for sense in senses.values():
        assert ontology.lowest_common_ancestor(sense, sense) is sense


def test_lowest_common_ancestor_picks_deepest_shared_hypernym(ontology, senses):
    dog = senses["dog.n.01"]
    assert ontology.lowest_common_ancestor(dog, senses["cat.n.01"]) is senses["carnivore.n.01"]
    assert ontology.lowest_common_ancestor(dog, senses["hawk.n.01"]) is senses["animal.n.01"]
    assert ontology.lowest_common_ancestor(dog, senses["pet.n.01"]) is senses["pet.n.01"]
    assert ontology.lowest_common_ancestor(dog, senses["mouse.n.04"]) is senses["entity.n.01"]


def test_lowest_common_ancestor_is_none_without_shared_hypernym(ontology, senses):
    assert ontology.lowest_common_ancestor(senses["dog.n.01"], senses["run.v.01"]) is None
    assert ontology.lowest_common_ancestor(senses["hot.a.01"], senses["cold.a.01"]) is None


def test_shortest_path_distance(ontology, senses):
    dog = senses["dog.n.01"]
    assert ontology.shortest_path_distance(dog, dog) == 0
    assert ontology.shortest_path_distance(dog, senses["animal.n.01"]) == 2
    assert ontology.shortest_path_distance(dog, senses["cat.n.01"]) == 4
    assert ontology.shortest_path_distance(dog, senses["run.v.01"]) is None


def test_longest_path_distance_follows_the_longest_chain(ontology, senses):
    dog = senses["dog.n.01"]
    assert ontology.longest_path_distance(dog, dog) == 0
    assert ontology.longest_path_distance(dog, senses["animal.n.01"]) == 4
    assert ontology.longest_path_distance(dog, senses["entity.n.01"]) == 5
    assert ontology.longest_path_distance(dog, senses["pet.n.01"]) == 1


def test_longest_path_distance_to_a_non_hypernym_is_none(ontology, senses):
    assert ontology.longest_path_distance(senses["hawk.n.01"], senses["dog.n.01"]) is None


def test_synsets_for_filters_by_part_of_speech(ontology, senses):
    assert ontology.synsets_for("dog", "n") == [senses["dog.n.01"], senses["dog.n.03"]]
    assert ontology.synsets_for("dog", "v") == []
    assert ontology.synsets_for("unicorn", "n") == []


def test_max_depth_adds_simulated_root_outside_nouns(ontology):
    assert ontology.max_depth("n") == 5
    assert ontology.max_depth("v") == 1


def test_max_depth_is_computed_once(ontology, reader, monkeypatch):
    assert ontology.max_depth("n") == 5

    def fail(pos=None):
        raise AssertionError("max depth recomputed")

    monkeypatch.setattr(reader, "all_synsets", fail)
    assert ontology.max_depth("n") == 5


def test_horizontal_neighbours(ontology, senses):
    assert ontology.horizontal_neighbours(senses["hot.a.01"]) == {senses["cold.a.01"]}
    assert ontology.horizontal_neighbours(senses["dog.n.01"]) == set()

    senses["dog.n.01"].also_see.append(senses["cat.n.01"])
    assert ontology.horizontal_neighbours(senses["dog.n.01"]) == {senses["cat.n.01"]}
