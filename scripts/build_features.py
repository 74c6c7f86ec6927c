#!/usr/bin/env python3
"""Compute merge feature vectors for sense pairs of the target words and export them."""

from __future__ import annotations

import csv
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts.helpers import get_args, load_target_words  # pylint: disable=C0413, E0401
from sense_merge.builders import ClusterIndex, candidate_pairs  # pylint: disable=C0413
from sense_merge.dataset import Database  # pylint: disable=C0413
from sense_merge.features import (  # pylint: disable=C0413
    SynsetPairFeatureMaker,
    make_feature_maker,
)
from sense_merge.ontology import Ontology, WordNetOntology  # pylint: disable=C0413
from sense_merge.types.features import FeatureRecord  # pylint: disable=C0413

logger = logging.getLogger(__name__)


def collect_feature_records(
    ontology: Ontology,
    feature_maker: SynsetPairFeatureMaker,
    words: Sequence[str],
    pos: str,
    log_every: int = 100,
) -> Tuple[List[FeatureRecord], int]:
    """
    Compute a ``FeatureRecord`` for every candidate pair of the target words.

    Returns:
        Tuple containing:
        - the records of the pairs that produced a feature vector
        - the number of pairs skipped for lacking cluster information
    """
    records: List[FeatureRecord] = []
    skipped = 0

    for idx, (sense1, sense2) in enumerate(candidate_pairs(ontology, words, pos), 1):
        if idx % log_every == 0:
            logger.info("Processed %d pairs (%d skipped)", idx, skipped)

        vector = feature_maker.make_feature_vector(sense1, sense2)
        if vector is None:
            skipped += 1
            continue

        records.append(
            FeatureRecord(
                sense1=sense1.name(),
                sense2=sense2.name(),
                pos=sense1.pos(),
                vector=vector,
            )
        )

    return records, skipped


def write_csv(
    records: Sequence[FeatureRecord], attributes: Sequence[str], output_path: Path
) -> None:
    """Write the feature vectors to a CSV file with one column per attribute."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=["sense1", "sense2", *attributes])
        writer.writeheader()
        for record in records:
            row = {"sense1": record.sense1, "sense2": record.sense2}
            row.update(zip(attributes, record.vector.tolist()))
            writer.writerow(row)


def run_build_features(
    dataset_path: Path,
    words_path: Path,
    output_dir: Path,
    pos: str,
    extra_features: Sequence[str],
    cluster_path: Optional[Path] = None,
    log_every: int = 100,
) -> None:
    """
    Build feature vectors and save them to the database and to CSV.

    Args:
        dataset_path: Path to the SQLite database
        words_path: Path to the YAML file listing the target words
        output_dir: Directory to save the CSV export
        pos: Part of speech of the senses to compare
        extra_features: Names of extra features to append
        cluster_path: Known sense clustering used for class labels, if any
        log_every: Number of pairs between progress messages
    """
    if not words_path.exists():
        print(f"Error: Target words file not found at {words_path}")
        sys.exit(1)

    words = load_target_words(words_path)
    if not words:
        raise ValueError(f"No targets found in {words_path}")

    print("=" * 50)
    print("FEATURE EXTRACTION")
    print("=" * 50)
    print(f"Target words: {len(words)}")
    print(f"Part of speech: {pos}")
    print(f"Extra features: {', '.join(extra_features) or 'none'}")
    print(f"Cluster file: {cluster_path or 'none (test vectors)'}")
    print()

    # A configured cluster file that cannot be read aborts the run
    clusters = ClusterIndex.from_file(cluster_path) if cluster_path else None

    ontology = WordNetOntology()
    feature_maker = make_feature_maker(ontology, clusters, extra_features)
    attributes = feature_maker.make_attribute_list()
    print(f"Attributes: {', '.join(attributes)}")

    records, skipped = collect_feature_records(
        ontology, feature_maker, words, pos, log_every
    )

    with Database.from_db(dataset_path) as database:
        features_table = database.features_table
        features_table.reset()
        features_table.set_attributes(attributes)
        features_table.add_records(records)

    output_file = output_dir / "features.csv"
    write_csv(records, attributes, output_file)

    print("\n" + "=" * 50)
    print(f"Feature vectors: {len(records)}")
    print(f"Skipped pairs: {skipped}")
    print(f"Database: {dataset_path}")
    print(f"CSV: {output_file}")
    print("=" * 50)


__all__ = ["collect_feature_records", "write_csv", "run_build_features"]


def main() -> None:
    """Program entrypoint."""
    args = get_args(__doc__)

    run_build_features(
        args.config.paths.dataset_path,
        args.config.paths.target_words_path,
        args.config.paths.output_dir,
        args.config.features.pos,
        args.config.features.extra_features,
        args.config.paths.cluster_path,
        args.config.features.log_every,
    )


if __name__ == "__main__":
    main()
