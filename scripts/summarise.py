"""Summarize the feature vectors stored in the SQLite database specified in data.yaml."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts.helpers import get_args  # pylint: disable=C0413, E0401
from sense_merge.dataset import Database  # pylint: disable=C0413,E0401
from sense_merge.features import CLASS_ATTRIBUTE  # pylint: disable=C0413,E0401


def run_summarise(dataset_path: Path) -> None:
    """Run feature summarization."""
    if not dataset_path.exists():
        print(f"Error: Database file not found at {dataset_path}")
        sys.exit(1)

    # Load the features and convert to pandas DataFrame
    database = Database.from_db(dataset_path)
    df = database.features_table.to_df()
    attributes = [
        column
        for column in database.features_table.get_attributes()
        if column != CLASS_ATTRIBUTE
    ]

    # Print overall statistics
    print("=" * 50)
    print("FEATURE SUMMARY")
    print("=" * 50)
    print(f"Database path: {dataset_path}")
    print(f"Total pairs: {len(df)}")
    print(f"Attributes: {', '.join(attributes)}")
    print()

    # Print class balance
    print("-" * 50)
    print("PAIRS BY CLASS")
    print("-" * 50)
    class_counts = df.groupby(CLASS_ATTRIBUTE).size().sort_index()
    for label, count in class_counts.items():
        print(f"  class {int(label)}: {count} pairs")
    print()

    # Print per-class feature means
    print("-" * 50)
    print("FEATURE MEANS BY CLASS")
    print("-" * 50)
    means = df.groupby(CLASS_ATTRIBUTE)[attributes].mean()
    for label, row in means.iterrows():
        print(f"  class {int(label)}:")
        for attribute in attributes:
            print(f"    {attribute:12s} {row[attribute]:.4f}")
    print()

    # Print statistics by part of speech
    print("-" * 50)
    print("PAIRS BY PART OF SPEECH")
    print("-" * 50)
    pos_counts = df.groupby("pos").size().sort_values(ascending=False)
    for pos, count in pos_counts.items():
        print(f"  {pos}: {count} pairs")
    print()

    database.close()

    print("=" * 50)
    print("END OF SUMMARY")
    print("=" * 50)


def main() -> None:
    """Program entrypoint."""
    args = get_args(__doc__)
    run_summarise(args.config.paths.dataset_path)


if __name__ == "__main__":  # pragma: no cover
    main()
