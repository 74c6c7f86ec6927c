#!/usr/bin/env python3
"""Run the complete pipeline: build feature vectors, summarize them and plot them."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts.helpers import get_args  # pylint: disable=C0413, E0401
from scripts.build_features import run_build_features  # pylint: disable=C0413, E0401
from scripts.summarise import run_summarise  # pylint: disable=C0413, E0401
from scripts.plot_features import run_plot_features  # pylint: disable=C0413, E0401


def main() -> None:
    """Program entrypoint."""
    args = get_args(__doc__)

    # Load configuration
    paths = args.config.paths
    features = args.config.features

    print("=" * 70)
    print(" " * 20 + "SENSE MERGE PIPELINE")
    print("=" * 70)
    print(f"Database: {paths.dataset_path}")
    print(f"Output directory: {paths.output_dir}")
    print("=" * 70)
    print()

    # Step 1: Build feature vectors
    print("\n" + "-" * 70)
    print(" " * 25 + "STEP 1: BUILD FEATURES")
    print("-" * 70)
    run_build_features(
        paths.dataset_path,
        paths.target_words_path,
        paths.output_dir,
        features.pos,
        features.extra_features,
        paths.cluster_path,
        features.log_every,
    )

    # Step 2: Summarize the stored vectors
    print("\n" + "-" * 70)
    print(" " * 25 + "STEP 2: SUMMARIZE")
    print("-" * 70)
    run_summarise(paths.dataset_path)

    # Step 3: Plot feature distributions
    print("\n" + "-" * 70)
    print(" " * 25 + "STEP 3: PLOT FEATURES")
    print("-" * 70)
    run_plot_features(paths.dataset_path, paths.output_dir)

    print("\n" + "=" * 70)
    print(" " * 20 + "PIPELINE COMPLETE!")
    print("=" * 70)


if __name__ == "__main__":
    main()
