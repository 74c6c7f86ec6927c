#!/usr/bin/env python3
"""Plot the distribution of each feature split by class label."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts.helpers import get_args  # pylint: disable=C0413, E0401
from sense_merge.dataset import Database  # pylint: disable=C0413, E0401
from sense_merge.features import CLASS_ATTRIBUTE  # pylint: disable=C0413, E0401

# Colors for the class labels
CLASS_COLORS = {
    0: "#1f77b4",  # Blue
    1: "#ff7f0e",  # Orange
}


def plot_feature_by_class(
    df: pd.DataFrame, attribute: str, output_dir: Path, bins: int = 20
) -> Path:
    """
    Create a histogram of one feature with one series per class label.

    Returns:
        Path: the saved figure.
    """
    _fig, ax = plt.subplots(figsize=(8, 5))

    values = df[attribute].to_numpy()
    edges = np.histogram_bin_edges(values, bins=bins) if len(values) else bins

    for label, group in df.groupby(CLASS_ATTRIBUTE):
        label = int(label)
        ax.hist(
            group[attribute],
            bins=edges,
            alpha=0.6,
            color=CLASS_COLORS.get(label),
            label=f"class {label} (n={len(group)})",
        )

    ax.set_xlabel(attribute)
    ax.set_ylabel("Pairs")
    ax.set_title(f"{attribute} by class")
    ax.legend()
    ax.grid(True, alpha=0.3)

    output_file = output_dir / f"{attribute.lower()}.png"
    plt.tight_layout()
    plt.savefig(output_file, dpi=150)
    plt.close()

    return output_file


def run_plot_features(dataset_path: Path, output_dir: Path) -> Sequence[Path]:
    """Plot every feature stored in the database."""
    if not dataset_path.exists():
        print(f"Error: Database file not found at {dataset_path}")
        sys.exit(1)

    plots_dir = output_dir / "plots"
    plots_dir.mkdir(parents=True, exist_ok=True)

    with Database.from_db(dataset_path) as database:
        df = database.features_table.to_df()
        attributes = [
            name
            for name in database.features_table.get_attributes()
            if name != CLASS_ATTRIBUTE
        ]

    saved = []
    for attribute in attributes:
        output_file = plot_feature_by_class(df, attribute, plots_dir)
        print(f"Saved {attribute}: {output_file}")
        saved.append(output_file)

    return saved


__all__ = ["plot_feature_by_class", "run_plot_features"]


def main() -> None:
    """Program entrypoint."""
    args = get_args(__doc__)
    run_plot_features(args.config.paths.dataset_path, args.config.paths.output_dir)


if __name__ == "__main__":
    main()
