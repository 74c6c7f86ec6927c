"""Common helper functions for scripts."""

import argparse
import logging
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass

import yaml

POS_TAGS = ["n", "v", "a", "r", "s"]


@dataclass
class PathsConfig:
    """Configuration for path-related settings."""

    dataset_path: Path
    target_words_path: Path
    output_dir: Path
    cluster_path: Optional[Path] = None

    @staticmethod
    def from_dict(data: dict) -> "PathsConfig":
        """Create PathsConfig from a dict (YAML section)."""
        cluster_path = data.get("cluster_path")
        return PathsConfig(
            dataset_path=Path(data["dataset_path"]),
            target_words_path=Path(data["target_words_path"]),
            output_dir=Path(data["output_dir"]),
            cluster_path=Path(cluster_path) if cluster_path else None,
        )


@dataclass
class FeaturesConfig:
    """Configuration for feature extraction settings."""

    pos: str
    extra_features: List[str]
    log_every: int

    @staticmethod
    def from_dict(data: dict) -> "FeaturesConfig":
        """Create FeaturesConfig from a dict (YAML section)."""
        pos = str(data["pos"])
        assert pos in POS_TAGS, "Invalid part of speech"
        extra_features = list(data.get("extra_features") or [])
        log_every = int(data.get("log_every", 100))
        assert log_every > 0, "Log interval must be positive"
        return FeaturesConfig(
            pos=pos, extra_features=extra_features, log_every=log_every
        )


@dataclass
class ConfigType:
    """Top-level configuration for the script, containing subconfigs."""

    paths: PathsConfig
    features: FeaturesConfig

    @staticmethod
    def from_yaml(config_path: Path) -> "ConfigType":
        """Load the configuration from a YAML file and split into subconfigs."""
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}

        # The YAML can be flat, so just pass the full dict to each "from_dict"
        paths_config = PathsConfig.from_dict(data)
        features_config = FeaturesConfig.from_dict(data)

        return ConfigType(paths=paths_config, features=features_config)


@dataclass
class Args:
    """Arguments for the script."""

    config: ConfigType
    verbose: bool = False


def add_data_config_argument(parser: argparse.ArgumentParser) -> None:
    """
    Add the standard data-config-path argument to an argument parser.
    """
    parser.add_argument(
        "-d",
        "--data-config-path",
        type=Path,
        required=True,
        help="Path to the YAML data configuration file.",
    )


def add_verbose_argument(parser: argparse.ArgumentParser) -> None:
    """
    Add the standard verbose flag to an argument parser.
    """
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress messages.",
    )


def load_target_words(words_path: Path) -> List[str]:
    """Load the target words from ``words.yaml``."""

    with words_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}

    targets = payload.get("targets", [])
    return [target["word"] for target in targets if target.get("word")]


def get_args(description: str) -> Args:
    """
    Create an Args object with the standard data-config-path argument.
    """
    parser = argparse.ArgumentParser(description=description)
    add_data_config_argument(parser)
    add_verbose_argument(parser)

    args = parser.parse_args()
    config = ConfigType.from_yaml(args.data_config_path)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return Args(config, args.verbose)


__all__ = [
    "Args",
    "ConfigType",
    "PathsConfig",
    "FeaturesConfig",
    "get_args",
    "load_target_words",
]
