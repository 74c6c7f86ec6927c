"""Index of known sense clusterings used to label merge decisions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional

from sense_merge.types.senses import ClusterMapType, ClusterType

logger = logging.getLogger(__name__)


@dataclass(init=False, slots=True)
class ClusterIndex:
    """
    Wrapper around a ``sense key -> cluster`` mapping.

    Every key of a cluster maps to the same frozen set of keys, which includes
    the key itself. The index is never modified after construction.
    """

    _clusters: ClusterMapType

    def __init__(self, clusters: Mapping[str, ClusterType]) -> None:
        self._clusters = dict(clusters)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "ClusterIndex":
        """
        Build a ``ClusterIndex`` from lines of whitespace-separated sense keys.

        Each line is one cluster. Blank lines are ignored. A key listed on
        several lines belongs to the cluster of its last line.
        """
        result: ClusterMapType = {}

        for line in lines:
            keys = frozenset(line.split())
            for key in keys:
                result[key] = keys

        return cls(result)

    @classmethod
    def from_file(cls, path: str | Path) -> "ClusterIndex":
        """
        Build a ``ClusterIndex`` from a cluster file.

        Raises:
            OSError: if the file cannot be read. No partial index is returned.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as handle:
            index = cls.from_lines(handle)

        logger.info("Loaded %d clustered sense keys from %s", len(index), path)
        return index

    def cluster_of(self, key: str) -> Optional[ClusterType]:
        """
        Return the cluster containing ``key``.

        - `key`: the sense key to look up.

        Returns:
            Optional[ClusterType]: the cluster, or None if the key was never seen.
        """
        return self._clusters.get(key)

    def clusters(self) -> List[ClusterType]:
        """Return each distinct cluster once, ordered by its smallest key."""
        unique = {cluster for cluster in self._clusters.values()}
        return sorted(unique, key=min)

    def to_json(self) -> List[List[str]]:
        """Convert the clusters into JSON-serialisable sorted key lists."""
        return [sorted(cluster) for cluster in self.clusters()]

    def __contains__(self, key: object) -> bool:
        return key in self._clusters

    def __len__(self) -> int:
        return len(self._clusters)


__all__ = ["ClusterIndex"]
