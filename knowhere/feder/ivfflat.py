"""Index view of an IVF-Flat index, exportable as JSON-ready dicts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping


@dataclass
class ClusterInfo:
    """One inverted list: its id, member ids and centroid."""

    id: int = 0
    node_ids: list[int] = field(default_factory=list)
    centroid: list[float] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"id_": self.id, "node_ids_": list(self.node_ids), "centroid_vec_": list(self.centroid)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClusterInfo:
        return cls(
            id=int(data["id_"]),
            node_ids=[int(n) for n in data["node_ids_"]],
            centroid=[float(c) for c in data["centroid_vec_"]],
        )


@dataclass
class IVFFlatMeta:
    """Overview of an IVF-Flat index and its clusters."""

    nlist: int = 0
    dim: int = 0
    ntotal: int = 0
    clusters: list[ClusterInfo] = field(default_factory=list)

    def add_cluster(self, id_: int, node_ids: Iterable[int], centroid: Iterable[float]) -> None:
        """Add a cluster; its centroid must have ``dim`` components."""
        vec = [float(c) for c in centroid]
        if len(vec) != self.dim:
            raise ValueError(f"centroid has {len(vec)} components, expected {self.dim}")
        self.clusters.append(ClusterInfo(int(id_), [int(n) for n in node_ids], vec))

    def to_dict(self) -> dict[str, Any]:
        return {
            "nlist_": self.nlist,
            "dim_": self.dim,
            "ntotal_": self.ntotal,
            "clusters_": [c.to_dict() for c in self.clusters],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> IVFFlatMeta:
        return cls(
            nlist=int(data["nlist_"]),
            dim=int(data["dim_"]),
            ntotal=int(data["ntotal_"]),
            clusters=[ClusterInfo.from_dict(c) for c in data["clusters_"]],
        )