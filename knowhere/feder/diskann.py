"""Index and search views of a DiskANN index, exportable as JSON-ready dicts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping


@dataclass
class DiskANNBuildConfig:
    """Parameters the index was built with."""

    data_path: str = ""
    max_degree: int = 0
    search_list_size: int = 0
    pq_code_budget_gb: float = 0.0
    build_dram_budget_gb: float = 0.0
    num_threads: int = 0
    disk_pq_dims: int = 0
    accelerate_build: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "data_path": self.data_path,
            "max_degree": self.max_degree,
            "search_list_size": self.search_list_size,
            "pq_code_budget_gb": self.pq_code_budget_gb,
            "build_dram_budget_gb": self.build_dram_budget_gb,
            "num_threads": self.num_threads,
            "disk_pq_dims": self.disk_pq_dims,
            "accelerate_build": self.accelerate_build,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiskANNBuildConfig:
        return cls(
            data_path=str(data["data_path"]),
            max_degree=int(data["max_degree"]),
            search_list_size=int(data["search_list_size"]),
            pq_code_budget_gb=float(data["pq_code_budget_gb"]),
            build_dram_budget_gb=float(data["build_dram_budget_gb"]),
            num_threads=int(data["num_threads"]),
            disk_pq_dims=int(data["disk_pq_dims"]),
            accelerate_build=bool(data["accelerate_build"]),
        )


_ENTRY_KEY = "entry_points_"


@dataclass
class DiskANNMeta:
    """Overview of a built DiskANN index."""

    build_params: DiskANNBuildConfig = field(default_factory=DiskANNBuildConfig)
    num_elem: int = 0
    entry_point_ids: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "build_params_": self.build_params.to_dict(),
            "num_elem_": self.num_elem,
            _ENTRY_KEY: list(self.entry_point_ids),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiskANNMeta:
        return cls(
            build_params=DiskANNBuildConfig.from_dict(data["build_params_"]),
            num_elem=int(data["num_elem_"]),
            entry_point_ids=[int(p) for p in data[_ENTRY_KEY]],
        )


@dataclass
class DiskANNQueryConfig:
    """Parameters a query ran with."""

    k: int = 0
    search_list_size: int = 0
    beamwidth: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"k": self.k, "search_list_size": self.search_list_size, "beamwidth": self.beamwidth}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiskANNQueryConfig:
        return cls(
            k=int(data["k"]),
            search_list_size=int(data["search_list_size"]),
            beamwidth=int(data["beamwidth"]),
        )


@dataclass
class TopCandidateInfo:
    """A candidate visited during search, with the neighbours examined from it."""

    id: int = 0
    distance: float = 0.0
    neighbors: list[tuple[int, float]] = field(default_factory=list)

    def add_neighbor(self, id_: int, distance: float) -> None:
        self.neighbors.append((int(id_), float(distance)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id_": self.id,
            "real_distance_from_q_": self.distance,
            "neighbors_": [[nid, dist] for nid, dist in self.neighbors],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TopCandidateInfo:
        return cls(
            id=int(data["id_"]),
            distance=float(data["real_distance_from_q_"]),
            neighbors=[(int(nid), float(dist)) for nid, dist in data["neighbors_"]],
        )


@dataclass
class DiskANNVisitInfo:
    """Trace of one search: its parameters and the candidates in visit order."""

    query_params: DiskANNQueryConfig = field(default_factory=DiskANNQueryConfig)
    infos: list[TopCandidateInfo] = field(default_factory=list)

    def set_query_config(self, k: int, search_list_size: int, beamwidth: int) -> None:
        self.query_params = DiskANNQueryConfig(k=k, search_list_size=search_list_size, beamwidth=beamwidth)

    def add_top_candidate_info(self, id_: int, dist: float) -> None:
        self.infos.append(TopCandidateInfo(int(id_), float(dist)))

    def add_top_candidate_neighbor(self, id_: int, nid: int, ndist: float) -> None:
        """Record a neighbour of the latest candidate, which must be *id_*."""
        if not self.infos:
            raise ValueError("no candidate has been recorded yet")
        current = self.infos[-1]
        if current.id != id_:
            raise ValueError(f"latest candidate is {current.id}, not {id_}")
        current.add_neighbor(nid, ndist)

    def to_dict(self) -> dict[str, Any]:
        return {
            "query_params_": self.query_params.to_dict(),
            "infos_": [info.to_dict() for info in self.infos],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiskANNVisitInfo:
        return cls(
            query_params=DiskANNQueryConfig.from_dict(data["query_params_"]),
            infos=[TopCandidateInfo.from_dict(info) for info in data["infos_"]],
        )


@dataclass
class FederResult:
    """Visit trace of a search together with the ids it touched."""

    visit_info: DiskANNVisitInfo = field(default_factory=DiskANNVisitInfo)
    id_set: set[int] = field(default_factory=set)

    def add_ids(self, ids: Iterable[int]) -> None:
        self.id_set.update(int(i) for i in ids)