"""Index and search views of an HNSW graph, exportable as JSON-ready dicts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping


@dataclass
class NodeInfo:
    """A graph node and the ids it links to."""

    id: int = 0
    neighbors: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"id_": self.id, "neighbors_": list(self.neighbors)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NodeInfo:
        return cls(id=int(data["id_"]), neighbors=[int(n) for n in data["neighbors_"]])


@dataclass
class LevelLinkGraph:
    """The nodes of one level of the hierarchy."""

    level: int = 0
    nodes: list[NodeInfo] = field(default_factory=list)

    def add_node_info(self, id_: int, links: Iterable[int]) -> None:
        self.nodes.append(NodeInfo(int(id_), [int(link) for link in links]))

    def to_dict(self) -> dict[str, Any]:
        return {"level_": self.level, "nodes_": [node.to_dict() for node in self.nodes]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LevelLinkGraph:
        return cls(level=int(data["level_"]), nodes=[NodeInfo.from_dict(n) for n in data["nodes_"]])


@dataclass
class HNSWMeta:
    """Overview of an HNSW index and its top levels."""

    ef_construction: int = 0
    M: int = 0
    num_elem: int = 0
    num_levels: int = 0
    enter_point_id: int = 0
    num_overview_levels: int = 0
    overview_hier_graph: list[LevelLinkGraph] = field(default_factory=list)

    def add_level_link_graph(self, level: int) -> None:
        self.overview_hier_graph.append(LevelLinkGraph(int(level)))

    def add_node_info(self, level: int, id_: int, links: Iterable[int]) -> None:
        """Add a node to the latest level, which must be *level*."""
        if not self.overview_hier_graph:
            raise ValueError("no level has been added yet")
        current = self.overview_hier_graph[-1]
        if current.level != level:
            raise ValueError(f"latest level is {current.level}, not {level}")
        current.add_node_info(id_, links)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ef_construction_": self.ef_construction,
            "M_": self.M,
            "num_elem_": self.num_elem,
            "num_levels_": self.num_levels,
            "enter_point_id_": self.enter_point_id,
            "num_overview_levels_": self.num_overview_levels,
            "overview_hier_graph_": [g.to_dict() for g in self.overview_hier_graph],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HNSWMeta:
        return cls(
            ef_construction=int(data["ef_construction_"]),
            M=int(data["M_"]),
            num_elem=int(data["num_elem_"]),
            num_levels=int(data["num_levels_"]),
            enter_point_id=int(data["enter_point_id_"]),
            num_overview_levels=int(data["num_overview_levels_"]),
            overview_hier_graph=[LevelLinkGraph.from_dict(g) for g in data["overview_hier_graph_"]],
        )


@dataclass
class LevelVisitRecord:
    """Edges traversed on one level during a search."""

    level: int = 0
    records: list[tuple[int, int, float]] = field(default_factory=list)

    def add_visit_record(self, id_from: int, id_to: int, distance: float) -> None:
        self.records.append((int(id_from), int(id_to), float(distance)))

    def to_dict(self) -> dict[str, Any]:
        return {"level_": self.level, "records_": [list(r) for r in self.records]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LevelVisitRecord:
        return cls(
            level=int(data["level_"]),
            records=[(int(a), int(b), float(d)) for a, b, d in data["records_"]],
        )


@dataclass
class HNSWVisitInfo:
    """Trace of one search, level by level."""

    infos: list[LevelVisitRecord] = field(default_factory=list)

    def add_level_visit_record(self, level: int) -> None:
        self.infos.append(LevelVisitRecord(int(level)))

    def add_visit_record(self, level: int, id_from: int, id_to: int, dist: float) -> None:
        """Record an edge on the latest level, which must be *level*."""
        if not self.infos:
            raise ValueError("no level has been added yet")
        current = self.infos[-1]
        if current.level != level:
            raise ValueError(f"latest level is {current.level}, not {level}")
        current.add_visit_record(id_from, id_to, dist)

    def to_dict(self) -> dict[str, Any]:
        return {"infos_": [info.to_dict() for info in self.infos]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HNSWVisitInfo:
        return cls(infos=[LevelVisitRecord.from_dict(i) for i in data["infos_"]])


@dataclass
class FederResult:
    """Visit trace of a search together with the ids it touched."""

    visit_info: HNSWVisitInfo = field(default_factory=HNSWVisitInfo)
    id_set: set[int] = field(default_factory=set)

    def add_ids(self, ids: Iterable[int]) -> None:
        self.id_set.update(int(i) for i in ids)