"""
Heritage graph over the type catalog.

Wraps a NetworkX DiGraph whose edges run from a subtype to each of its
direct supertypes and implemented interfaces. Only clauses whose target
is in the catalog become edges; unmodeled base types are left out.
"""

from typing import List, Set

import networkx as nx

from typegraph.core.catalog import TypeCatalog
from typegraph.core.entities import HeritageKind, MemberedType


class HeritageGraph:
    """Inheritance DAG (extends / implements) between catalog types."""

    def __init__(self):
        self._graph = nx.DiGraph()

    @classmethod
    def from_catalog(cls, catalog: TypeCatalog) -> "HeritageGraph":
        graph = cls()
        for type_id, entity in catalog.types_by_id.items():
            graph.add_type(type_id)
            if not isinstance(entity, MemberedType):
                continue
            for clause in entity.heritage_clauses:
                if clause.target_id not in catalog:
                    continue
                graph.add_clause(type_id, clause.target_id, clause.kind)
        return graph

    # ─── Node / Edge Operations ──────────────────

    def add_type(self, type_id: str) -> None:
        self._graph.add_node(type_id)

    def add_clause(self, source_id: str, target_id: str, kind: HeritageKind) -> None:
        self._graph.add_edge(source_id, target_id, kind=kind.value)

    def has_type(self, type_id: str) -> bool:
        return type_id in self._graph

    def number_of_clauses(self) -> int:
        return self._graph.number_of_edges()

    # ─── Traversal ────────────────────────────────

    def parents(self, type_id: str) -> List[str]:
        """Direct supertypes, in clause declaration order."""
        if type_id not in self._graph:
            return []
        return list(self._graph.successors(type_id))

    def ancestors(self, type_id: str) -> Set[str]:
        """All transitive supertypes."""
        if type_id not in self._graph:
            return set()
        return nx.descendants(self._graph, type_id)

    def subtypes(self, type_id: str) -> List[str]:
        if type_id not in self._graph:
            return []
        return list(self._graph.predecessors(type_id))

    # ─── Analysis ─────────────────────────────────

    def is_acyclic(self) -> bool:
        return nx.is_directed_acyclic_graph(self._graph)

    def find_cycles(self) -> List[List[str]]:
        return list(nx.simple_cycles(self._graph))
