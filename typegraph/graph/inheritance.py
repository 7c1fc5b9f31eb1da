"""
Inheritance reconciliation of member associations.

An association from a subtype to some type is redundant when one of
the subtype's ancestors already has an association to the same type.
Such edges are flagged as inherited so the diagram shows the
relationship once, at the most general point of the hierarchy.
"""

from typing import Optional, Set

from typegraph.core.catalog import TypeCatalog
from .heritage import HeritageGraph
from .relationships import AssociationMap, MemberAssociation


class InheritanceReconciler:
    """
    Flags associations that an ancestor already carries.

    Edges are only flagged, never removed, so every check sees the
    complete edge set, including edges owned by other files.
    """

    def __init__(self, catalog: TypeCatalog, associations: AssociationMap,
                 heritage: Optional[HeritageGraph] = None, verbose: bool = False):
        self.catalog = catalog
        self.associations = associations
        self.heritage = heritage or HeritageGraph.from_catalog(catalog)
        self.verbose = verbose

    def reconcile(self) -> int:
        """
        Check every association against the ancestors of its source type.

        Returns:
            Number of associations newly flagged as inherited
        """
        for cycle in self.heritage.find_cycles():
            print(f"[WARN] Cyclic heritage: {' -> '.join(cycle + cycle[:1])}")

        flagged = 0
        for association in self.associations:
            if association.inherited:
                continue
            if self.is_inherited(association):
                association.mark_inherited()
                flagged += 1
                if self.verbose:
                    print(f"  [INHERITED] {association.a.name} -> {association.b.name}")
        return flagged

    def is_inherited(self, association: MemberAssociation) -> bool:
        """True if an ancestor of end ``a`` has an edge to end ``b``."""
        return self._check_ancestors(association.a.type_id, association.b.type_id,
                                     {association.a.type_id})

    def _check_ancestors(self, src_id: str, dst_id: str, visited: Set[str]) -> bool:
        inherited = False
        for ancestor_id in self.heritage.parents(src_id):
            if ancestor_id in visited:
                continue
            visited.add(ancestor_id)

            if self.associations.has(ancestor_id, dst_id):
                inherited = True
            if self._check_ancestors(ancestor_id, dst_id, visited):
                inherited = True
        return inherited
