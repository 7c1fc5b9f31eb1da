"""
Association extraction from declared type members.

This module turns every member-to-type reference into an association
edge, merging the two directions of a relationship into a single edge.
"""

from typing import List, Optional

from typegraph.core.catalog import TypeCatalog
from typegraph.core.entities import FileDeclaration, MemberedType
from .relationships import (
    AssociationType, AssociationEnd, MemberAssociation, AssociationMap, MANY
)


def get_multiplicity(type_text: Optional[str]) -> Optional[str]:
    """
    Guess the multiplicity of a referenced type from its declared type text.

    This is a textual heuristic: any ``[`` means "many". Generic
    collections such as ``Array<T>`` or ``ReadonlyArray<T>`` are not
    recognized, and tuples count as many.
    """
    if type_text and "[" in type_text:
        return MANY
    return None


class AssociationExtractor:
    """
    Extracts member associations from declared types.

    For each class, interface and type alias, in that order:
    - Method return types become DEPENDENCY edges
    - Property types become ASSOCIATION edges

    A reference from the other side of an existing edge only updates the
    multiplicity of that edge, so the kind of an edge is decided by the
    direction extracted first.
    """

    def __init__(self, catalog: TypeCatalog, associations: Optional[AssociationMap] = None,
                 verbose: bool = False):
        """
        Initialize the extractor.

        Args:
            catalog: TypeCatalog used to resolve referenced ids
            associations: Working edge set to fill (a fresh one if None)
            verbose: Print a trace line for every new edge
        """
        self.catalog = catalog
        self.associations = associations if associations is not None else AssociationMap()
        self.verbose = verbose

    def extract_all(self, declarations: List[FileDeclaration]) -> AssociationMap:
        """
        Extract associations for every file, filling each file's output slot.

        Returns:
            The working AssociationMap
        """
        for decl in declarations:
            decl.member_associations = self.extract_file(decl)
        return self.associations

    def extract_file(self, decl: FileDeclaration) -> List[MemberAssociation]:
        """Extract associations for one file; returns the edges it created."""
        created = []
        for owner in decl.membered_types():
            created.extend(self.extract_type(owner))
        return created

    def extract_type(self, owner: MemberedType) -> List[MemberAssociation]:
        """Extract associations for one type; returns the edges it created."""
        created = []

        for method in owner.methods:
            multiplicity = get_multiplicity(method.return_type)
            for type_id in method.uses:
                association = self._add_reference(owner, type_id, multiplicity,
                                                  AssociationType.DEPENDENCY)
                if association:
                    created.append(association)

        for prop in owner.properties:
            multiplicity = get_multiplicity(prop.type_text)
            for type_id in prop.type_ids:
                association = self._add_reference(owner, type_id, multiplicity,
                                                  AssociationType.ASSOCIATION)
                if association:
                    created.append(association)

        return created

    def _add_reference(self, owner: MemberedType, type_id: str, multiplicity: Optional[str],
                       association_type: AssociationType) -> Optional[MemberAssociation]:
        """Create or merge the edge for one reference; returns it only if new."""
        referenced = self.catalog.find_by_id(type_id)
        if referenced is None:
            # Primitive, external or type parameter
            return None

        reverse = self.associations.get(type_id, owner.id)
        if reverse is not None:
            # End a of the reverse edge belongs to the referenced type
            reverse.a.multiplicity = multiplicity
            return None

        if self.associations.has(owner.id, type_id):
            return None

        association = MemberAssociation(
            AssociationEnd(owner.id, owner.name),
            AssociationEnd(referenced.id, referenced.name, multiplicity),
            association_type
        )
        self.associations.add(association)

        if self.verbose:
            print(f"  [LINK] {owner.name} -> {referenced.name} ({association_type.value})")

        return association
