"""
Association types and models for the relationship graph.

This module defines the edges the graph builder produces between
declared types, and the working edge set they are collected in.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Iterator, Tuple
from enum import Enum


class AssociationType(Enum):
    """
    Kinds of relationships between two declared types.

    Association - a member holds a reference to the other type
    Dependency - a method merely uses the other type in its signature
    Aggregation - one type is a part of the other
    Composition - one type is a part of the other and cannot exist without it
    """
    ASSOCIATION = "association"
    DEPENDENCY = "dependency"
    AGGREGATION = "aggregation"
    COMPOSITION = "composition"


# Multiplicity is an Optional[str]; None renders as unspecified
MULTIPLICITIES = ("1", "0..1", "1..*", "0..*")
MANY = "0..*"


@dataclass
class AssociationEnd:
    """One end of an association: a type and how many of it take part."""
    type_id: str
    name: str
    multiplicity: Optional[str] = None

    def __post_init__(self):
        if self.multiplicity is not None and self.multiplicity not in MULTIPLICITIES:
            raise ValueError(f"Unknown multiplicity: '{self.multiplicity}'")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type_id": self.type_id,
            "name": self.name,
            "multiplicity": self.multiplicity
        }


@dataclass
class MemberAssociation:
    """
    Represents an association (edge) between two declared types.

    The pair of ends is unordered: a reference from either side of the
    pair lands on the same edge. End ``a`` is the type whose member was
    extracted first.

    Attributes:
        a: End of the type that declared the first reference
        b: End of the referenced type
        association_type: Kind decided by the first reference extracted
        inherited: True once an ancestor of ``a`` carries the same edge
    """
    a: AssociationEnd
    b: AssociationEnd
    association_type: AssociationType = AssociationType.ASSOCIATION
    inherited: bool = False

    def mark_inherited(self):
        """Flag the edge as inherited. There is no way back."""
        self.inherited = True

    def end_for(self, type_id: str) -> AssociationEnd:
        """Get the end belonging to ``type_id``."""
        if self.a.type_id == type_id:
            return self.a
        if self.b.type_id == type_id:
            return self.b
        raise KeyError(type_id)

    @property
    def key(self) -> str:
        return association_key(self.a.type_id, self.b.type_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize association to dictionary."""
        return {
            "a": self.a.to_dict(),
            "b": self.b.to_dict(),
            "type": self.association_type.value,
            "inherited": self.inherited
        }


def association_key(src_id: str, dst_id: str) -> str:
    """Composite key of an edge as seen from ``src_id``."""
    return f"{src_id}_{dst_id}"


@dataclass
class AssociationMap:
    """
    Working edge set of the graph builder, keyed by ``src_dst``.

    Insertion order is kept so iteration, and with it every tie-break
    that depends on it, is reproducible.
    """
    associations: Dict[str, MemberAssociation] = field(default_factory=dict)

    def get(self, src_id: str, dst_id: str) -> Optional[MemberAssociation]:
        return self.associations.get(association_key(src_id, dst_id))

    def has(self, src_id: str, dst_id: str) -> bool:
        return association_key(src_id, dst_id) in self.associations

    def add(self, association: MemberAssociation):
        """Record an association under its forward key."""
        self.associations[association.key] = association

    def __iter__(self) -> Iterator[MemberAssociation]:
        return iter(self.associations.values())

    def __len__(self) -> int:
        return len(self.associations)

    def items(self) -> Iterator[Tuple[str, MemberAssociation]]:
        return iter(self.associations.items())

    def get_inherited(self) -> List[MemberAssociation]:
        return [a for a in self.associations.values() if a.inherited]

    def get_by_type(self, association_type: AssociationType) -> List[MemberAssociation]:
        """Get all associations of a specific type."""
        return [a for a in self.associations.values()
                if a.association_type == association_type]

    def statistics(self) -> Dict[str, int]:
        """Get statistics about association types."""
        stats = {}
        for association_type in AssociationType:
            count = len(self.get_by_type(association_type))
            if count > 0:
                stats[association_type.value] = count
        stats["inherited"] = len(self.get_inherited())
        stats["total"] = len(self.associations)
        return stats
