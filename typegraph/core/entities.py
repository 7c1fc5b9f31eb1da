"""
Declared-type models consumed by the relationship graph builder.

This module defines the dataclasses the source-analysis front end
hands over: classes, interfaces, type aliases and enums, their
members, and the heritage clauses linking them.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Union, TYPE_CHECKING
from enum import Enum, IntFlag

if TYPE_CHECKING:
    from typegraph.graph.relationships import MemberAssociation


class TypeKind(Enum):
    """Kinds of declared types found in a source file."""
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    TYPE_ALIAS = "type"


class Modifier(IntFlag):
    """Modifier flags carried by a property or method."""
    NONE = 0
    PUBLIC = 1
    PRIVATE = 2
    PROTECTED = 4
    STATIC = 8
    ABSTRACT = 16
    READONLY = 32

    @classmethod
    def from_names(cls, names: List[str]) -> "Modifier":
        flags = cls.NONE
        for name in names:
            flags |= cls[name.upper()]
        return flags

    def to_names(self) -> List[str]:
        return [m.name.lower() for m in Modifier if m.value and m in self]


class HeritageKind(Enum):
    """Direction-less label of an inheritance edge."""
    EXTENDS = "extends"
    IMPLEMENTS = "implements"


@dataclass
class PropertyDetails:
    """A property (or parameter property) of a class, interface or type."""
    name: str
    type_text: Optional[str] = None     # "Item[]", "A | B"
    type_ids: List[str] = field(default_factory=list)
    optional: bool = False
    modifiers: Modifier = Modifier.NONE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type_text,
            "type_ids": self.type_ids,
            "optional": self.optional,
            "modifiers": self.modifiers.to_names()
        }


@dataclass
class MethodDetails:
    """A method signature. ``uses`` holds the ids found in its return type."""
    name: str
    return_type: Optional[str] = None
    uses: List[str] = field(default_factory=list)
    modifiers: Modifier = Modifier.NONE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "return_type": self.return_type,
            "uses": self.uses,
            "modifiers": self.modifiers.to_names()
        }


@dataclass
class HeritageClause:
    """
    One edge of the inheritance DAG, directed from subtype to supertype.

    Attributes:
        source_id: Id of the declaring (sub)type
        source_name: Display name of the declaring type
        target_id: Id of the base class or implemented interface
        target_name: Display name of the base type as written
        kind: EXTENDS or IMPLEMENTS
    """
    source_id: str
    source_name: str
    target_id: str
    target_name: str
    kind: HeritageKind = HeritageKind.EXTENDS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_id": self.source_id,
            "source_name": self.source_name,
            "target_id": self.target_id,
            "target_name": self.target_name,
            "kind": self.kind.value
        }


@dataclass
class NamedType:
    """Fields shared by every declared type."""
    id: str
    name: str

    kind = None  # set by each concrete variant

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "id": self.id,
            "name": self.name
        }


@dataclass
class MemberedType(NamedType):
    """
    A declared type that has members and may have supertypes.

    Classes, interfaces and type aliases share this shape. Type aliases
    never carry heritage clauses.
    """
    properties: List[PropertyDetails] = field(default_factory=list)
    methods: List[MethodDetails] = field(default_factory=list)
    heritage_clauses: List[HeritageClause] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "properties": [p.to_dict() for p in self.properties],
            "methods": [m.to_dict() for m in self.methods],
            "heritage_clauses": [h.to_dict() for h in self.heritage_clauses]
        })
        return data


@dataclass
class ClassEntity(MemberedType):
    kind = TypeKind.CLASS


@dataclass
class InterfaceEntity(MemberedType):
    kind = TypeKind.INTERFACE


@dataclass
class TypeAliasEntity(MemberedType):
    kind = TypeKind.TYPE_ALIAS

    def __post_init__(self):
        self.heritage_clauses = []


@dataclass
class EnumEntity(NamedType):
    items: List[str] = field(default_factory=list)

    kind = TypeKind.ENUM

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["items"] = self.items
        return data


TypeEntity = Union[ClassEntity, InterfaceEntity, TypeAliasEntity, EnumEntity]


@dataclass
class FileDeclaration:
    """
    Every type declared in one source file, in declaration order.

    ``member_associations`` starts empty and is filled by the
    relationship graph builder.
    """
    file_name: str
    classes: List[ClassEntity] = field(default_factory=list)
    interfaces: List[InterfaceEntity] = field(default_factory=list)
    enums: List[EnumEntity] = field(default_factory=list)
    types: List[TypeAliasEntity] = field(default_factory=list)
    member_associations: List["MemberAssociation"] = field(default_factory=list)

    def membered_types(self) -> List[MemberedType]:
        """Classes, then interfaces, then type aliases."""
        return [*self.classes, *self.interfaces, *self.types]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_name": self.file_name,
            "classes": [c.to_dict() for c in self.classes],
            "interfaces": [i.to_dict() for i in self.interfaces],
            "enums": [e.to_dict() for e in self.enums],
            "types": [t.to_dict() for t in self.types],
            "member_associations": [a.to_dict() for a in self.member_associations]
        }
