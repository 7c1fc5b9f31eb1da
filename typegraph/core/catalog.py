"""
Type catalog: one lookup table for every declared type.

References found in members are resolved against this catalog.
Anything it does not know about (primitives, third-party types,
generic type parameters) simply takes no part in the graph.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from .entities import (
    TypeEntity, MemberedType, HeritageClause, FileDeclaration
)


@dataclass
class TypeCatalog:
    """
    Registry of all declared types, keyed by id.

    Provides fast lookup of types by id and by the file declaring them.
    """
    # Full id -> Entity
    types_by_id: Dict[str, TypeEntity] = field(default_factory=dict)

    # File name -> List of entity ids in that file
    ids_by_file: Dict[str, List[str]] = field(default_factory=dict)

    # Ids that were registered more than once
    duplicates: List[str] = field(default_factory=list)

    def register(self, entity: TypeEntity, file_name: Optional[str] = None):
        """Register a type for lookup. A later entity with the same id wins."""
        if entity.id in self.types_by_id:
            print(f"[WARN] Duplicate type id '{entity.id}' "
                  f"({entity.name}); keeping the last declaration")
            self.duplicates.append(entity.id)

        self.types_by_id[entity.id] = entity

        if file_name is not None:
            ids = self.ids_by_file.setdefault(file_name, [])
            if entity.id not in ids:
                ids.append(entity.id)

    def register_all(self, entities: List[TypeEntity], file_name: Optional[str] = None):
        """Register multiple types."""
        for entity in entities:
            self.register(entity, file_name)

    def find_by_id(self, type_id: str) -> Optional[TypeEntity]:
        """Find type by id. None means unresolvable, which is not an error."""
        return self.types_by_id.get(type_id)

    def find_in_file(self, file_name: str) -> List[TypeEntity]:
        """Get every type a file declared, in registration order."""
        return [self.types_by_id[i] for i in self.ids_by_file.get(file_name, [])]

    def heritage_of(self, type_id: str) -> List[HeritageClause]:
        """Direct supertypes of a type. Enums and unknown ids have none."""
        entity = self.types_by_id.get(type_id)
        if isinstance(entity, MemberedType):
            return entity.heritage_clauses
        return []

    def __contains__(self, type_id: str) -> bool:
        return type_id in self.types_by_id

    def __len__(self) -> int:
        return len(self.types_by_id)


def build_type_catalog(declarations: List[FileDeclaration]) -> TypeCatalog:
    """
    Build a catalog from every file's declarations.

    Args:
        declarations: List of FileDeclaration objects from the front end

    Returns:
        TypeCatalog with classes, interfaces, type aliases and enums registered
    """
    catalog = TypeCatalog()

    for decl in declarations:
        catalog.register_all(decl.classes, decl.file_name)
        catalog.register_all(decl.interfaces, decl.file_name)
        catalog.register_all(decl.types, decl.file_name)
        catalog.register_all(decl.enums, decl.file_name)

    return catalog
