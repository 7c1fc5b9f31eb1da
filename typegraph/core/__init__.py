"""
Core module - declared-type models, catalog and loading.
"""

from .entities import (
    TypeKind,
    Modifier,
    HeritageKind,
    PropertyDetails,
    MethodDetails,
    HeritageClause,
    NamedType,
    MemberedType,
    ClassEntity,
    InterfaceEntity,
    TypeAliasEntity,
    EnumEntity,
    TypeEntity,
    FileDeclaration
)

from .catalog import (
    TypeCatalog,
    build_type_catalog
)

from .loader import (
    DeclarationFormatError,
    declarations_from_json,
    file_declaration_from_dict,
    load_declarations
)

__all__ = [
    # Entities
    "TypeKind",
    "Modifier",
    "HeritageKind",
    "PropertyDetails",
    "MethodDetails",
    "HeritageClause",
    "NamedType",
    "MemberedType",
    "ClassEntity",
    "InterfaceEntity",
    "TypeAliasEntity",
    "EnumEntity",
    "TypeEntity",
    "FileDeclaration",
    # Catalog
    "TypeCatalog",
    "build_type_catalog",
    # Loader
    "DeclarationFormatError",
    "declarations_from_json",
    "file_declaration_from_dict",
    "load_declarations",
]
