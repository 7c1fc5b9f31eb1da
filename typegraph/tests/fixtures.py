"""Builders for small declaration sets used across the tests."""

from typing import List, Optional

from typegraph.core.entities import (
    ClassEntity, InterfaceEntity, TypeAliasEntity, EnumEntity, FileDeclaration,
    PropertyDetails, MethodDetails, HeritageClause, HeritageKind
)


def tid(name: str, module: str = "src/model") -> str:
    """Id in the front end's format: quoted module path, then the name."""
    return f'"{module}".{name}'


def prop(name: str, type_name: Optional[str] = None, type_text: Optional[str] = None,
         type_ids: Optional[List[str]] = None) -> PropertyDetails:
    if type_ids is None:
        type_ids = [tid(type_name)] if type_name else []
    return PropertyDetails(name=name, type_text=type_text or type_name, type_ids=type_ids)


def method(name: str, return_name: Optional[str] = None,
           return_type: Optional[str] = None) -> MethodDetails:
    uses = [tid(return_name)] if return_name else []
    return MethodDetails(name=name, return_type=return_type or return_name, uses=uses)


def extends(owner: str, base: str, base_id: Optional[str] = None) -> HeritageClause:
    return HeritageClause(tid(owner), owner, base_id or tid(base), base, HeritageKind.EXTENDS)


def implements(owner: str, interface: str) -> HeritageClause:
    return HeritageClause(tid(owner), owner, tid(interface), interface, HeritageKind.IMPLEMENTS)


def clazz(name: str, properties=(), methods=(), heritage=()) -> ClassEntity:
    return ClassEntity(id=tid(name), name=name, properties=list(properties),
                       methods=list(methods), heritage_clauses=list(heritage))


def interface(name: str, properties=(), methods=(), heritage=()) -> InterfaceEntity:
    return InterfaceEntity(id=tid(name), name=name, properties=list(properties),
                           methods=list(methods), heritage_clauses=list(heritage))


def type_alias(name: str, properties=(), methods=()) -> TypeAliasEntity:
    return TypeAliasEntity(id=tid(name), name=name, properties=list(properties),
                           methods=list(methods))


def enum(name: str, *items: str) -> EnumEntity:
    return EnumEntity(id=tid(name), name=name, items=list(items))


def file_decl(file_name: str = "src/model.ts", classes=(), interfaces=(), enums=(),
              types=()) -> FileDeclaration:
    return FileDeclaration(file_name=file_name, classes=list(classes),
                           interfaces=list(interfaces), enums=list(enums), types=list(types))


def edge_summary(associations) -> set:
    """Order-free view of an edge set for equality checks."""
    return {
        (a.a.type_id, a.b.type_id, a.association_type.value,
         a.a.multiplicity, a.b.multiplicity, a.inherited)
        for a in associations
    }


def _document_class(name: str, properties=(), heritage=()) -> dict:
    return {
        "id": f'"src/model".{name}',
        "name": name,
        "properties": [
            {"name": p.lower(), "type": t, "typeIds": [f'"src/model".{p}']}
            for p, t in properties
        ],
        "methods": [],
        "heritageClauses": [
            {"clause": base, "clauseTypeId": f'"src/model".{base}',
             "className": name, "classTypeId": f'"src/model".{name}', "type": "extends"}
            for base in heritage
        ],
    }


# Front-end document: Derived repeats the Item association of its base
DOCUMENT_FILES = [{
    "fileName": "src/model.ts",
    "classes": [
        _document_class("Base", properties=[("Item", "Item[]")]),
        _document_class("Derived", properties=[("Item", "Item")], heritage=["Base"]),
        _document_class("Item"),
    ],
}]
