"""
Loading front-end output into declaration models.

The source-analysis front end writes one JSON document per run. Keys
may be camelCase (as emitted by the TypeScript front end) or
snake_case (as emitted by ``FileDeclaration.to_dict``).
"""

import json
import os
from typing import Any, Dict, List, Optional, Union

from .entities import (
    Modifier, HeritageKind, PropertyDetails, MethodDetails, HeritageClause,
    ClassEntity, InterfaceEntity, TypeAliasEntity, EnumEntity,
    FileDeclaration
)


class DeclarationFormatError(ValueError):
    """Raised when a declaration document does not have the expected shape."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


# Heritage kinds as the TypeScript enum serializes them
_HERITAGE_BY_INDEX = {0: HeritageKind.EXTENDS, 1: HeritageKind.IMPLEMENTS}


def _pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the value of the first key present in ``data``."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _require(data: Dict[str, Any], path: str, *keys: str) -> Any:
    value = _pick(data, *keys)
    if value is None:
        raise DeclarationFormatError(path, f"missing required key '{keys[0]}'")
    return value


def _as_object(data: Any, path: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DeclarationFormatError(path, f"expected an object, got {type(data).__name__}")
    return data


def _as_list(data: Any, path: str) -> List[Any]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise DeclarationFormatError(path, f"expected a list, got {type(data).__name__}")
    return data


def _as_str_list(data: Any, path: str) -> List[str]:
    items = _as_list(data, path)
    for i, item in enumerate(items):
        if not isinstance(item, str):
            raise DeclarationFormatError(f"{path}[{i}]",
                                         f"expected a string, got {type(item).__name__}")
    return list(items)


def _require_str(data: Dict[str, Any], path: str, *keys: str) -> str:
    value = _require(data, path, *keys)
    if not isinstance(value, str):
        raise DeclarationFormatError(path, f"key '{keys[0]}' must be a string, "
                                           f"got {type(value).__name__}")
    return value


def _parse_modifiers(data: Dict[str, Any], path: str) -> Modifier:
    names = _as_str_list(data.get("modifiers", []), f"{path}.modifiers")
    try:
        return Modifier.from_names(names)
    except KeyError as e:
        raise DeclarationFormatError(f"{path}.modifiers", f"unknown modifier {e}") from e


def _parse_property(data: Any, path: str) -> PropertyDetails:
    data = _as_object(data, path)
    return PropertyDetails(
        name=_require(data, path, "name"),
        type_text=_pick(data, "type", "type_text"),
        type_ids=_as_str_list(_pick(data, "typeIds", "type_ids"), f"{path}.typeIds"),
        optional=bool(data.get("optional", False)),
        modifiers=_parse_modifiers(data, path)
    )


def _parse_method(data: Any, path: str) -> MethodDetails:
    data = _as_object(data, path)
    return MethodDetails(
        name=_require(data, path, "name"),
        return_type=_pick(data, "returnType", "return_type"),
        uses=_as_str_list(data.get("uses"), f"{path}.uses"),
        modifiers=_parse_modifiers(data, path)
    )


def _parse_heritage_kind(raw: Any, path: str) -> HeritageKind:
    if isinstance(raw, int) and raw in _HERITAGE_BY_INDEX:
        return _HERITAGE_BY_INDEX[raw]
    try:
        return HeritageKind(str(raw).lower())
    except ValueError as e:
        raise DeclarationFormatError(path, f"unknown heritage kind '{raw}'") from e


def _parse_heritage(data: Any, path: str, owner_id: str, owner_name: str) -> HeritageClause:
    data = _as_object(data, path)
    return HeritageClause(
        source_id=_pick(data, "classTypeId", "source_id", default=owner_id),
        source_name=_pick(data, "className", "source_name", default=owner_name),
        target_id=_require_str(data, path, "clauseTypeId", "target_id"),
        target_name=_pick(data, "clause", "target_name", default=""),
        kind=_parse_heritage_kind(_pick(data, "type", "kind", default="extends"), f"{path}.type")
    )


def _parse_membered(data: Any, path: str, cls):
    data = _as_object(data, path)
    type_id = _require_str(data, path, "id")
    name = _require(data, path, "name")
    return cls(
        id=type_id,
        name=name,
        properties=[_parse_property(p, f"{path}.properties[{i}]")
                    for i, p in enumerate(_as_list(data.get("properties"), f"{path}.properties"))],
        methods=[_parse_method(m, f"{path}.methods[{i}]")
                 for i, m in enumerate(_as_list(data.get("methods"), f"{path}.methods"))],
        heritage_clauses=[
            _parse_heritage(h, f"{path}.heritageClauses[{i}]", type_id, name)
            for i, h in enumerate(_as_list(_pick(data, "heritageClauses", "heritage_clauses"),
                                           f"{path}.heritageClauses"))
        ]
    )


def _parse_enum(data: Any, path: str) -> EnumEntity:
    data = _as_object(data, path)
    return EnumEntity(
        id=_require_str(data, path, "id"),
        name=_require(data, path, "name"),
        items=list(_as_list(_pick(data, "items", "enumItems"), f"{path}.items"))
    )


def file_declaration_from_dict(data: Any, path: str = "files[0]") -> FileDeclaration:
    """Convert one decoded file object into a FileDeclaration."""
    data = _as_object(data, path)

    def section(key: str):
        return enumerate(_as_list(data.get(key), f"{path}.{key}"))

    return FileDeclaration(
        file_name=_require(data, path, "fileName", "file_name"),
        classes=[_parse_membered(c, f"{path}.classes[{i}]", ClassEntity)
                 for i, c in section("classes")],
        interfaces=[_parse_membered(c, f"{path}.interfaces[{i}]", InterfaceEntity)
                    for i, c in section("interfaces")],
        enums=[_parse_enum(e, f"{path}.enums[{i}]") for i, e in section("enums")],
        types=[_parse_membered(t, f"{path}.types[{i}]", TypeAliasEntity)
               for i, t in section("types")]
    )


def declarations_from_json(data: Union[Dict[str, Any], List[Any]]) -> List[FileDeclaration]:
    """
    Convert a decoded declaration document into FileDeclaration objects.

    Args:
        data: Either ``{"files": [...]}`` or a bare list of file objects

    Returns:
        List of FileDeclaration, in document order

    Raises:
        DeclarationFormatError: If the document does not have the expected shape
    """
    if isinstance(data, dict):
        files = _as_list(_require(data, "$", "files"), "files")
    else:
        files = _as_list(data, "$")

    return [file_declaration_from_dict(f, f"files[{i}]") for i, f in enumerate(files)]


def load_declarations(path: str, encoding: Optional[str] = "utf-8") -> List[FileDeclaration]:
    """Read a declaration document from disk."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Declaration file not found: {path}")

    with open(path, "r", encoding=encoding) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DeclarationFormatError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

    return declarations_from_json(data)
