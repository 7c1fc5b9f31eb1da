"""
nomnoml templates for declared types and their relationships.

Each method returns one line of nomnoml DSL.
"""

import re
from typing import List

from typegraph.config import DiagramSettings
from typegraph.core.entities import Modifier, PropertyDetails, MethodDetails
from typegraph.graph.relationships import AssociationType, MemberAssociation


_SPECIAL_CHARS = re.compile(r"[|\]\[#]")


def escape_nomnoml(text: str) -> str:
    """Escape characters nomnoml treats as syntax."""
    return _SPECIAL_CHARS.sub(lambda m: "\\" + m.group(0), text)


class NomnomlTemplate:
    """Renders entities, heritage and associations as nomnoml DSL."""

    def __init__(self, settings: DiagramSettings):
        self.settings = settings

    def implements(self, interface: str, implementation: str) -> str:
        return f"{self.plain(interface)}<:--{self.plain(implementation)}"

    def extends(self, base: str, derived: str) -> str:
        return f"{self.plain(base)}<:-{self.plain(derived)}"

    def plain(self, name: str) -> str:
        return f"[{name}]"

    def class_(self, name: str, props: List[PropertyDetails], methods: List[MethodDetails]) -> str:
        return f"[{name}|{self._members(props, methods)}]"

    def interface(self, name: str, props: List[PropertyDetails], methods: List[MethodDetails]) -> str:
        return f"[<interface>{name}|{self._members(props, methods)}]"

    def type_alias(self, name: str, props: List[PropertyDetails], methods: List[MethodDetails]) -> str:
        return f"[<type>{name}|{self._members(props, methods)}]"

    def enum(self, name: str, items: List[str]) -> str:
        return f"[<enumeration>{name}|{';'.join(items)}]"

    def member_association(self, association: MemberAssociation) -> str:
        arrow = "-" if association.association_type == AssociationType.ASSOCIATION else "--"
        parts = [
            self.plain(association.a.name),
            association.a.multiplicity or "",
            arrow,
            association.b.multiplicity or "",
            self.plain(association.b.name),
        ]
        return " ".join(parts)

    def _members(self, props: List[PropertyDetails], methods: List[MethodDetails]) -> str:
        return (";".join(self._property(p) for p in props) + "|" +
                ";".join(self._method(m) for m in methods))

    def _method(self, method: MethodDetails) -> str:
        text = method.name + "()"
        if method.return_type and self.settings.property_types:
            text += ": " + escape_nomnoml(method.return_type)
        return self._modifier(method.modifiers) + text

    def _property(self, prop: PropertyDetails) -> str:
        text = escape_nomnoml(prop.name)
        if prop.type_text and self.settings.property_types:
            if prop.optional:
                text += "?"
            text += ": " + escape_nomnoml(prop.type_text)
        return self._modifier(prop.modifiers) + text

    def _modifier(self, modifiers: Modifier) -> str:
        if not self.settings.modifiers:
            return ""

        # UML underlines static members; nomnoml cannot
        prefix = ""
        if modifiers & Modifier.STATIC:
            prefix = "static "
        if modifiers & Modifier.ABSTRACT:
            prefix = "abstract "

        if modifiers & Modifier.PRIVATE:
            return "-" + prefix
        if modifiers & Modifier.PROTECTED:
            return "\\#" + prefix
        return "+" + prefix
