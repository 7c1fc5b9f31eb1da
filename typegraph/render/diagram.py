"""
Diagram assembly: declarations in, nomnoml DSL out.
"""

from typing import List, Optional

from typegraph.config import DiagramSettings
from typegraph.core.catalog import TypeCatalog, build_type_catalog
from typegraph.core.entities import FileDeclaration, HeritageKind, MemberedType
from .nomnoml import NomnomlTemplate


def render_file(decl: FileDeclaration, template: NomnomlTemplate,
                catalog: TypeCatalog, member_associations: bool) -> List[str]:
    """Render the boxes, heritage edges and associations of one file."""
    lines = []
    for c in decl.classes:
        lines.append(template.class_(c.name, c.properties, c.methods))
    for i in decl.interfaces:
        lines.append(template.interface(i.name, i.properties, i.methods))
    for t in decl.types:
        lines.append(template.type_alias(t.name, t.properties, t.methods))
    for e in decl.enums:
        lines.append(template.enum(e.name, e.items))

    for entity in decl.membered_types():
        lines.extend(_heritage_lines(entity, template, catalog))

    if member_associations:
        for association in decl.member_associations:
            lines.append(template.member_association(association))

    return lines


def _heritage_lines(entity: MemberedType, template: NomnomlTemplate,
                    catalog: TypeCatalog) -> List[str]:
    lines = []
    for clause in entity.heritage_clauses:
        base = catalog.find_by_id(clause.target_id)
        if base is None:
            continue
        if clause.kind == HeritageKind.IMPLEMENTS:
            lines.append(template.implements(base.name, entity.name))
        else:
            lines.append(template.extends(base.name, entity.name))
    return lines


def render_diagram(declarations: List[FileDeclaration],
                   settings: Optional[DiagramSettings] = None,
                   catalog: Optional[TypeCatalog] = None) -> str:
    """
    Render declarations as a nomnoml document.

    Associations are taken from each file's ``member_associations``, so
    the association pipeline must have run first when they are enabled.
    """
    settings = settings or DiagramSettings()
    template = NomnomlTemplate(settings)
    if catalog is None:
        catalog = build_type_catalog(declarations)

    lines = [d if d.startswith("#") else f"#{d}" for d in settings.nomnoml]
    for decl in declarations:
        lines.extend(render_file(decl, template, catalog, settings.member_associations))

    return "\n".join(lines)
