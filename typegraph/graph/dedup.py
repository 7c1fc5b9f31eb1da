"""Final per-file association lists, without inherited edges."""

from typing import List

from typegraph.core.entities import FileDeclaration


def deduplicate_associations(declarations: List[FileDeclaration]) -> int:
    """
    Drop inherited associations from every file's output list.

    Only the per-file lists are filtered; the working AssociationMap keeps
    every edge. Order is preserved.

    Returns:
        Number of associations removed across all files
    """
    removed = 0
    for decl in declarations:
        kept = [a for a in decl.member_associations if not a.inherited]
        removed += len(decl.member_associations) - len(kept)
        decl.member_associations = kept
    return removed
