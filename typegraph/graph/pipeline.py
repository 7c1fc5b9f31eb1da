"""
Relationship graph builder.

Runs the whole association pipeline over the front end's declarations:

    catalog -> extraction -> inheritance reconciliation -> dedup

Every invocation starts from fresh state; nothing is kept between runs.
"""

from typing import Dict, List, Optional

from typegraph.core.catalog import TypeCatalog, build_type_catalog
from typegraph.core.entities import FileDeclaration
from .extractor import AssociationExtractor
from .heritage import HeritageGraph
from .inheritance import InheritanceReconciler
from .dedup import deduplicate_associations
from .relationships import AssociationMap


class AssociationGraphBuilder:
    """
    Builds the deduplicated association graph for a set of files.

    Attributes:
        declarations: Files as delivered by the front end; their
            ``member_associations`` slots are filled in place
        catalog: Lookup table of every declared type
        heritage: Inheritance DAG between catalog types
        associations: Working edge set, including inherited edges
    """

    def __init__(self, declarations: List[FileDeclaration], verbose: bool = False):
        self.declarations = declarations
        self.verbose = verbose
        self.catalog: TypeCatalog = build_type_catalog(declarations)
        self.heritage: HeritageGraph = HeritageGraph.from_catalog(self.catalog)
        self.associations = AssociationMap()
        self.stats: Dict[str, int] = {}

    def build(self) -> AssociationMap:
        """Run every stage and return the working edge set."""
        if self.verbose:
            print(f"[*] Building associations for {len(self.catalog)} types "
                  f"in {len(self.declarations)} files...")

        extractor = AssociationExtractor(self.catalog, self.associations, verbose=self.verbose)
        extractor.extract_all(self.declarations)

        reconciler = InheritanceReconciler(self.catalog, self.associations,
                                           heritage=self.heritage, verbose=self.verbose)
        inherited = reconciler.reconcile()

        removed = deduplicate_associations(self.declarations)

        self.stats = {
            "types": len(self.catalog),
            "associations": len(self.associations),
            "inherited": inherited,
            "removed": removed,
        }
        if self.verbose:
            print(f"[INFO] {self.stats['associations']} associations, "
                  f"{inherited} inherited")

        return self.associations


def parse_associations(declarations: List[FileDeclaration],
                       verbose: Optional[bool] = False) -> AssociationMap:
    """
    Fill every file's ``member_associations`` with its final association list.

    Args:
        declarations: List of FileDeclaration objects
        verbose: Print progress and per-edge trace lines

    Returns:
        The working AssociationMap (inherited edges still included)
    """
    return AssociationGraphBuilder(declarations, verbose=bool(verbose)).build()
