"""
Graph module - association extraction and inheritance deduplication.

This module builds the association graph between declared types,
merging reciprocal references and dropping edges an ancestor already
carries.
"""

from .relationships import (
    AssociationType,
    AssociationEnd,
    MemberAssociation,
    AssociationMap,
    association_key,
    MANY
)

from .heritage import HeritageGraph

from .extractor import (
    AssociationExtractor,
    get_multiplicity
)

from .inheritance import (
    InheritanceReconciler
)

from .dedup import deduplicate_associations

from .pipeline import (
    AssociationGraphBuilder,
    parse_associations
)

__all__ = [
    # Relationships
    "AssociationType",
    "AssociationEnd",
    "MemberAssociation",
    "AssociationMap",
    "association_key",
    "MANY",
    # Heritage
    "HeritageGraph",
    # Extractor
    "AssociationExtractor",
    "get_multiplicity",
    # Inheritance
    "InheritanceReconciler",
    # Dedup
    "deduplicate_associations",
    # Pipeline
    "AssociationGraphBuilder",
    "parse_associations",
]
