from .classifier import Cardinality, classify, is_composite
from .junction_detector import build_referenced_by_index, is_junction_table
from .builder import RelationshipBuilder, build_relationships
from .models import Relationship, RelationshipKind, RelationshipRegistry, TableRelationships

__all__ = [
    "Cardinality",
    "classify",
    "is_composite",
    "build_referenced_by_index",
    "is_junction_table",
    "RelationshipBuilder",
    "build_relationships",
    "Relationship",
    "RelationshipKind",
    "RelationshipRegistry",
    "TableRelationships",
]
