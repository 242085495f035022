from .relationship import Relationship, RelationshipKind
from .table_relationships import TableRelationships
from .registry import RelationshipRegistry

__all__ = ["Relationship", "RelationshipKind", "TableRelationships", "RelationshipRegistry"]
