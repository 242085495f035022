import logging
from typing import Dict, Iterable, Iterator, List

from ...errors import UnknownTableError
from .relationship import Relationship
from .table_relationships import TableRelationships

logger = logging.getLogger(__name__)

class RelationshipRegistry:
    """
        Per-table relationship lists for a whole schema.
        
        Every known table gets an empty entry at creation, so lookups for valid
        tables never fail. Asking about any other table raises UnknownTableError.
    """
    
    def __init__(self, table_names: Iterable[str]):
        self._relations: Dict[str, TableRelationships] = {
            table_name: TableRelationships(table_name=table_name)
            for table_name in table_names
        }
        
    @classmethod
    def create_empty(cls, table_names: Iterable[str]) -> "RelationshipRegistry":
        return cls(table_names)
    
    def add(self, table_name: str, relationship: Relationship) -> Relationship:
        stored = self.get(table_name).add(relationship)
        logger.debug(
            f"{table_name}: {stored.kind.value} {stored.accessor_name}() -> {stored.target_model}"
        )
        return stored
    
    def get(self, table_name: str) -> TableRelationships:
        self._throw_if_invalid_table(table_name)
        return self._relations[table_name]
    
    def tables(self) -> List[str]:
        return list(self._relations.keys())
    
    def total_relationships(self) -> int:
        return sum(relations.count() for relations in self._relations.values())
    
    def to_dict(self) -> Dict[str, Dict]:
        """Plain-data view, keyed by table then by relationship kind."""
        return {
            table_name: {
                kind.value: [rel.model_dump(mode="json", exclude_none=True) for rel in rels]
                for kind, rels in relations.relations.items()
            }
            for table_name, relations in self._relations.items()
        }
    
    def __contains__(self, table_name: str) -> bool:
        return table_name in self._relations
    
    def __iter__(self) -> Iterator[TableRelationships]:
        return iter(self._relations.values())
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, RelationshipRegistry):
            return NotImplemented
        return self.to_dict() == other.to_dict()
    
    def _throw_if_invalid_table(self, table_name: str):
        if table_name not in self._relations:
            raise UnknownTableError(table_name)
