from typing import Dict, List, Set
from pydantic import BaseModel, Field, PrivateAttr

from .relationship import Relationship, RelationshipKind


class TableRelationships(BaseModel):
    """
        The relationships of one table, one ordered list per kind.
        
        Lists are append-only; insertion order is discovery order. Accessor
        names are made unique per table as relationships are added.
    """
    table_name: str
    relations: Dict[RelationshipKind, List[Relationship]] = Field(
        default_factory=lambda: {kind: [] for kind in RelationshipKind}
    )
    
    _used_names: Set[str] = PrivateAttr(default_factory=set)
    
    def add(self, relationship: Relationship) -> Relationship:
        """
            Append a relationship, renaming its accessor to `name2`, `name3`, ...
            when the name is already taken on this table. Returns what was stored.
        """
        accessor_name = self.unique_accessor_name(relationship.accessor_name)
        if accessor_name != relationship.accessor_name:
            relationship = relationship.with_accessor_name(accessor_name)
        
        self._used_names.add(accessor_name)
        self.relations[relationship.kind].append(relationship)
        return relationship
    
    def unique_accessor_name(self, accessor_name: str) -> str:
        if accessor_name not in self._used_names:
            return accessor_name
        
        counter = 1
        while True:
            counter += 1
            candidate = f"{accessor_name}{counter}"
            if candidate not in self._used_names:
                return candidate
    
    def has_any(self) -> bool:
        return any(self.relations[kind] for kind in RelationshipKind)
    
    @property
    def belongs_to(self) -> List[Relationship]:
        return list(self.relations[RelationshipKind.BELONGS_TO])
    
    @property
    def has_one(self) -> List[Relationship]:
        return list(self.relations[RelationshipKind.HAS_ONE])
    
    @property
    def has_many(self) -> List[Relationship]:
        return list(self.relations[RelationshipKind.HAS_MANY])
    
    @property
    def belongs_to_many(self) -> List[Relationship]:
        return list(self.relations[RelationshipKind.BELONGS_TO_MANY])
    
    def all(self) -> List[Relationship]:
        """All relationships, grouped by kind in emission order."""
        return [rel for kind in RelationshipKind for rel in self.relations[kind]]
    
    def accessor_names(self) -> List[str]:
        return [rel.accessor_name for rel in self.all()]
    
    def count(self) -> int:
        return sum(len(self.relations[kind]) for kind in RelationshipKind)
