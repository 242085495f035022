from enum import Enum
from typing import Optional
from pydantic import BaseModel


class RelationshipKind(str, Enum):
    """Eloquent relationship kinds; values are the Eloquent method names."""
    BELONGS_TO = "belongsTo"
    HAS_ONE = "hasOne"
    HAS_MANY = "hasMany"
    BELONGS_TO_MANY = "belongsToMany"


class Relationship(BaseModel):
    """
        One relationship accessor on one model.
        
        Key fields depend on the kind:
        - belongsTo: local_column (FK on this table), target_column (owner key on the parent)
        - hasOne / hasMany: foreign_column (FK on the child), local_column (key on this table)
        - belongsToMany: pivot_table, owner_pivot_column, related_pivot_column
    """
    kind: RelationshipKind
    accessor_name: str
    target_model: str
    target_table: str
    local_column: Optional[str] = None
    target_column: Optional[str] = None
    foreign_column: Optional[str] = None
    pivot_table: Optional[str] = None
    owner_pivot_column: Optional[str] = None
    related_pivot_column: Optional[str] = None
    
    class Config:
        frozen = True

    @classmethod
    def belongs_to(cls, accessor_name: str, target_model: str, target_table: str,
                   local_column: str, target_column: str) -> "Relationship":
        return cls(
            kind=RelationshipKind.BELONGS_TO,
            accessor_name=accessor_name,
            target_model=target_model,
            target_table=target_table,
            local_column=local_column,
            target_column=target_column
        )

    @classmethod
    def has_one(cls, accessor_name: str, target_model: str, target_table: str,
                foreign_column: str, local_column: str) -> "Relationship":
        return cls(
            kind=RelationshipKind.HAS_ONE,
            accessor_name=accessor_name,
            target_model=target_model,
            target_table=target_table,
            foreign_column=foreign_column,
            local_column=local_column
        )

    @classmethod
    def has_many(cls, accessor_name: str, target_model: str, target_table: str,
                 foreign_column: str, local_column: str) -> "Relationship":
        return cls(
            kind=RelationshipKind.HAS_MANY,
            accessor_name=accessor_name,
            target_model=target_model,
            target_table=target_table,
            foreign_column=foreign_column,
            local_column=local_column
        )

    @classmethod
    def belongs_to_many(cls, accessor_name: str, target_model: str, target_table: str,
                        pivot_table: str, owner_pivot_column: str,
                        related_pivot_column: str) -> "Relationship":
        return cls(
            kind=RelationshipKind.BELONGS_TO_MANY,
            accessor_name=accessor_name,
            target_model=target_model,
            target_table=target_table,
            pivot_table=pivot_table,
            owner_pivot_column=owner_pivot_column,
            related_pivot_column=related_pivot_column
        )

    def with_accessor_name(self, accessor_name: str) -> "Relationship":
        return self.model_copy(update={"accessor_name": accessor_name})
