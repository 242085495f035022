from enum import Enum
from typing import Iterable

from ..schema.models import ForeignKey, PrimaryKeyColumn


class Cardinality(str, Enum):
    ONE_TO_ONE = "one-to-one"
    ONE_TO_MANY = "one-to-many"


def is_composite(foreign_key: ForeignKey) -> bool:
    """True when the key spans more than one local or referenced column."""
    return foreign_key.is_composite


def classify(foreign_key: ForeignKey, owner_primary_keys: Iterable[PrimaryKeyColumn]) -> Cardinality:
    """
        Decide whether a foreign key makes its table the child of a one-to-one
        or of a one-to-many relationship.
        
        One-to-one only when the owning table has exactly one primary key column
        and that column is the foreign key's local column. Tables without a
        primary key or with a composite one are always one-to-many children.
        Composite foreign keys fall back to one-to-many as well; callers skip
        them before registering anything.
    """
    if is_composite(foreign_key):
        return Cardinality.ONE_TO_MANY
    
    primary_columns = {pk.column_name for pk in owner_primary_keys}
    if len(primary_columns) != 1:
        return Cardinality.ONE_TO_MANY
    
    if foreign_key.local_column in primary_columns:
        return Cardinality.ONE_TO_ONE
    
    return Cardinality.ONE_TO_MANY
