import logging
from typing import Dict, Iterable, List, Sequence, Set

from ..schema.models import ForeignKey, PrimaryKeyColumn

logger = logging.getLogger(__name__)

ReferencedByIndex = Dict[str, Set[str]]


def build_referenced_by_index(table_names: Iterable[str], foreign_keys: Iterable[ForeignKey]) -> ReferencedByIndex:
    """
        Map every known table to the set of tables holding a foreign key to it.
        
        References to tables outside ``table_names`` are ignored. Must be built
        from the foreign keys of every table before any table is classified.
    """
    index: ReferencedByIndex = {table_name: set() for table_name in table_names}
    
    for foreign_key in foreign_keys:
        if foreign_key.referenced_table in index:
            index[foreign_key.referenced_table].add(foreign_key.table_name)
            
    return index


def is_primary_key_member(foreign_key: ForeignKey, primary_keys: Sequence[PrimaryKeyColumn]) -> bool:
    """
        A foreign key counts as part of the primary key when it shares the
        primary key's constraint name, or when all of its local columns are
        primary key columns.
    """
    primary_constraints = {pk.constraint_name for pk in primary_keys if pk.constraint_name}
    if foreign_key.constraint_name and foreign_key.constraint_name in primary_constraints:
        return True
    
    primary_columns = {pk.column_name for pk in primary_keys}
    return bool(primary_columns) and set(foreign_key.local_columns) <= primary_columns


def is_junction_table(
    table_name: str,
    foreign_keys: List[ForeignKey],
    primary_keys: Sequence[PrimaryKeyColumn],
    referenced_by_index: ReferencedByIndex
) -> bool:
    """
        Does this table look like a pure many-to-many pivot?
        
        1. exactly two foreign keys
        2. both or neither of them are part of the primary key
        3. no table references it
    """
    if len(foreign_keys) != 2:
        return False
    
    primary_key_members = sum(
        1 for foreign_key in foreign_keys if is_primary_key_member(foreign_key, primary_keys)
    )
    if primary_key_members == 1:
        logger.debug(f"'{table_name}' is not a pivot: only one foreign key is part of the primary key")
        return False
    
    referenced_by = referenced_by_index.get(table_name, set())
    if referenced_by:
        logger.debug(f"'{table_name}' is not a pivot: referenced by {sorted(referenced_by)}")
        return False
    
    return True
