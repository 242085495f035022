import logging
import time
from typing import List, Optional, Tuple

from ..errors import NamingStrategyError
from ..naming import NamingStrategy, get_naming_strategy
from ..schema.models import ForeignKey, SchemaFacts
from .classifier import Cardinality, classify, is_composite
from .junction_detector import ReferencedByIndex, build_referenced_by_index, is_junction_table
from .models import Relationship, RelationshipRegistry

logger = logging.getLogger(__name__)

class RelationshipBuilder:
    """
        Infers every Eloquent relationship of a schema.
        
        Two phases: first the registry and the reverse reference index are built
        from the foreign keys of all tables, then each table is classified on its
        own. Both ends of a relationship are created before either is stored, so
        a skipped key never leaves half a relationship behind.
    """
    def __init__(self, naming_strategy: NamingStrategy):
        if not isinstance(naming_strategy, NamingStrategy):
            raise NamingStrategyError(
                f"Expected a NamingStrategy instance, got {type(naming_strategy).__name__}"
            )
        self.naming_strategy = naming_strategy
        
    def build(self, schema: SchemaFacts) -> RelationshipRegistry:
        """Build a fully populated registry. Pure function of ``schema``."""
        start_time = time.time()
        table_names = schema.table_names()
        
        # PHASE 1: global knowledge
        logger.info(f"PHASE 1: Indexing {len(table_names)} tables")
        registry = RelationshipRegistry.create_empty(table_names)
        referenced_by = build_referenced_by_index(table_names, schema.all_foreign_keys())
        
        # PHASE 2: per-table classification
        logger.info("PHASE 2: Classifying foreign keys")
        skipped: List[ForeignKey] = []
        pivot_tables: List[str] = []
        
        for table_name in table_names:
            is_pivot = self._parse_table(schema, table_name, registry, referenced_by, skipped)
            if is_pivot:
                pivot_tables.append(table_name)
                
        duration = time.time() - start_time
        logger.info(
            f"Relationship inference complete in {duration:.2f}s: "
            f"{registry.total_relationships()} relationships, "
            f"{len(pivot_tables)} pivot tables, {len(skipped)} foreign keys skipped"
        )
        if pivot_tables:
            logger.info(f"Pivot tables: {', '.join(pivot_tables)}")
        
        return registry
    
    def _parse_table(
        self,
        schema: SchemaFacts,
        table_name: str,
        registry: RelationshipRegistry,
        referenced_by: ReferencedByIndex,
        skipped: List[ForeignKey]
    ) -> bool:
        foreign_keys = schema.foreign_keys(table_name)
        primary_keys = schema.primary_keys(table_name)
        
        is_pivot = is_junction_table(table_name, foreign_keys, primary_keys, referenced_by)
        if is_pivot:
            self._add_many_to_many(schema, table_name, foreign_keys[0], foreign_keys[1], registry)
        
        # pivots keep their plain belongsTo / hasMany relations as well
        for foreign_key in foreign_keys:
            if is_composite(foreign_key):
                logger.debug(
                    f"Skipping composite foreign key {foreign_key.constraint_name} on '{table_name}' "
                    f"({', '.join(foreign_key.local_columns)})"
                )
                skipped.append(foreign_key)
                continue
            
            if not schema.has_table(foreign_key.referenced_table):
                logger.debug(
                    f"Skipping foreign key {table_name}.{foreign_key.local_column}: "
                    f"'{foreign_key.referenced_table}' is not part of this run"
                )
                skipped.append(foreign_key)
                continue
            
            cardinality = classify(foreign_key, primary_keys)
            parent_side, child_side = self._one_to_x_pair(foreign_key, cardinality)
            
            registry.add(foreign_key.referenced_table, parent_side)
            registry.add(table_name, child_side)
        
        return is_pivot
    
    def _one_to_x_pair(self, foreign_key: ForeignKey, cardinality: Cardinality) -> Tuple[Relationship, Relationship]:
        """(hasOne|hasMany on the parent, belongsTo on the child)."""
        naming = self.naming_strategy
        parent_table = foreign_key.referenced_table
        child_table = foreign_key.table_name
        
        if cardinality == Cardinality.ONE_TO_ONE:
            parent_side = Relationship.has_one(
                accessor_name=naming.has_one_function_name(foreign_key),
                target_model=naming.model_name_from_table(child_table),
                target_table=child_table,
                foreign_column=foreign_key.local_column,
                local_column=foreign_key.referenced_column
            )
        else:
            parent_side = Relationship.has_many(
                accessor_name=naming.has_many_function_name(foreign_key),
                target_model=naming.model_name_from_table(child_table),
                target_table=child_table,
                foreign_column=foreign_key.local_column,
                local_column=foreign_key.referenced_column
            )
            
        child_side = Relationship.belongs_to(
            accessor_name=naming.belongs_to_function_name(foreign_key),
            target_model=naming.model_name_from_table(parent_table),
            target_table=parent_table,
            local_column=foreign_key.local_column,
            target_column=foreign_key.referenced_column
        )
        return parent_side, child_side
    
    def _add_many_to_many(
        self,
        schema: SchemaFacts,
        pivot_table: str,
        first: ForeignKey,
        second: ForeignKey,
        registry: RelationshipRegistry
    ):
        # first belongsToMany second, second belongsToMany first
        if is_composite(first) or is_composite(second):
            logger.debug(f"Skipping pivot '{pivot_table}': composite foreign keys are not supported")
            return
        
        if not (schema.has_table(first.referenced_table) and schema.has_table(second.referenced_table)):
            logger.debug(f"Skipping pivot '{pivot_table}': it joins a table that is not part of this run")
            return
        
        first_side = self._belongs_to_many(first, second)
        second_side = self._belongs_to_many(second, first)
        
        registry.add(first.referenced_table, first_side)
        registry.add(second.referenced_table, second_side)
        
    def _belongs_to_many(self, owner: ForeignKey, related: ForeignKey) -> Relationship:
        naming = self.naming_strategy
        return Relationship.belongs_to_many(
            accessor_name=naming.belongs_to_many_function_name(owner, related),
            target_model=naming.model_name_from_table(related.referenced_table),
            target_table=related.referenced_table,
            pivot_table=owner.table_name,
            owner_pivot_column=owner.local_column,
            related_pivot_column=related.local_column
        )


def build_relationships(schema: SchemaFacts, naming_strategy: Optional[NamingStrategy] = None) -> RelationshipRegistry:
    """Shortcut: build a registry with the given (or default) naming strategy."""
    return RelationshipBuilder(get_naming_strategy(naming_strategy)).build(schema)
