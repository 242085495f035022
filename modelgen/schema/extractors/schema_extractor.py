import logging
from typing import Iterable, List, Optional

from ..models import SchemaFacts, Table
from .table_extractor import TableExtractor
from .column_extractor import ColumnExtractor
from .foreign_key_extractor import ForeignKeyExtractor

logger = logging.getLogger(__name__)

class SchemaExtractor:
    """Orchestrates all extraction operations."""
    
    def __init__(self, connection, excluded_tables: Optional[Iterable[str]] = None):
        self.conn = connection
        self.excluded_tables = set(excluded_tables or [])
        self.table_extractor = TableExtractor(connection)
        self.column_extractor = ColumnExtractor(connection)
        self.foreign_key_extractor = ForeignKeyExtractor(connection)
        
    def extract_schema(self, schema_name: str = "public", tables: Optional[Iterable[str]] = None) -> SchemaFacts:
        """
            Extract tables, columns, primary keys and foreign keys of a schema.
            When ``tables`` is given only those tables are read; foreign keys
            pointing outside the selection are kept as they are.
            
            Every table is read before anything else happens, so the result can
            be used to build global indexes (who references whom).
        """
        logger.info(f"Starting schema extraction for schema '{schema_name}'")
        
        # Step 1: Extract table names
        wanted = set(tables) if tables is not None else None
        table_names = [
            name for name in self.table_extractor.extract_tables(schema_name)
            if name not in self.excluded_tables and (wanted is None or name in wanted)
        ]
        
        # Step 2: Columns, primary keys and foreign keys per table
        extracted: List[Table] = []
        foreign_key_count = 0
        for table_name in table_names:
            columns = self.column_extractor.extract_columns(table_name, schema_name)
            primary_keys = self.column_extractor.extract_primary_keys(table_name, schema_name)
            foreign_keys = self.foreign_key_extractor.extract_foreign_keys(table_name, schema_name)
            foreign_key_count += len(foreign_keys)
            
            extracted.append(Table(
                table_name=table_name,
                schema_name=schema_name,
                columns=columns,
                primary_keys=primary_keys,
                foreign_keys=foreign_keys
            ))
        
        logger.info(
            f"Schema extraction complete: {len(extracted)} tables, "
            f"{foreign_key_count} foreign keys"
        )
        
        return SchemaFacts.from_tables(extracted, schema_name=schema_name)
