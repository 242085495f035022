import logging
from typing import Dict, List
from psycopg2.extras import RealDictCursor

from ..models import ForeignKey

logger = logging.getLogger(__name__)

class ForeignKeyExtractor:
    """
        Extracts foreign key constraints from PostgreSQL.
        
        Rows are grouped per constraint so that multi-column keys come back as a
        single ForeignKey with parallel column lists.
    """
    
    def __init__(self, connection):
        self.conn = connection
        
    def extract_foreign_keys(self, table_name: str, schema_name: str = "public") -> List[ForeignKey]:
        """Extract all foreign keys declared on one table."""
        
        # constraint names are only unique per table: scope every row by conrelid
        query = """
            SELECT
                con.conname AS constraint_name,
                local_att.attname AS local_column,
                referenced.relname AS referenced_table,
                referenced_att.attname AS referenced_column
            FROM pg_catalog.pg_constraint con
            JOIN pg_catalog.pg_class tbl ON tbl.oid = con.conrelid
            JOIN pg_catalog.pg_namespace nsp ON nsp.oid = tbl.relnamespace
            JOIN pg_catalog.pg_class referenced ON referenced.oid = con.confrelid
            CROSS JOIN LATERAL unnest(con.conkey, con.confkey)
                WITH ORDINALITY AS cols(local_attnum, referenced_attnum, ord)
            JOIN pg_catalog.pg_attribute local_att
                ON local_att.attrelid = con.conrelid
                AND local_att.attnum = cols.local_attnum
            JOIN pg_catalog.pg_attribute referenced_att
                ON referenced_att.attrelid = con.confrelid
                AND referenced_att.attnum = cols.referenced_attnum
            WHERE con.contype = 'f'
                AND nsp.nspname = %s
                AND tbl.relname = %s
            ORDER BY con.conname, cols.ord
        """
        
        with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(query, (schema_name, table_name))
            rows = cur.fetchall()
            
        grouped: Dict[str, Dict] = {}
        for row in rows:
            constraint_name = row['constraint_name']
            entry = grouped.setdefault(constraint_name, {
                'referenced_table': row['referenced_table'],
                'local_columns': [],
                'referenced_columns': []
            })
            entry['local_columns'].append(row['local_column'])
            entry['referenced_columns'].append(row['referenced_column'])
            
        foreign_keys = [
            ForeignKey(
                table_name=table_name,
                local_columns=entry['local_columns'],
                referenced_table=entry['referenced_table'],
                referenced_columns=entry['referenced_columns'],
                constraint_name=constraint_name
            )
            for constraint_name, entry in grouped.items()
        ]
        
        logger.debug(f"Extracted {len(foreign_keys)} foreign keys for '{table_name}'")
        return foreign_keys
