import logging
from typing import List
from psycopg2.extras import RealDictCursor

from ..models import Column, PrimaryKeyColumn

logger = logging.getLogger(__name__)

class ColumnExtractor:
    """
        Extracts column and primary key metadata from PostgreSQL information_schema.
    """
    def __init__(self, connection):
        self.conn = connection
        
    def extract_columns(self, table_name: str, schema_name: str = "public") -> List[Column]:
        """
            Extract all columns for a table, in ordinal order.
        """
        logger.debug(f"Extracting columns for table '{table_name}'")
        
        query = """
            SELECT 
                column_name,
                data_type,
                is_nullable,
                ordinal_position
            FROM information_schema.columns
            WHERE table_schema = %s AND table_name = %s
            ORDER BY ordinal_position
        """
        
        with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(query, (schema_name, table_name))
            rows = cur.fetchall()
            
        columns = [
            Column(
                column_name=row['column_name'],
                data_type=row['data_type'],
                is_nullable=row['is_nullable'] == 'YES',
                column_position=row['ordinal_position']
            )
            for row in rows
        ]
        
        logger.debug(f"Extracted {len(columns)} columns for '{table_name}'")
        return columns
        
    def extract_primary_keys(self, table_name: str, schema_name: str = "public") -> List[PrimaryKeyColumn]:
        """
            Get primary key columns together with the name of their constraint.
        """
        
        query = """
            SELECT
                kcu.column_name,
                tc.constraint_name
            FROM information_schema.table_constraints tc
            JOIN information_schema.key_column_usage kcu 
                ON tc.constraint_name = kcu.constraint_name
                AND tc.table_schema = kcu.table_schema
                AND tc.table_name = kcu.table_name
            WHERE tc.table_schema = %s 
                AND tc.table_name = %s
                AND tc.constraint_type = 'PRIMARY KEY'
            ORDER BY kcu.ordinal_position
        """
        
        with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(query, (schema_name, table_name))
            rows = cur.fetchall()
            
        return [
            PrimaryKeyColumn(column_name=row['column_name'], constraint_name=row['constraint_name'])
            for row in rows
        ]
