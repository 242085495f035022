import logging
from typing import List
from psycopg2.extras import RealDictCursor

logger = logging.getLogger(__name__)

class TableExtractor:
    """
        Extracts table names from PostgreSQL information_schema.
    """
    def __init__(self, connection):
        self.conn = connection
        
    def extract_tables(self, schema_name: str = "public") -> List[str]:
        """
            Extract all base table names from the source database, ordered by name.
        """
        logger.info(f"Extracting tables from schema '{schema_name}'")
        
        query = """
            SELECT table_name
            FROM information_schema.tables
            WHERE table_schema = %s
                AND table_type = 'BASE TABLE'
            ORDER BY table_name
        """
        
        with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(query, (schema_name,))
            rows = cur.fetchall()
            
        tables = [row['table_name'] for row in rows]
                
        logger.info(f"Extracted {len(tables)} tables")
        return tables
