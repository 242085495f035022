from .schema_extractor import SchemaExtractor
from .table_extractor import TableExtractor
from .column_extractor import ColumnExtractor
from .foreign_key_extractor import ForeignKeyExtractor

__all__ = ["SchemaExtractor", "TableExtractor", "ColumnExtractor", "ForeignKeyExtractor"]
