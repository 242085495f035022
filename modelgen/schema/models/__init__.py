from .column import Column, PrimaryKeyColumn
from .foreign_key import ForeignKey
from .table import Table
from .schema_facts import SchemaFacts

__all__ = ["Column", "PrimaryKeyColumn", "ForeignKey", "Table", "SchemaFacts"]
