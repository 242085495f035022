from typing import Dict, Iterator, List
from pydantic import BaseModel, Field

from .column import PrimaryKeyColumn
from .foreign_key import ForeignKey
from .table import Table


class SchemaFacts(BaseModel):
    """
        Immutable snapshot of the structural metadata of one database schema.

        Built once per generation run by the schema extractor (or by hand in
        tests) and then only read.
    """
    schema_name: str = "public"
    tables: Dict[str, Table] = Field(default_factory=dict)   # table_name -> Table, discovery order

    class Config:
        frozen = True

    @classmethod
    def from_tables(cls, tables: List[Table], schema_name: str = "public") -> "SchemaFacts":
        return cls(
            schema_name=schema_name,
            tables={table.table_name: table for table in tables},
        )

    def table_names(self) -> List[str]:
        return list(self.tables.keys())

    def get_table(self, table_name: str) -> Table:
        return self.tables[table_name]

    def has_table(self, table_name: str) -> bool:
        return table_name in self.tables

    def foreign_keys(self, table_name: str) -> List[ForeignKey]:
        return list(self.tables[table_name].foreign_keys)

    def primary_keys(self, table_name: str) -> List[PrimaryKeyColumn]:
        return list(self.tables[table_name].primary_keys)

    def all_foreign_keys(self) -> Iterator[ForeignKey]:
        for table in self.tables.values():
            yield from table.foreign_keys
