from typing import List, Set
from pydantic import BaseModel, Field

from .column import Column, PrimaryKeyColumn
from .foreign_key import ForeignKey


class Table(BaseModel):
    """
        Represents a database table: its columns, primary key and foreign keys.
    """
    table_name: str
    schema_name: str = "public"
    columns: List[Column] = Field(default_factory=list)
    primary_keys: List[PrimaryKeyColumn] = Field(default_factory=list)
    foreign_keys: List[ForeignKey] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def column_names(self) -> List[str]:
        return [column.column_name for column in self.columns]

    @property
    def primary_key_columns(self) -> Set[str]:
        return {pk.column_name for pk in self.primary_keys}
