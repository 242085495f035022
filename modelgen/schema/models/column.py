from typing import Optional
from pydantic import BaseModel


class Column(BaseModel):
    """
        Represents a database column with the metadata needed for generation.
    """
    column_name: str
    data_type: Optional[str] = None
    is_nullable: bool = True
    column_position: Optional[int] = None

    class Config:
        frozen = True


class PrimaryKeyColumn(BaseModel):
    """A column taking part in a table's primary key constraint."""
    column_name: str
    constraint_name: Optional[str] = None

    class Config:
        frozen = True
