from typing import List, Optional
from pydantic import BaseModel, Field, model_validator


class ForeignKey(BaseModel):
    """
        A foreign key constraint, from the owning table's point of view.

        Local and referenced column lists are parallel. Multi-column (composite)
        keys are kept as-is; the relationship engine skips them.
    """
    table_name: str              # owning (child) table
    local_columns: List[str] = Field(min_length=1)
    referenced_table: str        # parent table
    referenced_columns: List[str] = Field(min_length=1)
    constraint_name: Optional[str] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_column_counts(self):
        if len(self.local_columns) != len(self.referenced_columns):
            raise ValueError(
                f"Foreign key {self.constraint_name or self.table_name} has "
                f"{len(self.local_columns)} local and {len(self.referenced_columns)} referenced columns"
            )
        return self

    @property
    def is_composite(self) -> bool:
        return len(self.local_columns) > 1 or len(self.referenced_columns) > 1

    @property
    def local_column(self) -> str:
        return self.local_columns[0]

    @property
    def referenced_column(self) -> str:
        return self.referenced_columns[0]
