"""Table definitions."""

from pydantic import BaseModel, Field, field_validator

from .column import Column


class Table(BaseModel):
    """Table owning a set of columns and a primary key."""

    name: str = Field(..., description="Physical table name")
    columns: list[Column] = Field(default_factory=list, description="Columns in declaration order")
    primary_key: list[str] = Field(default_factory=list, description="Primary key column names")

    @field_validator("primary_key", mode="before")
    @classmethod
    def normalize_primary_key(cls, value):
        if isinstance(value, str):
            return [value]
        return value

    def __hash__(self) -> int:
        return hash(self.name)

    def get_column(self, name: str) -> Column | None:
        """Get column by name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None
