"""Column definitions."""

from pydantic import BaseModel, Field, field_validator

from .types import LogicalType, parse_sql_type

_LOGICAL_TYPE_NAMES = {logical_type.value for logical_type in LogicalType}


class Column(BaseModel):
    """Physical column as described by the schema layer.

    The type accepts either a logical type name ("integer", "datetime") or a
    raw SQL type ("VARCHAR(255)"), which is normalized to a logical type.
    Anything else is kept as-is so that type resolution fails later instead
    of guessing.
    """

    name: str = Field(..., description="Physical column name")
    type: str = Field(..., description="Logical column type")
    notnull: bool = Field(True, description="Whether the column is declared NOT NULL")
    autoincrement: bool = Field(False, description="Whether the column is auto-incremented")
    default: str | None = Field(None, description="Default value literal or keyword (e.g. CURRENT_TIMESTAMP)")
    comment: str | None = Field(None, description="Column comment")

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value):
        if isinstance(value, LogicalType):
            return value.value
        if not isinstance(value, str):
            return value

        lowered = value.strip().lower()
        if lowered in _LOGICAL_TYPE_NAMES:
            return lowered

        parsed = parse_sql_type(value)
        if parsed is not None:
            return parsed.value
        return lowered

    def __hash__(self) -> int:
        return hash((self.name, self.type))
