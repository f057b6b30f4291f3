"""Validation and error handling for bean property generation."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanforge.core.column import Column
    from beanforge.core.table import Table
    from beanforge.core.types import TypeMapper


class GenerationError(Exception):
    """Raised when code generation for a property fails."""

    pass


class UnsupportedTypeError(GenerationError):
    """Raised when a logical column type has no host-type mapping."""

    def __init__(self, logical_type: str, column: "Column | None" = None):
        self.logical_type = logical_type
        self.column = column
        if column is not None:
            message = f"Column '{column.name}' has unsupported type '{logical_type}'"
        else:
            message = f"Unsupported logical type '{logical_type}'"
        super().__init__(message)


class PreconditionViolation(GenerationError):
    """Raised when a caller breaks the contract of a generation step."""

    pass


class SchemaValidationError(GenerationError):
    """Raised when a table definition cannot be turned into descriptors."""

    pass


def validate_table(table: "Table", type_mapper: "TypeMapper | None" = None) -> list[str]:
    """Validate a table definition.

    Args:
        table: Table to validate
        type_mapper: Mapper used to check that every column type is supported
            (defaults to the built-in mapping)

    Returns:
        List of validation errors (empty if valid)
    """
    from beanforge.core.types import TypeMapper

    mapper = type_mapper or TypeMapper()
    errors = []

    seen = set()
    for column in table.columns:
        if column.name in seen:
            errors.append(f"Table '{table.name}': duplicate column '{column.name}'")
        seen.add(column.name)

        if not mapper.supports(column.type):
            errors.append(f"Table '{table.name}': column '{column.name}' has unsupported type '{column.type}'")

    for key in table.primary_key:
        if key not in seen:
            errors.append(f"Table '{table.name}': primary key column '{key}' is not defined")

    return errors
