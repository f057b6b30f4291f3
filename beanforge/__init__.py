"""beanforge: scalar bean property code generation from table metadata."""

__version__ = "0.1.0"

from beanforge.core.column import Column
from beanforge.core.descriptor import ScalarPropertyDescriptor, descriptors_for
from beanforge.core.naming import DefaultNamingStrategy, NamingStrategy, SnakeCaseNamingStrategy
from beanforge.core.table import Table
from beanforge.core.types import HostType, LogicalType, TypeMapper
from beanforge.validation import PreconditionViolation, SchemaValidationError, UnsupportedTypeError

__all__ = [
    "Column",
    "DefaultNamingStrategy",
    "HostType",
    "LogicalType",
    "NamingStrategy",
    "PreconditionViolation",
    "ScalarPropertyDescriptor",
    "SchemaValidationError",
    "SnakeCaseNamingStrategy",
    "Table",
    "TypeMapper",
    "UnsupportedTypeError",
    "descriptors_for",
]
