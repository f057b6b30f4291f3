"""Scalar bean property descriptor.

A descriptor binds one column to its owning table and answers everything the
bean generator needs to know about the property: its host type, whether it is
compulsory at construction time, and the code fragments for its accessors,
default value and JSON serialization.
"""

import logging
from typing import TYPE_CHECKING

from beanforge.render import CodeRenderer, get_renderer
from beanforge.validation import PreconditionViolation, SchemaValidationError, UnsupportedTypeError, validate_table

from .accessor import AccessorPair, AccessorSpec, DefaultAssignment, ParameterSpec, SerializationEntry
from .column import Column
from .naming import DefaultNamingStrategy, NamingStrategy
from .table import Table
from .types import HostType, TypeMapper

if TYPE_CHECKING:
    from beanforge.config import BeanForgeConfig

logger = logging.getLogger(__name__)


class ScalarPropertyDescriptor:
    """Property of a bean backed by a single, non-relational column."""

    def __init__(
        self,
        table: Table,
        column: Column,
        naming_strategy: NamingStrategy | None = None,
        type_mapper: TypeMapper | None = None,
    ):
        self.table = table
        self.column = column
        self.naming_strategy = naming_strategy or DefaultNamingStrategy()
        self.type_mapper = type_mapper or TypeMapper()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarPropertyDescriptor):
            return NotImplemented
        return self.table == other.table and self.column == other.column

    def __hash__(self) -> int:
        return hash((self.table.name, self.column.name))

    def __repr__(self) -> str:
        return f"ScalarPropertyDescriptor({self.table.name}.{self.column.name})"

    @property
    def column_name(self) -> str:
        return self.column.name

    @property
    def table_name(self) -> str:
        return self.table.name

    def get_column_name(self) -> str:
        """Physical name of the underlying column."""
        return self.column.name

    # Type and classification

    def resolve_host_type(self) -> HostType:
        """Resolve the host type of the column.

        Raises:
            UnsupportedTypeError: If the column's logical type has no mapping
        """
        try:
            host_type = self.type_mapper.resolve(self.column.type)
        except UnsupportedTypeError as e:
            raise UnsupportedTypeError(e.logical_type, self.column) from e
        logger.debug("Resolved %s.%s (%s) to %s", self.table.name, self.column.name, self.column.type, host_type.value)
        return host_type

    @property
    def host_type(self) -> HostType:
        return self.resolve_host_type()

    def is_nullable(self) -> bool:
        """Whether the accessors accept and return null.

        Auto-increment columns are null until the bean is first saved, even
        when declared NOT NULL.
        """
        return not self.column.notnull or self.column.autoincrement

    def is_compulsory(self) -> bool:
        """Whether the property must be passed to the bean constructor."""
        return self.column.notnull and not self.column.autoincrement and self.column.default is None

    def has_default(self) -> bool:
        """Whether the column carries a default value."""
        return self.column.default is not None

    def is_primary_key(self) -> bool:
        return self.column.name in self.table.primary_key

    def get_foreign_key(self) -> None:
        """Foreign key the column belongs to. Scalar properties never have one."""
        return None

    def get_class_name(self) -> str | None:
        """Bean class linked to this property. Scalar properties are not linked."""
        return None

    # Names

    @property
    def getter_name(self) -> str:
        return self.naming_strategy.get_getter_name(self)

    @property
    def setter_name(self) -> str:
        return self.naming_strategy.get_setter_name(self)

    @property
    def variable_name(self) -> str:
        return self.naming_strategy.get_variable_name(self)

    @property
    def json_key(self) -> str:
        return self.naming_strategy.get_json_property(self)

    # IR

    def accessor_pair(self) -> AccessorPair:
        """Build the getter/setter specs for this column."""
        host_type = self.host_type
        nullable = self.is_nullable()
        return AccessorPair(
            getter=AccessorSpec(
                kind="getter",
                method_name=self.getter_name,
                host_type=host_type,
                nullable=nullable,
                column_name=self.column.name,
                table_name=self.table.name,
            ),
            setter=AccessorSpec(
                kind="setter",
                method_name=self.setter_name,
                host_type=host_type,
                nullable=nullable,
                column_name=self.column.name,
                table_name=self.table.name,
                parameter_name=self.variable_name,
            ),
        )

    def default_assignment(self) -> DefaultAssignment:
        """Build the construction-time assignment of the column default.

        Raises:
            PreconditionViolation: If the column has no default
        """
        if not self.has_default():
            raise PreconditionViolation(f"Column '{self.table.name}.{self.column.name}' has no default value")
        return DefaultAssignment.from_default(self.setter_name, self.column.default)

    def serialization(self) -> SerializationEntry:
        return SerializationEntry(json_key=self.json_key, getter_name=self.getter_name, host_type=self.host_type)

    def parameter(self) -> ParameterSpec:
        return ParameterSpec(variable_name=self.variable_name, host_type=self.host_type, nullable=self.is_nullable())

    # Rendering

    def render_accessor_pair(self, renderer: CodeRenderer | None = None) -> str:
        """Source code of the getter and setter."""
        return (renderer or get_renderer()).render_accessor_pair(self.accessor_pair())

    def render_default_assignment(self, renderer: CodeRenderer | None = None) -> str:
        """Source code calling the setter with the column default.

        Raises:
            PreconditionViolation: If the column has no default
        """
        return (renderer or get_renderer()).render_default_assignment(self.default_assignment())

    def render_serialization_fragment(self, renderer: CodeRenderer | None = None) -> str:
        """Source code writing the property into the JSON map."""
        return (renderer or get_renderer()).render_serialization(self.serialization())

    def render_param_annotation(self, renderer: CodeRenderer | None = None) -> str:
        """Documentation line for the property as a constructor parameter."""
        return (renderer or get_renderer()).render_param_annotation(self.parameter())


def descriptors_for(table: Table, config: "BeanForgeConfig | None" = None) -> list[ScalarPropertyDescriptor]:
    """Build one descriptor per column of a table.

    Args:
        table: Table to describe
        config: Generation settings (defaults to BeanForgeConfig())

    Returns:
        Descriptors in column declaration order

    Raises:
        SchemaValidationError: If the table is invalid, uses unsupported types, or two
            columns get the same accessor or JSON key name
    """
    from beanforge.config import BeanForgeConfig

    config = config or BeanForgeConfig()
    type_mapper = config.type_mapper()

    naming_strategy = config.naming_strategy()
    descriptors = [ScalarPropertyDescriptor(table, column, naming_strategy, type_mapper) for column in table.columns]

    errors = validate_table(table, type_mapper) + _name_collisions(table, descriptors)
    if errors:
        raise SchemaValidationError("\n".join(errors))

    logger.debug("Built %d descriptors for table %s", len(descriptors), table.name)
    return descriptors


def _name_collisions(table: Table, descriptors: list[ScalarPropertyDescriptor]) -> list[str]:
    """Report distinct columns that the naming strategy maps to the same identifier."""
    errors = []
    for label, name_of in (
        ("getter", lambda d: d.getter_name),
        ("setter", lambda d: d.setter_name),
        ("JSON key", lambda d: d.json_key),
    ):
        owners: dict[str, str] = {}
        for descriptor in descriptors:
            name = name_of(descriptor)
            owner = owners.setdefault(name, descriptor.column_name)
            if owner != descriptor.column_name:
                errors.append(
                    f"Table '{table.name}': columns '{owner}' and '{descriptor.column_name}' share the {label} '{name}'"
                )
    return errors
