"""Intermediate representation of the code fragments emitted for a property.

Descriptors build these records; renderers turn them into source text for a
given target language. Tests can assert on the records directly.
"""

from dataclasses import dataclass
from typing import Literal

from beanforge.validation import PreconditionViolation

from .types import HostType

CURRENT_TIMESTAMP = "CURRENT_TIMESTAMP"


@dataclass(frozen=True)
class AccessorSpec:
    """One accessor method delegating to the bean's generic field primitive."""

    kind: Literal["getter", "setter"]
    method_name: str
    host_type: HostType
    nullable: bool
    column_name: str
    table_name: str
    parameter_name: str | None = None


@dataclass(frozen=True)
class AccessorPair:
    """Getter and setter for one column, with symmetric signatures."""

    getter: AccessorSpec
    setter: AccessorSpec

    def __post_init__(self):
        if self.getter.kind != "getter" or self.setter.kind != "setter":
            raise PreconditionViolation("Accessor pair needs one getter and one setter")
        if self.getter.parameter_name is not None:
            raise PreconditionViolation(f"Getter {self.getter.method_name} cannot take a parameter")
        if self.setter.parameter_name is None:
            raise PreconditionViolation(f"Setter {self.setter.method_name} needs a parameter")
        if (self.getter.host_type, self.getter.nullable) != (self.setter.host_type, self.setter.nullable):
            raise PreconditionViolation(
                f"Getter {self.getter.method_name} and setter {self.setter.method_name} have different types"
            )
        if (self.getter.column_name, self.getter.table_name) != (self.setter.column_name, self.setter.table_name):
            raise PreconditionViolation("Getter and setter must target the same column")

    @property
    def host_type(self) -> HostType:
        return self.getter.host_type

    @property
    def nullable(self) -> bool:
        return self.getter.nullable


@dataclass(frozen=True)
class DefaultAssignment:
    """Construction-time call of a setter with the column's default value."""

    setter_name: str
    kind: Literal["literal", "current_timestamp"]
    literal: str | None = None

    @classmethod
    def from_default(cls, setter_name: str, default: str) -> "DefaultAssignment":
        """Build an assignment, turning the CURRENT_TIMESTAMP keyword into a timestamp constructor."""
        if default.upper() == CURRENT_TIMESTAMP:
            return cls(setter_name=setter_name, kind="current_timestamp")
        return cls(setter_name=setter_name, kind="literal", literal=default)


@dataclass(frozen=True)
class SerializationEntry:
    """One key/value write into the bean's JSON map."""

    json_key: str
    getter_name: str
    host_type: HostType

    @property
    def needs_null_guard(self) -> bool:
        return self.host_type.is_temporal


@dataclass(frozen=True)
class ParameterSpec:
    """The property as a constructor parameter."""

    variable_name: str
    host_type: HostType
    nullable: bool
