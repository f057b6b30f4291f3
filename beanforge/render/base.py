"""Base renderer turning property IR records into source text."""

from abc import ABC, abstractmethod
from typing import Any

from beanforge.core.accessor import AccessorPair, DefaultAssignment, ParameterSpec, SerializationEntry
from beanforge.core.types import HostType

from .template import render_code_template


class CodeRenderer(ABC):
    """Base renderer for one target language.

    Subclasses provide the host type names, literal quoting and one Jinja
    template per fragment. Every render method takes an IR record from
    beanforge.core.accessor.
    """

    target: str = ""
    type_names: dict[HostType, str] = {}

    accessor_pair_template: str = ""
    default_assignment_template: str = ""
    serialization_template: str = ""
    param_annotation_template: str = ""

    def type_name(self, host_type: HostType) -> str:
        return self.type_names[HostType(host_type)]

    @abstractmethod
    def qualified_type(self, host_type: HostType, nullable: bool) -> str:
        """Type as written in a signature, with the target's nullable qualifier."""
        raise NotImplementedError

    def doc_type(self, host_type: HostType, nullable: bool) -> str:
        """Type as written in documentation comments."""
        return self.qualified_type(host_type, nullable)

    def identifier(self, name: str) -> str:
        """Variable name as emitted, renamed if it clashes with a reserved word of the target."""
        return name

    @abstractmethod
    def literal(self, value: Any) -> str:
        """Quote a constant as a source literal of the target language."""
        raise NotImplementedError

    @abstractmethod
    def current_timestamp_expression(self) -> str:
        """Expression constructing an immutable point-in-time for 'now'."""
        raise NotImplementedError

    def render_accessor_pair(self, pair: AccessorPair) -> str:
        """Render the getter and setter for one column.

        Both signatures use the same qualified type, taken from the pair.
        """
        return render_code_template(
            self.accessor_pair_template,
            {
                "getter": pair.getter,
                "setter": pair.setter,
                "type": self.qualified_type(pair.host_type, pair.nullable),
                "doc_type": self.doc_type(pair.host_type, pair.nullable),
                "parameter": self.identifier(pair.setter.parameter_name),
                "column": self.literal(pair.getter.column_name),
                "table": self.literal(pair.getter.table_name),
            },
        )

    def render_default_assignment(self, assignment: DefaultAssignment) -> str:
        """Render the setter call assigning a column default at construction time."""
        if assignment.kind == "current_timestamp":
            value = self.current_timestamp_expression()
        else:
            value = self.literal(assignment.literal)
        return render_code_template(
            self.default_assignment_template,
            {"setter_name": assignment.setter_name, "value": value},
        )

    def render_serialization(self, entry: SerializationEntry) -> str:
        """Render the write of one property into the JSON map."""
        return render_code_template(
            self.serialization_template,
            {"entry": entry, "key": self.literal(entry.json_key), "getter_name": entry.getter_name},
        )

    def render_param_annotation(self, param: ParameterSpec) -> str:
        """Render the constructor parameter annotation for a property."""
        return render_code_template(
            self.param_annotation_template,
            {"name": self.identifier(param.variable_name), "type": self.doc_type(param.host_type, param.nullable)},
        )
