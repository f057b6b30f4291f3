"""Python target: annotated accessors for beans exposing get()/set() primitives."""

import keyword
from typing import Any

from beanforge.core.types import HostType

from .base import CodeRenderer

ACCESSOR_PAIR_TEMPLATE = '''\
    def {{ getter.method_name }}(self) -> {{ type }}:
        """The getter for the "{{ getter.column_name }}" column."""
        return self.get({{ column }}, {{ table }})

    def {{ setter.method_name }}(self, {{ parameter }}: {{ type }}) -> None:
        """The setter for the "{{ setter.column_name }}" column."""
        self.set({{ column }}, {{ parameter }}, {{ table }})

'''

DEFAULT_ASSIGNMENT_TEMPLATE = "        self.{{ setter_name }}({{ value }})"

SERIALIZATION_TEMPLATE = """\
{% if entry.needs_null_guard %}
        array[{{ key }}] = None if self.{{ getter_name }}() is None else self.{{ getter_name }}().isoformat()
{% else %}
        array[{{ key }}] = self.{{ getter_name }}()
{% endif %}
"""

PARAM_ANNOTATION_TEMPLATE = "            {{ name }} ({{ type }})"


class PythonRenderer(CodeRenderer):
    """Renderer for Python bean classes (requires ``import datetime`` in the generated module)."""

    target = "python"
    type_names = {
        HostType.INT: "int",
        HostType.FLOAT: "float",
        HostType.BOOL: "bool",
        HostType.STRING: "str",
        HostType.ARRAY: "list",
        HostType.DATETIME: "datetime.datetime",
    }

    accessor_pair_template = ACCESSOR_PAIR_TEMPLATE
    default_assignment_template = DEFAULT_ASSIGNMENT_TEMPLATE
    serialization_template = SERIALIZATION_TEMPLATE
    param_annotation_template = PARAM_ANNOTATION_TEMPLATE

    def qualified_type(self, host_type, nullable):
        name = self.type_name(host_type)
        return f"{name} | None" if nullable else name

    def identifier(self, name):
        if keyword.iskeyword(name) or name == "self":
            return name + "_"
        return name

    def literal(self, value: Any) -> str:
        return repr(value)

    def current_timestamp_expression(self):
        return "datetime.datetime.now(datetime.timezone.utc)"
