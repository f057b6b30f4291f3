"""PHP target: typed accessors for beans extending a generic get()/set() base class."""

from typing import Any

from beanforge.core.types import HostType

from .base import CodeRenderer

ACCESSOR_PAIR_TEMPLATE = """\
    /**
     * The getter for the "{{ getter.column_name }}" column.
     *
     * @return {{ doc_type }}
     */
    public function {{ getter.method_name }}() : {{ type }}
    {
        return $this->get({{ column }}, {{ table }});
    }

    /**
     * The setter for the "{{ setter.column_name }}" column.
     *
     * @param {{ doc_type }} ${{ parameter }}
     */
    public function {{ setter.method_name }}({{ type }} ${{ parameter }}) : void
    {
        $this->set({{ column }}, ${{ parameter }}, {{ table }});
    }

"""

DEFAULT_ASSIGNMENT_TEMPLATE = "        $this->{{ setter_name }}({{ value }});"

SERIALIZATION_TEMPLATE = """\
{% if entry.needs_null_guard %}
        $array[{{ key }}] = ($this->{{ getter_name }}() === null) ? null : $this->{{ getter_name }}()->format('c');
{% else %}
        $array[{{ key }}] = $this->{{ getter_name }}();
{% endif %}
"""

PARAM_ANNOTATION_TEMPLATE = "     * @param {{ type }} ${{ name }}"


class PhpRenderer(CodeRenderer):
    """Renderer for PHP 7.1+ bean classes."""

    target = "php"
    type_names = {
        HostType.INT: "int",
        HostType.FLOAT: "float",
        HostType.BOOL: "bool",
        HostType.STRING: "string",
        HostType.ARRAY: "array",
        HostType.DATETIME: "\\DateTimeInterface",
    }

    accessor_pair_template = ACCESSOR_PAIR_TEMPLATE
    default_assignment_template = DEFAULT_ASSIGNMENT_TEMPLATE
    serialization_template = SERIALIZATION_TEMPLATE
    param_annotation_template = PARAM_ANNOTATION_TEMPLATE

    def qualified_type(self, host_type, nullable):
        return ("?" if nullable else "") + self.type_name(host_type)

    def doc_type(self, host_type, nullable):
        return self.type_name(host_type) + ("|null" if nullable else "")

    def identifier(self, name):
        # $this is reserved inside methods
        if name == "this":
            return name + "_"
        return name

    def literal(self, value: Any) -> str:
        """Quote a value the way PHP's var_export() does."""
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return repr(value)
        escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"

    def current_timestamp_expression(self):
        return "new \\DateTimeImmutable()"
