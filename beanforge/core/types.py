"""Logical column types and their mapping to host-language types."""

import logging
from enum import Enum

from sqlglot import exp
from sqlglot.errors import SqlglotError

from beanforge.validation import UnsupportedTypeError

logger = logging.getLogger(__name__)


class LogicalType(str, Enum):
    """Storage-level column type category produced by the schema layer."""

    ARRAY = "array"
    SIMPLE_ARRAY = "simple_array"
    JSON = "json"
    JSON_ARRAY = "json_array"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DATETIME_IMMUTABLE = "datetime_immutable"
    DATETIMETZ = "datetimetz"
    DATETIMETZ_IMMUTABLE = "datetimetz_immutable"
    DATE = "date"
    DATE_IMMUTABLE = "date_immutable"
    TIME = "time"
    TIME_IMMUTABLE = "time_immutable"
    DECIMAL = "decimal"
    INTEGER = "integer"
    OBJECT = "object"
    SMALLINT = "smallint"
    STRING = "string"
    TEXT = "text"
    BINARY = "binary"
    BLOB = "blob"
    FLOAT = "float"
    GUID = "guid"


class HostType(str, Enum):
    """Language-neutral scalar or value type a property is exposed as."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"
    ARRAY = "array"
    DATETIME = "datetime"

    @property
    def is_temporal(self) -> bool:
        return self is HostType.DATETIME


# bigint and decimal are exposed as strings
DEFAULT_TYPE_MAP: dict[LogicalType, HostType] = {
    LogicalType.ARRAY: HostType.ARRAY,
    LogicalType.SIMPLE_ARRAY: HostType.ARRAY,
    LogicalType.JSON: HostType.ARRAY,
    LogicalType.JSON_ARRAY: HostType.ARRAY,
    LogicalType.BIGINT: HostType.STRING,
    LogicalType.BOOLEAN: HostType.BOOL,
    LogicalType.DATETIME: HostType.DATETIME,
    LogicalType.DATETIME_IMMUTABLE: HostType.DATETIME,
    LogicalType.DATETIMETZ: HostType.DATETIME,
    LogicalType.DATETIMETZ_IMMUTABLE: HostType.DATETIME,
    LogicalType.DATE: HostType.DATETIME,
    LogicalType.DATE_IMMUTABLE: HostType.DATETIME,
    LogicalType.TIME: HostType.DATETIME,
    LogicalType.TIME_IMMUTABLE: HostType.DATETIME,
    LogicalType.DECIMAL: HostType.STRING,
    LogicalType.INTEGER: HostType.INT,
    LogicalType.OBJECT: HostType.STRING,
    LogicalType.SMALLINT: HostType.INT,
    LogicalType.STRING: HostType.STRING,
    LogicalType.TEXT: HostType.STRING,
    LogicalType.BINARY: HostType.STRING,
    LogicalType.BLOB: HostType.STRING,
    LogicalType.FLOAT: HostType.FLOAT,
    LogicalType.GUID: HostType.STRING,
}

# sqlglot DataType.Type names -> logical types
_SQL_TYPE_MAP: dict[str, LogicalType] = {
    "INT": LogicalType.INTEGER,
    "UINT": LogicalType.INTEGER,
    "MEDIUMINT": LogicalType.INTEGER,
    "UMEDIUMINT": LogicalType.INTEGER,
    "TINYINT": LogicalType.SMALLINT,
    "UTINYINT": LogicalType.SMALLINT,
    "SMALLINT": LogicalType.SMALLINT,
    "USMALLINT": LogicalType.SMALLINT,
    "BIGINT": LogicalType.BIGINT,
    "UBIGINT": LogicalType.BIGINT,
    "BOOLEAN": LogicalType.BOOLEAN,
    "CHAR": LogicalType.STRING,
    "NCHAR": LogicalType.STRING,
    "VARCHAR": LogicalType.STRING,
    "NVARCHAR": LogicalType.STRING,
    "TEXT": LogicalType.TEXT,
    "TINYTEXT": LogicalType.TEXT,
    "MEDIUMTEXT": LogicalType.TEXT,
    "LONGTEXT": LogicalType.TEXT,
    "DECIMAL": LogicalType.DECIMAL,
    "BIGDECIMAL": LogicalType.DECIMAL,
    "MONEY": LogicalType.DECIMAL,
    "SMALLMONEY": LogicalType.DECIMAL,
    "FLOAT": LogicalType.FLOAT,
    "DOUBLE": LogicalType.FLOAT,
    "DATE": LogicalType.DATE,
    "DATETIME": LogicalType.DATETIME,
    "TIMESTAMP": LogicalType.DATETIME,
    "TIMESTAMPNTZ": LogicalType.DATETIME,
    "TIMESTAMPTZ": LogicalType.DATETIMETZ,
    "TIMESTAMPLTZ": LogicalType.DATETIMETZ,
    "TIME": LogicalType.TIME,
    "TIMETZ": LogicalType.TIME,
    "JSON": LogicalType.JSON,
    "JSONB": LogicalType.JSON,
    "BINARY": LogicalType.BINARY,
    "VARBINARY": LogicalType.BINARY,
    "BLOB": LogicalType.BLOB,
    "TINYBLOB": LogicalType.BLOB,
    "MEDIUMBLOB": LogicalType.BLOB,
    "LONGBLOB": LogicalType.BLOB,
    "UUID": LogicalType.GUID,
    "ARRAY": LogicalType.SIMPLE_ARRAY,
}


def parse_sql_type(sql_type: str, dialect: str | None = None) -> LogicalType | None:
    """Normalize a raw SQL column type to a logical type.

    Args:
        sql_type: Column type as written in DDL (e.g. "VARCHAR(255)", "TIMESTAMP")
        dialect: Optional sqlglot dialect used to parse the type

    Returns:
        Logical type, or None if the type cannot be parsed or has no logical equivalent

    Examples:
        >>> parse_sql_type("VARCHAR(255)")
        <LogicalType.STRING: 'string'>
        >>> parse_sql_type("TIMESTAMP")
        <LogicalType.DATETIME: 'datetime'>
    """
    try:
        data_type = exp.DataType.build(sql_type, dialect=dialect)
    except (SqlglotError, ValueError) as e:
        logger.warning("Could not parse SQL type %r: %s", sql_type, e)
        return None

    logical_type = _SQL_TYPE_MAP.get(data_type.this.name)
    if logical_type is None:
        logger.warning("SQL type %r (%s) has no logical equivalent", sql_type, data_type.this.name)
    return logical_type


class TypeMapper:
    """Explicit logical-type to host-type lookup table.

    The built-in table is total over LogicalType. A custom mapping may be
    partial, in which case resolving a missing type raises UnsupportedTypeError.
    """

    def __init__(
        self,
        mapping: dict[str, HostType] | None = None,
        overrides: dict[str, HostType] | None = None,
    ):
        base = DEFAULT_TYPE_MAP if mapping is None else mapping
        self.mapping: dict[str, HostType] = {_key(k): HostType(v) for k, v in base.items()}
        for key, host_type in (overrides or {}).items():
            self.mapping[_key(key)] = HostType(host_type)

    def supports(self, logical_type: str) -> bool:
        """Check whether a logical type has a registered host type."""
        return _key(logical_type) in self.mapping

    def resolve(self, logical_type: str) -> HostType:
        """Look up the host type for a logical type.

        Raises:
            UnsupportedTypeError: If the logical type has no registered mapping
        """
        key = _key(logical_type)
        if key not in self.mapping:
            raise UnsupportedTypeError(key)
        return self.mapping[key]


def _key(logical_type: str) -> str:
    if isinstance(logical_type, LogicalType):
        return logical_type.value
    return str(logical_type).lower()
