"""Test the accessor intermediate representation."""

import pytest

from beanforge import HostType, PreconditionViolation
from beanforge.core.accessor import AccessorPair, AccessorSpec, DefaultAssignment, SerializationEntry


def _getter(**overrides):
    fields = dict(
        kind="getter",
        method_name="getName",
        host_type=HostType.STRING,
        nullable=False,
        column_name="name",
        table_name="users",
    )
    fields.update(overrides)
    return AccessorSpec(**fields)


def _setter(**overrides):
    fields = dict(
        kind="setter",
        method_name="setName",
        host_type=HostType.STRING,
        nullable=False,
        column_name="name",
        table_name="users",
        parameter_name="name",
    )
    fields.update(overrides)
    return AccessorSpec(**fields)


def test_valid_pair():
    pair = AccessorPair(getter=_getter(), setter=_setter())

    assert pair.host_type == HostType.STRING
    assert pair.nullable is False


def test_pair_rejects_nullability_mismatch():
    with pytest.raises(PreconditionViolation, match="different types"):
        AccessorPair(getter=_getter(nullable=True), setter=_setter())


def test_pair_rejects_type_mismatch():
    with pytest.raises(PreconditionViolation):
        AccessorPair(getter=_getter(), setter=_setter(host_type=HostType.INT))


def test_pair_rejects_swapped_kinds():
    with pytest.raises(PreconditionViolation):
        AccessorPair(getter=_setter(), setter=_getter())


def test_pair_rejects_setter_without_parameter():
    with pytest.raises(PreconditionViolation, match="needs a parameter"):
        AccessorPair(getter=_getter(), setter=_setter(parameter_name=None))


def test_pair_rejects_different_columns():
    with pytest.raises(PreconditionViolation, match="same column"):
        AccessorPair(getter=_getter(), setter=_setter(column_name="other"))


@pytest.mark.parametrize("default", ["CURRENT_TIMESTAMP", "current_timestamp", "Current_Timestamp"])
def test_current_timestamp_keyword(default):
    assignment = DefaultAssignment.from_default("setCreatedAt", default)

    assert assignment.kind == "current_timestamp"
    assert assignment.literal is None


@pytest.mark.parametrize("default", ["0", "", "now()", "CURRENT_TIMESTAMP()", "'CURRENT_TIMESTAMP'"])
def test_other_defaults_are_literals(default):
    assignment = DefaultAssignment.from_default("setValue", default)

    assert assignment.kind == "literal"
    assert assignment.literal == default


def test_serialization_null_guard_only_for_temporal():
    assert SerializationEntry("createdAt", "getCreatedAt", HostType.DATETIME).needs_null_guard is True
    assert SerializationEntry("name", "getName", HostType.STRING).needs_null_guard is False
