"""Pytest configuration and fixtures."""

import pytest

from beanforge import Column, Table


@pytest.fixture
def users_table():
    """A users table covering the auto-increment, default and required cases."""
    return Table(
        name="users",
        primary_key=["id"],
        columns=[
            Column(name="id", type="integer", notnull=True, autoincrement=True),
            Column(name="name", type="string", notnull=True),
            Column(name="nickname", type="string", notnull=False),
            Column(name="status", type="string", notnull=True, default="active"),
            Column(name="created_at", type="datetime", notnull=True, default="CURRENT_TIMESTAMP"),
            Column(name="last_login", type="datetime", notnull=False),
            Column(name="score", type="float", notnull=False, default="0.5"),
        ],
    )

