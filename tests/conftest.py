"""Shared pytest fixtures for querybob unit and integration tests."""
from __future__ import annotations

import pytest

import querybob
from querybob.builder import StatementBuilder
from tests.fixtures import Slot, make_slots

FIELDS = ["field1", "field2", "field3", "field4"]


@pytest.fixture()
def slots() -> list[Slot]:
    """Four result targets matching ``FIELDS``."""
    return make_slots(*FIELDS)


@pytest.fixture()
def select_builder(slots: list[Slot]) -> StatementBuilder:
    """``SELECT table1.field1..field4 FROM table1`` with matching targets."""
    return querybob.new_select("table1").select(*FIELDS).into(*slots)


@pytest.fixture()
def insert_builder() -> StatementBuilder:
    """Four-column INSERT into ``table1`` on the default dialect."""
    return querybob.new_insert("table1").set(*FIELDS).to("value1", 2, 5, "value4")


@pytest.fixture()
def update_builder() -> StatementBuilder:
    """Four-column UPDATE of ``table1`` on the default dialect."""
    return querybob.new_update("table1").set(*FIELDS).to("value1", 2, 5, "value4")
