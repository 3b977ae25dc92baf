"""Integration tests: generate → execute against a real SQLite in-memory DB.

Every statement is produced by querybob for the SQLite dialect and handed
to ``sqlite3`` together with ``CompiledStatement.params``, which checks that
placeholder order and parameter order line up.
"""
from __future__ import annotations

import sqlite3

import pytest

import querybob
from querybob.errors import UnsupportedReturningError
from tests.fixtures import Slot, load_ddl, make_slots

ACCOUNTS = [
    (1, "ann@example.com", "Ann", 34, 1),
    (2, "bob@example.com", "Bob", 27, 1),
    (3, "cyd@example.org", "Cyd", 45, 2),
    (4, "dee@example.org", "Dee", 19, None),
]


@pytest.fixture()
def db() -> sqlite3.Connection:
    conn = sqlite3.connect(":memory:")
    conn.executescript(load_ddl())
    for row in ACCOUNTS:
        compiled = (
            querybob.new_insert("accounts")
            .for_sqlite()
            .set("id", "email", "name", "age", "team_id")
            .to(*row)
            .build()
        )
        conn.execute(compiled.sql, compiled.params)
    conn.executemany("INSERT INTO teams VALUES (?,?)", [(1, "core"), (2, "infra")])
    yield conn
    conn.close()


def _fetch_into(conn: sqlite3.Connection, qb: querybob.StatementBuilder) -> list[list[Slot]]:
    """Run a SELECT and copy every row into fresh copies of the builder's slots."""
    compiled = qb.build()
    rows = []
    for row in conn.execute(compiled.sql, compiled.params):
        filled = []
        for target, value in zip(compiled.values, row):
            filled.append(Slot(target.name, value))
        rows.append(filled)
    return rows


def test_insert_rows_are_readable(db):
    assert db.execute("SELECT COUNT(*) FROM accounts").fetchone()[0] == 4


def test_select_with_filter_order_and_limit(db):
    qb = (
        querybob.new_select("accounts")
        .for_sqlite()
        .select("id", "name")
        .into(*make_slots("id", "name"))
        .where("accounts.age", ">=", 20)
        .order_by_descending("accounts.age")
        .limit(2)
    )
    rows = _fetch_into(db, qb)
    assert [[s.value for s in r] for r in rows] == [[3, "Cyd"], [1, "Ann"]]
    assert rows[0][1].name == "name"


def test_select_with_join_in_and_between(db):
    qb = (
        querybob.new_select("accounts")
        .for_sqlite()
        .select("name", "teams.label")
        .into(*make_slots("name", "label"))
        .join("INNER", "teams", "teams.id", "accounts.team_id")
        .where("accounts.id", "IN", 1, 2, 3)
        .where("accounts.age", "BETWEEN", 25, 40)
        .order_by("accounts.id")
    )
    rows = _fetch_into(db, qb)
    assert [[s.value for s in r] for r in rows] == [["Ann", "core"], ["Bob", "core"]]


def test_select_with_or_and_like(db):
    qb = (
        querybob.new_select("accounts")
        .for_sqlite()
        .select("id")
        .into(*make_slots("id"))
        .where("accounts.email", "LIKE", "%.org")
        .or_where("accounts.name", "=", "Bob")
        .order_by("accounts.id")
    )
    rows = _fetch_into(db, qb)
    assert [r[0].value for r in rows] == [2, 3, 4]


def test_update_binds_set_values_before_filter_values(db):
    compiled = (
        querybob.new_update("accounts")
        .for_sqlite()
        .set("name", "age")
        .to("Anne", 35)
        .where("accounts.id", "=", 1)
        .build()
    )
    db.execute(compiled.sql, compiled.params)
    assert db.execute("SELECT name, age FROM accounts WHERE id = 1").fetchone() == ("Anne", 35)
    assert db.execute("SELECT COUNT(*) FROM accounts WHERE name = 'Anne'").fetchone()[0] == 1


def test_delete_with_filter(db):
    compiled = (
        querybob.new_delete("accounts")
        .for_sqlite()
        .where("accounts.age", "<", 30)
        .build()
    )
    db.execute(compiled.sql, compiled.params)
    remaining = [r[0] for r in db.execute("SELECT id FROM accounts ORDER BY id")]
    assert remaining == [1, 3]


def test_sqlite_dialect_rejects_returning(db):
    qb = (
        querybob.new_delete("accounts")
        .for_sqlite()
        .where("accounts.id", "=", 1)
        .returning("id")
        .returning_into(*make_slots("id"))
    )
    with pytest.raises(UnsupportedReturningError):
        qb.build()
