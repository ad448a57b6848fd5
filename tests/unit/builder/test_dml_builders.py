"""Unit tests for INSERT, UPDATE and DELETE builder methods."""

import pytest

from sqlchain import QueryFactory

pytestmark = pytest.mark.xdist_group("builder")


def test_insert_into_multiple_rows(sql: QueryFactory) -> None:
    query, args = (
        sql.insert_into("users", "name", "email")
        .values("John", "johndoe@gmail.com")
        .values("Jane", "jane@gmail.com")
        .build()
    )

    assert query == "INSERT INTO users (name, email) VALUES ($1, $2) ($3, $4)"
    assert query.count("VALUES") == 1
    assert args == ["John", "johndoe@gmail.com", "Jane", "jane@gmail.com"]


def test_insert_returning(sql: QueryFactory) -> None:
    query, args = (
        sql.insert_into("users", "name", "email").values("John", "johndoe@gmail.com").returning("id", "name").build()
    )

    assert query == "INSERT INTO users (name, email) VALUES ($1, $2) RETURNING id, name"
    assert args == ["John", "johndoe@gmail.com"]


def test_insert_many_columns_uses_multi_digit_placeholders(sql: QueryFactory) -> None:
    columns = [f"c{i}" for i in range(12)]

    query, args = sql.insert_into("wide", *columns).values(*range(12)).build()

    assert query == (
        "INSERT INTO wide (c0, c1, c2, c3, c4, c5, c6, c7, c8, c9, c10, c11) "
        "VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12)"
    )
    assert args == list(range(12))


def test_delete_from(sql: QueryFactory) -> None:
    query, args = sql.delete_from("users").where("id = ?", 1).build()

    assert query == "DELETE FROM users WHERE id = $1"
    assert args == [1]


def test_update_set_mapping(sql: QueryFactory) -> None:
    query, args = (
        sql.update("users").set({"name": "John", "email": "john.doe@example.com"}).where("id = ?", 1).build()
    )

    assert query == "UPDATE users SET name = $1, email = $2 WHERE id = $3"
    assert args == ["John", "john.doe@example.com", 1]


def test_update_set_keywords(sql: QueryFactory) -> None:
    query, args = sql.update("users").set({"name": "John"}, active=True).where("id = ?", 7).returning("id").build()

    assert query == "UPDATE users SET name = $1, active = $2 WHERE id = $3 RETURNING id"
    assert args == ["John", True, 7]
