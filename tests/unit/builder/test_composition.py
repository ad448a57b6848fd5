"""Unit tests for statements that embed other statements."""

import pytest

from sqlchain import ParameterStyle, QueryConfig, QueryFactory, QueryStateError

pytestmark = pytest.mark.xdist_group("builder")


def test_union(sql: QueryFactory) -> None:
    query, args = (
        sql.select("name", "email")
        .from_("users")
        .where("id = ?", 1)
        .union(sql.select("name", "email").from_("users").where("id = ?", 2))
        .build()
    )

    assert query == "SELECT name, email FROM users WHERE id = $1 UNION SELECT name, email FROM users WHERE id = $2"
    assert args == [1, 2]


def test_with(sql: QueryFactory) -> None:
    query, args = (
        sql.with_("users", sql.select("name", "email").from_("users"))
        .select("name", "email")
        .from_("users")
        .where("id = ?", 1)
        .build()
    )

    assert query == "WITH users AS (SELECT name, email FROM users) SELECT name, email FROM users WHERE id = $1"
    assert args == [1]


def test_spliced_child_markers_are_numbered_after_parent(sql: QueryFactory) -> None:
    child = sql.select("id").from_("orders").where("total > ?", 100).and_().where("status = ?", "open")
    parent = sql.select("*").from_("customers").where("region = ?", "eu").and_().raw("id IN (")

    query, args = parent.splice(child).raw(")").build()

    assert query == (
        "SELECT * FROM customers WHERE region = $1 AND id IN (SELECT id FROM orders WHERE total > $2 AND status = $3)"
    )
    assert args == ["eu", 100, "open"]


def test_with_binds_child_values_first(sql: QueryFactory) -> None:
    recent = sql.select("id").from_("orders").where("created_at > ?", "2024-01-01")

    query, args = (
        sql.query().with_("recent", recent).select("COUNT(*)").from_("recent").raw(" HAVING COUNT(*) > ?", 5).build()
    )

    assert query == (
        "WITH recent AS (SELECT id FROM orders WHERE created_at > $1) SELECT COUNT(*) FROM recent HAVING COUNT(*) > $2"
    )
    assert args == ["2024-01-01", 5]


def test_union_child_cannot_be_built_afterwards(sql: QueryFactory) -> None:
    child = sql.select("1")
    parent = sql.select("2").union(child)

    with pytest.raises(QueryStateError):
        child.build()
    assert parent.build() == ("SELECT 2 UNION SELECT 1", [])


def test_composition_with_positional_colon_style() -> None:
    sql = QueryFactory(config=QueryConfig(parameter_style=ParameterStyle.POSITIONAL_COLON))

    other = sql.select("*").from_("b").where("y = ?", 2)
    query, args = sql.select("*").from_("a").where("x = ?", 1).union(other).build()

    assert query == "SELECT * FROM a WHERE x = :1 UNION SELECT * FROM b WHERE y = :2"
    assert args == [1, 2]


def test_where_guard_sees_keyword_inside_spliced_sub_query(sql: QueryFactory) -> None:
    inner = sql.select("*").from_("t").where("a = ?", 1)

    query, args = sql.with_("c", inner).select("*").from_("c").where("b = ?", 2).build()

    assert query == "WITH c AS (SELECT * FROM t WHERE a = $1) SELECT * FROM cb = $2"
    assert args == [1, 2]


def test_raw_where_after_spliced_sub_query(sql: QueryFactory) -> None:
    inner = sql.select("*").from_("t").where("a = ?", 1)

    query, args = sql.with_("c", inner).select("*").from_("c").raw(" WHERE b = ?", 2).build()

    assert query == "WITH c AS (SELECT * FROM t WHERE a = $1) SELECT * FROM c WHERE b = $2"
    assert args == [1, 2]
