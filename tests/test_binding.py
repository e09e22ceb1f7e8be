"""Tests for the SQLAlchemy bridge."""

from sqlalchemy import create_engine

from namerec.clause import Condition
from namerec.clause import Connector
from namerec.clause import Operator
from namerec.clause import build_where
from namerec.clause import to_text_clause


def test_placeholders_become_named_binds():
    where = build_where([
        Condition(name='id', value=7),
        Condition(name='d', operator=Operator.BETWEEN, range_from=1, range_to=9),
    ])
    stmt = to_text_clause(f'SELECT * FROM users {where.sql}', where.args)

    compiled = stmt.compile()
    assert str(compiled) == 'SELECT * FROM users WHERE id = :p1 AND d BETWEEN :p2 AND :p3'
    assert compiled.params == {'p1': 7, 'p2': 1, 'p3': 9}


def test_where_clause_input():
    stmt = to_text_clause(build_where([Condition(name='a', value='x')]))
    assert stmt.compile().params == {'p1': 'x'}


def test_colons_in_literals_are_not_binds():
    where = build_where([
        Condition(name='slot', value=['10:30', '11:00'], operator=Operator.IN),
        Condition(name='id', value=1),
    ])
    compiled = to_text_clause(where).compile()
    assert str(compiled) == "WHERE slot IN ('10:30','11:00') AND id = :p1"
    assert compiled.params == {'p1': 1}


def test_placeholder_text_in_literals_is_not_bound():
    where = build_where([
        Condition(name='tag', value=['$1'], operator=Operator.IN),
        Condition(name='id', value=5),
    ])
    compiled = to_text_clause(where).compile()
    assert str(compiled) == "WHERE tag IN ('$1') AND id = :p1"
    assert compiled.params == {'p1': 5}


def test_placeholder_text_in_literal_without_args():
    compiled = to_text_clause("WHERE note = 'costs $2'").compile()
    assert str(compiled) == "WHERE note = 'costs $2'"
    assert compiled.params == {}


def test_executes_against_sqlite():
    engine = create_engine('sqlite:///:memory:')
    where = build_where([
        Condition(name='NAME', value='Bob', connector=Connector.OR),
        Condition(name='id', value=[1], operator=Operator.IN),
    ])
    with engine.connect() as conn:
        conn.exec_driver_sql('CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT)')
        conn.exec_driver_sql("INSERT INTO users VALUES (1, 'Alice'), (2, 'Bob'), (3, 'Carol')")
        rows = conn.execute(to_text_clause(f'SELECT id FROM users {where.sql} ORDER BY id', where.args)).all()
    assert [row.id for row in rows] == [1, 2]
