"""
Basic usage example for namerec.clause.

This example demonstrates:
1. Assembling a WHERE clause from conditions
2. Building the same clause from JSON filter specs
3. Validating the result and running it through SQLAlchemy
"""

from sqlalchemy import create_engine

from namerec.clause import Condition
from namerec.clause import Connector
from namerec.clause import Operator
from namerec.clause import SortField
from namerec.clause import build_order_by
from namerec.clause import build_where
from namerec.clause import build_where_from_specs
from namerec.clause import columns_aliased
from namerec.clause import to_text_clause
from namerec.clause import validate_clause


def example_conditions() -> None:
    """Example: conditions built in code."""
    print('=== Example 1: Conditions ===\n')

    where = build_where([
        Condition(source='c', name='employer_id', value=1),
        Condition(source='c', name='termination_date', operator=Operator.IS_NOT_NULL),
        Condition(group_open=True, source='cs', name='description', operator=Operator.ILIKE, value='ACTIVE', connector=Connector.OR),
        Condition(group_close=True, source='cs', name='description', operator=Operator.ILIKE, value='CREATED'),
        Condition(source='c', name='hire_date', operator=Operator.BETWEEN, range_from='2020-01-01', range_to='2020-12-31'),
    ])
    validate_clause(where)

    print(where.sql)
    print(where.args)
    print()


def example_specs() -> None:
    """Example: conditions coming from a request as JSON."""
    print('=== Example 2: Filter specs ===\n')

    where = build_where_from_specs([
        {'field': 'code', 'op': 'IN', 'value': ['COL', 'COP']},
        {'field': 'ends_at', 'source': 'c', 'op': '<', 'ref': {'source': 'pp', 'field': 'ends_at'}},
    ])
    print(where.sql)
    print(where.args)
    print()


def example_sqlalchemy() -> None:
    """Example: executing an assembled clause with SQLAlchemy."""
    print('=== Example 3: SQLAlchemy ===\n')

    engine = create_engine('sqlite:///:memory:')
    where = build_where([Condition(name='name', value='Bob', connector=Connector.OR), Condition(name='id', value=[1], operator=Operator.IN)])
    order_by = build_order_by([SortField('name', source='u')])

    with engine.connect() as conn:
        conn.exec_driver_sql('CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, created_at TEXT, updated_at TEXT)')
        conn.exec_driver_sql("INSERT INTO users (id, name) VALUES (1, 'Alice'), (2, 'Bob'), (3, 'Carol')")

        sql = f'SELECT {columns_aliased(["name"], "u")} FROM users u {where.sql} {order_by}'
        for row in conn.execute(to_text_clause(sql, where.args)):
            print(row)


if __name__ == '__main__':
    example_conditions()
    example_specs()
    example_sqlalchemy()
