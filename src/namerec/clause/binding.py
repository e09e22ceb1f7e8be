"""Hand assembled clauses to SQLAlchemy.

SQLAlchemy's ``text()`` binds by name, so ``$n`` placeholders are rewritten to
``:p<n>`` and the positional arguments become named bind parameters.
Placeholder-like text inside quoted literals is left alone.
"""

import re
from collections.abc import Sequence
from typing import Any

from sqlalchemy import text
from sqlalchemy.sql.expression import TextClause

from namerec.clause.types import WhereClause
from namerec.clause.where.operators import substitute_placeholders

# A colon followed by a word character would be read as a bind parameter
_COLON_RE = re.compile(r':(?=\w)')

BIND_PREFIX = 'p'


def bind_name(index: int) -> str:
    """Name of the bind parameter replacing placeholder ``$index``."""
    return f'{BIND_PREFIX}{index}'


def to_text_clause(sql: str | WhereClause, args: Sequence[Any] | None = None) -> TextClause:
    """
    Build a SQLAlchemy TextClause from SQL with ``$n`` placeholders.

    Args:
        sql: Statement text, or a WhereClause (its args are used)
        args: Positional arguments when ``sql`` is a string

    Returns:
        TextClause with one bind parameter per positional argument

    Example:
        >>> from namerec.clause import Condition, build_where
        >>> where = build_where([Condition(name='id', value=7)])
        >>> stmt = to_text_clause(f'SELECT * FROM users {where.sql}', where.args)
        >>> str(stmt)
        'SELECT * FROM users WHERE id = :p1'
    """
    if isinstance(sql, WhereClause):
        sql, args = sql.sql, sql.args
    args = list(args or [])

    used: set[int] = set()

    def _bind(index: int) -> str:
        used.add(index)
        return f':{bind_name(index)}'

    # Colons are escaped everywhere, literals included, since text() does not know about quotes
    escaped = _COLON_RE.sub(r'\\:', sql)
    stmt = text(substitute_placeholders(escaped, _bind))

    values = {
        bind_name(index): value
        for index, value in enumerate(args, start=1)
        if index in used
    }
    if values:
        stmt = stmt.bindparams(**values)
    return stmt
