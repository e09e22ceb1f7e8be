"""Lint pass over assembled clauses.

The assembler always produces a clause, even from contradictory input. Callers
that need a guarantee before sending SQL to a database can run the result
through ``validate_clause``: it parses the clause with sqlglot and checks that
placeholders and bound arguments line up.
"""

import logging
from collections.abc import Sequence
from typing import Any

import sqlglot
import sqlglot.expressions as exp
import sqlparse
from sqlglot.errors import ParseError

from namerec.clause.config import ClauseConfig
from namerec.clause.config import resolve_config
from namerec.clause.exceptions import ClauseValidationError
from namerec.clause.types import WhereClause
from namerec.clause.where.operators import placeholder_indices
from namerec.clause.where.operators import substitute_placeholders

logger = logging.getLogger(__name__)


def validate_clause(
    clause: WhereClause | str,
    args: Sequence[Any] | None = None,
    table: str = 't',
    config: ClauseConfig | None = None,
) -> exp.Expression | None:
    """
    Check that a WHERE clause parses and that its placeholders match its arguments.

    Args:
        clause: WhereClause, or bare clause text together with ``args``
        args: Bound arguments when ``clause`` is a string
        table: Table name used to wrap the clause in a SELECT for parsing
        config: Configuration supplying the sqlglot dialect

    Returns:
        Parsed sqlglot expression of ``SELECT * FROM <table> <clause>``, or
        None for an empty clause.

    Raises:
        ClauseValidationError: If the clause does not parse, or the
            placeholders are not exactly ``$1`` .. ``$len(args)``
    """
    if isinstance(clause, WhereClause):
        sql, args = clause.sql, clause.args
    else:
        sql = clause
    args = list(args or [])

    if not sql:
        if args:
            raise ClauseValidationError(f'Empty clause with {len(args)} bound argument(s)', sql=sql)
        return None

    indices = placeholder_indices(sql)
    expected = list(range(1, len(args) + 1))
    if sorted(set(indices)) != expected:
        raise ClauseValidationError(
            f'Placeholders {sorted(set(indices))} do not match {len(args)} bound argument(s)',
            sql=sql,
        )

    dialect = resolve_config(config).dialect
    # Placeholder syntax differs between dialects; NULL parses everywhere
    nulled = substitute_placeholders(sql, lambda index: 'NULL')
    statement = f'SELECT * FROM {table} {nulled}'
    try:
        parsed = sqlglot.parse_one(statement, read=dialect)
    except ParseError as e:
        logger.error(f'Clause failed validation: {sql}', exc_info=True)
        raise ClauseValidationError(f'Invalid clause: {e}', sql=sql, original_error=e) from e

    logger.debug(f'Clause passed validation ({dialect})')
    return parsed


def format_sql(sql: str) -> str:
    """Pretty-print SQL for display."""
    return sqlparse.format(sql, reindent=True, keyword_case='upper')
