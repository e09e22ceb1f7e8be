"""Assemble a parameterized WHERE clause from a sequence of conditions."""

import logging
from collections.abc import Iterable
from typing import Any

from namerec.clause.constants import WHERE_KEYWORD
from namerec.clause.types import Condition
from namerec.clause.types import WhereClause
from namerec.clause.where.operators import coerce_connector
from namerec.clause.where.operators import render_condition

logger = logging.getLogger(__name__)


def build_where(conditions: Iterable[Condition]) -> WhereClause:
    """
    Build a WHERE clause with ``$n`` placeholders.

    The conditions are consumed once, left to right. Each condition after the
    first is preceded by the connector of the condition before it.

    Grouping:
        - ``group_open`` puts ``(`` right before the condition's fragment.
        - ``group_close`` puts one ``)`` after the fragment for *every* group
          that is still open.
        - Groups still open after the last condition are closed at the end.

    This function never raises for odd input; see ``render_condition`` for the
    fallbacks. Validate upstream when stricter behaviour is needed.

    Args:
        conditions: Ordered condition descriptors

    Returns:
        WhereClause with the SQL text (empty when there are no conditions)
        and the bound values in placeholder order.

    Example:
        >>> from namerec.clause import Condition, Connector
        >>> build_where([
        ...     Condition(name='a', value=1, group_open=True, connector=Connector.OR),
        ...     Condition(name='b', value=2),
        ... ])
        WhereClause(sql='WHERE (a = $1 OR b = $2)', args=[1, 2])
    """
    parts: list[str] = []
    args: list[Any] = []
    next_index = 1
    open_groups = 0
    previous: Condition | None = None

    for condition in conditions:
        if previous is None:
            parts.append(WHERE_KEYWORD)
        else:
            parts.append(coerce_connector(previous.connector).value)

        fragment, bound = render_condition(condition, next_index)
        next_index += len(bound)
        args.extend(bound)

        if condition.group_open:
            fragment = f'({fragment}'
            open_groups += 1
        if condition.group_close:
            if not open_groups:
                logger.debug(f'group_close on {condition.name!r} without an open group')
            fragment += ')' * open_groups
            open_groups = 0

        parts.append(fragment)
        previous = condition

    if previous is None:
        return WhereClause('', [])

    sql = ' '.join(parts)
    if open_groups:
        logger.debug(f'Closing {open_groups} unclosed group(s) at end of clause')
        sql += ')' * open_groups

    logger.debug(f'Built WHERE clause with {len(args)} bound argument(s)')
    return WhereClause(sql, args)
