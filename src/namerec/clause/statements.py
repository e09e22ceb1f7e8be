"""Static statement builders over a fixed list of fields.

These builders have no branching beyond the empty-field case. Identifiers are
lower-cased the same way the WHERE assembler does it, and the identity and
timestamp column names come from ``ClauseConfig``.
"""

import logging
from collections.abc import Iterable
from collections.abc import Sequence

from namerec.clause.config import ClauseConfig
from namerec.clause.config import resolve_config
from namerec.clause.constants import OrderDirection
from namerec.clause.types import SortField
from namerec.clause.where.identifiers import normalize_identifier
from namerec.clause.where.identifiers import qualify
from namerec.clause.where.operators import placeholder

logger = logging.getLogger(__name__)


def build_insert(table: str, fields: Sequence[str], config: ClauseConfig | None = None) -> str:
    """
    Build an INSERT statement that also sets the identity column.

    Example:
        >>> build_insert('cashboxes', ['responsable', 'country'])
        'INSERT INTO cashboxes (id,responsable,country) VALUES ($1,$2,$3) RETURNING created_at'

    Note:
        With no fields the statement still ends the column and value lists
        with a comma (``(id,)``). Existing callers depend on that output.
    """
    cfg = resolve_config(config)
    columns = [normalize_identifier(field) for field in fields]
    placeholders = [placeholder(index) for index in range(2, len(columns) + 2)]

    column_list = f'{cfg.identity_column},' + ','.join(columns)
    value_list = f'{placeholder(1)},' + ','.join(placeholders)
    return (
        f'INSERT INTO {normalize_identifier(table)} ({column_list}) '
        f'VALUES ({value_list}) RETURNING {cfg.created_at_column}'
    )


def build_update_by_id(table: str, fields: Sequence[str], config: ClauseConfig | None = None) -> str:
    """
    Build an UPDATE statement for one row selected by identity.

    Each field is bound to a placeholder in order, the update timestamp is
    refreshed, and the identity is bound to the last placeholder. Returns an
    empty string when there is nothing to update.

    Example:
        >>> build_update_by_id('one', ['one_field'])
        'UPDATE one SET one_field = $1, updated_at = now() WHERE id = $2'
    """
    if not fields:
        return ''

    cfg = resolve_config(config)
    assignments = [
        f'{normalize_identifier(field)} = {placeholder(index)}'
        for index, field in enumerate(fields, start=1)
    ]
    assignments.append(f'{cfg.updated_at_column} = {cfg.update_timestamp}')
    return (
        f'UPDATE {normalize_identifier(table)} SET {", ".join(assignments)} '
        f'WHERE {cfg.identity_column} = {placeholder(len(fields) + 1)}'
    )


def build_select_fields(table: str, fields: Sequence[str]) -> str:
    """Build ``SELECT f1, f2 FROM table``; empty string for no fields."""
    if not fields:
        return ''
    columns = ', '.join(normalize_identifier(field) for field in fields)
    return f'SELECT {columns} FROM {normalize_identifier(table)}'


def coerce_direction(direction: OrderDirection | str | None) -> OrderDirection:
    """Resolve a sort direction; unset or unknown values mean ascending."""
    if isinstance(direction, OrderDirection):
        return direction
    if not direction:
        return OrderDirection.ASC
    try:
        return OrderDirection(str(direction).strip().upper())
    except ValueError:
        logger.warning(f'Unknown sort direction {direction!r}, using ASC')
        return OrderDirection.ASC


def build_order_by(sorts: Iterable[SortField]) -> str:
    """
    Build an ORDER BY list.

    Example:
        >>> build_order_by([SortField('id', source='a'), SortField('begins_at', direction='desc')])
        'ORDER BY a.id ASC, begins_at DESC'
    """
    items = [
        f'{qualify(sort.source, sort.name)} {coerce_direction(sort.direction).value}'
        for sort in sorts
    ]
    if not items:
        return ''
    return f'ORDER BY {", ".join(items)}'


def columns_aliased(fields: Sequence[str], alias: str, config: ClauseConfig | None = None) -> str:
    """
    List the fields prefixed with a table alias, framed by the bookkeeping columns.

    The identity column comes first, the two timestamps last. Returns an
    empty string for no fields.

    Example:
        >>> columns_aliased(['title'], 'b')
        'b.id, b.title, b.created_at, b.updated_at'
    """
    if not fields:
        return ''

    cfg = resolve_config(config)
    columns = [cfg.identity_column, *fields, cfg.created_at_column, cfg.updated_at_column]
    return ', '.join(qualify(alias, column) for column in columns)
