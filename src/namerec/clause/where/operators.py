"""Render a single condition into a WHERE clause fragment.

Every handler receives the condition, its rendered identifier and the index of
the next free positional placeholder, and returns the fragment together with
the values it bound (in placeholder order). Handlers never raise: input that
cannot be rendered meaningfully falls back to an inert fragment.
"""

import logging
import math
import re
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from namerec.clause.constants import COMPARISON_OPERATORS
from namerec.clause.constants import EMPTY_MEMBERSHIP_VALUE
from namerec.clause.constants import PLACEHOLDER_PREFIX
from namerec.clause.constants import Connector
from namerec.clause.constants import Operator
from namerec.clause.types import Condition
from namerec.clause.where.identifiers import qualify

logger = logging.getLogger(__name__)

Rendered = tuple[str, list[Any]]
OperatorHandler = Callable[[Condition, str, int], Rendered]

# Operator handler registry
# Will be initialized after all handler functions are defined
_OPERATOR_HANDLERS: dict[Operator, OperatorHandler] = {}

# Quoted literals are matched first so a '$1' inside them is never a placeholder
_PLACEHOLDER_SCAN_RE = re.compile(r"'(?:[^']|'')*'|\$(\d+)")


def placeholder(index: int) -> str:
    """Render positional placeholder number ``index`` (``$1``, ``$2``, ...)."""
    return f'{PLACEHOLDER_PREFIX}{index}'


def placeholder_indices(sql: str) -> list[int]:
    """Return the ``$n`` placeholder numbers in order of appearance, skipping quoted literals."""
    return [
        int(match.group(1))
        for match in _PLACEHOLDER_SCAN_RE.finditer(sql)
        if match.group(1) is not None
    ]


def substitute_placeholders(sql: str, replace: Callable[[int], str]) -> str:
    """
    Replace every ``$n`` outside single-quoted literals with ``replace(n)``.

    Example:
        >>> substitute_placeholders("tag IN ('$1') AND id = $1", lambda index: f':p{index}')
        "tag IN ('$1') AND id = :p1"
    """
    def _substitute(match: re.Match) -> str:
        if match.group(1) is None:
            return match.group(0)
        return replace(int(match.group(1)))

    return _PLACEHOLDER_SCAN_RE.sub(_substitute, sql)


def coerce_operator(operator: Operator | str | None) -> Operator:
    """
    Resolve an operator given as enum member or SQL token.

    Unset operators mean equality. Unknown tokens are logged and also
    treated as equality.
    """
    if isinstance(operator, Operator):
        return operator
    if not operator:
        return Operator.EQ
    token = ' '.join(str(operator).split()).upper()
    try:
        return Operator(token)
    except ValueError:
        logger.warning(f'Unknown operator {operator!r}, rendering as equality')
        return Operator.EQ


def coerce_connector(connector: Connector | str | None) -> Connector:
    """Resolve a connector; unset or unknown values mean AND."""
    if isinstance(connector, Connector):
        return connector
    if not connector:
        return Connector.AND
    try:
        return Connector(str(connector).strip().upper())
    except ValueError:
        logger.warning(f'Unknown connector {connector!r}, rendering as AND')
        return Connector.AND


def format_literal(value: Any) -> str:
    """
    Render a value inline as a SQL literal.

    Finite numbers are emitted bare, booleans as TRUE/FALSE and anything else
    as a single-quoted string with embedded quotes doubled. NaN and infinities
    are quoted with their PostgreSQL spellings ('NaN', 'Infinity').
    """
    if isinstance(value, bool):
        return 'TRUE' if value else 'FALSE'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        if value.is_finite():
            return str(value)
        value = _non_finite_name(value.is_nan(), not value.is_signed())
    elif isinstance(value, float):
        if math.isfinite(value):
            return str(value)
        value = _non_finite_name(math.isnan(value), value > 0)
    text = str(value).replace("'", "''")
    return f"'{text}'"


def _non_finite_name(is_nan: bool, positive: bool) -> str:
    if is_nan:
        return 'NaN'
    return 'Infinity' if positive else '-Infinity'


def render_comparison(condition: Condition, ident: str, index: int) -> Rendered:
    """Render ``=``, ``>``, ``<``, ``>=``, ``<=`` and ``ILIKE``."""
    token = coerce_operator(condition.operator).value
    if condition.value_from_table:
        reference = qualify(condition.ref_source, condition.ref_name)
        return f'{ident} {token} {reference}', []
    return f'{ident} {token} {placeholder(index)}', [condition.value]


def render_is_null(condition: Condition, ident: str, index: int) -> Rendered:
    """Render IS NULL; ``value`` is ignored."""
    return f'{ident} IS NULL', []


def render_is_not_null(condition: Condition, ident: str, index: int) -> Rendered:
    """Render IS NOT NULL; ``value`` is ignored."""
    return f'{ident} IS NOT NULL', []


def render_between(condition: Condition, ident: str, index: int) -> Rendered:
    """Render BETWEEN, binding ``range_from`` then ``range_to``."""
    fragment = f'{ident} BETWEEN {placeholder(index)} AND {placeholder(index + 1)}'
    return fragment, [condition.range_from, condition.range_to]


def render_membership(condition: Condition, keyword: Operator | str = Operator.IN) -> str:
    """
    Render IN / NOT IN with the list values inlined as literals.

    Args:
        condition: Condition whose ``value`` holds the list of candidates
        keyword: ``Operator.IN`` or ``Operator.NOT_IN`` (or their SQL tokens)

    Returns:
        Fragment such as ``id IN (1,2,3)`` or ``code NOT IN ('COL','COP')``.
        When ``value`` is not a list or is empty, ``<ident> = ''`` is returned
        instead so that the clause stays syntactically valid.

    Example:
        >>> render_membership(Condition(name='id', value=[1, 2, 3]), 'IN')
        'id IN (1,2,3)'
    """
    ident = qualify(condition.source, condition.name)
    values = condition.value
    if not isinstance(values, (list, tuple)) or not values:
        logger.warning(
            f'Membership test on {ident} needs a non-empty list, got {type(values).__name__}; '
            f'rendering inert fragment'
        )
        return f'{ident} = {EMPTY_MEMBERSHIP_VALUE}'

    token = coerce_operator(keyword).value
    literals = ','.join(format_literal(value) for value in values)
    logger.debug(f'Processing {token} operator with {len(values)} values')
    return f'{ident} {token} ({literals})'


def _render_in(condition: Condition, ident: str, index: int) -> Rendered:
    return render_membership(condition, Operator.IN), []


def _render_not_in(condition: Condition, ident: str, index: int) -> Rendered:
    return render_membership(condition, Operator.NOT_IN), []


def _init_operator_handlers() -> None:
    """Initialize operator handler registry."""
    for operator in COMPARISON_OPERATORS:
        _OPERATOR_HANDLERS[operator] = render_comparison
    _OPERATOR_HANDLERS[Operator.IS_NULL] = render_is_null
    _OPERATOR_HANDLERS[Operator.IS_NOT_NULL] = render_is_not_null
    _OPERATOR_HANDLERS[Operator.BETWEEN] = render_between
    _OPERATOR_HANDLERS[Operator.IN] = _render_in
    _OPERATOR_HANDLERS[Operator.NOT_IN] = _render_not_in


# Initialize handler registry on module import
_init_operator_handlers()


def render_condition(condition: Condition, index: int) -> Rendered:
    """
    Render one condition.

    Args:
        condition: Condition to render
        index: Number of the next free positional placeholder

    Returns:
        Tuple of (fragment, bound values). The length of the list tells the
        caller how many placeholders were used.
    """
    operator = coerce_operator(condition.operator)
    ident = qualify(condition.source, condition.name)
    handler = _OPERATOR_HANDLERS[operator]
    return handler(condition, ident, index)
