"""Parse filter specs (JSON-shaped dicts) into conditions and sort fields.

Unlike the assembler, the parser is strict: anything it cannot map onto a
``Condition`` raises a ``ConditionSyntaxError`` carrying the path of the
offending key. Use it at the boundary where request parameters come in.

Condition spec keys:

    {
        "field": "description",        # or "name"; required
        "source": "cs",                # table alias
        "op": "ILIKE",                 # SQL token, default "="
        "value": "%go%",
        "connector": "OR",             # joins to the next condition, default AND
        "group_open": true,
        "group_close": false,
        "ref": {"source": "pp", "field": "ends_at"},   # cross-table comparison
        "from": "2020-01-01", "to": "2020-12-31"       # BETWEEN bounds
    }
"""

import logging
from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any

from namerec.clause.constants import Connector
from namerec.clause.constants import Operator
from namerec.clause.constants import OrderDirection
from namerec.clause.exceptions import ConditionSyntaxError
from namerec.clause.exceptions import MissingFieldError
from namerec.clause.exceptions import UnknownOperatorError
from namerec.clause.types import Condition
from namerec.clause.types import SortField
from namerec.clause.types import WhereClause
from namerec.clause.where.assembler import build_where

logger = logging.getLogger(__name__)

_CONDITION_KEYS = frozenset({
    'field', 'name', 'source', 'op', 'value', 'connector',
    'group_open', 'group_close', 'ref', 'from', 'to',
})


def _parse_enum(enum_cls: type, token: Any, path: str) -> Any:
    """Map a token onto ``enum_cls`` or raise UnknownOperatorError."""
    if isinstance(token, enum_cls):
        return token
    if not isinstance(token, str):
        raise ConditionSyntaxError(f'Expected a string, got {type(token).__name__}', path)
    try:
        return enum_cls(' '.join(token.split()).upper())
    except ValueError:
        raise UnknownOperatorError(
            operator=token,
            path=path,
            supported=[member.value for member in enum_cls],
        ) from None


def _parse_identifier(spec: Mapping[str, Any], keys: tuple[str, ...], path: str, context: str) -> str:
    """Return the first of ``keys`` present in ``spec`` as a non-empty string."""
    for key in keys:
        if key in spec:
            value = spec[key]
            if not isinstance(value, str) or not value:
                raise ConditionSyntaxError(f"'{key}' must be a non-empty string", f'{path}.{key}')
            return value
    raise MissingFieldError(' or '.join(keys), path=path, context=context)


def _parse_flag(spec: Mapping[str, Any], key: str, path: str) -> bool:
    value = spec.get(key, False)
    if not isinstance(value, bool):
        raise ConditionSyntaxError(f"'{key}' must be a boolean", f'{path}.{key}')
    return value


def _parse_source(spec: Mapping[str, Any], path: str) -> str:
    source = spec.get('source') or ''
    if not isinstance(source, str):
        raise ConditionSyntaxError("'source' must be a string", f'{path}.source')
    return source


def parse_condition(spec: Mapping[str, Any], path: str = '') -> Condition:
    """
    Parse one condition spec.

    Args:
        spec: Condition specification dictionary
        path: Path of the spec inside the enclosing document, used in errors

    Returns:
        Condition

    Raises:
        ConditionSyntaxError: If the spec is not a dict or a key has the wrong type
        MissingFieldError: If a key required by the operator is missing
        UnknownOperatorError: If 'op' or 'connector' is not recognized
    """
    if not isinstance(spec, Mapping):
        raise ConditionSyntaxError(f'Condition must be a dict, got {type(spec).__name__}', path)

    unknown = set(spec) - _CONDITION_KEYS
    if unknown:
        raise ConditionSyntaxError(f'Unknown condition keys: {", ".join(sorted(unknown))}', path)

    name = _parse_identifier(spec, ('field', 'name'), path, 'condition')
    operator = _parse_enum(Operator, spec.get('op', Operator.EQ), f'{path}.op')
    connector = _parse_enum(Connector, spec.get('connector', Connector.AND), f'{path}.connector')

    kwargs: dict[str, Any] = {
        'name': name,
        'operator': operator,
        'connector': connector,
        'source': _parse_source(spec, path),
        'group_open': _parse_flag(spec, 'group_open', path),
        'group_close': _parse_flag(spec, 'group_close', path),
    }

    if operator == Operator.BETWEEN:
        for key in ('from', 'to'):
            if key not in spec:
                raise MissingFieldError(key, path=f'{path}.{key}', context='BETWEEN operator')
        kwargs['range_from'] = spec['from']
        kwargs['range_to'] = spec['to']
    elif operator in (Operator.IN, Operator.NOT_IN):
        if 'value' not in spec:
            raise MissingFieldError('value', path=f'{path}.value', context=f'{operator.value} operator')
        value = spec['value']
        if not isinstance(value, list) or not value:
            raise ConditionSyntaxError(
                f'{operator.value} operator requires a non-empty list', f'{path}.value'
            )
        kwargs['value'] = value
    elif operator in (Operator.IS_NULL, Operator.IS_NOT_NULL):
        pass
    elif 'ref' in spec:
        ref = spec['ref']
        ref_path = f'{path}.ref'
        if not isinstance(ref, Mapping):
            raise ConditionSyntaxError(f"'ref' must be a dict, got {type(ref).__name__}", ref_path)
        kwargs['value_from_table'] = True
        kwargs['ref_name'] = _parse_identifier(ref, ('field', 'name'), ref_path, 'cross-table comparison')
        kwargs['ref_source'] = _parse_source(ref, ref_path)
    elif 'value' in spec:
        kwargs['value'] = spec['value']
    else:
        raise MissingFieldError('value or ref', path=path, context=f'{operator.value} operator')

    return Condition(**kwargs)


def parse_conditions(specs: Sequence[Mapping[str, Any]], path: str = 'where') -> list[Condition]:
    """
    Parse a list of condition specs.

    Args:
        specs: Condition specification dictionaries, in clause order
        path: Path of the list inside the enclosing document

    Returns:
        List of conditions in the same order

    Raises:
        ConditionSyntaxError: If ``specs`` is not a list or any spec is invalid
    """
    if not isinstance(specs, Sequence) or isinstance(specs, str):
        raise ConditionSyntaxError(f'Conditions must be a list, got {type(specs).__name__}', path)

    conditions = [parse_condition(spec, f'{path}[{index}]') for index, spec in enumerate(specs)]
    logger.debug(f'Parsed {len(conditions)} condition(s)')
    return conditions


def parse_sort_field(spec: Mapping[str, Any] | str, path: str = '') -> SortField:
    """
    Parse one ORDER BY spec: a bare field name or ``{"field", "source", "direction"}``.

    Raises:
        ConditionSyntaxError: If the spec has the wrong shape
        UnknownOperatorError: If the direction is not ASC or DESC
    """
    if isinstance(spec, str):
        if not spec:
            raise ConditionSyntaxError('Sort field must be a non-empty string', path)
        return SortField(name=spec)
    if not isinstance(spec, Mapping):
        raise ConditionSyntaxError(f'Sort field must be a dict or string, got {type(spec).__name__}', path)

    name = _parse_identifier(spec, ('field', 'name'), path, 'sort field')
    direction = _parse_enum(OrderDirection, spec.get('direction', OrderDirection.ASC), f'{path}.direction')
    return SortField(name=name, source=_parse_source(spec, path), direction=direction)


def parse_sort_fields(specs: Sequence[Mapping[str, Any] | str], path: str = 'order_by') -> list[SortField]:
    """Parse a list of ORDER BY specs."""
    if not isinstance(specs, Sequence) or isinstance(specs, str):
        raise ConditionSyntaxError(f'Sort fields must be a list, got {type(specs).__name__}', path)
    return [parse_sort_field(spec, f'{path}[{index}]') for index, spec in enumerate(specs)]


def build_where_from_specs(specs: Sequence[Mapping[str, Any]]) -> WhereClause:
    """Parse condition specs and assemble them into a WHERE clause."""
    return build_where(parse_conditions(specs))
