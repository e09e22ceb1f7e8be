"""Type definitions for clause building."""

from dataclasses import dataclass
from typing import Any
from typing import NamedTuple

from namerec.clause.constants import Connector
from namerec.clause.constants import Operator
from namerec.clause.constants import OrderDirection


@dataclass(frozen=True, slots=True)
class Condition:
    """
    One filter descriptor of a WHERE clause.

    Only ``name`` is required. ``operator`` defaults to equality and ``connector``
    to AND. The connector joins this condition to the *next* one, so the
    connector of the last condition is never rendered.

    ``value`` is interpreted per operator: a scalar for comparisons, a list for
    IN / NOT IN, ignored for null checks, for ranges (``range_from`` and
    ``range_to`` are used instead) and for cross-table comparisons
    (``value_from_table`` with ``ref_source`` / ``ref_name``).
    """

    name: str
    value: Any = None
    operator: Operator | str | None = None
    connector: Connector | str | None = None
    source: str = ''
    group_open: bool = False
    group_close: bool = False
    value_from_table: bool = False
    ref_source: str = ''
    ref_name: str = ''
    range_from: Any = None
    range_to: Any = None


@dataclass(frozen=True, slots=True)
class SortField:
    """One ORDER BY entry; direction defaults to ascending."""

    name: str
    source: str = ''
    direction: OrderDirection | str | None = None


class WhereClause(NamedTuple):
    """Assembled WHERE clause and its positional arguments."""

    sql: str
    args: list[Any]
