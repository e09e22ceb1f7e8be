"""Constants for clause building to avoid magic strings."""

from enum import Enum


class Operator(str, Enum):
    """Comparison operators understood by the WHERE renderer.

    The value of each member is the SQL token it renders as.
    """

    # Comparison operators
    EQ = '='
    GT = '>'
    LT = '<'
    GE = '>='
    LE = '<='

    # Pattern matching (case-insensitive)
    ILIKE = 'ILIKE'

    # Special operators
    IS_NULL = 'IS NULL'
    IS_NOT_NULL = 'IS NOT NULL'
    BETWEEN = 'BETWEEN'
    IN = 'IN'
    NOT_IN = 'NOT IN'


class Connector(str, Enum):
    """Boolean keyword joining a condition to the next one."""

    AND = 'AND'
    OR = 'OR'


class OrderDirection(str, Enum):
    """SQL order directions."""

    ASC = 'ASC'
    DESC = 'DESC'


# Operator groups for easier checking
COMPARISON_OPERATORS = frozenset({
    Operator.EQ,
    Operator.GT,
    Operator.LT,
    Operator.GE,
    Operator.LE,
    Operator.ILIKE,
})
NULL_OPERATORS = frozenset({Operator.IS_NULL, Operator.IS_NOT_NULL})
MEMBERSHIP_OPERATORS = frozenset({Operator.IN, Operator.NOT_IN})

WHERE_KEYWORD = 'WHERE'
PLACEHOLDER_PREFIX = '$'

# Rendered in place of a membership test that has nothing to test against
EMPTY_MEMBERSHIP_VALUE = "''"
