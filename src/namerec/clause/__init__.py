"""
namerec.clause - dynamic SQL clause assembly

Turns an ordered list of filter conditions into a parameterized WHERE clause
with ``$n`` placeholders, plus a handful of static statement builders.
"""

from namerec.clause.binding import to_text_clause
from namerec.clause.config import ClauseConfig
from namerec.clause.config import get_default_config
from namerec.clause.config import reset_default_config
from namerec.clause.config import set_default_config
from namerec.clause.constants import Connector
from namerec.clause.constants import Operator
from namerec.clause.constants import OrderDirection
from namerec.clause.exceptions import ClauseError
from namerec.clause.exceptions import ClauseValidationError
from namerec.clause.exceptions import ConditionSyntaxError
from namerec.clause.exceptions import MissingFieldError
from namerec.clause.exceptions import UnknownOperatorError
from namerec.clause.parser import build_where_from_specs
from namerec.clause.parser import parse_conditions
from namerec.clause.parser import parse_sort_fields
from namerec.clause.statements import build_insert
from namerec.clause.statements import build_order_by
from namerec.clause.statements import build_select_fields
from namerec.clause.statements import build_update_by_id
from namerec.clause.statements import columns_aliased
from namerec.clause.types import Condition
from namerec.clause.types import SortField
from namerec.clause.types import WhereClause
from namerec.clause.validation import validate_clause
from namerec.clause.where import build_where
from namerec.clause.where import render_condition
from namerec.clause.where import render_membership

__version__ = '1.0'

__all__ = [
    # Core types
    'Condition',
    'SortField',
    'WhereClause',
    'Operator',
    'Connector',
    'OrderDirection',
    'ClauseConfig',
    # Exceptions
    'ClauseError',
    'ConditionSyntaxError',
    'MissingFieldError',
    'UnknownOperatorError',
    'ClauseValidationError',
    # WHERE assembly
    'build_where',
    'render_condition',
    'render_membership',
    # Statements
    'build_insert',
    'build_update_by_id',
    'build_select_fields',
    'build_order_by',
    'columns_aliased',
    # Parsing and validation
    'parse_conditions',
    'parse_sort_fields',
    'build_where_from_specs',
    'validate_clause',
    'to_text_clause',
    # Config
    'get_default_config',
    'set_default_config',
    'reset_default_config',
]
