"""WHERE clause assembly.

- `assembler`: `build_where()` walks the condition sequence and tracks
  placeholders and groups
- `operators`: `render_condition()` renders one condition per operator
- `identifiers`: lower-case identifier normalization

Example:
    >>> from namerec.clause import Condition
    >>> from namerec.clause.where import build_where
    >>> build_where([Condition(name='id', value=1)])
    WhereClause(sql='WHERE id = $1', args=[1])
"""

from namerec.clause.where.assembler import build_where
from namerec.clause.where.identifiers import normalize_identifier
from namerec.clause.where.identifiers import qualify
from namerec.clause.where.operators import coerce_connector
from namerec.clause.where.operators import coerce_operator
from namerec.clause.where.operators import format_literal
from namerec.clause.where.operators import render_condition
from namerec.clause.where.operators import render_membership

__all__ = [
    'build_where',
    'coerce_connector',
    'coerce_operator',
    'format_literal',
    'normalize_identifier',
    'qualify',
    'render_condition',
    'render_membership',
]
