"""Tests for the static statement builders."""

import pytest

from namerec.clause import ClauseConfig
from namerec.clause import OrderDirection
from namerec.clause import SortField
from namerec.clause import build_insert
from namerec.clause import build_order_by
from namerec.clause import build_select_fields
from namerec.clause import build_update_by_id
from namerec.clause import columns_aliased
from namerec.clause import set_default_config

FIELDS = ['responsable', 'country', 'user_id', 'account']


@pytest.mark.parametrize(
    ('table', 'fields', 'expected'),
    [
        (
            'cashboxes',
            FIELDS,
            'INSERT INTO cashboxes (id,responsable,country,user_id,account) '
            'VALUES ($1,$2,$3,$4,$5) RETURNING created_at',
        ),
        ('nothing', [], 'INSERT INTO nothing (id,) VALUES ($1,) RETURNING created_at'),
        ('one', ['one_field'], 'INSERT INTO one (id,one_field) VALUES ($1,$2) RETURNING created_at'),
    ],
    ids=['many_fields', 'no_fields', 'one_field'],
)
def test_build_insert(table, fields, expected):
    assert build_insert(table, fields) == expected


@pytest.mark.parametrize(
    ('table', 'fields', 'expected'),
    [
        (
            'cashboxes',
            FIELDS,
            'UPDATE cashboxes SET responsable = $1, country = $2, user_id = $3, account = $4, '
            'updated_at = now() WHERE id = $5',
        ),
        ('nothing', [], ''),
        ('one', ['one_field'], 'UPDATE one SET one_field = $1, updated_at = now() WHERE id = $2'),
    ],
    ids=['many_fields', 'no_fields', 'one_field'],
)
def test_build_update_by_id(table, fields, expected):
    assert build_update_by_id(table, fields) == expected


@pytest.mark.parametrize(
    ('table', 'fields', 'expected'),
    [
        ('cashboxes', FIELDS, 'SELECT responsable, country, user_id, account FROM cashboxes'),
        ('nothing', [], ''),
        ('one', ['one_field'], 'SELECT one_field FROM one'),
    ],
    ids=['many_fields', 'no_fields', 'one_field'],
)
def test_build_select_fields(table, fields, expected):
    assert build_select_fields(table, fields) == expected


@pytest.mark.parametrize(
    ('sorts', 'expected'),
    [
        ([SortField('id'), SortField('begins_at')], 'ORDER BY id ASC, begins_at ASC'),
        (
            [SortField('id', direction=OrderDirection.DESC), SortField('begins_at', direction=OrderDirection.ASC)],
            'ORDER BY id DESC, begins_at ASC',
        ),
        ([SortField('id', source='a'), SortField('begins_at', source='b')], 'ORDER BY a.id ASC, b.begins_at ASC'),
        ([SortField('id')], 'ORDER BY id ASC'),
        ([], ''),
    ],
    ids=['default_order', 'explicit_order', 'with_alias', 'one_field', 'no_fields'],
)
def test_build_order_by(sorts, expected):
    assert build_order_by(sorts) == expected


@pytest.mark.parametrize(
    ('alias', 'fields', 'expected'),
    [
        ('b', ['title', 'slug', 'content', 'poster'], 'b.id, b.title, b.slug, b.content, b.poster, b.created_at, b.updated_at'),
        ('nothing', [], ''),
        ('one', ['one_field'], 'one.id, one.one_field, one.created_at, one.updated_at'),
    ],
    ids=['many_fields', 'no_fields', 'one_field'],
)
def test_columns_aliased(alias, fields, expected):
    assert columns_aliased(fields, alias) == expected


class TestStatementNormalization:
    """Identifiers are lower-cased like in WHERE clauses."""

    def test_order_by_lowercases_and_accepts_strings(self):
        sorts = [SortField('ID', source='A', direction='desc'), SortField('Name', direction='sideways')]
        assert build_order_by(sorts) == 'ORDER BY a.id DESC, name ASC'

    def test_select_lowercases(self):
        assert build_select_fields('Users', ['ID', 'Email']) == 'SELECT id, email FROM users'


class TestStatementConfig:
    """Bookkeeping column names come from ClauseConfig."""

    CONFIG = ClauseConfig(
        identity_column='uid',
        created_at_column='inserted_on',
        updated_at_column='changed_on',
        update_timestamp='CURRENT_TIMESTAMP',
    )

    def test_explicit_config(self):
        assert build_insert('t', ['a'], config=self.CONFIG) == 'INSERT INTO t (uid,a) VALUES ($1,$2) RETURNING inserted_on'
        assert build_update_by_id('t', ['a'], config=self.CONFIG) == (
            'UPDATE t SET a = $1, changed_on = CURRENT_TIMESTAMP WHERE uid = $2'
        )
        assert columns_aliased(['a'], 'x', config=self.CONFIG) == 'x.uid, x.a, x.inserted_on, x.changed_on'

    def test_default_config_is_used(self):
        set_default_config(self.CONFIG)
        assert columns_aliased(['a'], 'x') == 'x.uid, x.a, x.inserted_on, x.changed_on'
