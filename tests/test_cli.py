"""Tests for the build-where console script."""

import json

from typer.testing import CliRunner

from namerec.clause.scripts.build_where import app

runner = CliRunner()


def test_list_input():
    specs = [
        {'field': 'name', 'value': 'Alejandro', 'connector': 'OR'},
        {'field': 'id', 'op': 'IN', 'value': [1, 4, 9]},
        {'field': 'begins_at', 'op': 'BETWEEN', 'from': '2020-01-01', 'to': '2020-12-31'},
    ]
    result = runner.invoke(app, [], input=json.dumps(specs))

    assert result.exit_code == 0, result.output
    sql, args = result.stdout.strip().splitlines()
    assert sql == 'WHERE name = $1 OR id IN (1,4,9) AND begins_at BETWEEN $2 AND $3'
    assert json.loads(args) == ['Alejandro', '2020-01-01', '2020-12-31']


def test_document_with_order_by():
    document = {
        'where': [{'field': 'is_active', 'value': True}],
        'order_by': [{'field': 'id', 'source': 'c', 'direction': 'DESC'}],
    }
    result = runner.invoke(app, [], input=json.dumps(document))

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ['WHERE is_active = $1 ORDER BY c.id DESC', '[true]']


def test_input_file(tmp_path):
    path = tmp_path / 'filters.json'
    path.write_text(json.dumps([{'field': 'id', 'value': 1}]))

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines()[0] == 'WHERE id = $1'


def test_invalid_spec_reports_path():
    result = runner.invoke(app, [], input=json.dumps([{'field': 'id', 'op': 'LIKE', 'value': 1}]))

    assert result.exit_code == 1
    assert "Unknown operator: 'LIKE'" in result.output
    assert 'at path: where[0].op' in result.output


def test_invalid_json():
    result = runner.invoke(app, [], input='{not json')

    assert result.exit_code == 1
    assert 'Invalid JSON' in result.output


def test_empty_input():
    result = runner.invoke(app, [], input='  ')

    assert result.exit_code == 1
    assert 'No input provided' in result.output


def test_placeholder_text_in_literal_passes_validation():
    result = runner.invoke(app, [], input=json.dumps([{'field': 'tag', 'op': 'IN', 'value': ['$5 off']}]))

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["WHERE tag IN ('$5 off')", '[]']
