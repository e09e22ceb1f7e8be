#!/usr/bin/env python3
"""Console script that turns JSON filter specs into a parameterized WHERE clause."""

import json
import logging
import sys
from typing import Annotated
from typing import Any

import typer

from namerec.clause.exceptions import ClauseError
from namerec.clause.parser import parse_conditions
from namerec.clause.parser import parse_sort_fields
from namerec.clause.statements import build_order_by
from namerec.clause.validation import format_sql
from namerec.clause.validation import validate_clause
from namerec.clause.where import build_where

app = typer.Typer(help='Build a parameterized WHERE clause from JSON filter specs.')


@app.command()
def build(
    input_file: Annotated[
        typer.FileText | None,
        typer.Argument(help='Input file (defaults to stdin)'),
    ] = None,
    validate: Annotated[
        bool,
        typer.Option('--validate/--no-validate', help='Parse the result with sqlglot before printing'),
    ] = True,
    pretty: Annotated[
        bool,
        typer.Option('--pretty/--no-pretty', help='Pretty print the SQL'),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option('--verbose', '-v', help='Log debug information to stderr'),
    ] = False,
) -> None:
    """
    Build a WHERE clause (and optional ORDER BY) from JSON.

    The input is either a list of condition specs or an object with a
    "where" list and an optional "order_by" list. The SQL is printed first,
    followed by the bound arguments as a JSON array.

    Examples:

        echo '[{"field": "id", "op": "IN", "value": [1, 2, 3]}]' | uv run build-where

        echo '{"where": [{"field": "name", "value": "Go"}], "order_by": ["id"]}' | uv run build-where
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    input_text = input_file.read() if input_file else sys.stdin.read()
    input_text = input_text.strip()

    if not input_text:
        typer.echo('Error: No input provided', err=True)
        raise typer.Exit(1)

    try:
        document = json.loads(input_text)
    except json.JSONDecodeError as e:
        typer.echo(f'Error: Invalid JSON: {e}', err=True)
        raise typer.Exit(1)

    try:
        sql, args = _build(document, validate)
    except ClauseError as e:
        typer.echo(f'Error: {e.message}', err=True)
        if e.path:
            typer.echo(f'  at path: {e.path}', err=True)
        raise typer.Exit(1)

    typer.echo(format_sql(sql) if pretty else sql)
    typer.echo(json.dumps(args, default=str))


def _build(document: Any, validate: bool) -> tuple[str, list[Any]]:
    """Assemble the clause text and arguments from a parsed JSON document."""
    if isinstance(document, dict):
        where_specs = document.get('where', [])
        sort_specs = document.get('order_by', [])
    else:
        where_specs = document
        sort_specs = []

    where = build_where(parse_conditions(where_specs))
    if validate:
        validate_clause(where)

    order_by = build_order_by(parse_sort_fields(sort_specs))
    sql = ' '.join(part for part in (where.sql, order_by) if part)
    return sql, where.args


def main() -> None:
    """Entry point for the script."""
    app()


if __name__ == '__main__':
    main()
