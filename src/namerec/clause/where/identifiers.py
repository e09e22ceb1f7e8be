"""Identifier normalization shared by every builder."""


def normalize_identifier(name: str | None) -> str:
    """
    Fold an identifier to lower case.

    No quoting or escaping is applied; ``None`` becomes an empty string.

    Examples:
        >>> normalize_identifier('DESCRIPTION')
        'description'
    """
    if not name:
        return ''
    return str(name).lower()


def qualify(source: str | None, name: str | None) -> str:
    """
    Render ``source.name``, or just ``name`` when there is no source alias.

    Examples:
        >>> qualify('Contracts', 'endS_at')
        'contracts.ends_at'
        >>> qualify('', 'id')
        'id'
    """
    column = normalize_identifier(name)
    alias = normalize_identifier(source)
    if alias:
        return f'{alias}.{column}'
    return column
