"""Exceptions raised by the layers around the clause assembler.

The assembler and operator renderer themselves never raise: malformed
descriptors degrade to inert SQL fragments. Strict checking is done by the
parser (while reading filter specs) and by the validation pass (after a
clause has been assembled).
"""

__all__ = [
    'ClauseError',
    'ClauseValidationError',
    'ConditionSyntaxError',
    'MissingFieldError',
    'UnknownOperatorError',
]


class ClauseError(ValueError):
    """Base class for clause building errors."""

    def __init__(self, message: str, path: str | None = None) -> None:
        """
        Initialize ClauseError.

        Args:
            message: Error message
            path: Path in the filter spec where error occurred (e.g., 'where[2].op')
        """
        self.message = message
        self.path = path
        if path:
            super().__init__(f'{message} (at {path})')
        else:
            super().__init__(message)


class ConditionSyntaxError(ClauseError):
    """Raised when a filter spec cannot be turned into a condition."""


class MissingFieldError(ConditionSyntaxError):
    """Raised when a required key is missing from a filter spec."""

    def __init__(self, field: str, path: str = '', context: str = '') -> None:
        """
        Initialize MissingFieldError.

        Args:
            field: Name of the missing required key
            path: Path where the key was expected
            context: Additional context about why the key is required
        """
        self.field = field
        self.context = context

        message = f"Missing required field: '{field}'"
        if context:
            message += f' ({context})'

        super().__init__(message, path)


class UnknownOperatorError(ConditionSyntaxError):
    """Raised when an operator, connector or direction is not recognized."""

    def __init__(self, operator: str, path: str = '', supported: list[str] | None = None) -> None:
        """
        Initialize UnknownOperatorError.

        Args:
            operator: The unknown token that was encountered
            path: Path to the problematic key
            supported: List of supported tokens
        """
        self.operator = operator
        self.supported = supported or []

        message = f"Unknown operator: '{operator}'"
        if self.supported:
            message += f". Supported: {', '.join(self.supported)}"

        super().__init__(message, path)


class ClauseValidationError(ClauseError):
    """Raised when an assembled clause does not pass the validation pass."""

    def __init__(self, message: str, sql: str = '', original_error: Exception | None = None) -> None:
        """
        Initialize ClauseValidationError.

        Args:
            message: Error message
            sql: The SQL text that failed validation
            original_error: Parser error that caused the failure, if any
        """
        self.sql = sql
        self.original_error = original_error
        super().__init__(message)
