"""
Centralized error handling utilities.

Low-level failures (pydantic validation, bad user input) are translated
into ChatRosterError subclasses that carry a user-facing message and a
recovery hint. The CLI layer renders them with `format_error_for_display`.

| Scenario | Use This |
|----------|----------|
| Config file fails pydantic validation | `raise wrap_pydantic_error(e, str(path)) from e` |
| Show an error in the CLI | `message, hint = format_error_for_display(e)` |
| Parse many inputs, report all failures | `collector = collect_errors("parse identities")` |
"""

import logging
from typing import Optional

from .base import ChatRosterError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, file_path: str) -> ChatRosterError:
    """
    Turn a pydantic ValidationError raised while loading `file_path` into a
    ConfigurationError.

    JSON syntax errors become ConfigFileInvalidError; everything else
    becomes ConfigValidationError naming the failing field (or
    "multiple fields" with one line per failure).
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError):
        return ConfigValidationError("unknown", None, str(error), file_path)

    errors = error.errors()
    syntax = [err for err in errors if err["type"] == "json_invalid"]
    if syntax:
        return ConfigFileInvalidError(file_path, syntax[0]["msg"].removeprefix("Invalid JSON: "))

    if len(errors) == 1:
        err = errors[0]
        return ConfigValidationError(_field_path(err), err.get("input"), err["msg"], file_path)

    lines = "\n".join(f"  - {_field_path(err)}: {err['msg']}" for err in errors)
    return ConfigValidationError(
        "multiple fields", None, f"{len(errors)} validation errors:\n{lines}", file_path
    )


def _field_path(err: dict) -> str:
    return ".".join(str(loc) for loc in err.get("loc", ())) or "unknown"


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ChatRosterError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Example:
        ```python
        collector = collect_errors("parse identities")

        for raw in values:
            with collector.try_operation(raw):
                users.append(User.parse(raw))

        if collector.has_errors:
            click.echo(collector.get_summary(), err=True)
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects multiple errors during batch operations.

    Only ChatRosterError is collected; anything else propagates.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, ChatRosterError]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str) -> "ErrorCollector._OperationContext":
        """
        Context manager for a single operation within the batch.

        Args:
            sub_operation: Description of this specific operation
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """
        Get a summary of collected errors.

        Returns:
            Multi-line summary string
        """
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        total = self.error_count + self.success_count
        summary = f"Failed to {self.operation}: {self.error_count} of {total} failed\n"
        for sub_op, error in self.errors:
            summary += f"  - {sub_op}: {error.user_message}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            if not isinstance(exc_val, ChatRosterError):
                return False

            logger.debug(f"{self.collector.operation}: {self.sub_operation} failed: {exc_val.technical_message}")
            self.collector.errors.append((self.sub_operation, exc_val))
            return True
