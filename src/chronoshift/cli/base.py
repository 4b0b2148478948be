from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import Any

import typer

from ..instant import Instant
from ..tz import DSTWindow

_LOGGING_CONFIGURED = False


def configure_logging(level: int = logging.INFO) -> None:
    """Configure CLI-wide logging.

    Sets up basic logging configuration on first call. Later calls only
    adjust the root level (used by --verbose).

    Args:
        level: Logging level (defaults to INFO).

    Side Effects:
        - Configures Python logging module globally.
        - Sets module-level flag to prevent reconfiguration.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        logging.getLogger().setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration.

    Args:
        name: Logger name. Uses module name if None.

    Returns:
        Configured Logger instance.
    """
    return logging.getLogger(name)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
) -> Generator[None, None, None]:
    """Provide consistent exception handling for CLI operations.

    Context manager that catches exceptions, logs them, displays user-friendly
    error messages, and exits with code 1. Re-raises typer.Exit to allow
    normal CLI exit flow.

    Args:
        operation: Human-readable operation name for error messages.
        logger: Logger instance. Defaults to module logger if None.

    Raises:
        typer.Exit: Always exits with code 1 on exception (except typer.Exit
            which is re-raised).

    Logs:
        - ERROR: "Error during {operation}" with full exception traceback.

    User Output:
        - Prints error message via typer.secho() in red: "✗ {operation} failed: {exc}".
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(1) from exc


def format_value(value: Any) -> str:
    """Render a single engine value for display."""
    if value is None:
        return "-"
    if isinstance(value, Instant):
        return value.isoformat()
    if isinstance(value, DSTWindow):
        return f"{format_value(value.start)} -> {format_value(value.end)}"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_result(result: dict[str, Any], *, operation: str) -> str:
    """Format a command's result payload into CLI-friendly text.

    Renders a status line followed by one "key: value" line per entry. A
    "message" entry is shown last as a note.

    Args:
        result: Mapping of field name to engine value.
        operation: Operation name shown on the status line.

    Returns:
        Formatted string ready for CLI display.
    """
    lines = [f"✓ {operation}"]
    for key, value in result.items():
        if key != "message":
            lines.append(f"  {key}: {format_value(value)}")
    if result.get("message"):
        lines.append(f"  ℹ {result['message']}")
    return "\n".join(lines)


class BaseCLI:
    """Utility base class for CLI command groups."""

    def __init__(self) -> None:
        self.logger = get_logger(__name__)

    def handle_cli_operation(
        self,
        *,
        operation: str,
        op_callable: Callable[[], dict[str, Any]],
    ) -> dict[str, Any]:
        """Run an operation with consistent logging, formatting, and errors.

        Args:
            operation: Human-readable operation name for error handling.
            op_callable: Callable that performs the operation and returns
                a result mapping.

        Returns:
            Result from op_callable.

        User Output:
            - Prints formatted result via typer.echo().
            - Error messages handled by handle_errors context manager.
        """
        with handle_errors(operation, logger=self.logger):
            result = op_callable()

        typer.echo(format_result(result, operation=operation))
        return result
