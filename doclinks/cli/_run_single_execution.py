"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from typing import TypeVar

import typer

from doclinks.api.validate_output import validate_output

from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    display_format: str,
    result_printer: Callable[[dict], list[str]] | None = None,
) -> None:
    """Run command once and display result.

    Commands must handle all exceptions internally and format errors
    via their domain-specific output schema.

    Raises:
        typer.Exit: Always; code 0 on success, 1 otherwise
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress - generator yielding (progress_percent, message)
    for progress_percent, message in result.progress_callback(result):
        display.info(f"[dim]{display.timestamp()}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Validation failure is a programming error - fail loudly
    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    if display_format == "text" and result_printer is not None:
        display.lines_output(result_printer(result.output))
    else:
        display.json_output(result.output, format="json" if display_format == "json" else "yaml")

    raise typer.Exit(code=0 if result.success else 1)
