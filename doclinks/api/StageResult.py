"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands to the CLI.

    ``announce`` is shown before any work starts. Draining
    ``progress_callback(result)`` does the work, yielding ``(fraction, message)``
    pairs, and must leave ``result``, ``output`` and ``success`` filled in.
    The defaults only describe a command whose generator has not run yet.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
