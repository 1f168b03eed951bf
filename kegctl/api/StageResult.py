"""Result object returned by every kegctl ``cmd_*`` function."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Deferred outcome of a kegctl command.

    ``cmd_paths``, ``cmd_tap``, ``cmd_uses`` and friends return this without
    touching the prefix. Nothing runs until ``progress_callback`` is iterated,
    either by the CLI (which prints ``announce``, each progress message, then
    ``result`` and the validated ``output``) or by ``run_cmd`` in the tests.

    The callback fills in ``result``, ``output`` and ``success`` before it is
    exhausted; ``output`` must match the command's registered output schema.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
