"""Tap Typer app factory - list or register formula repositories."""

from typing import Annotated

import typer

from kegctl.api.tap.cmd_list import cmd_list
from kegctl.api.tap.cmd_tap import cmd_tap
from kegctl.cli._handle_stage_result import _handle_stage_result


def tap() -> typer.Typer:
    """Create and configure the tap Typer app."""
    app = typer.Typer(
        name="tap",
        help="Tap a formula repository, or list taps",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        name: Annotated[str | None, typer.Argument(help="Tap name as user/repo")] = None,
        url: Annotated[str | None, typer.Argument(help="Remote URL (default: GitHub)")] = None,
        custom_remote: Annotated[
            bool, typer.Option("--custom-remote", help="Install or change a tap with a custom remote")
        ] = False,
    ) -> None:
        """Tap a formula repository.

        With no arguments, list installed taps. With URL unspecified, the tap
        is recorded with https://github.com/<user>/homebrew-<repo>.
        """
        if name is None:
            _handle_stage_result(cmd_list)()
        else:
            _handle_stage_result(cmd_tap)(name, url=url, custom_remote=custom_remote)

    return app
