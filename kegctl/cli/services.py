"""Services Typer app factory."""

from typing import Annotated

import typer

from kegctl.api.services.cmd_paths import cmd_paths
from kegctl.api.services.cmd_user import cmd_user
from kegctl.cli._handle_stage_result import _handle_stage_result


def services() -> typer.Typer:
    """Create and configure the services Typer app."""
    app = typer.Typer(
        name="services",
        help="Init system and service definition paths",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Services operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="paths")
    def paths_cmd() -> None:
        """Show init system, domain target and service paths."""
        _handle_stage_result(cmd_paths)()

    @app.command(name="user")
    def user_cmd(
        pid: Annotated[int | None, typer.Option("--pid", "-p", help="Process ID to look up")] = None,
    ) -> None:
        """Show the user owning a process (default: current user)."""
        _handle_stage_result(cmd_user)(pid=pid)

    return app
