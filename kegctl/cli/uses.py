"""Uses Typer app factory - show dependents of formulae."""

from typing import Annotated

import typer

from kegctl.api.uses.cmd_uses import cmd_uses
from kegctl.cli._handle_stage_result import _handle_stage_result


def uses() -> typer.Typer:
    """Create and configure the uses Typer app."""
    app = typer.Typer(
        name="uses",
        help="Show formulae that use all of the given formulae",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        formulae: Annotated[list[str] | None, typer.Argument(help="Formulae to find dependents of")] = None,
        recursive: Annotated[bool, typer.Option("--recursive", help="Resolve more than one level")] = False,
        installed: Annotated[bool, typer.Option("--installed", help="Only installed formulae")] = False,
        missing: Annotated[bool, typer.Option("--missing", help="Only formulae not installed")] = False,
        eval_all: Annotated[bool, typer.Option("--eval-all", help="Evaluate all available formulae")] = False,
        include_build: Annotated[bool, typer.Option("--include-build", help="Include :build dependencies")] = False,
        include_test: Annotated[bool, typer.Option("--include-test", help="Include :test dependencies")] = False,
        include_optional: Annotated[
            bool, typer.Option("--include-optional", help="Include :optional dependencies")
        ] = False,
        include_implicit: Annotated[
            bool, typer.Option("--include-implicit", help="Include implicit dependencies")
        ] = False,
        skip_recommended: Annotated[
            bool, typer.Option("--skip-recommended", help="Skip :recommended dependencies")
        ] = False,
    ) -> None:
        """Show formulae that specify FORMULAE as dependencies (intersection for several)."""
        if not formulae:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()
        if installed and missing:
            raise typer.BadParameter("--missing conflicts with --installed")

        _handle_stage_result(cmd_uses)(
            formulae,
            recursive=recursive,
            installed=installed,
            missing=missing,
            eval_all=eval_all,
            include_build=include_build,
            include_test=include_test,
            include_optional=include_optional,
            include_implicit=include_implicit,
            skip_recommended=skip_recommended,
        )

    return app
