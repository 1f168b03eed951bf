"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from kegctl.api.config.get_package_version import get_package_version
    from kegctl.cli._create_app import _create_app
    from kegctl.logging_config import setup_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"kegctl {get_package_version()}")
        return 0

    setup_logging()

    app = _create_app()
    try:
        rc = app(argv, standalone_mode=False)
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return rc if isinstance(rc, int) else 0
