"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from snapdiff.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        rv = app(argv, prog_name="snapdiff", standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except click.exceptions.Abort:
        return 130
