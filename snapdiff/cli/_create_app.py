"""Create the snapdiff Typer CLI app."""

from typing import Annotated

import typer
from pydantic import ValidationError

from snapdiff.api.config.get_package_version import get_package_version
from snapdiff.api.config.SnapdiffConfig import SnapdiffConfig
from snapdiff.api.diff.DiffController import DiffController
from snapdiff.api.errors.InvocationError import InvocationError
from snapdiff.api.pipeline.CompareMode import CompareMode
from snapdiff.api.pipeline.PipelineController import PipelineController
from snapdiff.api.version.get_version_source import get_version_source
from snapdiff.cli.display.CLIDisplay import CLIDisplay
from snapdiff.utils.logger import configure_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"snapdiff {get_package_version()}")
        raise typer.Exit()


def _apply_overrides(
    config: SnapdiffConfig,
    engine: str | None,
    context_lines: int | None,
    ignore_whitespace: bool,
    source: str | None,
) -> SnapdiffConfig:
    """Merge command line overrides into the loaded config, revalidating the result."""
    data = config.to_dict()
    if engine is not None:
        data["diff"]["engine"] = engine
    if context_lines is not None:
        data["diff"]["context_lines"] = context_lines
    if ignore_whitespace:
        data["diff"]["ignore_whitespace"] = True
    if source is not None:
        data["source"]["type"] = source

    try:
        return SnapdiffConfig(**data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(x) for x in first.get("loc", ()))
        raise ValueError(f"Invalid option {field}: {first.get('msg', str(e))}") from e


def _create_app() -> typer.Typer:
    """Create and configure the snapdiff Typer app."""
    app = typer.Typer(
        name="snapdiff",
        help="Display the differences between unique snapshot versions of files.",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def snapdiff(
        ctx: typer.Context,
        paths: Annotated[list[str] | None, typer.Argument(help="Live file paths", show_default=False)] = None,
        all_mode: Annotated[
            bool,
            typer.Option(
                "--all/--last",
                help="--last (default): last unique version vs the live file. --all: every adjacent pair of versions.",
            ),
        ] = False,
        with_live: Annotated[
            bool, typer.Option("--with-live", help="With --all, also compare the newest version to the live file")
        ] = False,
        include_deleted: Annotated[
            bool, typer.Option("--include-deleted", help="Accept paths whose live file no longer exists")
        ] = False,
        engine: Annotated[str | None, typer.Option("--engine", "-e", help="Engine: auto, myers, bsdiff4")] = None,
        context_lines: Annotated[
            int | None, typer.Option("--context-lines", "-U", help="Unified diff context lines")
        ] = None,
        ignore_whitespace: Annotated[
            bool, typer.Option("--ignore-whitespace", "-w", help="Ignore whitespace differences")
        ] = False,
        source: Annotated[str | None, typer.Option("--source", help="Version source: httm, snapshot_dir")] = None,
        version: Annotated[  # noqa: ARG001
            bool,
            typer.Option("--version", "-V", help="Show version and exit", callback=_version_callback, is_eager=True),
        ] = False,
    ) -> None:
        """Display the difference between unique snapshot versions of each file."""
        display = CLIDisplay()

        if not paths:
            display.error(str(InvocationError("no file paths given")))
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(1)

        try:
            config = _apply_overrides(SnapdiffConfig.load(), engine, context_lines, ignore_whitespace, source)
            version_source = get_version_source(config.source)
        except ValueError as exc:
            display.error(f"Configuration error: {exc}")
            raise typer.Exit(1) from exc

        try:
            configure_logging(level=config.log.level)
        except OSError as exc:
            display.error(f"Configuration error: cannot open log file: {exc}")
            raise typer.Exit(1) from exc

        mode = CompareMode.ALL if all_mode else CompareMode.LAST
        if with_live and mode is not CompareMode.ALL:
            display.warning("--with-live only applies with --all")

        controller = PipelineController(
            version_source,
            DiffController(config.diff),
            display,
            allow_missing=include_deleted,
            with_live=with_live,
        )

        try:
            status = controller.run(paths, mode)
        except KeyboardInterrupt:
            raise typer.Exit(130) from None

        raise typer.Exit(status)

    return app
