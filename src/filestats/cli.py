"""Command-line interface for filestats"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from . import __version__
from .api import run
from .config import OUTPUT_FORMATS, load_config
from .exceptions import FileStatsError
from .formatters import get_formatter
from .logging_config import configure_from

app = typer.Typer(
    name="filestats",
    help="filestats - per-extension file statistics",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]filestats[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.command()
def scan(
    path: Path = typer.Argument(
        ...,
        help="Directory to scan",
        exists=True,
        file_okay=True,
        dir_okay=True,
        readable=True,
    ),
    recursive: Optional[bool] = typer.Option(
        None,
        "--recursive/--no-recursive",
        "-r",
        help="Descend into subdirectories (default: from config, else off)",
    ),
    max_depth: Optional[int] = typer.Option(
        None,
        "--max-depth",
        help="Deepest directory level to visit when recursive",
        min=1,
    ),
    threads: Optional[int] = typer.Option(
        None,
        "--threads",
        "-t",
        help="Number of worker threads (default: 1)",
        min=1,
    ),
    include_ext: Optional[str] = typer.Option(
        None,
        "--include-ext",
        help="Comma-separated extensions to include, e.g. java,sh",
    ),
    exclude_ext: Optional[str] = typer.Option(
        None,
        "--exclude-ext",
        help="Comma-separated extensions to exclude",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: plain (default), rich, json, xml",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to this file",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Collect per-extension file statistics.

    [bold cyan]Examples:[/bold cyan]

      filestats /path/to/tree

      filestats . --recursive --threads 4

      filestats . -r --include-ext java,sh --format json

      filestats . -r --max-depth 2 --format xml --output stats.xml
    """
    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    if include_ext and exclude_ext:
        console.print(
            "[red]Error:[/red] Both --include-ext and --exclude-ext are specified, please pick one"
        )
        raise typer.Exit(1)

    if fmt is not None and fmt not in OUTPUT_FORMATS:
        console.print(f"[red]Error:[/red] --format must be one of: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(1)

    try:
        settings = load_config(
            config_file=config,
            workers=threads,
            recursive=recursive,
            max_depth=max_depth,
            include_extensions=include_ext,
            exclude_extensions=exclude_ext,
            output_format=fmt,
            verbose=verbose,
            quiet=quiet,
        )
        # Level comes from the merged verbosity, not just -v/-q
        logger = configure_from(settings, log_file=str(log_file) if log_file else None)
        logger.debug(f"Loaded settings: {settings}")

        result = run(path, settings)
        formatter = get_formatter(settings.output_format)

        # Structured formats land next to the scanned tree unless told otherwise
        target = output
        if target is None and formatter.file_extension in ("json", "xml") and path.is_dir():
            target = path / f"result.{formatter.file_extension}"

        if target is None:
            formatter.render(result)
        else:
            target.write_text(formatter.format(result), encoding="utf-8")
            console.print(f"[green]Report written to {target}[/green]")

    except FileStatsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
