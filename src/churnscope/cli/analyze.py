"""Main metrics command."""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..api import resolve_root
from ..exceptions import ChurnscopeError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from ..metrics import FileInfoAnalyzer
from . import app
from ._common import console, err_console, resolve_config


class OutputFormat(str, Enum):
    rich = "rich"
    json = "json"
    csv = "csv"
    quiet = "quiet"


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Repository root to analyze (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.rich,
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
    commit_count: Optional[int] = typer.Option(
        None,
        "--commit-count",
        help="Size of the commit-count churn window (default: 100)",
        min=1,
    ),
    period_days: Optional[int] = typer.Option(
        None,
        "--period-days",
        help="Span of the time churn window in days (default: 90)",
        min=1,
    ),
    no_commit_graph: bool = typer.Option(
        False,
        "--no-commit-graph",
        help="Do not refresh git's commit-graph file before analysis",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    batch_size: Optional[int] = typer.Option(
        None,
        "--batch-size",
        help="Paths per ls-files / wc invocation",
        min=1,
        hidden=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also write logs to this file", hidden=True
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """
    Compute lines of code, last commit time and churn for every file.

    Churn is measured over the last 100 commits or the last 90 days before
    the newest commit, whichever covers more commits.

    [bold cyan]Examples:[/bold cyan]

      churnscope

      churnscope -C /path/to/repo --format json

      churnscope --commit-count 200 --period-days 30
    """
    if ctx.invoked_subcommand is not None:
        return

    from .. import __version__

    if version:
        console.print(f"[bold cyan]churnscope[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    logger = get_logger()

    try:
        settings = resolve_config(
            config=config,
            commit_count=commit_count,
            period_days=period_days,
            batch_size=batch_size,
            no_commit_graph=no_commit_graph,
            verbose=verbose,
            quiet=quiet,
        )
        setup_logging(settings.verbosity, log_file=str(log_file) if log_file else None)

        target = resolve_root(path or Path.cwd())

        formatter = get_formatter(output_format.value)

        if output_format is OutputFormat.rich and not settings.quiet:
            with err_console.status("Starting...") as status:
                analyzer = FileInfoAnalyzer(
                    target, config=settings, on_progress=lambda message: status.update(message)
                )
                result = analyzer.run()
        else:
            result = FileInfoAnalyzer(target, config=settings).run()

        formatter.render(result)

    except typer.Exit:
        raise

    except ChurnscopeError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)
