"""CLI entry point for churnscope."""

import typer

app = typer.Typer(
    name="churnscope",
    help="churnscope - per-file size, recency and churn metrics from git history",
    add_completion=False,
    rich_markup_mode="rich",
)


from .analyze import main as _main_callback  # noqa: F401, E402
