"""Rich terminal formatter for churnscope."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..metrics.models import MetricsResult
from .base import BaseFormatter, display_path


def _churn_style(occurrence: int, number_of_commits: int) -> str:
    if number_of_commits == 0 or occurrence == 0:
        return "dim"
    share = occurrence / number_of_commits
    if share >= 0.25:
        return "red"
    elif share >= 0.10:
        return "yellow"
    return ""


class RichFormatter(BaseFormatter):
    """Summary panel followed by a per-file table."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def render(self, result: MetricsResult) -> None:
        self.console.print(self._summary(result))
        self.console.print(self._table(result))

    def format(self, result: MetricsResult) -> str:
        console = Console(width=self.console.width)
        with console.capture() as capture:
            console.print(self._summary(result))
            console.print(self._table(result))
        return capture.get()

    def _summary(self, result: MetricsResult) -> Panel:
        window = result.window
        if window is None:
            window_text = "[yellow]no commits[/yellow]"
        else:
            window_text = (
                f"{result.number_of_commits} commits after "
                f"[cyan]{window.oldest_commit_id[:10]}[/cyan] "
                f"({window.oldest_timestamp:%Y-%m-%d} to {window.latest_timestamp:%Y-%m-%d})"
            )
        lines = [
            f"[bold]Repository:[/bold] {escape(display_path(str(result.root)))}",
            f"[bold]Files:[/bold] {len(result.records)}",
            f"[bold]Churn window:[/bold] {window_text}",
        ]
        return Panel("\n".join(lines), title="[bold cyan]churnscope[/bold cyan]", expand=False)

    def _table(self, result: MetricsResult) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Path", overflow="fold")
        table.add_column("LOC", justify="right")
        table.add_column("Last commit")
        table.add_column("Commits", justify="right")
        table.add_column("+", justify="right", style="green")
        table.add_column("-", justify="right", style="red")

        for r in result.records:
            table.add_row(
                Text(display_path(r.path)),
                Text("n/a", style="dim") if r.lines_of_code is None else str(r.lines_of_code),
                Text(r.last_committed_at or "never", style="" if r.last_committed_at else "dim"),
                Text(str(r.occurrence), style=_churn_style(r.occurrence, r.number_of_commits)),
                str(r.additions),
                str(r.deletions),
            )
        return table
