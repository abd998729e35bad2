"""Rich terminal formatter for Context Frame."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..levels import MATURITY_LEVELS
from ..models import ScanResult, ScoreResult
from ..scorer import COMMIT_BONUS_MIN_COMMITS
from .base import BaseFormatter
from .markdown_formatter import score_bar

MAX_BROKEN_SHOWN = 10


def _level_style(level: int) -> str:
    if level <= 2:
        return "red"
    elif level <= 4:
        return "yellow"
    elif level <= 6:
        return "green"
    else:
        return "blue"


def _quality_style(score: float) -> str:
    if score >= 7:
        return "green"
    elif score >= 4:
        return "yellow"
    else:
        return "red"


class RichFormatter(BaseFormatter):
    """Terminal report: maturity ladder, quality, tool coverage and recommendations."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, scan_result: ScanResult, score: ScoreResult) -> None:
        self._print_report(self.console, scan_result, score)

    def format(self, scan_result: ScanResult, score: ScoreResult) -> str:
        # Render into a recording console so the report can be written to a file
        recorder = Console(record=True, width=100, file=io.StringIO())
        self._print_report(recorder, scan_result, score)
        return recorder.export_text()

    def _print_report(self, console: Console, scan_result: ScanResult, score: ScoreResult) -> None:
        level_style = _level_style(score.maturity_level)
        console.print(
            Panel(
                f"[bold {level_style}]Level {score.maturity_level}: {score.maturity_name}[/bold {level_style}]\n"
                f"[dim]{score.maturity_description}[/dim]",
                title="[bold cyan]CONTEXT FRAME[/bold cyan]",
                subtitle=f"[dim]{escape(scan_result.base_path)}[/dim]",
                expand=False,
            )
        )
        console.print()

        ladder = Table(title="Maturity Ladder", show_header=True, header_style="bold")
        ladder.add_column("Level", justify="right")
        ladder.add_column("Name")
        ladder.add_column("Status")
        for level in MATURITY_LEVELS:
            if level.level == score.maturity_level:
                status = f"[bold {level_style}]● current[/bold {level_style}]"
            elif level.level < score.maturity_level:
                status = "[green]✓[/green]"
            else:
                status = "[dim]·[/dim]"
            ladder.add_row(str(level.level), level.name, status)
        console.print(ladder)
        console.print()

        q_style = _quality_style(score.quality_score)
        console.print(
            f"[bold]Quality:[/bold] [{q_style}]{score.quality_score}/10[/{q_style}] "
            f"{score_bar(score.quality_score)}  "
            f"[dim]weight {score.total_weight}, commit bonus +{score.commit_bonus}[/dim]"
        )
        metrics = score.quality_metrics
        console.print(
            f"  [dim]sections {metrics.sections} · paths {metrics.file_paths} · "
            f"commands {metrics.commands} · constraints {metrics.constraints} · "
            f"words {metrics.word_count}[/dim]"
        )
        console.print()

        if score.tool_breakdown:
            tools = Table(title="Tool Coverage", show_header=True, header_style="bold")
            tools.add_column("Tool", style="cyan")
            tools.add_column("Weight", justify="right")
            tools.add_column("Files")
            for tool, breakdown in score.tool_breakdown.items():
                tools.add_row(escape(tool), str(breakdown.weight), escape("\n".join(breakdown.files)))
            console.print(tools)
        else:
            console.print("[yellow]No AI context files detected[/yellow]")
        console.print()

        refs = scan_result.reference_validation
        console.print(
            f"[bold]References:[/bold] {refs.resolved_references}/{refs.total_references} "
            f"resolved ({round(refs.resolution_rate * 100)}%)"
        )
        for issue in refs.broken_references[:MAX_BROKEN_SHOWN]:
            console.print(f"  [red]✗[/red] {escape(issue.source_file)} -> {escape(issue.reference)}")
        hidden = len(refs.broken_references) - MAX_BROKEN_SHOWN
        if hidden > 0:
            console.print(f"  [dim]... and {hidden} more[/dim]")

        if scan_result.commit_counts:
            mature = sum(
                1 for c in scan_result.commit_counts.values() if c >= COMMIT_BONUS_MIN_COMMITS
            )
            console.print(
                f"[bold]Commit history:[/bold] {len(scan_result.commit_counts)} files tracked, "
                f"{mature} with {COMMIT_BONUS_MIN_COMMITS}+ commits"
            )
        console.print()

        if score.recommendations:
            console.print("[bold]Recommendations:[/bold]")
            for i, rec in enumerate(score.recommendations, 1):
                console.print(f"  {i}. {rec}")
