"""
Console helpers for the Ruby import sorter.

All user-facing output goes through one rich Console.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

# Global console instance
console = Console()


def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{escape(title)}[/bold blue]\n[italic]{escape(subtitle)}[/italic]", expand=False))


def print_report_table(report: dict):
    """Print a summary table of a directory run."""
    table = Table(title="Sort Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="magenta")

    table.add_row("Processed", str(report.get("processed_count", 0)))
    table.add_row("Rewritten", str(report.get("rewritten_count", 0)))
    table.add_row("Unchanged", str(report.get("unchanged_count", 0)))
    table.add_row("Failed", str(report.get("failed_count", 0)))

    console.print(table)

    failures = report.get("failures", [])
    if failures:
        tree = Tree("[bold red]Failures[/bold red]")
        for failure in failures[:10]:
            tree.add(f"[yellow]{escape(failure['rel_path'])}[/yellow]: {escape(failure['error'])}")
        if len(failures) > 10:
            tree.add(f"[italic]... and {len(failures)-10} more[/italic]")
        console.print(tree)


def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}")


def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(msg)}")


def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {escape(msg)}", highlight=False, soft_wrap=True)
