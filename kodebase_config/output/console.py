# Kodebase Console Output
# Rich-based console output for user-friendly display

from collections.abc import Mapping, Sequence
from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from kodebase_config.migration import ConfigDeprecationWarning
from kodebase_config.schema import KodebaseConfig
from kodebase_config.validation import ConfigValidationIssue


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for configuration commands.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(no_color=not colored, highlight=colored)

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{message}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{message}[/blue]")

    def print_issues(self, issues: Sequence[ConfigValidationIssue], *, title: str = "Validation Issues") -> None:
        """
        Print validation issues as a table.

        Args:
            issues: Issues to display.
            title: Table title.
        """
        if not issues:
            self.print_success("No validation issues")
            return

        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("Field", style="cyan")
        table.add_column("Problem", style="red")

        for issue in issues:
            table.add_row(escape(issue.path), escape(issue.message))

        self._console.print()
        self._console.print(table)
        self._console.print()

    def print_deprecations(self, warnings: Sequence[ConfigDeprecationWarning]) -> None:
        """Print deprecation warnings collected during migration."""
        if not warnings:
            if self.verbose:
                self._console.print("[dim]No deprecated fields found[/dim]")
            return

        for warning in warnings:
            self.print_warning(str(warning))

    def print_config(self, config: KodebaseConfig, *, title: str = "Configuration") -> None:
        """Print a resolved configuration as a tree."""
        tree = Tree(f"[bold]{title}[/bold]")
        _add_branch(tree, config.to_dict())
        self._console.print(tree)

    def print_presets(self, descriptions: Mapping[str, str]) -> None:
        """Print available presets with their descriptions."""
        table = Table(title="Presets", show_header=True, header_style="bold")
        table.add_column("Name", style="cyan")
        table.add_column("Description")

        for name, description in descriptions.items():
            table.add_row(name, description)

        self._console.print(table)

    def print_config_summary(self, config_path: str, preset: str) -> None:
        """Print summary after writing a settings file."""
        self._console.print(
            Panel(
                f"[bold]Config:[/bold] {config_path}\n[bold]Preset:[/bold] {preset}",
                title="Kodebase Configuration",
                border_style="green",
            )
        )


def _add_branch(node: Tree, data: Mapping[str, Any]) -> None:
    """Add mapping entries to a tree node, recursing into nested mappings."""
    for key, value in data.items():
        if isinstance(value, Mapping):
            _add_branch(node.add(f"[cyan]{key}[/cyan]"), value)
        elif isinstance(value, list):
            rendered = escape(", ".join(str(item) for item in value)) if value else "[dim](empty)[/dim]"
            node.add(f"[cyan]{key}[/cyan]: {rendered}")
        else:
            node.add(f"[cyan]{key}[/cyan]: {escape(repr(value))}")


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
