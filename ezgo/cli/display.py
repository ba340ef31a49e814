"""Display components for CLI using Rich."""

from rich.markup import escape
from rich.table import Table

from ezgo.core.logger.logger import get_console
from ezgo.models.runtime import PostBuildResult

err_console = get_console()


def show_error(message: str) -> None:
    """Display a fatal error message."""
    err_console.print(f"[bold red]ezgo:[/] {escape(message)}")


def show_info(message: str) -> None:
    """Display an informational message."""
    err_console.print(f"[cyan]ezgo:[/] {escape(message)}")


def show_success(message: str) -> None:
    """Display a success message."""
    err_console.print(f"[bold green]ezgo:[/] {escape(message)}")


def show_post_build_result(result: PostBuildResult) -> None:
    """Display the libraries handled by the post-build step.

    Args:
        result: Result of resolve_and_copy.
    """
    if result.skipped or result.copy is None or not result.required:
        return

    table = Table(title="[bold]Runtime DLLs[/]", box=None)
    table.add_column("DLL", style="cyan")
    table.add_column("Status", style="white")

    copied = {path.name.lower() for path in result.copy.copied}
    missing = {name.lower() for name in result.copy.missing}
    for name in sorted(result.required, key=str.lower):
        key = name.lower()
        if key in copied:
            status = "[green]copied[/]"
        elif key in missing:
            status = "[yellow]not found[/]"
        elif name in result.copy.failed:
            status = f"[red]failed: {escape(result.copy.failed[name])}[/]"
        else:
            status = "[dim]-[/]"
        table.add_row(escape(name), status)

    err_console.print(table)
