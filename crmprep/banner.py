"""
Banner and UI components for CRM Prep
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from core._version import __version__

# Global console instance
console = Console()


TAGLINE = "Turn any contact spreadsheet into a CRM-ready CSV"


def show_banner():
    """Display ASCII art banner"""
    art = (
        "[bold cyan]"
        " ██████╗██████╗ ███╗   ███╗    ██████╗ ██████╗ ███████╗██████╗ \n"
        "██╔════╝██╔══██╗████╗ ████║    ██╔══██╗██╔══██╗██╔════╝██╔══██╗\n"
        "██║     ██████╔╝██╔████╔██║    ██████╔╝██████╔╝█████╗  ██████╔╝\n"
        "██║     ██╔══██╗██║╚██╔╝██║    ██╔═══╝ ██╔══██╗██╔══╝  ██╔═══╝ \n"
        "╚██████╗██║  ██║██║ ╚═╝ ██║    ██║     ██║  ██║███████╗██║     \n"
        " ╚═════╝╚═╝  ╚═╝╚═╝     ╚═╝    ╚═╝     ╚═╝  ╚═╝╚══════╝╚═╝     "
        "[/bold cyan]"
    )
    panel = Panel(
        f"{art}\n\n[dim]{TAGLINE}[/dim]\n[dim]v{__version__}[/dim]",
        border_style="cyan",
        padding=(1, 3),
    )
    console.print(panel)


def show_step(step: int, title: str, description: str = ""):
    """Show a step header"""
    console.print()
    header = f"[bold cyan]Step {step}: {title}[/bold cyan]"
    if description:
        console.print(f"{header}\n[dim]{description}[/dim]")
    else:
        console.print(header)


def show_success(message: str):
    console.print(f"☉ [green]{message}[/green]")


def show_error(message: str):
    console.print(f"☿ [red]{message}[/red]")


def show_warning(message: str):
    console.print(f"▲ [yellow]{message}[/yellow]")


def show_info(message: str):
    console.print(f"◈ [blue]{message}[/blue]")


def show_preview_table(rows: list, columns: list, limit: int = 5, title: str = ""):
    """Display preview of row dicts in a table"""
    table = Table(title=title or None, show_header=True, header_style="bold cyan")

    for column in columns:
        table.add_column(str(column)[:20], overflow="fold")  # Truncate long headers

    for row in rows[:limit]:
        table.add_row(*[str(row.get(c, ""))[:30] for c in columns])  # Truncate long values

    console.print(table)
    if len(rows) > limit:
        console.print(f"[dim]… {len(rows) - limit} more rows[/dim]")


def show_mapping_table(summary: dict, unmapped: list):
    """Show which source column feeds each contact field"""
    table = Table(title="Column Mapping", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="cyan")
    table.add_column("Source Column", style="green")

    for target, header in summary.items():
        table.add_row(target, str(header))

    console.print(table)
    if unmapped:
        console.print(f"[dim]Unmapped: {', '.join(map(str, unmapped))}[/dim]")


def show_stage_distribution(records: list):
    """Show borrower stage counts"""
    distribution = {}
    for record in records:
        distribution[record.borrower_stage] = distribution.get(record.borrower_stage, 0) + 1

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Borrower Stage", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Percentage", justify="right")

    total = sum(distribution.values())
    for stage, count in sorted(distribution.items(), key=lambda x: x[1], reverse=True):
        percentage = f"{count/total*100:.1f}%" if total > 0 else "0%"
        table.add_row(stage, str(count), percentage)

    console.print(table)


def show_export_summary(records_exported: int, output_path: str, extra_columns: int = 0):
    """Show export summary"""
    panel = Panel(
        f"[bold green]Export Complete![/bold green]\n\n"
        f"Records exported: [white]{records_exported}[/white]\n"
        f"Passthrough columns: [white]{extra_columns}[/white]\n"
        f"Output: [cyan]{output_path}[/cyan]",
        border_style="green",
        padding=(1, 2)
    )
    console.print(panel)
