"""
Interactive column review

Shows which source column feeds each contact field and lets the user
accept the detection or pin fields to other columns.
"""

from typing import Any, Dict, List, Optional

from rich.prompt import Confirm, Prompt
from rich.table import Table

from ..banner import console
from .row_mapper import RowMapper


# Friendly display names, in prompt order
FRIENDLY = {
    'first_name':     'First Name',
    'last_name':      'Last Name',
    'full_name':      'Full Name',
    'email':          'Email',
    'phone':          'Phone',
    'address':        'Address',
    'city':           'City',
    'province':       'Province',
    'postal_code':    'Postal Code',
    'date_of_birth':  'Date of Birth',
    'borrower_stage': 'Borrower Stage',
    'partner_type':   'Partner Type',
    'lead_source':    'Lead Source',
    'campaign':       'Campaign',
}

SKIP_WORDS = {'-', 'none', 'skip'}


class InteractiveMapper:
    """
    Interactive column review with Rich UI.

    Example:
        reviewer = InteractiveMapper(row_mapper, headers, sample_records)
        overrides = reviewer.review()
    """

    def __init__(
        self,
        row_mapper: RowMapper,
        source_headers: List[str],
        sample_records: Optional[List[Dict[str, Any]]] = None
    ):
        self.row_mapper = row_mapper
        self.source_headers = source_headers
        self.sample_records = sample_records or []

    def review(self) -> Dict[str, Optional[str]]:
        """
        Show the detected mapping and collect overrides.

        Returns:
            Dict of {target field: header or None}; empty if the detection was accepted
        """
        detected = self.row_mapper.detect(self.source_headers)

        console.print()
        console.rule("[bold cyan]Column Mapping[/bold cyan]", style="cyan")
        self._show_source_columns()
        console.print()
        self._show_detected(detected)

        if Confirm.ask("\n[cyan]Use detected mapping?[/cyan]", default=True):
            console.print("[green]☉ Detected mapping accepted[/green]")
            return {}

        console.print("[dim]Type a column [bold]#[/bold] or [bold]name[/bold] · Enter = keep · '-' = leave empty[/dim]\n")

        overrides: Dict[str, Optional[str]] = {}
        for target, label in FRIENDLY.items():
            current = detected.get(target)
            choice = self._map_field(label, current)
            if choice != current:
                overrides[target] = choice

        return overrides

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _show_source_columns(self):
        """Display source columns with sample data."""
        table = Table(title="Source Columns", show_header=True)
        table.add_column("#", style="dim", width=4)
        table.add_column("Column Name", style="cyan bold", width=25)
        table.add_column("Sample Values", style="white", overflow="fold")

        for i, header in enumerate(self.source_headers, 1):
            samples = []
            for record in self.sample_records[:3]:
                val = record.get(header, "")
                if val != "" and val is not None:
                    val_str = str(val)[:40]
                    if len(str(val)) > 40:
                        val_str += "..."
                    samples.append(val_str)

            sample_text = " | ".join(samples) if samples else "[dim]<empty>[/dim]"
            table.add_row(f"{i}.", str(header), sample_text)

        console.print(table)

    def _show_detected(self, detected: Dict[str, Optional[str]]):
        table = Table(title="Detected Mapping", show_header=True, border_style="cyan")
        table.add_column("Field", style="cyan", width=16)
        table.add_column("Source Column", style="green")

        for target, label in FRIENDLY.items():
            source = detected.get(target)
            table.add_row(label, str(source) if source is not None else "[dim]-[/dim]")

        console.print(table)

    def _map_field(self, field_name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Map a single field interactively.

        Returns:
            Selected source column name, or None to leave the field empty
        """
        while True:
            user_input = Prompt.ask(
                f"  [cyan]{field_name}[/cyan] →",
                default=default or "",
                show_default=bool(default)
            ).strip()

            if not user_input:
                return default

            if user_input.lower() in SKIP_WORDS:
                console.print("  [dim]— left empty[/dim]")
                return None

            if user_input == default:
                return default

            if user_input.isdigit():
                index = int(user_input) - 1
                if 0 <= index < len(self.source_headers):
                    selected = self.source_headers[index]
                    console.print(f"  [green]☉ {selected}[/green]")
                    return selected
                console.print(f"  [red]☿ Invalid — must be 1–{len(self.source_headers)}[/red]")
                continue

            if user_input in self.source_headers:
                console.print(f"  [green]☉ {user_input}[/green]")
                return user_input

            matches = [h for h in self.source_headers if user_input.lower() in str(h).lower()]
            if len(matches) == 1:
                console.print(f"  [green]☉ {matches[0]}[/green]")
                return matches[0]
            elif matches:
                console.print(f"  [yellow]Did you mean:[/yellow] {', '.join(map(str, matches[:5]))}")
            else:
                short = ', '.join(map(str, self.source_headers[:5]))
                more = f' (+{len(self.source_headers)-5} more)' if len(self.source_headers) > 5 else ''
                console.print(f"  [red]☿ Not found:[/red] '{user_input}'")
                console.print(f"  [dim]Columns: {short}{more}[/dim]")
