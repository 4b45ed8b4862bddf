"""
CRM Prep command line interface

Usage:
    crmprep                          # Interactive mode
    crmprep process contacts.xlsx    # Format a file
    crmprep profiles                 # List mapping profiles
    crmprep config                   # Show configuration status
    crmprep version                  # Show version
"""

import argparse
import logging
from typing import List, Optional

from rich.prompt import Confirm, Prompt

from core._version import __version__
from core.config import get_config
from core.errors import CRMPrepError
from core.logging import configure_logging
from core.models import EXPORT_COLUMNS
from .banner import (
    console,
    show_banner,
    show_error,
    show_export_summary,
    show_info,
    show_mapping_table,
    show_preview_table,
    show_stage_distribution,
    show_step,
    show_success,
    show_warning,
)
from .mappers import InteractiveMapper, PASSTHROUGH_MODES, get_profile, list_profiles
from .processor import ContactDataProcessor
from .services import RecordEnhancer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='crmprep',
        description="Map a contact spreadsheet onto the CRM contact schema and export it as CSV",
    )
    parser.add_argument('--log-level', default=None, help="Logging level (default: LOG_LEVEL or WARNING)")
    subparsers = parser.add_subparsers(dest='command')

    process = subparsers.add_parser('process', help="Format a .xlsx or .csv file")
    process.add_argument('file', help="Input spreadsheet (.xlsx or .csv)")
    process.add_argument('--profile', default=None, help="Mapping profile (default: MAPPING_PROFILE or keyword)")
    process.add_argument('--passthrough', choices=PASSTHROUGH_MODES, default=None,
                         help="Unmapped-column handling (default: the profile's mode)")
    process.add_argument('--enhance', action='store_true', help="Clean records with the configured AI provider")
    process.add_argument('--output', '-o', default=None, help="Output path (.csv, or .xlsx for a workbook)")
    process.add_argument('--interactive', '-i', action='store_true', help="Review the detected column mapping")
    process.add_argument('--preview', type=int, default=5, help="Rows to preview (0 to skip)")

    subparsers.add_parser('profiles', help="List mapping profiles")
    subparsers.add_parser('config', help="Show configuration status")
    subparsers.add_parser('version', help="Show version")

    return parser


def _resolve_profile(profile_name: Optional[str], passthrough: Optional[str]):
    config = get_config()
    profile = get_profile(profile_name or config.mapping_profile)
    mode = passthrough or config.passthrough_mode
    if mode:
        profile = profile.with_passthrough(mode)
    return profile


def run_process(
    file_path: str,
    profile_name: Optional[str] = None,
    passthrough: Optional[str] = None,
    enhance: bool = False,
    output: Optional[str] = None,
    interactive: bool = False,
    preview: int = 5,
) -> int:
    """Load → map → (enhance) → export. Returns an exit code."""
    profile = _resolve_profile(profile_name, passthrough)
    processor = ContactDataProcessor(profile)

    # Step 1: Load
    show_step(1, "Load", str(file_path))
    try:
        raw_records = processor.load(file_path)
    except CRMPrepError as e:
        logger.error("Load failed: %s", e)
        show_error(str(e))
        return 1
    show_success(f"Loaded {len(raw_records)} rows · {len(processor.headers)} columns")

    # Step 2: Map
    show_step(2, "Map Columns", f"Profile: {profile.name} · passthrough: {profile.passthrough}")
    if interactive:
        reviewer = InteractiveMapper(processor.row_mapper, processor.headers, raw_records[:3])
        overrides = reviewer.review()
        if overrides:
            processor.set_overrides(overrides)
    else:
        show_mapping_table(
            processor.row_mapper.get_mapping_summary(processor.headers),
            processor.row_mapper.get_unmapped_headers(processor.headers),
        )

    records = processor.map_loaded()
    show_success(f"Formatted {len(records)} contacts")

    if preview > 0:
        rows = [record.to_dict() for record in records]
        show_preview_table(rows, EXPORT_COLUMNS[:6] + EXPORT_COLUMNS[8:10], limit=preview, title="Preview")
        show_stage_distribution(records)

    # Step 3: Enhance (optional)
    if enhance:
        show_step(3, "Enhance", "AI cleanup (falls back to mapped data on any error)")
        enhancer = RecordEnhancer.from_config()
        processor.enhancer = enhancer
        if not enhancer.is_available:
            show_warning("No AI provider configured — skipping enhancement")
        else:
            with console.status("[cyan]Waiting for AI response…[/cyan]"):
                processor.enhance()
            errors = enhancer.get_errors()
            if errors:
                for err in errors:
                    show_warning(err)
                show_info("Keeping the mapped records unchanged")
            else:
                show_success("Records enhanced")

    # Step 4: Export
    show_step(4 if enhance else 3, "Export")
    path = processor.export(output)
    extra_columns = len({h for record in processor.result for h in record.extra})
    show_export_summary(len(processor.result), path, extra_columns)
    return 0


def run_interactive() -> int:
    """Prompt for a file and options, then process it."""
    file_path = Prompt.ask("[cyan]Spreadsheet to format[/cyan] (.xlsx or .csv)").strip().strip('"\'')
    if not file_path:
        show_error("No file given")
        return 1

    profiles = [profile.name for profile in list_profiles()]
    profile_name = Prompt.ask(
        "[cyan]Mapping profile[/cyan]", choices=profiles, default=get_config().mapping_profile
    )
    enhance = False
    if get_config().has_ai_provider:
        enhance = Confirm.ask("[cyan]Clean records with AI?[/cyan]", default=False)

    return run_process(file_path, profile_name=profile_name, enhance=enhance, interactive=True)


def show_profiles():
    from rich.table import Table
    from .mappers import TARGET_FIELDS

    for profile in list_profiles():
        table = Table(
            title=f"[bold cyan]{profile.name}[/bold cyan] · passthrough: {profile.passthrough}",
            caption=profile.description,
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Field", style="cyan")
        table.add_column("Strategies (in order)")
        for target in TARGET_FIELDS:
            strategies = profile.strategies_for(target)
            table.add_row(target, " → ".join(s.describe() for s in strategies) or "[dim]-[/dim]")
        console.print(table)


def show_config():
    status = get_config().get_config_status()
    show_info(f"{status['app']['name']} v{status['app']['version']}")
    console.print(f"Mapping profile: [cyan]{status['mapping']['profile']}[/cyan]")
    console.print(f"Passthrough: [cyan]{status['mapping']['passthrough']}[/cyan]")
    enhancement = status['enhancement']
    if enhancement['configured']:
        show_success(f"AI provider: {enhancement['provider']} ({enhancement['model']})")
    else:
        show_warning(f"AI provider: {enhancement['provider']} (no API key)")
    console.print(f"Output dir: [cyan]{status['output_dir']}[/cyan]")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or get_config().log_level, console=console)

    if args.command == 'version':
        console.print(f"crmprep {__version__}")
        return 0

    if args.command == 'config':
        show_config()
        return 0

    if args.command == 'profiles':
        show_profiles()
        return 0

    show_banner()
    try:
        if args.command == 'process':
            return run_process(
                args.file,
                profile_name=args.profile,
                passthrough=args.passthrough,
                enhance=args.enhance,
                output=args.output,
                interactive=args.interactive,
                preview=args.preview,
            )
        return run_interactive()
    except CRMPrepError as e:
        show_error(str(e))
        return 1
    except KeyboardInterrupt:
        show_warning("Cancelled")
        return 130
