"""
Command-line interface for pocketbase-typegen.

Loads a schema from one source, generates the TypeScript typings and
writes them to a file.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigError,
    GeneratorConfig,
    TypeScriptGenerator,
    generate_code,
    load_config,
)
from .codegen.core.config import DEFAULT_OUTPUT_FILE, get_config_manager
from .codegen.core.schema import FieldType
from .logging_config import get_logger, setup_logging
from .sources import SchemaLoaderError, load_schema

logger = get_logger(__name__)

console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pocketbase-typegen",
        description="CLI to create typescript typings for your pocketbase.io records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pocketbase-typegen --db ./pb_data/data.db
  pocketbase-typegen --json pb_schema.json --out src/pocketbase-types.ts
  pocketbase-typegen --url https://pb.example.com --email admin@example.com --password secret
        """.strip(),
    )

    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument(
        "-d", "--db", metavar="PATH", help="path to the pocketbase SQLite database"
    )
    source_group.add_argument(
        "-j",
        "--json",
        metavar="PATH",
        help="path to JSON schema exported from pocketbase admin UI",
    )
    source_group.add_argument(
        "-u",
        "--url",
        metavar="URL",
        help="URL to your hosted pocketbase instance. When using this options "
        "you must also provide email and password options.",
    )

    auth_group = parser.add_argument_group("authentication")
    auth_group.add_argument(
        "-e",
        "--email",
        metavar="EMAIL",
        help="email for an admin pocketbase user. Use this with the --url option",
    )
    auth_group.add_argument(
        "-p",
        "--password",
        metavar="PASSWORD",
        help="password for an admin pocketbase user. Use this with the --url option",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "-o",
        "--out",
        metavar="PATH",
        help=f"path to save the typescript output file (default: {DEFAULT_OUTPUT_FILE})",
    )
    output_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )
    output_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging and generation metadata",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse and validate command line arguments."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.url and not (args.email and args.password):
        parser.error("--url requires --email and --password")

    return args


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args(argv)
    # Failures are printed by the CLI itself unless --verbose asks for the log
    setup_logging(
        logging.DEBUG if args.verbose else logging.CRITICAL, console=console
    )

    try:
        config = _build_config(args)
    except ConfigError as e:
        console.print(f"[red]✗ Configuration error:[/red] {e}")
        return 1

    for warning in get_config_manager().validate_config(
        config, [t.value for t in FieldType]
    ):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    try:
        collections = load_schema(
            db=args.db,
            json_path=args.json,
            url=args.url,
            email=args.email or "",
            password=args.password or "",
        )
    except SchemaLoaderError as e:
        console.print(f"[red]✗ Failed to load schema:[/red] {e}")
        return 1

    return _generate_and_output(collections, config, args)


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {}
    if args.out:
        overrides["output_file"] = args.out
    return load_config(custom_config=overrides, config_file=args.config)


def _generate_and_output(
    collections, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate the typings and write them to the configured file."""
    generator = TypeScriptGenerator(config)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("[green]Generating typescript definitions...", total=None)
        result = generate_code(generator, collections)
        progress.remove_task(task)

    if not result.success:
        console.print(f"[red]✗ {result.error_message}[/red]")
        return 1

    output_path = Path(config.output_file)
    try:
        output_path.write_text(result.code, encoding="utf-8")
    except OSError as e:
        logger.error("Failed to write %s: %s", output_path, e)
        console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
        return 1

    console.print(
        f"[green]✓[/green] Created typescript definitions at [cyan]{output_path}[/cyan]"
    )

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0
