"""
Command-line interface for TypeScript generation.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .emitter.config import ConfigError, get_config_manager
from .generator import GenerationResult, generate_typescript
from .logging_config import configure_logging, get_logger
from .schema.types import SchemaProgram
from .utils import SchemaLoadError, load_schema, read_schema_stream

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the ``schema-ts`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="schema-ts",
        description="Generate TypeScript type declarations from a schema document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  schema-ts schema.json
  schema-ts schema.json -o generated --export
  schema-ts --url https://example.com/schema.json --print
  schema-ts --stdin --print < schema.json
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Schema document (JSON)")
    input_group.add_argument("--url", help="URL to fetch the schema document from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the schema document from standard input"
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output-dir", "-o", metavar="DIR", help="Directory for generated files"
    )
    output_group.add_argument(
        "--output-file", metavar="NAME", help="Name of the generated file (default: models.ts)"
    )
    output_group.add_argument(
        "--print",
        dest="print_code",
        action="store_true",
        help="Print generated code instead of writing files",
    )

    style_group = parser.add_argument_group("code style")
    style_group.add_argument("--config", metavar="FILE", help="JSON configuration file")
    style_group.add_argument(
        "--export", action="store_true", help="Export every generated declaration"
    )
    style_group.add_argument("--indent", type=int, metavar="N", help="Indentation width")
    style_group.add_argument(
        "--no-header", action="store_true", help="Don't add the generated-file header"
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _get_input(args: argparse.Namespace) -> SchemaProgram:
    """Load the schema from the selected source."""
    try:
        if args.file:
            return load_schema(file_path=args.file)
        if args.url:
            return load_schema(url=args.url)
        if args.stdin:
            return read_schema_stream(sys.stdin)
    except SchemaLoadError as e:
        raise CLIError(f"Failed to load schema: {e}") from e

    raise CLIError("Input source required (file, --url, or --stdin)")


def _build_config_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect configuration overrides from CLI arguments."""
    overrides: Dict[str, Any] = {}

    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.output_file:
        overrides["output_file"] = args.output_file
    if args.export:
        overrides["export_declarations"] = True
    if args.indent is not None:
        overrides["indent_size"] = args.indent
    if args.no_header:
        overrides["add_header_comment"] = False

    return overrides


def _print_result(result: GenerationResult, print_code: bool) -> None:
    if print_code:
        for path, contents in result.files.items():
            console.print(f"[green]── {path} ──[/green]")
            console.print(Syntax(contents, "typescript", theme="monokai"))
    else:
        table = Table(title="Generated Files", box=box.SIMPLE, header_style="bold cyan")
        table.add_column("File", style="cyan")
        table.add_column("Declarations", justify="right", style="green")
        for path, contents in zip(result.written, result.files.values()):
            count = sum(1 for line in contents.splitlines() if _is_declaration_line(line))
            table.add_row(str(path), str(count))
        console.print(table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")


def _is_declaration_line(line: str) -> bool:
    return line.startswith("type ") or line.startswith("export type ")


def run(args: argparse.Namespace) -> int:
    """Run generation for parsed arguments."""
    program = _get_input(args)

    manager = get_config_manager()
    try:
        config = manager.get_config(_build_config_overrides(args), args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    for warning in manager.validate_config(config):
        logger.warning(warning)

    result = generate_typescript(
        program,
        config,
        output_dir=config.output_dir,
        write=not args.print_code,
    )

    if not result.success:
        console.print(f"[red]✗ {result.error_message}[/red]")
        return 1

    _print_result(result, args.print_code)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``schema-ts`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return run(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except OSError as e:
        console.print(f"[red]✗ Failed to write output:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
