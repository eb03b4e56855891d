"""
Command line interface for wc-reactor.

Usage: wc-reactor analysis.json [-c paper-input ...] [-d build] [--bundle]
"""

from __future__ import annotations

import argparse
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from .codegen import GenerationResult
from .logging_config import get_logger
from .options import OptionsError, load_options
from .reactor import Reactor

logger = get_logger(__name__)

# Initialize rich console
console = Console()

EXIT_OK = 0
EXIT_BUILD_FAILED = 1
EXIT_INVALID_OPTIONS = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wc-reactor",
        description="Generate React wrappers for Polymer web components.",
    )

    parser.add_argument(
        "web_component",
        nargs="?",
        metavar="ANALYSIS",
        help="Polymer analysis JSON of the web component(s) to wrap",
    )

    parser.add_argument(
        "--components",
        "-c",
        nargs="+",
        metavar="NAME",
        help="Web components to wrap (default: every analyzed element)",
    )

    parser.add_argument(
        "--dest",
        "-d",
        metavar="DIR",
        help="Build destination directory (default: ./build)",
    )

    parser.add_argument(
        "--bundle",
        action="store_true",
        default=None,
        help="Put all React components into a single module",
    )

    parser.add_argument(
        "--bundle-name",
        metavar="FILE",
        help="File name of the bundle module (default: WebComponents.js)",
    )

    parser.add_argument(
        "--config", metavar="FILE", help="JSON file with build options"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=None,
        help="Print verbose messages",
    )

    return parser


def _print_result(result: GenerationResult) -> None:
    """Print the files a successful build wrote."""
    table = Table(title="Generated files", box=box.SIMPLE)
    table.add_column("File", style="cyan")
    table.add_column("Kind")

    for artifact, path in zip(result.artifacts, result.metadata.get("written", [])):
        table.add_row(str(path), artifact.kind)

    console.print(table)
    for warning in result.warnings:
        console.print(f"[yellow]⚠ {escape(warning)}[/yellow]")
    console.print(
        f"[green]✓[/green] {result.metadata.get('component_count', 0)} "
        f"React component(s) written to {result.metadata.get('dest')}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command line interface.

    Args:
        argv: Arguments, ``sys.argv[1:]`` when not given

    Returns:
        Exit code (0 on success, 1 when the build failed, 2 for invalid
        options)
    """
    args = create_parser().parse_args(argv)

    overrides = {
        "web_component": args.web_component,
        "react_components": args.components,
        "dest": args.dest,
        "bundle": args.bundle,
        "bundle_name": args.bundle_name,
        "verbose": args.verbose,
    }

    try:
        options = load_options(args.config, overrides)
    except OptionsError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return EXIT_INVALID_OPTIONS

    if not options.is_valid:
        for error in options.validation_errors:
            console.print(f"[red]✗[/red] {escape(error)}")
        return EXIT_INVALID_OPTIONS

    result = Reactor(options).build()
    if not result.success:
        console.print(f"[red]✗ {escape(result.error_message)}[/red]")
        return EXIT_BUILD_FAILED

    logger.debug("Build metadata: %s", result.metadata)
    _print_result(result)
    return EXIT_OK
