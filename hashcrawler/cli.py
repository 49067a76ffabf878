#!/usr/bin/env python3
"""HashCrawler command line interface"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.box import MINIMAL_HEAVY_HEAD

from hashcrawler.core.config import config
from hashcrawler.core.error_handling import HashCrawlerError
from hashcrawler.core.identifier import identify_hashes, registry
from hashcrawler.core.models import OutputFormat, Rarity
from hashcrawler.core.reporting import render_results
from hashcrawler.core.ui.console import console, err_console
from hashcrawler.core.ui.themes.default import get_confidence_style
from hashcrawler.core.utils import collect_hashes
from hashcrawler.core.utils.debugging import configure_logging, debug_print, set_debug


def version_callback(value: bool):
    """Handle --version flag"""
    if value:
        console.print(f"[bold]HashCrawler[/bold] version [success]{config.version}[/success]")
        console.print("Structural hash type identification\n")
        raise typer.Exit()


def main_callback(
    version: bool = typer.Option(False, "--version", callback=version_callback, is_eager=True,
                                 help="Show version information")
):
    """HashCrawler - identify likely hash algorithms from their structure"""
    pass


app = typer.Typer(
    name="hashcrawler",
    help="Identify likely hash and checksum algorithms from their structure",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    callback=main_callback
)


@app.command("identify", help="Identify hash types for one or more hashes")
def identify_command(
    hashes: Optional[List[str]] = typer.Argument(None, help="Hash strings to identify"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read hashes from a file, one per line"),
    output_format: Optional[str] = typer.Option(None, "--format", "-o", help="Output format: Text, Object or Json"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Worker threads for batch input"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colorized text output"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug output")
):
    """Main identification command"""
    set_debug(debug)

    try:
        configure_logging(config.log_level)
        fmt = OutputFormat.parse(output_format) if output_format else config.output_format
        values = collect_hashes(hashes, file)
        if not values:
            err_console.error("No hashes supplied")
            err_console.info("Usage: hashcrawler identify <hash> [<hash> ...] | --file hashes.txt")
            raise typer.Exit(1)

        debug_print(f"Identifying {len(values)} hash(es) as {fmt.value}")
        results = identify_hashes(values, registry, workers=workers or config.workers)
        _print_results(results, fmt, plain=no_color or not config.color)

    except HashCrawlerError as e:
        err_console.error(str(e))
        raise typer.Exit(1)
    except KeyboardInterrupt:
        err_console.warning("Interrupted by user")
        raise typer.Exit(130)


def _print_results(results, fmt: OutputFormat, plain: bool):
    if fmt is OutputFormat.JSON:
        typer.echo(render_results(results, fmt, indent=config.json_indent))
    elif fmt is OutputFormat.OBJECT:
        for result in render_results(results, fmt):
            console.print(result)
    elif plain:
        typer.echo(render_results(results, fmt, plain=True))
    else:
        console.print(render_results(results, fmt), highlight=False, soft_wrap=True)


@app.command("types", help="List the hash types HashCrawler can recognise")
def types_command(
    rarity: Optional[str] = typer.Option(None, "--rarity", "-r", help="Only show common, uncommon or rare types")
):
    """List registry entries with their default confidence"""
    definitions = list(registry)
    if rarity:
        try:
            definitions = registry.by_rarity(Rarity(rarity.lower()))
        except ValueError:
            err_console.error(f"Unknown rarity: {rarity} (expected common, uncommon or rare)")
            raise typer.Exit(1)

    table = console.table(
        title="Known hash types",
        show_header=True,
        header_style="table.header",
        box=MINIMAL_HEAVY_HEAD
    )
    table.add_column("Name", style="primary")
    table.add_column("Rarity", style="secondary")
    table.add_column("Confidence")
    table.add_column("Shares pattern with", style="muted")

    for definition in definitions:
        info = registry.explain(definition.name)
        style = get_confidence_style(info['confidence'])
        table.add_row(
            info['name'],
            info['rarity'],
            f"[{style}]{info['confidence']}[/{style}]",
            ", ".join(info['shared_with']) or "-"
        )

    console.print_table(table)


def main():
    app()


if __name__ == "__main__":
    main()
