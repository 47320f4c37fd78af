"""slninventory CLI - Inventory the projects of a .NET solution."""

from __future__ import annotations

import json
import logging

import click

from slninventory.config import InventoryConfig
from slninventory.inventory import run_inventory
from slninventory.output import write_output


@click.group()
def cli() -> None:
    """slninventory - Describe a solution's project graph without building it."""
    pass


def _setup_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s - %(name)s - %(message)s")


def _print_summary(data: dict) -> None:
    """Print the inventory as Rich tables."""
    from rich.console import Console
    from rich.table import Table

    console = Console()
    metadata = data.get("metadata", {})
    solution_path = metadata.get("solution_path")

    if not solution_path:
        console.print("[yellow]No solution (.sln) file found.[/yellow]")
        return

    console.print(f"[bold]Solution:[/bold] {solution_path}")

    for project in data.get("projects", []):
        table = Table(title=project["path"], show_edge=False, show_header=False)
        table.add_column("Property", style="bold")
        table.add_column("Value")

        table.add_row("SDK", project.get("sdk") or "")
        table.add_row("Target framework", project.get("target_framework") or "")
        table.add_row("Output type", project.get("output_type") or "")
        table.add_row("Assembly name", project.get("assembly_name") or "")
        table.add_row("Language version", project.get("lang_version") or "")

        for ref in project.get("project_references", []):
            table.add_row("Reference", ref)
        for pkg in project.get("packages", []):
            table.add_row("Package", f"{pkg.get('name')} ({pkg.get('version')})")

        console.print(table)

    stats = data.get("stats", {})
    summary = Table(title="Summary", show_edge=False)
    summary.add_column("Metric", style="bold")
    summary.add_column("Value", justify="right")
    summary.add_row("Projects", str(stats.get("projects", 0)))
    summary.add_row("Packages", str(stats.get("packages", 0)))
    summary.add_row("Project references", str(stats.get("project_references", 0)))
    summary.add_row("Dangling references", str(stats.get("dangling_references", 0)))
    summary.add_row("Cycles", str(stats.get("cycles", 0)))
    duration = metadata.get("analysis_duration_ms", 0)
    summary.add_row("Duration", f"{duration:.1f}ms")
    console.print(summary)


@cli.command("scan")
@click.argument("path")
@click.option("-o", "--output", "output_path", default=None, help="Output JSON file path")
@click.option("--json", "as_json", is_flag=True, help="Print the JSON document to stdout")
@click.option("--verbose", is_flag=True, help="Log every solution entry")
@click.option("--quiet", is_flag=True, help="Suppress all output except warnings")
def scan_cmd(
    path: str,
    output_path: str | None,
    as_json: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Read the solution in PATH and describe every project it declares."""
    if not path:
        raise click.BadParameter("must be a non-empty directory path", param_hint="PATH")

    config = InventoryConfig(
        root_path=path,
        output_path=output_path,
        verbose=verbose,
        quiet=quiet,
    )
    _setup_logging(config.verbose, config.quiet)

    data = run_inventory(config)

    if config.output_path:
        write_output(data, config.output_path)

    if as_json:
        click.echo(json.dumps(data, indent=2, default=str))
    elif not config.quiet:
        _print_summary(data)
        if config.output_path:
            from rich.console import Console
            Console().print(f"[green]Output written to:[/green] {config.output_path}")


if __name__ == "__main__":
    cli()
