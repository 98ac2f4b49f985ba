"""CLI entry point: magedeps.

Subcommands:
    magedeps parse path/to/template.phtml          # one template
    magedeps scan app/design/frontend/Vendor/theme  # every template under a dir
    magedeps scan . --json                          # machine-readable rows
    magedeps scan . --unique                        # sorted set of module names
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from magedeps.core.logging import setup_logging
from magedeps.exceptions import MageDepsError
from magedeps.scanner import TemplateScan, parse_file, scan


def _rows(results: list[TemplateScan]) -> list[dict]:
    return [
        {
            "source_file": r.source_file,
            "dependencies": r.dependencies,
            "warnings": r.warnings,
        }
        for r in results
    ]


def _echo_results(results: list[TemplateScan], as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(_rows(results), indent=2))
        return

    found = [r for r in results if r.dependencies or r.warnings]
    if not found:
        click.echo("No dependencies found.")
        return

    total = sum(len(r.dependencies) for r in found)
    click.echo(f"Found {total} dependencies in {len(found)} template(s)\n")
    for r in found:
        click.echo(f"  {r.source_file}")
        for name in r.dependencies:
            click.echo(f"    {name}")
        for fragment in r.warnings:
            click.echo(f"    ! unparsed: {fragment.strip()}")
        click.echo()


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """magedeps: list JavaScript dependencies declared in Magento templates."""
    setup_logging("DEBUG" if verbose else None)


@main.command("parse")
@click.argument("template", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def parse_cmd(template: Path, as_json: bool) -> None:
    """Extract dependencies from a single template file."""
    try:
        result = parse_file(template)
    except (OSError, MageDepsError) as exc:
        raise click.ClickException(str(exc)) from exc
    _echo_results([result], as_json)


@main.command("scan")
@click.argument("root", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--pattern",
    "patterns",
    multiple=True,
    help="Glob pattern for templates (repeatable, default from MAGEDEPS_TEMPLATE_PATTERNS)",
)
@click.option("--unique", is_flag=True, help="Print the sorted set of module names only")
def scan_cmd(root: Path, as_json: bool, patterns: tuple[str, ...], unique: bool) -> None:
    """Scan every template under ROOT."""
    try:
        results = scan(root.resolve(), list(patterns) or None)
    except (OSError, MageDepsError) as exc:
        raise click.ClickException(str(exc)) from exc

    if unique:
        names = sorted({name for r in results for name in r.dependencies})
        if as_json:
            click.echo(json.dumps(names, indent=2))
        elif not names:
            click.echo("No dependencies found.")
        else:
            for name in names:
                click.echo(name)
        return

    _echo_results(results, as_json)


if __name__ == "__main__":
    main()
