import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..analyzer import DocumentAnalyzer
from ..config import ConfigError, resolve_options
from ..diagnostics import Severity
from ..registry import DEFAULT_REGISTRY

console = Console()

_SEVERITY_STYLE = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFORMATION: "cyan",
}


def _read(file):
    with open(file, 'r', encoding='utf-8') as f:
        return f.read()


def _fail(message):
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False, soft_wrap=True)
    sys.exit(2)


@click.group()
@click.version_option(version=__version__, prog_name="jyrolint")
@click.option('-v', '--verbose', is_flag=True, help="Log analyzer internals at DEBUG level")
def cli(verbose):
    """Static analysis for Jyro data-transformation scripts"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument('files', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--host-functions/--no-host-functions', default=None,
              help="Report calls to functions the host must provide")
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']), default='text')
def check(files, host_functions, output_format):
    """Check one or more Jyro files"""
    report = {}
    errors = 0
    for file in files:
        try:
            source = _read(file)
            options = resolve_options(source, {"warn_on_host_functions": host_functions})
        except (OSError, UnicodeDecodeError, ConfigError) as e:
            _fail(f"{file}: {e}")

        diagnostics = DocumentAnalyzer(source, file, options).analyze()
        errors += sum(1 for d in diagnostics if d.severity == Severity.ERROR)
        report[file] = diagnostics

    if output_format == 'json':
        click.echo(json.dumps({f: [d.to_dict() for d in ds] for f, ds in report.items()}, indent=2))
    else:
        total = 0
        for file, diagnostics in report.items():
            for d in diagnostics:
                style = _SEVERITY_STYLE[d.severity]
                start = d.range.start
                console.print(
                    f"{escape(file)}:{start.line + 1}:{start.character + 1}: "
                    f"[{style}]{d.severity.label}[/{style}]: {escape(d.message)}",
                    highlight=False,
                    soft_wrap=True,
                )
            total += len(diagnostics)
        if total == 0:
            console.print("[bold green]No problems found[/bold green]")
        else:
            console.print(f"\n{total} problem(s), {errors} error(s)")

    if errors:
        sys.exit(1)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']), default='text')
def symbols(file, output_format):
    """List the symbols declared in a Jyro file"""
    try:
        source = _read(file)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"{file}: {e}")

    found = DocumentAnalyzer(source, file).get_symbols()

    if output_format == 'json':
        click.echo(json.dumps([s.to_dict() for s in found], indent=2))
        return

    table = Table(title=f"Symbols in {escape(file)}")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")
    for s in found:
        table.add_row(s.name, s.type or "", str(s.line + 1), str(s.character + 1))
    console.print(table)


@cli.command()
@click.option('--category', type=click.Choice(list(DEFAULT_REGISTRY.categories())),
              help="Only show one category")
def functions(category):
    """Show the built-in function catalog"""
    entries = DEFAULT_REGISTRY.by_category(category) if category else list(DEFAULT_REGISTRY)

    table = Table(title="Built-in functions")
    table.add_column("Category", style="magenta")
    table.add_column("Signature", style="cyan")
    table.add_column("Description")
    for fn in entries:
        table.add_row(fn.category, fn.label(), fn.description)
    console.print(table)


if __name__ == "__main__":
    cli()
