"""Command-line interface for testharness."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from testharness import __version__
from testharness.config import HarnessConfig, create_example_config, get_default_config


console = Console(emoji=False, soft_wrap=True)


def print_banner(name: str, out: Optional[Console] = None) -> None:
    """Print the testharness banner."""
    (out or console).print(
        Panel.fit(
            f"[bold blue]testharness[/bold blue] - {escape(name)}",
            subtitle=f"v{__version__}",
        )
    )


def _load_config(config_path: Optional[str]) -> HarnessConfig:
    if config_path:
        return HarnessConfig.from_file(config_path)
    found = HarnessConfig.find()
    if found is None:
        return get_default_config()
    return HarnessConfig.from_file(found)


@click.group()
@click.version_option(version=__version__, prog_name="testharness")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False),
    help="Path to configuration file (default: testharness.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Echo logger messages from test bodies")
@click.pass_context
def main(ctx: click.Context, config: Optional[str], verbose: bool) -> None:
    """testharness - run test suites and report a pass/fail verdict."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config


@main.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default="testharness.json",
    help="Output path for configuration file",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite existing configuration")
def init(output: str, force: bool) -> None:
    """Initialize a new testharness configuration file."""
    output_path = Path(output)
    if output_path.exists() and not force:
        console.print(
            f"[yellow]Configuration file already exists:[/yellow] {output_path}"
        )
        console.print("Use --force to overwrite")
        sys.exit(1)

    try:
        create_example_config(output_path)
        console.print(f"[green]Created configuration file:[/green] {output_path}")
        console.print("\nNext steps:")
        console.print("  1. List your suites under [bold]suites[/bold] as module:attr paths")
        console.print("  2. Run [bold]testharness run[/bold] to execute them")
    except OSError as e:
        console.print(f"[red]Error creating configuration:[/red] {e}")
        sys.exit(1)


@main.command()
@click.argument("suites", nargs=-1)
@click.pass_context
def run(ctx: click.Context, suites: tuple[str, ...]) -> None:
    """Run the given suites (module:attr) in order.

    Exits with status 1 when any case failed or ended unknown.
    """
    from pydantic import ValidationError

    from testharness.core.importing import load_suite
    from testharness.core.runner import TestRunner
    from testharness.core.testable import SuiteError
    from testharness.report.statify import Reporter

    try:
        config = _load_config(ctx.obj.get("config_path"))
    except (FileNotFoundError, ValidationError, ValueError) as e:
        console.print(f"[red]Error loading configuration:[/red] {escape(str(e))}")
        sys.exit(2)

    if ctx.obj.get("verbose"):
        config.run.verbose = True

    output = Console(
        no_color=not config.console.color,
        width=config.console.width,
        emoji=False,
        soft_wrap=True,
    )
    print_banner(config.project.name, output)

    paths = list(suites) or config.suites
    if not paths:
        output.print("[red]Error:[/red] no suites given")
        output.print("Pass suite paths as arguments or list them in testharness.json")
        sys.exit(2)

    # Make suites importable relative to the working directory
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    loaded = []
    for path in paths:
        try:
            loaded.append(load_suite(path))
        except (ImportError, AttributeError, ValueError, SuiteError) as e:
            output.print(f"[red]Error loading suite {escape(path)}:[/red] {escape(str(e))}")
            sys.exit(2)

    runner = TestRunner(console=output, config=config.run)
    results = runner.run_tests_from_classes(loaded)

    failed = Reporter(console=output).statify(results)
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
