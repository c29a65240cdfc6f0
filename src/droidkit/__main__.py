"""CLI entry point: inspect directive kinds and source-file destinations."""

from __future__ import annotations

import click
from rich.console import Console

from .core.events import events
from .destinations import classify, resolve_source_destination
from .handlers import HANDLER_MAP

console = Console()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def cli(verbose: bool):
    """droidkit — Android plugin directive installer."""
    events.verbose = verbose


@cli.command()
def kinds():
    """List supported directive kinds."""
    for kind, handler in HANDLER_MAP.items():
        console.print(f"  {kind.value:<15} [dim]{type(handler).__name__}[/dim]")


@cli.command()
@click.argument("src")
@click.argument("target_dir")
def resolve(src: str, target_dir: str):
    """Show where a <source-file> with SRC and TARGET_DIR is installed."""
    dest = resolve_source_destination(target_dir, src)
    events.emit("verbose", f"{src}: {classify(src).name.lower()}")
    console.print(dest, markup=False, highlight=False, soft_wrap=True)


def main():
    cli()


if __name__ == "__main__":
    main()
