"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from mcpsample.cli_commands.calc import calc
    from mcpsample.cli_commands.explore import capabilities, prompts, resources, tools
    from mcpsample.cli_commands.harness import harness
    from mcpsample.cli_commands.serve import serve

    cli.add_command(serve)
    cli.add_command(calc)
    cli.add_command(capabilities)
    cli.add_command(tools)
    cli.add_command(resources)
    cli.add_command(prompts)
    cli.add_command(harness)
