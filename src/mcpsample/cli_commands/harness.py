"""``mcpsample harness`` — verify the calculator client end to end."""

from __future__ import annotations

import asyncio
import shlex
import sys

import click

from mcpsample.cli_commands._output import console, print_harness_report, url_option


@click.command()
@url_option
@click.option("--timeout", type=float, default=30.0, show_default=True, help="Per-call timeout in seconds.")
@click.option(
    "--client",
    "client_cmd",
    default=None,
    help="Client command to run (default: this package's 'calc' command).",
)
def harness(url: str, timeout: float, client_cmd: str | None) -> None:
    """Run the calculator test vectors against a running server."""
    from mcpsample.harness import DEFAULT_CLIENT_COMMAND, run_harness

    command = tuple(shlex.split(client_cmd)) if client_cmd else DEFAULT_CLIENT_COMMAND
    console.print(f"Using calculator client: {' '.join(command)}", markup=False)

    report = asyncio.run(run_harness(command=command, url=url, timeout=timeout))
    print_harness_report(report)

    if report.failed:
        sys.exit(1)
