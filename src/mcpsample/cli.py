"""mcpsample CLI entrypoint."""

from __future__ import annotations

import click

from mcpsample import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mcpsample")
def main() -> None:
    """mcpsample — Model Context Protocol demo server and client."""


# Register subcommands
from mcpsample.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
