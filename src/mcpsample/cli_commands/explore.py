"""``mcpsample capabilities|tools|resources|prompts`` — browse a running server."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import click

from mcpsample.cli_commands._output import (
    console,
    parse_pairs,
    print_contents,
    print_prompts_table,
    print_resources_table,
    print_tools_table,
    url_option,
)
from mcpsample.client.client import McpClient
from mcpsample.client.errors import ClientError

T = TypeVar("T")


def _run(url: str, call: Callable[[McpClient], Awaitable[T]]) -> T:
    """Open a client on *url*, run *call*, and exit 1 on client errors."""

    async def _go() -> T:
        async with McpClient(url) as client:
            return await call(client)

    try:
        return asyncio.run(_go())
    except ClientError as exc:
        console.print(f"[red]Error:[/red] {exc}", highlight=False)
        sys.exit(1)


@click.command()
@url_option
def capabilities(url: str) -> None:
    """Show which feature groups the server offers."""
    caps = _run(url, lambda c: c.capabilities())
    console.print_json(caps.model_dump_json())


# ---------------------------------------------------------------------------
# tools
# ---------------------------------------------------------------------------


@click.group()
def tools() -> None:
    """List and call tools."""


@tools.command("list")
@url_option
def list_tools(url: str) -> None:
    """List the tools the server exposes."""
    print_tools_table(_run(url, lambda c: c.list_tools()))


@tools.command("call")
@click.argument("name")
@click.option("--arg", "-a", "pairs", multiple=True, help="Tool argument as key=value.")
@url_option
def call_tool(name: str, pairs: tuple[str, ...], url: str) -> None:
    """Call tool NAME with the given arguments."""
    arguments = parse_pairs(pairs)
    print_contents(_run(url, lambda c: c.call_tool(name, arguments)))


# ---------------------------------------------------------------------------
# resources
# ---------------------------------------------------------------------------


@click.group()
def resources() -> None:
    """List, read and download resources."""


@resources.command("list")
@url_option
def list_resources(url: str) -> None:
    """List the resources the server exposes."""
    print_resources_table(_run(url, lambda c: c.list_resources()))


@resources.command("read")
@click.argument("uri")
@url_option
def read_resource(uri: str, url: str) -> None:
    """Print the content of resource URI."""
    print_contents(_run(url, lambda c: c.read_resource(uri)))


@resources.command("download")
@click.argument("filename")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to save the file (default: FILENAME in the current directory).",
)
@url_option
def download(filename: str, output: Path | None, url: str) -> None:
    """Download the raw bytes of resource file FILENAME."""
    content, media_type = _run(url, lambda c: c.download(filename))
    target = output or Path(filename)
    target.write_bytes(content)
    console.print(f"Saved {len(content)} bytes ({media_type}) to {target}", markup=False)


# ---------------------------------------------------------------------------
# prompts
# ---------------------------------------------------------------------------


@click.group()
def prompts() -> None:
    """List and render prompts."""


@prompts.command("list")
@url_option
def list_prompts(url: str) -> None:
    """List the prompts the server exposes."""
    print_prompts_table(_run(url, lambda c: c.list_prompts()))


@prompts.command("get")
@click.argument("name")
@click.option("--arg", "-a", "pairs", multiple=True, help="Prompt argument as key=value.")
@url_option
def get_prompt(name: str, pairs: tuple[str, ...], url: str) -> None:
    """Render prompt NAME with the given arguments."""
    arguments = parse_pairs(pairs)
    result = _run(url, lambda c: c.get_prompt(name, arguments))
    for message in result.messages:
        console.print(f"[bold]{message.role}:[/bold] ", end="")
        console.print(message.content.text, markup=False, highlight=False)
