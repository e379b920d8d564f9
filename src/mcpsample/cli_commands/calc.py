"""``mcpsample calc`` — call the calculator tool on a running server."""

from __future__ import annotations

import asyncio
import json
import math
import sys
from typing import NoReturn

import click
import httpx

from mcpsample.cli_commands._output import console
from mcpsample.client.client import DEFAULT_API_URL, McpClient, extract_numeric_result
from mcpsample.client.errors import ClientError
from mcpsample.protocol.models import Method
from mcpsample.tools.calculator import OPERATIONS


def _fail(message: str, *, quiet: bool, hint: str = "") -> NoReturn:
    if not quiet:
        console.print(message, style="red", markup=False)
        if hint:
            console.print(hint, markup=False)
        click.echo(click.get_current_context().get_usage())
    sys.exit(1)


def _parse_number(raw: str, label: str, *, quiet: bool) -> float:
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        _fail(f"Invalid {label} number: {raw}", quiet=quiet)
    return value


def _valid_url(url: str) -> bool:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.host)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("a")
@click.argument("operation")
@click.argument("b")
@click.argument("url", required=False, default=DEFAULT_API_URL)
@click.option("--number-only", is_flag=True, help="Print only the numeric result.")
@click.option("--timeout", type=float, default=30.0, show_default=True, help="Request timeout in seconds.")
def calc(a: str, operation: str, b: str, url: str, number_only: bool, timeout: float) -> None:
    """Compute A OPERATION B with the server's calculator tool.

    OPERATION is one of + - * /.  URL defaults to http://localhost:5202.
    Negative operands can be passed directly, e.g. ``mcpsample calc -5 + 3``.
    """
    first = _parse_number(a, "first", quiet=number_only)
    if operation not in OPERATIONS:
        _fail(
            f"Invalid operation: {operation}",
            quiet=number_only,
            hint=f"Valid operations: {', '.join(OPERATIONS)}",
        )
    second = _parse_number(b, "second", quiet=number_only)
    if not _valid_url(url):
        _fail(f"Invalid API URL: {url}", quiet=number_only)

    async def _calculate() -> str:
        async with McpClient(url, timeout=timeout) as client:
            if not number_only:
                body = {
                    "method": Method.TOOLS_CALL.value,
                    "name": "calculator",
                    "arguments": {"operation": operation, "a": first, "b": second},
                }
                console.print(f"Sending request to: {client.endpoint(Method.TOOLS_CALL)}")
                console.print(f"Request body: {json.dumps(body)}", markup=False)
            return await client.calculate(first, operation, second)

    if not number_only:
        console.print("[bold]MCP Calculator Client[/bold]")
        console.print(f"Calculating: {a} {operation} {b}", markup=False)
        console.print(f"API URL: {url}")

    try:
        text = asyncio.run(_calculate())
    except ClientError as exc:
        if number_only:
            click.echo(f"Error: {exc}")
        else:
            console.print(f"[red]Error:[/red] {exc}", highlight=False)
        sys.exit(1)

    if number_only:
        click.echo(extract_numeric_result(text))
    else:
        console.print("[green]Success![/green]")
        console.print(f"Result: {text}", markup=False)
