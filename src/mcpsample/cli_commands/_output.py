"""Shared CLI output formatters and option helpers."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

import click
from rich.console import Console
from rich.table import Table

from mcpsample.client.client import DEFAULT_API_URL
from mcpsample.harness import HarnessReport  # noqa: TC001
from mcpsample.protocol.models import (  # noqa: TC001
    PromptDescriptor,
    ResourceDescriptor,
    TextContent,
    ToolDescriptor,
)

console = Console()

F = TypeVar("F", bound=Callable[..., Any])


def url_option(func: F) -> F:
    """Add the shared ``--url`` option."""
    return click.option(
        "--url",
        default=DEFAULT_API_URL,
        envvar="MCPSAMPLE_URL",
        show_default=True,
        help="Base URL of the MCP API server.",
    )(func)


def parse_pairs(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Turn ``key=value`` pairs into an arguments mapping.

    Values that parse as JSON keep their type (``3``, ``true``, ``{"x": 1}``);
    anything else is passed as a string.
    """
    arguments: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--arg")
        try:
            arguments[key] = json.loads(raw)
        except json.JSONDecodeError:
            arguments[key] = raw
    return arguments


def print_tools_table(tools: list[ToolDescriptor]) -> None:
    table = Table(title="Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required")

    for tool in tools:
        required = ", ".join(tool.input_schema.get("required", [])) or "-"
        table.add_row(tool.name, _truncate(tool.description), required)

    console.print(table)


def print_resources_table(resources: list[ResourceDescriptor]) -> None:
    table = Table(title="Resources")
    table.add_column("URI", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("MIME type")
    table.add_column("Description")

    for resource in resources:
        table.add_row(
            resource.uri,
            resource.name,
            resource.mime_type,
            _truncate(resource.description),
        )

    console.print(table)


def print_prompts_table(prompts: list[PromptDescriptor]) -> None:
    table = Table(title="Prompts")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Arguments")

    for prompt in prompts:
        args = ", ".join(a.name + ("" if a.required else "?") for a in prompt.arguments) or "-"
        table.add_row(prompt.name, _truncate(prompt.description), args)

    console.print(table)


def print_contents(contents: list[TextContent]) -> None:
    for block in contents:
        console.print(block.text, markup=False, highlight=False)


def print_harness_report(report: HarnessReport) -> None:
    table = Table(title="Calculator Client Harness")
    table.add_column("Test", style="cyan")
    table.add_column("Expression")
    table.add_column("Result")
    table.add_column("Detail")

    for result in report.results:
        vector = result.vector
        status = "[green]PASS[/green]" if result.passed else f"[red]{result.outcome.value.upper()}[/red]"
        table.add_row(
            vector.description,
            f"{vector.a} {vector.operation} {vector.b}",
            status,
            _truncate(result.detail or result.output),
        )

    console.print(table)
    console.print(
        f"Passed: {report.passed}  Failed: {report.failed}  Total: {report.total}"
    )


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
