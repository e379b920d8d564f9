"""PromptRegistry — named templates that render role-tagged messages."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mcpsample.protocol.errors import UnsupportedOperationError
from mcpsample.protocol.models import (
    PromptArgument,
    PromptDescriptor,
    PromptMessage,
    PromptResult,
    TextContent,
)
from mcpsample.tools.arguments import optional_text

PromptRenderer = Callable[[dict[str, Any]], str]

GREETING = PromptDescriptor(
    name="greeting",
    description="Generate a personalized greeting",
    arguments=(
        PromptArgument(name="name", description="Name of the person to greet", required=True),
    ),
)

SUMMARIZE = PromptDescriptor(
    name="summarize",
    description="Summarize the provided text",
    arguments=(
        PromptArgument(name="text", description="Text to summarize", required=True),
        PromptArgument(name="length", description="Desired summary length", required=False),
    ),
)


def _greeting(arguments: dict[str, Any]) -> str:
    name = optional_text(arguments, "name", "there")
    return f"Generate a friendly greeting for {name}"


def _summarize(arguments: dict[str, Any]) -> str:
    length = optional_text(arguments, "length", "a few sentences")
    text = optional_text(arguments, "text", "[no text provided]")
    return f"Please summarize the following text in {length}: {text}"


_BUILTIN: tuple[tuple[PromptDescriptor, PromptRenderer], ...] = (
    (GREETING, _greeting),
    (SUMMARIZE, _summarize),
)


class PromptRegistry:
    """Lists prompt templates and renders them into user messages.

    Missing arguments fall back to defaults rather than failing, so a
    ``required`` flag on a :class:`PromptArgument` is advisory.
    """

    def __init__(self) -> None:
        self._prompts = {descriptor.name: (descriptor, render) for descriptor, render in _BUILTIN}

    def list_prompts(self) -> list[PromptDescriptor]:
        return [descriptor for descriptor, _ in self._prompts.values()]

    def get_prompt(self, name: str, arguments: dict[str, Any] | None = None) -> PromptResult:
        entry = self._prompts.get(name)
        if entry is None:
            raise UnsupportedOperationError(f"Unknown prompt: {name}")
        descriptor, render = entry
        message = PromptMessage(role="user", content=TextContent(text=render(arguments or {})))
        return PromptResult(description=descriptor.description, messages=[message])
