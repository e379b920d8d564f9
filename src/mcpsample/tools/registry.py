"""ToolRegistry — the fixed table of tools and the fault boundary around them."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from mcpsample.protocol.errors import InternalFaultError, McpError, UnsupportedOperationError
from mcpsample.protocol.models import TextContent, ToolDescriptor
from mcpsample.tools import calculator, echo, word_counter

logger = logging.getLogger(__name__)

ToolHandler = Callable[[dict[str, Any]], list[TextContent]]


class ToolName(str, Enum):
    """The closed set of tools this server knows about, in listing order."""

    ECHO = "echo"
    CALCULATOR = "calculator"
    WORD_COUNTER = "word_counter"


_BUILTIN: dict[ToolName, tuple[ToolDescriptor, ToolHandler]] = {
    ToolName.ECHO: (echo.DESCRIPTOR, echo.echo),
    ToolName.CALCULATOR: (calculator.DESCRIPTOR, calculator.calculator),
    ToolName.WORD_COUNTER: (word_counter.DESCRIPTOR, word_counter.word_counter),
}


class ToolRegistry:
    """Maps tool names to descriptors and handlers.

    ``call_tool`` only ever raises :class:`McpError`: unknown names become
    :class:`UnsupportedOperationError` and any foreign exception from a
    handler is converted to :class:`InternalFaultError`.

    Usage::

        registry = ToolRegistry()
        registry.list_tools()                                  # echo, calculator, word_counter
        registry.call_tool("echo", {"text": "hi"})             # [TextContent("Echo: hi")]
    """

    def __init__(
        self,
        table: dict[ToolName, tuple[ToolDescriptor, ToolHandler]] | None = None,
    ) -> None:
        table = _BUILTIN if table is None else table
        unmapped = [member.value for member in ToolName if member not in table]
        if unmapped:
            msg = f"No handler registered for tools: {', '.join(unmapped)}"
            raise ValueError(msg)
        self._tools: dict[str, tuple[ToolDescriptor, ToolHandler]] = {
            member.value: table[member] for member in ToolName
        }

    def list_tools(self) -> list[ToolDescriptor]:
        return [descriptor for descriptor, _ in self._tools.values()]

    def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> list[TextContent]:
        """Invoke the tool *name* with the raw *arguments* mapping."""
        entry = self._tools.get(name)
        if entry is None:
            raise UnsupportedOperationError(f"Unknown tool: {name}")

        _, handler = entry
        try:
            return handler(arguments or {})
        except McpError:
            raise
        except Exception as exc:
            logger.exception("Tool %s raised an unexpected error", name)
            raise InternalFaultError(str(exc) or type(exc).__name__) from exc
