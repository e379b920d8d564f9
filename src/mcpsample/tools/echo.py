"""The ``echo`` tool."""

from __future__ import annotations

from typing import Any

from mcpsample.protocol.models import TextContent, ToolDescriptor
from mcpsample.tools.arguments import require_text

DESCRIPTOR = ToolDescriptor(
    name="echo",
    description="Echo back the provided text",
    input_schema={
        "type": "object",
        "properties": {
            "text": {"type": "string", "description": "Text to echo back"},
        },
        "required": ["text"],
    },
)


def echo(arguments: dict[str, Any]) -> list[TextContent]:
    text = require_text(arguments, "text")
    return [TextContent(text=f"Echo: {text}")]
