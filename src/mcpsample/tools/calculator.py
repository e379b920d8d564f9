"""The ``calculator`` tool — four-function arithmetic on two operands."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from mcpsample.protocol.errors import DivideByZeroError, InvalidArgumentsError
from mcpsample.protocol.models import TextContent, ToolDescriptor
from mcpsample.tools.arguments import format_number, require_number, require_text

DESCRIPTOR = ToolDescriptor(
    name="calculator",
    description="Perform basic mathematical calculations",
    input_schema={
        "type": "object",
        "properties": {
            "operation": {
                "type": "string",
                "description": "Mathematical operation (+, -, *, /)",
                "enum": ["+", "-", "*", "/"],
            },
            "a": {"type": "number", "description": "First operand"},
            "b": {"type": "number", "description": "Second operand"},
        },
        "required": ["operation", "a", "b"],
    },
)

OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def calculate(a: float, op: str, b: float) -> float:
    """Apply *op* to *a* and *b* with native float semantics.

    Raises:
        DivideByZeroError: For ``/`` with ``b == 0``.
        InvalidArgumentsError: For an operation outside ``+ - * /``.
    """
    func = OPERATIONS.get(op)
    if func is None:
        raise InvalidArgumentsError(f"Unsupported operation: {op}")
    if op == "/" and b == 0:
        raise DivideByZeroError()
    return func(a, b)


def calculator(arguments: dict[str, Any]) -> list[TextContent]:
    missing = [key for key in ("operation", "a", "b") if arguments.get(key) is None]
    if missing:
        raise InvalidArgumentsError(f"Missing required arguments: {', '.join(missing)}")

    op = require_text(arguments, "operation").strip()
    a = require_number(arguments, "a")
    b = require_number(arguments, "b")
    result = calculate(a, op, b)

    text = f"Result: {format_number(a)} {op} {format_number(b)} = {format_number(result)}"
    return [TextContent(text=text)]
