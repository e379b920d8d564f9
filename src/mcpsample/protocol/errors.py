"""Error taxonomy shared by the tool, resource and prompt registries.

Every error carries a fixed JSON-RPC style ``code`` and can be turned into the
``error`` object of a response envelope via :meth:`McpError.to_error`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mcpsample.protocol.models import ErrorObject

INVALID_ARGUMENTS = -32600
UNSUPPORTED_OPERATION = -32601
INTERNAL_FAULT = -32602
NOT_FOUND = -32603


class McpError(Exception):
    """Base error for every failure reported back in a response envelope."""

    code: int = INTERNAL_FAULT

    def __init__(self, message: str, data: Any = None) -> None:
        self.message = message
        self.data = data
        super().__init__(message)

    def to_error(self) -> ErrorObject:
        from mcpsample.protocol.models import ErrorObject

        return ErrorObject(code=self.code, message=self.message, data=self.data)


class InvalidArgumentsError(McpError):
    """Missing or malformed input."""

    code = INVALID_ARGUMENTS


class MalformedEnvelopeError(InvalidArgumentsError):
    """The request body is not a valid request envelope."""


class UnsupportedOperationError(McpError):
    """Unknown tool or prompt name."""

    code = UNSUPPORTED_OPERATION


class ResourceNotFoundError(McpError):
    """Unknown resource URI or missing backing file."""

    code = NOT_FOUND


class DivideByZeroError(McpError):
    """Division by zero in the calculator tool."""

    code = INTERNAL_FAULT

    def __init__(self, message: str = "Cannot divide by zero") -> None:
        super().__init__(message, data={"reason": "divide_by_zero"})


class InternalFaultError(McpError):
    """An unexpected exception raised inside a handler."""

    code = INTERNAL_FAULT
