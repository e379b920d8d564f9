"""Protocol layer — envelopes, descriptors, content blocks and errors."""

from mcpsample.protocol.codec import decode, encode, failure, success
from mcpsample.protocol.errors import (
    DivideByZeroError,
    InternalFaultError,
    InvalidArgumentsError,
    MalformedEnvelopeError,
    McpError,
    ResourceNotFoundError,
    UnsupportedOperationError,
)
from mcpsample.protocol.models import (
    Capabilities,
    ErrorObject,
    Method,
    PromptArgument,
    PromptDescriptor,
    PromptMessage,
    PromptResult,
    RequestEnvelope,
    ResourceDescriptor,
    ResponseEnvelope,
    TextContent,
    ToolDescriptor,
)

__all__ = [
    "Capabilities",
    "DivideByZeroError",
    "ErrorObject",
    "InternalFaultError",
    "InvalidArgumentsError",
    "MalformedEnvelopeError",
    "McpError",
    "Method",
    "PromptArgument",
    "PromptDescriptor",
    "PromptMessage",
    "PromptResult",
    "RequestEnvelope",
    "ResourceDescriptor",
    "ResourceNotFoundError",
    "ResponseEnvelope",
    "TextContent",
    "ToolDescriptor",
    "UnsupportedOperationError",
    "decode",
    "encode",
    "failure",
    "success",
]
