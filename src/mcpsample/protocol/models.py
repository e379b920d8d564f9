"""MCP models — request/response envelopes, descriptors and content blocks.

Field names on the wire follow MCP's camelCase (``inputSchema``,
``mimeType``); the Python attributes use snake_case through aliases.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, JsonValue, model_validator

# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


class Method(str, Enum):
    """The operation kinds a request envelope can carry."""

    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    RESOURCES_LIST = "resources/list"
    RESOURCES_READ = "resources/read"
    PROMPTS_LIST = "prompts/list"
    PROMPTS_GET = "prompts/get"


_NAME_REQUIRED = {Method.TOOLS_CALL, Method.PROMPTS_GET}
_URI_REQUIRED = {Method.RESOURCES_READ}


class RequestEnvelope(BaseModel):
    """An inbound MCP request."""

    method: Method
    name: str | None = None
    uri: str | None = None
    arguments: dict[str, JsonValue] = {}

    @model_validator(mode="before")
    @classmethod
    def _null_arguments(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("arguments") is None:
            data = {k: v for k, v in data.items() if k != "arguments"}
        return data

    @model_validator(mode="after")
    def _check_target(self) -> RequestEnvelope:
        if self.method in _NAME_REQUIRED and not self.name:
            msg = f"'name' is required for {self.method.value}"
            raise ValueError(msg)
        if self.method in _URI_REQUIRED and not self.uri:
            msg = f"'uri' is required for {self.method.value}"
            raise ValueError(msg)
        return self


class ErrorObject(BaseModel):
    """The ``error`` member of a failed response."""

    code: int
    message: str
    data: Any = None


class ResponseEnvelope(BaseModel):
    """An outbound MCP response: exactly one of ``result`` or ``error``."""

    result: dict[str, Any] | None = None
    error: ErrorObject | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> ResponseEnvelope:
        if (self.result is None) == (self.error is None):
            msg = "exactly one of 'result' or 'error' must be set"
            raise ValueError(msg)
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


class TextContent(BaseModel):
    """A text content block, used by tool results, resources and prompts."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["text"] = "text"
    text: str
    mime_type: str | None = Field(default=None, alias="mimeType")


class PromptMessage(BaseModel):
    """A role-tagged message produced by a prompt template."""

    role: Literal["user", "assistant"]
    content: TextContent


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class ResourceDescriptor(BaseModel):
    """A resource definition as returned by ``resources/list``.

    ``filename`` names the backing file inside the resource directory and is
    never serialized.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    uri: str
    name: str
    description: str = ""
    mime_type: str = Field(alias="mimeType")
    filename: str = Field(exclude=True)


class PromptArgument(BaseModel):
    """One argument accepted by a prompt template."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    required: bool = False


class PromptDescriptor(BaseModel):
    """A prompt definition as returned by ``prompts/list``."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    arguments: tuple[PromptArgument, ...] = ()


class PromptResult(BaseModel):
    """The payload of ``prompts/get``."""

    description: str = ""
    messages: list[PromptMessage]


class Capabilities(BaseModel):
    """Which feature groups the server offers."""

    tools: bool
    resources: bool
    prompts: bool
    logging: bool
