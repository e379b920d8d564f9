"""McpClient — talks to the mcpsample HTTP API."""

from __future__ import annotations

import re
from typing import Any, cast

import httpx
from pydantic import ValidationError

from mcpsample.client.errors import ApiError, ClientConnectionError, ClientTimeoutError
from mcpsample.protocol.models import (
    Capabilities,
    Method,
    PromptDescriptor,
    PromptResult,
    ResourceDescriptor,
    ResponseEnvelope,
    TextContent,
    ToolDescriptor,
)

DEFAULT_API_URL = "http://localhost:5202"
API_PREFIX = "/api/mcp"

_TRAILING_NUMBER = re.compile(r"-?\d+(?:\.\d+)?$")


def extract_numeric_result(text: str) -> str:
    """Pull the number out of a calculator result such as ``Result: 10 + 5 = 15``.

    Takes whatever follows the last ``=``; falls back to a trailing number,
    then to the trimmed text itself.
    """
    text = text.strip()
    _, sep, tail = text.rpartition("=")
    if sep and tail.strip():
        return tail.strip()
    match = _TRAILING_NUMBER.search(text)
    if match:
        return match.group(0)
    return text


class McpClient:
    """Async HTTP client for every operation the server exposes.

    Usage::

        async with McpClient("http://localhost:5202") as client:
            tools = await client.list_tools()
            text = await client.calculate(10, "+", 5)   # "Result: 10 + 5 = 15"

    *transport* lets tests route requests straight into an ASGI app.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> McpClient:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def endpoint(self, method: Method) -> str:
        return f"{self._base_url}{API_PREFIX}/{method.value}"

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "McpClient must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    # -- operations -----------------------------------------------------------

    async def capabilities(self) -> Capabilities:
        response = await self._request("GET", f"{API_PREFIX}/capabilities")
        if response.status_code != 200:
            raise ApiError(response.text, status_code=response.status_code)
        return Capabilities.model_validate(response.json())

    async def list_tools(self) -> list[ToolDescriptor]:
        result = await self.send({"method": Method.TOOLS_LIST.value})
        return [ToolDescriptor.model_validate(t) for t in result.get("tools", [])]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> list[TextContent]:
        result = await self.send(
            {"method": Method.TOOLS_CALL.value, "name": name, "arguments": arguments or {}}
        )
        return [TextContent.model_validate(c) for c in result.get("content", [])]

    async def list_resources(self) -> list[ResourceDescriptor]:
        result = await self.send({"method": Method.RESOURCES_LIST.value})
        return [_resource(r) for r in result.get("resources", [])]

    async def read_resource(self, uri: str) -> list[TextContent]:
        result = await self.send({"method": Method.RESOURCES_READ.value, "uri": uri})
        return [TextContent.model_validate(c) for c in result.get("contents", [])]

    async def list_prompts(self) -> list[PromptDescriptor]:
        result = await self.send({"method": Method.PROMPTS_LIST.value})
        return [PromptDescriptor.model_validate(p) for p in result.get("prompts", [])]

    async def get_prompt(self, name: str, arguments: dict[str, Any] | None = None) -> PromptResult:
        result = await self.send(
            {"method": Method.PROMPTS_GET.value, "name": name, "arguments": arguments or {}}
        )
        return PromptResult.model_validate(result)

    async def download(self, filename: str) -> tuple[bytes, str]:
        """Fetch the raw bytes of a resource file and its content type."""
        response = await self._request("GET", f"{API_PREFIX}/resources/download/{filename}")
        if response.status_code != 200:
            raise _api_error(response)
        return response.content, response.headers.get("content-type", "")

    async def calculate(self, a: float, operation: str, b: float) -> str:
        """Call the calculator tool and return its result text."""
        content = await self.call_tool("calculator", {"operation": operation, "a": a, "b": b})
        if not content:
            raise ApiError("Unexpected response format")
        return content[0].text

    # -- transport ------------------------------------------------------------

    async def send(self, envelope: dict[str, Any]) -> dict[str, Any]:
        """POST *envelope* to its method's endpoint and return the ``result``."""
        method = Method(envelope["method"])
        response = await self._request("POST", f"{API_PREFIX}/{method.value}", json=envelope)
        parsed = _parse_envelope(response)
        if parsed.error is not None:
            raise ApiError(parsed.error.message, parsed.error.code, response.status_code)
        return cast("dict[str, Any]", parsed.result)

    async def _request(self, verb: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            return await self._http().request(verb, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise ClientTimeoutError(url) from exc
        except httpx.TransportError as exc:
            raise ClientConnectionError(url, str(exc)) from exc


def _parse_envelope(response: httpx.Response) -> ResponseEnvelope:
    try:
        return ResponseEnvelope.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        msg = f"API call failed with status {response.status_code}: {response.text}"
        raise ApiError(msg, status_code=response.status_code) from exc


def _api_error(response: httpx.Response) -> ApiError:
    try:
        parsed = ResponseEnvelope.model_validate(response.json())
    except (ValueError, ValidationError):
        return ApiError(response.text, status_code=response.status_code)
    if parsed.error is None:
        return ApiError(response.text, status_code=response.status_code)
    return ApiError(parsed.error.message, parsed.error.code, response.status_code)


def _resource(raw: dict[str, Any]) -> ResourceDescriptor:
    # ``filename`` is server-side only; derive it from the URI path.
    return ResourceDescriptor.model_validate({**raw, "filename": raw["uri"].rsplit("/", 1)[-1]})
