"""Tests for McpClient against a mocked HTTP transport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from mcpsample.client.client import McpClient, extract_numeric_result
from mcpsample.client.errors import ApiError, ClientConnectionError, ClientError, ClientTimeoutError
from mcpsample.protocol.models import Method


def _transport(handler: Any) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


def _ok(result: dict[str, Any]) -> httpx.Response:
    return httpx.Response(200, json={"result": result})


class TestExtractNumericResult:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Result: 10 + 5 = 15", "15"),
            ("Result: 7 / 2 = 3.5", "3.5"),
            ("Result: -5 + 3 = -2", "-2"),
            ("Result: 0.1 + 0.2 = 0.30000000000000004", "0.30000000000000004"),
            ("answer 42", "42"),
            ("value -3.25", "-3.25"),
            ("no number here", "no number here"),
            ("  trailing =", "trailing ="),
            ("Result: x = ", "Result: x ="),
            ("Result: 4 = ", "Result: 4 ="),
            ("total 12 = \n", "total 12 ="),
        ],
    )
    def test_extract(self, text: str, expected: str) -> None:
        assert extract_numeric_result(text) == expected


class TestOperations:
    async def test_calculate_posts_envelope(self) -> None:
        seen: dict[str, Any] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return _ok({"content": [{"type": "text", "text": "Result: 10 + 5 = 15"}]})

        async with McpClient("http://test", transport=_transport(handler)) as client:
            text = await client.calculate(10, "+", 5)

        assert text == "Result: 10 + 5 = 15"
        assert seen["path"] == "/api/mcp/tools/call"
        assert seen["body"] == {
            "method": "tools/call",
            "name": "calculator",
            "arguments": {"operation": "+", "a": 10, "b": 5},
        }

    async def test_list_tools(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return _ok({"tools": [{"name": "echo", "description": "d", "inputSchema": {"type": "object"}}]})

        async with McpClient("http://test", transport=_transport(handler)) as client:
            [tool] = await client.list_tools()

        assert tool.name == "echo"
        assert tool.input_schema == {"type": "object"}

    async def test_list_resources_derives_filename(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return _ok(
                {"resources": [{"uri": "file:///data.json", "name": "n", "mimeType": "application/json"}]}
            )

        async with McpClient("http://test", transport=_transport(handler)) as client:
            [resource] = await client.list_resources()

        assert resource.filename == "data.json"
        assert resource.mime_type == "application/json"

    async def test_get_prompt(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert json.loads(request.content)["name"] == "greeting"
            return _ok(
                {
                    "description": "greet",
                    "messages": [{"role": "user", "content": {"type": "text", "text": "hi"}}],
                }
            )

        async with McpClient("http://test", transport=_transport(handler)) as client:
            result = await client.get_prompt("greeting", {"name": "x"})

        assert result.messages[0].content.text == "hi"

    async def test_capabilities(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            return httpx.Response(
                200, json={"tools": True, "resources": True, "prompts": True, "logging": False}
            )

        async with McpClient("http://test", transport=_transport(handler)) as client:
            caps = await client.capabilities()

        assert caps.logging is False

    async def test_download(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/mcp/resources/download/sample.txt"
            return httpx.Response(200, content=b"raw", headers={"content-type": "text/plain"})

        async with McpClient("http://test", transport=_transport(handler)) as client:
            content, media_type = await client.download("sample.txt")

        assert content == b"raw"
        assert media_type == "text/plain"

    def test_endpoint(self) -> None:
        client = McpClient("http://localhost:5202/")
        assert client.base_url == "http://localhost:5202"
        assert client.endpoint(Method.TOOLS_CALL) == "http://localhost:5202/api/mcp/tools/call"


class TestErrors:
    async def test_error_envelope(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400, json={"error": {"code": -32602, "message": "Cannot divide by zero"}}
            )

        async with McpClient("http://test", transport=_transport(handler)) as client:
            with pytest.raises(ApiError) as info:
                await client.calculate(1, "/", 0)

        assert info.value.code == -32602
        assert info.value.status_code == 400
        assert str(info.value) == "API error: Cannot divide by zero"

    async def test_non_envelope_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="Internal Server Error")

        async with McpClient("http://test", transport=_transport(handler)) as client:
            with pytest.raises(ApiError, match="status 500"):
                await client.list_tools()

    async def test_empty_content(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return _ok({"content": []})

        async with McpClient("http://test", transport=_transport(handler)) as client:
            with pytest.raises(ApiError, match="Unexpected response format"):
                await client.calculate(1, "+", 1)

    async def test_download_not_found(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": {"code": -32603, "message": "File not found: x"}})

        async with McpClient("http://test", transport=_transport(handler)) as client:
            with pytest.raises(ApiError) as info:
                await client.download("x")

        assert info.value.code == -32603
        assert info.value.status_code == 404

    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with McpClient("http://test", transport=_transport(handler)) as client:
            with pytest.raises(ClientConnectionError) as info:
                await client.list_tools()

        assert "Make sure the MCP server is running" in str(info.value)
        assert "refused" in str(info.value)

    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        async with McpClient("http://test", transport=_transport(handler)) as client:
            with pytest.raises(ClientTimeoutError, match="timed out"):
                await client.list_tools()

    def test_error_hierarchy(self) -> None:
        assert issubclass(ApiError, ClientError)
        assert issubclass(ClientTimeoutError, ClientError)
        assert issubclass(ClientConnectionError, ClientError)

    async def test_requires_context_manager(self) -> None:
        with pytest.raises(RuntimeError, match="context manager"):
            await McpClient("http://test").list_tools()
