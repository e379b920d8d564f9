"""Dispatcher — turns a request envelope into a response envelope.

This is the fault boundary of the server: :meth:`Dispatcher.dispatch` never
raises.  Registry errors become error envelopes with their own code, and
anything unexpected becomes an internal-fault envelope.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from opentelemetry import trace

from mcpsample.prompts.registry import PromptRegistry
from mcpsample.protocol.codec import failure, success
from mcpsample.protocol.errors import InternalFaultError, McpError
from mcpsample.protocol.models import Method, RequestEnvelope, ResponseEnvelope
from mcpsample.resources.registry import ResourceRegistry
from mcpsample.tools.registry import ToolRegistry
from mcpsample.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_PROMPT_NAME,
    ATTR_RESOURCE_URI,
    ATTR_TOOL_NAME,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

_Route = Callable[[RequestEnvelope], dict[str, Any]]


def _dump(items: list[Any]) -> list[dict[str, Any]]:
    return [item.model_dump(by_alias=True, exclude_none=True) for item in items]


class Dispatcher:
    """Routes each :class:`Method` to the registry that serves it.

    Usage::

        dispatcher = Dispatcher()
        request = decode(b'{"method": "tools/call", "name": "echo", "arguments": {"text": "hi"}}')
        response = dispatcher.dispatch(request)
        response.result  # {"content": [{"type": "text", "text": "Echo: hi"}]}
    """

    def __init__(
        self,
        tools: ToolRegistry | None = None,
        resources: ResourceRegistry | None = None,
        prompts: PromptRegistry | None = None,
    ) -> None:
        self.tools = tools or ToolRegistry()
        self.resources = resources or ResourceRegistry()
        self.prompts = prompts or PromptRegistry()
        self._routes: dict[Method, _Route] = {
            Method.TOOLS_LIST: self._list_tools,
            Method.TOOLS_CALL: self._call_tool,
            Method.RESOURCES_LIST: self._list_resources,
            Method.RESOURCES_READ: self._read_resource,
            Method.PROMPTS_LIST: self._list_prompts,
            Method.PROMPTS_GET: self._get_prompt,
        }
        missing = [m.value for m in Method if m not in self._routes]
        if missing:
            msg = f"No route for methods: {', '.join(missing)}"
            raise RuntimeError(msg)

    def dispatch(self, request: RequestEnvelope) -> ResponseEnvelope:
        with _tracer.start_as_current_span(f"mcp.{request.method.value}") as span:
            span.set_attribute(ATTR_METHOD, request.method.value)
            try:
                result = self._routes[request.method](request)
            except McpError as exc:
                logger.warning(
                    "%s failed (%d): %s", request.method.value, exc.code, exc.message
                )
                span.set_attribute(ATTR_ERROR_CODE, exc.code)
                return failure(exc.to_error())
            except Exception as exc:
                logger.exception("Unexpected error handling %s", request.method.value)
                fault = InternalFaultError(str(exc) or type(exc).__name__)
                span.set_attribute(ATTR_ERROR_CODE, fault.code)
                return failure(fault.to_error())
            return success(result)

    # -- routes -------------------------------------------------------------

    def _list_tools(self, _: RequestEnvelope) -> dict[str, Any]:
        logger.info("Listing available tools")
        return {"tools": _dump(self.tools.list_tools())}

    def _call_tool(self, request: RequestEnvelope) -> dict[str, Any]:
        name = request.name or ""
        logger.info("Calling tool: %s", name)
        _annotate(ATTR_TOOL_NAME, name)
        content = self.tools.call_tool(name, request.arguments)
        return {"content": _dump(content)}

    def _list_resources(self, _: RequestEnvelope) -> dict[str, Any]:
        logger.info("Listing available resources")
        return {"resources": _dump(self.resources.list_resources())}

    def _read_resource(self, request: RequestEnvelope) -> dict[str, Any]:
        uri = request.uri or ""
        logger.info("Reading resource: %s", uri)
        _annotate(ATTR_RESOURCE_URI, uri)
        return {"contents": _dump(self.resources.read_resource(uri))}

    def _list_prompts(self, _: RequestEnvelope) -> dict[str, Any]:
        logger.info("Listing available prompts")
        return {"prompts": _dump(self.prompts.list_prompts())}

    def _get_prompt(self, request: RequestEnvelope) -> dict[str, Any]:
        name = request.name or ""
        logger.info("Getting prompt: %s", name)
        _annotate(ATTR_PROMPT_NAME, name)
        prompt = self.prompts.get_prompt(name, request.arguments)
        return prompt.model_dump(by_alias=True, exclude_none=True)


def _annotate(key: str, value: str) -> None:
    trace.get_current_span().set_attribute(key, value)
