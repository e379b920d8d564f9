"""mcpsample — a Model Context Protocol demo server, client and harness over HTTP."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from mcpsample.client.client import McpClient as McpClient
    from mcpsample.server.dispatcher import Dispatcher as Dispatcher

_LAZY_EXPORTS = {
    "Dispatcher": "mcpsample.server.dispatcher",
    "McpClient": "mcpsample.client.client",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'mcpsample' has no attribute {name!r}")
