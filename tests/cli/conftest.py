"""Shared fixtures for CLI tests: route McpClient into an in-process app."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import httpx
import pytest

if TYPE_CHECKING:
    from pathlib import Path

from mcpsample.client.client import McpClient
from mcpsample.server.app import create_app
from mcpsample.server.config import ServerSettings


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    root = tmp_path / "resources"
    root.mkdir()
    (root / "sample.txt").write_text("Hello from sample", encoding="utf-8")
    (root / "data.json").write_text('{"answer": 42}', encoding="utf-8")
    return root


@pytest.fixture
def in_process_client(resource_dir: Path) -> Callable[..., McpClient]:
    """A drop-in for ``McpClient`` whose requests go straight to the ASGI app."""
    app = create_app(ServerSettings(resources_dir=resource_dir))

    def factory(url: str, **kwargs: Any) -> McpClient:
        return McpClient(url, transport=httpx.ASGITransport(app=app), **kwargs)

    return factory
