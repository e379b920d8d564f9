"""Capability reporter."""

from __future__ import annotations

from mcpsample.protocol.models import Capabilities

_CAPABILITIES = Capabilities(tools=True, resources=True, prompts=True, logging=False)


def get_capabilities() -> Capabilities:
    """Return the static capability declaration of this server."""
    return _CAPABILITIES.model_copy()
