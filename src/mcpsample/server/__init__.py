"""Server layer — dispatcher, capabilities, settings and the HTTP app."""

from mcpsample.server.capabilities import get_capabilities
from mcpsample.server.config import ConfigError, ServerSettings, TelemetrySettings, load_settings
from mcpsample.server.dispatcher import Dispatcher

__all__ = [
    "ConfigError",
    "Dispatcher",
    "ServerSettings",
    "TelemetrySettings",
    "get_capabilities",
    "load_settings",
]
