"""HTTP client for the mcpsample API."""

from mcpsample.client.client import DEFAULT_API_URL, McpClient, extract_numeric_result
from mcpsample.client.errors import (
    ApiError,
    ClientConnectionError,
    ClientError,
    ClientTimeoutError,
)

__all__ = [
    "DEFAULT_API_URL",
    "ApiError",
    "ClientConnectionError",
    "ClientError",
    "ClientTimeoutError",
    "McpClient",
    "extract_numeric_result",
]
