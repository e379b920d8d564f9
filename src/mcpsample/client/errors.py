"""Client-side error types."""


class ClientError(Exception):
    """Base error for all client failures."""


class ClientConnectionError(ClientError):
    """The server could not be reached."""

    def __init__(self, url: str, detail: str = "") -> None:
        self.url = url
        self.detail = detail
        msg = f"Failed to connect to API at {url}. Make sure the MCP server is running."
        if detail:
            msg += f" Details: {detail}"
        super().__init__(msg)


class ClientTimeoutError(ClientError):
    """The server did not answer in time."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(
            f"Request to {url} timed out. Make sure the MCP server is running and accessible."
        )


class ApiError(ClientError):
    """The server answered with an error envelope or an unexpected payload."""

    def __init__(self, message: str, code: int | None = None, status_code: int | None = None) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(f"API error: {message}")
