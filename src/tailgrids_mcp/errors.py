"""Errors raised while fetching TailGrids data."""


class TailGridsError(Exception):
    """Base class for TailGrids MCP errors."""


class FetchError(TailGridsError):
    """The TailGrids site answered with a non-success status."""

    def __init__(self, status: int, status_text: str, url: str | None = None):
        self.status = status
        self.status_text = status_text
        self.url = url
        super().__init__(f"{status_text} - Status: {status}")


class NetworkError(TailGridsError):
    """The request never produced a response (DNS, connect, timeout...)."""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message)
