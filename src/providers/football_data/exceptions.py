from typing import Optional


class UpstreamAPIError(Exception):
    """Sollevata quando football-data.org non restituisce una risposta utilizzabile."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamTimeoutError(UpstreamAPIError):
    """Sollevata quando la chiamata supera il timeout configurato."""


class InvalidPayloadError(UpstreamAPIError):
    """Sollevata quando il body non è JSON o non ha la forma attesa."""
