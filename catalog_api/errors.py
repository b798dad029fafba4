from typing import Any, Dict, Optional

SNIPPET_LIMIT = 2000


def snippet(text: str | bytes | None, limit: int = SNIPPET_LIMIT) -> str:
    if text is None:
        return ""
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    return text[:limit]


class CatalogError(Exception):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class UpstreamUnavailable(CatalogError):
    """Upstream call failed at transport level, returned a non-2xx status, or timed out."""

    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None, timed_out: bool = False) -> None:
        super().__init__(message, payload=payload)
        self.timed_out = timed_out


class UpstreamFault(CatalogError):
    """Upstream answered with a structured SOAP fault."""


class MalformedResponse(CatalogError):
    """Upstream payload could not be decoded into a tree."""


class MissingCredentials(CatalogError):
    pass
