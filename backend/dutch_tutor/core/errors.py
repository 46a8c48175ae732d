"""
Error types shared by the API layer.
"""
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse


class ProxyError(Exception):
    """
    Failure of a proxy request, rendered as {"error": ..., "details": ...}.

    Used for client errors (400/405), missing credentials (401), access
    policy violations (403) and upstream failures (502).
    """

    def __init__(
        self,
        status_code: int,
        error: str,
        details: Optional[str] = None,
        headers: Optional[dict] = None
    ):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details
        self.headers = headers or {}

    def to_content(self) -> dict:
        content = {"error": self.error}
        if self.details is not None:
            content["details"] = self.details
        return content


async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_content(),
        headers=exc.headers
    )


def cors_headers(methods: str, allow_headers: str = "Content-Type") -> dict:
    """CORS headers set on every proxy response."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": methods,
        "Access-Control-Allow-Headers": allow_headers
    }
