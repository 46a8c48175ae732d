"""
CORS middleware for the API routes.

The proxy endpoints answer their own preflight requests with
Access-Control-Allow-Origin "*", so requests under their paths are passed
straight through instead of being checked against CORS_ORIGINS.
"""
from typing import Sequence

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class APICORSMiddleware(CORSMiddleware):
    """CORSMiddleware that leaves some path prefixes alone."""

    def __init__(self, app: ASGIApp, skip_paths: Sequence[str] = (), **kwargs) -> None:
        super().__init__(app, **kwargs)
        self.skip_paths = tuple(skip_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and self.skip_paths and scope["path"].startswith(self.skip_paths):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
