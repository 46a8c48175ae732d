"""
News Feed Proxy Service
Relays RSS / JSON news feeds from a fixed set of Dutch news hosts.
"""
import logging
from typing import Optional
from urllib.parse import SplitResult, urlsplit

import httpx

from dutch_tutor.config import settings
from dutch_tutor.core.errors import ProxyError
from dutch_tutor.services.chat_proxy_service import UpstreamResponse

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")
DEFAULT_PORTS = {"http": 80, "https": 443}
DEFAULT_CONTENT_TYPE = "text/plain; charset=utf-8"


def _host_of(parts: SplitResult) -> str:
    """Lower-cased host, with the port only when it is not the scheme default."""
    hostname = (parts.hostname or "").lower()
    port = parts.port
    if port is not None and port != DEFAULT_PORTS.get(parts.scheme):
        return f"{hostname}:{port}"
    return hostname


class NewsProxyService:
    """Validates feed URLs against the allow-list and fetches them"""

    def __init__(
        self,
        allowed_hosts: Optional[list[str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None
    ):
        hosts = allowed_hosts if allowed_hosts is not None else settings.NEWS_ALLOWED_HOSTS
        self.allowed_hosts = {h.lower() for h in hosts}
        self.transport = transport
        self.timeout = timeout or settings.UPSTREAM_TIMEOUT_SECONDS

    def validate_url(self, target: Optional[str]) -> str:
        """
        Check a requested feed URL.

        Returns:
            The URL to fetch

        Raises:
            ProxyError: 400 for a missing, invalid or non-HTTP(S) URL,
                403 for a host outside the allow-list
        """
        if not isinstance(target, str) or not target.strip():
            raise ProxyError(400, "Missing url parameter")

        try:
            parts = urlsplit(target.strip())
            host = _host_of(parts)
        except ValueError:
            raise ProxyError(400, "Invalid URL")

        if not parts.scheme:
            raise ProxyError(400, "Invalid URL")
        if parts.scheme.lower() not in ALLOWED_SCHEMES:
            raise ProxyError(400, "Unsupported protocol")
        if not host:
            raise ProxyError(400, "Invalid URL")
        if host not in self.allowed_hosts:
            logger.warning(f"Rejected news feed host: {host}")
            raise ProxyError(403, "Host is not allowed")

        return parts.geturl()

    async def fetch(self, target: Optional[str]) -> UpstreamResponse:
        """
        Fetch an allowed feed.

        Raises:
            ProxyError: validation errors, the upstream status when it is not
                successful, 502 on transport failure
        """
        url = self.validate_url(target)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                follow_redirects=True
            ) as client:
                upstream = await client.get(
                    url,
                    headers={
                        "user-agent": settings.NEWS_USER_AGENT,
                        "accept": settings.NEWS_ACCEPT
                    }
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"News feed request to {url} failed: {e}")
            raise ProxyError(502, "Failed to fetch upstream feed", details=str(e))

        if not upstream.is_success:
            logger.warning(f"News feed {url} responded with {upstream.status_code}")
            raise ProxyError(upstream.status_code, f"Upstream responded with {upstream.status_code}")

        return UpstreamResponse(
            status_code=200,
            content_type=upstream.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
            body=upstream.content
        )


def get_news_proxy_service() -> NewsProxyService:
    return NewsProxyService()
