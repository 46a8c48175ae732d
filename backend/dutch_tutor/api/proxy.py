"""
Proxy Endpoints
Thin request/response translators in front of the chat completion API and
the Dutch news feeds, so the browser never holds the API key and is not
blocked by CORS.
"""
import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, Response

from dutch_tutor.config import settings
from dutch_tutor.core.errors import ProxyError, cors_headers
from dutch_tutor.services.chat_proxy_service import ChatProxyService, get_chat_proxy_service
from dutch_tutor.services.news_proxy_service import NewsProxyService, get_news_proxy_service


logger = logging.getLogger(__name__)

router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

CHAT_PATH = "/hf-proxy"
NEWS_PATH = "/news-proxy"
PROXY_PATHS = (CHAT_PATH, NEWS_PATH)

CHAT_CORS = cors_headers("POST,OPTIONS", "Content-Type, Authorization")
NEWS_CORS = cors_headers("GET,OPTIONS")


async def _read_json_body(request: Request) -> Any:
    """Parsed JSON body, None when empty or not JSON."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.debug("Proxy request body is not valid JSON")
        return None


@router.api_route(CHAT_PATH, methods=ALL_METHODS)
async def chat_completion_proxy(
    request: Request,
    model: Optional[str] = None,
    service: ChatProxyService = Depends(get_chat_proxy_service)
):
    """
    Forward a legacy {inputs, parameters} request as a chat completion.

    Query parameters:
    - model: model id to run (required)

    The upstream status, content type and body are returned unchanged.
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CHAT_CORS)
    if request.method != "POST":
        raise ProxyError(405, "Method not allowed", headers=CHAT_CORS)

    body = await _read_json_body(request)
    try:
        upstream = await service.forward(model, body, request.headers.get("authorization"))
    except ProxyError as e:
        e.headers = {**CHAT_CORS, **e.headers}
        raise

    return Response(
        content=upstream.body,
        status_code=upstream.status_code,
        headers={**CHAT_CORS, "Content-Type": upstream.content_type}
    )


@router.api_route(NEWS_PATH, methods=ALL_METHODS)
async def news_feed_proxy(
    request: Request,
    url: Optional[str] = None,
    service: NewsProxyService = Depends(get_news_proxy_service)
):
    """
    Relay a news feed from an allowed host.

    Query parameters:
    - url: feed URL (http or https, allowed hosts only)
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=NEWS_CORS)
    if request.method != "GET":
        raise ProxyError(405, "Method not allowed", headers=NEWS_CORS)

    try:
        upstream = await service.fetch(url)
    except ProxyError as e:
        e.headers = {**NEWS_CORS, **e.headers}
        raise

    return Response(
        content=upstream.body,
        status_code=upstream.status_code,
        headers={
            **NEWS_CORS,
            "Content-Type": upstream.content_type,
            "Cache-Control": f"public, max-age={settings.NEWS_CACHE_MAX_AGE_SECONDS}"
        }
    )
