"""
Chat Completion Proxy Service
Translates legacy text-generation requests ({inputs, parameters}) into
OpenAI-style chat completion requests and forwards them to Hugging Face.
"""
import json
import logging
import random
from typing import Any, Optional

import httpx
from pydantic import BaseModel

from dutch_tutor.config import settings
from dutch_tutor.core.errors import ProxyError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class UpstreamResponse(BaseModel):
    """Status, content type and raw body relayed back to the caller"""
    status_code: int
    content_type: str
    body: bytes


class ChatProxyService:
    """Forwards chat completion requests with the configured API key"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None
    ):
        self.api_key = api_key if api_key is not None else settings.HF_API_KEY
        self.api_base = api_base or settings.HF_API_BASE
        self.transport = transport
        self.timeout = timeout or settings.UPSTREAM_TIMEOUT_SECONDS

    def resolve_token(self, authorization: Optional[str]) -> str:
        """
        Pick the API token: the configured key first, else the caller's bearer token.

        Raises:
            ProxyError: 401 when neither is available
        """
        if self.api_key:
            return self.api_key
        if authorization and authorization.startswith(BEARER_PREFIX):
            token = authorization[len(BEARER_PREFIX):]
            if token:
                return token
        raise ProxyError(401, "Missing API token. Set VITE_HF_API_KEY in .env.local")

    @staticmethod
    def build_payload(model: str, body: Any) -> dict:
        """
        Convert a legacy {inputs, parameters} body to a chat completion payload.

        Missing parameters get the defaults: 650 max tokens, a random
        temperature between 0.8 and 1.0 and top_p 0.95.
        """
        legacy = body if isinstance(body, dict) else {}
        parameters = legacy.get("parameters")
        if not isinstance(parameters, dict):
            parameters = {}

        inputs = legacy.get("inputs")
        content = inputs if isinstance(inputs, str) else json.dumps(inputs or "")

        temperature = parameters.get("temperature")
        if temperature is None:
            temperature = settings.HF_TEMPERATURE_MIN + random.random() * settings.HF_TEMPERATURE_SPREAD
        top_p = parameters.get("top_p")
        if top_p is None:
            top_p = settings.HF_DEFAULT_TOP_P

        return {
            "model": model,
            "messages": [{"role": "user", "content": content}],
            "max_tokens": parameters.get("max_new_tokens") or settings.HF_DEFAULT_MAX_TOKENS,
            "temperature": temperature,
            "top_p": top_p
        }

    async def forward(
        self,
        model: Optional[str],
        body: Any,
        authorization: Optional[str] = None
    ) -> UpstreamResponse:
        """
        Validate, translate and forward one request.

        Args:
            model: Model id from the query string
            body: Parsed legacy request body
            authorization: Incoming Authorization header

        Returns:
            The upstream status, content type and body, unchanged

        Raises:
            ProxyError: 400 without model, 401 without token, 502 on transport failure
        """
        if not isinstance(model, str) or not model.strip():
            raise ProxyError(400, "Missing model parameter")

        token = self.resolve_token(authorization)
        payload = self.build_payload(model, body)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                upstream = await client.post(
                    self.api_base,
                    headers={
                        "Content-Type": "application/json",
                        "Authorization": f"Bearer {token}"
                    },
                    json=payload
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Chat completion upstream request failed: {e}")
            raise ProxyError(502, "Failed to fetch from Hugging Face API", details=str(e))

        if upstream.is_error:
            logger.error(
                f"HF API Error [{upstream.status_code}]: url={self.api_base} "
                f"reason={upstream.reason_phrase} body={upstream.text[:500]}"
            )

        return UpstreamResponse(
            status_code=upstream.status_code,
            content_type=upstream.headers.get("content-type") or "application/json",
            body=upstream.content
        )


def get_chat_proxy_service() -> ChatProxyService:
    return ChatProxyService()
