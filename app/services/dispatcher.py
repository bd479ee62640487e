"""
Forwarding dispatcher

Issues exactly one downstream call per inbound request and hands the raw
response to the envelope translator.
"""

import time
from typing import Any, Dict, Mapping, Optional

import httpx
import structlog

from app.services.envelope import (
    Acknowledged,
    TransportError,
    TransportErrorReason,
    TransportOutcome,
    translate,
)

logger = structlog.get_logger(__name__)


def build_client(base_url: str, timeout: float) -> httpx.AsyncClient:
    """Shared client for the downstream service (connection reuse)"""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout),
        headers={"Accept": "application/json"},
    )


class ForwardingDispatcher:
    """Mirrors inbound calls onto the downstream service"""

    def __init__(
        self,
        client: httpx.AsyncClient,
        forward_authorization: bool = False,
        headers: Optional[Mapping[str, str]] = None
    ):
        self.client = client
        self.forward_authorization = forward_authorization
        self.headers: Dict[str, str] = dict(headers or {})

    def bind_headers(self, headers: Mapping[str, str]) -> "ForwardingDispatcher":
        """Copy of this dispatcher that adds headers to every call"""
        return ForwardingDispatcher(
            self.client,
            forward_authorization=self.forward_authorization,
            headers={**self.headers, **headers},
        )

    async def dispatch(
        self,
        method: str,
        path: str,
        payload_type: Any,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Any] = None
    ) -> TransportOutcome:
        """
        Forward one call and translate the reply

        Args:
            method: HTTP verb
            path: Downstream path, appended to the configured base URL
            payload_type: Type the envelope's response field decodes into
            params: Query parameters; None values are omitted
            json: JSON body (never sent for DELETE)

        Returns:
            Success, Failure or TransportError. Network failures come back
            as TransportError; cancellation propagates to the caller.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        started = time.perf_counter()

        try:
            response = await self.client.request(
                method,
                path,
                params=query or None,
                json=json,
                headers=self.headers or None,
            )
        except httpx.TimeoutException as e:
            logger.error(
                "Downstream call timed out",
                method=method,
                path=path,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
                error=str(e) or type(e).__name__,
            )
            return TransportError(TransportErrorReason.TIMEOUT, f"{method} {path} timed out")
        except httpx.RequestError as e:
            logger.error(
                "Downstream call failed",
                method=method,
                path=path,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
                error=str(e) or type(e).__name__,
            )
            return TransportError(
                TransportErrorReason.UNREACHABLE,
                f"{method} {path} failed: {type(e).__name__}",
            )

        logger.info(
            "Downstream call completed",
            method=method,
            path=path,
            status_code=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return translate(response.status_code, response.content, payload_type)

    async def get(self, path: str, payload_type: Any, params: Optional[Mapping[str, Any]] = None) -> TransportOutcome:
        return await self.dispatch("GET", path, payload_type, params=params)

    async def post(self, path: str, body: Any, payload_type: Any = Acknowledged) -> TransportOutcome:
        return await self.dispatch("POST", path, payload_type, json=body)

    async def put(self, path: str, body: Any, payload_type: Any = Acknowledged) -> TransportOutcome:
        return await self.dispatch("PUT", path, payload_type, json=body)

    async def delete(self, path: str, payload_type: Any = Acknowledged) -> TransportOutcome:
        # DELETE carries its identifiers in the path, never in a body
        return await self.dispatch("DELETE", path, payload_type)
