"""aiohttp implementation of the notification gateway."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from clinixa_notifications.application.use_cases.notifications import GatewayResult
from clinixa_notifications.config import Settings
from clinixa_notifications.domain.entities import NotificationRecord, ServerId

from .schemas import RemoteNotification, RemoteNotificationList

logger = logging.getLogger(__name__)

_NOT_PARSED = object()


def _extract_error_details(body: Any) -> str | None:
    """Return a human readable description for a backend error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body[:200]
    else:
        parsed = body

    if isinstance(parsed, dict):
        for key in ("message", "error", "detail"):
            value = parsed.get(key)
            if value:
                return str(value)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    return str(parsed)[:200]


def _decode_body(body: bytes, charset: str | None) -> str:
    try:
        return body.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


def _parse_json(text: str) -> Any:
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _NOT_PARSED


class HttpNotificationGateway:
    """Talk to the staff backend's ``/notifications`` endpoints over HTTP.

    Transport and protocol problems are reported as failed
    :class:`GatewayResult` values; none of the public coroutines raise them.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpNotificationGateway":
        return cls(
            settings.notifications_api_url,
            token=settings.notifications_api_token,
            timeout=settings.notifications_request_timeout_seconds,
        )

    async def __aenter__(self) -> "HttpNotificationGateway":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying session when this gateway created it."""

        if self._owns_session and self._session is not None:
            if not self._session.closed:
                await self._session.close()
            self._session = None

    async def fetch_notifications(self) -> GatewayResult[list[NotificationRecord]]:
        result = await self._request("GET", "/notifications")
        if not result.ok:
            return GatewayResult.failure(result.error or "unknown error")

        if result.value is _NOT_PARSED or not isinstance(result.value, dict):
            return GatewayResult.failure("GET /notifications returned a non-JSON-object body")

        try:
            envelope = RemoteNotificationList.model_validate(result.value)
        except ValidationError as exc:
            return GatewayResult.failure(
                f"GET /notifications returned an invalid envelope: {exc.error_count()} error(s)"
            )

        if not envelope.success:
            detail = envelope.message or "success flag was false"
            return GatewayResult.failure(f"GET /notifications reported failure: {detail}")

        records: list[NotificationRecord] = []
        for index, raw in enumerate(envelope.notifications):
            try:
                records.append(RemoteNotification.model_validate(raw).to_record())
            except (ValidationError, ValueError) as exc:
                logger.warning("Skipping malformed notification at position %d: %s", index, exc)
        return GatewayResult.success(records)

    async def acknowledge(self, notification_id: ServerId) -> GatewayResult[None]:
        return await self._acknowledge(f"/notifications/{notification_id.value}/read")

    async def acknowledge_all(self) -> GatewayResult[None]:
        return await self._acknowledge("/notifications/read-all")

    async def _acknowledge(self, path: str) -> GatewayResult[None]:
        result = await self._request("POST", path)
        if not result.ok:
            return GatewayResult.failure(result.error or "unknown error")
        body = result.value
        if isinstance(body, dict) and body.get("success") is False:
            detail = _extract_error_details(body) or "success flag was false"
            return GatewayResult.failure(f"POST {path} reported failure: {detail}")
        return GatewayResult.success()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            if self._timeout is not None:
                self._session = aiohttp.ClientSession(timeout=self._timeout)
            else:
                self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def _request(self, method: str, path: str) -> GatewayResult[Any]:
        url = f"{self._base_url}{path}"
        session = self._get_session()
        try:
            async with session.request(method, url, headers=self._headers()) as response:
                text = _decode_body(await response.read(), response.charset)
                if response.status >= 400:
                    details = _extract_error_details(text)
                    message = f"{method} {path} responded with status {response.status}"
                    if details:
                        message = f"{message}: {details}"
                    return GatewayResult.failure(message)
        except asyncio.TimeoutError:
            return GatewayResult.failure(f"{method} {path} timed out")
        except aiohttp.ClientError as exc:
            return GatewayResult.failure(f"{method} {path} failed: {exc}")

        return GatewayResult.success(_parse_json(text))


__all__ = ["HttpNotificationGateway"]
