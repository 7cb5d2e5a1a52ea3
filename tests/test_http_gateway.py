"""Tests for the aiohttp notification gateway against an in-process backend."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

import pytest
from aiohttp import test_utils, web

from clinixa_notifications.application.use_cases.notifications import (
    NotificationStore,
    ReadStateReconciler,
)
from clinixa_notifications.domain.entities import LocalId, ServerId
from clinixa_notifications.infrastructure.notifications import HttpNotificationGateway
from support import make_record

pytestmark = pytest.mark.anyio


def _backend(responses: dict[str, object], requests: list[tuple[str, str, str | None]]):
    """Build an aiohttp app answering with ``responses`` keyed by ``METHOD path``."""

    async def handler(request: web.Request) -> web.StreamResponse:
        key = f"{request.method} {request.path}"
        requests.append((request.method, request.path, request.headers.get("Authorization")))
        response = responses.get(key)
        if response is None:
            return web.json_response({"success": False, "message": "not found"}, status=404)
        if isinstance(response, float):
            await asyncio.sleep(response)
            return web.json_response({"success": True, "notifications": []})
        return response

    app = web.Application()
    app.router.add_route("*", "/api/{tail:.*}", handler)
    return app


def _gateway_for(server: test_utils.TestServer, **kwargs) -> HttpNotificationGateway:
    return HttpNotificationGateway(str(server.make_url("/api")), **kwargs)


async def test_fetch_parses_snapshot_and_sends_token() -> None:
    requests: list = []
    payload = {
        "success": True,
        "count": 3,
        "notifications": [
            {
                "id": 12,
                "type": "Emergency",
                "title": "Emergency Case",
                "message": "Patient in Room 104 needs immediate billing clearance.",
                "timestamp": "2026-03-14T09:28:00Z",
                "read": False,
                "link": "/reception/billing",
            },
            {
                "id": "summary-1",
                "type": "appointment",
                "title": "Today's Schedule",
                "message": "You have 4 appointment(s) today",
                "timestamp": "2026-03-14T09:00:00+05:30",
                "read": False,
            },
            {
                "id": "7",
                "type": None,
                "title": "Maintenance",
                "message": "Scheduled downtime at midnight",
                "timestamp": "2026-03-13T18:00:00Z",
                "read": True,
            },
        ],
    }
    app = _backend({"GET /api/notifications": web.json_response(payload)}, requests)

    async with test_utils.TestServer(app) as server:
        async with _gateway_for(server, token="secret-token") as gateway:
            result = await gateway.fetch_notifications()

    assert result.ok
    records = result.value
    assert [record.id for record in records] == [ServerId(12), LocalId("summary-1"), ServerId(7)]
    assert records[0].category == "emergency"
    assert records[0].created_at == datetime(2026, 3, 14, 9, 28, tzinfo=timezone.utc)
    assert records[2].category == "system"
    assert records[2].read is True
    assert requests == [("GET", "/api/notifications", "Bearer secret-token")]


async def test_fetch_skips_malformed_items(caplog) -> None:
    payload = {
        "success": True,
        "notifications": [
            {"id": True, "type": "info", "title": "x", "message": "y", "timestamp": "2026-03-14T09:00:00Z"},
            {"id": 3, "type": "info", "title": "no timestamp", "message": "y"},
            {"id": 4, "type": "lab", "title": "CBC ready", "message": "y", "timestamp": "2026-03-14T09:00:00Z"},
        ],
    }
    app = _backend({"GET /api/notifications": web.json_response(payload)}, [])

    async with test_utils.TestServer(app) as server:
        async with _gateway_for(server) as gateway:
            with caplog.at_level(logging.WARNING):
                result = await gateway.fetch_notifications()

    assert result.ok
    assert [record.id for record in result.value] == [ServerId(4)]
    assert caplog.text.count("Skipping malformed notification") == 2


async def test_fetch_skips_items_that_are_not_objects() -> None:
    payload = {
        "success": True,
        "notifications": [
            None,
            "Patient admitted",
            {"id": 4, "type": "lab", "title": "CBC ready", "message": "y", "timestamp": "2026-03-14T09:00:00Z"},
        ],
    }
    app = _backend({"GET /api/notifications": web.json_response(payload)}, [])

    async with test_utils.TestServer(app) as server:
        async with _gateway_for(server) as gateway:
            result = await gateway.fetch_notifications()

    assert result.ok
    assert [record.id for record in result.value] == [ServerId(4)]


@pytest.mark.parametrize(
    ("response", "fragment"),
    [
        (
            web.json_response(
                {"success": False, "message": "Failed to fetch notifications"}, status=500
            ),
            "status 500: Failed to fetch notifications",
        ),
        (web.json_response({"success": False, "message": "db down"}), "reported failure: db down"),
        (web.Response(text="<html>gateway</html>", content_type="text/html"), "non-JSON"),
        (web.json_response({"notifications": []}), "invalid envelope"),
    ],
)
async def test_fetch_failures_are_explicit_results(response, fragment) -> None:
    app = _backend({"GET /api/notifications": response}, [])

    async with test_utils.TestServer(app) as server:
        async with _gateway_for(server) as gateway:
            result = await gateway.fetch_notifications()

    assert not result.ok
    assert fragment in result.error


async def test_unreachable_backend_is_a_failed_result() -> None:
    async with test_utils.TestServer(_backend({}, [])) as server:
        url = str(server.make_url("/api"))

    async with HttpNotificationGateway(url) as gateway:
        result = await gateway.fetch_notifications()

    assert not result.ok
    assert "GET /notifications" in result.error


async def test_transport_timeout_is_a_failed_result() -> None:
    app = _backend({"GET /api/notifications": 0.3}, [])

    async with test_utils.TestServer(app) as server:
        async with _gateway_for(server, timeout=0.05) as gateway:
            result = await gateway.fetch_notifications()

    assert not result.ok


async def test_acknowledgements_post_to_expected_paths() -> None:
    requests: list = []
    app = _backend(
        {
            "POST /api/notifications/12/read": web.json_response({"success": True}),
            "POST /api/notifications/read-all": web.json_response({"success": True}),
        },
        requests,
    )

    async with test_utils.TestServer(app) as server:
        async with _gateway_for(server) as gateway:
            single = await gateway.acknowledge(ServerId(12))
            every = await gateway.acknowledge_all()

    assert single.ok and every.ok
    assert [(method, path) for method, path, _ in requests] == [
        ("POST", "/api/notifications/12/read"),
        ("POST", "/api/notifications/read-all"),
    ]
    assert requests[0][2] is None


async def test_acknowledgement_failures() -> None:
    app = _backend(
        {
            "POST /api/notifications/12/read": web.json_response(
                {"success": False, "message": "Notification not found"}, status=500
            ),
            "POST /api/notifications/read-all": web.json_response({"success": False}),
        },
        [],
    )

    async with test_utils.TestServer(app) as server:
        async with _gateway_for(server) as gateway:
            single = await gateway.acknowledge(ServerId(12))
            every = await gateway.acknowledge_all()

    assert not single.ok
    assert "status 500: Notification not found" in single.error
    assert not every.ok
    assert "reported failure" in every.error


async def test_undecodable_body_is_contained() -> None:
    body = b'\xff\xfe{"success": true}'
    app = _backend(
        {
            "GET /api/notifications": web.Response(
                body=body, content_type="application/json", charset="utf-8"
            ),
            "POST /api/notifications/1/read": web.Response(
                body=body, content_type="application/json", charset="utf-8"
            ),
        },
        [],
    )
    store = NotificationStore()
    store.replace([make_record(1)])

    async with test_utils.TestServer(app) as server:
        async with _gateway_for(server) as gateway:
            fetched = await gateway.fetch_notifications()
            acknowledged = await ReadStateReconciler(store, gateway).mark_read(ServerId(1))

    assert not fetched.ok
    assert "non-JSON" in fetched.error
    assert acknowledged is not None and acknowledged.ok
    assert store.get(ServerId(1)).read is True
