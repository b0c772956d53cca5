"""Tests for the HTTP claims client, against a local aiohttp test server."""

from __future__ import annotations

import asyncio

import pytest
from aiohttp import test_utils, web

from claims_api.client import FETCH_FAILURE_MESSAGE, UPLOAD_FAILURE_MESSAGE, ClaimsClient
from claims_api.core.exceptions import TransportFailure

UPLOAD_RESPONSE = {"successCount": 1, "errorCount": 0, "validData": [], "invalidData": [], "errors": []}


async def _with_server(routes, scenario):
    app = web.Application()
    app.add_routes(routes)
    async with test_utils.TestServer(app) as server:
        async with ClaimsClient(base_url=f"http://{server.host}:{server.port}") as client:
            return await scenario(client)


def test_upload_sends_multipart_file() -> None:
    seen = {}

    async def handle_upload(request: web.Request) -> web.Response:
        form = await request.post()
        seen["file_name"] = form["file"].filename
        seen["content"] = form["file"].file.read()
        return web.json_response(UPLOAD_RESPONSE)

    result = asyncio.run(_with_server(
        [web.post("/claims/upload", handle_upload)],
        lambda client: client.upload_claims(b"claimId\nC1\n", file_name="batch.csv"),
    ))

    assert result == UPLOAD_RESPONSE
    assert seen == {"file_name": "batch.csv", "content": b"claimId\nC1\n"}


def test_upload_reads_file_from_path(tmp_path) -> None:
    path = tmp_path / "claims.csv"
    path.write_bytes(b"claimId\nC7\n")
    seen = {}

    async def handle_upload(request: web.Request) -> web.Response:
        form = await request.post()
        seen["file_name"] = form["file"].filename
        return web.json_response(UPLOAD_RESPONSE)

    asyncio.run(_with_server(
        [web.post("/claims/upload", handle_upload)],
        lambda client: client.upload_claims(path),
    ))

    assert seen["file_name"] == "claims.csv"


def test_fetch_omits_empty_filters() -> None:
    params = []

    async def handle_list(request: web.Request) -> web.Response:
        params.append(dict(request.query))
        return web.json_response([{"claimId": "C1"}])

    async def scenario(client: ClaimsClient):
        first = await client.fetch_claims(member_id="M1", start_date="", end_date="2024-01-31")
        await client.fetch_claims()
        return first

    result = asyncio.run(_with_server([web.get("/claims", handle_list)], scenario))

    assert result == [{"claimId": "C1"}]
    assert params == [{"memberId": "M1", "endDate": "2024-01-31"}, {}]


def test_error_status_raises_transport_failure() -> None:
    async def handle_upload(request: web.Request) -> web.Response:
        return web.json_response({"error": {}}, status=500)

    with pytest.raises(TransportFailure) as exc_info:
        asyncio.run(_with_server(
            [web.post("/claims/upload", handle_upload)],
            lambda client: client.upload_claims(b"x"),
        ))

    assert exc_info.value.message == UPLOAD_FAILURE_MESSAGE
    assert exc_info.value.status_code == 500


def test_non_json_body_raises_transport_failure() -> None:
    async def handle_list(request: web.Request) -> web.Response:
        return web.Response(text="<html>", content_type="text/html")

    with pytest.raises(TransportFailure) as exc_info:
        asyncio.run(_with_server([web.get("/claims", handle_list)], lambda client: client.fetch_claims()))

    assert exc_info.value.message == FETCH_FAILURE_MESSAGE


def test_connection_error_raises_transport_failure() -> None:
    async def scenario():
        async with ClaimsClient(base_url="http://127.0.0.1:1", timeout=5) as client:
            return await client.fetch_claims()

    with pytest.raises(TransportFailure) as exc_info:
        asyncio.run(scenario())

    assert exc_info.value.message == FETCH_FAILURE_MESSAGE
    assert exc_info.value.status_code is None
