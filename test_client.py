#!/usr/bin/env python3
"""Tests for the Swimlanes.io API client against a fake API."""

import httpx
import pytest

from conftest import DIAGRAM_URL, PNG_BYTES
from mcp_swimlanes.errors import NetworkError


class TestRequestImageLink:

    @pytest.mark.asyncio
    async def test_returns_location_header(self, api, client):
        url = await client.request_image_link("Alice -> Bob: Hi")
        assert url == DIAGRAM_URL
        assert api.payloads("image-link") == [{"text": "Alice -> Bob: Hi"}]

    @pytest.mark.asyncio
    async def test_high_resolution_payload(self, api, client):
        await client.request_image_link("Alice -> Bob: Hi", high_resolution=True)
        assert api.payloads("image-link") == [{"text": "Alice -> Bob: Hi", "high_resolution": True}]

    @pytest.mark.asyncio
    async def test_non_201_status(self, api, client):
        api.link_status = 200
        with pytest.raises(NetworkError) as exc:
            await client.request_image_link("Alice -> Bob: Hi")
        assert str(exc.value) == "Swimlanes.io API error: 200 OK"
        assert exc.value.status_code == 200

    @pytest.mark.asyncio
    async def test_missing_location_header(self, api, client):
        api.link_location = None
        with pytest.raises(NetworkError) as exc:
            await client.request_image_link("Alice -> Bob: Hi")
        assert str(exc.value) == "No location header returned from Swimlanes.io API"

    @pytest.mark.asyncio
    async def test_redirect_is_not_followed(self, api, client):
        api.link_status = 303
        with pytest.raises(NetworkError) as exc:
            await client.request_image_link("Alice -> Bob: Hi")
        assert exc.value.status_code == 303
        assert len(api.requests) == 1


class TestRequestImage:

    @pytest.mark.asyncio
    async def test_follows_redirect_to_bytes(self, api, client):
        image = await client.request_image("Alice -> Bob: Hi")
        assert image.content == PNG_BYTES
        assert image.url == DIAGRAM_URL

        calls = [(r.method, r.url.path) for r in api.requests]
        assert calls == [
            ("POST", "/v1/image"),
            ("GET", "/v1/image/Ab3dE9xQ.png"),
            ("POST", "/v1/image-link"),
        ]

    @pytest.mark.asyncio
    async def test_link_uses_same_text_and_resolution(self, api, client):
        await client.request_image("Alice -> Bob: Hi", high_resolution=True)
        expected = {"text": "Alice -> Bob: Hi", "high_resolution": True}
        assert api.payloads("image") == [expected]
        assert api.payloads("image-link") == [expected]

    @pytest.mark.asyncio
    async def test_api_error(self, api, client):
        api.image_status = 500
        with pytest.raises(NetworkError) as exc:
            await client.request_image("Alice -> Bob: Hi")
        assert str(exc.value) == "Swimlanes.io API error: 500 Internal Server Error"
        assert exc.value.error_code == "NETWORK_ERROR"

    @pytest.mark.asyncio
    async def test_redirects_are_bounded(self, api):
        api.redirect_loop = True
        client = api.client(max_redirects=3)
        with pytest.raises(NetworkError) as exc:
            await client.request_image("Alice -> Bob: Hi")
        assert exc.value.status_code is None
        # initial POST plus the allowed redirects, never reaching image-link
        assert len(api.requests) == 4
        assert api.payloads("image-link") == []


class TestTransportFailures:

    @pytest.mark.asyncio
    async def test_connection_error_message_is_kept(self, api, client):
        api.error = httpx.ConnectError("[Errno -2] Name or service not known")
        with pytest.raises(NetworkError) as exc:
            await client.request_image_link("Alice -> Bob: Hi")
        assert str(exc.value) == "[Errno -2] Name or service not known"
        assert exc.value.status_code is None
        assert exc.value.error_code == "NETWORK_ERROR"

    @pytest.mark.asyncio
    async def test_timeout(self, api, client):
        api.error = httpx.ReadTimeout("timed out")
        with pytest.raises(NetworkError) as exc:
            await client.request_image("Alice -> Bob: Hi")
        assert exc.value.error_code == "TIMEOUT"
