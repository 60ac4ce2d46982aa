"""Shared fixtures: a fake Swimlanes.io API served through httpx.MockTransport."""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

import httpx
import pytest

from mcp_swimlanes.client import SwimlanesClient

API_BASE = "https://api.swimlanes.io/v1"
DIAGRAM_URL = "https://swimlanes.io/d/Ab3dE9xQ"
IMAGE_URL = f"{API_BASE}/image/Ab3dE9xQ.png"

# PNG signature plus a few bytes is enough for the tools, which never decode it
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDRfake-image-data"


class FakeSwimlanesAPI:
    """Records every request and answers like the real API unless told otherwise."""

    def __init__(self):
        self.requests = []
        self.link_status = 201
        self.link_location = DIAGRAM_URL
        self.image_status = None
        self.image_bytes = PNG_BYTES
        self.redirect_loop = False
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error

        path = request.url.path
        if path.endswith("/image-link"):
            headers = {"location": self.link_location} if self.link_location else {}
            return httpx.Response(self.link_status, headers=headers)
        if path.endswith("/image"):
            if self.image_status is not None:
                return httpx.Response(self.image_status)
            return httpx.Response(303, headers={"location": IMAGE_URL})
        if path.endswith(".png"):
            if self.redirect_loop:
                return httpx.Response(302, headers={"location": IMAGE_URL})
            return httpx.Response(200, content=self.image_bytes, headers={"content-type": "image/png"})
        return httpx.Response(404)

    def client(self, **kwargs) -> SwimlanesClient:
        return SwimlanesClient(base_url=API_BASE, transport=httpx.MockTransport(self.handler), **kwargs)

    def payloads(self, endpoint: str) -> list:
        """JSON bodies POSTed to ``endpoint`` ("image" or "image-link")."""
        return [
            json.loads(r.content)
            for r in self.requests
            if r.method == "POST" and r.url.path.endswith(f"/{endpoint}")
        ]


@pytest.fixture
def api():
    return FakeSwimlanesAPI()


@pytest.fixture
def client(api):
    return api.client()


def files_under(root: Path) -> list:
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())
