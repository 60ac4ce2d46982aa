"""
Swimlanes.io API client.

The API has two endpoints:
- POST /image-link answers 201 with the shareable URL in the Location header.
  The redirect is the result, so it is never followed.
- POST /image answers with a redirect chain ending in the PNG bytes.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from . import config
from .errors import NetworkError

logger = logging.getLogger(__name__)

API_NAME = "Swimlanes.io"


@dataclass(frozen=True)
class ImageResult:
    """Rendered PNG plus the shareable URL for the same diagram."""

    content: bytes
    url: str


def _payload(text: str, high_resolution: bool) -> dict:
    payload = {"text": text}
    if high_resolution:
        payload["high_resolution"] = True
    return payload


def _api_error(response: httpx.Response) -> NetworkError:
    return NetworkError(
        f"{API_NAME} API error: {response.status_code} {response.reason_phrase}",
        status_code=response.status_code,
    )


class SwimlanesClient:
    """Issues link and image requests against the Swimlanes.io API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        max_redirects: int = config.MAX_IMAGE_REDIRECTS,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or config.api_base()).rstrip("/")
        self.max_redirects = max_redirects
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs = {
            "base_url": self.base_url,
            "max_redirects": self.max_redirects,
            "transport": self.transport,
        }
        # Leave httpx's default timeout in place unless one was given
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return httpx.AsyncClient(**kwargs)

    async def _post(self, path: str, payload: dict, follow_redirects: bool) -> httpx.Response:
        try:
            async with self._client() as client:
                return await client.post(path, json=payload, follow_redirects=follow_redirects)
        except httpx.TimeoutException as e:
            logger.warning("%s %s timed out: %s", API_NAME, path, e)
            raise NetworkError(str(e), timeout=True) from e
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", API_NAME, path, e)
            raise NetworkError(str(e)) from e

    async def request_image_link(self, text: str, high_resolution: bool = False) -> str:
        """Create a shareable link for the diagram.

        Args:
            text: Swimlanes syntax content
            high_resolution: Request the print-quality rendering

        Returns:
            The URL from the Location header of the 201 response

        Raises:
            NetworkError: on any status other than 201, a missing Location
                header, or a transport failure
        """
        logger.debug("Requesting image link (high_resolution=%s)", high_resolution)
        response = await self._post(
            "/image-link", _payload(text, high_resolution), follow_redirects=False
        )

        if response.status_code != 201:
            raise _api_error(response)

        location = response.headers.get("location")
        if not location:
            raise NetworkError(f"No location header returned from {API_NAME} API")

        logger.info("Image link created: %s", location)
        return location

    async def request_image(self, text: str, high_resolution: bool = False) -> ImageResult:
        """Render the diagram to PNG bytes.

        Follows the redirect chain to the final image, then makes a separate
        image-link request so the caller also gets the shareable URL.
        """
        logger.debug("Requesting image (high_resolution=%s)", high_resolution)
        response = await self._post(
            "/image", _payload(text, high_resolution), follow_redirects=True
        )

        if not response.is_success:
            raise _api_error(response)

        content = response.content
        logger.info("Image received: %d bytes", len(content))

        url = await self.request_image_link(text, high_resolution)
        return ImageResult(content=content, url=url)
