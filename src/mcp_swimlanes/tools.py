"""
Swimlane tool handlers.

Each handler validates its raw arguments, calls the Swimlanes.io API, writes
any local artifacts, and returns a response model. Failures at any stage come
back as an ErrorResponse; files written by an earlier stage are left in place.
"""

import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

from . import artifacts
from .client import SwimlanesClient
from .errors import SwimlanesError
from .models import (
    CreateSwimlaneDocumentationInput,
    DocumentationResponse,
    ErrorResponse,
    GenerateSwimlaneImageInput,
    GetSwimlaneImageLinkInput,
    ImageLinkResponse,
    ImageResponse,
    parse_arguments,
    prepare_text,
)

logger = logging.getLogger(__name__)


def _error_response(tool: str, error: Exception) -> ErrorResponse:
    if isinstance(error, SwimlanesError):
        logger.warning("%s failed: %s", tool, error)
        return ErrorResponse(error=error.message, error_code=error.error_code)
    logger.exception("%s failed unexpectedly", tool)
    return ErrorResponse(error=str(error) or "Unknown error occurred")


async def create_swimlane_documentation(
    arguments: Any,
    client: Optional[SwimlanesClient] = None,
    base_dir: Optional[Path] = None,
):
    """Create a markdown documentation file for a swimlane diagram.

    The shareable link is always fetched. The PNG is rendered and saved only
    when ``includeImage`` is set (the default).

    Returns:
        DocumentationResponse or ErrorResponse
    """
    client = client or SwimlanesClient()
    try:
        params = parse_arguments(CreateSwimlaneDocumentationInput, arguments)
        text = prepare_text(params.text, params.title)

        diagram_url = await client.request_image_link(text)

        image_path = None
        if params.include_image:
            image = await client.request_image(text)
            image_path = artifacts.default_image_path(params.title)
            artifacts.write_bytes(image_path, image.content, base_dir)

        content = artifacts.render_markdown(
            title=params.title,
            text=text,
            diagram_url=diagram_url,
            description=params.description,
            image_path=image_path,
        )
        markdown_path = params.output_path or artifacts.default_markdown_path(
            params.title, params.folder_structure
        )
        artifacts.write_text(markdown_path, content, base_dir)

        return DocumentationResponse(
            markdown_path=markdown_path,
            diagram_url=diagram_url,
            image_path=image_path,
            # Same shareable link as the diagram; there is no separate image URL
            image_url=diagram_url if image_path else None,
        )
    except Exception as e:
        return _error_response("create_swimlane_documentation", e)


async def generate_swimlane_image(
    arguments: Any,
    client: Optional[SwimlanesClient] = None,
    base_dir: Optional[Path] = None,
):
    """Render a swimlane diagram to PNG and save it."""
    client = client or SwimlanesClient()
    try:
        params = parse_arguments(GenerateSwimlaneImageInput, arguments)
        text = prepare_text(params.text, params.title)

        image = await client.request_image(text, params.high_resolution)
        image_path = params.output_path or artifacts.default_image_path(params.title)
        artifacts.write_bytes(image_path, image.content, base_dir)

        return ImageResponse(image_path=image_path, image_url=image.url)
    except Exception as e:
        return _error_response("generate_swimlane_image", e)


async def get_swimlane_image_link(
    arguments: Any,
    client: Optional[SwimlanesClient] = None,
    base_dir: Optional[Path] = None,
):
    """Get a shareable link for a swimlane diagram. Nothing is written locally."""
    client = client or SwimlanesClient()
    try:
        params = parse_arguments(GetSwimlaneImageLinkInput, arguments)
        text = prepare_text(params.text, params.title)

        image_url = await client.request_image_link(text, params.high_resolution)
        return ImageLinkResponse(image_url=image_url)
    except Exception as e:
        return _error_response("get_swimlane_image_link", e)


# ============================================================================
# Dispatch
# ============================================================================

TOOL_HANDLERS: dict[str, Callable[..., Awaitable[Any]]] = {
    "create_swimlane_documentation": create_swimlane_documentation,
    "generate_swimlane_image": generate_swimlane_image,
    "get_swimlane_image_link": get_swimlane_image_link,
}


def text_content(text: str) -> dict:
    return {"content": [{"type": "text", "text": text}]}


async def call_tool(name: str, arguments: Any = None, **collaborators) -> dict:
    """Run a tool by name and wrap its JSON result as a text content envelope."""
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        return text_content(f"Error: Unknown tool: {name}")

    response = await handler(arguments, **collaborators)
    return text_content(response.to_json())

