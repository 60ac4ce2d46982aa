"""
Local artifacts: default output paths, markdown documents, and file writes.
"""

import logging
import re
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional

from . import config
from .errors import FileError

logger = logging.getLogger(__name__)

DIAGRAMS_DIR = Path("docs") / "diagrams"
IMAGES_DIR = DIAGRAMS_DIR / "images"
DEFAULT_IMAGE_NAME = "diagram"
SWIMLANES_URL = "https://swimlanes.io/"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


# ============================================================================
# Path synthesis
# ============================================================================

def sanitize_title(title: str) -> str:
    """Turn a title into a filename stem: ``"User Login!! Flow"`` -> ``"user-login-flow"``."""
    return _NON_ALNUM.sub("-", title.lower()).strip("-")


def default_markdown_path(title: str, folder_structure: Optional[str] = None) -> str:
    filename = f"{sanitize_title(title)}.md"
    if folder_structure:
        return str(DIAGRAMS_DIR / folder_structure / filename)
    return str(DIAGRAMS_DIR / filename)


def default_image_path(title: Optional[str] = None) -> str:
    stem = sanitize_title(title or DEFAULT_IMAGE_NAME) or DEFAULT_IMAGE_NAME
    return str(IMAGES_DIR / f"{stem}.png")


def image_reference(path: str) -> str:
    """Relative reference used to embed an image in the markdown document."""
    if path.startswith("./"):
        return path
    return "./" + "/".join(Path(path).parts[-2:])


# ============================================================================
# Markdown document
# ============================================================================

def render_markdown(
    title: str,
    text: str,
    diagram_url: str,
    description: Optional[str] = None,
    image_path: Optional[str] = None,
    generated_on: Optional[date] = None,
) -> str:
    """Build the documentation page for a diagram.

    Args:
        title: Page heading, also the image alt text
        text: Swimlanes source shown in the fenced block
        diagram_url: Shareable link to the interactive diagram
        description: Optional italic summary under the heading
        image_path: Rendered image to embed, if one was generated
        generated_on: Date for the footer (default: today, UTC)

    Returns:
        Markdown content
    """
    generated_on = generated_on or datetime.now(timezone.utc).date()

    parts = [f"# {title}\n\n"]

    if description:
        parts.append(f"*{description}*\n\n")

    parts.append(
        "## Overview\n\n"
        "This diagram was automatically generated from the codebase analysis.\n\n"
    )
    parts.append(f"## Diagram Source\n\n```swimlanes\n{text}\n```\n\n")

    if image_path:
        parts.append(f"## Diagram\n\n![{title}]({image_reference(image_path)})\n\n")

    parts.append(
        "## Links\n\n"
        f"- [Interactive Diagram]({diagram_url})\n"
        f"- [Swimlanes.io]({SWIMLANES_URL})\n\n"
    )
    parts.append(f"---\n\n*Generated on {generated_on.isoformat()} using Swimlanes MCP Server*\n")

    return "".join(parts)


# ============================================================================
# File writes
# ============================================================================

def _resolve(path: str, base_dir: Optional[Path]) -> Path:
    return (base_dir or config.project_dir()) / path


def _prepare(path: str, base_dir: Optional[Path]) -> Path:
    file_path = _resolve(path, base_dir)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileError(f"Failed to create directory {file_path.parent}: {e}", path=path) from e
    return file_path


def write_bytes(path: str, data: bytes, base_dir: Optional[Path] = None) -> Path:
    """Write binary data, creating parent directories and overwriting any existing file."""
    file_path = _prepare(path, base_dir)
    try:
        file_path.write_bytes(data)
    except OSError as e:
        raise FileError(f"Failed to write {path}: {e}", path=path) from e
    logger.info("Wrote %d bytes to %s", len(data), file_path)
    return file_path


def write_text(path: str, content: str, base_dir: Optional[Path] = None) -> Path:
    file_path = _prepare(path, base_dir)
    try:
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileError(f"Failed to write {path}: {e}", path=path) from e
    logger.info("Wrote %s", file_path)
    return file_path
