"""
Tool input and response models.

Inputs accept the camelCase names used in the tool schemas as well as the
snake_case attribute names. Responses serialize with camelCase keys and
leave out fields that do not apply.
"""

from collections.abc import Mapping
from typing import Any, Literal, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .errors import ValidationError

TITLE_DIRECTIVE = "title:"

# Messages for required fields, keyed by wire name
REQUIRED_MESSAGES = {
    "text": "Swimlanes syntax content is required",
    "title": "Title is required",
}


# ============================================================================
# Inputs
# ============================================================================

class _ToolInput(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        frozen=True,
        extra="ignore",
    )


class CreateSwimlaneDocumentationInput(_ToolInput):
    text: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: Optional[str] = None
    output_path: Optional[str] = None
    include_image: bool = True
    folder_structure: Optional[str] = None


class GenerateSwimlaneImageInput(_ToolInput):
    text: str = Field(min_length=1)
    title: Optional[str] = None
    high_resolution: bool = False
    output_path: Optional[str] = None


class GetSwimlaneImageLinkInput(_ToolInput):
    text: str = Field(min_length=1)
    title: Optional[str] = None
    high_resolution: bool = False


InputT = TypeVar("InputT", bound=_ToolInput)


def parse_arguments(model: Type[InputT], arguments: Any) -> InputT:
    """Validate a raw argument bag against ``model``.

    Raises:
        ValidationError: naming the first offending field
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ValidationError("arguments", f"expected an object, got {type(arguments).__name__}")

    try:
        return model.model_validate(dict(arguments))
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "arguments"
        if field in REQUIRED_MESSAGES and error["type"] in ("missing", "string_too_short"):
            raise ValidationError(field, REQUIRED_MESSAGES[field]) from e
        raise ValidationError(field, error["msg"]) from e


def prepare_text(text: str, title: Optional[str] = None) -> str:
    """Prepend a ``title:`` directive unless the text already starts with one."""
    if title and not text.startswith(TITLE_DIRECTIVE):
        return f"{TITLE_DIRECTIVE} {title}\n{text}"
    return text


# ============================================================================
# Responses
# ============================================================================

class _ToolResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


class DocumentationResponse(_ToolResponse):
    success: Literal[True] = True
    markdown_path: str
    diagram_url: str
    image_path: Optional[str] = None
    image_url: Optional[str] = None


class ImageResponse(_ToolResponse):
    success: Literal[True] = True
    image_path: str
    image_url: str


class ImageLinkResponse(_ToolResponse):
    success: Literal[True] = True
    image_url: str


class ErrorResponse(_ToolResponse):
    success: Literal[False] = False
    error: str
    error_code: Optional[str] = None
