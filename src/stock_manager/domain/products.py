"""Domain models for the product catalog."""

import mimetypes
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductRecord(BaseModel):
    """Server-owned product as returned by the API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    price: float = Field(ge=0)
    description: str = ""
    image_urls: list[str] = Field(default_factory=list, alias="imageUrls")
    colors: list[str] = Field(default_factory=list)
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @field_validator("image_urls", "colors", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return [] if value is None else value


class ColorTagSet:
    """Ordered set of color tags with exact, case-sensitive duplicate suppression."""

    def __init__(self, colors: Iterable[str] = ()) -> None:
        self._tags: dict[str, None] = {}
        for color in colors:
            self.add(color)

    def add(self, color: str) -> bool:
        """Append a tag unless it is empty or already present."""
        if not color or color in self._tags:
            return False
        self._tags[color] = None
        return True

    def remove(self, color: str) -> bool:
        """Remove a tag by exact value."""
        if color not in self._tags:
            return False
        del self._tags[color]
        return True

    def as_list(self) -> list[str]:
        """Return the tags in insertion order."""
        return list(self._tags)

    def __contains__(self, color: object) -> bool:
        return color in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"ColorTagSet({self.as_list()!r})"


@dataclass(frozen=True)
class ImageAttachment:
    """Binary image selected for upload."""

    filename: str
    content: bytes
    content_type: str | None = None

    @classmethod
    def from_path(cls, path: Path | str) -> "ImageAttachment":
        """Read an image from disk, guessing its content type from the name."""
        resolved = Path(path)
        content_type, _ = mimetypes.guess_type(resolved.name)
        return cls(
            filename=resolved.name,
            content=resolved.read_bytes(),
            content_type=content_type,
        )


@dataclass
class ProductFields:
    """Editable product fields submitted on create or update."""

    name: str
    price: float | int | str
    description: str
    colors: ColorTagSet = field(default_factory=ColorTagSet)
    images: list[ImageAttachment] = field(default_factory=list)
