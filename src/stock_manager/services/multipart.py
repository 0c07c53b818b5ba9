"""Multipart payload construction for product writes."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from stock_manager.domain.products import ProductFields

FilePart = tuple[str | None, bytes] | tuple[str | None, bytes, str | None]


@dataclass(frozen=True)
class MultipartPayload:
    """Ordered multipart parts ready to be passed to httpx as ``files=``.

    Text parts carry no filename so they are sent as plain form fields.
    """

    parts: list[tuple[str, FilePart]] = field(default_factory=list)

    def values(self, key: str) -> list[str | bytes]:
        """Return every value sent under a key, in order."""
        found: list[str | bytes] = []
        for name, part in self.parts:
            if name != key:
                continue
            filename, content = part[0], part[1]
            found.append(content if filename else content.decode("utf-8"))
        return found

    def keys(self) -> list[str]:
        """Return the field names in wire order, repeated keys included."""
        return [name for name, _ in self.parts]


def format_price(price: float | int | str) -> str:
    """Render a price as the decimal string the server parses."""
    if isinstance(price, str):
        return price.strip()
    try:
        value = Decimal(str(price))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid price: {price!r}") from exc
    return format(value.normalize(), "f")


def build_product_payload(fields: ProductFields) -> MultipartPayload:
    """Serialize product fields, color tags and images into multipart parts."""
    parts: list[tuple[str, FilePart]] = [
        ("name", (None, fields.name.encode("utf-8"))),
        ("price", (None, format_price(fields.price).encode("utf-8"))),
        ("description", (None, fields.description.encode("utf-8"))),
    ]
    for color in fields.colors:
        parts.append(("colors", (None, color.encode("utf-8"))))
    for image in fields.images:
        parts.append(("images", (image.filename, image.content, image.content_type)))
    return MultipartPayload(parts=parts)
