"""Product list, detail and form screens."""

from dataclasses import dataclass, field

from stock_manager.controllers.base import Route, ScreenController
from stock_manager.domain.products import ImageAttachment, ProductFields, ProductRecord
from stock_manager.domain.results import (
    Connectivity,
    Forbidden,
    NotFound,
    Ok,
    Unknown,
    ValidationFailed,
)
from stock_manager.services.multipart import format_price
from stock_manager.services.tag_input import ColorTagInput

DELETE_FAILED_MESSAGE = "Failed to delete product"


@dataclass
class ProductListController(ScreenController):
    """Catalog list with delete."""

    products: list[ProductRecord] = field(default_factory=list)
    notice: str | None = None
    alert: str | None = None

    def _reset(self) -> None:
        self.notice = None
        self.alert = None

    async def load(self) -> None:
        """Fetch the catalog; failures leave the current list untouched."""
        ticket = self._ticket()
        if ticket is None:
            return
        result = await self.client.list_products()
        if not self._is_current(ticket) or self._redirect_if_expired(result):
            return
        if isinstance(result, Ok):
            self.products = result.value
            self.notice = None
        elif isinstance(result, Forbidden | Connectivity):
            self.notice = result.message

    async def delete(self, product_id: str) -> None:
        """Delete a product, then re-fetch; nothing is removed optimistically."""
        ticket = self._ticket()
        if ticket is None:
            return
        result = await self.client.delete_product(product_id)
        if not self._is_current(ticket) or self._redirect_if_expired(result):
            return
        if isinstance(result, Ok):
            await self.load()
        elif isinstance(result, Forbidden | Connectivity):
            self.alert = result.message
        else:
            self.alert = DELETE_FAILED_MESSAGE

    def dismiss_alert(self) -> None:
        """Clear the delete-failure alert."""
        self.alert = None


@dataclass
class ProductDetailController(ScreenController):
    """Read-only product detail."""

    product_id: str = ""
    product: ProductRecord | None = None
    notice: str | None = None

    def _reset(self) -> None:
        self.notice = None

    async def load(self) -> None:
        """Fetch the product; a missing product routes back to the list."""
        ticket = self._ticket()
        if ticket is None:
            return
        result = await self.client.get_product(self.product_id)
        if not self._is_current(ticket) or self._redirect_if_expired(result):
            return
        if isinstance(result, Ok):
            self.product = result.value
        elif isinstance(result, Connectivity):
            self.notice = result.message
        else:
            self.navigate_to = Route.PRODUCT_LIST


@dataclass
class ProductFormController(ScreenController):
    """Create form, or edit form when ``product_id`` is set."""

    product_id: str | None = None
    name: str = ""
    price: str = ""
    description: str = ""
    colors: ColorTagInput = field(default_factory=ColorTagInput)
    images: list[ImageAttachment] = field(default_factory=list)
    current_image_urls: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    loading: bool = False

    def _reset(self) -> None:
        self.loading = False
        self.errors = []

    @property
    def is_edit(self) -> bool:
        """Return True when editing an existing product."""
        return self.product_id is not None

    async def load(self) -> None:
        """Populate the form from the existing product when editing."""
        if not self.is_edit:
            return
        ticket = self._ticket()
        if ticket is None:
            return
        self.loading = True
        result = await self.client.get_product(self.product_id)
        if not self._is_current(ticket):
            return
        self.loading = False
        if self._redirect_if_expired(result):
            return
        if isinstance(result, Ok):
            record = result.value
            self.name = record.name
            self.price = format_price(record.price)
            self.description = record.description
            self.colors = ColorTagInput()
            for color in record.colors:
                self.colors.tags.add(color)
            self.current_image_urls = list(record.image_urls)
        elif isinstance(result, Connectivity):
            self.errors = [result.message]
        else:
            self.navigate_to = Route.PRODUCT_LIST

    def select_images(self, images: list[ImageAttachment]) -> None:
        """Replace the pending image selection."""
        self.images = list(images)

    def to_fields(self) -> ProductFields:
        """Collect the form into submit-ready fields."""
        return ProductFields(
            name=self.name,
            price=self.price,
            description=self.description,
            colors=self.colors.tags,
            images=list(self.images),
        )

    async def submit(self) -> None:
        """Save the product; validation messages stay inline on the form."""
        ticket = self._ticket()
        if ticket is None:
            return
        self.errors = []
        fields = self.to_fields()
        if self.product_id is None:
            result = await self.client.create_product(fields)
        else:
            result = await self.client.update_product(self.product_id, fields)
        if not self._is_current(ticket) or self._redirect_if_expired(result):
            return
        if isinstance(result, Ok):
            self.navigate_to = Route.PRODUCT_LIST
        elif isinstance(result, ValidationFailed):
            self.errors = list(result.messages)
        elif isinstance(result, Forbidden | Connectivity | Unknown):
            self.errors = [result.message]
        elif isinstance(result, NotFound):
            self.navigate_to = Route.PRODUCT_LIST
