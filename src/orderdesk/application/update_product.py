"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from orderdesk.application.dto import ProductDTO, to_product_dto
from orderdesk.domain.exceptions import ProductNotFound, ValidationError
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        price: str | None = None,
        stock_quantity: int | None = None,
        category: str | None = None,
        description: str | None = None,
    ) -> ProductDTO:
        """Update any subset of a product's fields.

        This does NOT affect any existing orders — they captured a
        price snapshot at creation time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        if name is not None and name.strip().lower() != product.name.lower():
            clash = self._product_repo.get_by_name(name.strip())
            if clash is not None and clash.id != product.id:
                raise ValidationError(f"Product '{name.strip()}' already exists")
            product.rename(name)
        if price is not None:
            product.update_price(Money.of(price, product.price.currency))
        if stock_quantity is not None:
            product.update_stock(stock_quantity)
        if category is not None:
            product.category = category.strip()
        if description is not None:
            product.description = description.strip()

        self._product_repo.save(product)
        logger.info("Product updated", product_id=product_id)
        return to_product_dto(product)
