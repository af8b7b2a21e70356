"""Application service: catalog queries."""

from __future__ import annotations

from orderdesk.application.dto import ProductDTO, to_product_dto
from orderdesk.domain.exceptions import ProductNotFound
from orderdesk.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category: str | None = None) -> list[ProductDTO]:
        products = self._product_repo.list_all()
        if category:
            wanted = category.strip().lower()
            products = [p for p in products if p.category.lower() == wanted]
        return [to_product_dto(p) for p in products]

    def get(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return to_product_dto(product)
