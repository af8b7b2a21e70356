"""Application service: Delete Product use case.

Orders that already reference the product keep their own copy of its
name and price, so they are left untouched.
"""

from __future__ import annotations

import structlog

from orderdesk.domain.exceptions import ProductNotFound
from orderdesk.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if self._product_repo.get_by_id(product_id) is None:
            raise ProductNotFound(product_id)
        self._product_repo.delete_by_id(product_id)
        logger.info("Product deleted", product_id=product_id)
