"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from orderdesk.config import settings
from orderdesk.domain.service.access_policy import AccessPolicy
from orderdesk.domain.service.claims_authorizer import ClaimsAuthorizer
from orderdesk.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderdesk.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(data_dir: Path | None = None) -> JsonProductRepository:
    base = data_dir or settings.data_path
    return JsonProductRepository(base / "products.json")


def order_repository(data_dir: Path | None = None) -> JsonOrderRepository:
    base = data_dir or settings.data_path
    return JsonOrderRepository(base / "orders.json")


def claims_authorizer() -> ClaimsAuthorizer:
    return ClaimsAuthorizer(client_id=settings.CLIENT_ID)


def access_policy() -> AccessPolicy:
    return AccessPolicy()
