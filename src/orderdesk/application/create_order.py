"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Product
lookup + Order creation).
"""

from __future__ import annotations

import structlog

from orderdesk.application.dto import OrderDTO, OrderRequest, to_order_dto
from orderdesk.domain.exceptions import EmptyOrderRequest, ProductNotFound
from orderdesk.domain.model.order import CustomerInfo, Order, OrderItem, OrderStatus
from orderdesk.domain.model.value_objects import Quantity
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, request: OrderRequest) -> OrderDTO:
        """Create a new PENDING order.

        Steps:
        1. Resolve each product id to a Product (fail on the first miss).
        2. Build OrderItems with *current* prices (snapshot).
        3. Let the Order aggregate validate all business rules.
        4. Persist once and return a DTO.

        Nothing is saved unless every line resolves.
        """
        if not request.lines:
            raise EmptyOrderRequest()

        if request.status is not None and request.status.strip().upper() != OrderStatus.PENDING.value:
            logger.warning(
                "Ignoring requested status on new order",
                requested_status=request.status,
            )

        items: list[OrderItem] = []
        for line in request.lines:
            quantity = Quantity(line.quantity)
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise ProductNotFound(line.product_id)

            items.append(
                OrderItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=quantity,
                    unit_price=product.price,  # <-- price snapshot
                )
            )

        order = Order.create(
            customer=CustomerInfo(
                name=request.customer_name,
                email=request.customer_email,
                phone=request.customer_phone,
            ),
            shipping_address=request.shipping_address,
            items=items,
        )
        saved = self._order_repo.save(order)

        logger.info(
            "Order created",
            order_id=saved.id,
            items=len(saved.items),
            total=str(saved.total_amount.amount),
        )
        return to_order_dto(saved)
