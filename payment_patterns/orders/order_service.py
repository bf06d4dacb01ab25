"""Order creation and in-memory storage."""

from typing import Dict, List, Optional

import structlog

from payment_patterns.orders.domain import (
    Customer,
    Order,
    OrderItem,
    OrderStatus,
    calculate_total,
)

logger = structlog.get_logger(__name__)


class OrderService:
    def __init__(self) -> None:
        self._orders: Dict[str, Order] = {}
        self._order_counter = 1

    def create_order(self, customer: Customer, items: List[OrderItem]) -> Order:
        order = Order(
            id=self._generate_order_id(),
            customer=customer,
            items=list(items),
            total_amount=calculate_total(items),
            status=OrderStatus.PENDING,
        )
        self._orders[order.id] = order
        logger.info("order_created", order_id=order.id, customer_id=customer.id)
        return order

    def save_order(self, order: Order) -> bool:
        self._orders[order.id] = order
        logger.debug("order_saved", order_id=order.id)
        return True

    def update_order_status(self, order_id: str, status: OrderStatus) -> bool:
        order = self._orders.get(order_id)
        if order is None:
            return False
        order.status = status
        logger.info("order_status_updated", order_id=order_id, status=status.value)
        return True

    def get_order(self, order_id: str) -> Optional[Order]:
        return self._orders.get(order_id)

    def _generate_order_id(self) -> str:
        order_id = f"ORD_{self._order_counter:06d}"
        self._order_counter += 1
        return order_id
