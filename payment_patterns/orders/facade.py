"""
Order facade.

One ``place_order`` call hides the whole checkout:
1. Look up products and check stock and quantities
2. Calculate the total
3. Charge the payment method
4. Create and save the order
5. Mark it CONFIRMED

Every failure comes back as ``PlaceOrderResult(success=False)``; nothing is
raised to the caller.
"""

from typing import List, Optional

import structlog
from pydantic import BaseModel, Field

from payment_patterns.orders.catalog import CatalogService
from payment_patterns.orders.domain import (
    Customer,
    Order,
    OrderItem,
    OrderStatus,
    calculate_total,
)
from payment_patterns.orders.order_service import OrderService
from payment_patterns.orders.payment_gateway import (
    PaymentMethodInfo,
    SimulatedPaymentService,
)

logger = structlog.get_logger(__name__)


class PlaceOrderRequest(BaseModel):
    customer: Customer
    product_ids: List[str] = Field(default_factory=list)
    quantities: List[int] = Field(default_factory=list)
    payment_method: PaymentMethodInfo


class PlaceOrderResult(BaseModel):
    success: bool
    order: Optional[Order] = None
    error_message: Optional[str] = None


class OrderFacade:
    def __init__(
        self,
        catalog_service: Optional[CatalogService] = None,
        payment_service: Optional[SimulatedPaymentService] = None,
        order_service: Optional[OrderService] = None,
    ):
        self.catalog_service = catalog_service or CatalogService()
        self.payment_service = payment_service or SimulatedPaymentService()
        self.order_service = order_service or OrderService()

    async def place_order(self, request: PlaceOrderRequest) -> PlaceOrderResult:
        log = logger.bind(customer_id=request.customer.id)
        try:
            items = self._build_order_items(request.product_ids, request.quantities)
            if items is None:
                return PlaceOrderResult(
                    success=False,
                    error_message="Failed to validate products or quantities",
                )

            total_amount = calculate_total(items)
            log.info("order_total_calculated", total_amount=round(total_amount, 2))

            payment = self.payment_service.process_payment(total_amount, request.payment_method)
            if not payment.success:
                return PlaceOrderResult(
                    success=False,
                    error_message=f"Payment failed: {payment.error_message}",
                )

            order = self.order_service.create_order(request.customer, items)
            if not self.order_service.save_order(order):
                return PlaceOrderResult(success=False, error_message="Failed to save order")

            self.order_service.update_order_status(order.id, OrderStatus.CONFIRMED)
            log.info("order_placed", order_id=order.id, transaction_id=payment.transaction_id)
            return PlaceOrderResult(success=True, order=order)

        except Exception as exc:
            log.exception("order_placement_error")
            return PlaceOrderResult(
                success=False,
                error_message=f"Order placement failed: {exc}",
            )

    def _build_order_items(
        self, product_ids: List[str], quantities: List[int]
    ) -> Optional[List[OrderItem]]:
        if len(product_ids) != len(quantities):
            logger.warning(
                "order_items_mismatch",
                product_count=len(product_ids),
                quantity_count=len(quantities),
            )
            return None

        items: List[OrderItem] = []
        for product_id, quantity in zip(product_ids, quantities):
            product = self.catalog_service.find_product(product_id)
            if product is None:
                logger.warning("product_not_found", product_id=product_id)
                return None
            if not self.catalog_service.is_product_available(product_id):
                logger.warning("product_unavailable", product_id=product_id)
                return None
            if quantity <= 0:
                logger.warning("invalid_quantity", product_id=product_id, quantity=quantity)
                return None

            items.append(OrderItem(product=product, quantity=quantity, unit_price=product.price))
        return items
