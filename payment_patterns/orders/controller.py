"""
Order controller.

Accepts flat request fields, shapes them into a ``PlaceOrderRequest`` and
hands it to the facade. Callers get back only the order id or the error.
"""

from typing import List, Optional, Union

from pydantic import BaseModel

from payment_patterns.orders.domain import Customer
from payment_patterns.orders.facade import OrderFacade, PlaceOrderRequest
from payment_patterns.orders.payment_gateway import PaymentMethodInfo, PaymentType


class PlaceOrderResponse(BaseModel):
    success: bool
    order_id: Optional[str] = None
    error: Optional[str] = None


class OrderController:
    def __init__(self, order_facade: Optional[OrderFacade] = None):
        self.order_facade = order_facade or OrderFacade()

    async def place_order(
        self,
        customer_id: str,
        customer_name: str,
        customer_email: str,
        customer_address: str,
        product_ids: List[str],
        quantities: List[int],
        payment_type: Union[PaymentType, str],
        payment_details: str,
    ) -> PlaceOrderResponse:
        customer = Customer(
            id=customer_id,
            name=customer_name,
            email=customer_email,
            address=customer_address,
        )
        request = PlaceOrderRequest(
            customer=customer,
            product_ids=product_ids,
            quantities=quantities,
            payment_method=PaymentMethodInfo(type=PaymentType(payment_type), details=payment_details),
        )

        result = await self.order_facade.place_order(request)

        if result.success and result.order is not None:
            return PlaceOrderResponse(success=True, order_id=result.order.id)
        return PlaceOrderResponse(success=False, error=result.error_message)
