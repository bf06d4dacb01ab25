"""Facade pattern: a single call that runs the whole order checkout."""
from .catalog import SAMPLE_PRODUCTS, CatalogService
from .controller import OrderController, PlaceOrderResponse
from .domain import Customer, Order, OrderItem, OrderStatus, Product
from .facade import OrderFacade, PlaceOrderRequest, PlaceOrderResult
from .order_service import OrderService
from .payment_gateway import (
    GatewayResult,
    PaymentMethodInfo,
    PaymentType,
    SimulatedPaymentService,
)

__all__ = [
    "CatalogService",
    "Customer",
    "GatewayResult",
    "Order",
    "OrderController",
    "OrderFacade",
    "OrderItem",
    "OrderService",
    "OrderStatus",
    "PaymentMethodInfo",
    "PaymentType",
    "PlaceOrderRequest",
    "PlaceOrderResponse",
    "PlaceOrderResult",
    "Product",
    "SAMPLE_PRODUCTS",
    "SimulatedPaymentService",
]
