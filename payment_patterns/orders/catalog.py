"""In-memory product catalog."""

from typing import Dict, Iterable, Optional

from payment_patterns.orders.domain import Product

SAMPLE_PRODUCTS = (
    Product(id="1", name="Laptop", price=999.99, description="High-performance laptop"),
    Product(id="2", name="Mouse", price=29.99, description="Wireless optical mouse"),
    Product(id="3", name="Keyboard", price=79.99, description="Mechanical gaming keyboard"),
    Product(
        id="4", name="Monitor", price=299.99, description="27-inch 4K monitor", in_stock=False
    ),
    Product(id="5", name="Headphones", price=149.99, description="Noise-cancelling headphones"),
)


class CatalogService:
    def __init__(self, products: Optional[Iterable[Product]] = None):
        if products is None:
            products = SAMPLE_PRODUCTS
        self._products: Dict[str, Product] = {product.id: product for product in products}

    def find_product(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def is_product_available(self, product_id: str) -> bool:
        product = self.find_product(product_id)
        return product.in_stock if product else False
