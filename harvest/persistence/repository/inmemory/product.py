"""In-memory product repository for testing."""

from datetime import datetime
from typing import Optional

from harvest.domain.model.product import Product
from harvest.domain.repository.product import ProductRepository
from harvest.domain.value import ProductId, UserId

from .store import InMemoryStore


class InMemoryProductRepository(ProductRepository):
    """In-memory implementation of ProductRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._products = (store or InMemoryStore()).products

    def _matching(
        self,
        category: Optional[str],
        city: Optional[str],
        seller_id: Optional[UserId],
        search: Optional[str],
    ) -> list[Product]:
        products = list(self._products.values())

        if category is not None:
            products = [p for p in products if p.category == category]
        if city is not None:
            products = [p for p in products if p.city == city]
        if seller_id is not None:
            products = [p for p in products if p.seller_id == seller_id]
        if search:
            # Every search word must appear somewhere in name or description
            words = search.lower().split()
            products = [
                p
                for p in products
                if all(w in f"{p.name} {p.description}".lower() for w in words)
            ]

        products.sort(key=lambda p: p.created_at, reverse=True)
        return products

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID."""
        return self._products.get(product_id)

    async def find_all(
        self,
        category: Optional[str] = None,
        city: Optional[str] = None,
        seller_id: Optional[UserId] = None,
        search: Optional[str] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Product]:
        """Find products, newest first."""
        products = self._matching(category, city, seller_id, search)
        return products[offset : offset + limit]

    async def count(
        self,
        category: Optional[str] = None,
        city: Optional[str] = None,
        seller_id: Optional[UserId] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count products matching the listing filters."""
        return len(self._matching(category, city, seller_id, search))

    async def save(self, product: Product) -> Product:
        """Save or overwrite a product."""
        self._products[product.id] = product
        return product

    async def increment_view_count(self, product_id: ProductId) -> None:
        """Increment the view counter by 1."""
        product = self._products.get(product_id)
        if product:
            self._products[product_id] = product.model_copy(
                update={"view_count": product.view_count + 1}
            )

    async def record_order(
        self, product_id: ProductId, quantity: int, ordered_at: datetime
    ) -> Optional[Product]:
        """Record an order if enough stock remains."""
        product = self._products.get(product_id)
        if product is None or product.quantity < quantity:
            return None

        updated = product.model_copy(
            update={
                "quantity": product.quantity - quantity,
                "order_count": product.order_count + 1,
                "last_order_date": ordered_at,
                "updated_at": ordered_at,
            }
        )
        self._products[product_id] = updated
        return updated
