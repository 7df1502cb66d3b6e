"""Product repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from harvest.domain.model.product import Product
from harvest.domain.value import ProductId, UserId


class ProductRepository(ABC):
    """Repository for Product aggregate.

    Defines the contract for product persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID.

        Args:
            product_id: The product's unique identifier

        Returns:
            The product if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[str] = None,
        city: Optional[str] = None,
        seller_id: Optional[UserId] = None,
        search: Optional[str] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Product]:
        """Find products, newest first.

        Args:
            category: Exact category match
            city: Exact city match
            seller_id: Only products of this seller
            search: Case-insensitive text matched against name and description
            limit: Maximum number of products to return
            offset: Number of products to skip

        Returns:
            List of matching products
        """
        pass

    @abstractmethod
    async def count(
        self,
        category: Optional[str] = None,
        city: Optional[str] = None,
        seller_id: Optional[UserId] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count products matching the same filters as ``find_all``."""
        pass

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Save a product (create or overwrite).

        Args:
            product: The product to save

        Returns:
            The saved product
        """
        pass

    @abstractmethod
    async def increment_view_count(self, product_id: ProductId) -> None:
        """Atomically increment the view counter by 1.

        Args:
            product_id: The product ID
        """
        pass

    @abstractmethod
    async def record_order(
        self, product_id: ProductId, quantity: int, ordered_at: datetime
    ) -> Optional[Product]:
        """Atomically bump order_count, stamp last_order_date, reduce stock.

        Stock is only reduced when at least ``quantity`` units remain.

        Args:
            product_id: The product ID
            quantity: Units ordered
            ordered_at: Order timestamp

        Returns:
            The updated product, or None if it doesn't exist or lacks stock
        """
        pass
