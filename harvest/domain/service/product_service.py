"""Product domain service.

All product writes go through ``save_product``, which keeps the
denormalized ``city`` in step with the seller.
"""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from harvest.domain.error import NotAuthorizedError, NotFoundError, OrderRejectedError
from harvest.domain.model.product import Product
from harvest.domain.repository import ProductRepository, UserRepository
from harvest.domain.value import Pagination, ProductId, UserId

from .base import Service


class ProductService(Service):
    """Domain service for product operations."""

    def __init__(
        self,
        product_repository: ProductRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize product service.

        Args:
            product_repository: Product repository
            user_repository: User repository, used to look up sellers
        """
        self.product_repository = product_repository
        self.user_repository = user_repository

    async def save_product(self, product: Product) -> Product:
        """Persist a product, syncing ``city`` from the seller when needed.

        The seller is looked up only when the product is new or its seller
        changed. A missing seller or a seller without a city leaves ``city``
        as it was; an error raised by the lookup aborts the write.

        Args:
            product: Validated product to persist

        Returns:
            Saved product
        """
        with logfire.span(
            "product_service.save_product",
            product_id=str(product.id),
            seller_id=str(product.seller_id),
        ):
            existing = await self.product_repository.find_by_id(product.id)
            if existing is None or existing.seller_id != product.seller_id:
                product = await self._sync_seller_city(product)

            saved = await self.product_repository.save(
                product.revise(updated_at=datetime.now())
            )
            logfire.info(
                "Product saved",
                product_id=str(saved.id),
                created=existing is None,
                city=saved.city,
            )
            return saved

    async def _sync_seller_city(self, product: Product) -> Product:
        try:
            seller = await self.user_repository.find_by_id(product.seller_id)
        except Exception as e:
            logfire.error(
                "Seller lookup failed, aborting product write",
                product_id=str(product.id),
                seller_id=str(product.seller_id),
                error=str(e),
            )
            raise

        # TODO: decide whether an unknown seller should reject the write
        if seller is None or not seller.city:
            logfire.info(
                "Seller city unavailable, keeping product city",
                product_id=str(product.id),
                seller_id=str(product.seller_id),
                seller_found=seller is not None,
            )
            return product

        logfire.info(
            "Setting product city from seller",
            product_id=str(product.id),
            city=seller.city,
        )
        return product.revise(city=seller.city)

    async def create_product(self, **fields: Any) -> Product:
        """Validate and store a new product.

        Args:
            **fields: Product fields except id, counters and timestamps

        Returns:
            Created product

        Raises:
            pydantic.ValidationError: If a field violates the product rules
        """
        now = datetime.now()
        product = Product(
            id=ProductId(uuid4()),
            created_at=now,
            updated_at=now,
            **fields,
        )
        return await self.save_product(product)

    async def get_product_by_id(self, product_id: ProductId) -> Product | None:
        """Get a product by ID.

        Args:
            product_id: Product ID

        Returns:
            Product if found, None otherwise
        """
        with logfire.span(
            "product_service.get_product_by_id", product_id=str(product_id)
        ):
            product = await self.product_repository.find_by_id(product_id)
            if product is None:
                logfire.warn("Product not found", product_id=str(product_id))
            return product

    async def update_product(
        self, product_id: ProductId, user_id: UserId, changes: dict[str, Any]
    ) -> Product:
        """Apply a partial update from the product's current seller.

        Args:
            product_id: Product ID
            user_id: Acting user (must be the current seller)
            changes: Field values to overwrite

        Returns:
            Updated product

        Raises:
            NotFoundError: If the product doesn't exist
            NotAuthorizedError: If the user is not the seller
        """
        with logfire.span(
            "product_service.update_product",
            product_id=str(product_id),
            user_id=str(user_id),
            fields=sorted(changes),
        ):
            product = await self.product_repository.find_by_id(product_id)
            if product is None:
                raise NotFoundError("Product", str(product_id))
            if product.seller_id != user_id:
                raise NotAuthorizedError("product", str(product_id), str(user_id))
            return await self.save_product(product.revise(**changes))

    async def list_products(
        self,
        page: int,
        page_size: int,
        category: str | None = None,
        city: str | None = None,
        seller_id: UserId | None = None,
        search: str | None = None,
    ) -> tuple[list[Product], Pagination]:
        """List one page of products matching the filters, newest first."""
        with logfire.span(
            "product_service.list_products",
            page=page,
            category=category,
            city=city,
            search=search,
        ):
            filters = dict(category=category, city=city, seller_id=seller_id, search=search)
            total = await self.product_repository.count(**filters)
            pagination = Pagination.from_total(total, page, page_size)
            products = await self.product_repository.find_all(
                **filters, limit=page_size, offset=pagination.offset
            )
            logfire.info("Products listed", count=len(products), total=total)
            return products, pagination

    async def record_view(self, product_id: ProductId) -> None:
        """Count one view of a product listing.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        with logfire.span("product_service.record_view", product_id=str(product_id)):
            if await self.product_repository.find_by_id(product_id) is None:
                raise NotFoundError("Product", str(product_id))
            await self.product_repository.increment_view_count(product_id)

    async def record_order(self, product_id: ProductId, quantity: int) -> Product:
        """Record an order against a product's demand counters and stock.

        Args:
            product_id: Product ID
            quantity: Units ordered

        Returns:
            Updated product

        Raises:
            NotFoundError: If the product doesn't exist
            OrderRejectedError: If quantity is below the minimum or above stock
        """
        with logfire.span(
            "product_service.record_order",
            product_id=str(product_id),
            quantity=quantity,
        ):
            product = await self.product_repository.find_by_id(product_id)
            if product is None:
                raise NotFoundError("Product", str(product_id))
            if quantity < product.minimum_order:
                raise OrderRejectedError(
                    f"Minimum order for {product.name} is {product.minimum_order}"
                )
            if quantity > product.quantity:
                raise OrderRejectedError(
                    f"Only {product.quantity} units of {product.name} in stock"
                )

            updated = await self.product_repository.record_order(
                product_id, quantity, datetime.now()
            )
            if updated is None:
                # Stock ran out between the check and the update
                raise OrderRejectedError(
                    f"Only {product.quantity} units of {product.name} in stock"
                )
            logfire.info(
                "Order recorded",
                product_id=str(product_id),
                quantity=quantity,
                order_count=updated.order_count,
            )
            return updated
