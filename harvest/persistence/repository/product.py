"""PostgreSQL implementation of Product repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from harvest.domain.model import Product
from harvest.domain.repository import ProductRepository
from harvest.domain.value import ProductId, UserId
from harvest.persistence.mappers import product_to_dict, row_to_product
from harvest.persistence.tables import products_table


class PostgresProductRepository(ProductRepository):
    """PostgreSQL implementation of ProductRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filtered(
        self,
        stmt,
        category: Optional[str],
        city: Optional[str],
        seller_id: Optional[UserId],
        search: Optional[str],
    ):
        """Apply listing filters to a select statement."""
        if category is not None:
            stmt = stmt.where(products_table.c.category == category)
        if city is not None:
            stmt = stmt.where(products_table.c.city == city)
        if seller_id is not None:
            stmt = stmt.where(products_table.c.seller_id == seller_id)
        if search:
            # Matches the GIN expression index idx_products_search
            document = func.to_tsvector(
                "english",
                products_table.c.name + " " + products_table.c.description,
            )
            stmt = stmt.where(
                document.op("@@")(func.plainto_tsquery("english", search))
            )
        return stmt

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID."""
        stmt = select(products_table).where(products_table.c.id == product_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_product(dict(row)) if row else None

    async def find_all(
        self,
        category: Optional[str] = None,
        city: Optional[str] = None,
        seller_id: Optional[UserId] = None,
        search: Optional[str] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Product]:
        """Find products, newest first."""
        with logfire.span(
            "product_repository.find_all",
            category=category,
            city=city,
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(
                select(products_table), category, city, seller_id, search
            )
            stmt = (
                stmt.order_by(desc(products_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_product(dict(row)) for row in result.mappings().all()]

    async def count(
        self,
        category: Optional[str] = None,
        city: Optional[str] = None,
        seller_id: Optional[UserId] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count products matching the listing filters."""
        stmt = self._filtered(
            select(func.count()).select_from(products_table),
            category,
            city,
            seller_id,
            search,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, product: Product) -> Product:
        """Save a product (create or overwrite)."""
        values = product_to_dict(product)
        existing = await self.find_by_id(product.id)

        if existing:
            stmt = (
                products_table.update()
                .where(products_table.c.id == product.id)
                .values(**values)
            )
        else:
            stmt = products_table.insert().values(**values)

        await self.session.execute(stmt)
        await self.session.flush()
        return product

    async def increment_view_count(self, product_id: ProductId) -> None:
        """Atomically increment the view counter by 1."""
        stmt = (
            update(products_table)
            .where(products_table.c.id == product_id)
            .values(view_count=products_table.c.view_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def record_order(
        self, product_id: ProductId, quantity: int, ordered_at: datetime
    ) -> Optional[Product]:
        """Atomically record an order, guarded by remaining stock."""
        stmt = (
            update(products_table)
            .where(products_table.c.id == product_id)
            .where(products_table.c.quantity >= quantity)
            .values(
                quantity=products_table.c.quantity - quantity,
                order_count=products_table.c.order_count + 1,
                last_order_date=ordered_at,
                updated_at=ordered_at,
            )
            .returning(products_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if row is None:
            return None

        await self.session.flush()
        return row_to_product(dict(row))
