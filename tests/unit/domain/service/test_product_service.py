"""Unit tests for ProductService."""

from typing import Optional
from uuid import uuid4

import pytest

from harvest.domain.error import NotAuthorizedError, NotFoundError, OrderRejectedError
from harvest.domain.model import User
from harvest.domain.repository import ProductRepository, UserRepository
from harvest.domain.service import ProductService
from harvest.domain.value import SellerType, UserId
from harvest.persistence.repository.inmemory import (
    InMemoryProductRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def product_fields(seller: User, **overrides) -> dict:
    fields = dict(
        name="Yellow maize",
        description="Dry, sorted, 90kg bags",
        price=32.5,
        quantity=120,
        category="grains",
        seller_id=seller.id,
        seller_name=seller.handle.root,
        seller_type=SellerType.FARMER,
    )
    fields.update(overrides)
    return fields


class CountingUserRepository(InMemoryUserRepository):
    """Counts seller lookups."""

    def __init__(self) -> None:
        super().__init__()
        self.lookups = 0

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        self.lookups += 1
        return await super().find_by_id(user_id)


class FailingUserRepository(InMemoryUserRepository):
    """User store that is unreachable."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        raise ConnectionError("user store unavailable")


class TestSellerCityDenormalization:
    """Tests for the city copied from seller to product."""

    @pytest.mark.asyncio
    async def test_new_product_takes_seller_city(self, unit_env):
        """Creating a product copies the seller's city."""
        service = await unit_env.get(ProductService)
        seller = await make_user(await unit_env.get(UserRepository), city="Springfield")

        product = await service.create_product(**product_fields(seller))

        assert product.city == "Springfield"
        stored = await (await unit_env.get(ProductRepository)).find_by_id(product.id)
        assert stored.city == "Springfield"

    @pytest.mark.asyncio
    async def test_seller_without_city_leaves_city_unset(self, unit_env):
        """A seller with no city is not an error; city stays None."""
        service = await unit_env.get(ProductService)
        seller = await make_user(await unit_env.get(UserRepository), city=None)

        product = await service.create_product(**product_fields(seller))

        assert product.city is None

    @pytest.mark.asyncio
    async def test_unknown_seller_still_saves_product(self, unit_env):
        """A seller that can't be found leaves city unset and the write proceeds."""
        service = await unit_env.get(ProductService)
        ghost = User(id=UserId(uuid4()), handle="ghost", city="Shelbyville")

        product = await service.create_product(**product_fields(ghost))

        assert product.city is None
        stored = await (await unit_env.get(ProductRepository)).find_by_id(product.id)
        assert stored is not None

    @pytest.mark.asyncio
    async def test_seller_lookup_error_aborts_write(self):
        """An error from the seller lookup propagates and nothing is stored."""
        products = InMemoryProductRepository()
        service = ProductService(products, FailingUserRepository())
        seller = User(id=UserId(uuid4()), handle="farmer", city="Springfield")

        with pytest.raises(ConnectionError):
            await service.create_product(**product_fields(seller))

        assert await products.count() == 0

    @pytest.mark.asyncio
    async def test_update_without_seller_change_skips_lookup(self):
        """Updates that keep the seller never look the seller up again."""
        users = CountingUserRepository()
        service = ProductService(InMemoryProductRepository(), users)
        seller = await make_user(users, city="Springfield")
        product = await service.create_product(**product_fields(seller))
        assert users.lookups == 1

        # Seller moves; the listing keeps the city it was created with
        await users.save(seller.revise(city="Capital City"))
        updated = await service.update_product(product.id, seller.id, {"price": 30.0})

        assert users.lookups == 1
        assert updated.price == 30.0
        assert updated.city == "Springfield"

    @pytest.mark.asyncio
    async def test_seller_change_refreshes_city(self, unit_env):
        """Handing a product to another seller re-derives the city."""
        service = await unit_env.get(ProductService)
        users = await unit_env.get(UserRepository)
        first = await make_user(users, handle="first", city="Springfield")
        second = await make_user(users, handle="second", city="Ogdenville")
        product = await service.create_product(**product_fields(first))

        updated = await service.update_product(
            product.id, first.id, {"seller_id": second.id, "seller_name": "second"}
        )

        assert updated.seller_id == second.id
        assert updated.city == "Ogdenville"

    @pytest.mark.asyncio
    async def test_seller_change_to_seller_without_city_keeps_old_city(self, unit_env):
        """A new seller without a city leaves the previous city in place."""
        service = await unit_env.get(ProductService)
        users = await unit_env.get(UserRepository)
        first = await make_user(users, handle="first", city="Springfield")
        second = await make_user(users, handle="second", city=None)
        product = await service.create_product(**product_fields(first))

        updated = await service.update_product(
            product.id, first.id, {"seller_id": second.id}
        )

        assert updated.city == "Springfield"

    @pytest.mark.asyncio
    async def test_caller_supplied_city_is_overwritten_on_create(self, unit_env):
        """City comes from the seller even if the caller passes one."""
        service = await unit_env.get(ProductService)
        seller = await make_user(await unit_env.get(UserRepository), city="Springfield")

        product = await service.create_product(
            **product_fields(seller, city="Elsewhere")
        )

        assert product.city == "Springfield"


class TestUpdateProduct:
    """Tests for update_product method."""

    @pytest.mark.asyncio
    async def test_only_seller_can_update(self, unit_env):
        service = await unit_env.get(ProductService)
        seller = await make_user(await unit_env.get(UserRepository))
        product = await service.create_product(**product_fields(seller))

        with pytest.raises(NotAuthorizedError):
            await service.update_product(product.id, UserId(uuid4()), {"price": 1.0})

    @pytest.mark.asyncio
    async def test_update_missing_product(self, unit_env):
        service = await unit_env.get(ProductService)

        with pytest.raises(NotFoundError):
            await service.update_product(uuid4(), UserId(uuid4()), {"price": 1.0})

    @pytest.mark.asyncio
    async def test_update_bumps_updated_at(self, unit_env):
        service = await unit_env.get(ProductService)
        seller = await make_user(await unit_env.get(UserRepository))
        product = await service.create_product(**product_fields(seller))

        updated = await service.update_product(product.id, seller.id, {"quantity": 5})

        assert updated.updated_at >= product.updated_at
        assert updated.created_at == product.created_at


class TestDemandCounters:
    """Tests for record_view and record_order."""

    @pytest.mark.asyncio
    async def test_record_view_increments(self, unit_env):
        service = await unit_env.get(ProductService)
        seller = await make_user(await unit_env.get(UserRepository))
        product = await service.create_product(**product_fields(seller))

        await service.record_view(product.id)
        await service.record_view(product.id)

        stored = await service.get_product_by_id(product.id)
        assert stored.view_count == 2

    @pytest.mark.asyncio
    async def test_record_view_missing_product(self, unit_env):
        service = await unit_env.get(ProductService)

        with pytest.raises(NotFoundError):
            await service.record_view(uuid4())

    @pytest.mark.asyncio
    async def test_record_order_updates_counters_and_stock(self, unit_env):
        service = await unit_env.get(ProductService)
        seller = await make_user(await unit_env.get(UserRepository))
        product = await service.create_product(**product_fields(seller, quantity=10))

        updated = await service.record_order(product.id, 4)

        assert updated.order_count == 1
        assert updated.quantity == 6
        assert updated.last_order_date is not None

    @pytest.mark.asyncio
    async def test_record_order_below_minimum_rejected(self, unit_env):
        service = await unit_env.get(ProductService)
        seller = await make_user(await unit_env.get(UserRepository))
        product = await service.create_product(
            **product_fields(seller, minimum_order=5)
        )

        with pytest.raises(OrderRejectedError, match="Minimum order"):
            await service.record_order(product.id, 2)

    @pytest.mark.asyncio
    async def test_record_order_above_stock_rejected(self, unit_env):
        service = await unit_env.get(ProductService)
        seller = await make_user(await unit_env.get(UserRepository))
        product = await service.create_product(**product_fields(seller, quantity=3))

        with pytest.raises(OrderRejectedError, match="in stock"):
            await service.record_order(product.id, 4)

        stored = await service.get_product_by_id(product.id)
        assert stored.order_count == 0


class TestListProducts:
    """Tests for list_products method."""

    @pytest.mark.asyncio
    async def test_filters_by_city_and_search(self, unit_env):
        service = await unit_env.get(ProductService)
        users = await unit_env.get(UserRepository)
        north = await make_user(users, handle="north", city="Springfield")
        south = await make_user(users, handle="south", city="Ogdenville")
        await service.create_product(**product_fields(north, name="White maize"))
        await service.create_product(**product_fields(north, name="Sweet potatoes"))
        await service.create_product(**product_fields(south, name="Yellow maize"))

        products, pagination = await service.list_products(
            page=1, page_size=10, city="Springfield", search="maize"
        )

        assert [p.name for p in products] == ["White maize"]
        assert pagination.total_items == 1
        assert pagination.total_pages == 1
