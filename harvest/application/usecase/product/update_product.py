"""Update product use case."""

from uuid import UUID

from pydantic import BaseModel

from harvest.domain.model import BulkDiscount
from harvest.domain.service import ProductService, UserService
from harvest.domain.value import ProductId, SellerType, UserId

from ..base import BaseUseCase
from .common import ProductResponse


class ProductChanges(BaseModel):
    """Fields a seller may change; omitted fields are left as they are."""

    name: str | None = None
    description: str | None = None
    price: float | None = None
    quantity: int | None = None
    images: list[str] | None = None
    category: str | None = None
    seller_type: SellerType | None = None
    certification_type: str | None = None
    minimum_order: int | None = None
    bulk_discounts: list[BulkDiscount] | None = None
    seller_id: str | None = None  # Hand the listing over to another seller


class UpdateProductRequest(BaseModel):
    """Update product request."""

    product_id: str  # UUID string
    user_id: str  # Current user ID (must be the seller)
    changes: ProductChanges


class UpdateProductUseCase(BaseUseCase):
    """Use case for editing a product listing."""

    def __init__(
        self, product_service: ProductService, user_service: UserService
    ) -> None:
        """Initialize update product use case.

        Args:
            product_service: Product domain service
            user_service: User domain service, used when the seller changes
        """
        self.product_service = product_service
        self.user_service = user_service

    async def execute(self, request: UpdateProductRequest) -> ProductResponse:
        """Execute update product flow.

        Handing the listing to another seller also swaps the displayed
        seller name; the city follows the new seller when the product is
        saved.

        Raises:
            NotFoundError: If the product or the new seller doesn't exist
            NotAuthorizedError: If the user is not the product's seller
            pydantic.ValidationError: If a change breaks the product rules
        """
        changes = request.changes.model_dump(exclude_unset=True, exclude_none=True)

        if "seller_id" in changes:
            new_seller = await self.user_service.get_by_id(
                UserId(UUID(changes["seller_id"]))
            )
            changes["seller_id"] = new_seller.id
            changes["seller_name"] = new_seller.handle.root

        product = await self.product_service.update_product(
            ProductId(UUID(request.product_id)),
            UserId(UUID(request.user_id)),
            changes,
        )
        return ProductResponse.from_product(product)
