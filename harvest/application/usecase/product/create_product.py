"""Create product use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from harvest.domain.model import BulkDiscount
from harvest.domain.service import ProductService, UserService
from harvest.domain.value import SellerType, UserId

from ..base import BaseUseCase
from .common import ProductResponse


class CreateProductRequest(BaseModel):
    """Create product request.

    The seller is always the authenticated user; the listing's city is
    copied from the seller when the product is stored.
    """

    seller_id: str  # User ID from authenticated user
    name: str
    description: str
    price: float
    quantity: int
    category: str
    seller_type: SellerType
    seller_name: str | None = None  # Defaults to the seller's handle
    images: list[str] = Field(default_factory=list)
    certification_type: str = ""
    minimum_order: int = 1
    bulk_discounts: list[BulkDiscount] = Field(default_factory=list)


class CreateProductUseCase(BaseUseCase):
    """Use case for listing a new product."""

    def __init__(
        self, product_service: ProductService, user_service: UserService
    ) -> None:
        """Initialize create product use case.

        Args:
            product_service: Product domain service
            user_service: User domain service
        """
        self.product_service = product_service
        self.user_service = user_service

    async def execute(self, request: CreateProductRequest) -> ProductResponse:
        """Execute create product flow.

        Raises:
            NotFoundError: If the seller doesn't exist
            pydantic.ValidationError: If a field breaks the product rules
        """
        seller = await self.user_service.get_by_id(UserId(UUID(request.seller_id)))
        fields = request.model_dump(exclude={"seller_id", "seller_name"})

        product = await self.product_service.create_product(
            seller_id=seller.id,
            seller_name=request.seller_name or seller.handle.root,
            **fields,
        )
        return ProductResponse.from_product(product)
