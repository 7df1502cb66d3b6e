"""Record product order use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from harvest.domain.service import ProductService
from harvest.domain.value import ProductId

from ..base import BaseUseCase
from .common import ProductResponse


class RecordOrderRequest(BaseModel):
    """Record order request."""

    product_id: str  # UUID string
    quantity: int = Field(ge=1)


class RecordOrderResponse(BaseModel):
    """Order outcome with the bulk-priced totals."""

    product: ProductResponse
    quantity: int
    unit_price: float
    total_price: float


class RecordOrderUseCase(BaseUseCase):
    """Use case for recording an order against a product."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: RecordOrderRequest) -> RecordOrderResponse:
        """Execute record order flow.

        Raises:
            NotFoundError: If the product doesn't exist
            OrderRejectedError: If the quantity breaks minimum order or stock
        """
        product = await self.product_service.record_order(
            ProductId(UUID(request.product_id)), request.quantity
        )
        unit_price = product.unit_price_for(request.quantity)
        return RecordOrderResponse(
            product=ProductResponse.from_product(product),
            quantity=request.quantity,
            unit_price=unit_price,
            total_price=round(unit_price * request.quantity, 2),
        )
