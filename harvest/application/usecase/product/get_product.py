"""Get product use case."""

from uuid import UUID

from pydantic import BaseModel

from harvest.domain.error import NotFoundError
from harvest.domain.service import ProductService
from harvest.domain.value import ProductId

from ..base import BaseUseCase
from .common import ProductResponse


class GetProductRequest(BaseModel):
    """Get product request."""

    product_id: str  # UUID string


class GetProductUseCase(BaseUseCase):
    """Use case for reading a single product."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: GetProductRequest) -> ProductResponse:
        product = await self.product_service.get_product_by_id(
            ProductId(UUID(request.product_id))
        )
        if product is None:
            raise NotFoundError("Product", request.product_id)
        return ProductResponse.from_product(product)
