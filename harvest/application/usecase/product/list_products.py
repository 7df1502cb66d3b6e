"""List products use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from harvest.domain.service import ProductService
from harvest.domain.value import Pagination, UserId

from ..base import BaseUseCase
from .common import ProductResponse


class ListProductsRequest(BaseModel):
    """List products request."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=30, ge=1, le=100)
    category: str | None = None
    city: str | None = None
    seller_id: str | None = None
    search: str | None = None  # Matched against name and description


class ListProductsResponse(BaseModel):
    """List products response."""

    products: list[ProductResponse]
    pagination: Pagination


class ListProductsUseCase(BaseUseCase):
    """Use case for browsing products, newest first."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: ListProductsRequest) -> ListProductsResponse:
        products, pagination = await self.product_service.list_products(
            page=request.page,
            page_size=request.page_size,
            category=request.category,
            city=request.city,
            seller_id=UserId(UUID(request.seller_id)) if request.seller_id else None,
            search=request.search.strip() if request.search else None,
        )
        return ListProductsResponse(
            products=[ProductResponse.from_product(p) for p in products],
            pagination=pagination,
        )
