"""Record product view use case."""

from uuid import UUID

from pydantic import BaseModel

from harvest.domain.service import ProductService
from harvest.domain.value import ProductId

from ..base import BaseUseCase


class RecordViewRequest(BaseModel):
    """Record view request."""

    product_id: str  # UUID string


class RecordViewUseCase(BaseUseCase):
    """Use case for counting a product page view."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: RecordViewRequest) -> None:
        await self.product_service.record_view(ProductId(UUID(request.product_id)))
