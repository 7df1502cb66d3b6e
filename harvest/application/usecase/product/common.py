"""Shared product request/response models."""

from datetime import datetime

from pydantic import BaseModel

from harvest.domain.model import BulkDiscount, Product
from harvest.domain.value import SellerType


class ProductResponse(BaseModel):
    """Product listing as returned by every product endpoint."""

    product_id: str
    name: str
    description: str
    price: float
    quantity: int
    images: list[str]
    category: str
    seller_id: str
    seller_name: str
    seller_type: SellerType
    certification_type: str
    minimum_order: int
    bulk_discounts: list[BulkDiscount]
    city: str | None
    view_count: int
    order_count: int
    last_order_date: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            product_id=str(product.id),
            seller_id=str(product.seller_id),
            **product.model_dump(exclude={"id", "seller_id"}),
        )
