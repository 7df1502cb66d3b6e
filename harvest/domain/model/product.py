"""Product aggregate root.

Products are marketplace listings offered by a vendor or farmer. The
listing carries copies of seller data (display name, city) so that
browsing by city never has to join against users.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from harvest.domain.model.common import DomainModel
from harvest.domain.value import ProductId, SellerType, UserId
from harvest.domain.value.common import ValueObject


class BulkDiscount(ValueObject):
    """Price tier applied once an order reaches ``quantity`` units."""

    quantity: int = Field(ge=0)
    price: float = Field(ge=0)


class Product(DomainModel):
    """Product aggregate root.

    Validation mirrors the listing form's rules:
    - price and quantity are non-negative
    - minimum_order is at least 1
    - seller_type is vendor or farmer

    ``city`` is not accepted from callers as truth: ProductService copies
    it from the seller whenever the product is created or changes seller.
    """

    id: ProductId
    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)
    images: list[str] = Field(default_factory=list)
    category: str = Field(min_length=1)
    seller_id: UserId
    seller_name: str = Field(min_length=1)
    seller_type: SellerType
    certification_type: str = ""
    minimum_order: int = Field(default=1, ge=1)
    bulk_discounts: list[BulkDiscount] = Field(default_factory=list)
    city: Optional[str] = None
    view_count: int = Field(default=0, ge=0)
    order_count: int = Field(default=0, ge=0)
    last_order_date: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("name", mode="before")
    @classmethod
    def trim_name(cls, v):
        """Strip surrounding whitespace before length checks."""
        return v.strip() if isinstance(v, str) else v

    def unit_price_for(self, quantity: int) -> float:
        """Price per unit for an order of ``quantity`` units.

        Uses the deepest bulk tier whose threshold the order reaches,
        falling back to the list price.
        """
        applicable = [tier for tier in self.bulk_discounts if quantity >= tier.quantity]
        if not applicable:
            return self.price
        return max(applicable, key=lambda tier: tier.quantity).price
