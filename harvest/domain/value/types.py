"""Domain value objects for Harvest.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from harvest.domain.value.common import RootValueObject


class DiscussionCategory(str, Enum):
    """Forum section a discussion is filed under."""

    GENERAL = "general"
    FARMING = "farming"
    MARKET = "market"
    PRICING = "pricing"
    TRANSPORT = "transport"
    OTHER = "other"


class SellerType(str, Enum):
    """Kind of account selling a product."""

    VENDOR = "vendor"
    FARMER = "farmer"


class Handle(RootValueObject[str]):
    """User handle shown next to authored content."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v


class TagName(RootValueObject[str]):
    """Free-form discussion tag.

    Tags arrive as user text, so only whitespace and length are policed:
    1-50 characters, no leading/trailing whitespace, no commas.
    Examples: 'maize', 'cold chain', 'Nairobi'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag shape."""
        if v != v.strip():
            raise ValueError("Tag must not start or end with whitespace")
        if not re.match(r"^[^,]{1,50}$", v):
            raise ValueError("Tag must be 1-50 characters and contain no commas")
        return v
