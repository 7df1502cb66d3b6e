"""User aggregate root.

Users author forum content and sell products. Products and forum content
reference a user by id only.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from harvest.domain.model.common import DomainModel
from harvest.domain.value import UserId
from harvest.domain.value.types import Handle


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    handle: Handle
    city: Optional[str] = None  # Copied onto products this user sells
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
