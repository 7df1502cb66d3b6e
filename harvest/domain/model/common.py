"""Base model for all domain entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; changes go through ``revise`` which, unlike
    ``model_copy``, re-runs field validation on the result.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def revise(self, **changes: Any):
        """Return a validated copy with ``changes`` applied."""
        return type(self).model_validate({**dict(self), **changes})
