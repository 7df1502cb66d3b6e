"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    One use case per API operation; each takes a request model and
    returns a response model.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
