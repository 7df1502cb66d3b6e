"""Test configuration and fixtures."""

from uuid import uuid4

from harvest.domain.model import User
from harvest.domain.repository import UserRepository
from harvest.domain.value import Handle, UserId


async def make_user(
    user_repository: UserRepository,
    handle: str = "grower",
    city: str | None = None,
) -> User:
    """Store a user and return it.

    Args:
        user_repository: Repository to save into
        handle: User handle
        city: City copied onto the user's products

    Returns:
        Saved user
    """
    user = User(id=UserId(uuid4()), handle=Handle(handle), city=city)
    return await user_repository.save(user)
