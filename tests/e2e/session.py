"""Helpers for acting as a signed-in user in end-to-end tests."""

from fastapi.testclient import TestClient

from harvest.domain.model import User
from harvest.domain.repository import UserRepository
from harvest.domain.service import JWTService
from tests.conftest import make_user


def register(client: TestClient, handle: str = "grower", city: str | None = None) -> User:
    """Store a user through the app's own container."""

    async def _save() -> User:
        container = client.app.state.dishka_container
        async with container() as request_container:
            users = await request_container.get(UserRepository)
            return await make_user(users, handle=handle, city=city)

    return client.portal.call(_save)


def act_as(client: TestClient, user: User | None) -> None:
    """Send the following requests as ``user`` (or signed out for None).

    The token comes from the app's own ``JWTService``, so it is signed with
    the same settings the routes verify against.
    """

    async def _token(user: User) -> str:
        container = client.app.state.dishka_container
        async with container() as request_container:
            jwt_service = await request_container.get(JWTService)
            return jwt_service.create_token(str(user.id), user.handle.root)

    client.cookies.clear()
    if user is not None:
        client.cookies.set("auth_token", client.portal.call(_token, user))
