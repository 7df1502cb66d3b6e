"""Forum API client infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from harvest.adapter.api import ForumApi, ForumApiClient
from harvest.config import ClientSettings
from harvest.util.di.base import ProviderBase
from harvest.util.observability import instrument_httpx


class ForumApiProvider(ProviderBase):
    """Forum API client component base."""

    __mock_component__ = "forum_api"


class ProdForumApiProvider(ForumApiProvider):
    """Production forum API provider over httpx."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_forum_api(self, settings: ClientSettings) -> AsyncIterator[ForumApi]:
        """Provide the forum API client, closed with the container.

        Requests are sent anonymously; a signed-in page builds its own
        client with ``ForumApiClient.create(..., auth_token=...)``.
        """
        instrument_httpx()
        client = ForumApiClient.create(settings.api_url, timeout=settings.timeout)
        yield client
        await client.close()
