"""Mock persistence providers for testing."""

from dishka import Scope, provide

from harvest.domain.repository import (
    CommentRepository,
    DiscussionRepository,
    PostRepository,
    ProductRepository,
    UserRepository,
)
from harvest.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDiscussionRepository,
    InMemoryPostRepository,
    InMemoryProductRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from harvest.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    One store lives as long as the container, so data written in one
    request (or one ``async with container()`` block) is visible to the
    next. Each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_discussion_repository(self, store: InMemoryStore) -> DiscussionRepository:
        """Provide in-memory discussion repository."""
        return InMemoryDiscussionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_product_repository(self, store: InMemoryStore) -> ProductRepository:
        """Provide in-memory product repository."""
        return InMemoryProductRepository(store)
