"""Domain layer DI providers."""

from dishka import Scope, provide

from harvest.config import AuthSettings
from harvest.domain.repository import (
    CommentRepository,
    DiscussionRepository,
    PostRepository,
    ProductRepository,
    UserRepository,
)
from harvest.domain.service import (
    CommentService,
    DiscussionService,
    JWTService,
    PostService,
    ProductService,
    UserService,
)
from harvest.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_discussion_service(
        self, discussion_repository: DiscussionRepository
    ) -> DiscussionService:
        """Provide discussion domain service."""
        return DiscussionService(discussion_repository=discussion_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_product_service(
        self,
        product_repository: ProductRepository,
        user_repository: UserRepository,
    ) -> ProductService:
        """Provide product domain service.

        Shares the request's user repository (and so its session) so the
        seller lookup and the product write land in one transaction.
        """
        return ProductService(
            product_repository=product_repository,
            user_repository=user_repository,
        )
