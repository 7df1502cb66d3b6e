"""Application layer DI providers."""

from dishka import Scope, provide

from harvest.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from harvest.application.usecase.discussion import (
    CreateDiscussionUseCase,
    DeleteDiscussionUseCase,
    GetDiscussionUseCase,
    ListDiscussionsUseCase,
    UpdateDiscussionUseCase,
)
from harvest.application.usecase.post import (
    CreatePostUseCase,
    ListDiscussionPostsUseCase,
)
from harvest.application.usecase.product import (
    CreateProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    RecordOrderUseCase,
    RecordViewUseCase,
    UpdateProductUseCase,
)
from harvest.config import ForumSettings
from harvest.domain.service import (
    CommentService,
    DiscussionService,
    PostService,
    ProductService,
    UserService,
)
from harvest.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Discussion use cases
    @provide(scope=Scope.REQUEST)
    def get_create_discussion_use_case(
        self,
        discussion_service: DiscussionService,
        user_service: UserService,
        forum_settings: ForumSettings,
    ) -> CreateDiscussionUseCase:
        """Provide create discussion use case."""
        return CreateDiscussionUseCase(
            discussion_service=discussion_service,
            user_service=user_service,
            forum_settings=forum_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_discussion_use_case(
        self, discussion_service: DiscussionService
    ) -> GetDiscussionUseCase:
        """Provide get discussion use case."""
        return GetDiscussionUseCase(discussion_service=discussion_service)

    @provide(scope=Scope.REQUEST)
    def get_list_discussions_use_case(
        self, discussion_service: DiscussionService, forum_settings: ForumSettings
    ) -> ListDiscussionsUseCase:
        """Provide list discussions use case."""
        return ListDiscussionsUseCase(
            discussion_service=discussion_service, forum_settings=forum_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_update_discussion_use_case(
        self, discussion_service: DiscussionService, forum_settings: ForumSettings
    ) -> UpdateDiscussionUseCase:
        """Provide update discussion use case."""
        return UpdateDiscussionUseCase(
            discussion_service=discussion_service, forum_settings=forum_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_discussion_use_case(
        self, discussion_service: DiscussionService
    ) -> DeleteDiscussionUseCase:
        """Provide delete discussion use case."""
        return DeleteDiscussionUseCase(discussion_service=discussion_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        discussion_service: DiscussionService,
        user_service: UserService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            discussion_service=discussion_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_discussion_posts_use_case(
        self,
        post_service: PostService,
        discussion_service: DiscussionService,
        forum_settings: ForumSettings,
    ) -> ListDiscussionPostsUseCase:
        """Provide list discussion posts use case."""
        return ListDiscussionPostsUseCase(
            post_service=post_service,
            discussion_service=discussion_service,
            forum_settings=forum_settings,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, post_service=post_service
        )

    # Product use cases
    @provide(scope=Scope.REQUEST)
    def get_create_product_use_case(
        self, product_service: ProductService, user_service: UserService
    ) -> CreateProductUseCase:
        """Provide create product use case."""
        return CreateProductUseCase(
            product_service=product_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_product_use_case(
        self, product_service: ProductService
    ) -> GetProductUseCase:
        """Provide get product use case."""
        return GetProductUseCase(product_service=product_service)

    @provide(scope=Scope.REQUEST)
    def get_list_products_use_case(
        self, product_service: ProductService
    ) -> ListProductsUseCase:
        """Provide list products use case."""
        return ListProductsUseCase(product_service=product_service)

    @provide(scope=Scope.REQUEST)
    def get_update_product_use_case(
        self, product_service: ProductService, user_service: UserService
    ) -> UpdateProductUseCase:
        """Provide update product use case."""
        return UpdateProductUseCase(
            product_service=product_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_record_view_use_case(
        self, product_service: ProductService
    ) -> RecordViewUseCase:
        """Provide record view use case."""
        return RecordViewUseCase(product_service=product_service)

    @provide(scope=Scope.REQUEST)
    def get_record_order_use_case(
        self, product_service: ProductService
    ) -> RecordOrderUseCase:
        """Provide record order use case."""
        return RecordOrderUseCase(product_service=product_service)
