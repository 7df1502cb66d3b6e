"""Unit tests for DiscussionService."""

from uuid import uuid4

import pytest

from harvest.domain.error import NotAuthorizedError, NotFoundError
from harvest.domain.repository import CommentRepository, PostRepository
from harvest.domain.service import CommentService, DiscussionService, PostService
from harvest.domain.value import DiscussionCategory, DiscussionId, TagName, UserId
from harvest.domain.value.types import Handle
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

AUTHOR_ID = UserId(uuid4())
AUTHOR_HANDLE = Handle(root="grower")


async def open_discussion(service: DiscussionService, **overrides):
    fields = dict(
        author_id=AUTHOR_ID,
        author_handle=AUTHOR_HANDLE,
        title="Cold storage for tomatoes",
        description="Who rents cold rooms near the market?",
        category=DiscussionCategory.TRANSPORT,
        tags=[TagName("tomatoes"), TagName("cold chain")],
    )
    fields.update(overrides)
    return await service.create_discussion(**fields)


class TestCreateDiscussion:
    """Tests for create_discussion method."""

    @pytest.mark.asyncio
    async def test_tags_keep_order_and_drop_duplicates(self, unit_env):
        service = await unit_env.get(DiscussionService)

        discussion = await open_discussion(
            service,
            tags=[TagName("maize"), TagName("prices"), TagName("maize")],
        )

        assert [t.root for t in discussion.tags] == ["maize", "prices"]
        assert discussion.created_at == discussion.updated_at


class TestUpdateDiscussion:
    """Tests for update_discussion method."""

    @pytest.mark.asyncio
    async def test_unchanged_update_only_moves_updated_at(self, unit_env):
        """Saving the loaded fields back yields the same record but a newer updated_at."""
        service = await unit_env.get(DiscussionService)
        created = await open_discussion(service)
        loaded = await service.get_discussion_by_id(created.id)

        updated = await service.update_discussion(
            discussion_id=loaded.id,
            user_id=AUTHOR_ID,
            title=loaded.title,
            description=loaded.description,
            category=loaded.category,
            tags=loaded.tags,
        )

        assert updated.model_dump(exclude={"updated_at"}) == loaded.model_dump(
            exclude={"updated_at"}
        )
        assert updated.updated_at >= loaded.updated_at

    @pytest.mark.asyncio
    async def test_update_overwrites_fields(self, unit_env):
        service = await unit_env.get(DiscussionService)
        created = await open_discussion(service)

        updated = await service.update_discussion(
            discussion_id=created.id,
            user_id=AUTHOR_ID,
            title="Cold rooms for rent",
            description=created.description,
            category=DiscussionCategory.MARKET,
            tags=[],
        )

        assert updated.title == "Cold rooms for rent"
        assert updated.category == DiscussionCategory.MARKET
        assert updated.tags == []
        assert (await service.get_discussion_by_id(created.id)).title == updated.title

    @pytest.mark.asyncio
    async def test_non_author_cannot_update(self, unit_env):
        service = await unit_env.get(DiscussionService)
        created = await open_discussion(service)

        with pytest.raises(NotAuthorizedError):
            await service.update_discussion(
                discussion_id=created.id,
                user_id=UserId(uuid4()),
                title="Hijacked",
                description=created.description,
                category=created.category,
                tags=created.tags,
            )

    @pytest.mark.asyncio
    async def test_update_missing_discussion(self, unit_env):
        service = await unit_env.get(DiscussionService)

        with pytest.raises(NotFoundError):
            await service.update_discussion(
                discussion_id=DiscussionId(uuid4()),
                user_id=AUTHOR_ID,
                title="Nothing",
                description="Nothing here",
                category=DiscussionCategory.OTHER,
                tags=[],
            )


class TestDeleteDiscussion:
    """Tests for delete_discussion method."""

    @pytest.mark.asyncio
    async def test_delete_removes_posts_and_comments(self, unit_env):
        service = await unit_env.get(DiscussionService)
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        discussion = await open_discussion(service)
        post = await post_service.create_post(
            discussion.id, AUTHOR_ID, AUTHOR_HANDLE, "I rent two rooms."
        )
        await comment_service.create_comment(
            post.id, AUTHOR_ID, AUTHOR_HANDLE, "How much per crate?"
        )

        await service.delete_discussion(discussion.id, AUTHOR_ID)

        assert await service.get_discussion_by_id(discussion.id) is None
        assert await (await unit_env.get(PostRepository)).find_by_id(post.id) is None
        comment_repo = await unit_env.get(CommentRepository)
        assert await comment_repo.count_by_post(post.id) == 0

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        service = await unit_env.get(DiscussionService)
        discussion = await open_discussion(service)

        with pytest.raises(NotAuthorizedError):
            await service.delete_discussion(discussion.id, UserId(uuid4()))

        assert await service.get_discussion_by_id(discussion.id) is not None


class TestListDiscussions:
    """Tests for list_discussions method."""

    @pytest.mark.asyncio
    async def test_category_filter_and_pagination(self, unit_env):
        service = await unit_env.get(DiscussionService)
        for i in range(3):
            await open_discussion(
                service, title=f"Pricing {i}", category=DiscussionCategory.PRICING
            )
        await open_discussion(service, category=DiscussionCategory.FARMING)

        discussions, pagination = await service.list_discussions(
            page=1, page_size=2, category=DiscussionCategory.PRICING
        )

        assert len(discussions) == 2
        assert all(d.category == DiscussionCategory.PRICING for d in discussions)
        assert pagination.total_items == 3
        assert pagination.total_pages == 2
