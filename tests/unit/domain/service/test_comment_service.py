"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from harvest.domain.error import InvalidParentCommentError, NotFoundError
from harvest.domain.repository import CommentRepository
from harvest.domain.service import CommentService
from harvest.domain.value import CommentId, PostId, UserId
from harvest.domain.value.types import Handle
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

AUTHOR_ID = UserId(uuid4())
AUTHOR_HANDLE = Handle(root="grower")


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_top_level_with_depth_zero(self, unit_env):
        """Top-level comment should have depth 0 and no parent."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())

        result = await comment_service.create_comment(
            post_id=post_id,
            author_id=AUTHOR_ID,
            author_handle=AUTHOR_HANDLE,
            content="What are you paying per bag this week?",
        )

        assert result.depth == 0
        assert result.parent_comment_id is None
        assert result.post_id == post_id

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None
        assert saved.content == "What are you paying per bag this week?"

    @pytest.mark.asyncio
    async def test_reply_records_parent_and_increments_depth(self, unit_env):
        """Replies point at their parent one level deeper, recursively."""
        comment_service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())

        top = await comment_service.create_comment(
            post_id, AUTHOR_ID, AUTHOR_HANDLE, "Top"
        )
        reply = await comment_service.create_comment(
            post_id, AUTHOR_ID, AUTHOR_HANDLE, "Reply", parent_comment_id=top.id
        )
        nested = await comment_service.create_comment(
            post_id, AUTHOR_ID, AUTHOR_HANDLE, "Nested", parent_comment_id=reply.id
        )

        assert reply.parent_comment_id == top.id
        assert reply.depth == 1
        assert nested.parent_comment_id == reply.id
        assert nested.depth == 2

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_fails(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                PostId(uuid4()),
                AUTHOR_ID,
                AUTHOR_HANDLE,
                "Orphan",
                parent_comment_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_other_post_fails(self, unit_env):
        """A parent must belong to the same post."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        other = await comment_service.create_comment(
            PostId(uuid4()), AUTHOR_ID, AUTHOR_HANDLE, "Elsewhere"
        )
        post_id = PostId(uuid4())

        with pytest.raises(InvalidParentCommentError):
            await comment_service.create_comment(
                post_id,
                AUTHOR_ID,
                AUTHOR_HANDLE,
                "Cross-post reply",
                parent_comment_id=other.id,
            )

        assert await comment_repo.count_by_post(post_id) == 0


class TestGetCommentsForPost:
    """Tests for get_comments_for_post method."""

    @pytest.mark.asyncio
    async def test_returns_only_that_posts_comments_oldest_first(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())

        first = await comment_service.create_comment(
            post_id, AUTHOR_ID, AUTHOR_HANDLE, "First"
        )
        await comment_service.create_comment(
            PostId(uuid4()), AUTHOR_ID, AUTHOR_HANDLE, "Other post"
        )
        second = await comment_service.create_comment(
            post_id, AUTHOR_ID, AUTHOR_HANDLE, "Second", parent_comment_id=first.id
        )

        comments = await comment_service.get_comments_for_post(post_id)

        assert [c.id for c in comments] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_post_without_comments(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.get_comments_for_post(PostId(uuid4())) == []
