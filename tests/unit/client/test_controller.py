"""Unit tests for DiscussionPageController."""

import asyncio

import pytest
import pytest_asyncio

from harvest.adapter.api import DiscussionInput, ForumApi, MockForumApi
from harvest.adapter.error import ApiConnectionError, ApiServerError
from harvest.client.controller import DiscussionPageController
from harvest.client.forms import DiscussionForm
from harvest.client.notifier import LogfireNotifier, Navigator, Notifier
from harvest.client.state import CREATE_SENTINEL, PageMode
from tests.harness import create_env_fixture

# Unit test fixture - fake forum API from the DI container
unit_env = create_env_fixture()


class RecordingNotifier(Notifier):
    def __init__(self) -> None:
        self.successes: list[str] = []
        self.errors: list[str] = []

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


class RecordingNavigator(Navigator):
    def __init__(self) -> None:
        self.visited: list[str] = []

    def go_to_discussion(self, discussion_id: str) -> None:
        self.visited.append(f"/discussions/{discussion_id}")

    def go_to_listing(self) -> None:
        self.visited.append("/discussions")


class Page:
    """Controller plus the fakes it reports to."""

    def __init__(self, api: MockForumApi, confirm_answer: bool = True) -> None:
        self.api = api
        self.notifier = RecordingNotifier()
        self.navigator = RecordingNavigator()
        self.confirm_prompts: list[str] = []

        async def confirm(prompt: str) -> bool:
            self.confirm_prompts.append(prompt)
            return confirm_answer

        self.controller = DiscussionPageController(
            api, self.notifier, self.navigator, confirm
        )


async def seed(api: MockForumApi, posts: int = 2):
    """Create a discussion with ``posts`` posts and one comment on each."""
    discussion = await api.create_discussion(
        DiscussionInput(
            title="Maize prices",
            description="What are buyers paying this week?",
            category="pricing",
            tags=["maize", "prices"],
        )
    )
    created = []
    for i in range(posts):
        post = await api.create_post(discussion.discussion_id, f"Post {i}")
        await api.create_comment(post.post_id, discussion.discussion_id, f"Comment {i}")
        created.append(post)
    api.calls.clear()
    return discussion, created


@pytest_asyncio.fixture
async def api(unit_env) -> MockForumApi:
    return await unit_env.get(ForumApi)


class TestOpen:
    @pytest.mark.asyncio
    async def test_open_loads_discussion_posts_and_comments(self, api):
        discussion, posts = await seed(api)
        page = Page(api)

        await page.controller.open(discussion.discussion_id)

        state = page.controller.state
        assert state.mode == PageMode.VIEW
        assert state.discussion == discussion
        assert [p.post_id for p in state.posts] == [p.post_id for p in posts]
        assert state.pagination.total_items == 2
        for post in posts:
            assert len(state.comments_for(post.post_id)) == 1
        assert not state.loading
        assert not state.comments_loading
        assert page.notifier.errors == []

    @pytest.mark.asyncio
    async def test_create_sentinel_skips_all_requests(self, api):
        page = Page(api)

        await page.controller.open(CREATE_SENTINEL)

        assert page.controller.state.mode == PageMode.CREATE
        assert api.calls == []

    @pytest.mark.asyncio
    async def test_load_discussion_in_create_mode_is_skipped(self, api):
        page = Page(api)

        await page.controller.load_discussion(CREATE_SENTINEL)

        assert page.controller.state.mode == PageMode.CREATE
        assert api.calls_to("get_discussion") == []

    @pytest.mark.asyncio
    async def test_unknown_discussion_reports_not_found(self, api):
        page = Page(api)

        await page.controller.open("missing-id")

        state = page.controller.state
        assert state.discussion is None
        assert not state.loading
        # Discussion and posts both 404
        assert page.notifier.errors == [
            "Discussion not found: missing-id",
            "Discussion not found: missing-id",
        ]

    @pytest.mark.asyncio
    async def test_error_without_message_uses_fallback(self, api):
        discussion, _ = await seed(api)
        api.fail("get_discussion", ApiServerError(""))
        page = Page(api)

        await page.controller.load_discussion(discussion.discussion_id)

        assert page.notifier.errors == ["Failed to load discussion"]
        assert page.controller.state.last_error == "Failed to load discussion"
        assert not page.controller.state.loading


class TestComments:
    @pytest.mark.asyncio
    async def test_partial_comment_failure_keeps_successful_lists(self, api):
        """P2's fetch failing leaves P1's comments visible and one error shown."""
        discussion, (p1, p2) = await seed(api)
        api.fail("get_post_comments", ApiConnectionError("timeout"), key=p2.post_id)
        page = Page(api)

        await page.controller.open(discussion.discussion_id)

        state = page.controller.state
        assert len(state.comments_for(p1.post_id)) == 1
        assert p2.post_id not in state.comments
        assert page.notifier.errors == ["Failed to load comments for 1 post"]
        assert not state.comments_loading

    @pytest.mark.asyncio
    async def test_all_comment_fetches_failing_gives_one_error(self, api):
        discussion, posts = await seed(api, posts=3)
        api.fail("get_post_comments", ApiServerError("boom", 500))
        page = Page(api)

        await page.controller.open(discussion.discussion_id)

        assert page.notifier.errors == ["Failed to load comments for 3 posts"]
        assert page.controller.state.comments == {}

    @pytest.mark.asyncio
    async def test_no_posts_means_no_comment_fetches(self, api):
        discussion, _ = await seed(api, posts=0)
        page = Page(api)

        await page.controller.open(discussion.discussion_id)

        assert api.calls_to("get_post_comments") == []
        assert page.controller.state.posts == []


class TestSubmitReply:
    @pytest.mark.asyncio
    async def test_blank_reply_sends_nothing_and_keeps_state(self, api):
        discussion, (p1, _) = await seed(api)
        page = Page(api)
        await page.controller.open(discussion.discussion_id)
        before = page.controller.state
        api.calls.clear()

        for content in ("", "   ", "\n\t"):
            created = await page.controller.submit_reply(
                p1.post_id, discussion.discussion_id, content
            )
            assert created is False

        assert api.calls_to("create_comment") == []
        assert api.calls == []
        assert page.controller.state is before

    @pytest.mark.asyncio
    async def test_nested_reply_refetches_only_its_post(self, api):
        discussion, (p1, p2) = await seed(api)
        page = Page(api)
        await page.controller.open(discussion.discussion_id)
        c1 = page.controller.state.comments_for(p1.post_id)[0]
        api.calls.clear()

        created = await page.controller.submit_reply(
            p1.post_id,
            discussion.discussion_id,
            "Same here",
            parent_comment_id=c1.comment_id,
        )

        assert created is True
        assert api.calls_to("get_post_comments") == [(p1.post_id,)]
        replies = [
            c
            for c in page.controller.state.comments_for(p1.post_id)
            if c.parent_comment_id == c1.comment_id
        ]
        assert len(replies) == 1
        assert replies[0].depth == 1
        assert len(page.controller.state.comments_for(p2.post_id)) == 1
        assert not page.controller.state.submitting

    @pytest.mark.asyncio
    async def test_failed_reply_reports_and_releases_latch(self, api):
        discussion, (p1, _) = await seed(api)
        api.fail("create_comment", ApiServerError("Post is locked", 400))
        page = Page(api)

        created = await page.controller.submit_reply(
            p1.post_id, discussion.discussion_id, "Hello"
        )

        assert created is False
        assert page.notifier.errors == ["Post is locked"]
        assert not page.controller.state.submitting
        assert api.calls_to("get_post_comments") == []


class TestSubmitPost:
    @pytest.mark.asyncio
    async def test_post_refetches_current_page(self, api):
        discussion, _ = await seed(api)
        page = Page(api)
        await page.controller.open(discussion.discussion_id)
        api.calls.clear()

        created = await page.controller.submit_post(
            discussion.discussion_id, "Buyers at the depot pay 3200"
        )

        assert created is True
        assert api.calls_to("get_discussion_posts") == [(discussion.discussion_id, 1)]
        state = page.controller.state
        assert state.posts[-1].content == "Buyers at the depot pay 3200"
        assert state.pagination.total_items == 3
        assert page.notifier.successes == ["Post created"]

    @pytest.mark.asyncio
    async def test_blank_post_is_rejected_locally(self, api):
        discussion, _ = await seed(api)
        page = Page(api)

        created = await page.controller.submit_post(discussion.discussion_id, "  ")

        assert created is False
        assert api.calls == []
        assert page.notifier.errors == ["Post content cannot be empty"]

    @pytest.mark.asyncio
    async def test_second_submit_while_in_flight_is_ignored(self, api):
        """The submitting latch drops overlapping submissions."""
        discussion, _ = await seed(api)
        release = asyncio.Event()
        original = api.create_post

        async def slow_create_post(discussion_id, content):
            await release.wait()
            return await original(discussion_id, content)

        api.create_post = slow_create_post
        page = Page(api)

        first = asyncio.create_task(
            page.controller.submit_post(discussion.discussion_id, "First")
        )
        await asyncio.sleep(0)
        assert page.controller.state.submitting

        second = await page.controller.submit_post(discussion.discussion_id, "Second")
        release.set()

        assert second is False
        assert await first is True
        assert [p.content for p in api.posts.values()][-1] == "First"
        assert not page.controller.state.submitting


class TestDiscussionForms:
    @pytest.mark.asyncio
    async def test_empty_title_rejected_without_request(self, api):
        page = Page(api)
        await page.controller.open(CREATE_SENTINEL)

        result = await page.controller.create_discussion(
            DiscussionForm(title="", description="x", category="general", tags="")
        )

        assert result is None
        assert api.calls == []
        assert page.notifier.errors == ["Title is required"]
        assert page.navigator.visited == []

    @pytest.mark.asyncio
    async def test_create_cleans_fields_and_navigates(self, api):
        page = Page(api)
        await page.controller.open(CREATE_SENTINEL)

        created = await page.controller.create_discussion(
            DiscussionForm(
                title="Transport to the coast",
                description="Sharing a lorry next week",
                category="Transport",
                tags=" lorry, , coast ,",
            )
        )

        (sent,) = api.calls_to("create_discussion")
        assert sent[0].category == "transport"
        assert sent[0].tags == ["lorry", "coast"]
        assert page.navigator.visited == [f"/discussions/{created.discussion_id}"]
        assert not page.controller.state.submitting

    @pytest.mark.asyncio
    async def test_update_unchanged_fields_only_moves_updated_at(self, api):
        discussion, _ = await seed(api)
        page = Page(api)
        await page.controller.open(discussion.discussion_id)
        page.controller.enter_edit_mode()
        assert page.controller.state.mode == PageMode.EDIT
        loaded = page.controller.state.discussion

        updated = await page.controller.update_discussion(
            discussion.discussion_id, DiscussionForm.from_discussion(loaded)
        )

        assert updated is True
        state = page.controller.state
        assert state.mode == PageMode.VIEW
        assert state.discussion.model_dump(exclude={"updated_at"}) == loaded.model_dump(
            exclude={"updated_at"}
        )
        assert state.discussion.updated_at >= loaded.updated_at
        assert api.calls_to("get_discussion")[-1] == (discussion.discussion_id,)

    @pytest.mark.asyncio
    async def test_update_failure_stays_in_edit_mode(self, api):
        discussion, _ = await seed(api)
        page = Page(api)
        await page.controller.open(discussion.discussion_id)
        page.controller.enter_edit_mode()
        api.fail("update_discussion", ApiServerError("Not your discussion", 403))

        updated = await page.controller.update_discussion(
            discussion.discussion_id,
            DiscussionForm.from_discussion(page.controller.state.discussion),
        )

        assert updated is False
        assert page.controller.state.mode == PageMode.EDIT
        assert page.notifier.errors == ["Not your discussion"]

    @pytest.mark.asyncio
    async def test_cancel_edit_returns_to_view(self, api):
        discussion, _ = await seed(api)
        page = Page(api)
        await page.controller.open(discussion.discussion_id)

        page.controller.enter_edit_mode()
        page.controller.cancel_edit()

        assert page.controller.state.mode == PageMode.VIEW


class TestDeleteDiscussion:
    @pytest.mark.asyncio
    async def test_cancelled_confirmation_sends_nothing(self, api):
        discussion, _ = await seed(api)
        page = Page(api, confirm_answer=False)

        deleted = await page.controller.delete_discussion(discussion.discussion_id)

        assert deleted is False
        assert len(page.confirm_prompts) == 1
        assert api.calls_to("delete_discussion") == []

    @pytest.mark.asyncio
    async def test_confirmed_delete_navigates_to_listing(self, api):
        discussion, _ = await seed(api)
        page = Page(api)

        deleted = await page.controller.delete_discussion(discussion.discussion_id)

        assert deleted is True
        assert discussion.discussion_id not in api.discussions
        assert page.navigator.visited == ["/discussions"]


class TestChangePage:
    @pytest.mark.asyncio
    async def test_change_page_loads_that_page_and_its_comments(self, api):
        discussion, posts = await seed(api, posts=12)
        page = Page(api)
        await page.controller.open(discussion.discussion_id)
        api.calls.clear()

        await page.controller.change_page(2)

        state = page.controller.state
        assert state.current_page == 2
        assert [p.post_id for p in state.posts] == [p.post_id for p in posts[10:]]
        assert set(state.comments) == {p.post_id for p in posts[10:]}
        assert sorted(api.calls_to("get_post_comments")) == sorted(
            (p.post_id,) for p in posts[10:]
        )


@pytest.mark.asyncio
async def test_logfire_notifier_can_back_the_page(api):
    discussion, _ = await seed(api)

    async def confirm(prompt: str) -> bool:
        return True

    controller = DiscussionPageController(
        api, LogfireNotifier(), RecordingNavigator(), confirm
    )

    assert await controller.submit_post(discussion.discussion_id, " ") is False
    assert await controller.submit_post(discussion.discussion_id, "Hi") is True
