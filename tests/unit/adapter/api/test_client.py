"""Unit tests for ForumApiClient against a mocked HTTP transport."""

import json

import httpx
import pytest

from harvest.adapter.api import DiscussionInput, ForumApiClient
from harvest.adapter.api.client import UNEXPECTED_RESPONSE
from harvest.adapter.error import ApiConnectionError, ApiNotFoundError, ApiServerError
from harvest.client.controller import DiscussionPageController
from harvest.client.notifier import Navigator, Notifier

DISCUSSION = {
    "discussion_id": "d1",
    "title": "Maize prices",
    "description": "What are buyers paying?",
    "category": "pricing",
    "tags": ["maize"],
    "author_id": "u1",
    "author_handle": "grower",
    "created_at": "2026-03-01T08:00:00",
    "updated_at": "2026-03-01T08:00:00",
}

POST = {
    "post_id": "p1",
    "discussion_id": "d1",
    "content": "3200 at the depot",
    "author_id": "u1",
    "author_handle": "grower",
    "created_at": "2026-03-01T09:00:00",
}


def make_client(handler) -> tuple[ForumApiClient, list[httpx.Request]]:
    """Client whose requests are answered by ``handler`` and recorded."""
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    http = httpx.AsyncClient(
        base_url="http://forum.test", transport=httpx.MockTransport(record)
    )
    return ForumApiClient(http), seen


class TestReads:
    @pytest.mark.asyncio
    async def test_get_discussion(self):
        client, seen = make_client(lambda r: httpx.Response(200, json=DISCUSSION))

        discussion = await client.get_discussion("d1")

        assert discussion.title == "Maize prices"
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/discussions/d1"

    @pytest.mark.asyncio
    async def test_get_discussion_posts_sends_page(self):
        body = {
            "posts": [POST],
            "pagination": {
                "total_items": 11,
                "total_pages": 2,
                "current_page": 2,
                "page_size": 10,
            },
        }
        client, seen = make_client(lambda r: httpx.Response(200, json=body))

        page = await client.get_discussion_posts("d1", 2)

        assert seen[0].url.params["page"] == "2"
        assert [p.post_id for p in page.posts] == ["p1"]
        assert page.pagination.has_previous

    @pytest.mark.asyncio
    async def test_get_post_comments(self):
        comments = [
            {
                "comment_id": "c1",
                "post_id": "p1",
                "content": "Agreed",
                "author_id": "u2",
                "author_handle": "buyer",
                "parent_comment_id": None,
                "depth": 0,
                "created_at": "2026-03-01T10:00:00",
            }
        ]
        client, seen = make_client(lambda r: httpx.Response(200, json=comments))

        result = await client.get_post_comments("p1")

        assert seen[0].url.path == "/posts/p1/comments"
        assert result[0].comment_id == "c1"


class TestWrites:
    @pytest.mark.asyncio
    async def test_create_comment_body(self):
        def handler(request):
            data = json.loads(request.content)
            return httpx.Response(
                201,
                json={
                    "comment_id": "c2",
                    "post_id": "p1",
                    "author_id": "u1",
                    "author_handle": "grower",
                    "depth": 1,
                    "created_at": "2026-03-01T10:00:00",
                    **data,
                },
            )

        client, seen = make_client(handler)

        comment = await client.create_comment("p1", "d1", "Me too", "c1")

        assert json.loads(seen[0].content) == {
            "discussion_id": "d1",
            "content": "Me too",
            "parent_comment_id": "c1",
        }
        assert comment.parent_comment_id == "c1"

    @pytest.mark.asyncio
    async def test_update_discussion_puts_fields(self):
        client, seen = make_client(lambda r: httpx.Response(200, json=DISCUSSION))
        fields = DiscussionInput(
            title="Maize prices",
            description="What are buyers paying?",
            category="pricing",
            tags=["maize"],
        )

        await client.update_discussion("d1", fields)

        assert seen[0].method == "PUT"
        assert json.loads(seen[0].content) == fields.model_dump()

    @pytest.mark.asyncio
    async def test_delete_accepts_no_content(self):
        client, seen = make_client(lambda r: httpx.Response(204))

        assert await client.delete_discussion("d1") is None
        assert seen[0].method == "DELETE"


class TestErrors:
    @pytest.mark.asyncio
    async def test_404_carries_server_detail(self):
        client, _ = make_client(
            lambda r: httpx.Response(404, json={"detail": "Discussion not found: d9"})
        )

        with pytest.raises(ApiNotFoundError) as exc_info:
            await client.get_discussion("d9")

        assert exc_info.value.message == "Discussion not found: d9"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_403_is_server_error_with_detail(self):
        client, _ = make_client(
            lambda r: httpx.Response(403, json={"detail": "Not your discussion"})
        )

        with pytest.raises(ApiServerError) as exc_info:
            await client.delete_discussion("d1")

        assert exc_info.value.message == "Not your discussion"
        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_500_without_json_gets_generic_message(self):
        client, _ = make_client(lambda r: httpx.Response(500, text="upstream died"))

        with pytest.raises(ApiServerError) as exc_info:
            await client.get_post_comments("p1")

        assert exc_info.value.message == "Request failed with status 500"

    @pytest.mark.asyncio
    async def test_validation_detail_list_gets_generic_message(self):
        client, _ = make_client(
            lambda r: httpx.Response(422, json={"detail": [{"msg": "field required"}]})
        )

        with pytest.raises(ApiServerError) as exc_info:
            await client.create_post("d1", "x")

        assert exc_info.value.message == "Request failed with status 422"

    @pytest.mark.asyncio
    async def test_transport_failure_is_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(handler)

        with pytest.raises(ApiConnectionError):
            await client.get_discussion("d1")


@pytest.mark.asyncio
async def test_create_sets_auth_cookie_and_base_url():
    client = ForumApiClient.create("http://forum.test", timeout=5, auth_token="abc")

    assert client.http.base_url.host == "forum.test"
    assert client.http.cookies.get("auth_token") == "abc"
    assert client.http.timeout.read == 5

    await client.close()
    assert client.http.is_closed


class TestUnreadableBodies:
    """A 2xx body that doesn't match the endpoint is a server error."""

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        client, _ = make_client(lambda r: httpx.Response(200, text="<html>gateway</html>"))

        with pytest.raises(ApiServerError) as exc_info:
            await client.get_discussion("d1")

        assert exc_info.value.message == UNEXPECTED_RESPONSE
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_body_missing_fields(self):
        client, _ = make_client(lambda r: httpx.Response(200, json={"title": "x"}))

        with pytest.raises(ApiServerError, match=UNEXPECTED_RESPONSE):
            await client.get_discussion("d1")

    @pytest.mark.asyncio
    async def test_empty_body_where_list_expected(self):
        client, _ = make_client(lambda r: httpx.Response(200))

        with pytest.raises(ApiServerError, match=UNEXPECTED_RESPONSE):
            await client.get_post_comments("p1")

    @pytest.mark.asyncio
    async def test_created_body_of_wrong_shape(self):
        client, _ = make_client(lambda r: httpx.Response(201, json=[1, 2, 3]))

        with pytest.raises(ApiServerError, match=UNEXPECTED_RESPONSE):
            await client.create_post("d1", "hello")


class ListNotifier(Notifier):
    def __init__(self) -> None:
        self.errors: list[str] = []

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        self.errors.append(message)


class StayNavigator(Navigator):
    def go_to_discussion(self, discussion_id: str) -> None:
        pass

    def go_to_listing(self) -> None:
        pass


async def always_confirm(prompt: str) -> bool:
    return True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>gateway</html>"),
        httpx.Response(200, json={"title": "x"}),
    ],
)
async def test_page_reports_unreadable_discussion(response):
    client, _ = make_client(lambda r: response)
    notifier = ListNotifier()
    controller = DiscussionPageController(client, notifier, StayNavigator(), always_confirm)

    await controller.load_discussion("d1")

    assert notifier.errors == [UNEXPECTED_RESPONSE]
    assert controller.state.discussion is None
    assert not controller.state.loading


@pytest.mark.asyncio
async def test_page_reports_unreadable_reply_refresh():
    def handler(request):
        if request.method == "POST":
            return httpx.Response(
                201,
                json={
                    "comment_id": "c1",
                    "post_id": "p1",
                    "content": "Hi",
                    "author_id": "u1",
                    "author_handle": "grower",
                    "created_at": "2026-03-01T10:00:00",
                },
            )
        return httpx.Response(200)

    client, _ = make_client(handler)
    notifier = ListNotifier()
    controller = DiscussionPageController(client, notifier, StayNavigator(), always_confirm)

    created = await controller.submit_reply("p1", "d1", "Hi")

    assert created is True
    assert notifier.errors == [UNEXPECTED_RESPONSE]
    assert not controller.state.submitting
    assert not controller.state.comments_loading
