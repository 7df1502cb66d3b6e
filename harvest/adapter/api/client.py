"""Forum API client.

The discussion page talks to the server only through ``ForumApi``. The
production implementation is ``ForumApiClient`` over ``httpx``; every
non-2xx response is raised as an ``ApiError`` carrying the server's
``detail`` message, and a 2xx body that doesn't parse is raised as
``ApiServerError`` too.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any
from uuid import uuid4

import httpx
import logfire
from pydantic import TypeAdapter

from harvest.adapter.error import (
    ApiConnectionError,
    ApiError,
    ApiNotFoundError,
    ApiServerError,
)
from harvest.domain.value import Pagination

from .models import (
    DiscussionInput,
    PostsPage,
    RemoteComment,
    RemoteDiscussion,
    RemotePost,
)

# Shown when a 2xx body doesn't match what the endpoint promises
UNEXPECTED_RESPONSE = "Unexpected response from server"


class ForumApi(ABC):
    """Operations the discussion page needs from the forum API."""

    @abstractmethod
    async def get_discussion(self, discussion_id: str) -> RemoteDiscussion:
        pass

    @abstractmethod
    async def get_discussion_posts(self, discussion_id: str, page: int) -> PostsPage:
        pass

    @abstractmethod
    async def get_post_comments(self, post_id: str) -> list[RemoteComment]:
        pass

    @abstractmethod
    async def create_post(self, discussion_id: str, content: str) -> RemotePost:
        pass

    @abstractmethod
    async def create_comment(
        self,
        post_id: str,
        discussion_id: str,
        content: str,
        parent_comment_id: str | None = None,
    ) -> RemoteComment:
        pass

    @abstractmethod
    async def create_discussion(self, fields: DiscussionInput) -> RemoteDiscussion:
        pass

    @abstractmethod
    async def update_discussion(
        self, discussion_id: str, fields: DiscussionInput
    ) -> RemoteDiscussion:
        pass

    @abstractmethod
    async def delete_discussion(self, discussion_id: str) -> None:
        pass

    async def close(self) -> None:
        """Release transport resources."""
        pass


class ForumApiClient(ForumApi):
    """``ForumApi`` over HTTP."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        """Initialize forum API client.

        Args:
            http: Client configured with the API base URL, timeout and
                the ``auth_token`` cookie when acting as a signed-in user
        """
        self.http = http

    @classmethod
    def create(
        cls, base_url: str, timeout: float = 30.0, auth_token: str | None = None
    ) -> "ForumApiClient":
        """Build a client with its own ``httpx.AsyncClient``."""
        cookies = {"auth_token": auth_token} if auth_token else None
        return cls(httpx.AsyncClient(base_url=base_url, timeout=timeout, cookies=cookies))

    async def _request(
        self,
        method: str,
        path: str,
        response_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        """Send a request and parse the body as ``response_type``.

        Raises:
            ApiConnectionError: If no response arrived
            ApiNotFoundError: On 404
            ApiServerError: On any other non-2xx status, or a 2xx body
                that doesn't parse as ``response_type``
        """
        try:
            response = await self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logfire.error("Forum API unreachable", method=method, path=path, error=str(e))
            raise ApiConnectionError(f"Could not reach the server: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logfire.warn(
                "Forum API request failed",
                method=method,
                path=path,
                status_code=response.status_code,
                detail=message,
            )
            if response.status_code == 404:
                raise ApiNotFoundError(message, response.status_code)
            raise ApiServerError(message, response.status_code)

        if response_type is None:
            return None

        try:
            data = response.json() if response.content else None
            return TypeAdapter(response_type).validate_python(data)
        except ValueError as e:
            # Covers JSON decode errors and pydantic.ValidationError
            logfire.warn(
                "Forum API returned an unreadable body",
                method=method,
                path=path,
                status_code=response.status_code,
                error=str(e),
            )
            raise ApiServerError(UNEXPECTED_RESPONSE, response.status_code) from e

    async def get_discussion(self, discussion_id: str) -> RemoteDiscussion:
        return await self._request("GET", f"/discussions/{discussion_id}", RemoteDiscussion)

    async def get_discussion_posts(self, discussion_id: str, page: int) -> PostsPage:
        return await self._request(
            "GET", f"/discussions/{discussion_id}/posts", PostsPage, params={"page": page}
        )

    async def get_post_comments(self, post_id: str) -> list[RemoteComment]:
        return await self._request("GET", f"/posts/{post_id}/comments", list[RemoteComment])

    async def create_post(self, discussion_id: str, content: str) -> RemotePost:
        return await self._request(
            "POST",
            f"/discussions/{discussion_id}/posts",
            RemotePost,
            json={"content": content},
        )

    async def create_comment(
        self,
        post_id: str,
        discussion_id: str,
        content: str,
        parent_comment_id: str | None = None,
    ) -> RemoteComment:
        return await self._request(
            "POST",
            f"/posts/{post_id}/comments",
            RemoteComment,
            json={
                "discussion_id": discussion_id,
                "content": content,
                "parent_comment_id": parent_comment_id,
            },
        )

    async def create_discussion(self, fields: DiscussionInput) -> RemoteDiscussion:
        return await self._request(
            "POST", "/discussions", RemoteDiscussion, json=fields.model_dump()
        )

    async def update_discussion(
        self, discussion_id: str, fields: DiscussionInput
    ) -> RemoteDiscussion:
        return await self._request(
            "PUT", f"/discussions/{discussion_id}", RemoteDiscussion, json=fields.model_dump()
        )

    async def delete_discussion(self, discussion_id: str) -> None:
        await self._request("DELETE", f"/discussions/{discussion_id}")

    async def close(self) -> None:
        await self.http.aclose()


def _error_message(response: httpx.Response) -> str:
    """Pull FastAPI's ``detail`` out of an error response, if it is a string."""
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    return f"Request failed with status {response.status_code}"


class MockForumApi(ForumApi):
    """In-memory forum API for tests.

    Keeps its own discussions, posts and comments, records every call in
    ``calls`` and raises whatever is queued in ``failures`` for a method
    name (optionally keyed by the first argument) instead of answering.
    """

    def __init__(self, posts_page_size: int = 10, author_handle: str = "mockuser"):
        self.posts_page_size = posts_page_size
        self.author_id = str(uuid4())
        self.author_handle = author_handle
        self.discussions: dict[str, RemoteDiscussion] = {}
        self.posts: dict[str, RemotePost] = {}
        self.comments: dict[str, RemoteComment] = {}
        self.calls: list[tuple[str, tuple]] = []
        self.failures: dict[str | tuple[str, str], ApiError] = {}

    def fail(self, method: str, error: ApiError, key: str | None = None) -> None:
        """Make ``method`` raise ``error`` (for one key, or every call)."""
        self.failures[(method, key) if key else method] = error

    def calls_to(self, method: str) -> list[tuple]:
        return [args for name, args in self.calls if name == method]

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        key = str(args[0]) if args else None
        error = self.failures.get((method, key)) if key else None
        error = error or self.failures.get(method)
        if error is not None:
            raise error

    def _discussion(self, discussion_id: str) -> RemoteDiscussion:
        if discussion_id not in self.discussions:
            raise ApiNotFoundError(f"Discussion not found: {discussion_id}", 404)
        return self.discussions[discussion_id]

    async def get_discussion(self, discussion_id: str) -> RemoteDiscussion:
        self._record("get_discussion", discussion_id)
        return self._discussion(discussion_id)

    async def get_discussion_posts(self, discussion_id: str, page: int) -> PostsPage:
        self._record("get_discussion_posts", discussion_id, page)
        self._discussion(discussion_id)
        posts = [p for p in self.posts.values() if p.discussion_id == discussion_id]
        pagination = Pagination.from_total(len(posts), page, self.posts_page_size)
        start = pagination.offset
        return PostsPage(
            posts=posts[start : start + self.posts_page_size],
            pagination=pagination,
        )

    async def get_post_comments(self, post_id: str) -> list[RemoteComment]:
        self._record("get_post_comments", post_id)
        return [c for c in self.comments.values() if c.post_id == post_id]

    async def create_post(self, discussion_id: str, content: str) -> RemotePost:
        self._record("create_post", discussion_id, content)
        self._discussion(discussion_id)
        post = RemotePost(
            post_id=str(uuid4()),
            discussion_id=discussion_id,
            content=content,
            author_id=self.author_id,
            author_handle=self.author_handle,
            created_at=datetime.now(),
        )
        self.posts[post.post_id] = post
        return post

    async def create_comment(
        self,
        post_id: str,
        discussion_id: str,
        content: str,
        parent_comment_id: str | None = None,
    ) -> RemoteComment:
        self._record("create_comment", post_id, discussion_id, content, parent_comment_id)
        if post_id not in self.posts:
            raise ApiNotFoundError(f"Post not found: {post_id}", 404)
        depth = 0
        if parent_comment_id:
            depth = self.comments[parent_comment_id].depth + 1
        comment = RemoteComment(
            comment_id=str(uuid4()),
            post_id=post_id,
            content=content,
            author_id=self.author_id,
            author_handle=self.author_handle,
            parent_comment_id=parent_comment_id,
            depth=depth,
            created_at=datetime.now(),
        )
        self.comments[comment.comment_id] = comment
        return comment

    async def create_discussion(self, fields: DiscussionInput) -> RemoteDiscussion:
        self._record("create_discussion", fields)
        now = datetime.now()
        discussion = RemoteDiscussion(
            discussion_id=str(uuid4()),
            author_id=self.author_id,
            author_handle=self.author_handle,
            created_at=now,
            updated_at=now,
            **fields.model_dump(),
        )
        self.discussions[discussion.discussion_id] = discussion
        return discussion

    async def update_discussion(
        self, discussion_id: str, fields: DiscussionInput
    ) -> RemoteDiscussion:
        self._record("update_discussion", discussion_id, fields)
        updated = self._discussion(discussion_id).model_copy(
            update={**fields.model_dump(), "updated_at": datetime.now()}
        )
        self.discussions[discussion_id] = updated
        return updated

    async def delete_discussion(self, discussion_id: str) -> None:
        self._record("delete_discussion", discussion_id)
        self._discussion(discussion_id)
        del self.discussions[discussion_id]
        self.posts = {
            k: p for k, p in self.posts.items() if p.discussion_id != discussion_id
        }
        self.comments = {k: c for k, c in self.comments.items() if c.post_id in self.posts}
