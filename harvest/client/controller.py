"""Discussion page controller.

Owns the discussion page's view state and every request the page makes.
Mutations never patch state in place: a successful write is followed by a
re-fetch of whatever it changed, and failures are reported through the
``Notifier`` rather than raised.
"""

import asyncio

import logfire

from harvest.adapter.api import ForumApi, RemoteComment, RemoteDiscussion, RemotePost
from harvest.adapter.error import ApiError

from .error import FormValidationError
from .forms import DiscussionForm
from .notifier import ConfirmCallback, Navigator, Notifier
from .state import (
    CREATE_SENTINEL,
    Action,
    CommentsLoaded,
    CommentsLoadingFinished,
    CommentsLoadingStarted,
    CreateModeEntered,
    DiscussionLoaded,
    ErrorReported,
    LoadingFinished,
    LoadingStarted,
    ModeChanged,
    PageMode,
    PageOpened,
    PageState,
    PostsLoaded,
    SubmitFinished,
    SubmitStarted,
    reduce,
)


class DiscussionPageController:
    """Client-side aggregate for one discussion page.

    Read operations may overlap freely. Mutating operations are latched by
    ``state.submitting``: while one is in flight, further mutating calls
    return immediately without sending anything.
    """

    def __init__(
        self,
        api: ForumApi,
        notifier: Notifier,
        navigator: Navigator,
        confirm: ConfirmCallback,
    ) -> None:
        """Initialize discussion page controller.

        Args:
            api: Forum API client
            notifier: Success/error message sink
            navigator: Page navigation
            confirm: Asked before deleting a discussion
        """
        self.api = api
        self.notifier = notifier
        self.navigator = navigator
        self.confirm = confirm
        self.state = PageState()

    def dispatch(self, action: Action) -> PageState:
        self.state = reduce(self.state, action)
        return self.state

    def _report(self, error: Exception, fallback: str) -> None:
        message = getattr(error, "message", None) or fallback
        logfire.warn(
            "Discussion page action failed",
            error_type=type(error).__name__,
            error=str(error),
            discussion_id=self.state.discussion_id,
            shown=message,
        )
        self.dispatch(ErrorReported(message))
        self.notifier.error(message)

    # Page lifecycle

    async def open(self, discussion_id: str) -> None:
        """Mount the page for ``discussion_id`` (or the create sentinel).

        Discussion and posts are fetched concurrently; neither waits for
        the other.
        """
        if discussion_id == CREATE_SENTINEL:
            self.dispatch(CreateModeEntered())
            return

        self.dispatch(PageOpened(discussion_id))
        self.dispatch(LoadingStarted())
        try:
            await asyncio.gather(
                self._fetch_discussion(discussion_id),
                self._fetch_posts(discussion_id, 1),
            )
        finally:
            self.dispatch(LoadingFinished())

    async def close(self) -> None:
        """Release the API client. Requests already in flight still complete."""
        await self.api.close()

    # Reads

    async def load_discussion(self, discussion_id: str) -> None:
        """Fetch the discussion detail. Skipped entirely in create mode."""
        if discussion_id == CREATE_SENTINEL:
            self.dispatch(CreateModeEntered())
            return

        self.dispatch(LoadingStarted())
        try:
            await self._fetch_discussion(discussion_id)
        finally:
            self.dispatch(LoadingFinished())

    async def _fetch_discussion(self, discussion_id: str) -> None:
        try:
            discussion = await self.api.get_discussion(discussion_id)
        except ApiError as e:
            self._report(e, "Failed to load discussion")
            return
        self.dispatch(DiscussionLoaded(discussion))

    async def load_posts(self, discussion_id: str, page: int = 1) -> None:
        """Fetch one page of posts, then the comments of every post on it."""
        self.dispatch(LoadingStarted())
        try:
            await self._fetch_posts(discussion_id, page)
        finally:
            self.dispatch(LoadingFinished())

    async def _fetch_posts(self, discussion_id: str, page: int) -> None:
        try:
            result = await self.api.get_discussion_posts(discussion_id, page)
        except ApiError as e:
            self._report(e, "Failed to load posts")
            return
        self.dispatch(PostsLoaded(result.posts, result.pagination, page))
        await self.load_comments_for_visible_posts(result.posts)

    async def load_comments_for_visible_posts(self, posts: list[RemotePost]) -> None:
        """Fetch the comments of ``posts`` concurrently.

        ``comments_loading`` is cleared only once every fetch has settled.
        Lists that arrived are kept even when others failed; all failures
        together produce a single error notification.
        """
        if not posts:
            return

        self.dispatch(CommentsLoadingStarted())
        try:
            results = await asyncio.gather(
                *(self.api.get_post_comments(post.post_id) for post in posts),
                return_exceptions=True,
            )

            loaded: dict[str, list[RemoteComment]] = {}
            failed: list[str] = []
            for post, result in zip(posts, results):
                if isinstance(result, Exception):
                    failed.append(post.post_id)
                    logfire.warn(
                        "Comment fetch failed",
                        post_id=post.post_id,
                        error=str(result),
                    )
                elif isinstance(result, BaseException):
                    raise result
                else:
                    loaded[post.post_id] = result

            self.dispatch(CommentsLoaded(loaded))
            if failed:
                noun = "post" if len(failed) == 1 else "posts"
                message = f"Failed to load comments for {len(failed)} {noun}"
                self.dispatch(ErrorReported(message))
                self.notifier.error(message)
        finally:
            self.dispatch(CommentsLoadingFinished())

    async def _refresh_post_comments(self, post_id: str) -> None:
        self.dispatch(CommentsLoadingStarted())
        try:
            comments = await self.api.get_post_comments(post_id)
        except ApiError as e:
            self._report(e, "Failed to load comments")
            return
        finally:
            self.dispatch(CommentsLoadingFinished())
        self.dispatch(CommentsLoaded({post_id: comments}))

    async def change_page(self, page: int) -> None:
        """Show another page of posts for the current discussion."""
        if self.state.discussion_id is None or page < 1:
            return
        await self.load_posts(self.state.discussion_id, page)

    # Mode

    def enter_edit_mode(self) -> None:
        if self.state.discussion is not None and self.state.mode == PageMode.VIEW:
            self.dispatch(ModeChanged(PageMode.EDIT))

    def cancel_edit(self) -> None:
        if self.state.mode == PageMode.EDIT:
            self.dispatch(ModeChanged(PageMode.VIEW))

    # Writes

    async def submit_post(self, discussion_id: str, content: str) -> bool:
        """Add a post, then re-fetch the current page of posts.

        Returns:
            True if the post was created
        """
        if self.state.submitting:
            return False
        if not content.strip():
            self.notifier.error("Post content cannot be empty")
            return False

        self.dispatch(SubmitStarted())
        try:
            try:
                await self.api.create_post(discussion_id, content)
            except ApiError as e:
                self._report(e, "Failed to create post")
                return False

            self.notifier.success("Post created")
            await self.load_posts(discussion_id, self.state.current_page)
            return True
        finally:
            self.dispatch(SubmitFinished())

    async def submit_reply(
        self,
        post_id: str,
        discussion_id: str,
        content: str,
        parent_comment_id: str | None = None,
    ) -> bool:
        """Comment on a post (or reply to one of its comments).

        Only that post's comments are re-fetched afterwards.

        Returns:
            True if the comment was created
        """
        if self.state.submitting:
            return False
        if not content.strip():
            self.notifier.error("Comment cannot be empty")
            return False

        self.dispatch(SubmitStarted())
        try:
            try:
                await self.api.create_comment(
                    post_id, discussion_id, content, parent_comment_id
                )
            except ApiError as e:
                self._report(e, "Failed to create comment")
                return False

            self.notifier.success("Comment added")
            await self._refresh_post_comments(post_id)
            return True
        finally:
            self.dispatch(SubmitFinished())

    async def create_discussion(self, form: DiscussionForm) -> RemoteDiscussion | None:
        """Validate the form, create the discussion and navigate to it."""
        if self.state.submitting:
            return None
        try:
            fields = form.to_input()
        except FormValidationError as e:
            self.notifier.error(e.message)
            return None

        self.dispatch(SubmitStarted())
        try:
            created = await self.api.create_discussion(fields)
        except ApiError as e:
            self._report(e, "Failed to create discussion")
            return None
        finally:
            self.dispatch(SubmitFinished())

        logfire.info("Discussion created", discussion_id=created.discussion_id)
        self.notifier.success("Discussion created")
        self.navigator.go_to_discussion(created.discussion_id)
        return created

    async def update_discussion(
        self, discussion_id: str, form: DiscussionForm
    ) -> bool:
        """Validate the form, overwrite the discussion, reload it and leave edit mode."""
        if self.state.submitting:
            return False
        try:
            fields = form.to_input()
        except FormValidationError as e:
            self.notifier.error(e.message)
            return False

        self.dispatch(SubmitStarted())
        try:
            try:
                await self.api.update_discussion(discussion_id, fields)
            except ApiError as e:
                self._report(e, "Failed to update discussion")
                return False

            self.notifier.success("Discussion updated")
            await self.load_discussion(discussion_id)
            self.dispatch(ModeChanged(PageMode.VIEW))
            return True
        finally:
            self.dispatch(SubmitFinished())

    async def delete_discussion(self, discussion_id: str) -> bool:
        """Delete the discussion after confirmation and go back to the listing."""
        if self.state.submitting:
            return False
        if not await self.confirm("Are you sure you want to delete this discussion?"):
            return False

        self.dispatch(SubmitStarted())
        try:
            await self.api.delete_discussion(discussion_id)
        except ApiError as e:
            self._report(e, "Failed to delete discussion")
            return False
        finally:
            self.dispatch(SubmitFinished())

        logfire.info("Discussion deleted", discussion_id=discussion_id)
        self.notifier.success("Discussion deleted")
        self.navigator.go_to_listing()
        return True
