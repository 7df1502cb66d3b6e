"""Discussion page view state.

``PageState`` is immutable. The controller replaces it with the result of
``reduce(state, action)``; nothing else writes to it.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict

from harvest.adapter.api import RemoteComment, RemoteDiscussion, RemotePost
from harvest.domain.value import Pagination

# Route id that opens the page as an empty "new discussion" form
CREATE_SENTINEL = "create"


class PageMode(str, Enum):
    """What the page is showing."""

    CREATE = "create"
    EDIT = "edit"
    VIEW = "view"


class PageState(BaseModel):
    """Everything the discussion page renders from."""

    model_config = ConfigDict(frozen=True)

    mode: PageMode = PageMode.VIEW
    discussion_id: str | None = None
    discussion: RemoteDiscussion | None = None
    posts: list[RemotePost] = []
    pagination: Pagination | None = None
    current_page: int = 1
    comments: dict[str, list[RemoteComment]] = {}
    loading: bool = False
    comments_loading: bool = False
    submitting: bool = False
    last_error: str | None = None

    def comments_for(self, post_id: str) -> list[RemoteComment]:
        return self.comments.get(post_id, [])


@dataclass(frozen=True)
class CreateModeEntered:
    pass


@dataclass(frozen=True)
class PageOpened:
    discussion_id: str


@dataclass(frozen=True)
class LoadingStarted:
    pass


@dataclass(frozen=True)
class LoadingFinished:
    pass


@dataclass(frozen=True)
class DiscussionLoaded:
    discussion: RemoteDiscussion


@dataclass(frozen=True)
class PostsLoaded:
    posts: list[RemotePost]
    pagination: Pagination
    page: int


@dataclass(frozen=True)
class CommentsLoadingStarted:
    pass


@dataclass(frozen=True)
class CommentsLoadingFinished:
    pass


@dataclass(frozen=True)
class CommentsLoaded:
    """Comment lists by post id.

    Posts missing from the map are left as they are; lists for posts not on
    the current page are dropped.
    """

    comments: dict[str, list[RemoteComment]]


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class SubmitFinished:
    pass


@dataclass(frozen=True)
class ModeChanged:
    mode: PageMode


@dataclass(frozen=True)
class ErrorReported:
    message: str


Action = (
    CreateModeEntered
    | PageOpened
    | LoadingStarted
    | LoadingFinished
    | DiscussionLoaded
    | PostsLoaded
    | CommentsLoadingStarted
    | CommentsLoadingFinished
    | CommentsLoaded
    | SubmitStarted
    | SubmitFinished
    | ModeChanged
    | ErrorReported
)


def reduce(state: PageState, action: Action) -> PageState:
    """Return the state that follows ``action``.

    Raises:
        TypeError: For an action this reducer doesn't know
    """
    if isinstance(action, CreateModeEntered):
        return PageState(mode=PageMode.CREATE)

    if isinstance(action, PageOpened):
        return PageState(mode=PageMode.VIEW, discussion_id=action.discussion_id)

    if isinstance(action, LoadingStarted):
        return state.model_copy(update={"loading": True, "last_error": None})

    if isinstance(action, LoadingFinished):
        return state.model_copy(update={"loading": False})

    if isinstance(action, DiscussionLoaded):
        return state.model_copy(
            update={
                "discussion": action.discussion,
                "discussion_id": action.discussion.discussion_id,
            }
        )

    if isinstance(action, PostsLoaded):
        # Keep only comments that still belong to a visible post
        visible = {post.post_id for post in action.posts}
        comments = {k: v for k, v in state.comments.items() if k in visible}
        return state.model_copy(
            update={
                "posts": action.posts,
                "pagination": action.pagination,
                "current_page": action.page,
                "comments": comments,
            }
        )

    if isinstance(action, CommentsLoadingStarted):
        return state.model_copy(update={"comments_loading": True})

    if isinstance(action, CommentsLoadingFinished):
        return state.model_copy(update={"comments_loading": False})

    if isinstance(action, CommentsLoaded):
        visible = {post.post_id for post in state.posts}
        arrived = {k: v for k, v in action.comments.items() if k in visible}
        return state.model_copy(update={"comments": {**state.comments, **arrived}})

    if isinstance(action, SubmitStarted):
        return state.model_copy(update={"submitting": True, "last_error": None})

    if isinstance(action, SubmitFinished):
        return state.model_copy(update={"submitting": False})

    if isinstance(action, ModeChanged):
        return state.model_copy(update={"mode": action.mode})

    if isinstance(action, ErrorReported):
        return state.model_copy(update={"last_error": action.message})

    raise TypeError(f"Unknown page action: {action!r}")
