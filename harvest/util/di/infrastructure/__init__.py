"""Infrastructure providers."""

# Import bases
from .forum_api import ForumApiProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .forum_api import ProdForumApiProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ForumApiProvider",
    "PersistenceProvider",
    "ProdForumApiProvider",
    "ProdPersistenceProvider",
]
