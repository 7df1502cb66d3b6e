"""Callbacks the discussion page uses to talk to its host UI."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

import logfire

# Asked before destructive actions; resolves True to go ahead
ConfirmCallback = Callable[[str], Awaitable[bool]]


class Notifier(ABC):
    """Shows transient success/error messages to the user."""

    @abstractmethod
    def success(self, message: str) -> None:
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        pass


class LogfireNotifier(Notifier):
    """Notifier that only records messages as Logfire events."""

    def success(self, message: str) -> None:
        logfire.info("Page notification", kind="success", text=message)

    def error(self, message: str) -> None:
        logfire.warn("Page notification", kind="error", text=message)


class Navigator(ABC):
    """Moves the UI to another page."""

    @abstractmethod
    def go_to_discussion(self, discussion_id: str) -> None:
        pass

    @abstractmethod
    def go_to_listing(self) -> None:
        pass
