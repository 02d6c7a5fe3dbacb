"""Observable state holders shared by the screen view-models."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from moviegem.exceptions import describe_error

logger = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")

Subscriber = Callable[["ObservableViewModel"], None]


class ObservableViewModel:
    """
    State holder that tells subscribers when its state has changed.

    Subscribers are plain callables receiving the view-model. They are
    called in subscription order, on the event loop that mutated the state.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for state changes.

        Returns:
            A function that removes the subscription when called
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify(self) -> None:
        """Send the current state to every subscriber."""
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception as e:
                logger.error(f"Subscriber {callback!r} failed: {e}", exc_info=True)


class LoadableViewModel(ObservableViewModel, ABC, Generic[R]):
    """
    View-model with a single guarded load operation.

    While a load is in flight further load() calls are ignored. Subscribers
    see exactly two notifications per load: one when it starts and one after
    the awaited fetch has finished and its result (or error) is in place.
    """

    def __init__(self) -> None:
        super().__init__()
        self.is_loading = False
        self.error: str | None = None
        self.last_exception: Exception | None = None

    @abstractmethod
    async def _fetch(self) -> R:
        """Fetch fresh data for this screen."""

    @abstractmethod
    def _apply(self, result: R) -> None:
        """Replace the held state with a fetched result."""

    async def load(self) -> bool:
        """
        Fetch and publish fresh state.

        Returns:
            False if a load was already in flight and this call did nothing,
            True otherwise (check error for the outcome)
        """
        return await self._guarded_load(self._fetch, self._apply)

    async def _guarded_load(
        self,
        fetch: Callable[[], Awaitable[T]],
        apply: Callable[[T], None],
    ) -> bool:
        """Run one fetch/apply pair under the shared loading guard."""
        if self.is_loading:
            logger.debug(f"{type(self).__name__}: load already in flight, skipping")
            return False

        self.is_loading = True
        self.error = None
        self.last_exception = None
        self.notify()

        try:
            result = await fetch()
        except Exception as e:
            logger.error(f"{type(self).__name__}: load failed: {e}")
            self.error = describe_error(e)
            self.last_exception = e
        else:
            apply(result)
        finally:
            self.is_loading = False

        self.notify()
        return True

    async def _mutate(self, operation: Awaitable[T]) -> T:
        """
        Await a service call that changes data.

        On failure the error is recorded and published, then re-raised so
        the caller can react to it.
        """
        try:
            return await operation
        except Exception as e:
            logger.error(f"{type(self).__name__}: update failed: {e}")
            self.error = describe_error(e)
            self.last_exception = e
            self.notify()
            raise


class ListViewModel(LoadableViewModel[list[T]]):
    """Loadable view-model whose state is one list, replaced wholesale."""

    def __init__(self) -> None:
        super().__init__()
        self.items: list[T] = []

    def _apply(self, result: list[T]) -> None:
        self.items = list(result)
