"""Asynchronous list-fetch lifecycle with stale-response suppression.

Each call to :meth:`ListFetchController.request` opens a new fetch cycle
tagged with a generation number. A cycle may only touch the controller state
while its generation is still the current one, so a slow response for an old
key can never overwrite the result for the key that replaced it.

Cancellation is cooperative: superseding a cycle (or tearing the controller
down) does not abort the underlying call, it only discards its outcome.
There is no timeout; a fetch that never resolves keeps the controller in
``Loading``.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Generic, Hashable, Sequence, TypeVar

from storefront.store.fetch_models import Error, FetchState, Idle, Loading, Success

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "Unable to load items."

_NO_KEY = object()


def describe_failure(exc: BaseException, fallback: str) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or fallback


class ListFetchController(Generic[T]):
    def __init__(
        self,
        fetch: Callable[[Any], Awaitable[Sequence[T]]],
        *,
        name: str = "items",
        error_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> None:
        self._fetch = fetch
        self._name = name
        self._error_message = error_message
        self._state: FetchState = Idle()
        self._key: Hashable = _NO_KEY
        self._generation = 0
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def key(self) -> Hashable | None:
        return None if self._key is _NO_KEY else self._key

    @property
    def generation(self) -> int:
        return self._generation

    def request(self, key: Hashable) -> asyncio.Task:
        """Start a new fetch cycle for ``key``; needs a running event loop."""
        self._generation += 1
        self._key = key
        self._state = Loading()
        self._task = asyncio.ensure_future(self._run(key, self._generation))
        return self._task

    def set_key(self, key: Hashable) -> asyncio.Task | None:
        if key == self._key:
            return self._task
        return self.request(key)

    def teardown(self) -> None:
        """Detach from the current cycle; a later set_key starts afresh."""
        self._generation += 1
        self._key = _NO_KEY
        self._task = None

    async def settled(self) -> FetchState:
        task = self._task
        if task is not None:
            await task
        return self._state

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def _run(self, key: Hashable, generation: int) -> None:
        try:
            data = await self._fetch(key)
        except Exception as exc:
            logger.warning("Failed to load %s for %r: %s", self._name, key, exc)
            if not self._is_current(generation):
                logger.debug("Discarding stale failure for %s %r", self._name, key)
                return
            self._state = Error(message=describe_failure(exc, self._error_message))
            return

        if not self._is_current(generation):
            logger.debug("Discarding stale response for %s %r", self._name, key)
            return

        self._state = Success(data=data)
