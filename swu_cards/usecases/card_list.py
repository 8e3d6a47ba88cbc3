"""Fetch lifecycle of the card list.

``CardListController`` is a small state machine driven by discrete events
delivered through an ``asyncio.Queue``. The two inputs, the filter value and
the sort key, arrive as ``FilterChanged`` and ``SortRequested`` events; fetches
run as tasks that report back with ``FetchSucceeded``/``FetchFailed`` events,
so every state transition happens inside the controller loop and the
published state has a single writer.

Each fetch carries a request token. Responses for anything but the latest
token are dropped unless the controller is built with ``discard_stale=False``,
in which case whichever response resolves last wins.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from swu_cards.models.cards import SORT_KEYS, CardRecord
from swu_cards.services.normalizer import normalize_response
from swu_cards.usecases.search_cards import SearchFunction
from swu_cards.utils import DEFAULT_ERROR_MESSAGE, DEFAULT_SORT_KEY, sort_cards


LOG = logging.getLogger(__name__)

Status = Literal["idle", "loading", "ready", "error"]


@dataclass(frozen=True)
class CardListState:
    status: Status
    cards: tuple[CardRecord, ...] = ()
    message: str | None = None


IDLE = CardListState(status="idle")
LOADING = CardListState(status="loading")


def ready(cards: list[CardRecord] | tuple[CardRecord, ...]) -> CardListState:
    return CardListState(status="ready", cards=tuple(cards))


def errored(message: str) -> CardListState:
    return CardListState(status="error", message=message)


def error_message(error: BaseException) -> str:
    if str(error).strip():
        return str(error)
    return DEFAULT_ERROR_MESSAGE


@dataclass(frozen=True)
class Started:
    pass


@dataclass(frozen=True)
class FilterChanged:
    value: str


@dataclass(frozen=True)
class SortRequested:
    key: str


@dataclass(frozen=True)
class FetchSucceeded:
    token: int
    payload: Any


@dataclass(frozen=True)
class FetchFailed:
    token: int
    error: Exception


CardListEvent = Started | FilterChanged | SortRequested | FetchSucceeded | FetchFailed
StateListener = Callable[[CardListState], None]


class CardListController:
    def __init__(
        self,
        search: SearchFunction,
        *,
        filter_value: str = "",
        sort_key: str = DEFAULT_SORT_KEY,
        discard_stale: bool = True,
        on_state: StateListener | None = None,
    ) -> None:
        if sort_key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {sort_key!r}")

        self._search = search
        self._filter_value = filter_value
        self._sort_key = sort_key
        self._discard_stale = discard_stale
        self._listeners: list[StateListener] = []
        self._queue: asyncio.Queue[CardListEvent] = asyncio.Queue()
        self._pending: set[asyncio.Task] = set()
        self._token = 0
        self._started = False
        self._cards: tuple[CardRecord, ...] = ()
        self._state = IDLE

        if on_state is not None:
            self.subscribe(on_state)

    @property
    def state(self) -> CardListState:
        return self._state

    @property
    def cards(self) -> tuple[CardRecord, ...]:
        """The collection currently held, kept across loading and error states."""
        return self._cards

    @property
    def filter_value(self) -> str:
        return self._filter_value

    @property
    def sort_key(self) -> str:
        return self._sort_key

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def start(self) -> None:
        self._queue.put_nowait(Started())

    def set_filter(self, value: str) -> None:
        self._queue.put_nowait(FilterChanged(value))

    def request_sort(self, key: str) -> None:
        if key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {key!r}")

        self._queue.put_nowait(SortRequested(key))

    async def run(self) -> None:
        while True:
            await self.step()

    async def step(self) -> None:
        event = await self._queue.get()
        self._handle(event)

    async def settle(self) -> None:
        """Handle events until the queue is empty and no fetch is in flight.

        Not meant to be mixed with a concurrently running ``run()`` loop.
        """
        while True:
            while not self._queue.empty():
                self._handle(self._queue.get_nowait())

            in_flight = [task for task in self._pending if not task.done()]

            if not in_flight:
                return

            await asyncio.wait(in_flight)

    def _handle(self, event: CardListEvent) -> None:
        if isinstance(event, Started):
            self._on_started()
        elif isinstance(event, FilterChanged):
            self._on_filter_changed(event)
        elif isinstance(event, SortRequested):
            self._on_sort_requested(event)
        elif isinstance(event, FetchSucceeded):
            self._on_fetch_succeeded(event)
        elif isinstance(event, FetchFailed):
            self._on_fetch_failed(event)

    def _on_started(self) -> None:
        if self._started:
            return

        self._started = True
        self._begin_fetch()

    def _on_filter_changed(self, event: FilterChanged) -> None:
        if event.value == self._filter_value:
            return

        self._filter_value = event.value

        if self._started:
            self._begin_fetch()

    def _on_sort_requested(self, event: SortRequested) -> None:
        # A sort request re-sorts what is on screen right away and also
        # refetches with the new key. The re-sorted list is replaced as soon
        # as the new response lands.
        self._cards = tuple(sort_cards(list(self._cards), event.key))

        if self._state.status == "ready":
            self._publish(ready(self._cards))

        if event.key == self._sort_key:
            return

        self._sort_key = event.key

        if self._started:
            self._begin_fetch()

    def _on_fetch_succeeded(self, event: FetchSucceeded) -> None:
        if self._is_stale(event.token):
            return

        try:
            cards = sort_cards(normalize_response(event.payload), self._sort_key)
        except Exception as error:
            LOG.exception("Could not build card list from search response")
            self._publish(errored(error_message(error)))
            return

        LOG.debug("Request %d loaded %d cards", event.token, len(cards))
        self._cards = tuple(cards)
        self._publish(ready(self._cards))

    def _on_fetch_failed(self, event: FetchFailed) -> None:
        if self._is_stale(event.token):
            return

        self._publish(errored(error_message(event.error)))

    def _is_stale(self, token: int) -> bool:
        if self._discard_stale and token != self._token:
            LOG.debug("Dropping stale response %d (latest is %d)", token, self._token)
            return True
        return False

    def _begin_fetch(self) -> None:
        self._token += 1
        self._publish(LOADING)

        task = asyncio.create_task(self._fetch(self._token, self._filter_value))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _fetch(self, token: int, filter_value: str) -> None:
        LOG.debug("Request %d: searching cards for %r", token, filter_value)

        try:
            payload = await self._search(filter_value)
        except Exception as error:
            LOG.exception("Card search for %r failed", filter_value)
            self._queue.put_nowait(FetchFailed(token, error))
            return

        self._queue.put_nowait(FetchSucceeded(token, payload))

    def _publish(self, state: CardListState) -> None:
        self._state = state

        for listener in self._listeners:
            listener(state)
