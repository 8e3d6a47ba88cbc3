from collections.abc import Awaitable, Callable
from typing import Any

from swu_cards.models.cards import CardRecord
from swu_cards.services.normalizer import normalize_response
from swu_cards.services.swu_api import search_cards
from swu_cards.utils import DEFAULT_SORT_KEY, sort_cards


SearchFunction = Callable[[str], Awaitable[Any]]


async def load_cards(
    filter_value: str = "",
    sort_key: str = DEFAULT_SORT_KEY,
    search: SearchFunction = search_cards,
) -> list[CardRecord]:
    payload = await search(filter_value)

    return sort_cards(normalize_response(payload), sort_key)
