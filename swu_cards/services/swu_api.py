import logging
from typing import TypedDict

from httpx import AsyncClient

from swu_cards.utils.constants import (
    REQUEST_TIMEOUT_SECONDS,
    SEARCH_PATH,
    SWU_API_URL,
    USER_AGENT,
)


LOG = logging.getLogger(__name__)


class SWUCard(TypedDict, total=False):
    Set: str
    Number: str
    Name: str
    Type: str
    Aspects: list[str]
    Traits: list[str]
    Arenas: list[str]
    Cost: str
    Power: str
    HP: str
    FrontText: str
    DoubleSided: bool
    Rarity: str
    Unique: bool
    Artist: str
    VariantType: str
    MarketPrice: str
    FoilPrice: str
    FrontArt: str


class SWUSearchResponse(TypedDict, total=False):
    total_cards: int
    data: list[SWUCard]


async def search_cards(query: str) -> SWUSearchResponse:
    """Run a swu-db card search; the payload is returned as decoded, unchecked."""
    LOG.debug("Searching swu-db for %r", query)

    async with AsyncClient(
        base_url=SWU_API_URL,
        headers={"User-Agent": USER_AGENT},
        timeout=REQUEST_TIMEOUT_SECONDS,
        follow_redirects=True,
    ) as client:
        response = await client.get(SEARCH_PATH, params={"q": query})
        response.raise_for_status()

    return response.json()
