import math
from dataclasses import dataclass, fields
from typing import Any


NOT_A_NUMBER = math.nan


@dataclass(frozen=True)
class CardRecord:
    set: str | None
    number: str | None
    name: str | None
    type: str | None
    aspects: list[str] | None
    traits: list[str] | None
    arenas: list[str] | None
    cost: int | float
    power: int | float
    hp: int | float
    fronttext: str | None
    doublesided: bool | None
    rarity: str | None
    unique: bool | None
    artist: str | None
    varianttype: str | None
    marketprice: str | None
    foilprice: str | None
    frontArt: str | None
    id: str


SORT_KEYS: tuple[str, ...] = tuple(f.name for f in fields(CardRecord))


def is_not_a_number(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)
