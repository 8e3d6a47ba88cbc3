"""Parsing boundary between raw swu-db search payloads and ``CardRecord``.

Everything coming from the search endpoint is untyped: any field can be
missing or hold an unexpected type. This module is the only place that deals
with that. It never raises; unparsable numbers become ``NOT_A_NUMBER`` and
missing fields become ``None``.
"""

import re
from collections.abc import Mapping
from typing import Any

from swu_cards.models.cards import NOT_A_NUMBER, CardRecord, is_not_a_number
from swu_cards.utils import to_text


UNKNOWN_SET = "unknown-set"
UNKNOWN_NUMBER = "unknown-number"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: Any) -> int | float:
    """Base-10 integer parse of ``value`` read as text, ``NOT_A_NUMBER`` on failure.

    Non-string values go through ``to_text`` first, so ``["3"]`` parses as 3 and
    ``1e21`` as 1. Leading whitespace and a sign are accepted and anything after
    the leading digits is ignored, so ``"12abc"`` parses as 12.
    """
    if value is None:
        return NOT_A_NUMBER

    if isinstance(value, int) and not isinstance(value, bool):
        return value

    match = _LEADING_INT.match(to_text(value))
    if match is None:
        return NOT_A_NUMBER

    return int(match.group(1))


def _id_part(value: Any, default: str) -> str:
    if not value or is_not_a_number(value):
        return default
    return to_text(value)


def make_card_id(set_code: Any, number: Any) -> str:
    return f"{_id_part(set_code, UNKNOWN_SET)}-{_id_part(number, UNKNOWN_NUMBER)}"


def normalize_card(raw: Any) -> CardRecord:
    if not isinstance(raw, Mapping):
        raw = {}

    return CardRecord(
        set=raw.get("Set"),
        number=raw.get("Number"),
        name=raw.get("Name"),
        type=raw.get("Type"),
        aspects=raw.get("Aspects"),
        traits=raw.get("Traits"),
        arenas=raw.get("Arenas"),
        cost=parse_int(raw.get("Cost")),
        power=parse_int(raw.get("Power")),
        hp=parse_int(raw.get("HP")),
        fronttext=raw.get("FrontText"),
        doublesided=raw.get("DoubleSided"),
        rarity=raw.get("Rarity"),
        unique=raw.get("Unique"),
        artist=raw.get("Artist"),
        varianttype=raw.get("VariantType"),
        marketprice=raw.get("MarketPrice"),
        foilprice=raw.get("FoilPrice"),
        frontArt=raw.get("FrontArt"),
        id=make_card_id(raw.get("Set"), raw.get("Number")),
    )


def normalize_response(payload: Any) -> list[CardRecord]:
    """Normalize the ``data`` array of a search payload.

    A payload without a ``data`` list is an empty result, not an error.
    """
    if not isinstance(payload, Mapping):
        return []

    data = payload.get("data")
    if not isinstance(data, (list, tuple)):
        return []

    return [normalize_card(raw) for raw in data]
