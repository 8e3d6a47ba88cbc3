import math
from typing import TYPE_CHECKING, Any

from swu_cards.models.cards import SORT_KEYS, is_not_a_number


if TYPE_CHECKING:
    from swu_cards.models.cards import CardRecord


_PRESENT, _NOT_A_NUMBER, _ABSENT = 0, 1, 2
_NUMBER, _TEXT, _SEQUENCE, _OTHER = 0, 1, 2, 3


_EXPONENT_FROM = 1e21


def to_text(value: Any) -> str:
    """Text form of a raw API value, following JavaScript's ``String()`` rules.

    Sequences join their items with commas and ``None`` reads as empty. Floats
    drop an integral fraction below 1e21 and switch to exponent form from there.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < _EXPONENT_FROM:
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(item) for item in value)
    return str(value)


def sort_value(value: Any) -> tuple:
    """Map a field value onto a key that is comparable with any other field value.

    Present values come first, then the not-a-number sentinel, then absent
    values. Present values of different kinds order as numbers, text,
    sequences, then anything else by its text form.
    """
    if value is None:
        return (_ABSENT, 0, 0)

    if is_not_a_number(value):
        return (_NOT_A_NUMBER, 0, 0)

    if isinstance(value, (int, float)):
        return (_PRESENT, _NUMBER, value)

    if isinstance(value, str):
        return (_PRESENT, _TEXT, value)

    if isinstance(value, (list, tuple)):
        return (_PRESENT, _SEQUENCE, tuple(to_text(item) for item in value))

    return (_PRESENT, _OTHER, to_text(value))


def sort_cards(cards: list["CardRecord"], key: str) -> list["CardRecord"]:
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key!r}")

    return sorted(cards, key=lambda card: sort_value(getattr(card, key)))


def format_field(value: Any) -> str:
    if value is None:
        return ""
    if is_not_a_number(value):
        return "-"
    if isinstance(value, (list, tuple)):
        return ", ".join(to_text(item) for item in value)
    return to_text(value)
