from swu_cards.cli.ui.messages import (
    CardListStateChanged,
    FilterSubmitted,
    SortSelected,
)
from swu_cards.cli.ui.mode_state import DEFAULT_HINTS, ModeState, mode_state_for

__all__ = [
    "CardListStateChanged",
    "DEFAULT_HINTS",
    "FilterSubmitted",
    "ModeState",
    "SortSelected",
    "mode_state_for",
]
