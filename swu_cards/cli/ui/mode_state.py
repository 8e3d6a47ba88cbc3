from dataclasses import dataclass

from swu_cards.usecases.card_list import CardListState


DEFAULT_HINTS = "/: filter  n/s/c/p: sort  q: quit"


@dataclass(frozen=True)
class ModeState:
    mode: str
    breadcrumb: str
    hints: str


def mode_state_for(state: CardListState, filter_value: str, sort_key: str) -> ModeState:
    breadcrumb = f"Filter: {filter_value or '(all)'}  Sort: {sort_key}"

    if state.status == "loading":
        hints = "Loading cards..."
    elif state.status == "error":
        hints = "Failed to load cards"
    elif state.status == "ready":
        hints = f"{len(state.cards)} cards  {DEFAULT_HINTS}"
    else:
        hints = DEFAULT_HINTS

    return ModeState(mode=state.status.upper(), breadcrumb=breadcrumb, hints=hints)
