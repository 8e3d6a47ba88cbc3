from textual.message import Message

from swu_cards.usecases.card_list import CardListState


class FilterSubmitted(Message):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__()


class SortSelected(Message):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__()


class CardListStateChanged(Message):
    def __init__(self, state: CardListState) -> None:
        self.state = state
        super().__init__()
