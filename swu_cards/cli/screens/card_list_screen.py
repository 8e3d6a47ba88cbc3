from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Input, Static

from swu_cards.cli.ui.messages import FilterSubmitted, SortSelected
from swu_cards.cli.widgets.card_table import CardTable
from swu_cards.cli.widgets.filter_input import FilterInput
from swu_cards.usecases.card_list import CardListState


SORT_BUTTONS = (
    ("Name", "name"),
    ("Set", "set"),
    ("Cost", "cost"),
    ("Power", "power"),
)

LOADING_MESSAGE = "Loading cards..."
ERROR_MESSAGE = "Failed to load cards."


class CardListScreen(Container):
    def __init__(self, *args, filter_value: str = "", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._initial_filter = filter_value

    def compose(self) -> ComposeResult:
        with Container(classes="panel", id="card-list-main"):
            yield Static("Cards", classes="panel-title")
            yield FilterInput(
                value=self._initial_filter,
                placeholder="Vader",
                id="filter-input",
            )
            yield Static("Press Enter to search, / to edit filter", classes="muted")
            with Horizontal(id="sort-buttons"):
                for label, key in SORT_BUTTONS:
                    yield Button(
                        f"Sort by {label}", id=f"sort-{key}", classes="sort-button"
                    )
            yield Static("", id="card-list-message")
            yield CardTable(id="card-table")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "filter-input":
            return

        self.post_message(FilterSubmitted(event.value.strip()))
        event.input.blur()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""

        if not button_id.startswith("sort-"):
            return

        self.post_message(SortSelected(button_id.removeprefix("sort-")))
        event.stop()

    def render_state(self, state: CardListState) -> None:
        message = self.query_one("#card-list-message", Static)
        table = self.query_one("#card-table", CardTable)

        if state.status == "loading":
            message.update(LOADING_MESSAGE)
            message.set_classes("message")
            table.add_class("is-hidden")
        elif state.status == "error":
            message.update(f"{ERROR_MESSAGE} {state.message}")
            message.set_classes("error")
            table.add_class("is-hidden")
        elif state.status == "ready":
            message.update("")
            message.set_classes("message")
            table.remove_class("is-hidden")
            table.show_cards(state.cards)
