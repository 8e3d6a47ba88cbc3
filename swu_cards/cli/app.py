import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Input

from swu_cards.cli.screens import CardListScreen
from swu_cards.cli.ui.messages import CardListStateChanged, FilterSubmitted, SortSelected
from swu_cards.cli.ui.mode_state import DEFAULT_HINTS, ModeState, mode_state_for
from swu_cards.cli.widgets import StatusBar, TitleBar
from swu_cards.services.swu_api import search_cards
from swu_cards.usecases.card_list import CardListController, CardListState
from swu_cards.usecases.search_cards import SearchFunction
from swu_cards.utils import DEFAULT_SORT_KEY, DISCARD_STALE_RESPONSES


LOG = logging.getLogger(__name__)


CSS_FILE = Path(__file__).parent / "app.tcss"


class RootScreen(Screen):
    can_focus = True
    AUTO_FOCUS = "#card-table"
    mode_state = reactive(ModeState(mode="IDLE", breadcrumb="Cards", hints=DEFAULT_HINTS))

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("/", "focus_filter", "Filter"),
        ("n", "sort('name')", "Sort by name"),
        ("s", "sort('set')", "Sort by set"),
        ("c", "sort('cost')", "Sort by cost"),
        ("p", "sort('power')", "Sort by power"),
        Binding("escape", "blur_filter", "Blur", priority=True),
    ]

    def __init__(self, controller: CardListController, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.controller = controller
        self.controller.subscribe(self._on_controller_state)

    def compose(self) -> ComposeResult:
        with Vertical(id="app-root"):
            yield TitleBar()
            with Container(id="content"):
                yield CardListScreen(
                    filter_value=self.controller.filter_value,
                    id="card-list-screen",
                    classes="screen",
                )
            yield StatusBar()

    def on_mount(self) -> None:
        self.focus()
        self._sync_status()
        self.run_worker(self.controller.run(), exclusive=True)
        self.controller.start()

    def watch_mode_state(self, state: ModeState) -> None:
        self._sync_status()

    def _sync_status(self) -> None:
        self.query_one(StatusBar).update_from_state(self.mode_state)

    def _on_controller_state(self, state: CardListState) -> None:
        self.post_message(CardListStateChanged(state))

    def on_card_list_state_changed(self, message: CardListStateChanged) -> None:
        state = message.state
        self.query_one("#card-list-screen", CardListScreen).render_state(state)
        self.mode_state = mode_state_for(
            state, self.controller.filter_value, self.controller.sort_key
        )

        if state.status == "error":
            self.notify(state.message or "", severity="error", title="Error")

    def on_filter_submitted(self, message: FilterSubmitted) -> None:
        LOG.debug("Filter submitted: %r", message.value)
        self.controller.set_filter(message.value)
        # An unchanged filter publishes no new state, so leave INSERT mode here.
        self.mode_state = mode_state_for(
            self.controller.state, message.value, self.controller.sort_key
        )

    def on_sort_selected(self, message: SortSelected) -> None:
        self.action_sort(message.key)

    def action_sort(self, key: str) -> None:
        self.controller.request_sort(key)

    def action_focus_filter(self) -> None:
        self.query_one("#filter-input", Input).focus()
        self.mode_state = ModeState(
            mode="INSERT",
            breadcrumb=self.mode_state.breadcrumb,
            hints="Enter: search  Esc: back",
        )

    def action_blur_filter(self) -> None:
        filter_input = self.query_one("#filter-input", Input)

        if self.app.focused is not filter_input:
            return

        filter_input.blur()
        self.mode_state = mode_state_for(
            self.controller.state,
            self.controller.filter_value,
            self.controller.sort_key,
        )

    def action_quit(self) -> None:
        self.app.exit()


class CardListApp(App):
    CSS_PATH = str(CSS_FILE)
    TITLE = "Star Wars: Unlimited Cards"

    def __init__(
        self,
        filter_value: str = "",
        sort_key: str = DEFAULT_SORT_KEY,
        search: SearchFunction = search_cards,
        discard_stale: bool = DISCARD_STALE_RESPONSES,
    ) -> None:
        super().__init__()
        self.controller = CardListController(
            search,
            filter_value=filter_value,
            sort_key=sort_key,
            discard_stale=discard_stale,
        )

    async def on_mount(self) -> None:
        await self.push_screen(RootScreen(self.controller))
