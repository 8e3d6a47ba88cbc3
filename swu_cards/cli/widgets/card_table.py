from textual.widgets import DataTable

from swu_cards.models.cards import CardRecord
from swu_cards.utils import format_field


COLUMNS = (
    ("Name", 36),
    ("Id", 12),
    ("Type", 10),
    ("Aspects", 20),
    ("Cost", 5),
    ("Power", 5),
    ("HP", 5),
    ("Rarity", 10),
    ("Market", 10),
)

NO_RESULTS_KEY = "__no-results__"


class CardTable(DataTable):
    def on_mount(self) -> None:
        self.cursor_type = "row"
        self.zebra_stripes = False

        for label, width in COLUMNS:
            self.add_column(label, width=width)

    def show_cards(self, cards: tuple[CardRecord, ...] | list[CardRecord]) -> None:
        self.clear(columns=False)

        if not cards:
            self.add_row("No cards", *[""] * (len(COLUMNS) - 1), key=NO_RESULTS_KEY)
            return

        # Ids are not unique when the source repeats a (set, number) pair.
        used_row_keys: set[str] = set()

        for card in cards:
            row_key = card.id
            suffix = 1

            while row_key in used_row_keys:
                suffix += 1
                row_key = f"{card.id}#{suffix}"

            used_row_keys.add(row_key)

            self.add_row(
                format_field(card.name),
                card.id,
                format_field(card.type),
                format_field(card.aspects),
                format_field(card.cost),
                format_field(card.power),
                format_field(card.hp),
                format_field(card.rarity),
                format_field(card.marketprice),
                key=row_key,
            )

        self.move_cursor(row=0, column=0, scroll=True)
