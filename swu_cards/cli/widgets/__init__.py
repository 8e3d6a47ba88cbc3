from swu_cards.cli.widgets.card_table import CardTable
from swu_cards.cli.widgets.filter_input import FilterInput
from swu_cards.cli.widgets.status_bar import StatusBar
from swu_cards.cli.widgets.title_bar import TitleBar

__all__ = ["CardTable", "FilterInput", "StatusBar", "TitleBar"]
