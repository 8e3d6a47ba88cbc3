from swu_cards.cli.app import CardListApp
from swu_cards.cli.console import console
from swu_cards.cli.output import display_card_table


__all__ = ["CardListApp", "console", "display_card_table"]
