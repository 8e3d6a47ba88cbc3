from swu_cards.cli.screens.card_list_screen import CardListScreen

__all__ = ["CardListScreen"]
