"""Card search filter box."""

from textual.widgets import Input

KEYS_NOT_CONSUMED = frozenset({"escape"})


class FilterInput(Input):
    """Text passed as the swu-db query; Enter submits it, escape goes back to the list."""

    def check_consume_key(self, key: str, character: str | None) -> bool:
        if key in KEYS_NOT_CONSUMED:
            return False
        return character is not None and character.isprintable()
