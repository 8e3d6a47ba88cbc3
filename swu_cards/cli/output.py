from typing import TYPE_CHECKING

from rich.table import Table

from swu_cards.cli.console import console
from swu_cards.models.cards import is_not_a_number
from swu_cards.utils import format_field


if TYPE_CHECKING:
    from swu_cards.models.cards import CardRecord


def display_card_table(cards: list["CardRecord"], sort_key: str = "name") -> None:
    if not cards:
        console.print("[yellow]No cards found to display.[/yellow]")
        return

    table = Table(
        title="[bold cyan]Star Wars: Unlimited Cards[/bold cyan]",
        caption=f"sorted by {sort_key}",
        show_header=True,
        header_style="bold magenta",
        border_style="blue",
        title_style="bold cyan",
    )

    table.add_column("Name", style="cyan", no_wrap=False, width=36)
    table.add_column("Id", style="green", width=12)
    table.add_column("Type", style="white", width=10)
    table.add_column("Cost", justify="right", width=5)
    table.add_column("Power", justify="right", width=5)
    table.add_column("HP", justify="right", width=5)
    table.add_column("Rarity", style="blue", width=10)
    table.add_column("Market", style="bold yellow", justify="right", width=10)

    for card in cards:
        table.add_row(
            format_field(card.name),
            card.id,
            format_field(card.type),
            _number_cell(card.cost),
            _number_cell(card.power),
            _number_cell(card.hp),
            format_field(card.rarity),
            format_field(card.marketprice),
        )

    console.print()
    console.print(table)
    console.print(f"\n[green]Total cards: {len(cards)}[/green]")


def _number_cell(value: int | float) -> str:
    if is_not_a_number(value):
        return "[dim]-[/dim]"
    return format_field(value)
