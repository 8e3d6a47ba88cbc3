import argparse
import asyncio
import logging

from httpx import HTTPError
from rich.logging import RichHandler
from textual.logging import TextualHandler

from swu_cards.cli import CardListApp, console, display_card_table
from swu_cards.models.cards import SORT_KEYS
from swu_cards.usecases.search_cards import load_cards
from swu_cards.utils import DEFAULT_SORT_KEY, DISCARD_STALE_RESPONSES, LOG_LEVEL


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Browse Star Wars: Unlimited cards from swu-db.com"
    )
    parser.add_argument("--filter", default="", help="search filter passed to swu-db")
    parser.add_argument(
        "--sort", default=DEFAULT_SORT_KEY, choices=SORT_KEYS, help="field to sort by"
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="print the sorted list once instead of starting the interactive app",
    )
    parser.add_argument(
        "--keep-stale",
        action="store_true",
        default=not DISCARD_STALE_RESPONSES,
        help="let late responses from older searches replace newer ones",
    )
    return parser.parse_args(argv)


def configure_logging(plain: bool) -> None:
    handler = RichHandler(console=console) if plain else TextualHandler()
    logging.basicConfig(level=LOG_LEVEL, format="%(message)s", handlers=[handler])


async def print_cards(filter_value: str, sort_key: str) -> None:
    console.print("[bold cyan]Star Wars: Unlimited Card List[/bold cyan]")
    console.print("=" * 60)

    try:
        cards = await load_cards(filter_value, sort_key)
    except (HTTPError, ValueError) as error:
        console.print(f"[red]Error: {error}[/red]")
        return

    display_card_table(cards, sort_key)
    console.print("\n[bold green]Done![/bold green]")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.plain)

    if args.plain:
        asyncio.run(print_cards(args.filter, args.sort))
        return

    CardListApp(
        filter_value=args.filter,
        sort_key=args.sort,
        discard_stale=not args.keep_stale,
    ).run()


if __name__ == "__main__":
    main()
