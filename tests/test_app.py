"""Tests for the interactive card list app."""

import asyncio

from swu_cards.cli.app import CardListApp, RootScreen
from swu_cards.cli.screens.card_list_screen import LOADING_MESSAGE
from swu_cards.cli.widgets import CardTable, StatusBar, TitleBar


PAYLOADS = {
    "": {
        "data": [
            {"Set": "SOR", "Number": "001", "Name": "Vader", "Cost": "5", "Power": "4"},
            {"Set": "SOR", "Number": "002", "Name": "Luke", "Cost": "3", "Power": "x"},
            {"Set": "SOR", "Number": "002", "Name": "Luke", "Cost": "3", "Power": "x"},
        ]
    },
    "Han": {"data": [{"Set": "SHD", "Number": "195", "Name": "Han Solo", "Cost": "6"}]},
}


async def fake_search(filter_value):
    result = PAYLOADS.get(filter_value)
    if result is None:
        raise RuntimeError("timeout")
    return result


async def _wait_for(pilot, condition, attempts=100):
    for _ in range(attempts):
        if condition():
            return
        await pilot.pause(0.01)
    raise AssertionError("condition not reached")


def _row_names(table: CardTable):
    return [table.get_row_at(index)[0] for index in range(table.row_count)]


async def test_app_loads_and_renders_cards():
    app = CardListApp(search=fake_search)

    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: app.controller.state.status == "ready")
        await pilot.pause()

        screen = app.screen
        assert isinstance(screen, RootScreen)
        table = screen.query_one("#card-table", CardTable)
        assert _row_names(table) == ["Luke", "Luke", "Vader"]
        assert not table.has_class("is-hidden")
        assert screen.mode_state.mode == "READY"


async def test_sort_button_reorders_and_refetches():
    calls = []

    async def search(filter_value):
        calls.append(filter_value)
        return await fake_search(filter_value)

    app = CardListApp(search=search)

    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: app.controller.state.status == "ready")

        await pilot.click("#sort-cost")
        await _wait_for(pilot, lambda: len(calls) == 2)
        await _wait_for(pilot, lambda: app.controller.state.status == "ready")
        await pilot.pause()

        table = app.screen.query_one("#card-table", CardTable)
        assert app.controller.sort_key == "cost"
        assert _row_names(table) == ["Luke", "Luke", "Vader"]
        assert table.get_row_at(0)[5] == "-"


async def test_sort_binding_changes_key():
    app = CardListApp(search=fake_search)

    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: app.controller.state.status == "ready")
        app.screen.query_one("#card-table", CardTable).focus()
        await pilot.press("p")
        await _wait_for(pilot, lambda: app.controller.sort_key == "power")
        await _wait_for(pilot, lambda: app.controller.state.status == "ready")
        await pilot.pause()

        table = app.screen.query_one("#card-table", CardTable)
        assert _row_names(table) == ["Vader", "Luke", "Luke"]


async def test_filter_submission_refetches():
    app = CardListApp(search=fake_search)

    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: app.controller.state.status == "ready")

        app.screen.query_one("#card-table", CardTable).focus()
        await pilot.press("/")
        await pilot.press(*"Han")
        await pilot.press("enter")
        await _wait_for(pilot, lambda: app.controller.filter_value == "Han")
        await _wait_for(pilot, lambda: app.controller.state.status == "ready")
        await pilot.pause()

        table = app.screen.query_one("#card-table", CardTable)
        assert _row_names(table) == ["Han Solo"]
        assert app.screen.mode_state.breadcrumb == "Filter: Han  Sort: name"


async def test_search_failure_shows_error():
    app = CardListApp(filter_value="Yoda", search=fake_search)

    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: app.controller.state.status == "error")
        await pilot.pause()

        screen = app.screen
        assert app.controller.state.message == "timeout"
        assert screen.query_one("#card-table", CardTable).has_class("is-hidden")
        assert screen.mode_state.mode == "ERROR"


async def test_loading_message_while_fetching():
    release = asyncio.Event()

    async def slow_search(filter_value):
        await release.wait()
        return PAYLOADS[""]

    app = CardListApp(search=slow_search)

    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: app.controller.state.status == "loading")
        await pilot.pause()

        screen = app.screen
        assert screen.mode_state.mode == "LOADING"
        assert screen.mode_state.hints == LOADING_MESSAGE
        assert screen.query_one("#card-table", CardTable).has_class("is-hidden")

        release.set()
        await _wait_for(pilot, lambda: app.controller.state.status == "ready")


async def test_layout_keeps_table_and_buttons_above_status_bar():
    app = CardListApp(search=fake_search)

    async with app.run_test(size=(80, 24)) as pilot:
        await _wait_for(pilot, lambda: app.controller.state.status == "ready")
        await pilot.pause()

        screen = app.screen
        content = screen.query_one("#content").region
        status_bar = screen.query_one(StatusBar).region
        title_bar = screen.query_one(TitleBar).region

        assert status_bar.height == 1
        assert title_bar.height == 1

        for selector in ("#card-table", "#sort-buttons", "#card-list-message"):
            region = screen.query_one(selector).region
            assert content.contains_region(region), selector
            assert not region.overlaps(status_bar), selector

        assert screen.query_one("#card-table").region.height >= 3

        button = screen.query_one("#sort-cost").region
        widget, _ = screen.get_widget_at(button.x + 1, button.y + 1)
        assert widget.id == "sort-cost"


async def test_submitting_unchanged_filter_leaves_insert_mode():
    calls = []

    async def search(filter_value):
        calls.append(filter_value)
        return await fake_search(filter_value)

    app = CardListApp(search=search)

    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: app.controller.state.status == "ready")

        app.screen.query_one("#card-table", CardTable).focus()
        await pilot.press("/")
        assert app.screen.mode_state.mode == "INSERT"

        await pilot.press("enter")
        await _wait_for(pilot, lambda: app.screen.mode_state.mode != "INSERT")
        await pilot.pause()

        assert app.screen.mode_state.mode == "READY"
        assert app.screen.mode_state.breadcrumb == "Filter: (all)  Sort: name"
        assert calls == [""]
