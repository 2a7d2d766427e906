#!/usr/bin/env python3
"""Riichi Mahjong Scoreboard - Terminal CLI"""

import logging

from rich.console import Console

from scoreboard.engine.event import EventBus
from scoreboard.engine.match_logger import MatchLogger
from scoreboard.engine.scoreboard import MatchConfig, Scoreboard
from scoreboard.engine.standings import ranking_list
from scoreboard.rules.settlement import SettlementError
from scoreboard.shared.logging import setup_logging
from scoreboard.storage.state_store import StateStore
from scoreboard.ui.board_layout import render_preview
from scoreboard.ui.i18n import SUPPORTED_LANGUAGES, get_language, set_language, t
from scoreboard.ui.input_handler import (
    ask_confirm, ask_flags, ask_int, ask_names, ask_round_edit, ask_seat, ask_text,
)
from scoreboard.ui.renderer import Renderer

console = Console()
logger = logging.getLogger(__name__)

MENU_ITEMS = [
    (1, 'menu.tsumo'),
    (2, 'menu.ron'),
    (3, 'menu.draw'),
    (4, 'menu.undo'),
    (5, 'menu.redo'),
    (6, 'menu.history'),
    (7, 'menu.diff'),
    (8, 'menu.edit_round'),
    (9, 'menu.edit_names'),
    (10, 'menu.final'),
    (11, 'menu.reset'),
    (12, 'menu.language'),
    (0, 'menu.quit'),
]


def change_language():
    """Switch the display language; the current one is starred."""
    current = get_language()
    console.print(f"\n  {t('lang.select')}")
    for number, lang in enumerate(SUPPORTED_LANGUAGES, 1):
        marker = " *" if lang == current else ""
        console.print(f"    {number}. {t(f'lang.{lang}')}{marker}")
    console.print()

    choice = ask_int(console, f"1-{len(SUPPORTED_LANGUAGES)}:", 1, len(SUPPORTED_LANGUAGES))
    set_language(SUPPORTED_LANGUAGES[choice - 1])
    logger.info("Language switched from %s to %s", current, get_language())


def show_menu() -> int:
    """Show the action menu and return the choice."""
    console.print()
    for number, key in MENU_ITEMS:
        console.print(f"    {number:>2}. {t(key)}")
    console.print()

    while True:
        try:
            choice = int(console.input(f"  > {t('prompt.choose_action')} ").strip())
            if any(choice == number for number, _ in MENU_ITEMS):
                return choice
        except ValueError:
            pass
        console.print(f"  [red]{t('prompt.invalid_input')}[/red]")


def _confirm_settlement(board, preview, confirm):
    """Show the preview, ask, and apply. Rejected input never reaches the state."""
    render_preview(console, board.state, preview)
    if preview is None:
        return
    if not ask_confirm(console):
        console.print(f"  [dim]{t('msg.cancelled')}[/dim]")
        return
    try:
        confirm()
    except SettlementError as e:
        console.print(f"  [red]{t(e.key)}[/red]")


def handle_tsumo(board):
    state = board.state
    winner = ask_seat(console, state, 'prompt.winner', state.dealer)
    han = ask_text(console, 'prompt.han', "3")
    fu = ask_text(console, 'prompt.fu', "40")
    riichi = ask_flags(console, state, 'prompt.riichi')

    preview = board.preview_tsumo(winner, han, fu, riichi)
    if preview is None:
        console.print(f"  [red]{t('error.invalid_hand')}[/red]")
        return
    _confirm_settlement(board, preview, lambda: board.confirm_tsumo(winner, han, fu, riichi))


def handle_ron(board):
    state = board.state
    winner = ask_seat(console, state, 'prompt.winner')
    loser = ask_seat(console, state, 'prompt.loser')
    if winner == loser:
        console.print(f"  [red]{t('error.same_seat')}[/red]")
        return
    han = ask_text(console, 'prompt.han', "3")
    fu = ask_text(console, 'prompt.fu', "40")
    riichi = ask_flags(console, state, 'prompt.riichi')

    preview = board.preview_ron(winner, loser, han, fu, riichi)
    if preview is None:
        console.print(f"  [red]{t('error.invalid_hand')}[/red]")
        return
    _confirm_settlement(board, preview, lambda: board.confirm_ron(winner, loser, han, fu, riichi))


def handle_draw(board):
    state = board.state
    tenpai = ask_flags(console, state, 'prompt.tenpai')
    riichi = ask_flags(console, state, 'prompt.riichi')
    preview = board.preview_draw(tenpai, riichi)
    _confirm_settlement(board, preview, lambda: board.confirm_draw(tenpai, riichi))


def handle_undo(board):
    if not board.can_undo:
        console.print(f"  [dim]{t('undo.nothing')}[/dim]")
        return
    board.undo()


def handle_redo(board):
    if not board.can_redo:
        console.print(f"  [dim]{t('redo.nothing')}[/dim]")
        return
    board.redo()


def handle_edit_round(board):
    wind, number, honba, dealer = ask_round_edit(console, board.state)
    board.edit_round(wind, number, honba, dealer)


def handle_edit_names(board):
    board.edit_names(ask_names(console, board.state))


def handle_reset(board):
    if not ask_confirm(console, 'prompt.confirm_reset'):
        return
    reset_names = ask_confirm(console, 'prompt.reset_names')
    board.reset(reset_names=reset_names)


def main():
    """Main entry point."""
    config = MatchConfig()
    set_language(config.language)
    setup_logging(config.log_dir, console=console)

    event_bus = EventBus()
    board = Scoreboard(config, event_bus)
    renderer = Renderer(console, event_bus)

    store = StateStore(config.state_dir, config.storage_key)
    if store.load_into(board):
        console.print(f"  [dim]{t('msg.state_loaded')}[/dim]")
    store.subscribe(board)

    match_logger = MatchLogger(config.log_dir, {
        "starting_points": config.starting_points,
        "uma": list(config.uma),
    })
    match_logger.subscribe_events(event_bus)

    handlers = {
        1: lambda: handle_tsumo(board),
        2: lambda: handle_ron(board),
        3: lambda: handle_draw(board),
        4: lambda: handle_undo(board),
        5: lambda: handle_redo(board),
        6: lambda: renderer.show_history(board),
        7: lambda: renderer.show_diff_matrix(board),
        8: lambda: handle_edit_round(board),
        9: lambda: handle_edit_names(board),
        10: lambda: renderer.show_final_settlement(board),
        11: lambda: handle_reset(board),
        12: change_language,
    }

    try:
        while True:
            renderer.render_board(board)
            choice = show_menu()
            if choice == 0:
                break
            handlers[choice]()
    except (KeyboardInterrupt, EOFError):
        console.print()
    finally:
        store.save(board)
        log_path = match_logger.save(list(ranking_list(board.state, config.uma)))
        logger.info("Match log saved to %s", log_path)
        console.print(f"\n  [dim]{t('msg.log_saved', path=log_path)}[/dim]")
        console.print(f"  {t('msg.goodbye')}\n")


if __name__ == "__main__":
    main()
