"""User input handling for the terminal UI."""

from typing import List, Optional, Tuple

from rich.console import Console

from scoreboard.core.match_state import MatchState
from scoreboard.core.seat import NUM_SEATS, Seat, Wind
from scoreboard.engine.round_state import round_info
from scoreboard.ui.i18n import t


def show_seats(console: Console, state: MatchState):
    """List seats with their numbers, as used by every seat prompt."""
    parts = [f"{seat.value + 1}. {state.name_of(seat)}" for seat in Seat]
    console.print("  " + "   ".join(parts))


def ask_int(console: Console, prompt: str, low: int, high: int,
            default: Optional[int] = None) -> int:
    """Ask until an integer in [low, high] is entered. Empty input takes `default`."""
    while True:
        raw = console.input(f"  > {prompt} ").strip()
        if not raw and default is not None:
            return default
        try:
            value = int(raw)
            if low <= value <= high:
                return value
        except ValueError:
            pass
        console.print(f"  [red]{t('prompt.invalid_input')}[/red]")


def ask_seat(console: Console, state: MatchState, prompt_key: str,
             default: Optional[Seat] = None) -> Seat:
    show_seats(console, state)
    default_number = default.value + 1 if default is not None else None
    number = ask_int(console, t(prompt_key), 1, NUM_SEATS, default_number)
    return Seat(number - 1)


def ask_text(console: Console, prompt_key: str, default: str = "") -> str:
    """Free text; han and fu are validated by the settlement engine, not here."""
    hint = f" [{default}]" if default else ""
    raw = console.input(f"  > {t(prompt_key)}{hint} ").strip()
    return raw or default


def ask_flags(console: Console, state: MatchState, prompt_key: str) -> List[bool]:
    """Ask for a set of seats, e.g. '1 3'. Empty input means none."""
    show_seats(console, state)
    while True:
        raw = console.input(f"  > {t(prompt_key)} ").replace(",", " ").split()
        flags = [False] * NUM_SEATS
        try:
            for token in raw:
                number = int(token)
                if not 1 <= number <= NUM_SEATS:
                    raise ValueError(token)
                flags[number - 1] = True
            return flags
        except ValueError:
            console.print(f"  [red]{t('prompt.invalid_input')}[/red]")


def ask_confirm(console: Console, prompt_key: str = 'prompt.confirm') -> bool:
    raw = console.input(f"  > {t(prompt_key)} ").strip().lower()
    return raw in ("y", "yes", "是", "はい")


def ask_round_edit(console: Console, state: MatchState) -> Tuple[Wind, int, int, Seat]:
    """Wind, hand number, honba and dealer, defaulting to the current values."""
    wind, number, _ = round_info(state.round_index, state.honba)
    console.print(f"  1. {Wind.EAST.display_name}   2. {Wind.SOUTH.display_name}")
    wind = Wind(ask_int(console, t('prompt.wind'), 1, 2, wind.value + 1) - 1)
    number = ask_int(console, t('prompt.hand_number'), 1, 4, number)
    honba = ask_int(console, t('prompt.honba'), 0, 99, state.honba)
    dealer = ask_seat(console, state, 'prompt.dealer', state.dealer)
    return wind, number, honba, dealer


def ask_names(console: Console, state: MatchState) -> List[str]:
    """New nickname per seat; empty input keeps the current one, '-' restores the default."""
    console.print(f"  [dim]{t('prompt.name_hint')}[/dim]")
    names = []
    for seat in Seat:
        current = state.name_of(seat)
        raw = console.input(f"  > {t('prompt.name', seat=seat.default_name)} [{current}] ").strip()
        if raw == "-":
            names.append("")
        else:
            names.append(raw or current)
    return names
