"""Seat and round wind identities."""

from enum import IntEnum
from typing import Optional

NUM_SEATS = 4


class Seat(IntEnum):
    EAST = 0    # 东风家
    SOUTH = 1   # 南风家
    WEST = 2    # 西风家
    NORTH = 3   # 北风家

    @property
    def default_name(self) -> str:
        """Positional label used when a seat has no nickname."""
        from scoreboard.ui.i18n import t
        return t(f'seat.{self.name.lower()}')

    def next(self) -> "Seat":
        return Seat((self.value + 1) % NUM_SEATS)


class Wind(IntEnum):
    EAST = 0    # 东场
    SOUTH = 1   # 南场

    @property
    def display_name(self) -> str:
        from scoreboard.ui.i18n import t
        return t(f'wind.{self.name.lower()}')


def to_seat(value) -> Optional[Seat]:
    """Seat for a selection, or None when nothing valid was chosen.

    Only integers 0-3 (or Seat members) select a seat; out-of-range numbers,
    strings and bools are treated as no selection.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not 0 <= value < NUM_SEATS:
        return None
    return Seat(value)


def default_names():
    return tuple(seat.default_name for seat in Seat)
