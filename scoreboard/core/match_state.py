"""Match state aggregate and history records."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

from .seat import Seat, default_names

STARTING_POINTS = 25000
STICK_VALUE = 1000  # One riichi stick


class SettlementKind(Enum):
    TSUMO = "tsumo"   # 自摸
    RON = "ron"       # 荣和
    DRAW = "draw"     # 流局

    @property
    def display_name(self) -> str:
        from scoreboard.ui.i18n import t
        return t(f'kind.{self.value}')


@dataclass(frozen=True)
class HistoryEntry:
    """One settled hand.

    Names and deltas are copied when the entry is built, so renaming a seat
    later does not change how old hands read.

    Attributes:
        entry_id: Short unique id
        kind: Tsumo, ron or exhaustive draw
        round_label: Round label at settlement time (e.g. '东1局0本场')
        dealer_name: Dealer's name at settlement time
        riichi_count: Number of riichi declarers this hand
        description: Human-readable summary of the payments
        timestamp: Local time of the settlement
        player_names: Names of the four seats at settlement time
        riichi_players: Names of this hand's riichi declarers
        deltas: Per-seat point changes
    """
    entry_id: str
    kind: SettlementKind
    round_label: str
    dealer_name: str
    riichi_count: int
    description: str
    timestamp: str
    player_names: Tuple[str, ...] = ()
    riichi_players: Tuple[str, ...] = ()
    deltas: Tuple[int, ...] = ()


@dataclass(frozen=True)
class MatchState:
    """Everything a settlement reads and writes.

    Instances are never mutated; every transition builds a new one.
    """
    points: Tuple[int, ...] = (STARTING_POINTS,) * 4
    pool: int = 0  # Riichi sticks on the table
    honba: int = 0
    round_index: int = 0  # 0-3: East 1-4, 4-7: South 1-4
    dealer: Seat = Seat.EAST
    names: Tuple[str, ...] = field(default_factory=default_names)
    history: Tuple[HistoryEntry, ...] = ()

    @property
    def total_with_pool(self) -> int:
        return sum(self.points) + self.pool * STICK_VALUE

    def name_of(self, seat: Seat) -> str:
        if 0 <= seat < len(self.names) and self.names[seat]:
            return self.names[seat]
        return Seat(seat).default_name

    @property
    def dealer_name(self) -> str:
        return self.name_of(self.dealer)


def initial_state(starting_points: int = STARTING_POINTS, names=None) -> MatchState:
    """Fresh match: equal stacks, East 1, seat 0 dealing."""
    return MatchState(
        points=(starting_points,) * 4,
        names=tuple(names) if names is not None else default_names(),
    )


def capture_snapshot(state: MatchState) -> MatchState:
    """Copy every field into fresh tuples.

    Both the undo capture and the persistence save path go through here so
    the two never disagree on what a snapshot holds.
    """
    return replace(
        state,
        points=tuple(int(p) for p in state.points),
        dealer=Seat(state.dealer),
        names=tuple(state.names),
        history=tuple(
            replace(
                entry,
                player_names=tuple(entry.player_names),
                riichi_players=tuple(entry.riichi_players),
                deltas=tuple(entry.deltas),
            )
            for entry in state.history
        ),
    )
