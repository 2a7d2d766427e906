"""Match management - the one writer of MatchState."""

import logging
import os
from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from scoreboard.core.match_state import (
    HistoryEntry, MatchState, STARTING_POINTS, initial_state,
)
from scoreboard.core.seat import NUM_SEATS, Seat, Wind
from scoreboard.engine.event import EventBus, EventType, GameEvent
from scoreboard.engine.history import build_entry, summarize
from scoreboard.engine.round_state import apply_settlement, edit_round, round_label
from scoreboard.engine.undo import SettlementMeta, UndoController
from scoreboard.rules.settlement import (
    SettlementPreview, compute_draw, compute_ron, compute_tsumo,
    preview_draw, preview_ron, preview_tsumo,
)

logger = logging.getLogger(__name__)

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
STORAGE_KEY = "riichi-scoreboard-state-v1"


class MatchConfig:
    """Match configuration."""

    def __init__(
        self,
        starting_points: int = STARTING_POINTS,
        uma: Sequence[int] = (35, 15, -5, -45),  # Placement bonus, 1st to 4th
        storage_key: str = STORAGE_KEY,
        state_dir: Optional[str] = None,
        log_dir: Optional[str] = None,
        language: str = "zh",
    ):
        self.starting_points = starting_points
        self.uma = tuple(uma)
        self.storage_key = storage_key
        self.state_dir = state_dir or os.path.join(ROOT_DIR, "data")
        self.log_dir = log_dir or os.path.join(ROOT_DIR, "logs")
        self.language = language

        if len(self.uma) != NUM_SEATS:
            raise ValueError(f"uma needs {NUM_SEATS} values, got {len(self.uma)}")

    @property
    def total_points(self) -> int:
        """Points on the table (stacks plus pool) for the whole match."""
        return self.starting_points * NUM_SEATS


class Scoreboard:
    """Tracks one match: applies settlements, edits, resets and undo/redo.

    `state` is only ever replaced as a whole, so a reader never sees points
    from one hand next to a dealer from another.
    """

    def __init__(self, config: Optional[MatchConfig] = None,
                 event_bus: Optional[EventBus] = None,
                 clock: Optional[Callable[[], datetime]] = None,
                 state: Optional[MatchState] = None,
                 undo: Optional[UndoController] = None):
        self.config = config or MatchConfig()
        self.event_bus = event_bus or EventBus()
        self.clock = clock or datetime.now
        self.state = state or initial_state(self.config.starting_points)
        self.undo_controller = undo or UndoController()
        self.session_start = self.clock()

    # --- Read-only views ---

    @property
    def round_label(self) -> str:
        return round_label(self.state)

    @property
    def total_with_pool(self) -> int:
        return self.state.total_with_pool

    @property
    def is_balanced(self) -> bool:
        return self.state.total_with_pool == self.config.total_points

    @property
    def can_undo(self) -> bool:
        return self.undo_controller.can_undo

    @property
    def can_redo(self) -> bool:
        return self.undo_controller.can_redo

    @property
    def last_settlement(self) -> Optional[SettlementMeta]:
        return self.undo_controller.meta

    # --- Previews (never mutate) ---

    def preview_tsumo(self, winner, han, fu, riichi) -> Optional[SettlementPreview]:
        return preview_tsumo(self.state, winner, han, fu, riichi)

    def preview_ron(self, winner, loser, han, fu, riichi) -> Optional[SettlementPreview]:
        return preview_ron(self.state, winner, loser, han, fu, riichi)

    def preview_draw(self, tenpai, riichi) -> Optional[SettlementPreview]:
        return preview_draw(self.state, tenpai, riichi)

    # --- Settlements ---

    def confirm_tsumo(self, winner, han, fu, riichi) -> HistoryEntry:
        """Apply a tsumo. Raises SettlementError before touching any state."""
        return self._commit(compute_tsumo(self.state, winner, han, fu, riichi))

    def confirm_ron(self, winner, loser, han, fu, riichi) -> HistoryEntry:
        """Apply a ron. Raises SettlementError before touching any state."""
        return self._commit(compute_ron(self.state, winner, loser, han, fu, riichi))

    def confirm_draw(self, tenpai, riichi) -> HistoryEntry:
        return self._commit(compute_draw(self.state, tenpai, riichi))

    def _commit(self, preview: SettlementPreview) -> HistoryEntry:
        before = self.state
        entry = build_entry(before, preview, self.clock)
        after = apply_settlement(before, preview, entry)
        meta = SettlementMeta(
            kind=preview.kind,
            summary=summarize(before, preview, entry.round_label),
            timestamp=entry.timestamp,
        )
        self.undo_controller.record(before, after, meta)
        self.state = after

        logger.info("%s settled at %s: deltas=%s pool %d->%d",
                    preview.kind.value, entry.round_label, list(preview.deltas),
                    preview.pool_before, preview.pool_after)
        if not self.is_balanced:
            logger.error("Point total drifted to %d (expected %d)",
                         self.total_with_pool, self.config.total_points)

        self.event_bus.emit(GameEvent(EventType.SETTLEMENT, {
            "entry": entry,
            "preview": preview,
            "state": after,
        }))
        self._state_changed()
        return entry

    # --- Undo / redo ---

    def undo(self) -> MatchState:
        """Roll back the last settlement; a no-op when nothing is pending."""
        if not self.can_undo:
            return self.state
        self.state = self.undo_controller.undo(self.state)
        logger.info("Undid %s", self.last_settlement.summary)
        self.event_bus.emit(GameEvent(EventType.UNDO, {
            "meta": self.last_settlement,
            "state": self.state,
        }))
        self._state_changed()
        return self.state

    def redo(self) -> MatchState:
        """Re-apply an undone settlement; a no-op unless the last action was undo."""
        if not self.can_redo:
            return self.state
        self.state = self.undo_controller.redo(self.state)
        logger.info("Redid %s", self.last_settlement.summary)
        self.event_bus.emit(GameEvent(EventType.REDO, {
            "meta": self.last_settlement,
            "state": self.state,
        }))
        self._state_changed()
        return self.state

    # --- Manual edits ---

    def edit_round(self, wind: Wind, number: int, honba: int, dealer: Seat) -> MatchState:
        """Correct the round without moving points."""
        self.state = edit_round(self.state, wind, number, honba, dealer)
        logger.info("Round edited to %s, dealer seat %d",
                    self.round_label, self.state.dealer)
        self.event_bus.emit(GameEvent(EventType.ROUND_EDIT, {"state": self.state}))
        self._state_changed()
        return self.state

    def edit_names(self, names: Sequence[str]) -> MatchState:
        """Rename the seats. Blank names fall back to the positional label."""
        self.state = replace(self.state, names=sanitize_names(names, strict=True))
        logger.info("Names set to %s", list(self.state.names))
        self.event_bus.emit(GameEvent(EventType.NAMES_EDIT, {"names": self.state.names}))
        self._state_changed()
        return self.state

    def reset(self, reset_names: bool = False) -> MatchState:
        """Start a new match. Nicknames are kept unless asked otherwise."""
        names = None if reset_names else self.state.names
        self.state = initial_state(self.config.starting_points, names)
        self.undo_controller.clear()
        self.session_start = self.clock()
        logger.info("Match reset (names %s)", "reset" if reset_names else "kept")
        self.event_bus.emit(GameEvent(EventType.RESET, {"reset_names": reset_names}))
        self._state_changed()
        return self.state

    def _state_changed(self):
        self.event_bus.emit(GameEvent(EventType.STATE_CHANGED, {"scoreboard": self}))


def sanitize_names(names, strict: bool = False) -> tuple:
    """Trim each name; blanks and non-strings become the default label.

    With `strict`, anything other than exactly four names raises ValueError;
    otherwise the whole list falls back to the defaults.
    """
    if not isinstance(names, (list, tuple)) or len(names) != NUM_SEATS:
        if strict:
            raise ValueError(f"expected {NUM_SEATS} names, got {names!r}")
        return tuple(seat.default_name for seat in Seat)

    cleaned: List[str] = []
    for seat, name in zip(Seat, names):
        if isinstance(name, str) and name.strip():
            cleaned.append(name.strip())
        else:
            cleaned.append(seat.default_name)
    return tuple(cleaned)
