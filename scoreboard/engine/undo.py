"""Single-step undo / redo of the last settlement."""

from dataclasses import dataclass
from typing import Optional, Union

from scoreboard.core.match_state import MatchState, SettlementKind, capture_snapshot


@dataclass(frozen=True)
class SettlementMeta:
    """What the pending transition was, for display."""
    kind: SettlementKind
    summary: str
    timestamp: str


@dataclass(frozen=True)
class NoPendingTransition:
    pass


@dataclass(frozen=True)
class Committed:
    """The last settlement is applied; undo is available."""
    before: MatchState
    after: MatchState
    meta: SettlementMeta


@dataclass(frozen=True)
class Undone:
    """The last settlement was rolled back; redo is available."""
    before: MatchState
    after: MatchState
    meta: SettlementMeta


PendingTransition = Union[NoPendingTransition, Committed, Undone]


class UndoController:
    """Holds at most one (before, after) pair.

    Recording a new settlement replaces whatever was pending; there is no
    deeper stack.
    """

    def __init__(self, pending: Optional[PendingTransition] = None):
        self.pending: PendingTransition = pending or NoPendingTransition()

    @property
    def can_undo(self) -> bool:
        return isinstance(self.pending, Committed)

    @property
    def can_redo(self) -> bool:
        return isinstance(self.pending, Undone)

    @property
    def meta(self) -> Optional[SettlementMeta]:
        if isinstance(self.pending, NoPendingTransition):
            return None
        return self.pending.meta

    def record(self, before: MatchState, after: MatchState, meta: SettlementMeta):
        """Install a fresh pair after a confirmed settlement."""
        self.pending = Committed(capture_snapshot(before), capture_snapshot(after), meta)

    def undo(self, current: MatchState) -> MatchState:
        """Return the pre-settlement state, or `current` if there is nothing to undo."""
        if not isinstance(self.pending, Committed):
            return current
        pending = self.pending
        self.pending = Undone(pending.before, pending.after, pending.meta)
        return pending.before

    def redo(self, current: MatchState) -> MatchState:
        """Return the post-settlement state, or `current` if nothing was undone."""
        if not isinstance(self.pending, Undone):
            return current
        pending = self.pending
        self.pending = Committed(pending.before, pending.after, pending.meta)
        return pending.after

    def clear(self):
        self.pending = NoPendingTransition()
