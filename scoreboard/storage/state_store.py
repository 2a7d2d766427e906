"""JSON persistence for the scoreboard.

One document per storage key holds the full MatchState plus the pending
undo/redo pair. Loading never fails: anything malformed is replaced by a
default, field by field.
"""

import contextlib
import json
import logging
import math
import os
import tempfile
from numbers import Real
from pathlib import Path
from typing import Any, Optional, Tuple

from scoreboard.core.match_state import (
    HistoryEntry, MatchState, SettlementKind, capture_snapshot,
)
from scoreboard.core.seat import NUM_SEATS, Seat
from scoreboard.engine.event import EventType
from scoreboard.engine.round_state import NUM_ROUNDS
from scoreboard.engine.scoreboard import Scoreboard, sanitize_names
from scoreboard.engine.undo import (
    Committed, NoPendingTransition, PendingTransition, SettlementMeta, UndoController, Undone,
)

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


# --- Serialization ---

def entry_to_dict(entry: HistoryEntry) -> dict:
    return {
        "id": entry.entry_id,
        "type": entry.kind.value,
        "round_label": entry.round_label,
        "dealer_label": entry.dealer_name,
        "riichi_count": entry.riichi_count,
        "description": entry.description,
        "timestamp": entry.timestamp,
        "player_names": list(entry.player_names),
        "riichi_players": list(entry.riichi_players),
        "deltas": list(entry.deltas),
    }


def state_to_dict(state: MatchState) -> dict:
    snapshot = capture_snapshot(state)
    return {
        "points": list(snapshot.points),
        "pool": snapshot.pool,
        "honba": snapshot.honba,
        "round_index": snapshot.round_index,
        "dealer": int(snapshot.dealer),
        "names": list(snapshot.names),
        "history": [entry_to_dict(e) for e in snapshot.history],
    }


def meta_to_dict(meta: SettlementMeta) -> dict:
    return {"type": meta.kind.value, "summary": meta.summary, "timestamp": meta.timestamp}


def document_from(scoreboard: Scoreboard) -> dict:
    """The persisted document: live state plus the pending undo pair."""
    doc = state_to_dict(scoreboard.state)
    pending = scoreboard.undo_controller.pending
    if isinstance(pending, (Committed, Undone)):
        doc["last_settlement_before"] = state_to_dict(pending.before)
        doc["last_settlement_after"] = state_to_dict(pending.after)
        doc["last_settlement_meta"] = meta_to_dict(pending.meta)
        doc["is_in_undo"] = isinstance(pending, Undone)
    else:
        doc["last_settlement_before"] = None
        doc["last_settlement_after"] = None
        doc["last_settlement_meta"] = None
        doc["is_in_undo"] = False
    return doc


# --- Parsing with recovery ---

def entry_from_dict(raw: Any) -> Optional[HistoryEntry]:
    """Parse one history entry; None if it is not usable."""
    if not isinstance(raw, dict):
        return None
    try:
        kind = SettlementKind(raw.get("type"))
    except ValueError:
        return None

    def _strings(value) -> Tuple[str, ...]:
        if not isinstance(value, list):
            return ()
        return tuple(str(v) for v in value)

    deltas = raw.get("deltas")
    if isinstance(deltas, list) and len(deltas) == NUM_SEATS and all(_is_number(d) for d in deltas):
        deltas = tuple(int(d) for d in deltas)
    else:
        deltas = ()

    riichi_count = raw.get("riichi_count")
    return HistoryEntry(
        entry_id=str(raw.get("id", "")),
        kind=kind,
        round_label=str(raw.get("round_label", "")),
        dealer_name=str(raw.get("dealer_label", "")),
        riichi_count=int(riichi_count) if _is_number(riichi_count) else 0,
        description=str(raw.get("description", "")),
        timestamp=str(raw.get("timestamp", "")),
        player_names=_strings(raw.get("player_names")),
        riichi_players=_strings(raw.get("riichi_players")),
        deltas=deltas,
    )


def state_from_dict(raw: Any) -> Optional[MatchState]:
    """Parse a MatchState; None when the required numeric fields are missing."""
    if not isinstance(raw, dict):
        return None
    points = raw.get("points")
    if not (isinstance(points, list) and len(points) == NUM_SEATS
            and all(_is_number(p) for p in points)):
        return None
    if not all(_is_number(raw.get(key)) for key in ("honba", "round_index", "dealer")):
        return None

    history = raw.get("history")
    entries = []
    if isinstance(history, list):
        for item in history:
            entry = entry_from_dict(item)
            if entry is None:
                logger.warning("Dropping malformed history entry: %r", item)
                continue
            entries.append(entry)

    pool = raw.get("pool")
    return MatchState(
        points=tuple(int(p) for p in points),
        pool=int(pool) if _is_number(pool) else 0,
        honba=max(0, int(raw["honba"])),
        round_index=int(raw["round_index"]) % NUM_ROUNDS,
        dealer=Seat(int(raw["dealer"]) % NUM_SEATS),
        names=sanitize_names(raw.get("names")),
        history=tuple(entries),
    )


def meta_from_dict(raw: Any) -> Optional[SettlementMeta]:
    if not isinstance(raw, dict):
        return None
    try:
        kind = SettlementKind(raw.get("type"))
    except ValueError:
        return None
    return SettlementMeta(kind, str(raw.get("summary", "")), str(raw.get("timestamp", "")))


def pending_from_dict(raw: dict) -> PendingTransition:
    before = state_from_dict(raw.get("last_settlement_before"))
    after = state_from_dict(raw.get("last_settlement_after"))
    meta = meta_from_dict(raw.get("last_settlement_meta"))
    if before is None or after is None or meta is None:
        return NoPendingTransition()
    if raw.get("is_in_undo") is True:
        return Undone(before, after, meta)
    return Committed(before, after, meta)


# --- File store ---

class StateStore:
    """Keeps the scoreboard document at <state_dir>/<key>.json."""

    def __init__(self, state_dir: str, key: str):
        self._dir = Path(state_dir)
        self.key = key

    @property
    def path(self) -> Path:
        return self._dir / f"{self.key}.json"

    def save(self, scoreboard: Scoreboard) -> Path:
        """Write the document atomically via temp-file-then-rename."""
        self._dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self._dir), suffix=".tmp", prefix=".state_")
        fd_owned = True
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                fd_owned = False  # os.fdopen took ownership; it will close fd
                json.dump(document_from(scoreboard), f, ensure_ascii=False, indent=2)
            Path(tmp_path).replace(self.path)
        except BaseException:
            if fd_owned:
                with contextlib.suppress(OSError):
                    os.close(fd)
            with contextlib.suppress(OSError):
                Path(tmp_path).unlink()
            raise
        logger.debug("Saved scoreboard state to %s", self.path)
        return self.path

    def load_into(self, scoreboard: Scoreboard) -> bool:
        """Restore a saved document into `scoreboard`.

        Returns False (leaving the scoreboard untouched) when there is no
        usable document.
        """
        if not self.path.exists():
            return False
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to load scoreboard state from %s: %s", self.path, e)
            return False

        state = state_from_dict(raw)
        if state is None:
            logger.warning("Ignoring saved state at %s: missing points or round fields", self.path)
            return False

        if state.total_with_pool != scoreboard.config.total_points:
            logger.warning("Saved state totals %d, expected %d",
                           state.total_with_pool, scoreboard.config.total_points)

        scoreboard.state = state
        scoreboard.undo_controller = UndoController(pending_from_dict(raw))
        logger.info("Loaded scoreboard state from %s", self.path)
        return True

    def subscribe(self, scoreboard: Scoreboard):
        """Save after every change the scoreboard reports."""
        scoreboard.event_bus.subscribe(
            EventType.STATE_CHANGED, lambda event: self.save(event.data["scoreboard"])
        )
