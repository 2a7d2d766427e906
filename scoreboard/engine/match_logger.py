"""Match logger - records every settlement of a session to a JSON file."""

import json
import os
import uuid
from datetime import datetime
from typing import List, Optional

from scoreboard.core.match_state import HistoryEntry
from scoreboard.engine.event import EventBus, EventType, GameEvent
from scoreboard.engine.standings import Standing


class MatchLogger:
    """Records a session's settlements and corrections to JSON log files."""

    def __init__(self, log_dir: str, config_info: dict):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.log_dir = log_dir
        self.config_info = config_info

        self.actions: List[dict] = []

    def subscribe_events(self, event_bus: EventBus):
        """Subscribe to scoreboard events for automatic logging."""
        event_bus.subscribe(EventType.SETTLEMENT, self._on_settlement)
        event_bus.subscribe(EventType.UNDO, self._on_undo)
        event_bus.subscribe(EventType.REDO, self._on_redo)
        event_bus.subscribe(EventType.ROUND_EDIT, self._on_round_edit)
        event_bus.subscribe(EventType.NAMES_EDIT, self._on_names_edit)
        event_bus.subscribe(EventType.RESET, self._on_reset)

    def save(self, standings: Optional[List[Standing]] = None) -> str:
        """Save the session log to a JSON file and return its path."""
        log_data = {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "config": self.config_info,
            "actions": self.actions,
        }
        if standings is not None:
            log_data["final_standings"] = [
                {
                    "seat": int(s.seat),
                    "name": s.name,
                    "points": s.points,
                    "rank": s.rank,
                    "uma": s.uma,
                }
                for s in standings
            ]

        os.makedirs(self.log_dir, exist_ok=True)
        filename = f"match_{self.session_id}.json"
        filepath = os.path.join(self.log_dir, filename)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        return filepath

    # --- Event handlers ---

    def _log_action(self, action_type: str, **kwargs):
        entry = {"action": action_type}
        entry.update(kwargs)
        self.actions.append(entry)

    def _on_settlement(self, event: GameEvent):
        entry: HistoryEntry = event.data["entry"]
        state = event.data["state"]
        self._log_action(
            entry.kind.value,
            round=entry.round_label,
            dealer=entry.dealer_name,
            description=entry.description,
            riichi=list(entry.riichi_players),
            deltas=[
                {"seat": seat, "name": name, "delta": delta}
                for seat, (name, delta) in enumerate(zip(entry.player_names, entry.deltas))
            ],
            points=list(state.points),
            pool=state.pool,
            timestamp=entry.timestamp,
        )

    def _on_undo(self, event: GameEvent):
        self._log_action("undo", summary=event.data["meta"].summary)

    def _on_redo(self, event: GameEvent):
        self._log_action("redo", summary=event.data["meta"].summary)

    def _on_round_edit(self, event: GameEvent):
        state = event.data["state"]
        self._log_action("round_edit", round_index=state.round_index,
                         honba=state.honba, dealer=int(state.dealer))

    def _on_names_edit(self, event: GameEvent):
        self._log_action("names_edit", names=list(event.data["names"]))

    def _on_reset(self, event: GameEvent):
        self._log_action("reset", reset_names=event.data["reset_names"])
