"""Rich rendering engine - ties together all UI components."""

from datetime import datetime

from rich.console import Console

from scoreboard.engine.event import EventBus, EventType, GameEvent
from scoreboard.engine.history import format_diff
from scoreboard.engine.scoreboard import Scoreboard
from scoreboard.engine.standings import diff_matrix, elapsed_minutes, final_settlement
from scoreboard.ui.board_layout import (
    render_header, render_scores, render_diff_matrix, render_history,
    render_undo_status, render_final_settlement,
)
from scoreboard.ui.i18n import t


class Renderer:
    """Main rendering engine that subscribes to scoreboard events."""

    def __init__(self, console: Console, event_bus: EventBus):
        self.console = console
        self.event_bus = event_bus
        self._subscribe_events()

    def _subscribe_events(self):
        """Subscribe to relevant scoreboard events."""
        self.event_bus.subscribe(EventType.SETTLEMENT, self._on_settlement)
        self.event_bus.subscribe(EventType.UNDO, self._on_undo)
        self.event_bus.subscribe(EventType.REDO, self._on_redo)
        self.event_bus.subscribe(EventType.ROUND_EDIT, self._on_round_edit)
        self.event_bus.subscribe(EventType.NAMES_EDIT, self._on_names_edit)
        self.event_bus.subscribe(EventType.RESET, self._on_reset)

    def render_board(self, board: Scoreboard):
        """Render the full scoreboard."""
        now = datetime.now()
        render_header(self.console, board.state, board.round_label,
                      elapsed_minutes(board.session_start, now),
                      board.config.total_points)
        render_scores(self.console, board.state)
        render_undo_status(self.console, board.last_settlement,
                           board.can_undo, board.can_redo)

    def show_diff_matrix(self, board: Scoreboard):
        render_diff_matrix(self.console, board.state.names, diff_matrix(board.state.points))

    def show_history(self, board: Scoreboard):
        render_history(self.console, board.state.history, board.state.names)

    def show_final_settlement(self, board: Scoreboard):
        final = final_settlement(board.state, board.session_start, datetime.now(),
                                 board.config.uma)
        render_final_settlement(self.console, final, board.state.names,
                                board.state.history)

    def _on_settlement(self, event: GameEvent):
        entry = event.data["entry"]
        self.console.print(f"\n  [bold green]{entry.kind.display_name}[/bold green] {entry.description}")
        for name, delta in zip(entry.player_names, entry.deltas):
            if delta != 0:
                style = "green" if delta > 0 else "red"
                self.console.print(f"    {name}: [{style}]{format_diff(delta)}[/{style}]")

    def _on_undo(self, event: GameEvent):
        self.console.print(f"  [yellow]{t('msg.undone', summary=event.data['meta'].summary)}[/yellow]")

    def _on_redo(self, event: GameEvent):
        self.console.print(f"  [yellow]{t('msg.redone', summary=event.data['meta'].summary)}[/yellow]")

    def _on_round_edit(self, event: GameEvent):
        self.console.print(f"  {t('msg.round_edited')}")

    def _on_names_edit(self, event: GameEvent):
        self.console.print(f"  {t('msg.names_edited')}")

    def _on_reset(self, event: GameEvent):
        self.console.print(f"  [bold]{t('msg.reset')}[/bold]")
