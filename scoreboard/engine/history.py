"""History ledger - settled hands, newest first."""

import uuid
from datetime import datetime
from typing import Callable, Optional, Tuple

from scoreboard.core.match_state import HistoryEntry, MatchState, SettlementKind
from scoreboard.core.seat import Seat
from scoreboard.rules.settlement import SettlementPreview
from scoreboard.ui.i18n import t

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_points(value: int) -> str:
    return f"{value:,}"


def format_diff(value: int) -> str:
    if value == 0:
        return "0"
    sign = "+" if value > 0 else "-"
    return f"{sign}{format_points(abs(value))}"


def append_entry(history: Tuple[HistoryEntry, ...],
                 entry: HistoryEntry) -> Tuple[HistoryEntry, ...]:
    """New ledger with `entry` first. Existing entries are never touched."""
    return (entry,) + tuple(history)


def build_entry(state: MatchState, preview: SettlementPreview,
                clock: Optional[Callable[[], datetime]] = None) -> HistoryEntry:
    """Record a hand against the state it was settled from."""
    from scoreboard.engine.round_state import round_label
    now = (clock or datetime.now)()
    return HistoryEntry(
        entry_id=uuid.uuid4().hex[:8],
        kind=preview.kind,
        round_label=round_label(state),
        dealer_name=state.dealer_name,
        riichi_count=preview.riichi_count,
        description=describe(state, preview),
        timestamp=now.strftime(TIMESTAMP_FORMAT),
        player_names=tuple(state.name_of(seat) for seat in Seat),
        riichi_players=tuple(state.name_of(seat) for seat in preview.riichi_seats),
        deltas=tuple(preview.deltas),
    )


def describe(state: MatchState, preview: SettlementPreview) -> str:
    """Human-readable account of who paid what."""
    common = dict(
        han=preview.han,
        fu=preview.fu,
        honba=format_points(preview.honba_payment),
        pool=format_points(preview.pool_income),
        riichi=format_points(preview.riichi_income),
        total=format_points(preview.winner_gain),
    )

    if preview.kind == SettlementKind.TSUMO:
        winner = state.name_of(preview.winner)
        if preview.winner == state.dealer:
            return t('desc.tsumo_dealer', winner=winner,
                     each=format_points(preview.non_dealer_payment), **common)
        return t('desc.tsumo', winner=winner, dealer=state.dealer_name,
                 dealer_pay=format_points(preview.dealer_payment),
                 other_pay=format_points(preview.non_dealer_payment), **common)

    if preview.kind == SettlementKind.RON:
        key = 'desc.ron_dealer' if preview.winner == state.dealer else 'desc.ron'
        return t(key, winner=state.name_of(preview.winner),
                 loser=state.name_of(preview.loser),
                 payment=format_points(preview.ron_payment), **common)

    tenpai = [state.name_of(seat) for seat in preview.tenpai_seats]
    noten = [state.name_of(seat) for seat in Seat if seat not in preview.tenpai_seats]
    separator = t('desc.name_separator')
    return t('desc.draw',
             riichi=format_points(preview.riichi_income),
             tenpai=separator.join(tenpai) or t('desc.nobody'),
             noten=separator.join(noten) or t('desc.nobody'))


def summarize(state: MatchState, preview: SettlementPreview, label: str) -> str:
    """One-line summary shown next to the undo/redo buttons."""
    if preview.kind == SettlementKind.TSUMO:
        return t('summary.tsumo', winner=state.name_of(preview.winner), label=label)
    if preview.kind == SettlementKind.RON:
        return t('summary.ron', winner=state.name_of(preview.winner),
                 loser=state.name_of(preview.loser), label=label)
    return t('summary.draw', label=label)
