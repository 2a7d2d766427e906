"""Round progression - dealer retention, rotation, honba and pool."""

from dataclasses import replace
from typing import Tuple

from scoreboard.core.match_state import HistoryEntry, MatchState, SettlementKind
from scoreboard.core.seat import Seat, Wind
from scoreboard.engine.history import append_entry
from scoreboard.rules.settlement import SettlementPreview

ROUNDS_PER_WIND = 4
NUM_ROUNDS = 8  # East 1 .. South 4


def round_info(round_index: int, honba: int) -> Tuple[Wind, int, str]:
    """Wind, 1-based hand number and a label like '东1局0本场' (localized)."""
    from scoreboard.ui.i18n import t
    wind = Wind.EAST if round_index < ROUNDS_PER_WIND else Wind.SOUTH
    number = round_index % ROUNDS_PER_WIND + 1
    label = t('round.label', wind=wind.display_name, number=number, honba=honba)
    return wind, number, label


def round_label(state: MatchState) -> str:
    return round_info(state.round_index, state.honba)[2]


def advance_round(state: MatchState, preview: SettlementPreview) -> Tuple[Seat, int, int]:
    """Decide (dealer, round_index, honba) after a confirmed hand."""
    if preview.kind == SettlementKind.DRAW:
        # Honba stacks on every draw; the dealer only stays when tenpai
        if preview.dealer_tenpai:
            return state.dealer, state.round_index, state.honba + 1
        return _rotate(state, state.honba + 1)

    if preview.winner == state.dealer:
        return state.dealer, state.round_index, state.honba + 1
    return _rotate(state, 0)


def _rotate(state: MatchState, honba: int) -> Tuple[Seat, int, int]:
    return state.dealer.next(), (state.round_index + 1) % NUM_ROUNDS, honba


def apply_settlement(state: MatchState, preview: SettlementPreview,
                     entry: HistoryEntry) -> MatchState:
    """Build the whole next MatchState for a confirmed hand."""
    dealer, round_index, honba = advance_round(state, preview)
    return replace(
        state,
        points=tuple(p + d for p, d in zip(state.points, preview.deltas)),
        pool=preview.pool_after,
        honba=honba,
        round_index=round_index,
        dealer=dealer,
        history=append_entry(state.history, entry),
    )


def edit_round(state: MatchState, wind: Wind, number: int, honba: int,
               dealer: Seat) -> MatchState:
    """Manual correction of the round; points, pool, names and history stay."""
    if not 1 <= number <= ROUNDS_PER_WIND:
        raise ValueError(f"hand number must be 1-{ROUNDS_PER_WIND}, got {number}")
    wind = Wind(wind)
    round_index = (number - 1) + (ROUNDS_PER_WIND if wind == Wind.SOUTH else 0)
    return replace(
        state,
        honba=max(0, int(honba)),
        round_index=round_index,
        dealer=Seat(dealer),
    )
