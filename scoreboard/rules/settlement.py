"""Settlement engine - turn a hand result into per-seat point deltas.

The same computation backs the live preview and the confirmed settlement,
so what the table sees before confirming is exactly what gets applied.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from scoreboard.core.match_state import MatchState, SettlementKind, STICK_VALUE
from scoreboard.core.seat import NUM_SEATS, Seat, to_seat
from scoreboard.rules.score_table import base_points, round_up_100

NOTEN_PAYMENT_TOTAL = 3000  # Split between tenpai and noten seats on a draw


class SettlementError(ValueError):
    """A settlement request that cannot be applied.

    Attributes:
        key: i18n message key describing the problem
    """

    def __init__(self, key: str, message: str = ""):
        super().__init__(message or key)
        self.key = key


@dataclass(frozen=True)
class SettlementPreview:
    """Point movement for one hand, computed without touching MatchState."""
    kind: SettlementKind
    deltas: Tuple[int, ...]
    winner: Optional[Seat] = None
    loser: Optional[Seat] = None
    riichi_seats: Tuple[Seat, ...] = ()
    tenpai_seats: Tuple[Seat, ...] = ()
    han: int = 0
    fu: int = 0
    base_points: int = 0
    # Per-payer amounts, honba included
    dealer_payment: int = 0  # Dealer's share of a non-dealer tsumo
    non_dealer_payment: int = 0  # Each non-dealer's share of a tsumo
    ron_payment: int = 0  # What the discarder pays
    honba_payment: int = 0  # Honba part of a single payment
    pool_before: int = 0  # Sticks on the table before the hand
    pool_after: int = 0
    pool_income: int = 0  # Points the winner collects from the table
    riichi_income: int = 0  # Points from this hand's riichi sticks
    dealer_tenpai: bool = False  # Draws only

    @property
    def riichi_count(self) -> int:
        return len(self.riichi_seats)

    @property
    def winner_gain(self) -> int:
        if self.winner is None:
            return 0
        return self.deltas[self.winner]


def parse_hand_value(han, fu) -> Tuple[int, int]:
    """Validate han and fu, accepting ints or decimal strings."""
    return _positive_int(han), _positive_int(fu)


def _positive_int(value) -> int:
    if isinstance(value, bool) or value is None:
        raise SettlementError('error.invalid_hand')
    if isinstance(value, str):
        text = value.strip()
        if not text.isdecimal():
            raise SettlementError('error.invalid_hand', f"not a positive integer: {value!r}")
        try:
            number = int(text)
        except ValueError:
            # Beyond the interpreter's integer string limit
            raise SettlementError('error.invalid_hand', f"too many digits: {len(text)}")
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise SettlementError('error.invalid_hand', f"not a positive integer: {value!r}")
        number = int(value)
    elif isinstance(value, int):
        number = value
    else:
        raise SettlementError('error.invalid_hand', f"not a positive integer: {value!r}")
    if number <= 0:
        raise SettlementError('error.invalid_hand', f"not a positive integer: {value!r}")
    return number


def _flagged_seats(flags: Sequence) -> Tuple[Seat, ...]:
    flags = list(flags)
    if len(flags) != NUM_SEATS:
        raise SettlementError('error.flags', f"expected {NUM_SEATS} flags, got {len(flags)}")
    return tuple(Seat(i) for i, flag in enumerate(flags) if flag)


def _collect_riichi(flags: Sequence) -> Tuple[List[int], Tuple[Seat, ...]]:
    """Every declarer's stick leaves their stack."""
    deltas = [0] * NUM_SEATS
    riichi_seats = _flagged_seats(flags)
    for seat in riichi_seats:
        deltas[seat] -= STICK_VALUE
    return deltas, riichi_seats


def compute_tsumo(state: MatchState, winner, han, fu,
                  riichi: Sequence) -> SettlementPreview:
    """Self-draw win. Raises SettlementError on invalid input."""
    winner = to_seat(winner)
    if winner is None:
        raise SettlementError('error.no_winner')
    han, fu = parse_hand_value(han, fu)
    deltas, riichi_seats = _collect_riichi(riichi)

    base = base_points(han, fu)
    honba_pay = state.honba * 100
    dealer_pay = round_up_100(base * 2) + honba_pay
    non_dealer_pay = round_up_100(base) + honba_pay

    collected = 0
    for seat in Seat:
        if seat == winner:
            continue
        if winner == state.dealer or seat == state.dealer:
            payment = dealer_pay
        else:
            payment = non_dealer_pay
        deltas[seat] -= payment
        collected += payment

    pool_income = state.pool * STICK_VALUE
    riichi_income = len(riichi_seats) * STICK_VALUE
    deltas[winner] += collected + pool_income + riichi_income

    is_dealer = winner == state.dealer
    return SettlementPreview(
        kind=SettlementKind.TSUMO,
        deltas=tuple(deltas),
        winner=winner,
        riichi_seats=riichi_seats,
        han=han,
        fu=fu,
        base_points=base,
        dealer_payment=0 if is_dealer else dealer_pay,
        non_dealer_payment=dealer_pay if is_dealer else non_dealer_pay,
        honba_payment=honba_pay,
        pool_before=state.pool,
        pool_after=0,
        pool_income=pool_income,
        riichi_income=riichi_income,
    )


def compute_ron(state: MatchState, winner, loser, han, fu,
                riichi: Sequence) -> SettlementPreview:
    """Discard win. Raises SettlementError on invalid input."""
    winner = to_seat(winner)
    loser = to_seat(loser)
    if winner is None or loser is None:
        raise SettlementError('error.no_winner')
    if winner == loser:
        raise SettlementError('error.same_seat')
    han, fu = parse_hand_value(han, fu)
    deltas, riichi_seats = _collect_riichi(riichi)

    base = base_points(han, fu)
    multiplier = 6 if winner == state.dealer else 4
    honba_pay = state.honba * 300
    payment = round_up_100(base * multiplier) + honba_pay

    pool_income = state.pool * STICK_VALUE
    riichi_income = len(riichi_seats) * STICK_VALUE
    deltas[loser] -= payment
    deltas[winner] += payment + pool_income + riichi_income

    return SettlementPreview(
        kind=SettlementKind.RON,
        deltas=tuple(deltas),
        winner=winner,
        loser=loser,
        riichi_seats=riichi_seats,
        han=han,
        fu=fu,
        base_points=base,
        ron_payment=payment,
        honba_payment=honba_pay,
        pool_before=state.pool,
        pool_after=0,
        pool_income=pool_income,
        riichi_income=riichi_income,
    )


def compute_draw(state: MatchState, tenpai: Sequence,
                 riichi: Sequence) -> SettlementPreview:
    """Exhaustive draw. Only a malformed flag list can fail."""
    deltas, riichi_seats = _collect_riichi(riichi)
    tenpai_seats = _flagged_seats(tenpai)
    noten_seats = [seat for seat in Seat if seat not in tenpai_seats]

    # 0 or 4 tenpai: nobody pays
    if 0 < len(tenpai_seats) < NUM_SEATS:
        receive = NOTEN_PAYMENT_TOTAL // len(tenpai_seats)
        pay = NOTEN_PAYMENT_TOTAL // len(noten_seats)
        for seat in tenpai_seats:
            deltas[seat] += receive
        for seat in noten_seats:
            deltas[seat] -= pay

    return SettlementPreview(
        kind=SettlementKind.DRAW,
        deltas=tuple(deltas),
        riichi_seats=riichi_seats,
        tenpai_seats=tenpai_seats,
        pool_before=state.pool,
        pool_after=state.pool + len(riichi_seats),
        pool_income=0,
        riichi_income=len(riichi_seats) * STICK_VALUE,
        dealer_tenpai=state.dealer in tenpai_seats,
    )


def preview_tsumo(state: MatchState, winner, han, fu,
                  riichi: Sequence) -> Optional[SettlementPreview]:
    """Live preview for a tsumo. Returns None if the input is not settleable yet."""
    try:
        return compute_tsumo(state, winner, han, fu, riichi)
    except SettlementError:
        return None


def preview_ron(state: MatchState, winner, loser, han, fu,
                riichi: Sequence) -> Optional[SettlementPreview]:
    """Live preview for a ron. Returns None if the input is not settleable yet."""
    try:
        return compute_ron(state, winner, loser, han, fu, riichi)
    except SettlementError:
        return None


def preview_draw(state: MatchState, tenpai: Sequence,
                 riichi: Sequence) -> Optional[SettlementPreview]:
    try:
        return compute_draw(state, tenpai, riichi)
    except SettlementError:
        return None
