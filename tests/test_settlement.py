"""Tests for settlement.py - tsumo / ron / draw point movement"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dataclasses import replace

import pytest

from scoreboard.core.match_state import MatchState, SettlementKind, initial_state
from scoreboard.core.seat import Seat
from scoreboard.rules.settlement import (
    SettlementError, compute_draw, compute_ron, compute_tsumo,
    parse_hand_value, preview_draw, preview_ron, preview_tsumo,
)

NO_FLAGS = [False, False, False, False]


def make_state(dealer=Seat.EAST, honba=0, pool=0) -> MatchState:
    state = initial_state()
    points = list(state.points)
    points[0] -= pool * 1000  # Keep the table total at 100000
    return replace(state, dealer=dealer, honba=honba, pool=pool, points=tuple(points))


class TestParseHandValue:
    def test_ints_and_strings(self):
        assert parse_hand_value(3, 40) == (3, 40)
        assert parse_hand_value("3", " 40 ") == (3, 40)
        assert parse_hand_value(3.0, 40.0) == (3, 40)

    @pytest.mark.parametrize("han, fu", [
        (0, 30), (3, 0), (-1, 30), ("", "30"), ("abc", "30"),
        ("3.5", "30"), (3.5, 30), (float("nan"), 30), (float("inf"), 30),
        (None, 30), (True, 30),
    ])
    def test_rejects_invalid(self, han, fu):
        with pytest.raises(SettlementError) as exc:
            parse_hand_value(han, fu)
        assert exc.value.key == 'error.invalid_hand'

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"),
                        reason="no integer string limit on this interpreter")
    def test_rejects_oversized_digit_string(self):
        with pytest.raises(SettlementError) as exc:
            parse_hand_value("9" * 5000, "30")
        assert exc.value.key == 'error.invalid_hand'
        assert preview_tsumo(make_state(), Seat.EAST, "9" * 5000, "30", NO_FLAGS) is None


class TestTsumo:
    def test_dealer_tsumo(self):
        """Dealer 3 han 40 fu: each non-dealer pays 2600."""
        preview = compute_tsumo(make_state(), Seat.EAST, 3, 40, NO_FLAGS)
        assert preview.deltas == (7800, -2600, -2600, -2600)
        assert preview.non_dealer_payment == 2600
        assert preview.dealer_payment == 0
        assert preview.kind == SettlementKind.TSUMO

    def test_non_dealer_tsumo(self):
        """Non-dealer 3 han 40 fu: dealer pays 2600, others 1300."""
        preview = compute_tsumo(make_state(), Seat.SOUTH, 3, 40, NO_FLAGS)
        assert preview.deltas == (-2600, 5200, -1300, -1300)
        assert preview.dealer_payment == 2600
        assert preview.non_dealer_payment == 1300

    def test_non_dealer_tsumo_rounding(self):
        """1 han 30 fu: base 240 -> 300 / 500 after rounding up."""
        preview = compute_tsumo(make_state(dealer=Seat.WEST), Seat.NORTH, 1, 30, NO_FLAGS)
        assert preview.deltas[Seat.WEST] == -500
        assert preview.deltas[Seat.EAST] == -300
        assert preview.deltas[Seat.SOUTH] == -300
        assert preview.deltas[Seat.NORTH] == 1100

    def test_honba_adds_100_per_payer(self):
        preview = compute_tsumo(make_state(honba=2), Seat.EAST, 3, 40, NO_FLAGS)
        assert preview.deltas == (8400, -2800, -2800, -2800)
        assert preview.honba_payment == 200

    def test_pool_and_riichi_claimed(self):
        state = make_state(pool=2)
        riichi = [False, True, True, False]
        preview = compute_tsumo(state, Seat.SOUTH, 3, 40, riichi)
        # South: +5200 from payments, +2000 pool, +2000 riichi sticks, -1000 own stick
        assert preview.deltas == (-2600, 8200, -2300, -1300)
        assert preview.pool_before == 2
        assert preview.pool_after == 0
        assert preview.pool_income == 2000
        assert preview.riichi_income == 2000
        assert preview.riichi_seats == (Seat.SOUTH, Seat.WEST)

    def test_payments_sum_to_zero_before_sticks(self):
        preview = compute_tsumo(make_state(dealer=Seat.NORTH, honba=3), Seat.WEST, 4, 20, NO_FLAGS)
        assert sum(preview.deltas) == 0

    def test_conservation_with_sticks(self):
        state = make_state(pool=1)
        riichi = [True, False, False, True]
        preview = compute_tsumo(state, Seat.WEST, 2, 30, riichi)
        # Everything the seats lose beyond payments is the pool being emptied
        assert sum(preview.deltas) == state.pool * 1000

    def test_no_winner_rejected(self):
        with pytest.raises(SettlementError) as exc:
            compute_tsumo(make_state(), None, 3, 40, NO_FLAGS)
        assert exc.value.key == 'error.no_winner'
        assert preview_tsumo(make_state(), None, 3, 40, NO_FLAGS) is None

    @pytest.mark.parametrize("winner", [4, -1, "x", "1", 1.0, True])
    def test_invalid_seat_rejected(self, winner):
        with pytest.raises(SettlementError) as exc:
            compute_tsumo(make_state(), winner, 3, 40, NO_FLAGS)
        assert exc.value.key == 'error.no_winner'
        assert preview_tsumo(make_state(), winner, 3, 40, NO_FLAGS) is None

    def test_invalid_hand_gives_no_preview(self):
        assert preview_tsumo(make_state(), Seat.EAST, "0", "40", NO_FLAGS) is None
        assert preview_tsumo(make_state(), Seat.EAST, "3", "", NO_FLAGS) is None

    def test_state_untouched(self):
        state = make_state(pool=1)
        compute_tsumo(state, Seat.EAST, 3, 40, [True, True, False, False])
        assert state == make_state(pool=1)


class TestRon:
    def test_non_dealer_ron(self):
        preview = compute_ron(make_state(), Seat.SOUTH, Seat.WEST, 3, 40, NO_FLAGS)
        assert preview.ron_payment == 5200
        assert preview.deltas == (0, 5200, -5200, 0)

    def test_dealer_ron(self):
        preview = compute_ron(make_state(), Seat.EAST, Seat.NORTH, 3, 40, NO_FLAGS)
        # 1280 * 6 = 7680 -> 7700
        assert preview.ron_payment == 7700
        assert preview.deltas == (7700, 0, 0, -7700)

    def test_honba_adds_300(self):
        preview = compute_ron(make_state(honba=1), Seat.SOUTH, Seat.WEST, 3, 40, NO_FLAGS)
        assert preview.ron_payment == 5500
        assert preview.honba_payment == 300

    def test_mangan_ron(self):
        preview = compute_ron(make_state(), Seat.NORTH, Seat.EAST, 4, 30, NO_FLAGS)
        assert preview.ron_payment == 8000

    def test_pool_and_riichi(self):
        state = make_state(pool=1)
        preview = compute_ron(state, Seat.SOUTH, Seat.WEST, 3, 40, [False, True, True, False])
        assert preview.deltas == (0, 5200 + 1000 + 2000 - 1000, -5200 - 1000, 0)
        assert preview.pool_after == 0
        assert sum(preview.deltas) == 1000

    def test_same_seat_rejected(self):
        with pytest.raises(SettlementError) as exc:
            compute_ron(make_state(), Seat.SOUTH, Seat.SOUTH, 3, 40, NO_FLAGS)
        assert exc.value.key == 'error.same_seat'

    def test_missing_seat_rejected(self):
        assert preview_ron(make_state(), Seat.SOUTH, None, 3, 40, NO_FLAGS) is None
        assert preview_ron(make_state(), None, Seat.SOUTH, 3, 40, NO_FLAGS) is None

    def test_invalid_seat_gives_no_preview(self):
        assert preview_ron(make_state(), "x", 1, 3, 40, NO_FLAGS) is None
        assert preview_ron(make_state(), 0, 4, 3, 40, NO_FLAGS) is None

    def test_seat_zero_is_a_selection(self):
        """Seat 0 must not be mistaken for 'nothing chosen'."""
        preview = preview_ron(make_state(dealer=Seat.NORTH), 0, 1, 1, 30, NO_FLAGS)
        assert preview is not None
        assert preview.winner == Seat.EAST


class TestDraw:
    def test_one_tenpai(self):
        preview = compute_draw(make_state(), [False, False, True, False], NO_FLAGS)
        assert preview.deltas == (-1000, -1000, 3000, -1000)

    def test_two_tenpai(self):
        preview = compute_draw(make_state(), [True, False, True, False], NO_FLAGS)
        assert preview.deltas == (1500, -1500, 1500, -1500)

    def test_three_tenpai(self):
        preview = compute_draw(make_state(), [True, True, False, True], NO_FLAGS)
        assert preview.deltas == (1000, 1000, -3000, 1000)

    def test_no_or_all_tenpai(self):
        assert compute_draw(make_state(), NO_FLAGS, NO_FLAGS).deltas == (0, 0, 0, 0)
        assert compute_draw(make_state(), [True] * 4, NO_FLAGS).deltas == (0, 0, 0, 0)

    def test_riichi_sticks_go_to_pool(self):
        state = make_state(pool=1)
        preview = compute_draw(state, [True, False, False, False], [True, True, False, False])
        assert preview.deltas == (3000 - 1000, -1000 - 1000, -1000, -1000)
        assert preview.pool_after == 3
        assert preview.pool_income == 0
        assert preview.riichi_income == 2000
        assert preview.winner is None

    def test_dealer_tenpai_flag(self):
        state = make_state(dealer=Seat.SOUTH)
        assert compute_draw(state, [False, True, False, False], NO_FLAGS).dealer_tenpai
        assert not compute_draw(state, [True, False, False, False], NO_FLAGS).dealer_tenpai

    def test_always_previews(self):
        assert preview_draw(make_state(), NO_FLAGS, NO_FLAGS) is not None

    def test_wrong_flag_count(self):
        with pytest.raises(SettlementError) as exc:
            compute_draw(make_state(), [True, False], NO_FLAGS)
        assert exc.value.key == 'error.flags'
