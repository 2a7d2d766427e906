"""Tests for round_state.py - dealer retention, rotation and manual edits"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dataclasses import replace

import pytest

from scoreboard.core.match_state import initial_state
from scoreboard.core.seat import Seat, Wind
from scoreboard.engine.history import build_entry
from scoreboard.engine.round_state import (
    advance_round, apply_settlement, edit_round, round_info, round_label,
)
from scoreboard.rules.settlement import compute_draw, compute_ron, compute_tsumo

NO_FLAGS = [False, False, False, False]


def settle(state, preview):
    return apply_settlement(state, preview, build_entry(state, preview))


class TestAdvanceRound:
    def test_dealer_win_keeps_dealer(self):
        state = replace(initial_state(), dealer=Seat.SOUTH, round_index=1, honba=2)
        preview = compute_tsumo(state, Seat.SOUTH, 3, 40, NO_FLAGS)
        assert advance_round(state, preview) == (Seat.SOUTH, 1, 3)

    def test_non_dealer_win_rotates(self):
        state = replace(initial_state(), honba=4)
        preview = compute_ron(state, Seat.WEST, Seat.EAST, 3, 40, NO_FLAGS)
        assert advance_round(state, preview) == (Seat.SOUTH, 1, 0)

    def test_draw_dealer_tenpai_stays(self):
        state = replace(initial_state(), dealer=Seat.WEST, round_index=2)
        preview = compute_draw(state, [False, False, True, False], NO_FLAGS)
        assert advance_round(state, preview) == (Seat.WEST, 2, 1)

    def test_draw_dealer_noten_rotates_and_keeps_honba(self):
        state = replace(initial_state(), dealer=Seat.WEST, round_index=2, honba=1)
        preview = compute_draw(state, [True, False, False, False], NO_FLAGS)
        assert advance_round(state, preview) == (Seat.NORTH, 3, 2)

    def test_dealer_wraps(self):
        state = replace(initial_state(), dealer=Seat.NORTH, round_index=7)
        preview = compute_tsumo(state, Seat.EAST, 1, 30, NO_FLAGS)
        assert advance_round(state, preview) == (Seat.EAST, 0, 0)


class TestApplySettlement:
    def test_dealer_tsumo(self):
        """Dealer 3 han 40 fu tsumo: +7800, others -2600, honba 1, same round."""
        state = initial_state()
        after = settle(state, compute_tsumo(state, Seat.EAST, 3, 40, NO_FLAGS))
        assert after.points == (32800, 22400, 22400, 22400)
        assert after.dealer == Seat.EAST
        assert after.round_index == 0
        assert after.honba == 1
        assert after.pool == 0
        assert len(after.history) == 1

    def test_non_dealer_ron(self):
        state = initial_state()
        after = settle(state, compute_ron(state, Seat.SOUTH, Seat.WEST, 3, 40, NO_FLAGS))
        assert after.points == (25000, 30200, 19800, 25000)
        assert after.dealer == Seat.SOUTH
        assert after.round_index == 1
        assert after.honba == 0

    def test_one_tenpai_non_dealer(self):
        state = initial_state()
        after = settle(state, compute_draw(state, [False, True, False, False], NO_FLAGS))
        assert after.points == (24000, 28000, 24000, 24000)
        assert after.dealer == Seat.SOUTH
        assert after.round_index == 1
        assert after.honba == 1

    def test_one_tenpai_dealer(self):
        state = initial_state()
        after = settle(state, compute_draw(state, [True, False, False, False], NO_FLAGS))
        assert after.points == (28000, 24000, 24000, 24000)
        assert after.dealer == Seat.EAST
        assert after.round_index == 0
        assert after.honba == 1

    def test_draw_carries_riichi_to_pool(self):
        state = initial_state()
        after = settle(state, compute_draw(state, NO_FLAGS, [True, False, True, False]))
        assert after.pool == 2
        assert after.points == (24000, 25000, 24000, 25000)
        assert after.total_with_pool == 100000

    def test_history_newest_first(self):
        state = initial_state()
        first = settle(state, compute_draw(state, NO_FLAGS, NO_FLAGS))
        second = settle(first, compute_ron(first, Seat.NORTH, Seat.WEST, 2, 30, NO_FLAGS))
        assert second.history[0].kind.value == "ron"
        assert second.history[1] is first.history[0]

    def test_round_wraps_after_eight_rotations(self):
        state = initial_state()
        seen = []
        for _ in range(8):
            next_dealer = state.dealer.next()
            state = settle(state, compute_ron(state, next_dealer, state.dealer, 1, 30, NO_FLAGS))
            seen.append(state.round_index)
        assert seen == [1, 2, 3, 4, 5, 6, 7, 0]
        assert state.dealer == Seat.EAST


class TestEditRound:
    def test_south_round(self):
        state = replace(initial_state(), pool=1, points=(24000, 25000, 25000, 25000))
        edited = edit_round(state, Wind.SOUTH, 3, 2, Seat.WEST)
        assert edited.round_index == 6
        assert edited.honba == 2
        assert edited.dealer == Seat.WEST
        assert edited.points == state.points
        assert edited.pool == state.pool
        assert edited.history == state.history
        assert edited.names == state.names

    def test_negative_honba_clamped(self):
        assert edit_round(initial_state(), Wind.EAST, 1, -3, Seat.EAST).honba == 0

    def test_bad_number(self):
        with pytest.raises(ValueError):
            edit_round(initial_state(), Wind.EAST, 5, 0, Seat.EAST)


class TestRoundInfo:
    def test_east_label(self):
        wind, number, label = round_info(0, 0)
        assert wind == Wind.EAST
        assert number == 1
        assert label == "东1局0本场"

    def test_south_label(self):
        wind, number, label = round_info(7, 3)
        assert wind == Wind.SOUTH
        assert number == 4
        assert label == "南4局3本场"

    def test_state_label(self):
        assert round_label(replace(initial_state(), round_index=5, honba=1)) == "南2局1本场"
