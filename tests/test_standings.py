"""Tests for standings.py - ranks, uma and the difference matrix"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dataclasses import replace
from datetime import datetime

from scoreboard.core.match_state import initial_state
from scoreboard.core.seat import Seat
from scoreboard.engine.standings import (
    compute_ranks, compute_uma, diff_matrix, elapsed_minutes, final_settlement, ranking_list,
)


class TestRanks:
    def test_distinct(self):
        assert compute_ranks([30000, 20000, 40000, 10000]) == [2, 3, 1, 4]

    def test_ties_share_rank(self):
        assert compute_ranks([25000, 25000, 30000, 20000]) == [2, 2, 1, 4]
        assert compute_ranks([25000] * 4) == [1, 1, 1, 1]


class TestUma:
    def test_distinct(self):
        points = [30000, 20000, 40000, 10000]
        uma = compute_uma(points, compute_ranks(points))
        assert uma == [45.0, 15.0, 75.0, -35.0]

    def test_ties_take_consecutive_bonus_by_seat(self):
        points = [25000, 25000, 30000, 20000]
        uma = compute_uma(points, compute_ranks(points))
        assert uma == [40.0, 20.0, 65.0, -25.0]

    def test_uma_sums_to_zero_offset(self):
        points = [32800, 22400, 22400, 22400]
        uma = compute_uma(points, compute_ranks(points))
        assert round(sum(uma), 6) == 100.0  # Bonuses cancel; 100000 points is 100.0


class TestDiffMatrix:
    def test_matrix(self):
        matrix = diff_matrix([30000, 20000, 25000, 25000])
        assert matrix[0] == (0, 10000, 5000, 5000)
        assert matrix[1][0] == -10000
        assert matrix[2][3] == 0
        for i in range(4):
            for j in range(4):
                assert matrix[i][j] == -matrix[j][i]


class TestFinalSettlement:
    def test_elapsed(self):
        start = datetime(2026, 3, 1, 20, 0, 0)
        assert elapsed_minutes(start, datetime(2026, 3, 1, 21, 30, 59)) == 90
        assert elapsed_minutes(start, datetime(2026, 3, 1, 19, 0, 0)) == 0

    def test_ranking_list_ordered(self):
        state = replace(initial_state(names=("A", "B", "C", "D")),
                        points=(20000, 40000, 10000, 30000))
        standings = ranking_list(state)
        assert [s.seat for s in standings] == [Seat.SOUTH, Seat.NORTH, Seat.EAST, Seat.WEST]
        assert [s.name for s in standings] == ["B", "D", "A", "C"]
        assert [s.rank for s in standings] == [1, 2, 3, 4]
        assert standings[0].uma == 75.0

    def test_final(self):
        start = datetime(2026, 3, 1, 20, 0, 0)
        final = final_settlement(initial_state(), start, datetime(2026, 3, 1, 20, 45, 0))
        assert final.elapsed_minutes == 45
        assert len(final.standings) == 4
        assert all(s.rank == 1 for s in final.standings)
        assert final.diff_matrix[0] == (0, 0, 0, 0)
