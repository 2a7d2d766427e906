"""Standings - ranks, uma and point differences for the final settlement view.

Nothing here changes MatchState; the match ends when the table decides,
and this is only a report over the current points.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Sequence, Tuple

from scoreboard.core.match_state import MatchState
from scoreboard.core.seat import Seat

DEFAULT_UMA = (35, 15, -5, -45)


@dataclass(frozen=True)
class Standing:
    seat: Seat
    name: str
    points: int
    rank: int
    uma: float  # Final score in thousands, placement bonus included


@dataclass(frozen=True)
class FinalSettlement:
    standings: Tuple[Standing, ...]  # Ordered by rank, then seat
    diff_matrix: Tuple[Tuple[int, ...], ...]
    elapsed_minutes: int


def compute_ranks(points: Sequence[int]) -> List[int]:
    """1-based ranks; tied players share the better rank and the next rank is skipped."""
    order = sorted(range(len(points)), key=lambda i: (-points[i], i))
    ranks = [0] * len(points)
    last_score = None
    last_rank = 0
    for position, index in enumerate(order):
        if last_score is not None and points[index] == last_score:
            ranks[index] = last_rank
        else:
            last_rank = position + 1
            ranks[index] = last_rank
            last_score = points[index]
    return ranks


def compute_uma(points: Sequence[int], ranks: Sequence[int],
                uma: Sequence[int] = DEFAULT_UMA) -> List[float]:
    """Points in thousands plus the placement bonus.

    Tied players are ordered by seat and take consecutive bonuses.
    """
    order = sorted(range(len(points)), key=lambda i: (ranks[i], i))
    results = [0.0] * len(points)
    for position, index in enumerate(order):
        results[index] = points[index] / 1000 + uma[position]
    return results


def diff_matrix(points: Sequence[int]) -> Tuple[Tuple[int, ...], ...]:
    """Row i, column j: how far seat i is ahead of seat j."""
    return tuple(
        tuple(0 if i == j else mine - other for j, other in enumerate(points))
        for i, mine in enumerate(points)
    )


def elapsed_minutes(start: datetime, now: datetime) -> int:
    return max(0, int((now - start).total_seconds() // 60))


def ranking_list(state: MatchState, uma: Sequence[int] = DEFAULT_UMA) -> Tuple[Standing, ...]:
    ranks = compute_ranks(state.points)
    umas = compute_uma(state.points, ranks, uma)
    standings = [
        Standing(seat, state.name_of(seat), state.points[seat], ranks[seat], umas[seat])
        for seat in Seat
    ]
    standings.sort(key=lambda s: (s.rank, s.seat))
    return tuple(standings)


def final_settlement(state: MatchState, start: datetime, now: datetime,
                     uma: Sequence[int] = DEFAULT_UMA) -> FinalSettlement:
    return FinalSettlement(
        standings=ranking_list(state, uma),
        diff_matrix=diff_matrix(state.points),
        elapsed_minutes=elapsed_minutes(start, now),
    )
