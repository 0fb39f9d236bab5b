"""6-Point Scotch hole scoring.

Each hole is worth 6 points split across four categories:

- low man (net): 2
- low team (net): 2
- green in regulation: 1
- birdie (gross only): 1

A team that takes all 6 points on a hole doubles them to 12. Before teeing
off, the team behind may *press*, doubling every remaining hole of the
segment; presses stack. After the first group tees off the team behind may
*roll*, doubling only that hole.

The output of :func:`tally_segment` is the ``(team1_points, team2_points)``
pair a :class:`~dots_payout.data.Segment` is built from.
"""

from __future__ import annotations

from typing import Sequence

from .constants import (
    BIRDIE_POINTS,
    GIR_POINTS,
    HOLE_POINTS,
    LOW_MAN_POINTS,
    LOW_TEAM_POINTS,
    PRESS_MULTIPLIER,
    ROLL_MULTIPLIER,
    SWEEP_MULTIPLIER,
)
from .data import Hole, HoleAwards, TeamPoints


_CATEGORY_POINTS = (
    ("low_man", LOW_MAN_POINTS),
    ("low_team", LOW_TEAM_POINTS),
    ("gir", GIR_POINTS),
    ("birdie", BIRDIE_POINTS),
)


def score_hole(awards: HoleAwards, *, multiplier: int = 1) -> tuple[int, int]:
    """Return (team 1, team 2) points for a single hole."""

    if multiplier < 1:
        raise ValueError("multiplier must be >= 1")

    totals = [0, 0]
    for name, points in _CATEGORY_POINTS:
        winner = getattr(awards, name)
        if winner is not None:
            totals[winner - 1] += points

    if HOLE_POINTS in totals:
        totals = [t * SWEEP_MULTIPLIER for t in totals]

    return totals[0] * multiplier, totals[1] * multiplier


def hole_multiplier(*, active_presses: int, roll: bool) -> int:
    m = PRESS_MULTIPLIER**active_presses
    if roll:
        m *= ROLL_MULTIPLIER
    return m


def tally_segment(holes: Sequence[Hole]) -> TeamPoints:
    """Sum a segment's holes into team point totals.

    Presses carry forward to the end of the segment; rolls apply only to the
    hole they are called on.
    """

    active_presses = 0
    team1 = 0
    team2 = 0
    for hole in holes:
        active_presses += hole.presses
        t1, t2 = score_hole(hole.awards, multiplier=hole_multiplier(active_presses=active_presses, roll=hole.roll))
        team1 += t1
        team2 += t2

    return float(team1), float(team2)
