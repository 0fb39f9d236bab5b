"""Project-wide constants for :mod:`dots_payout`.

Literal values and default assumptions live here so call sites and the UI
layer share one source of truth.
"""

from __future__ import annotations

# Amount owed per point of differential.
DEFAULT_STAKE: float = 0.25

# Names shown on a fresh (or reset) scorecard.
DEFAULT_PLAYER_NAMES: tuple[str, ...] = ("Player A", "Player B", "Player C", "Player D")

# Team games are always played as a foursome.
TEAM_GAME_PLAYER_COUNT: int = 4

SUPPORTED_SEGMENT_COUNTS: tuple[int, ...] = (2, 3)

FRONT_BACK_LABELS: tuple[str, ...] = ("Front 9", "Back 9")
SIXES_LABELS: tuple[str, ...] = ("Holes 1-6", "Holes 7-12", "Holes 13-18")

# 6-point Scotch: points available on a single hole.
LOW_MAN_POINTS: int = 2
LOW_TEAM_POINTS: int = 2
GIR_POINTS: int = 1
BIRDIE_POINTS: int = 1
HOLE_POINTS: int = LOW_MAN_POINTS + LOW_TEAM_POINTS + GIR_POINTS + BIRDIE_POINTS

# A team that takes every point on a hole doubles it.
SWEEP_MULTIPLIER: int = 2
PRESS_MULTIPLIER: int = 2
ROLL_MULTIPLIER: int = 2
