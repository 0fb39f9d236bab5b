"""Payout calculator for Dots / 6-Point Scotch golf games.

Given point totals and a stake per point, work out who pays whom and each
player's net result, either as a free-for-all (:func:`settle_individual`) or
as a foursome team match over two or three segments (:func:`settle_match`).

The calculators are pure functions of their inputs; parsing and formatting
live in :mod:`dots_payout.io` and :mod:`dots_payout.summary`.
"""

from .aggregate import build_segments, front_back_segments, settle_match
from .data import (
    Hole,
    HoleAwards,
    InvalidInputError,
    MatchResult,
    NetResult,
    Pairing,
    Player,
    Segment,
    Settlement,
    SettlementConfig,
    SettlementResult,
    Team,
    TeamSplit,
)
from .holes import score_hole, tally_segment
from .pairing import resolve_pairing
from .settlement import settle_individual, settle_team_segment

__all__ = [
    "Hole",
    "HoleAwards",
    "InvalidInputError",
    "MatchResult",
    "NetResult",
    "Pairing",
    "Player",
    "Segment",
    "Settlement",
    "SettlementConfig",
    "SettlementResult",
    "Team",
    "TeamSplit",
    "build_segments",
    "front_back_segments",
    "resolve_pairing",
    "score_hole",
    "settle_individual",
    "settle_match",
    "settle_team_segment",
    "tally_segment",
]
