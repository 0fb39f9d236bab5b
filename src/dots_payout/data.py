"""Domain data model for Dots / 6-Point Scotch payouts.

This module is intentionally *pure*: it defines the enums and dataclasses used
throughout the project, with no dependency on input formats or presentation.

Settlement logic lives in :mod:`dots_payout.settlement` and
:mod:`dots_payout.aggregate`; parsing lives in :mod:`dots_payout.io`.

Players are identified by their position in the caller's roster (an integer
index). Names are carried along for display only, so two players sharing a
name never share a balance.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .constants import DEFAULT_STAKE


class InvalidInputError(ValueError):
    """A numeric input the engine refuses to settle (NaN or infinite)."""

    def __init__(self, field_name: str, value: object) -> None:
        super().__init__(f"{field_name} must be a finite number, got {value!r}")
        self.field = field_name
        self.value = value


def require_finite(value: float, field_name: str) -> float:
    """Return ``value`` as a float, raising :class:`InvalidInputError` if non-finite."""

    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(field_name, value) from e
    if not math.isfinite(number):
        raise InvalidInputError(field_name, value)
    return number


class Pairing(str, Enum):
    """How a foursome splits into two teams, named by player 1's partner."""

    ONE_TWO = "12v34"
    ONE_THREE = "13v24"
    ONE_FOUR = "14v23"

    @property
    def team_slots(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Zero-based roster slots for (team 1, team 2)."""

        return _PAIRING_SLOTS[self]


_PAIRING_SLOTS = {
    Pairing.ONE_TWO: ((0, 1), (2, 3)),
    Pairing.ONE_THREE: ((0, 2), (1, 3)),
    Pairing.ONE_FOUR: ((0, 3), (1, 2)),
}


class TeamSplit(str, Enum):
    """How a losing player's team obligation is itemised.

    SPLIT: each loser's obligation is divided evenly across the opposing
    players, one settlement per (loser, winner) pair.

    UNDIVIDED: no itemised settlements are emitted for team segments; each
    player's full obligation or credit only appears in their net result.
    """

    SPLIT = "split"
    UNDIVIDED = "undivided"


@dataclass(frozen=True, slots=True)
class Player:
    """A named player with a cumulative point total (individual mode)."""

    name: str
    points: float = 0.0


@dataclass(frozen=True, slots=True)
class Team:
    """Roster slots playing together for one segment."""

    player_indices: tuple[int, ...]
    label: str = ""

    def __post_init__(self) -> None:
        if not self.player_indices:
            raise ValueError("Team.player_indices cannot be empty")
        if len(set(self.player_indices)) != len(self.player_indices):
            raise ValueError(f"Team.player_indices contains duplicates: {self.player_indices}")
        if any(i < 0 for i in self.player_indices):
            raise ValueError("Team.player_indices must be >= 0")

    def __len__(self) -> int:
        return len(self.player_indices)


@dataclass(frozen=True, slots=True)
class Segment:
    """One independently scored stretch of holes."""

    label: str
    pairing: Pairing
    team1_points: float = 0.0
    team2_points: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.pairing, Pairing):
            raise ValueError(f"Segment.pairing must be a Pairing, got {self.pairing!r}")

    @property
    def point_diff(self) -> float:
        return abs(self.team1_points - self.team2_points)


@dataclass(frozen=True, slots=True)
class SettlementConfig:
    """Settlement rules shared by every segment of one calculation.

    A negative stake is accepted and reverses who pays whom; settlement
    amounts are always reported as non-negative.
    """

    stake_per_point: float = DEFAULT_STAKE
    team_split: TeamSplit = TeamSplit.SPLIT

    # List a settlement even when stake makes its amount 0.
    skip_zero_amounts: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "stake_per_point", require_finite(self.stake_per_point, "stake_per_point"))
        if not isinstance(self.team_split, TeamSplit):
            raise ValueError(f"SettlementConfig.team_split must be a TeamSplit, got {self.team_split!r}")


@dataclass(frozen=True, slots=True)
class Settlement:
    """A directed payment from one player to another."""

    payer_index: int
    payer: str
    payee_index: int
    payee: str
    amount: float
    point_diff: float
    segment_label: Optional[str] = None


@dataclass(frozen=True, slots=True)
class NetResult:
    """A player's signed balance: positive receives, negative pays."""

    player_index: int
    name: str
    total: float
    per_segment: tuple[float, ...] = ()

    # Point total in individual mode; team modes score teams, not players.
    points: Optional[float] = None


@dataclass(frozen=True, slots=True)
class SettlementResult:
    """Output of an individual (free-for-all) calculation."""

    settlements: tuple[Settlement, ...]
    net_results: tuple[NetResult, ...]
    total_points: float = 0.0

    @property
    def has_movement(self) -> bool:
        """True if any player's net is non-zero."""

        return any(r.total != 0 for r in self.net_results)


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Output of a multi-segment team match."""

    settlements: tuple[Settlement, ...]
    net_results: tuple[NetResult, ...]
    segment_labels: tuple[str, ...]

    # Per segment: (team 1, team 2) as resolved from the segment's pairing.
    teams: tuple[tuple[Team, Team], ...] = field(default_factory=tuple)

    def settlements_for(self, segment_label: str) -> tuple[Settlement, ...]:
        return tuple(s for s in self.settlements if s.segment_label == segment_label)

    @property
    def has_movement(self) -> bool:
        return any(r.total != 0 for r in self.net_results)


# Scoring categories on a hole, in the order they are tallied.
HOLE_CATEGORIES: tuple[str, ...] = ("low_man", "low_team", "gir", "birdie")


@dataclass(frozen=True, slots=True)
class HoleAwards:
    """Which team (1 or 2) took each 6-point category on a hole.

    ``None`` means the category was halved or nobody earned it.
    """

    low_man: Optional[int] = None
    low_team: Optional[int] = None
    gir: Optional[int] = None
    birdie: Optional[int] = None

    def __post_init__(self) -> None:
        for name in HOLE_CATEGORIES:
            winner = getattr(self, name)
            if winner is not None and (type(winner) is not int or winner not in (1, 2)):
                raise ValueError(f"HoleAwards.{name} must be 1, 2 or None, got {winner!r}")


@dataclass(frozen=True, slots=True)
class Hole:
    """A played hole: its awards plus any press or roll called on it."""

    awards: HoleAwards
    # Presses called before teeing off; each doubles this and every later hole.
    presses: int = 0
    roll: bool = False

    def __post_init__(self) -> None:
        if type(self.presses) is not int or self.presses < 0:
            raise ValueError(f"Hole.presses must be an integer >= 0, got {self.presses!r}")


# (team 1, team 2) point totals for one segment.
TeamPoints = tuple[float, float]


@dataclass(frozen=True, slots=True)
class SegmentSettlement:
    """Settlements and per-player net changes for a single segment.

    ``nets`` is indexed by roster slot; players not in either team hold 0.
    """

    label: Optional[str]
    team1: Team
    team2: Team
    settlements: tuple[Settlement, ...]
    nets: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class IndividualGame:
    """Input snapshot for a free-for-all calculation."""

    players: tuple[Player, ...]
    config: SettlementConfig = field(default_factory=SettlementConfig)


@dataclass(frozen=True, slots=True)
class TeamMatch:
    """Input snapshot for a foursome team match."""

    names: tuple[str, ...]
    segments: tuple[Segment, ...]
    config: SettlementConfig = field(default_factory=SettlementConfig)
