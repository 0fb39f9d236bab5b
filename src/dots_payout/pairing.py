"""Resolve a pairing selection into two team rosters."""

from __future__ import annotations

from typing import Sequence

from .constants import TEAM_GAME_PLAYER_COUNT
from .data import Pairing, Team


def team_label(names: Sequence[str], player_indices: Sequence[int]) -> str:
    """Human-readable team label, e.g. ``"Ann & Bob"``."""

    return " & ".join(names[i] for i in player_indices)


def parse_pairing(value: str | Pairing) -> Pairing:
    """Parse a pairing selector.

    Accepts the enum value (``"13v24"``), the member name (``"ONE_THREE"``,
    case-insensitive) or a :class:`Pairing` instance.
    """

    if isinstance(value, Pairing):
        return value

    v = str(value).strip()
    try:
        return Pairing(v.lower())
    except ValueError:
        pass

    try:
        return Pairing[v.upper()]
    except KeyError as e:
        raise ValueError(f"Unknown pairing: {value!r}") from e


def resolve_pairing(names: Sequence[str], pairing: Pairing) -> tuple[Team, Team]:
    """Return (team 1, team 2) for a foursome under ``pairing``.

    Raises
    ------
    ValueError
        If ``names`` does not hold exactly four players.
    """

    if len(names) != TEAM_GAME_PLAYER_COUNT:
        raise ValueError(f"Pairings need exactly {TEAM_GAME_PLAYER_COUNT} players, got {len(names)}")

    slots1, slots2 = parse_pairing(pairing).team_slots
    return (
        Team(player_indices=slots1, label=team_label(names, slots1)),
        Team(player_indices=slots2, label=team_label(names, slots2)),
    )
