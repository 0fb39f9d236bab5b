"""I/O utilities for building the engine's input snapshots.

This module owns:
- normalising raw text fields into numbers
- plain-record (dict / JSON) parsing and validation
- construction of domain objects from :mod:`dots_payout.data`

The engine itself never parses anything; keeping that here lets the core
calculators stay pure.
"""

from __future__ import annotations

import json
import math
import re
from pathlib import Path
from typing import Any, Iterable, List, Mapping

from .constants import DEFAULT_STAKE
from .data import (
    HOLE_CATEGORIES,
    Hole,
    HoleAwards,
    IndividualGame,
    Player,
    Segment,
    SettlementConfig,
    TeamMatch,
    TeamSplit,
    require_finite,
)
from .holes import tally_segment
from .pairing import parse_pairing


_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(text: Any, *, default: float = 0.0) -> float:
    """Parse a numeric text field the way the scorecard does.

    The leading numeric prefix is used (``"12abc"`` -> 12.0). Empty,
    unparsable or non-finite input becomes ``default``.
    """

    if isinstance(text, bool):
        return default
    if isinstance(text, (int, float)):
        value = float(text)
        return value if math.isfinite(value) else default
    if text is None:
        return default

    m = _LEADING_NUMBER_RE.match(str(text))
    if not m:
        return default

    value = float(m.group(1))
    return value if math.isfinite(value) else default


def parse_team_split(value: str | TeamSplit) -> TeamSplit:
    if isinstance(value, TeamSplit):
        return value
    try:
        return TeamSplit(str(value).strip().lower())
    except ValueError as e:
        raise ValueError(f"Unknown team split: {value!r}") from e


def config_from_record(rec: Mapping[str, Any]) -> SettlementConfig:
    """Build a :class:`SettlementConfig` from a snapshot's top-level fields.

    Missing or null fields fall back to the defaults. A stake that is not a
    finite number raises :class:`~dots_payout.data.InvalidInputError`.
    """

    stake = rec.get("stake_per_point")
    team_split = rec.get("team_split")
    return SettlementConfig(
        stake_per_point=DEFAULT_STAKE if stake is None else require_finite(stake, "stake_per_point"),
        team_split=TeamSplit.SPLIT if team_split is None else parse_team_split(team_split),
        skip_zero_amounts=bool(rec.get("skip_zero_amounts", False)),
    )


def _require_record(rec: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(rec, Mapping):
        raise ValueError(f"{field_name} must be an object, got {rec!r}")
    return rec


def _as_int(value: Any, field_name: str, *, default: int | None) -> int | None:
    """Integer field from JSON; integral floats (``1.0``) are accepted."""

    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, int):
        return value
    raise ValueError(f"{field_name} must be an integer, got {value!r}")


def players_from_records(records: Iterable[Any]) -> tuple[Player, ...]:
    """Convert ``{"name": ..., "points": ...}`` records to players.

    Points pass through :func:`parse_number`, so text input is accepted.
    """

    players: List[Player] = []
    for k, rec in enumerate(records):
        rec = _require_record(rec, f"players[{k}]")
        players.append(Player(name=str(rec.get("name", "")), points=parse_number(rec.get("points"))))
    return tuple(players)


def holes_from_records(records: Iterable[Any]) -> List[Hole]:
    holes: List[Hole] = []
    for k, rec in enumerate(records):
        rec = _require_record(rec, f"holes[{k}]")
        awards = HoleAwards(
            **{name: _as_int(rec.get(name), f"holes[{k}].{name}", default=None) for name in HOLE_CATEGORIES}
        )
        presses = _as_int(rec.get("presses"), f"holes[{k}].presses", default=0)
        holes.append(Hole(awards=awards, presses=presses, roll=bool(rec.get("roll", False))))
    return holes


def segment_from_record(rec: Any, *, default_label: str) -> Segment:
    """Build a :class:`Segment` from a record.

    A segment either states its team totals directly (``team1_points`` /
    ``team2_points``) or lists its ``holes``, which are tallied with
    6-point scoring.
    """

    rec = _require_record(rec, f"Segment {default_label!r}")

    if "pairing" not in rec:
        raise ValueError(f"Segment {default_label!r} is missing 'pairing'")

    if "holes" in rec:
        if "team1_points" in rec or "team2_points" in rec:
            raise ValueError(f"Segment {default_label!r} gives both holes and team points")
        if not isinstance(rec["holes"], list):
            raise ValueError(f"Segment {default_label!r}: 'holes' must be a list")
        team1_points, team2_points = tally_segment(holes_from_records(rec["holes"]))
    else:
        team1_points = parse_number(rec.get("team1_points"))
        team2_points = parse_number(rec.get("team2_points"))

    return Segment(
        label=str(rec.get("label") or default_label),
        pairing=parse_pairing(rec["pairing"]),
        team1_points=team1_points,
        team2_points=team2_points,
    )


def _read_json_object(path: Path) -> Mapping[str, Any]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8-sig"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return raw


def load_individual_game_from_json(path: str | Path) -> IndividualGame:
    """Load a free-for-all snapshot.

    Expected format::

        {"stake_per_point": 0.25,
         "players": [{"name": "Ann", "points": 10}, ...]}
    """

    path = Path(path)
    raw = _read_json_object(path)

    records = raw.get("players")
    if not isinstance(records, list):
        raise ValueError(f"{path}: 'players' must be a JSON list")

    try:
        players = players_from_records(records)
        config = config_from_record(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{path}: {e}") from e

    return IndividualGame(players=players, config=config)


def load_team_match_from_json(path: str | Path) -> TeamMatch:
    """Load a team match snapshot.

    Expected format::

        {"stake_per_point": 0.25,
         "team_split": "split",
         "players": ["Ann", "Bob", "Cat", "Dan"],
         "segments": [
            {"label": "Front 9", "pairing": "12v34", "team1_points": 5, "team2_points": 2},
            {"label": "Back 9", "pairing": "13v24", "holes": [{"low_man": 1, "gir": 2}, ...]}
         ]}
    """

    path = Path(path)
    raw = _read_json_object(path)

    names = raw.get("players")
    if not isinstance(names, list):
        raise ValueError(f"{path}: 'players' must be a JSON list of names")

    seg_records = raw.get("segments")
    if not isinstance(seg_records, list) or not seg_records:
        raise ValueError(f"{path}: 'segments' must be a non-empty JSON list")

    segments: List[Segment] = []
    for k, rec in enumerate(seg_records):
        try:
            segments.append(segment_from_record(rec, default_label=f"Segment {k + 1}"))
        except (TypeError, ValueError) as e:
            raise ValueError(f"{path}: segments[{k}]: {e}") from e

    try:
        config = config_from_record(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{path}: {e}") from e

    return TeamMatch(names=tuple(str(n) for n in names), segments=tuple(segments), config=config)
