from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from .aggregate import settle_match
from .constants import DEFAULT_PLAYER_NAMES, DEFAULT_STAKE
from .data import IndividualGame, MatchResult, Player, SettlementConfig, SettlementResult
from .io import load_individual_game_from_json, load_team_match_from_json
from .settlement import settle_individual


def configure_logging(*, level: int = logging.INFO) -> None:
    """Configure a simple root logger that writes to stderr.

    This is safe to call multiple times.
    """

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
    else:
        root.setLevel(level)


logger = logging.getLogger(__name__)


def build_default_players(*, names: Sequence[str] = DEFAULT_PLAYER_NAMES) -> tuple[Player, ...]:
    """A fresh scorecard: every player on 0 points."""

    return tuple(Player(name=name, points=0.0) for name in names)


def build_default_game(*, stake_per_point: float = DEFAULT_STAKE) -> IndividualGame:
    """The snapshot a reset scorecard starts from."""

    return IndividualGame(players=build_default_players(), config=SettlementConfig(stake_per_point=stake_per_point))


def settle_individual_from_json(
    path: str | Path,
    *,
    log_level: int | None = logging.INFO,
) -> SettlementResult:
    """Load a free-for-all snapshot from JSON and settle it."""

    if log_level is not None:
        configure_logging(level=log_level)

    logger.info("Loading individual game from JSON: %s", path)
    game = load_individual_game_from_json(path)
    logger.info("Loaded %d players (stake_per_point=%s)", len(game.players), game.config.stake_per_point)

    result = settle_individual(game.players, config=game.config)
    logger.info("Settlements: %d, total points: %s", len(result.settlements), result.total_points)
    return result


def settle_match_from_json(
    path: str | Path,
    *,
    log_level: int | None = logging.INFO,
) -> MatchResult:
    """Load a team match snapshot from JSON and settle it."""

    if log_level is not None:
        configure_logging(level=log_level)

    logger.info("Loading team match from JSON: %s", path)
    match = load_team_match_from_json(path)
    logger.info(
        "Loaded %d players, %d segments (stake_per_point=%s, team_split=%s)",
        len(match.names),
        len(match.segments),
        match.config.stake_per_point,
        match.config.team_split.value,
    )

    result = settle_match(match.names, match.segments, config=match.config)
    for label in result.segment_labels:
        logger.info("  %s: %d settlements", label, len(result.settlements_for(label)))
    return result
