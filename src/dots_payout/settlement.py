"""Settlement calculators.

Every game mode reduces to the same step: two sides with a point total each.
The side with fewer points pays the side with more points
``abs(diff) * stake_per_point`` per losing player. Individual mode runs that
step for every pair of players (teams of one); team modes run it once per
segment for the two teams of that segment.

Key behaviour
-------------
- Direction is decided by comparing raw point totals. Equal totals (exact
  float equality, no tolerance) settle nothing.
- No rounding is applied; cents are a presentation concern
  (:func:`dots_payout.summary.format_money`).
- Inputs are never mutated and outputs are fresh tuples, so a caller holding a
  previous result is unaffected by later input changes.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .data import (
    NetResult,
    Player,
    SegmentSettlement,
    Settlement,
    SettlementConfig,
    SettlementResult,
    Team,
    TeamSplit,
    require_finite,
)

logger = logging.getLogger(__name__)


def _settle_sides(
    *,
    winners: Sequence[int],
    losers: Sequence[int],
    obligation: float,
    point_diff: float,
    names: Sequence[str],
    team_split: TeamSplit,
    skip_zero_amounts: bool,
    segment_label: str | None,
) -> List[Settlement]:
    """Itemise ``obligation`` from each loser across the winners."""

    if team_split is TeamSplit.UNDIVIDED:
        return []

    amount = obligation / len(winners)
    if skip_zero_amounts and amount == 0:
        return []

    return [
        Settlement(
            payer_index=loser,
            payer=names[loser],
            payee_index=winner,
            payee=names[winner],
            amount=amount,
            point_diff=point_diff,
            segment_label=segment_label,
        )
        for loser in losers
        for winner in winners
    ]


def settle_contest(
    *,
    side1: Sequence[int],
    side2: Sequence[int],
    points1: float,
    points2: float,
    names: Sequence[str],
    stake_per_point: float,
    team_split: TeamSplit = TeamSplit.SPLIT,
    skip_zero_amounts: bool = False,
    segment_label: str | None = None,
) -> tuple[List[Settlement], dict[int, float]]:
    """Settle one head-to-head between two equally sized sides.

    Returns
    -------
    (settlements, net_changes)
        ``net_changes`` maps each participating roster slot to its signed
        change: ``+abs(diff) * stake`` for every winner and
        ``-abs(diff) * stake`` for every loser. The split setting only changes
        how the loser's total is itemised, never the net.
    """

    if not side1 or not side2:
        raise ValueError("Both sides of a contest need at least one player")
    if len(side1) != len(side2):
        raise ValueError(f"Sides must be the same size to conserve money, got {len(side1)} and {len(side2)}")
    if set(side1) & set(side2):
        raise ValueError("A player cannot be on both sides of a contest")

    net_changes = {i: 0.0 for i in (*side1, *side2)}

    if points1 == points2:
        return [], net_changes

    if points1 > points2:
        winners, losers = side1, side2
    else:
        winners, losers = side2, side1

    point_diff = abs(points1 - points2)
    obligation = point_diff * stake_per_point

    # A negative stake rewards the lower total.
    if obligation < 0:
        winners, losers = losers, winners
        obligation = -obligation

    for w in winners:
        net_changes[w] += obligation
    for lo in losers:
        net_changes[lo] -= obligation

    settlements = _settle_sides(
        winners=winners,
        losers=losers,
        obligation=obligation,
        point_diff=point_diff,
        names=names,
        team_split=team_split,
        skip_zero_amounts=skip_zero_amounts,
        segment_label=segment_label,
    )
    return settlements, net_changes


def sort_net_results(results: Sequence[NetResult]) -> tuple[NetResult, ...]:
    """Order by total descending; ties keep roster order (stable sort)."""

    return tuple(sorted(results, key=lambda r: -r.total))


def settle_individual(
    players: Sequence[Player],
    *,
    config: SettlementConfig | None = None,
) -> SettlementResult:
    """Free-for-all: every player settles with every other player.

    For each unordered pair the player with fewer points pays the other
    ``abs(points_i - points_j) * stake_per_point``. Settlements are listed in
    pair order (i < j, roster order).
    """

    cfg = config if config is not None else SettlementConfig()

    points = [require_finite(p.points, f"players[{i}].points") for i, p in enumerate(players)]
    names = [p.name for p in players]

    nets = [0.0] * len(players)
    settlements: List[Settlement] = []

    for i in range(len(players)):
        for j in range(i + 1, len(players)):
            pair_settlements, changes = settle_contest(
                side1=(i,),
                side2=(j,),
                points1=points[i],
                points2=points[j],
                names=names,
                stake_per_point=cfg.stake_per_point,
                # A pair is two teams of one; itemising is always a single edge.
                team_split=TeamSplit.SPLIT,
                skip_zero_amounts=cfg.skip_zero_amounts,
            )
            settlements.extend(pair_settlements)
            for idx, change in changes.items():
                nets[idx] += change

    net_results = sort_net_results(
        [
            NetResult(player_index=i, name=names[i], total=nets[i], points=points[i])
            for i in range(len(players))
        ]
    )

    logger.debug(
        "Settled %d players at stake %s: %d settlements",
        len(players),
        cfg.stake_per_point,
        len(settlements),
    )

    return SettlementResult(
        settlements=tuple(settlements),
        net_results=net_results,
        total_points=sum(points),
    )


def settle_team_segment(
    *,
    team1: Team,
    team2: Team,
    team1_points: float,
    team2_points: float,
    names: Sequence[str],
    config: SettlementConfig | None = None,
    segment_label: str | None = None,
    field_prefix: str = "segment",
) -> SegmentSettlement:
    """Settle one segment between two teams.

    Every player on the losing team owes ``abs(diff) * stake_per_point``.
    With :attr:`TeamSplit.SPLIT` that obligation is divided evenly across the
    winning players, one settlement per (loser, winner) pair; with
    :attr:`TeamSplit.UNDIVIDED` no settlements are itemised. Nets are the same
    either way.

    Non-finite team points raise :class:`~dots_payout.data.InvalidInputError`
    naming ``<field_prefix>.team1_points`` (e.g. ``segments[1].team1_points``
    when called from :func:`dots_payout.aggregate.settle_match`).
    """

    cfg = config if config is not None else SettlementConfig()

    p1 = require_finite(team1_points, f"{field_prefix}.team1_points")
    p2 = require_finite(team2_points, f"{field_prefix}.team2_points")

    for team in (team1, team2):
        for idx in team.player_indices:
            if idx >= len(names):
                raise ValueError(f"Team slot {idx} is outside a roster of {len(names)} players")

    settlements, changes = settle_contest(
        side1=team1.player_indices,
        side2=team2.player_indices,
        points1=p1,
        points2=p2,
        names=names,
        stake_per_point=cfg.stake_per_point,
        team_split=cfg.team_split,
        skip_zero_amounts=cfg.skip_zero_amounts,
        segment_label=segment_label,
    )

    nets = [0.0] * len(names)
    for idx, change in changes.items():
        nets[idx] += change

    return SegmentSettlement(
        label=segment_label,
        team1=team1,
        team2=team2,
        settlements=tuple(settlements),
        nets=tuple(nets),
    )
