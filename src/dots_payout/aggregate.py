"""Multi-segment team matches.

A match is a foursome playing two segments (front 9 / back 9) or three
(holes 1-6 / 7-12 / 13-18). Each segment has its own pairing and is settled
independently by :func:`dots_payout.settlement.settle_team_segment`; this
module adds the per-segment nets up into one table.

Nothing is cached: every call recomputes the whole match from the snapshot it
is given.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .constants import FRONT_BACK_LABELS, SIXES_LABELS, SUPPORTED_SEGMENT_COUNTS
from .data import (
    MatchResult,
    NetResult,
    Pairing,
    Segment,
    SegmentSettlement,
    Settlement,
    SettlementConfig,
    TeamPoints,
)
from .pairing import resolve_pairing
from .settlement import settle_team_segment, sort_net_results

logger = logging.getLogger(__name__)


def default_segment_labels(segment_count: int) -> tuple[str, ...]:
    """Standard labels for a 2-segment (nines) or 3-segment (sixes) match."""

    if segment_count == 2:
        return FRONT_BACK_LABELS
    if segment_count == 3:
        return SIXES_LABELS
    raise ValueError(f"Unsupported segment count {segment_count}; expected one of {SUPPORTED_SEGMENT_COUNTS}")


def build_segments(
    *,
    team_points: Sequence[TeamPoints],
    pairings: Sequence[Pairing],
    labels: Sequence[str] | None = None,
) -> List[Segment]:
    """Zip per-segment points and pairings into :class:`Segment` objects."""

    if len(team_points) != len(pairings):
        raise ValueError(f"Got {len(team_points)} point pairs but {len(pairings)} pairings")

    seg_labels = tuple(labels) if labels is not None else default_segment_labels(len(team_points))
    if len(seg_labels) != len(team_points):
        raise ValueError(f"Got {len(seg_labels)} labels for {len(team_points)} segments")

    return [
        Segment(label=label, pairing=pairing, team1_points=t1, team2_points=t2)
        for label, pairing, (t1, t2) in zip(seg_labels, pairings, team_points)
    ]


def front_back_segments(
    *,
    front: TeamPoints,
    back: TeamPoints,
    pairing: Pairing = Pairing.ONE_TWO,
) -> List[Segment]:
    """Fixed-teams front/back match: the same pairing for both nines."""

    return build_segments(team_points=(front, back), pairings=(pairing, pairing), labels=FRONT_BACK_LABELS)


def _validate_segments(segments: Sequence[Segment]) -> None:
    if len(segments) not in SUPPORTED_SEGMENT_COUNTS:
        raise ValueError(f"A match has {SUPPORTED_SEGMENT_COUNTS} segments, got {len(segments)}")

    labels = [s.label for s in segments]
    if len(set(labels)) != len(labels):
        raise ValueError(f"Segment labels must be unique, got {labels}")


def settle_match(
    names: Sequence[str],
    segments: Sequence[Segment],
    *,
    config: SettlementConfig | None = None,
) -> MatchResult:
    """Settle every segment of a foursome match and net the results.

    Parameters
    ----------
    names:
        The four players in roster order. Slots, not names, identify players.
    segments:
        Two or three segments, each with its own pairing and team totals.
    config:
        Stake and itemisation rules applied to every segment.

    Returns
    -------
    MatchResult
        Settlements in segment order (each tagged with its segment label) and
        one :class:`NetResult` per player with a per-segment breakdown, sorted
        by grand total descending (ties keep roster order).
    """

    cfg = config if config is not None else SettlementConfig()
    roster = tuple(names)

    _validate_segments(segments)

    per_segment: List[SegmentSettlement] = []
    for k, seg in enumerate(segments):
        team1, team2 = resolve_pairing(roster, seg.pairing)
        per_segment.append(
            settle_team_segment(
                team1=team1,
                team2=team2,
                team1_points=seg.team1_points,
                team2_points=seg.team2_points,
                names=roster,
                config=cfg,
                segment_label=seg.label,
                field_prefix=f"segments[{k}]",
            )
        )

    settlements: List[Settlement] = []
    for seg_result in per_segment:
        settlements.extend(seg_result.settlements)

    net_results = []
    for i, name in enumerate(roster):
        breakdown = tuple(seg_result.nets[i] for seg_result in per_segment)
        net_results.append(NetResult(player_index=i, name=name, total=sum(breakdown), per_segment=breakdown))

    logger.debug(
        "Settled %d-segment match at stake %s (%s): %d settlements",
        len(segments),
        cfg.stake_per_point,
        cfg.team_split.value,
        len(settlements),
    )

    return MatchResult(
        settlements=tuple(settlements),
        net_results=sort_net_results(net_results),
        segment_labels=tuple(s.label for s in segments),
        teams=tuple((r.team1, r.team2) for r in per_segment),
    )
