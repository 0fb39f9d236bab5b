from __future__ import annotations

import json
from pathlib import Path

import pytest

from dots_payout.data import InvalidInputError, Pairing, Player, TeamSplit
from dots_payout.io import (
    config_from_record,
    load_individual_game_from_json,
    load_team_match_from_json,
    parse_number,
    parse_team_split,
    players_from_records,
    segment_from_record,
)


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("12", 12.0),
        ("  3.5", 3.5),
        ("-2", -2.0),
        (".75", 0.75),
        ("12abc", 12.0),
        ("1e2", 100.0),
        ("", 0.0),
        ("abc", 0.0),
        ("-", 0.0),
        (None, 0.0),
        (7, 7.0),
        (float("nan"), 0.0),
        ("1e999", 0.0),
    ],
)
def test_parse_number(text, expected: float) -> None:
    assert parse_number(text) == expected


def test_parse_number_custom_default() -> None:
    assert parse_number("??", default=0.25) == 0.25


def test_parse_team_split() -> None:
    assert parse_team_split("Undivided") is TeamSplit.UNDIVIDED
    assert parse_team_split(TeamSplit.SPLIT) is TeamSplit.SPLIT
    with pytest.raises(ValueError):
        parse_team_split("halves")


def test_config_from_record_defaults() -> None:
    cfg = config_from_record({})
    assert cfg.stake_per_point == 0.25
    assert cfg.team_split is TeamSplit.SPLIT
    assert cfg.skip_zero_amounts is False


def test_config_from_record_rejects_non_finite_stake() -> None:
    with pytest.raises(InvalidInputError) as ei:
        config_from_record({"stake_per_point": float("nan")})
    assert ei.value.field == "stake_per_point"


def test_players_from_records_normalises_text_points() -> None:
    players = players_from_records([{"name": "Ann", "points": "4.5"}, {"name": "Bob", "points": "x"}, {"name": "Cat"}])
    assert players == (Player("Ann", 4.5), Player("Bob", 0.0), Player("Cat", 0.0))


def test_segment_from_record_with_points() -> None:
    seg = segment_from_record({"pairing": "14v23", "team1_points": "3", "team2_points": 1}, default_label="Segment 1")
    assert seg.label == "Segment 1"
    assert seg.pairing is Pairing.ONE_FOUR
    assert (seg.team1_points, seg.team2_points) == (3.0, 1.0)


def test_segment_from_record_with_holes() -> None:
    seg = segment_from_record(
        {
            "label": "Back 9",
            "pairing": "12v34",
            "holes": [
                {"low_man": 1, "low_team": 1, "gir": 1, "birdie": 1},
                {"low_team": 2, "presses": 1},
            ],
        },
        default_label="Segment 2",
    )
    assert seg.label == "Back 9"
    assert (seg.team1_points, seg.team2_points) == (12.0, 4.0)


def test_segment_from_record_requires_pairing() -> None:
    with pytest.raises(ValueError, match="pairing"):
        segment_from_record({"team1_points": 1}, default_label="Front 9")


def test_segment_from_record_rejects_holes_and_points() -> None:
    with pytest.raises(ValueError, match="both"):
        segment_from_record({"pairing": "12v34", "holes": [], "team1_points": 1}, default_label="Front 9")


def test_load_individual_game_from_json(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "game.json",
        {"stake_per_point": 0.5, "players": [{"name": "A", "points": 3}, {"name": "B", "points": 1}]},
    )
    game = load_individual_game_from_json(path)
    assert game.players == (Player("A", 3.0), Player("B", 1.0))
    assert game.config.stake_per_point == 0.5


def test_load_individual_game_requires_player_list(tmp_path: Path) -> None:
    path = _write(tmp_path / "game.json", {"players": {"A": 1}})
    with pytest.raises(ValueError, match="players"):
        load_individual_game_from_json(path)


def test_load_rejects_non_object_and_bad_json(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="JSON object"):
        load_individual_game_from_json(_write(tmp_path / "list.json", []))

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        load_team_match_from_json(bad)


def test_load_team_match_from_json(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "match.json",
        {
            "team_split": "undivided",
            "players": ["Ann", "Bob", "Cat", "Dan"],
            "segments": [
                {"label": "Front 9", "pairing": "12v34", "team1_points": 5, "team2_points": 2},
                {"pairing": "13v24", "team1_points": 0, "team2_points": 4},
            ],
        },
    )
    match = load_team_match_from_json(path)

    assert match.names == ("Ann", "Bob", "Cat", "Dan")
    assert [s.label for s in match.segments] == ["Front 9", "Segment 2"]
    assert match.segments[1].pairing is Pairing.ONE_THREE
    assert match.config.team_split is TeamSplit.UNDIVIDED
    assert match.config.stake_per_point == 0.25


def test_load_team_match_requires_segments(tmp_path: Path) -> None:
    path = _write(tmp_path / "match.json", {"players": ["A", "B", "C", "D"], "segments": []})
    with pytest.raises(ValueError, match="segments"):
        load_team_match_from_json(path)


def test_null_stake_falls_back_to_default(tmp_path: Path) -> None:
    path = _write(tmp_path / "game.json", {"stake_per_point": None, "players": []})
    assert load_individual_game_from_json(path).config.stake_per_point == 0.25


def test_text_stake_is_accepted_when_numeric(tmp_path: Path) -> None:
    path = _write(tmp_path / "game.json", {"stake_per_point": "0.5", "players": []})
    assert load_individual_game_from_json(path).config.stake_per_point == 0.5


def test_unparsable_stake_names_the_file(tmp_path: Path) -> None:
    path = _write(tmp_path / "game.json", {"stake_per_point": "0.5abc", "players": []})
    with pytest.raises(ValueError) as ei:
        load_individual_game_from_json(path)

    assert str(path) in str(ei.value)
    assert "stake_per_point" in str(ei.value)
    assert isinstance(ei.value.__cause__, InvalidInputError)


def test_non_object_player_record_names_file_and_index(tmp_path: Path) -> None:
    path = _write(tmp_path / "game.json", {"players": [{"name": "Bob", "points": 1}, "Ann"]})
    with pytest.raises(ValueError) as ei:
        load_individual_game_from_json(path)

    assert str(path) in str(ei.value)
    assert "players[1]" in str(ei.value)


def _match_payload(segment: object) -> dict[str, object]:
    return {"players": ["Ann", "Bob", "Cat", "Dan"], "segments": [segment]}


def test_non_object_segment_record_names_file_and_index(tmp_path: Path) -> None:
    path = _write(tmp_path / "match.json", _match_payload("Front 9"))
    with pytest.raises(ValueError) as ei:
        load_team_match_from_json(path)

    assert str(path) in str(ei.value)
    assert "segments[0]" in str(ei.value)


def test_non_object_hole_record_names_segment_and_hole(tmp_path: Path) -> None:
    path = _write(tmp_path / "match.json", _match_payload({"pairing": "12v34", "holes": [{"gir": 1}, 3]}))
    with pytest.raises(ValueError) as ei:
        load_team_match_from_json(path)

    assert "segments[0]" in str(ei.value)
    assert "holes[1]" in str(ei.value)


def test_integral_float_awards_and_null_presses_are_accepted() -> None:
    seg = segment_from_record(
        {"pairing": "12v34", "holes": [{"low_man": 1.0, "gir": 2.0, "presses": None}]},
        default_label="Segment 1",
    )
    assert (seg.team1_points, seg.team2_points) == (2.0, 1.0)


@pytest.mark.parametrize(
    ("hole", "field_name"),
    [
        ({"low_man": 1.5}, "holes[0].low_man"),
        ({"birdie": True}, "holes[0].birdie"),
        ({"gir": "1"}, "holes[0].gir"),
        ({"presses": 0.5}, "holes[0].presses"),
    ],
)
def test_bad_hole_values_name_the_field(tmp_path: Path, hole: dict[str, object], field_name: str) -> None:
    path = _write(tmp_path / "match.json", _match_payload({"pairing": "12v34", "holes": [hole]}))
    with pytest.raises(ValueError) as ei:
        load_team_match_from_json(path)

    assert str(path) in str(ei.value)
    assert field_name in str(ei.value)


def test_segment_holes_must_be_a_list() -> None:
    with pytest.raises(ValueError, match="must be a list"):
        segment_from_record({"pairing": "12v34", "holes": {"low_man": 1}}, default_label="Front 9")
