from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure src/ is importable when pytest runs without the package installed.
_SRC = Path(__file__).resolve().parents[1] / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from dots_payout.data import Player, SettlementConfig  # noqa: E402


@pytest.fixture
def foursome() -> tuple[str, ...]:
    return ("Ann", "Bob", "Cat", "Dan")


@pytest.fixture
def example_players() -> list[Player]:
    return [Player("A", 10), Player("B", 6), Player("C", 6), Player("D", 2)]


@pytest.fixture
def quarter_stake() -> SettlementConfig:
    return SettlementConfig(stake_per_point=0.25)
