from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict

from .data import MatchResult, SettlementResult


def format_money(amount: float, *, signed: bool = False) -> str:
    """Format a dollar amount to cents: ``$1.00``, ``-$4.00``, ``+$4.00`` (signed)."""

    cents = round(amount * 100)
    sign = "-" if cents < 0 else ("+" if signed and cents > 0 else "")
    return f"{sign}${abs(cents) / 100:.2f}"


def result_to_json_dict(result: SettlementResult | MatchResult) -> Dict[str, Any]:
    # Tuples become lists via json.dumps.
    data = asdict(result)
    data["has_movement"] = result.has_movement
    return data


def dumps_result_pretty(result: SettlementResult | MatchResult) -> str:
    return json.dumps(result_to_json_dict(result), indent=2, sort_keys=False)
