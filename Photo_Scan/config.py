from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from .models import Scenario


def _scenarios(keys: Iterable[Scenario]) -> FrozenSet[Scenario]:
    return frozenset(keys)


@dataclass(frozen=True)
class PinLimits:
    default_max: int = 4
    high_density_max: int = 6
    high_density_scenarios: FrozenSet[Scenario] = field(
        default_factory=lambda: _scenarios((Scenario.BED_OVERVIEW, Scenario.MATTRESS_SEAMS, Scenario.BED_SKIRT))
    )
    # Show one pin and ask the user to repeat it on the remaining corners.
    single_corner_scenarios: FrozenSet[Scenario] = field(default_factory=lambda: _scenarios((Scenario.MATTRESS_SEAMS,)))
    # Unknown step keys containing one of these get the high-density cap.
    high_density_markers: Tuple[str, ...] = ("BED", "MATTRESS")

    def __post_init__(self) -> None:
        if self.default_max < 1:
            raise ValueError("default_max must be >= 1")
        if self.high_density_max < self.default_max:
            raise ValueError("high_density_max must be >= default_max")

    def max_pins(self, scenario: Any, key: Optional[str] = None) -> int:
        if scenario in self.high_density_scenarios:
            return self.high_density_max
        if scenario is None and key and any(marker in key for marker in self.high_density_markers):
            return self.high_density_max
        return self.default_max

    def is_single_corner(self, scenario: Any) -> bool:
        return scenario in self.single_corner_scenarios


def _parse_scenarios(value: Any, key: str) -> FrozenSet[Scenario]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{key} must be a list of scenario keys")
    parsed = []
    for item in value:
        scenario = Scenario.parse(item)
        if scenario is None:
            raise ValueError(f"{key} contains unknown scenario: {item!r}")
        parsed.append(scenario)
    return frozenset(parsed)


def load_pin_limits(path: Path) -> PinLimits:
    if not path.exists():
        raise FileNotFoundError(f"Pin limits not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid pin limits JSON: {path}") from exc
    if not isinstance(payload, dict):
        raise ValueError("Pin limits must be a JSON object")

    int_keys = {"default_max", "high_density_max"}
    set_keys = {"high_density_scenarios", "single_corner_scenarios"}
    unknown = sorted(set(payload.keys()) - int_keys - set_keys - {"high_density_markers"})
    if unknown:
        raise ValueError(f"Unknown pin limits keys: {unknown}")

    kwargs: Dict[str, Any] = {}
    for key, value in payload.items():
        if key in int_keys:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{key} must be an integer")
            kwargs[key] = value
        elif key in set_keys:
            kwargs[key] = _parse_scenarios(value, key)
        else:
            if not isinstance(value, list) or not all(isinstance(item, str) and item for item in value):
                raise ValueError(f"{key} must be a list of non-empty strings")
            kwargs[key] = tuple(value)
    return PinLimits(**kwargs)
