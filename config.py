"""
config.py — Playback Configuration
====================================
Every knob the app exposes, with defaults that match the classic
visualizer: 100 bars, 80 ms between swaps, 3 s intermissions.

    cfg = load_config("playback.json", overrides={"data_count": 40})

The JSON file (optional) and the overrides dict both use the field
names below.  Unknown keys are rejected so typos don't pass silently.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from engine.controller import INTERMISSION_DURATION, STEP_DURATION
from engine.pacer import SPEED_PRESETS


@dataclass
class PlaybackConfig:
    data_count:     int           = 100
    max_data_count: int           = 500
    step_duration:  float         = STEP_DURATION
    intermission:   float         = INTERMISSION_DURATION
    speed:          str           = "normal"
    seed:           Optional[int] = None
    host:           str           = "127.0.0.1"
    port:           int           = 5000
    debug:          bool          = False

    def validate(self) -> "PlaybackConfig":
        if not _is_int(self.max_data_count) or self.max_data_count < 0:
            raise ValueError(f"max_data_count must be a non-negative integer, got {self.max_data_count!r}")
        self.check_data_count(self.data_count)
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if not all(_is_number(v) for v in (self.step_duration, self.intermission)):
            raise ValueError("Durations must be numbers")
        if self.step_duration <= 0 or self.intermission <= 0:
            raise ValueError("Durations must be positive")
        if self.speed not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {self.speed}")
        return self

    def check_data_count(self, count: Any) -> int:
        """Reject element counts that are not ints in 0..max_data_count."""
        if not _is_int(count) or count < 0:
            raise ValueError(f"data_count must be a non-negative integer, got {count!r}")
        if count > self.max_data_count:
            raise ValueError(f"data_count {count} exceeds the limit of {self.max_data_count}")
        return count

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> PlaybackConfig:
    """Defaults, then the JSON file at `path`, then non-None `overrides`."""
    values: Dict[str, Any] = {}
    if path is not None:
        with open(path, "r", encoding="utf-8") as fh:
            values.update(json.load(fh))
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(PlaybackConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(unknown)}")

    return PlaybackConfig(**values).validate()
