"""
events.py — Playback Events
============================
The closed vocabulary the controller speaks to the renderer.  One
`PlaybackController.next()` call produces exactly one of these:

    Wait(duration)                 – timing directive, in seconds
    Reset(data, algorithm_name)    – start over from this permutation
    SwapEvent(swap)                – apply one exchange to the positions

Events are snapshots: frozen, consumed immediately, never stored by
the core.  `to_dict()` gives the JSON shape the web app sends out.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from sortdata import Swap


class EventType(str, Enum):
    WAIT  = "wait"
    RESET = "reset"
    SWAP  = "swap"


@dataclass(frozen=True)
class Wait:
    duration: float

    @property
    def type(self) -> EventType:
        return EventType.WAIT

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "duration": self.duration}


@dataclass(frozen=True)
class Reset:
    data:           Tuple[int, ...]
    algorithm_name: str

    @property
    def type(self) -> EventType:
        return EventType.RESET

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type":           self.type.value,
            "data":           list(self.data),
            "algorithm_name": self.algorithm_name,
        }


@dataclass(frozen=True)
class SwapEvent:
    swap: Swap

    @property
    def type(self) -> EventType:
        return EventType.SWAP

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "a": self.swap.a, "b": self.swap.b}


PlaybackEvent = Union[Wait, Reset, SwapEvent]
