# pathlab/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

Cell = Tuple[int, int]  # (row, col)

# Run states: "idle" -> "running" -> "succeeded" | "exhausted"
IDLE = "idle"
RUNNING = "running"
SUCCEEDED = "succeeded"
EXHAUSTED = "exhausted"
TERMINAL = (SUCCEEDED, EXHAUSTED)


class CellKind(IntEnum):
    EMPTY = 0
    WALL = 1
    START = 2
    END = 3


@dataclass(frozen=True)
class StepSnapshot:
    status: str                                 # one of the run states above
    visited: FrozenSet[Cell] = frozenset()
    frontier: Tuple[Cell, ...] = ()
    current: Optional[Cell] = None
    opened: Tuple[Cell, ...] = ()               # cells discovered by this step
    path: Optional[List[Cell]] = None           # only set on "succeeded"
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.status in TERMINAL


@dataclass(frozen=True)
class Outcome:
    status: str                                 # "succeeded" | "exhausted"
    path: List[Cell] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.status == SUCCEEDED
