# worksheet/scan.py
# Early exit from a loop over a fixed sequence.
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional

PRIME_LIST = (1, 2, 3, 5, 7, 11)
PRIME_SENTINEL = 7


class ScanState(enum.Enum):
    SCANNING = "scanning"
    STOPPED = "stopped"


@dataclass
class ScanResult:
    emitted: List[Any] = field(default_factory=list)
    state: ScanState = ScanState.SCANNING
    hit_sentinel: bool = False

    def to_receipt(self) -> dict:
        return {
            "emitted": list(self.emitted),
            "state": self.state.value,
            "hitSentinel": self.hit_sentinel,
        }


def scan_until(
    seq: Iterable[Any],
    sentinel: Any,
    emit: Optional[Callable[[Any], None]] = None,
) -> ScanResult:
    """
    Emit elements of `seq` in order until one equals `sentinel`.

    The sentinel itself is not emitted and nothing after it is visited.
    The result always ends in STOPPED (sentinel hit or sequence exhausted).
    """
    result = ScanResult()
    for item in seq:
        if item == sentinel:
            result.hit_sentinel = True
            break
        if emit is not None:
            emit(item)
        result.emitted.append(item)
    result.state = ScanState.STOPPED
    return result


def print_primes(emit: Optional[Callable[[Any], None]] = None) -> ScanResult:
    return scan_until(PRIME_LIST, PRIME_SENTINEL, emit=emit if emit is not None else print)
