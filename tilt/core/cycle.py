"""
Spin cycle engine with loop detection.

Repeated spin cycles walk through a finite state space, so the sequence of
grids is eventually periodic:

    G(1), G(2), ..., G(s), ..., G(s + L - 1), G(s + L) = G(s), ...

Once a state repeats, the grid after any number of cycles n can be read
from the recorded history instead of being simulated.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging
import time

from .grid import Grid
from .dynamics import spin


logger = logging.getLogger(__name__)


@dataclass
class CycleStats:
    """Statistics from a cycle run."""
    cycles_requested: int = 0
    cycles_simulated: int = 0

    # Loop detection (cycle counts are 1-based: 1 = after the first spin)
    loop_start: Optional[int] = None
    period: Optional[int] = None

    # Timing
    start_time: float = 0.0
    end_time: float = 0.0

    @property
    def elapsed_time(self) -> float:
        return self.end_time - self.start_time

    @property
    def cycles_skipped(self) -> int:
        return self.cycles_requested - self.cycles_simulated


@dataclass
class CycleResult:
    """
    Result of a cycle run.

    Contains:
    - Final grid
    - Statistics
    - Stop reason ("completed" or "cycle_detected")
    """
    final_grid: Grid
    stats: CycleStats = field(default_factory=CycleStats)
    stop_reason: str = "completed"


class SpinHistory:
    """
    Grids produced by successive spin cycles.

    Index 0 holds the grid after one spin cycle. A dict from grid to its
    first index gives constant-time repeat lookup.
    """

    def __init__(self):
        self._states: List[Grid] = []
        self._first_seen: Dict[Grid, int] = {}

    def __len__(self) -> int:
        return len(self._states)

    def __getitem__(self, index: int) -> Grid:
        return self._states[index]

    def record(self, grid: Grid) -> Optional[int]:
        """
        Record a new state.

        Returns:
            Index of an earlier identical state, or None if the state is
            new (in which case it is appended)
        """
        first = self._first_seen.get(grid)
        if first is not None:
            return first
        self._first_seen[grid] = len(self._states)
        self._states.append(grid)
        return None

    def project(self, first: int, cycles: int) -> Grid:
        """
        State after ``cycles`` spin cycles, given that the state after
        ``len(self) + 1`` cycles equals the one at index ``first``.
        """
        period = max(1, len(self._states) - first)
        return self._states[first + (cycles - first - 1) % period]


def run_cycles(grid: Grid, cycles: int) -> CycleResult:
    """
    Apply ``cycles`` spin cycles, stopping early once the states repeat.

    Args:
        grid: Initial platform
        cycles: Number of spin cycles (>= 0)

    Returns:
        CycleResult with the grid after exactly ``cycles`` spin cycles
    """
    if cycles < 0:
        raise ValueError(f"cycles must be non-negative, got {cycles}")

    stats = CycleStats(cycles_requested=cycles, start_time=time.time())
    history = SpinHistory()
    current = grid.copy()

    for iteration in range(cycles):
        current = spin(current)
        stats.cycles_simulated += 1

        first = history.record(current)
        if first is not None:
            stats.loop_start = first + 1
            stats.period = max(1, len(history) - first)
            stats.end_time = time.time()
            logger.debug(
                f"State after cycle {iteration + 1} repeats cycle {first + 1} "
                f"(period {stats.period})"
            )
            return CycleResult(
                final_grid=history.project(first, cycles),
                stats=stats,
                stop_reason="cycle_detected",
            )

    stats.end_time = time.time()
    logger.debug(f"No repetition within {cycles} cycles")
    return CycleResult(final_grid=current, stats=stats)


def cycle(grid: Grid, cycles: int) -> Grid:
    """Grid after exactly ``cycles`` spin cycles (loop-accelerated)."""
    return run_cycles(grid, cycles).final_grid


def cycle_brute_force(grid: Grid, cycles: int) -> Grid:
    """Grid after ``cycles`` spin cycles, simulating every one of them."""
    current = grid.copy()
    for _ in range(cycles):
        current = spin(current)
    return current
