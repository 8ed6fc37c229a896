"""
Tests for the loop-accelerated spin cycle engine.
"""

import pytest
import numpy as np
from tilt.core import (
    Cell, Grid, SpinHistory, CycleResult,
    spin, cycle, cycle_brute_force, run_cycles,
)


EXAMPLE = [
    "O....#....",
    "O.OO#....#",
    ".....##...",
    "OO.#O....O",
    ".O.....O#.",
    "O.#..O.#.#",
    "..O..#O..O",
    ".......O..",
    "#....###..",
    "#OO..#....",
]

SPLIT_PLATFORM = [
    "O..O...",
    "#######",
    ".O.....",
    "....O..",
    "....O#.",
    "..O...O",
]


def random_grid(rows: int, columns: int, seed: int) -> Grid:
    rng = np.random.default_rng(seed)
    cells = rng.choice(
        [Cell.EMPTY, Cell.ROLLING, Cell.FIXED],
        size=(rows, columns),
        p=[0.55, 0.30, 0.15],
    )
    return Grid(cells)


class TestSpinHistory:
    """Tests for SpinHistory."""

    def test_record_new_states(self):
        history = SpinHistory()
        a = Grid.from_lines(["O."])
        b = Grid.from_lines([".O"])
        assert history.record(a) is None
        assert history.record(b) is None
        assert len(history) == 2
        assert history[0] == a

    def test_record_repeat(self):
        """Test repeated state returns first index and is not appended."""
        history = SpinHistory()
        a = Grid.from_lines(["O."])
        b = Grid.from_lines([".O"])
        history.record(a)
        history.record(b)
        assert history.record(Grid.from_lines(["O."])) == 0
        assert len(history) == 2

    def test_project(self):
        # States after cycles 1..4 are a, b, c, d; cycle 5 repeats b
        history = SpinHistory()
        states = [Grid.from_lines([line]) for line in ["O...", ".O..", "..O.", "...O"]]
        for state in states:
            history.record(state)
        assert history.project(1, 5) == states[1]
        assert history.project(1, 6) == states[2]
        assert history.project(1, 8) == states[1]
        assert history.project(1, 4) == states[3]

    def test_project_self_loop(self):
        """Test a state repeating right away is treated as period 1."""
        history = SpinHistory()
        a = Grid.from_lines(["O."])
        history.record(a)
        assert history.project(0, 10**9) == a


class TestCycle:
    """Tests for cycle()."""

    def test_zero_cycles(self):
        grid = Grid.from_lines(EXAMPLE)
        result = cycle(grid, 0)
        assert result == grid
        assert result is not grid

    def test_negative_cycles(self):
        with pytest.raises(ValueError):
            cycle(Grid.from_lines(EXAMPLE), -1)

    @pytest.mark.parametrize("n, load", [(1, 87), (2, 69), (3, 69)])
    def test_example_loads(self, n, load):
        assert cycle(Grid.from_lines(EXAMPLE), n).total_load() == load

    def test_example_billion(self):
        """Test a billion cycles finish through loop detection."""
        result = run_cycles(Grid.from_lines(EXAMPLE), 1_000_000_000)
        assert result.final_grid.total_load() == 64
        assert result.stop_reason == "cycle_detected"
        assert result.stats.period == 7
        assert result.stats.cycles_simulated < 100

    def test_billion_matches_reduced_brute_force(self):
        """Project a billion cycles onto an equivalent small count."""
        grid = Grid.from_lines(EXAMPLE)
        stats = run_cycles(grid, 1_000_000_000).stats
        start, period = stats.loop_start, stats.period
        reduced = start + (1_000_000_000 - start) % period
        assert cycle(grid, 1_000_000_000) == cycle_brute_force(grid, reduced)

    @pytest.mark.parametrize("n", range(11))
    def test_matches_brute_force(self, n):
        grid = Grid.from_lines(EXAMPLE)
        assert cycle(grid, n) == cycle_brute_force(grid, n)

    @pytest.mark.parametrize("seed", [10, 11, 12])
    def test_matches_brute_force_random(self, seed):
        grid = random_grid(6, 6, seed=seed)
        for n in (5, 17, 40):
            assert cycle(grid, n) == cycle_brute_force(grid, n)

    def test_split_platform(self):
        """Test the platform split by a wall after 100 cycles."""
        grid = Grid.from_lines(SPLIT_PLATFORM)
        expected = [
            ".....OO",
            "#######",
            ".......",
            "......O",
            "....O#.",
            "....OOO",
        ]
        assert cycle_brute_force(grid, 100).to_lines() == expected
        assert cycle(grid, 100).to_lines() == expected

    def test_rocks_conserved(self):
        grid = random_grid(8, 10, seed=13)
        assert cycle(grid, 1_000_000).counts() == grid.counts()

    def test_fixed_point(self):
        """Test a grid that spin leaves unchanged."""
        grid = Grid.from_lines(["#.#", "...", "#.#"])
        result = run_cycles(grid, 1_000_000_000)
        assert result.final_grid == grid
        assert result.stats.period == 1
        assert result.stats.cycles_simulated == 2

    def test_input_unchanged(self):
        grid = Grid.from_lines(EXAMPLE)
        cycle(grid, 50)
        assert grid.to_lines() == EXAMPLE


class TestRunCycles:
    """Tests for run statistics."""

    def test_completed_without_loop(self):
        result = run_cycles(Grid.from_lines(EXAMPLE), 2)
        assert isinstance(result, CycleResult)
        assert result.stop_reason == "completed"
        assert result.stats.cycles_requested == 2
        assert result.stats.cycles_simulated == 2
        assert result.stats.period is None
        assert result.stats.cycles_skipped == 0

    def test_loop_stats(self):
        result = run_cycles(Grid.from_lines(EXAMPLE), 1_000)
        stats = result.stats
        assert stats.loop_start == 3
        assert stats.period == 7
        assert stats.cycles_simulated == stats.loop_start + stats.period
        assert stats.cycles_skipped == 1_000 - stats.cycles_simulated
        assert stats.elapsed_time >= 0.0

    def test_loop_start_state_matches(self):
        grid = Grid.from_lines(EXAMPLE)
        stats = run_cycles(grid, 1_000).stats
        repeat = cycle_brute_force(grid, stats.loop_start + stats.period)
        assert repeat == cycle_brute_force(grid, stats.loop_start)
        assert spin(repeat) == cycle_brute_force(grid, stats.loop_start + 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
