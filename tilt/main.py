"""
Tilting Platform Simulator - spin cycles and north beam load.

Main entry point for simulations.
"""

from __future__ import annotations
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from tilt.config import SimulationConfig, DEFAULT_CYCLES
from tilt.core import FormatError, run_cycles
from tilt.storage import load_grid


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def run_simulation(config: SimulationConfig) -> dict:
    """
    Run a complete simulation.

    Args:
        config: Simulation configuration

    Returns:
        Dictionary with results

    Raises:
        OSError: if the input file cannot be read
        FormatError: if the input file is not a valid grid
    """
    logger.info(f"Loading platform: {config.input_path}")
    grid = load_grid(config.input_path)
    logger.info(f"Size: {grid.rows}x{grid.columns}, Cycles: {config.cycles}")
    logger.info(f"Initial load: {grid.total_load()}")

    result = run_cycles(grid, config.cycles)
    stats = result.stats

    if stats.period is not None:
        logger.info(
            f"Loop detected after {stats.cycles_simulated} cycles "
            f"(start={stats.loop_start}, period={stats.period})"
        )
    logger.info(f"Simulated {stats.cycles_simulated} cycles in {stats.elapsed_time:.3f}s")

    load = result.final_grid.total_load()
    logger.info(f"Final load: {load}")

    return {
        'grid': result.final_grid,
        'load': load,
        'stats': stats,
        'stop_reason': result.stop_reason,
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for running simulations."""
    parser = argparse.ArgumentParser(description="Tilting Platform Simulator")

    parser.add_argument('input', type=str,
                       help='Platform file with rows of ".", "#" and "O"')
    parser.add_argument('--cycles', type=int, default=DEFAULT_CYCLES,
                       help=f'Number of spin cycles (default: {DEFAULT_CYCLES})')

    args = parser.parse_args(argv)

    config = SimulationConfig(
        input_path=Path(args.input),
        cycles=args.cycles,
    )
    issues = config.validate()
    if issues:
        parser.error("; ".join(issues))

    try:
        results = run_simulation(config)
    except (OSError, FormatError) as e:
        logger.error(f"Cannot simulate {config.input_path}: {e}")
        return 1

    print(f"Total load: {results['load']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
