"""
Configuration module for the tilting platform simulator.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List


DEFAULT_CYCLES = 1_000_000_000


@dataclass
class SimulationConfig:
    """
    Parameters of a simulation run.

    Example:
        config = SimulationConfig(input_path=Path("platform.txt"), cycles=1000)
        issues = config.validate()
    """
    input_path: Path
    cycles: int = DEFAULT_CYCLES  # Spin cycles to apply

    def validate(self) -> List[str]:
        """Validate configuration, return list of issues."""
        issues = []

        if self.cycles < 0:
            issues.append("cycles must be non-negative")

        return issues
