"""
Village Economy - Configuration
All simulation parameters in one place.
"""

from dataclasses import dataclass
from typing import Optional


FOOD_POLICIES = ("village", "per_worker")


@dataclass
class VillageConfig:
    """Core simulation parameters."""

    # Starting stocks
    initial_food: int = 10
    initial_wood: int = 0
    initial_metal: int = 0

    # Population
    max_workers: int = 6
    days_until_starvation: int = 5

    # Daily output per living worker
    farmer_output: int = 2
    lumberjack_output: int = 1
    miner_output: int = 1
    builder_output: int = 1

    # Policies
    food_consumption: str = "village"  # "village" or "per_worker"
    builder_gated_progress: bool = False

    # Observability
    max_events: int = 1000
    log_directory: Optional[str] = None

    def validate(self):
        """Raise ValueError on settings no village can start from."""
        for field_name in ('initial_food', 'initial_wood', 'initial_metal',
                           'days_until_starvation',
                           'farmer_output', 'lumberjack_output',
                           'miner_output', 'builder_output'):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be non-negative")
        if self.max_workers <= 0:
            raise ValueError("max_workers must be positive")
        if self.food_consumption not in FOOD_POLICIES:
            raise ValueError(
                f"unknown food_consumption {self.food_consumption!r}, "
                f"expected one of {FOOD_POLICIES}"
            )
        if self.max_events <= 0:
            raise ValueError("max_events must be positive")


# Global config instance
CONFIG = VillageConfig()
