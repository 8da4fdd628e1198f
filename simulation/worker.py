"""
Village Economy - Workers
Worker occupations, hunger tracking, and starvation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from config import CONFIG


# Consecutive foodless days a worker survives
DAYS_UNTIL_STARVATION = CONFIG.days_until_starvation


class Occupation(str, Enum):
    """Worker occupations."""
    FARMER = "farmer"
    LUMBERJACK = "lumberjack"
    MINER = "miner"
    BUILDER = "builder"

    @classmethod
    def parse(cls, value: Union['Occupation', str]) -> Optional['Occupation']:
        """Resolve an occupation tag. Returns None for unknown tags."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass
class Worker:
    """A laborer living in the village."""

    name: str
    occupation: Occupation
    alive: bool = True
    days_hungry: int = 0

    def feed(self):
        """Worker had food today."""
        self.days_hungry = 0

    def starve(self):
        """Worker went without food today."""
        self.days_hungry += 1

    def is_starved(self, threshold: int = DAYS_UNTIL_STARVATION) -> bool:
        return self.days_hungry > threshold

    def die(self):
        self.alive = False

    def get_status(self) -> str:
        """Get a human-readable status string."""
        if not self.alive:
            return "dead"
        elif self.days_hungry > 0:
            return f"hungry ({self.days_hungry}d)"
        return "fed"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            'name': self.name,
            'occupation': self.occupation.value,
            'alive': self.alive,
            'days_hungry': self.days_hungry,
        }


def count_by_occupation(workers: list[Worker], occupation: Occupation) -> int:
    """Count living workers with an occupation."""
    return sum(1 for w in workers if w.alive and w.occupation == occupation)
