"""
Village Economy - Resources
Resource stocks, daily rates, and food consumption.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from simulation.projects import BuildingEffect
    from simulation.worker import Worker


@dataclass
class ResourceLedger:
    """Village resource stocks and per-day production rates."""

    food: int = 10
    wood: int = 0
    metal: int = 0

    wood_per_day: int = 0
    metal_per_day: int = 0
    food_per_day: int = 0

    def __post_init__(self):
        self.food = max(0, self.food)
        self.wood = max(0, self.wood)
        self.metal = max(0, self.metal)

    def produce(self, wood: int = 0, metal: int = 0, food: int = 0):
        """Add the day's production on top of the standing rates."""
        self.wood += self.wood_per_day + max(0, wood)
        self.metal += self.metal_per_day + max(0, metal)
        self.food += self.food_per_day + max(0, food)

    def can_afford(self, wood: int, metal: int) -> bool:
        return self.wood >= wood and self.metal >= metal

    def spend(self, wood: int, metal: int) -> bool:
        """Deduct both costs, or nothing. Returns True if paid."""
        if not self.can_afford(wood, metal):
            return False
        self.wood -= wood
        self.metal -= metal
        return True

    def take_food(self, amount: int = 1) -> int:
        """Remove up to `amount` food. Returns how much was actually taken."""
        taken = min(self.food, max(0, amount))
        self.food -= taken
        return taken

    def apply_effect(self, effect: 'BuildingEffect'):
        """Fold a building's standing effect into the daily rates."""
        self.wood_per_day += effect.wood_per_day
        self.metal_per_day += effect.metal_per_day
        self.food_per_day += effect.food_per_day

    @property
    def food_shortage(self) -> bool:
        """Check if there's no food left."""
        return self.food <= 0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            'food': self.food,
            'wood': self.wood,
            'metal': self.metal,
            'wood_per_day': self.wood_per_day,
            'metal_per_day': self.metal_per_day,
            'food_per_day': self.food_per_day,
        }


def consume_village_wide(ledger: ResourceLedger, workers: list['Worker']) -> int:
    """
    One unit of food feeds the whole village for a day.
    Returns food consumed.
    """
    living = [w for w in workers if w.alive]
    if ledger.take_food(1):
        for worker in living:
            worker.feed()
        return 1

    for worker in living:
        worker.starve()
    return 0


def consume_per_worker(ledger: ResourceLedger, workers: list['Worker']) -> int:
    """
    Each living worker eats one unit, in roster order, while food lasts.
    Returns food consumed.
    """
    consumed = 0
    for worker in workers:
        if not worker.alive:
            continue
        if ledger.take_food(1):
            worker.feed()
            consumed += 1
        else:
            worker.starve()
    return consumed


FOOD_CONSUMPTION_POLICIES = {
    'village': consume_village_wide,
    'per_worker': consume_per_worker,
}
