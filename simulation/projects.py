"""
Village Economy - Projects and Buildings
Project types, the blueprint catalog, construction, and building effects.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Union


class ProjectType(str, Enum):
    """Types of projects that can be constructed."""
    WOODMILL = "Woodmill"
    HOUSE = "House"
    QUARRY = "Quarry"
    FARM = "Farm"
    CASTLE = "Castle"

    @classmethod
    def parse(cls, value: Union['ProjectType', str]) -> Optional['ProjectType']:
        """Resolve a project name, ignoring case. Returns None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        wanted = value.strip().lower()
        for project_type in cls:
            if project_type.value.lower() == wanted:
                return project_type
        return None


@dataclass(frozen=True)
class BuildingEffect:
    """Standing bonus granted by a completed building."""
    wood_per_day: int = 0
    metal_per_day: int = 0
    food_per_day: int = 0
    max_workers: int = 0
    wins_game: bool = False

    def to_dict(self) -> dict:
        return {
            'wood_per_day': self.wood_per_day,
            'metal_per_day': self.metal_per_day,
            'food_per_day': self.food_per_day,
            'max_workers': self.max_workers,
            'wins_game': self.wins_game,
        }


@dataclass(frozen=True)
class Blueprint:
    """Blueprint defining project cost, build time and resulting effect."""
    project_type: ProjectType
    wood_cost: int
    metal_cost: int
    build_days: int
    effect: BuildingEffect = field(default_factory=BuildingEffect)
    description: str = ""


# Project blueprints
BLUEPRINTS = {
    ProjectType.WOODMILL: Blueprint(
        project_type=ProjectType.WOODMILL,
        wood_cost=5,
        metal_cost=1,
        build_days=5,
        effect=BuildingEffect(wood_per_day=2),
        description="Increases wood production"
    ),
    ProjectType.HOUSE: Blueprint(
        project_type=ProjectType.HOUSE,
        wood_cost=5,
        metal_cost=0,
        build_days=3,
        effect=BuildingEffect(max_workers=2),
        description="Room for more workers"
    ),
    ProjectType.QUARRY: Blueprint(
        project_type=ProjectType.QUARRY,
        wood_cost=3,
        metal_cost=5,
        build_days=7,
        effect=BuildingEffect(metal_per_day=2),
        description="Increases metal production"
    ),
    ProjectType.FARM: Blueprint(
        project_type=ProjectType.FARM,
        wood_cost=5,
        metal_cost=2,
        build_days=5,
        effect=BuildingEffect(food_per_day=5),
        description="Increases food production"
    ),
    ProjectType.CASTLE: Blueprint(
        project_type=ProjectType.CASTLE,
        wood_cost=50,
        metal_cost=50,
        build_days=50,
        effect=BuildingEffect(wins_game=True),
        description="Completing the castle wins the game"
    ),
}


def get_blueprint(name: Union[ProjectType, str]) -> Optional[Blueprint]:
    """Look up a blueprint by project name. Returns None if unknown."""
    project_type = ProjectType.parse(name)
    if project_type is None:
        return None
    return BLUEPRINTS[project_type]


@dataclass
class Project:
    """A construction project in progress."""

    project_type: ProjectType
    days_left: int

    @property
    def name(self) -> str:
        return self.project_type.value

    @property
    def is_complete(self) -> bool:
        return self.days_left <= 0

    def get_blueprint(self) -> Blueprint:
        """Get the blueprint for this project type."""
        return BLUEPRINTS[self.project_type]

    def add_labor(self, days: int = 1) -> bool:
        """Work on the project. Returns True if it just completed."""
        if days <= 0 or self.is_complete:
            return False
        self.days_left = max(0, self.days_left - days)
        return self.is_complete

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            'name': self.name,
            'days_left': self.days_left,
        }


@dataclass(frozen=True)
class Building:
    """A completed building in the village."""

    project_type: ProjectType
    effect: BuildingEffect

    @property
    def name(self) -> str:
        return self.project_type.value

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            'name': self.name,
            'effect': self.effect.to_dict(),
        }


def start_project(project_type: ProjectType) -> Project:
    """Create a project with its configured build time."""
    return Project(
        project_type=project_type,
        days_left=BLUEPRINTS[project_type].build_days,
    )


def complete_project(project: Project) -> Building:
    """Turn a finished project into its building."""
    return Building(
        project_type=project.project_type,
        effect=project.get_blueprint().effect,
    )
