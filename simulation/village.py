"""
Village Economy - Village State
The village owns its workers, projects, buildings and resources,
and advances them one day at a time.
"""

from dataclasses import dataclass
from typing import Optional, Union

from config import CONFIG, VillageConfig
from simulation.worker import Worker, Occupation, count_by_occupation
from simulation.resources import ResourceLedger, FOOD_CONSUMPTION_POLICIES
from simulation.projects import (
    Project, Building, ProjectType, get_blueprint, start_project, complete_project
)
from utils.events import EventTracker, EventType
from utils.logger import get_logger


@dataclass
class VillageStats:
    """Statistics tracking for the village."""
    total_deaths: int = 0
    buildings_completed: int = 0
    food_produced: int = 0
    food_consumed: int = 0
    peak_population: int = 0

    def to_dict(self) -> dict:
        return {
            'total_deaths': self.total_deaths,
            'buildings_completed': self.buildings_completed,
            'food_produced': self.food_produced,
            'food_consumed': self.food_consumed,
            'peak_population': self.peak_population,
        }


class Village:
    """The simulation state: roster, projects, buildings and resources."""

    def __init__(self, config: Optional[VillageConfig] = None):
        self.config = config or CONFIG
        self.config.validate()

        self._workers: list[Worker] = []
        self._projects: list[Project] = []
        self._buildings: list[Building] = []
        self.resources = ResourceLedger(
            food=self.config.initial_food,
            wood=self.config.initial_wood,
            metal=self.config.initial_metal,
        )
        self._consume_food = FOOD_CONSUMPTION_POLICIES[self.config.food_consumption]

        self._max_workers = self.config.max_workers
        self._days_gone = 0
        self._game_over = False
        self._victory = False
        self._had_workers = False

        self.stats = VillageStats()
        self.events = EventTracker(max_events=self.config.max_events)
        self.logger = get_logger()
        if self.config.log_directory:
            self.logger.attach_file(self.config.log_directory)
        else:
            self.logger.detach_file()

    # Read-only views

    @property
    def workers(self) -> tuple[Worker, ...]:
        return tuple(self._workers)

    @property
    def projects(self) -> tuple[Project, ...]:
        return tuple(self._projects)

    @property
    def buildings(self) -> tuple[Building, ...]:
        return tuple(self._buildings)

    @property
    def max_workers(self) -> int:
        return self._max_workers

    @property
    def days_gone(self) -> int:
        return self._days_gone

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def victory(self) -> bool:
        return self._victory

    @property
    def wood_per_day(self) -> int:
        return self.resources.wood_per_day

    @property
    def metal_per_day(self) -> int:
        return self.resources.metal_per_day

    @property
    def food_per_day(self) -> int:
        return self.resources.food_per_day

    # Stocks can be set directly by callers seeding a scenario

    @property
    def food(self) -> int:
        return self.resources.food

    @food.setter
    def food(self, value: int):
        self.resources.food = max(0, value)

    @property
    def wood(self) -> int:
        return self.resources.wood

    @wood.setter
    def wood(self, value: int):
        self.resources.wood = max(0, value)

    @property
    def metal(self) -> int:
        return self.resources.metal

    @metal.setter
    def metal(self, value: int):
        self.resources.metal = max(0, value)

    # Player actions

    def add_worker(self, name: str, occupation: Union[Occupation, str]) -> Optional[Worker]:
        """
        Hire a worker if there is room.
        Returns the new worker, or None if the roster is full or the
        occupation is unknown.
        """
        resolved = Occupation.parse(occupation)
        if resolved is None:
            self.logger.log_rejection(self._days_gone, "add_worker",
                                      f"unknown occupation {occupation!r}")
            return None
        if len(self._workers) >= self._max_workers:
            self.logger.log_rejection(self._days_gone, "add_worker",
                                      f"roster full ({self._max_workers})")
            return None

        worker = Worker(name=name, occupation=resolved)
        self._workers.append(worker)
        self._had_workers = True
        self.stats.peak_population = max(self.stats.peak_population, len(self._workers))
        self._record(EventType.WORKER_HIRED, f"{name} joined as a {resolved.value}",
                     {'name': name, 'occupation': resolved.value})
        return worker

    def add_project(self, name: Union[ProjectType, str]) -> Optional[Project]:
        """
        Start a project if the village can pay for it.
        The full cost is paid now. Returns the project, or None if the
        name is unknown or wood or metal falls short.
        """
        blueprint = get_blueprint(name)
        if blueprint is None:
            self.logger.log_rejection(self._days_gone, "add_project",
                                      f"unknown project {name!r}")
            return None
        if not self.resources.spend(blueprint.wood_cost, blueprint.metal_cost):
            self.logger.log_rejection(
                self._days_gone, "add_project",
                f"{blueprint.project_type.value} needs wood={blueprint.wood_cost} "
                f"metal={blueprint.metal_cost}, have wood={self.wood} metal={self.metal}"
            )
            return None

        project = start_project(blueprint.project_type)
        self._projects.append(project)
        self._record(EventType.PROJECT_STARTED,
                     f"Construction started: {project.name} ({project.days_left} days)",
                     {'name': project.name, 'days_left': project.days_left})
        return project

    # The tick

    def day(self) -> bool:
        """
        Advance the village by one day.
        Returns False without changing anything once the game is over.
        """
        if self._game_over:
            return False

        self._produce()
        self._feed_workers()
        self._remove_starved()
        self._progress_projects()
        self._check_game_over()

        self._days_gone += 1
        self.logger.log_day(self._days_gone, len(self._workers),
                            self.food, self.wood, self.metal)
        return True

    def _produce(self):
        food = count_by_occupation(self._workers, Occupation.FARMER) * self.config.farmer_output
        wood = count_by_occupation(self._workers, Occupation.LUMBERJACK) * self.config.lumberjack_output
        metal = count_by_occupation(self._workers, Occupation.MINER) * self.config.miner_output

        self.resources.produce(wood=wood, metal=metal, food=food)
        self.stats.food_produced += self.resources.food_per_day + food

    def _feed_workers(self):
        consumed = self._consume_food(self.resources, self._workers)
        self.stats.food_consumed += consumed

        if not self.resources.food_shortage:
            return
        hungry = [w for w in self._workers if w.days_hungry > 0]
        if hungry:
            self._record(EventType.FOOD_SHORTAGE, f"{len(hungry)} worker(s) went hungry",
                         {'hungry': len(hungry)})

    def _remove_starved(self):
        threshold = self.config.days_until_starvation
        survivors = []
        for worker in self._workers:
            if worker.is_starved(threshold):
                worker.die()
                self.stats.total_deaths += 1
                self._record(EventType.WORKER_STARVED, f"{worker.name} starved to death",
                             {'name': worker.name, 'occupation': worker.occupation.value})
            else:
                survivors.append(worker)
        self._workers = survivors

    def _daily_progress(self) -> int:
        if self.config.builder_gated_progress:
            builders = count_by_occupation(self._workers, Occupation.BUILDER)
            return builders * self.config.builder_output
        return 1

    def _progress_projects(self):
        progress = self._daily_progress()
        remaining = []
        for project in self._projects:
            project.add_labor(progress)
            if project.is_complete:
                self._complete(project)
            else:
                remaining.append(project)
        self._projects = remaining

    def _complete(self, project: Project):
        building = complete_project(project)
        self._buildings.append(building)
        self.resources.apply_effect(building.effect)
        self._max_workers += building.effect.max_workers
        self.stats.buildings_completed += 1
        self._record(EventType.BUILDING_COMPLETED, f"{building.name} completed",
                     {'name': building.name, 'effect': building.effect.to_dict()})

        if building.effect.wins_game:
            self._victory = True
            self._game_over = True
            self._record(EventType.VICTORY, f"The {building.name} stands. The village has won.")

    def _check_game_over(self):
        if self._game_over:
            return
        if self._had_workers and not self._workers:
            self._game_over = True
            self._record(EventType.GAME_OVER, "Every worker has died")

    def _record(self, event_type: EventType, message: str, data: Optional[dict] = None):
        self.events.record(self._days_gone, event_type, message, data)
        self.logger.log_event(self._days_gone, event_type.name, message)

    def to_dict(self) -> dict:
        """Snapshot of the village state."""
        return {
            'days_gone': self._days_gone,
            'game_over': self._game_over,
            'victory': self._victory,
            'max_workers': self._max_workers,
            'resources': self.resources.to_dict(),
            'workers': [w.to_dict() for w in self._workers],
            'projects': [p.to_dict() for p in self._projects],
            'buildings': [b.to_dict() for b in self._buildings],
            'stats': self.stats.to_dict(),
            'events': self.events.to_dict(),
        }
