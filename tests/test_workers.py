from __future__ import annotations

import pytest

from simulation.village import Village
from simulation.worker import DAYS_UNTIL_STARVATION, Occupation, Worker


def test_add_worker_adds_worker_to_roster(village: Village) -> None:
    worker = village.add_worker("Worker1", "farmer")

    assert len(village.workers) == 1
    assert village.workers[0] is worker
    assert worker.name == "Worker1"
    assert worker.occupation == "farmer"
    assert worker.occupation is Occupation.FARMER
    assert worker.alive
    assert worker.days_hungry == 0


def test_add_worker_keeps_call_order(village: Village) -> None:
    names = ["Simon", "Simme", "Mike"]
    for name in names:
        village.add_worker(name, "farmer")

    assert [w.name for w in village.workers] == names
    assert all(w.occupation == "farmer" for w in village.workers)


def test_add_worker_allows_duplicate_names(village: Village) -> None:
    village.add_worker("Ann", "miner")
    village.add_worker("Ann", "builder")

    assert [w.occupation for w in village.workers] == [Occupation.MINER, Occupation.BUILDER]


@pytest.mark.parametrize("occupation", list(Occupation))
def test_add_worker_accepts_every_occupation(village: Village, occupation: Occupation) -> None:
    assert village.add_worker("W", occupation.value) is not None
    assert village.add_worker("W", occupation) is not None
    assert len(village.workers) == 2


def test_add_worker_occupation_is_case_insensitive(village: Village) -> None:
    worker = village.add_worker("Big", "  Lumberjack ")
    assert worker is not None
    assert worker.occupation is Occupation.LUMBERJACK


def test_add_worker_is_noop_when_roster_full(village: Village) -> None:
    for i in range(village.max_workers):
        village.add_worker(f"Worker{i + 1}", "farmer")
    count = len(village.workers)

    assert village.add_worker("ExtraWorker", "farmer") is None
    assert len(village.workers) == count
    assert all(w.name != "ExtraWorker" for w in village.workers)


def test_add_worker_rejects_unknown_occupation(village: Village) -> None:
    assert village.add_worker("Bob", "wizard") is None
    assert village.add_worker("Bob", None) is None  # type: ignore[arg-type]
    assert village.workers == ()


def test_workers_view_is_read_only(village: Village) -> None:
    village.add_worker("Ann", "miner")
    roster = village.workers

    assert isinstance(roster, tuple)
    with pytest.raises(AttributeError):
        roster.append(Worker("Eve", Occupation.MINER))  # type: ignore[attr-defined]
    assert len(village.workers) == 1


def test_worker_hunger_helpers() -> None:
    worker = Worker("Ann", Occupation.MINER)
    for _ in range(DAYS_UNTIL_STARVATION):
        worker.starve()
    assert not worker.is_starved()
    assert worker.get_status() == f"hungry ({DAYS_UNTIL_STARVATION}d)"

    worker.starve()
    assert worker.is_starved()

    worker.feed()
    assert worker.days_hungry == 0
    assert worker.get_status() == "fed"

    worker.die()
    assert worker.get_status() == "dead"


def test_occupation_parse() -> None:
    assert Occupation.parse("MINER") is Occupation.MINER
    assert Occupation.parse(Occupation.BUILDER) is Occupation.BUILDER
    assert Occupation.parse("knight") is None
    assert Occupation.parse(3) is None  # type: ignore[arg-type]
