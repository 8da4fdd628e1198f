from __future__ import annotations

import json

import pytest

from main import main


def test_main_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--days", "3", "--worker", "Ann:farmer"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Day 3 (running)")
    assert "Ann (farmer) fed" in out
    assert "Workers 1/6" in out
    assert "  Recent events\n    Day 0: Ann joined as a farmer" in out


def test_main_json_snapshot(capsys: pytest.CaptureFixture[str]) -> None:
    argv = [
        "--days", "10",
        "--wood", "5", "--metal", "1",
        "--worker", "Ann:farmer",
        "--project", "woodmill",
        "--json",
    ]
    assert main(argv) == 0

    state = json.loads(capsys.readouterr().out)
    assert state["days_gone"] == 10
    assert state["projects"] == []
    assert state["buildings"][0]["name"] == "Woodmill"
    assert state["resources"]["wood_per_day"] == 2
    assert state["resources"]["wood"] == 10


def test_main_stops_at_game_over(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--days", "100", "--food", "0", "--worker", "Bo:miner"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Day 6 (game over)")
    assert "Workers 0/6" in out


def test_main_per_worker_food(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["--days", "1", "--food", "1", "--per-worker-food",
            "--worker", "A:miner", "--worker", "B:miner", "--json"]
    assert main(argv) == 0

    state = json.loads(capsys.readouterr().out)
    assert [w["days_hungry"] for w in state["workers"]] == [0, 1]


@pytest.mark.parametrize(
    "argv",
    [
        ["--worker", "NoOccupation"],
        ["--worker", "Ann:wizard"],
        ["--project", "Cathedral"],
        ["--days", "-1"],
    ],
)
def test_main_rejects_bad_arguments(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_main_lists_projects(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--list-projects"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ["Woodmill", "House", "Quarry", "Farm", "Castle"]
    assert "wood=50" in lines[-1]


def test_main_summary_event_count(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["--days", "0", "--events", "2",
            "--worker", "A:farmer", "--worker", "B:miner", "--worker", "C:builder"]
    assert main(argv) == 0

    out = capsys.readouterr().out
    assert "Day 0: A joined" not in out
    assert "Day 0: B joined as a miner" in out
    assert "Day 0: C joined as a builder" in out


def test_main_json_includes_events(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--days", "100", "--food", "0", "--worker", "Bo:miner", "--json"]) == 0

    events = json.loads(capsys.readouterr().out)["events"]
    assert events["totals"]["WORKER_STARVED"] == 1
    assert events["log"][-1]["type"] == "GAME_OVER"
