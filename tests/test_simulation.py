import io
import re
import time

from philosophers.config import Config
from philosophers.simulation import Simulation, time_now

LINE = re.compile(
    r"(\d+) (\d+) (has taken a fork|is eating|is sleeping|is thinking|died)"
)


def _parse(output):
    lines = output.splitlines()
    parsed = []
    for line in lines:
        match = LINE.fullmatch(line)
        assert match, line
        parsed.append((int(match.group(1)), int(match.group(2)), match.group(3)))
    return parsed


def test_time_now_is_in_milliseconds():
    before = time.time() * 1000
    now = time_now()
    after = time.time() * 1000
    assert before - 1 <= now <= after + 1


def test_forks_are_shared_between_neighbours():
    sim = Simulation(Config(4, 800, 200, 200), out=io.StringIO())
    assert [p.id for p in sim.philosophers] == [1, 2, 3, 4]
    for index, philosopher in enumerate(sim.philosophers):
        assert philosopher.left is sim.forks[index]
        assert philosopher.right is sim.forks[(index + 1) % 4]
    assert sim.philosophers[-1].right is sim.forks[0]


def test_log_writes_relative_timestamp():
    out = io.StringIO()
    sim = Simulation(Config(2, 800, 200, 200), out=out)
    sim.start_time = time_now()
    sim.log(sim.philosophers[1], "is thinking")
    [(stamp, pid, message)] = _parse(out.getvalue())
    assert pid == 2
    assert message == "is thinking"
    assert 0 <= stamp < 1000


def test_log_is_silent_once_stopped():
    out = io.StringIO()
    sim = Simulation(Config(2, 800, 200, 200), out=out)
    sim.stopped = True
    sim.log(sim.philosophers[0], "is eating")
    assert out.getvalue() == ""


def test_run_stops_when_everyone_has_eaten():
    out = io.StringIO()
    sim = Simulation(Config(2, 800, 20, 20, 2), out=out)
    sim.run()
    events = _parse(out.getvalue())
    assert sim.stopped is True
    assert [p.meals for p in sim.philosophers] == [2, 2]
    assert all(message != "died" for _, _, message in events)
    for pid in (1, 2):
        eating = [e for e in events if e[1] == pid and e[2] == "is eating"]
        assert 1 <= len(eating) <= 2
    stamps = [stamp for stamp, _, _ in events]
    assert stamps == sorted(stamps)


def test_run_reports_a_death_last():
    out = io.StringIO()
    sim = Simulation(Config(2, 50, 200, 200), out=out)
    sim.run()
    events = _parse(out.getvalue())
    deaths = [e for e in events if e[2] == "died"]
    assert len(deaths) == 1
    assert events[-1] == deaths[0]
    assert deaths[0][1] in (1, 2)
    assert deaths[0][0] >= 50
    assert sim.stopped is True