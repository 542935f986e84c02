# philosophers

A simulation of the dining philosophers problem. Each philosopher runs
in its own thread and each fork is a lock. Philosophers take two forks,
eat, put the forks down, sleep and think. A monitor thread watches for
a philosopher who has gone too long without eating and reports the
first one who starves. If a number of meals is given, each philosopher
stops after eating that many times, and the monitor ends the run once
every philosopher has done so.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_meals]
```

The same entry point can be started with `python -m philosophers.cli`.

All times are in milliseconds. Each argument may carry leading
whitespace and `+` signs, followed by digits only. At least two
philosophers are required and every other value must be greater
than zero.

Example:

```
philo 5 800 200 200 7
```

Each event is printed to standard output as a line:

```
<elapsed ms> <philosopher id> <message>
```

The messages are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Once the run has stopped, no more events
are printed.

If the number of arguments is wrong, a message is printed to standard
error; if an argument is malformed or out of range, a message is
printed to standard output. In both cases the command exits with
status 1.

## Library use

```python
import sys

from philosophers.config import Config
from philosophers.simulation import Simulation

config = Config.from_args(["4", "410", "200", "200", "3"])
Simulation(config, sys.stdout).run()
```

- `philosophers.config.Config` holds the settings; `meals` is `None`
  when no meal count is given. `Config.from_args` validates a list of
  argument strings and builds the settings.
- `philosophers.config.check_args` validates a list of 4 or 5 argument
  strings, returns them as integers and raises
  `philosophers.config.ArgumentError` (a `ValueError`) when they are
  invalid.
- `philosophers.simulation.Simulation(config, out)` runs the table,
  writing events to the text stream `out` (standard output by default).
  Its `run` method blocks until every thread has finished.
- `philosophers.numbers.parse_long` parses a leading integer, wrapping
  it to a signed 64-bit value; `philosophers.numbers.is_valid_number`
  checks the accepted argument form.

## Tests

```
pip install ".[test]"
pytest
```