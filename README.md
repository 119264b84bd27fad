# philo

A small simulation of the dining philosophers problem. Each philosopher runs
in its own thread. Forks are locks shared between neighbours, and every
action is printed with a timestamp.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

Every argument must be a non-negative whole number written in digits only.
There can be at most 200 philosophers, and there must be at least one. No
other argument may go above 4294967295. The times are in microseconds.

Example:

```
philo 5 800 200 200
```

Each output line has the form:

```
<timestamp> <philosopher> <action>
```

The timestamp is in microseconds, counted from the moment the last
philosopher was seated. Philosophers are numbered from 1. The action is one
of `has taken a fork`, `is eating`, `is sleeping`, `is thinking` or `died`.
Each meal is printed as two `has taken a fork` lines followed by `is eating`.

A table with only one philosopher reports that philosopher as dead at once.
Otherwise each philosopher goes through three rounds. Philosophers in
odd-numbered seats (1, 3, 5, ...) eat first and then sleep and think. The
others sleep and think first and then eat. After sleeping, a philosopher
thinks for `time_to_eat - time_to_sleep` when that is positive. Forks are
always taken lower-numbered first, so the philosophers cannot deadlock.

The exit status is 0 on success. It is 1 when the arguments are rejected or
the dinner cannot be run. A rejected argument is reported on standard error.
The one exception is a philosopher count of zero, which is reported on
standard output.

## What it does not do

Nothing watches over the philosophers while they eat. `time_to_die` is
checked and stored, but no philosopher starves. The only `died` line is
the one for a single-philosopher table. The optional meal count is parsed
into `Settings.meals` but does not end the dinner early. Every dinner runs
exactly three rounds.

## Library use

```python
import sys
from philo.parsing import parse_arguments
from philo.table import run_dinner

settings = parse_arguments(["5", "800", "200", "200"])
diners = run_dinner(settings, sys.stdout)
print([diner.meals for diner in diners])
```

- `philo.parsing.parse_arguments(args)` validates the arguments, without the
  program name, and returns a frozen `Settings`. On bad input it raises
  `ArgumentError`, a `ValueError`.
- `philo.parsing.parse_number`, `all_digits` and `check_limits` are the
  individual checks.
- `philo.table.Table`, `Philosopher` and `Action` are the shared table, the
  diner thread and the printed actions.
- `run_dinner` returns the finished `Philosopher` objects.
- `philo.cli.main(argv)` is the command above. It returns the exit status.

`philo.exercise.run_exercise(count, out)` is a smaller demonstration. It
starts `count` threads (10000 by default) that take turns under a single
lock. It returns each thread's incremented value, in thread order.

## Tests

```
pip install .[test]
pytest
```