"""The dining table: forks, philosophers and the threads that run them."""

from __future__ import annotations

import sys
import threading
import time
from enum import Enum
from typing import List, Optional, TextIO

from philo.parsing import Settings

ROUNDS = 3


class Action(Enum):
    """What a philosopher announces; the value is the printed text."""

    FORK = "has taken a fork"
    EAT = "is eating"
    SLEEP = "is sleeping"
    THINK = "is thinking"
    DIE = "died"


def _pause(microseconds: int) -> None:
    time.sleep(microseconds / 1_000_000)


class Table:
    """Shared state of one dinner: forks, the output lock and the clock."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.forks = [threading.Lock() for _ in range(settings.philosophers)]
        self.print_lock = threading.Lock()
        self._start = time.monotonic_ns()

    def restart_clock(self) -> None:
        """Reset the reference time used for timestamps."""
        self._start = time.monotonic_ns()

    def elapsed(self) -> int:
        """Microseconds since the clock was last started."""
        return max(0, (time.monotonic_ns() - self._start) // 1000)

    def announce(self, action: Action, seat: int) -> None:
        """Print an action for the philosopher in ``seat`` (counted from 1)."""
        stamp = self.elapsed()
        with self.print_lock:
            actions = [Action.FORK, Action.FORK] if action is Action.EAT else []
            actions.append(action)
            for item in actions:
                self.out.write(f"{stamp} {seat} {item.value}\n")
            self.out.flush()


class Philosopher(threading.Thread):
    """One diner; eats, sleeps and thinks for a fixed number of rounds."""

    def __init__(self, table: Table, index: int) -> None:
        super().__init__(name=f"philosopher-{index + 1}")
        self.table = table
        self.index = index
        self.seat = index + 1
        self.left_fork = index
        last = table.settings.philosophers - 1
        self.right_fork = 0 if index == last else index + 1
        self.meals = 0

    def eat(self) -> None:
        """Take both forks, lower-numbered first, eat, then put them down."""
        first, second = sorted((self.left_fork, self.right_fork))
        forks = self.table.forks
        with forks[first], forks[second]:
            self.table.announce(Action.EAT, self.seat)
            self.meals += 1
            _pause(self.table.settings.time_to_eat)

    def sleep_and_think(self) -> None:
        """Sleep, then think for as long as eating outlasts sleeping."""
        settings = self.table.settings
        self.table.announce(Action.SLEEP, self.seat)
        _pause(settings.time_to_sleep)
        self.table.announce(Action.THINK, self.seat)
        think = settings.time_to_eat - settings.time_to_sleep
        if think > 0:
            _pause(think)

    def run(self) -> None:
        # Wait until the table has finished seating this philosopher.
        with self.table.print_lock:
            pass
        if self.table.settings.philosophers == 1:
            self.table.announce(Action.DIE, self.seat)
            return
        for _ in range(ROUNDS):
            if self.index % 2 == 0:
                self.eat()
                self.sleep_and_think()
            else:
                self.sleep_and_think()
                self.eat()


def run_dinner(settings: Settings, out: Optional[TextIO] = None) -> List[Philosopher]:
    """Seat every philosopher, run the dinner to its end and return the diners."""
    table = Table(settings, out)
    philosophers: List[Philosopher] = []
    try:
        for index in range(settings.philosophers):
            philosopher = Philosopher(table, index)
            with table.print_lock:
                philosopher.start()
                philosophers.append(philosopher)
                table.restart_clock()
    finally:
        for philosopher in philosophers:
            philosopher.join()
    return philosophers