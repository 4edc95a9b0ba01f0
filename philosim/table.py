"""Shared state of the dining table: philosophers, forks and locks."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from .clock import now_ms
from .parse import validate_args


@dataclass(eq=False)
class Philosopher:
    """One diner, holding references to the two forks beside it."""

    id: int
    table: Table
    left_fork: threading.Lock
    right_fork: threading.Lock
    meals_eaten: int = 0
    last_meal_time: int = 0


@dataclass(eq=False)
class Table:
    """Simulation settings together with the locks guarding shared state."""

    num_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    num_meals: int | None = None
    output: TextIO = field(default_factory=lambda: sys.stdout)
    start_time: int = field(default_factory=now_ms)
    someone_died: bool = False
    philosophers: list[Philosopher] = field(default_factory=list)
    forks: list[threading.Lock] = field(default_factory=list)
    print_lock: threading.Lock = field(default_factory=threading.Lock)
    death_lock: threading.Lock = field(default_factory=threading.Lock)
    meal_lock: threading.Lock = field(default_factory=threading.Lock)

    def log(self, philo: Philosopher, message: str) -> bool:
        """Print a timestamped state line unless the simulation has ended.

        Returns True when the line was written.
        """
        with self.print_lock:
            if self.someone_died:
                return False
            elapsed = now_ms() - self.start_time
            print(f"{elapsed} {philo.id} {message}", file=self.output, flush=True)
            return True

    def is_over(self) -> bool:
        """Return True once a death or full meal count has ended the run."""
        with self.death_lock:
            return self.someone_died

    def stop(self) -> None:
        """Mark the simulation as finished."""
        with self.death_lock:
            self.someone_died = True

    def last_meal(self, philo: Philosopher) -> int:
        """Return the time, in milliseconds, when ``philo`` last finished eating."""
        with self.death_lock:
            return philo.last_meal_time

    def record_meal(self, philo: Philosopher) -> None:
        """Stamp the end of a meal and count it."""
        with self.death_lock:
            philo.last_meal_time = now_ms()
        with self.meal_lock:
            philo.meals_eaten += 1

    def meals(self, philo: Philosopher) -> int:
        """Return how many meals ``philo`` has finished."""
        with self.meal_lock:
            return philo.meals_eaten


def build_table(args: Sequence[str], output: TextIO | None = None) -> Table:
    """Validate the arguments and seat the philosophers around a new table.

    Raises ArgumentError when the arguments are invalid.
    """
    values = validate_args(args)
    num_philo, time_to_die, time_to_eat, time_to_sleep = values[:4]
    table = Table(
        num_philo=num_philo,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        num_meals=values[4] if len(values) == 5 else None,
        output=output if output is not None else sys.stdout,
    )
    table.forks = [threading.Lock() for _ in range(num_philo)]
    table.philosophers = [
        Philosopher(
            id=seat + 1,
            table=table,
            left_fork=table.forks[seat],
            right_fork=table.forks[(seat + 1) % num_philo],
            last_meal_time=table.start_time,
        )
        for seat in range(num_philo)
    ]
    return table