"""What each philosopher does: take forks, eat, sleep and think."""

from __future__ import annotations

import time

from .clock import precise_sleep
from .table import Philosopher


def eat(philo: Philosopher) -> None:
    """Pick up both forks, eat for the table's eating time and put them down.

    Even-numbered philosophers reach for the left fork first, odd-numbered
    ones for the right, so that neighbours do not deadlock.
    """
    table = philo.table
    if philo.id % 2 == 0:
        first, second = philo.left_fork, philo.right_fork
    else:
        first, second = philo.right_fork, philo.left_fork
    with first:
        table.log(philo, "has taken a fork")
        with second:
            table.log(philo, "has taken a fork")
            table.log(philo, "is eating")
            precise_sleep(table.time_to_eat)
            table.record_meal(philo)


def sleep_phase(philo: Philosopher) -> None:
    """Announce sleeping and sleep for the table's sleeping time."""
    philo.table.log(philo, "is sleeping")
    precise_sleep(philo.table.time_to_sleep)


def think(philo: Philosopher) -> None:
    """Announce thinking."""
    philo.table.log(philo, "is thinking")


def lone_philosopher(philo: Philosopher) -> None:
    """Run a philosopher alone at the table: one fork, no meal, then death."""
    table = philo.table
    table.log(philo, "has taken a fork")
    precise_sleep(table.time_to_die)
    table.log(philo, "died")


def run_philosopher(philo: Philosopher) -> None:
    """Cycle through eating, sleeping and thinking until the run is over."""
    table = philo.table
    if philo.id % 2 == 0:
        time.sleep(table.time_to_eat / 2000)
    steps = (eat, sleep_phase, think)
    while True:
        for step in steps:
            if table.is_over():
                return
            step(philo)