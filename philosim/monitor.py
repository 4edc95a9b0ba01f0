"""The waiter that watches for starvation and for everyone having eaten."""

from __future__ import annotations

import time

from .clock import now_ms
from .table import Philosopher, Table

_POLL_SECONDS = 0.001


def check_death(philo: Philosopher) -> bool:
    """Declare ``philo`` dead if it has gone hungry too long.

    Returns True when the philosopher died and the run was stopped.
    """
    table = philo.table
    current = now_ms()
    if current - table.last_meal(philo) > table.time_to_die:
        with table.death_lock:
            table.log(philo, "died")
            table.someone_died = True
        return True
    return False


def all_ate(table: Table) -> bool:
    """Return True when a meal target is set and every philosopher reached it."""
    if table.num_meals is None:
        return False
    return all(table.meals(philo) >= table.num_meals for philo in table.philosophers)


def waiter(table: Table) -> None:
    """Watch the table until someone dies or everyone has eaten enough."""
    if table.num_philo == 1:
        return
    while True:
        if any(check_death(philo) for philo in table.philosophers):
            return
        if all_ate(table):
            table.stop()
            return
        time.sleep(_POLL_SECONDS)