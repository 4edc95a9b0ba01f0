"""Running a whole dinner and the command-line entry point."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence

from .monitor import waiter
from .parse import ArgumentError
from .routine import lone_philosopher, run_philosopher
from .table import Table, build_table


def run(table: Table) -> None:
    """Start every philosopher and the waiter, and wait for them all to finish."""
    if table.num_philo == 1:
        lone = threading.Thread(
            target=lone_philosopher, args=(table.philosophers[0],), name="philo-1"
        )
        lone.start()
        lone.join()
        return
    diners = [
        threading.Thread(target=run_philosopher, args=(philo,), name=f"philo-{philo.id}")
        for philo in table.philosophers
    ]
    for diner in diners:
        diner.start()
    watcher = threading.Thread(target=waiter, args=(table,), name="waiter")
    watcher.start()
    watcher.join()
    for diner in diners:
        diner.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 4 <= len(args) <= 5:
        print("Wrong number of arguments")
        print("Error")
        return 1
    try:
        table = build_table(args)
    except ArgumentError:
        print("Error")
        return 1
    run(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())