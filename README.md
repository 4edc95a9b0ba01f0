# philosim

A threaded simulation of the dining philosophers problem. Philosophers sit around a
round table with one fork between each pair of neighbours. Each one takes two forks,
eats, puts them down, sleeps and thinks, then starts again. A waiter thread watches
the table. The simulation ends when a philosopher starves, or when every philosopher
has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philosim NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

The same entry point can be run as `python -m philosim.simulation`.

All times are in milliseconds. Every argument must be a positive integer no larger
than 2147483647. Leading blanks and a single `+` sign are accepted.

- `NUMBER_OF_PHILOSOPHERS`: how many philosophers, and so how many forks, are at the table.
- `TIME_TO_DIE`: a philosopher dies once more than this much time has passed since
  they last finished eating, or since the start of the simulation if they have not
  eaten yet.
- `TIME_TO_EAT`: how long a meal takes. The philosopher holds both forks for all of it.
- `TIME_TO_SLEEP`: how long a philosopher sleeps after eating.
- `MEALS` (optional): the simulation stops once every philosopher has eaten at least
  this many meals.

Example:

```
philosim 5 800 200 200 7
```

Each state change is printed as one line. The line gives the milliseconds since the
start, the philosopher's number and what happened:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

The possible messages are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. After a death or after every philosopher has eaten enough,
no more lines are printed.

Even-numbered philosophers wait half the eating time before their first meal and
pick up their left fork first; odd-numbered ones pick up their right fork first.

A single philosopher takes one fork, waits `TIME_TO_DIE` milliseconds and dies;
`MEALS` has no effect in that case.

If the number of arguments is wrong, the command prints `Wrong number of arguments`
and then `Error`; if an argument is not a valid positive integer it prints `Error`.
Either way it exits with status 1. A completed run exits with status 0.

## Library use

The simulation can also be started from Python:

```python
import io
from philosim.table import build_table
from philosim.simulation import run

out = io.StringIO()
table = build_table(["4", "410", "200", "200", "3"], out)
run(table)
print(out.getvalue())
```

- `philosim.table.build_table(args, output=None)` validates the arguments and returns
  a `Table` with its `Philosopher`s and forks; output goes to `sys.stdout` by default.
- `philosim.simulation.run(table)` starts the philosopher threads and the waiter and
  returns when they have all finished.
- `philosim.parse.validate_args(args)` checks an argument list (without the program
  name) and returns the values as integers. It raises `philosim.parse.ArgumentError`,
  a subclass of `ValueError`, when the list is not valid.
- `philosim.parse.parse_long(text)` reads one argument, returning `-1` for text that
  holds a character other than digits after the blanks and sign.