import io

from philosim.simulation import main, run
from philosim.table import build_table


def _messages(output):
    return [line.split(" ", 2) for line in output.getvalue().splitlines()]


def test_main_wrong_argument_count(capsys):
    assert main(["2", "800", "200"]) == 1
    assert capsys.readouterr().out == "Wrong number of arguments\nError\n"


def test_main_invalid_argument(capsys):
    assert main(["2", "800", "abc", "200"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_zero_argument(capsys):
    assert main(["0", "800", "200", "200"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_runs_to_completion(capsys):
    assert main(["2", "800", "10", "10", "1"]) == 0
    out = capsys.readouterr().out
    assert "is eating" in out
    assert "died" not in out


def test_run_until_meal_target_reached():
    output = io.StringIO()
    table = build_table(["3", "800", "20", "20", "2"], output)
    run(table)
    assert table.is_over() is True
    assert all(table.meals(philo) >= 2 for philo in table.philosophers)
    assert "died" not in output.getvalue()


def test_run_timestamps_never_decrease():
    output = io.StringIO()
    table = build_table(["4", "800", "10", "10", "2"], output)
    run(table)
    stamps = [int(parts[0]) for parts in _messages(output)]
    assert stamps == sorted(stamps)
    ids = {int(parts[1]) for parts in _messages(output)}
    assert ids == {1, 2, 3, 4}


def test_run_single_philosopher_dies():
    output = io.StringIO()
    table = build_table(["1", "40", "10", "10"], output)
    run(table)
    lines = _messages(output)
    assert [parts[2] for parts in lines] == ["has taken a fork", "died"]
    assert all(parts[1] == "1" for parts in lines)


def test_run_reports_one_death_when_starving():
    output = io.StringIO()
    table = build_table(["2", "30", "100", "10"], output)
    run(table)
    deaths = [parts for parts in _messages(output) if parts[2] == "died"]
    assert len(deaths) == 1
    assert table.is_over() is True