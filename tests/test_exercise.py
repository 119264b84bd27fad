import io

from philo.exercise import run_exercise


def test_every_thread_reports_three_lines():
    out = io.StringIO()
    run_exercise(40, out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 120


def test_thread_reports_are_contiguous():
    out = io.StringIO()
    run_exercise(30, out)
    lines = out.getvalue().splitlines()
    seen = set()
    for start in range(0, len(lines), 3):
        first, middle, last = lines[start:start + 3]
        number = int(first.split(" ")[0])
        assert first == f"{number} thread's started"
        assert middle == f"i = {number - 1}"
        assert last == f"{number} thread's finished"
        seen.add(number)
    assert seen == set(range(1, 31))


def test_results_are_incremented_values():
    results = run_exercise(25, io.StringIO())
    assert results == list(range(1, 26))


def test_zero_threads():
    out = io.StringIO()
    assert run_exercise(0, out) == []
    assert out.getvalue() == ""