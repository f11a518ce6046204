import io

import pytest

from cryptolab.timing import Stopwatch


def _clock(*values):
    ticks = iter(values)
    return lambda: next(ticks)


def test_elapsed_after_block_uses_recorded_end():
    out = io.StringIO()
    with Stopwatch(out, clock=_clock(10.0, 12.5)) as watch:
        pass
    assert watch.elapsed() == pytest.approx(2.5)
    # Asking again does not read the clock any more.
    assert watch.elapsed() == pytest.approx(2.5)


def test_report_line_written_on_exit():
    out = io.StringIO()
    with Stopwatch(out, clock=_clock(1.0, 3.0)):
        assert out.getvalue() == ""
    assert out.getvalue() == "Operation Finished. It took: 2 seconds !!!\n"


def test_no_report_when_disabled():
    out = io.StringIO()
    with Stopwatch(out, clock=_clock(0.0, 5.0), report=False) as watch:
        pass
    assert out.getvalue() == ""
    assert watch.elapsed() == pytest.approx(5.0)


def test_elapsed_while_running_reads_clock():
    out = io.StringIO()
    with Stopwatch(out, clock=_clock(2.0, 2.75, 4.0)) as watch:
        assert watch.elapsed() == pytest.approx(0.75)
    assert watch.elapsed() == pytest.approx(2.0)


def test_elapsed_before_start_raises():
    with pytest.raises(RuntimeError):
        Stopwatch(report=False).elapsed()


def test_real_clock_is_non_negative():
    with Stopwatch(report=False) as watch:
        sum(range(1000))
    assert watch.elapsed() >= 0.0