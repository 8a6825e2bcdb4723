# MIT License (see LICENSE)
import pytest
from gravity_sim.report import (
    BufferedReporter,
    NullReporter,
    StreamReporter,
    format_entity,
    format_real,
    format_report,
)
from gravity_sim.simulation import reference_entities
from gravity_sim.types import Entity
from gravity_sim.util import real


@pytest.mark.parametrize("value, expected", [
    ("0", "0"),
    ("-1", "-1"),
    ("2", "2"),
    ("0.5", "0.5"),
    ("-0.999998", "-0.999998"),
    ("0.1234567", "0.123457"),
    ("123456789", "1.23457e+8"),
])
def test_format_real_general_notation(value, expected):
    assert format_real(real(value)) == expected


@pytest.mark.parametrize("value, digits, expected", [
    ("1.234e-5", 6, "1.234e-5"),
    ("1.234e-5", 18, "1.234e-5"),
    ("1.5e-7", 30, "1.5e-7"),
    ("0.0001234", 18, "0.0001234"),
    ("123456789", 18, "123456789"),
])
def test_format_real_notation_independent_of_digits(value, digits, expected):
    """Scientific below 1e-4 and from 10**digits up, at any digit count (like %g)."""
    assert format_real(real(value), digits) == expected


def test_format_real_digits():
    assert format_real(real("3.14159265358979"), 3) == "3.14"
    assert format_real(real("-1") + real("4e-15"), 20) == "-0.999999999999996"


def test_format_entity_at_rest():
    e = Entity(mass=1, position=(-1, 0))
    assert format_entity(e) == "p-1,0, v0∠0"


@pytest.mark.parametrize("velocity, speed, angle", [
    ((0, 1), "1", "90"),
    ((-2, 0), "2", "180"),
    ((1, -1), "1.41421", "-45"),
    ((3, 4), "5", "53.1301"),
])
def test_format_entity_speed_and_heading(velocity, speed, angle):
    """Angle is atan2(vy, vx) in degrees, counter-clockwise from +x."""
    e = Entity(mass=1, position=(1, 1), velocity=velocity)
    assert format_entity(e) == f"p1,1, v{speed}∠{angle}"


def test_format_report_two_space_separator():
    line = format_report(reference_entities())
    assert line == "p-1,0, v0∠0  p1,0, v0∠0  p1,1, v0∠0"
    assert not line.endswith(" ")


def test_stream_reporter_writes_lines():
    import io

    out = io.StringIO()
    reporter = StreamReporter(out)
    reporter.emit(0, "first")
    reporter.emit(5, "second")
    reporter.flush()
    assert out.getvalue() == "first\nsecond\n"


def test_buffered_and_null_reporters():
    buf = BufferedReporter()
    buf.emit(0, "a")
    buf.emit(3, "b")
    assert len(buf) == 2
    assert buf.steps == [0, 3]
    assert buf.lines == ["a", "b"]

    NullReporter().emit(0, "ignored")
