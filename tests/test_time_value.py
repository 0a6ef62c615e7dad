import pytest

from capshift.core.time_value import TimeValue
from capshift.exceptions import NegativeTime, OutOfRange


def test_from_components_and_milliseconds_agree() -> None:
    value = TimeValue.from_components(13, 15, 3, 450)
    assert value.to_milliseconds() == 47_703_450
    assert TimeValue.from_milliseconds(47_703_450) == value


def test_round_trip_through_milliseconds() -> None:
    for components in [(0, 0, 0, 0), (23, 54, 17, 837), (3, 5, 6, 1), (10_000, 59, 59, 999)]:
        value = TimeValue.from_components(*components)
        assert TimeValue.from_milliseconds(value.to_milliseconds()) == value


def test_from_milliseconds_decomposes() -> None:
    value = TimeValue.from_milliseconds(86_897)
    assert (value.hours, value.minutes, value.seconds, value.milliseconds) == (0, 1, 26, 897)


def test_large_hours_do_not_overflow() -> None:
    value = TimeValue.from_components(10_000, 0, 0, 0)
    assert value.to_milliseconds() == 36_000_000_000
    assert value.offset(1).milliseconds == 1


@pytest.mark.parametrize(
    "components",
    [(0, 60, 0, 0), (0, 0, 60, 0), (0, 0, 0, 1000), (-1, 0, 0, 0), (0, -1, 0, 0)],
)
def test_out_of_range_components(components) -> None:
    with pytest.raises(OutOfRange):
        TimeValue.from_components(*components)


def test_milliseconds_upper_bound_is_999() -> None:
    assert TimeValue.from_components(0, 0, 0, 999).milliseconds == 999
    with pytest.raises(OutOfRange) as excinfo:
        TimeValue.from_components(0, 0, 0, 1000)
    assert excinfo.value.field == "milliseconds"


def test_offset_adds_milliseconds() -> None:
    value = TimeValue.from_components(0, 0, 0, 0)
    shifted = value.offset(86_057_837)
    assert shifted.to_milliseconds() == 86_057_837
    assert value.to_milliseconds() == 0


def test_offset_carries_into_larger_units() -> None:
    value = TimeValue.from_components(0, 59, 59, 900)
    assert value.offset(100) == TimeValue.from_components(1, 0, 0, 0)


def test_negative_offset() -> None:
    value = TimeValue.from_components(0, 0, 1, 500)
    assert value.offset(-1500).to_milliseconds() == 0


def test_offset_below_zero_fails_and_keeps_value() -> None:
    value = TimeValue.from_milliseconds(0)
    with pytest.raises(NegativeTime) as excinfo:
        value.offset(-1)
    assert excinfo.value.delta == -1
    assert value.to_milliseconds() == 0


def test_negative_total_is_rejected() -> None:
    with pytest.raises(NegativeTime):
        TimeValue.from_milliseconds(-5)


def test_ordering_follows_time() -> None:
    earlier = TimeValue.from_components(0, 59, 59, 999)
    later = TimeValue.from_components(1, 0, 0, 0)
    assert earlier < later
    assert max(earlier, later) == later


def test_format() -> None:
    value = TimeValue.from_components(3, 5, 6, 1)
    assert value.format(",") == "03:05:06,001"
    assert value.format(".") == "03:05:06.001"
    assert str(value) == "03:05:06.001"
