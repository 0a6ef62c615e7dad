"""
Caption time values
Millisecond-resolution time with validated construction and checked offsets
"""

from dataclasses import dataclass

from capshift.exceptions import NegativeTime, OutOfRange

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE


@dataclass(frozen=True, order=True)
class TimeValue:
    """Point in a caption timeline: hours, minutes, seconds and milliseconds"""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    def __post_init__(self):
        if self.hours < 0:
            raise OutOfRange("hours", self.hours)
        if not 0 <= self.minutes < 60:
            raise OutOfRange("minutes", self.minutes)
        if not 0 <= self.seconds < 60:
            raise OutOfRange("seconds", self.seconds)
        if not 0 <= self.milliseconds < MILLIS_PER_SECOND:
            raise OutOfRange("milliseconds", self.milliseconds)

    @classmethod
    def from_components(
        cls, hours: int, minutes: int, seconds: int, milliseconds: int
    ) -> "TimeValue":
        """
        Build a time from its components

        Raises:
            OutOfRange: if minutes or seconds are not below 60, milliseconds
                not below 1000, or any component is negative
        """
        return cls(hours, minutes, seconds, milliseconds)

    @classmethod
    def from_milliseconds(cls, total: int) -> "TimeValue":
        """
        Decompose a flat millisecond count

        Parameters:
            total: Non-negative number of milliseconds

        Returns:
            TimeValue whose to_milliseconds() equals total
        """
        if total < 0:
            raise NegativeTime(total, 0)

        hours, remainder = divmod(total, MILLIS_PER_HOUR)
        minutes, remainder = divmod(remainder, MILLIS_PER_MINUTE)
        seconds, milliseconds = divmod(remainder, MILLIS_PER_SECOND)
        return cls(hours, minutes, seconds, milliseconds)

    def to_milliseconds(self) -> int:
        """Total milliseconds since zero"""
        return (
            self.hours * MILLIS_PER_HOUR
            + self.minutes * MILLIS_PER_MINUTE
            + self.seconds * MILLIS_PER_SECOND
            + self.milliseconds
        )

    def offset(self, delta: int) -> "TimeValue":
        """
        Shift this time by a signed number of milliseconds

        Parameters:
            delta: Milliseconds to add (negative moves the time earlier)

        Returns:
            A new TimeValue; this one is left untouched

        Raises:
            NegativeTime: if the shifted time would be before zero
        """
        current = self.to_milliseconds()
        shifted = current + delta
        if shifted < 0:
            raise NegativeTime(current, delta)
        return TimeValue.from_milliseconds(shifted)

    def format(self, separator: str = ",") -> str:
        """Render as HH:MM:SS<separator>mmm"""
        return "%02d:%02d:%02d%s%03d" % (
            self.hours,
            self.minutes,
            self.seconds,
            separator,
            self.milliseconds,
        )

    def __str__(self) -> str:
        return self.format(".")
