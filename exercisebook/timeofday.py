"""A time of day kept as hour, minute and second."""

from __future__ import annotations


class TimeOfDay:
    """A validated time on a 24-hour clock."""

    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0) -> None:
        self.hour = 0
        self.minute = 0
        self.second = 0
        self.set_time(hour, minute, second)

    def set_time(self, hour: int, minute: int, second: int) -> None:
        """Set all three parts at once, rejecting values out of range."""
        if not (0 <= hour <= 24 and 0 <= minute <= 59 and 0 <= second <= 59):
            raise ValueError("hour, minute, or second was out of range.")
        self.hour = hour
        self.minute = minute
        self.second = second

    def to_universal_string(self) -> str:
        """Render on a 24-hour clock."""
        return f"{self.hour:02d}:{self.minute:02d}{self.second:02d}"

    def to_standard_string(self) -> str:
        """Render on a 12-hour clock with an AM or PM suffix."""
        suffix = "AM" if self.hour < 12 else "PM"
        return f"{self.hour % 12:02d}:{self.minute:02d}:{self.second:02d}{suffix}"

    def __repr__(self) -> str:
        return f"TimeOfDay({self.hour}, {self.minute}, {self.second})"