"""A calendar date between the years 1900 and 2100."""

from __future__ import annotations

from dataclasses import dataclass

DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass
class Date:
    """A month, day and year that can be moved forward day by day."""

    month: int = 1
    day: int = 1
    year: int = 1900

    def __post_init__(self) -> None:
        self.set_date(self.month, self.day, self.year)

    def set_date(self, month: int, day: int, year: int) -> None:
        """Validate and store a new date."""
        if month < 1 or month > 12:
            raise ValueError("Month must be 1-12.")
        if year > 2100 or year < 1900:
            raise ValueError("Year must be 1900-2100")
        if (day < 1 or day > DAYS_IN_MONTH[month]) or (
            self.is_leap_year(year) and month == 2 and day > 29
        ):
            raise ValueError("Day is invalid based on month and year.")
        self.month = month
        self.day = day
        self.year = year

    def increment(self) -> Date:
        """Move forward one day and return this date."""
        if not self.end_of_month(self.day):
            self.day += 1
        elif self.month == 12:
            self.year += 1
            self.month = 1
            self.day = 1
        else:
            self.month += 1
            self.day = 1
        return self

    def __iadd__(self, days: int) -> Date:
        for _ in range(days):
            self.increment()
        return self

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)

    def end_of_month(self, day: int) -> bool:
        """Whether ``day`` is the last day of this date's month."""
        if self.month == 2 and self.is_leap_year(self.year):
            return day == 29
        return day == DAYS_IN_MONTH[self.month]

    def __str__(self) -> str:
        return f"{MONTH_NAMES[self.month]} {self.day}, {self.year}"