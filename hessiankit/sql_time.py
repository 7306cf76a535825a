"""Values of ``java.sql.Date`` and ``java.sql.Time``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}:\d{2}")


@dataclass
class SqlDate:
    """A ``java.sql.Date`` value wrapping a point in time."""

    time: datetime

    java_class_name: ClassVar[str] = "java.sql.Date"

    @classmethod
    def value_of(cls, date_str: str) -> SqlDate:
        """Parse a date written as ``YYYY-MM-DD``, at midnight UTC."""
        if not _DATE_PATTERN.fullmatch(date_str):
            raise ValueError(f"cannot parse {date_str!r} as a date")
        parsed = datetime.strptime(date_str, "%Y-%m-%d")
        return cls(parsed.replace(tzinfo=timezone.utc))

    def year(self) -> int:
        return self.time.year

    def month(self) -> int:
        return self.time.month

    def day(self) -> int:
        return self.time.day


@dataclass
class SqlTime:
    """A ``java.sql.Time`` value wrapping a point in time."""

    time: datetime

    java_class_name: ClassVar[str] = "java.sql.Time"

    @classmethod
    def value_of(cls, time_str: str) -> SqlTime:
        """Parse a time of day written as ``HH:MM:SS``, on 1970-01-01 UTC."""
        if not _TIME_PATTERN.fullmatch(time_str):
            raise ValueError(f"cannot parse {time_str!r} as a time")
        hour, minute, second = (int(part) for part in time_str.split(":"))
        return cls(datetime(1970, 1, 1, hour, minute, second, tzinfo=timezone.utc))

    def hour(self) -> int:
        return self.time.hour

    def minute(self) -> int:
        return self.time.minute

    def second(self) -> int:
        return self.time.second


def sql_time_class_names() -> tuple[str, ...]:
    """Return the Java class names handled as SQL time values."""
    return (SqlDate.java_class_name, SqlTime.java_class_name)