from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class WallStandardFlag(Enum):
    """
    Represents the wall/std flag in a TZif file.
    """

    WALL = 0
    STANDARD = 1


class UtcLocalFlag(Enum):
    """
    Represents the UT/local flag in a TZif file.
    """

    LOCAL = 0
    UT = 1


def indicator_flags(
    wall_standard_flags: Sequence[WallStandardFlag],
    is_utc_flags: Sequence[UtcLocalFlag],
    type_index: int,
) -> tuple[WallStandardFlag, UtcLocalFlag]:
    # Absent indicator tables mean wall clock, local time.
    wall_standard = (
        wall_standard_flags[type_index] if wall_standard_flags else WallStandardFlag.WALL
    )
    utc_local = is_utc_flags[type_index] if is_utc_flags else UtcLocalFlag.LOCAL
    return wall_standard, utc_local


@dataclass(frozen=True)
class LeapSecondTransition:
    """
    Represents a leap second entry in a TZif file.
    """

    transition_time: int
    correction: int


@dataclass(frozen=True)
class TimeTypeInfo:
    """
    Represents a ttinfo structure in a TZif file.
    """

    utc_offset_secs: int
    is_dst: bool
    abbrev_index: int


@dataclass(frozen=True)
class LocalTimeType:
    """
    A ttinfo with its designation resolved from the abbreviation blob.
    """

    abbreviation: str
    utc_offset_secs: int
    is_dst: bool

    @property
    def utc_offset_hours(self) -> float:
        return self.utc_offset_secs / 3600
