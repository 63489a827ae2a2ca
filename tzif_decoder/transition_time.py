from abc import ABC, abstractmethod
from dataclasses import dataclass

from .errors import InvalidTzifFormat
from .models import LocalTimeType, UtcLocalFlag, WallStandardFlag

DST_ADJUSTMENT_SECS = 3600


@dataclass(frozen=True)
class Time(ABC):
    """
    A raw transition instant together with the clock it was recorded on.

    Use one of the concrete subclasses; `from_flags` picks the right one from
    the std/wall and UT/local indicators of a local time type.
    """

    timestamp: int

    @abstractmethod
    def to_ut(self, local: LocalTimeType) -> int:
        ...

    @staticmethod
    def from_flags(
        timestamp: int, wall_standard: WallStandardFlag, utc_local: UtcLocalFlag
    ) -> "Time":
        match wall_standard, utc_local:
            case WallStandardFlag.STANDARD, UtcLocalFlag.UT:
                return UniversalTime(timestamp)
            case WallStandardFlag.STANDARD, UtcLocalFlag.LOCAL:
                return LocalStandardTime(timestamp)
            case WallStandardFlag.WALL, UtcLocalFlag.LOCAL:
                return LocalWallTime(timestamp)
            case WallStandardFlag.WALL, UtcLocalFlag.UT:
                raise InvalidTzifFormat("transition time can't be wall + universal")
            case _:
                raise ValueError("Invalid state.")


@dataclass(frozen=True)
class UniversalTime(Time):
    def to_ut(self, local: LocalTimeType) -> int:
        return self.timestamp


@dataclass(frozen=True)
class LocalStandardTime(Time):
    def to_ut(self, local: LocalTimeType) -> int:
        return self.timestamp + local.utc_offset_secs


@dataclass(frozen=True)
class LocalWallTime(Time):
    def to_ut(self, local: LocalTimeType) -> int:
        # Flat one hour adjustment, not derived from the preceding standard offset.
        dst_adjustment = DST_ADJUSTMENT_SECS if local.is_dst else 0
        return self.timestamp + local.utc_offset_secs + dst_adjustment


def to_ut(time: Time, local: LocalTimeType) -> int:
    """
    Resolve `time`, recorded under the rules of `local`, to UTC seconds.
    """
    return time.to_ut(local)
