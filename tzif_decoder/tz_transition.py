from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Iterator

from .models import LocalTimeType
from .transition_time import Time

if TYPE_CHECKING:
    from .tzif import TimeZoneInfo

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class TimeZoneTransition:
    time: Time
    local: LocalTimeType

    @property
    def transition_time_ut(self) -> int:
        return self.time.to_ut(self.local)

    @property
    def transition_time_utc(self) -> datetime:
        try:
            return _EPOCH + timedelta(seconds=self.transition_time_ut)
        except OverflowError:
            # Far-future/past values are valid in 64-bit files but not as datetimes.
            if self.transition_time_ut > 0:
                return datetime.max.replace(tzinfo=timezone.utc)
            return datetime.min.replace(tzinfo=timezone.utc)

    @property
    def abbreviation(self) -> str:
        return self.local.abbreviation

    @property
    def utc_offset_secs(self) -> int:
        return self.local.utc_offset_secs

    @property
    def utc_offset_hours(self) -> float:
        return self.local.utc_offset_hours

    @property
    def is_dst(self) -> bool:
        return self.local.is_dst


class TransitionIterator(Iterator[TimeZoneTransition]):
    """
    Forward-only walk over the transitions of a TimeZoneInfo, in stored order.
    """

    def __init__(self, tz_info: "TimeZoneInfo") -> None:
        self._tz_info = tz_info
        self._index = 0

    def __iter__(self) -> "TransitionIterator":
        return self

    def __next__(self) -> TimeZoneTransition:
        if self._index >= len(self._tz_info.transition_times):
            raise StopIteration

        timestamp = self._tz_info.transition_times[self._index]
        type_index = self._tz_info.transition_types[self._index]
        wall_standard, utc_local = self._tz_info.flags_for(type_index)
        transition = TimeZoneTransition(
            Time.from_flags(timestamp, wall_standard, utc_local),
            self._tz_info.local_time_type(type_index),
        )

        self._index += 1
        return transition
