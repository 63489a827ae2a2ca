from .errors import InvalidTzifFormat
from .models import (
    LeapSecondTransition,
    LocalTimeType,
    TimeTypeInfo,
    UtcLocalFlag,
    WallStandardFlag,
)
from .transition_time import (
    LocalStandardTime,
    LocalWallTime,
    Time,
    UniversalTime,
    to_ut,
)
from .tz_transition import TimeZoneTransition, TransitionIterator
from .tzif import TimeZoneInfo, iterate_transitions, parse
from .tzif_header import TimeZoneInfoHeader

__all__ = [
    "InvalidTzifFormat",
    "LeapSecondTransition",
    "LocalStandardTime",
    "LocalTimeType",
    "LocalWallTime",
    "Time",
    "TimeTypeInfo",
    "TimeZoneInfo",
    "TimeZoneInfoHeader",
    "TimeZoneTransition",
    "TransitionIterator",
    "UniversalTime",
    "UtcLocalFlag",
    "WallStandardFlag",
    "iterate_transitions",
    "parse",
    "to_ut",
]
