import io
import logging
from dataclasses import dataclass, replace
from typing import IO

from .errors import InvalidTzifFormat
from .models import (
    LeapSecondTransition,
    LocalTimeType,
    TimeTypeInfo,
    UtcLocalFlag,
    WallStandardFlag,
    indicator_flags,
)
from .tz_transition import TransitionIterator
from .tzif_body import TimeZoneInfoBody
from .tzif_header import TimeZoneInfoHeader

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeZoneInfo:
    """
    The decoded contents of a TZif file.

    Transition times are kept raw; how each one is interpreted depends on the
    std/wall and UT/local indicators of its local time type, and is resolved by
    `iter_transitions`.
    """

    version: int
    transition_times: tuple[int, ...]
    transition_types: tuple[int, ...]
    local_time_types: tuple[TimeTypeInfo, ...]
    time_zone_designations: bytes
    leap_second_records: tuple[LeapSecondTransition, ...]
    is_std: tuple[WallStandardFlag, ...]
    is_ut: tuple[UtcLocalFlag, ...]

    @property
    def header(self) -> TimeZoneInfoHeader:
        """Header counts derived from the decoded tables."""
        return TimeZoneInfoHeader(
            self.version,
            len(self.is_ut),
            len(self.is_std),
            len(self.leap_second_records),
            len(self.transition_times),
            len(self.local_time_types),
            len(self.time_zone_designations),
        )

    @property
    def timezone_abbrevs(self) -> list[str]:
        seen: list[str] = []
        for ttinfo in self.local_time_types:
            abbr = self.get_abbrev_by_index(ttinfo.abbrev_index)
            if abbr not in seen:
                seen.append(abbr)
        return seen

    def get_abbrev_by_index(self, index: int) -> str:
        if index < 0 or index >= len(self.time_zone_designations):
            raise InvalidTzifFormat(
                f"designation index {index} out of range "
                f"(charcnt={len(self.time_zone_designations)})"
            )
        raw = self.time_zone_designations[index:].partition(b"\x00")[0]
        try:
            return raw.decode("ascii")
        except UnicodeDecodeError as exc:
            raise InvalidTzifFormat(
                f"designation at index {index} is not ASCII: {raw!r}"
            ) from exc

    def local_time_type(self, type_index: int) -> LocalTimeType:
        ttinfo = self.local_time_types[type_index]
        return LocalTimeType(
            self.get_abbrev_by_index(ttinfo.abbrev_index),
            ttinfo.utc_offset_secs,
            ttinfo.is_dst,
        )

    def flags_for(self, type_index: int) -> tuple[WallStandardFlag, UtcLocalFlag]:
        return indicator_flags(self.is_std, self.is_ut, type_index)

    def iter_transitions(self) -> TransitionIterator:
        return TransitionIterator(self)

    @classmethod
    def _from_body(cls, version: int, body: TimeZoneInfoBody) -> "TimeZoneInfo":
        return cls(
            version,
            body.transition_times,
            body.time_type_indices,
            body.time_type_infos,
            body.timezone_abbrevs,
            body.leap_second_transitions,
            body.wall_standard_flags,
            body.is_utc_flags,
        )

    @classmethod
    def _read_block(cls, file: IO[bytes], version: int) -> "TimeZoneInfo":
        header_data = TimeZoneInfoHeader.read(file)
        _LOGGER.debug("Read TZif header %s", header_data)
        body_data = TimeZoneInfoBody.read(file, header_data, version)
        return cls._from_body(header_data.version, body_data)

    @classmethod
    def read(cls, file: IO[bytes]) -> "TimeZoneInfo":
        """
        Decode a TZif stream.

        The 32-bit block is always decoded and must be valid. For version 2+
        files the 64-bit block that follows it is preferred, but if it is
        missing or malformed the 32-bit result is returned instead.
        """
        v1_tz_info = cls._read_block(file, version=1)
        if v1_tz_info.version < 2:
            return v1_tz_info

        try:
            v2_tz_info = cls._read_block(file, version=v1_tz_info.version)
        except (EOFError, OSError, ValueError) as exc:
            _LOGGER.debug("Ignoring unreadable 64-bit TZif block: %s", exc)
            return v1_tz_info

        return replace(v2_tz_info, version=v1_tz_info.version)

    @classmethod
    def from_bytes(cls, data: bytes) -> "TimeZoneInfo":
        return cls.read(io.BytesIO(data))

    def __repr__(self) -> str:
        return (
            f"TimeZoneInfo(version={self.version!r}, "
            f"transition_times=<{len(self.transition_times)}>, "
            f"local_time_types={self.local_time_types!r}, "
            f"time_zone_designations={self.time_zone_designations!r}, "
            f"leap_second_records=<{len(self.leap_second_records)}>)"
        )


def parse(file: IO[bytes]) -> TimeZoneInfo:
    return TimeZoneInfo.read(file)


def iterate_transitions(tz_info: TimeZoneInfo) -> TransitionIterator:
    return tz_info.iter_transitions()
