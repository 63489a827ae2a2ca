import struct
from dataclasses import dataclass
from typing import IO

from .errors import InvalidTzifFormat
from .models import (
    LeapSecondTransition,
    TimeTypeInfo,
    UtcLocalFlag,
    WallStandardFlag,
    indicator_flags,
)
from .tzif_header import TimeZoneInfoHeader, read_exact


@dataclass(frozen=True)
class TimeZoneInfoBody:
    transition_times: tuple[int, ...]
    time_type_indices: tuple[int, ...]
    time_type_infos: tuple[TimeTypeInfo, ...]
    timezone_abbrevs: bytes
    leap_second_transitions: tuple[LeapSecondTransition, ...]
    wall_standard_flags: tuple[WallStandardFlag, ...]
    is_utc_flags: tuple[UtcLocalFlag, ...]

    @classmethod
    def read(
        cls, file: IO[bytes], header_data: TimeZoneInfoHeader, version=1
    ) -> "TimeZoneInfoBody":
        """
        Decode the data block that follows `header_data` and validate it.

        `version` selects the width of time values: 32-bit for 1, 64-bit otherwise.
        """
        cls._check_indicator_counts(header_data)

        # Parse transition times
        transition_times = cls._read_transition_times(
            file, header_data.transitions_count, version
        )

        # Parse local time type indices
        time_type_indices = cls._read_time_type_indices(
            file, header_data.transitions_count
        )

        # Parse ttinfo structures
        time_type_infos = cls._read_ttinfo_structures(
            file, header_data.local_time_type_count
        )

        # Parse time zone designation strings
        timezone_abbrevs = cls._read_tz_designations(
            file, header_data.timezone_abbrev_byte_count
        )

        # Parse leap second data
        leap_second_transitions = cls._read_leap_seconds(
            file, header_data.leap_second_transitions_count, version
        )

        # Parse standard/wall and UT/local indicators
        wall_standard_flags = tuple(
            cls._read_flags(
                file, header_data.wall_standard_flag_count, WallStandardFlag, "std/wall"
            )
        )
        is_utc_flags = tuple(
            cls._read_flags(
                file, header_data.is_utc_flag_count, UtcLocalFlag, "ut/local"
            )
        )

        body = cls(
            transition_times,
            time_type_indices,
            time_type_infos,
            timezone_abbrevs,
            leap_second_transitions,
            wall_standard_flags,
            is_utc_flags,
        )
        body.validate(header_data)
        return body

    @staticmethod
    def _check_indicator_counts(header_data: TimeZoneInfoHeader) -> None:
        # Must hold before any body bytes are read.
        typecnt = header_data.local_time_type_count
        if header_data.wall_standard_flag_count not in (0, typecnt):
            raise InvalidTzifFormat(
                "isstdcnt not zero or equal to typecnt "
                f"({header_data.wall_standard_flag_count}, {typecnt})"
            )
        if header_data.is_utc_flag_count not in (0, typecnt):
            raise InvalidTzifFormat(
                "isutcnt not zero or equal to typecnt "
                f"({header_data.is_utc_flag_count}, {typecnt})"
            )

    def validate(self, header_data: TimeZoneInfoHeader) -> None:
        self._check_indicator_counts(header_data)

        for index in range(len(self.time_type_infos)):
            if self.flags_for(index) == (WallStandardFlag.WALL, UtcLocalFlag.UT):
                raise InvalidTzifFormat(
                    f"local time type {index}: transition times can't be universal + wall"
                )

        for transition_index, type_index in enumerate(self.time_type_indices):
            if type_index >= len(self.time_type_infos):
                raise InvalidTzifFormat(
                    f"transition {transition_index}: local time type {type_index} "
                    f"out of range (typecnt={len(self.time_type_infos)})"
                )

    def flags_for(self, type_index: int) -> tuple[WallStandardFlag, UtcLocalFlag]:
        return indicator_flags(
            self.wall_standard_flags, self.is_utc_flags, type_index
        )

    @classmethod
    def _read_transition_times(
        cls, file: IO[bytes], timecnt: int, version: int
    ) -> tuple[int, ...]:
        fmt = f">{timecnt}q" if version >= 2 else f">{timecnt}i"
        return struct.unpack(fmt, read_exact(file, struct.calcsize(fmt)))

    @classmethod
    def _read_time_type_indices(cls, file: IO[bytes], timecnt: int) -> tuple[int, ...]:
        return tuple(read_exact(file, timecnt))

    @classmethod
    def _read_ttinfo_structures(
        cls, file: IO[bytes], typecnt: int
    ) -> tuple[TimeTypeInfo, ...]:
        ttinfo_format = (
            ">iBB"  # 4-byte signed integer, 1-byte dst flag, 1-byte unsigned integer
        )
        ttinfo_size = struct.calcsize(ttinfo_format)
        infos = []
        for _ in range(typecnt):
            utc_offset_secs, is_dst, abbrev_index = struct.unpack(
                ttinfo_format, read_exact(file, ttinfo_size)
            )
            if is_dst not in (0, 1):
                raise InvalidTzifFormat(f"is_dst not zero or one ({is_dst})")
            infos.append(TimeTypeInfo(utc_offset_secs, bool(is_dst), abbrev_index))
        return tuple(infos)

    @classmethod
    def _read_tz_designations(cls, file: IO[bytes], charcnt: int) -> bytes:
        return read_exact(file, charcnt)

    @classmethod
    def _read_leap_seconds(
        cls, file: IO[bytes], count: int, version: int
    ) -> tuple[LeapSecondTransition, ...]:
        # Each leap-second entry is a pair: (transition_time, correction)
        fmt = ">qi" if version >= 2 else ">ii"
        size = struct.calcsize(fmt)
        return tuple(
            LeapSecondTransition(*struct.unpack(fmt, read_exact(file, size)))
            for _ in range(count)
        )

    @classmethod
    def _read_flags(cls, file: IO[bytes], count: int, flag_type, name: str):
        for value in read_exact(file, count):
            if value not in (0, 1):
                raise InvalidTzifFormat(f"{name} indicator not zero or one ({value})")
            yield flag_type(value)
