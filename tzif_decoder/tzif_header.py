import struct
from dataclasses import dataclass
from typing import IO

from .errors import InvalidTzifFormat

_MAGIC = b"TZif"
_VERSIONS = {b"\x00": 1, b"2": 2, b"3": 3}
_READ_CHUNK_SIZE = 64 * 1024


def read_exact(file: IO[bytes], size: int) -> bytes:
    """
    Read exactly `size` bytes from `file`, raising EOFError on a short read.
    """
    # At most one chunk per read; sizes come straight from header counts.
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = file.read(min(remaining, _READ_CHUNK_SIZE))
        if not chunk:
            raise EOFError(
                "Unexpected end of TZif data: "
                f"wanted {size} bytes, got {size - remaining}"
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


@dataclass(frozen=True)
class TimeZoneInfoHeader:
    version: int
    is_utc_flag_count: int
    wall_standard_flag_count: int
    leap_second_transitions_count: int
    transitions_count: int
    local_time_type_count: int
    timezone_abbrev_byte_count: int

    FORMAT = ">4sc15x6I"  # magic, version, reserved, six big endian u32 counts
    SIZE = struct.calcsize(FORMAT)

    @classmethod
    def read(cls, file: IO[bytes]) -> "TimeZoneInfoHeader":
        return cls.from_bytes(read_exact(file, cls.SIZE))

    @classmethod
    def from_bytes(cls, data: bytes) -> "TimeZoneInfoHeader":
        (
            magic,
            version_byte,
            is_utc_flag_count,
            wall_standard_flag_count,
            leap_second_count,
            transitions_count,
            local_time_type_count,
            timezone_abbrev_byte_count,
        ) = struct.unpack(cls.FORMAT, data)

        if magic != _MAGIC:
            raise InvalidTzifFormat(f"Invalid TZif file: unrecognized magic {magic!r}")

        version = _VERSIONS.get(version_byte)
        if version is None:
            raise InvalidTzifFormat(
                f"Invalid TZif file: unsupported version {version_byte[0]:#x}"
            )

        return cls(
            version,
            is_utc_flag_count,
            wall_standard_flag_count,
            leap_second_count,
            transitions_count,
            local_time_type_count,
            timezone_abbrev_byte_count,
        )
