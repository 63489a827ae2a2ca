import argparse
import logging
import time

from .tzif import TimeZoneInfo


def _format_transition(transition) -> str:
    hours = transition.utc_offset_hours
    sign = "+" if hours > 0 else "-"
    dst = " (DST)" if transition.is_dst else ""
    return (
        f"at {transition.time!r}, {transition.abbreviation} "
        f"(UTC{sign}{abs(hours):g}){dst}"
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m tzif_decoder",
        description="Print the transitions of a TZif file around the current time.",
    )
    parser.add_argument("path", help="path to a TZif file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    with open(args.path, "rb") as file:
        tz_info = TimeZoneInfo.read(file)

    now = int(time.time())
    print(f"version {tz_info.version}, {len(tz_info.transition_times)} transitions")
    print()
    print("all transitions:")

    found = False
    for transition in tz_info.iter_transitions():
        if not found and transition.transition_time_ut > now:
            print("--- now ---")
            found = True
        print(_format_transition(transition))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
