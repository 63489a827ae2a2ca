import logging
import statistics as stats
import time
from importlib import resources

import pytest

from tzif_decoder import TimeZoneInfo


def _percentile(values, pct):
    """
    pct in [0,100]. Uses nearest-rank after sorting.
    """
    if not values:
        return float("nan")
    if pct <= 0:
        return values[0]
    if pct >= 100:
        return values[-1]
    k = int(round((pct / 100.0) * (len(values) - 1)))
    return values[k]


def test_read_and_iterate_performance():
    tzdata = pytest.importorskip("tzdata")

    # A small but diverse set of zones (DST, no-DST, fractional offsets, southern hemisphere)
    zones = [
        "America/New_York",
        "Europe/London",
        "Asia/Tokyo",
        "Asia/Kolkata",
        "Australia/Sydney",
        "Africa/Abidjan",  # UTC
    ]
    raw = {}
    for zone in zones:
        path = resources.files(tzdata).joinpath("zoneinfo")
        for part in zone.split("/"):
            path = path.joinpath(part)
        raw[zone] = path.read_bytes()

    rounds = 200
    timings = []
    start_wall = time.perf_counter()

    for idx in range(rounds * len(zones)):
        data = raw[zones[idx % len(zones)]]

        t0 = time.perf_counter()
        tz_info = TimeZoneInfo.from_bytes(data)
        # Resolve every transition to ensure the iterator does the work
        count = sum(1 for _ in tz_info.iter_transitions())
        t1 = time.perf_counter()

        assert count == len(tz_info.transition_times)
        timings.append(t1 - t0)

    end_wall = time.perf_counter()

    timings.sort()
    total_time = end_wall - start_wall
    mean_s = stats.fmean(timings)

    us = lambda s: f"{s * 1e6:,.1f} μs"

    logging.debug("\n=== tzif_decoder read + iterate performance ===")
    logging.debug(f"Total calls     : {len(timings):,}")
    logging.debug(f"Total wall time : {total_time:,.3f} s")
    logging.debug(f"Mean            : {us(mean_s)}")
    logging.debug(f"Median          : {us(timings[len(timings) // 2])}")
    logging.debug(f"p90             : {us(_percentile(timings, 90))}")
    logging.debug(f"p99             : {us(_percentile(timings, 99))}")
    logging.debug(f"Min / Max       : {us(timings[0])} / {us(timings[-1])}")
