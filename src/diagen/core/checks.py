"""Lightweight equality checks for the geometry helpers.

``assert_equal`` reports a mismatch as a warning instead of raising, so the
whole set of checks runs even if an early one fails.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .geometry import Point, Rect, Size, fit, split_horizontal, split_vertical

logger = logging.getLogger(__name__)


def assert_equal(expected: Any, actual: Any) -> bool:
    """Compare two values, logging a warning if they differ.

    Returns:
        True if the values are equal
    """
    if expected != actual:
        logger.warning("assertEqual failed! expected: %r, actual: %r", expected, actual)
        return False
    return True


def check_fit() -> int:
    results = [
        assert_equal(
            Rect.from_xywh(0, 0, 100, 200),
            fit(Size(100, 200), Point(0, 0), Rect.from_xywh(0, 0, 200, 200)),
        ),
        assert_equal(
            Rect.from_xywh(50, 0, 100, 200),
            fit(Size(100, 200), Point(0.5, 1), Rect.from_xywh(0, 0, 200, 200)),
        ),
        assert_equal(
            Rect.from_xywh(75, 0, 150, 300),
            fit(Size(100, 200), Point(0.5, 1), Rect.from_xywh(0, 0, 300, 300)),
        ),
        assert_equal(
            Rect.from_xywh(-20, -30, 50, 100),
            fit(Size(100, 200), Point(0, 0), Rect.from_xywh(-20, -30, 100, 100)),
        ),
    ]
    return results.count(False)


def check_split_horizontal() -> int:
    left, right = split_horizontal(Size(10, 10), Size(20, 20), Rect.from_xywh(0, 0, 300, 200))
    results = [
        assert_equal(Rect.from_xywh(0, 0, 100, 200), left),
        assert_equal(Rect.from_xywh(100, 0, 200, 200), right),
    ]
    return results.count(False)


def check_split_vertical() -> int:
    top, bottom = split_vertical(Size(10, 10), Size(20, 20), Rect.from_xywh(0, 0, 300, 300))
    results = [
        assert_equal(Rect.from_xywh(0, 200, 300, 100), top),
        assert_equal(Rect.from_xywh(0, 0, 300, 200), bottom),
    ]
    return results.count(False)


CHECKS: dict[str, Callable[[], int]] = {
    "fit": check_fit,
    "split_horizontal": check_split_horizontal,
    "split_vertical": check_split_vertical,
}


def run_self_checks() -> int:
    """Run all geometry checks.

    Returns:
        Number of failed comparisons
    """
    logger.info("Running checks...")
    failures = sum(check() for check in CHECKS.values())
    logger.info("Done running checks (%d failed)", failures)
    return failures
