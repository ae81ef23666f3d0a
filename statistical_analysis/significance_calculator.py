"""
Directional hypothesis tests over two 95% confidence intervals.

The null hypothesis is rejected only when the intervals are disjoint.
This is more conservative than a two-sample t-test: overlapping
intervals do not prove equality, they only fail to show a difference.
"""

from enum import Enum
from typing import Sequence, Union

from statistical_analysis.confidence_interval_builder import ConfidenceInterval
from statistical_analysis.exceptions import InvalidStateError


IntervalLike = Union[ConfidenceInterval, Sequence[float]]


class HypothesisTest(Enum):
    LESS_THAN = "less_than"
    GREATER_THAN = "greater_than"
    NOT_EQUAL = "not_equal"


def x_less_than_y(interval_x: IntervalLike, interval_y: IntervalLike) -> bool:
    """Whether X lies entirely below Y"""
    _, upper_x = interval_x
    lower_y, _ = interval_y
    return upper_x < lower_y


def x_greater_than_y(interval_x: IntervalLike, interval_y: IntervalLike) -> bool:
    """Whether X lies entirely above Y"""
    lower_x, _ = interval_x
    _, upper_y = interval_y
    return lower_x > upper_y


def evaluate(
    interval_x: IntervalLike,
    interval_y: IntervalLike,
    hypothesis_test: HypothesisTest
) -> bool:
    """
    Whether the intervals give evidence for the alternative at 95% confidence.

    LESS_THAN tests X < Y, GREATER_THAN tests X > Y and NOT_EQUAL tests
    X != Y.
    """
    if hypothesis_test is HypothesisTest.LESS_THAN:
        return x_less_than_y(interval_x, interval_y)
    elif hypothesis_test is HypothesisTest.GREATER_THAN:
        return x_greater_than_y(interval_x, interval_y)
    elif hypothesis_test is HypothesisTest.NOT_EQUAL:
        return (x_less_than_y(interval_x, interval_y)
                or x_greater_than_y(interval_x, interval_y))

    raise InvalidStateError(f"Unhandled hypothesis test: {hypothesis_test!r}")
