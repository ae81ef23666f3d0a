import logging
import numpy as np
from typing import Any, Dict, Union
from dataclasses import dataclass, asdict

from statistical_analysis.confidence_interval_builder import (
    ConfidenceInterval,
    mean_confidence_interval,
    proportion_confidence_interval,
    sample_confidence_interval,
)
from statistical_analysis.descriptive_statistics import (
    SampleLike,
    mean,
    sample_standard_deviation,
)
from statistical_analysis.significance_calculator import (
    HypothesisTest,
    IntervalLike,
    evaluate,
)


logger = logging.getLogger(__name__)


def get_confidence_interval(*args) -> ConfidenceInterval:
    """
    95% confidence interval, dispatched on the number of arguments.

    get_confidence_interval(sample)
        t-interval for the mean of a raw sample
    get_confidence_interval(mean, stddev, n)
        t-interval for a mean from summary statistics
    get_confidence_interval(proportion, n)
        z-interval for a proportion
    """
    if len(args) == 1:
        return sample_confidence_interval(args[0])
    elif len(args) == 2:
        return proportion_confidence_interval(*args)
    elif len(args) == 3:
        return mean_confidence_interval(*args)

    raise TypeError(
        f"get_confidence_interval() takes 1, 2 or 3 arguments ({len(args)} given)"
    )


@dataclass
class ComparisonResult:
    hypothesis_test: HypothesisTest
    interval_x: ConfidenceInterval
    interval_y: ConfidenceInterval
    mean_x: float
    mean_y: float
    std_x: float
    std_y: float
    sample_size_x: int
    sample_size_y: int
    reject_null: bool

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['hypothesis_test'] = self.hypothesis_test.value
        result['interval_x'] = tuple(self.interval_x)
        result['interval_y'] = tuple(self.interval_y)
        return result


class StatisticalEngine:
    """Confidence intervals and interval-based hypothesis tests at 95% confidence"""

    def get_confidence_interval(self, *args) -> ConfidenceInterval:
        interval = get_confidence_interval(*args)
        logger.debug("Computed confidence interval [%f, %f]",
                     interval.lower_bound, interval.upper_bound)
        return interval

    def evaluate(
        self,
        interval_x: IntervalLike,
        interval_y: IntervalLike,
        hypothesis_test: Union[HypothesisTest, str]
    ) -> bool:
        """Whether the intervals support the alternative hypothesis"""
        return evaluate(interval_x, interval_y, self._resolve_test(hypothesis_test))

    def compare_samples(
        self,
        sample_x: SampleLike,
        sample_y: SampleLike,
        hypothesis_test: Union[HypothesisTest, str] = HypothesisTest.NOT_EQUAL
    ) -> ComparisonResult:
        """Build both mean intervals and test X against Y"""
        hypothesis_test = self._resolve_test(hypothesis_test)
        values_x = np.asarray(sample_x, dtype=float).flatten()
        values_y = np.asarray(sample_y, dtype=float).flatten()

        interval_x = self.get_confidence_interval(values_x)
        interval_y = self.get_confidence_interval(values_y)
        reject_null = evaluate(interval_x, interval_y, hypothesis_test)

        logger.debug("Hypothesis test %s: reject_null=%s",
                     hypothesis_test.value, reject_null)

        return ComparisonResult(
            hypothesis_test=hypothesis_test,
            interval_x=interval_x,
            interval_y=interval_y,
            mean_x=mean(values_x),
            mean_y=mean(values_y),
            std_x=sample_standard_deviation(values_x),
            std_y=sample_standard_deviation(values_y),
            sample_size_x=int(values_x.size),
            sample_size_y=int(values_y.size),
            reject_null=reject_null
        )

    def _resolve_test(self, hypothesis_test: Union[HypothesisTest, str]) -> HypothesisTest:
        """Accept either a HypothesisTest or its string value"""
        if isinstance(hypothesis_test, HypothesisTest):
            return hypothesis_test
        try:
            return HypothesisTest(hypothesis_test)
        except ValueError:
            raise ValueError(f"Unknown hypothesis test: {hypothesis_test}") from None
