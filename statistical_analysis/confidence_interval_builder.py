import warnings
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from statistical_analysis.critical_values import critical_t_value
from statistical_analysis.descriptive_statistics import (
    SampleLike,
    mean,
    sample_standard_deviation,
)


PROPORTION_CRITICAL_VALUE = 1.96

# Normal approximation to the binomial needs this many expected successes and failures
MIN_EXPECTED_COUNT = 5


@dataclass(frozen=True)
class ConfidenceInterval:
    """Symmetric 95% confidence interval around a point estimate"""
    lower_bound: float
    upper_bound: float

    def __post_init__(self):
        if not (np.isfinite(self.lower_bound) and np.isfinite(self.upper_bound)):
            raise ValueError(
                f"Confidence interval bounds must be finite, got "
                f"[{self.lower_bound}, {self.upper_bound}]"
            )
        if not self.lower_bound <= self.upper_bound:
            raise ValueError(
                f"Lower bound {self.lower_bound} exceeds upper bound {self.upper_bound}"
            )

    def __iter__(self) -> Iterator[float]:
        yield self.lower_bound
        yield self.upper_bound

    @property
    def estimate(self) -> float:
        return (self.lower_bound + self.upper_bound) / 2

    @property
    def margin_of_error(self) -> float:
        return (self.upper_bound - self.lower_bound) / 2

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound

    def contains(self, value: float) -> bool:
        return self.lower_bound <= value <= self.upper_bound


def _symmetric_interval(estimate: float, margin_of_error: float) -> ConfidenceInterval:
    return ConfidenceInterval(
        lower_bound=estimate - margin_of_error,
        upper_bound=estimate + margin_of_error,
    )


# ========== MEANS ==========

def mean_standard_error(standard_deviation: float, sample_size: int) -> float:
    """Standard error of a sample mean"""
    return standard_deviation / np.sqrt(sample_size)


def mean_margin_of_error(standard_deviation: float, sample_size: int) -> float:
    """Margin of error for the population mean at 95% confidence"""
    return critical_t_value(sample_size) * mean_standard_error(
        standard_deviation, sample_size
    )


def mean_confidence_interval(
    sample_mean: float,
    standard_deviation: float,
    sample_size: int
) -> ConfidenceInterval:
    """
    95% t-interval for the population mean from summary statistics.

    Parameters
    ----------
    sample_mean : float
        Mean of the sample
    standard_deviation : float
        Bessel-corrected standard deviation of the sample
    sample_size : int
        Number of observations; at least 7

    Returns
    -------
    ConfidenceInterval
        Interval centred on sample_mean

    Raises
    ------
    InsufficientSampleSizeError
        If sample_size is less than 7
    ValueError
        If the standard deviation is negative
    """
    if standard_deviation < 0:
        raise ValueError(
            f"Standard deviation must be non-negative, got {standard_deviation}"
        )
    margin = mean_margin_of_error(standard_deviation, sample_size)
    return _symmetric_interval(float(sample_mean), float(margin))


def sample_confidence_interval(sample: SampleLike) -> ConfidenceInterval:
    """95% t-interval for the population mean of a raw sample"""
    values = np.asarray(sample, dtype=float).flatten()
    return mean_confidence_interval(
        mean(values), sample_standard_deviation(values), values.size
    )


# ========== PROPORTIONS ==========

def proportion_standard_error(sample_proportion: float, sample_size: int) -> float:
    """Standard error of a sample proportion"""
    return float(np.sqrt(sample_proportion * (1 - sample_proportion) / sample_size))


def proportion_margin_of_error(sample_proportion: float, sample_size: int) -> float:
    """Margin of error for the population proportion at 95% confidence"""
    return PROPORTION_CRITICAL_VALUE * proportion_standard_error(
        sample_proportion, sample_size
    )


def proportion_confidence_interval(
    sample_proportion: float,
    sample_size: int
) -> ConfidenceInterval:
    """
    95% z-interval for the population proportion.

    Uses the fixed critical value 1.96; the t approximation does not apply
    to proportions. A RuntimeWarning is issued when the expected number of
    successes or failures is under 5, since the normal approximation is
    then poor, but the interval is still returned.
    """
    if not 0 <= sample_proportion <= 1:
        raise ValueError(f"Proportion must be within [0, 1], got {sample_proportion}")
    if sample_size < 1:
        raise ValueError(f"Sample size must be at least 1, got {sample_size}")

    expected_count = sample_size * min(sample_proportion, 1 - sample_proportion)
    if expected_count < MIN_EXPECTED_COUNT:
        warnings.warn(
            f"Expected count {expected_count:.2f} is below {MIN_EXPECTED_COUNT}; "
            f"the normal approximation may be unreliable",
            RuntimeWarning,
            stacklevel=2,
        )

    margin = proportion_margin_of_error(sample_proportion, sample_size)
    return _symmetric_interval(float(sample_proportion), margin)
