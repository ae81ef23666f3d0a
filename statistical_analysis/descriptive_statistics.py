import numpy as np
from typing import Sequence, Union
import pandas as pd

from statistical_analysis.exceptions import EmptyInputError, DegenerateSampleError


SampleLike = Union[Sequence[float], np.ndarray, pd.Series]


def _as_array(sample: SampleLike) -> np.ndarray:
    values = np.asarray(sample, dtype=float).flatten()
    if values.size == 0:
        raise EmptyInputError("The sample is empty")
    return values


def mean(sample: SampleLike) -> float:
    """Arithmetic mean of the sample"""
    values = _as_array(sample)
    return float(np.sum(values) / values.size)


def sum_of_squared_deviations(sample: SampleLike) -> float:
    """Sum of squared deviations from the mean.

    Not normalized: divide by n for the population variance or by n - 1
    for the sample variance.
    """
    values = _as_array(sample)
    # identical observations have no spread, even when the mean does not round-trip
    if np.all(values == values[0]):
        return 0.0
    deviations = values - mean(values)
    return float(np.sum(deviations ** 2))


def sample_standard_deviation(sample: SampleLike) -> float:
    """Standard deviation of the sample with Bessel's correction"""
    values = _as_array(sample)
    if values.size == 1:
        raise DegenerateSampleError(
            "Cannot estimate a standard deviation from a single observation"
        )
    return float(np.sqrt(sum_of_squared_deviations(values) / (values.size - 1)))
