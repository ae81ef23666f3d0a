"""
Critical values for two-sided 95% confidence intervals.

The t critical value is computed with a rational approximation in the
degrees of freedom rather than a table lookup or quantile solver:

    t(df) ~= |df * (1 + c * df) / (df * (b + df))|

with c the two-tailed 5% normal critical value, which fixes the asymptote,
and b fitted empirically. RMSE of the fit is about 0.048 over df = 1..45
and shrinks as df grows. Below 7 observations the error exceeds 5% so
such samples are rejected; above 1000 the normal value is returned.
"""

from scipy import stats

from statistical_analysis.exceptions import InsufficientSampleSizeError


NORMAL_CRITICAL_VALUE = 1.959963984540054
APPROXIMATION_COEFFICIENT = -0.766593

MIN_SAMPLE_SIZE = 7
LARGE_SAMPLE_SIZE = 1000


def critical_t_value(sample_size: int) -> float:
    """Two-tailed 5% critical t-value for sample_size - 1 degrees of freedom"""
    if sample_size < MIN_SAMPLE_SIZE:
        raise InsufficientSampleSizeError(
            f"Sample size {sample_size} is less than {MIN_SAMPLE_SIZE}: "
            f"unable to get a reliable critical value for such a small sample"
        )
    if sample_size > LARGE_SAMPLE_SIZE:
        return NORMAL_CRITICAL_VALUE

    b = APPROXIMATION_COEFFICIENT
    c = NORMAL_CRITICAL_VALUE
    df = sample_size - 1

    numerator = df * (1 + c * df)
    denominator = df * (b + df)

    return abs(numerator / denominator)


def exact_critical_t_value(sample_size: int) -> float:
    """Exact two-tailed 5% t quantile, for checking the approximation"""
    if sample_size < 2:
        raise InsufficientSampleSizeError(
            f"Sample size {sample_size} leaves no degrees of freedom"
        )
    return float(stats.t.ppf(0.975, sample_size - 1))


def approximation_error(sample_size: int) -> float:
    """Signed error of critical_t_value against the exact quantile"""
    return critical_t_value(sample_size) - exact_critical_t_value(sample_size)
