class StatisticsError(Exception):
    """Base class for errors raised by the statistical analysis modules"""


class EmptyInputError(StatisticsError, ValueError):
    """Raised when a statistic is requested on an empty sample"""


class InsufficientSampleSizeError(StatisticsError, ValueError):
    """Raised when a sample is too small for a reliable result"""


class DegenerateSampleError(InsufficientSampleSizeError):
    """Raised when a sample has a single observation and no spread can be estimated"""


class InvalidStateError(StatisticsError, RuntimeError):
    """Raised when an unhandled branch is reached; indicates a programming defect"""
