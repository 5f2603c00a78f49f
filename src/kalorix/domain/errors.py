"""Errors raised by the nutrition goal calculator."""


class CalculationError(ValueError):
    """Base class for invalid calculator inputs."""


class InvalidBodyMetrics(CalculationError):
    """Raised for non-positive weight, height or age, or an unknown sex."""


class InvalidActivityLevel(CalculationError):
    """Raised when an activity level falls outside 1..5."""


class UnknownGoal(CalculationError):
    """Raised when a goal value is neither canonical nor a legacy code."""


class DivisionByZero(CalculationError, ZeroDivisionError):
    """Raised when macro percentages are requested for a zero-calorie budget.

    Callers treat this as a display state (percentages unavailable), not as a
    failure of the request.
    """
