from __future__ import annotations


class InvalidArgument(ValueError):
    """An argument is outside the domain a metric or model accepts (e.g. an empty sample)."""


class DimensionMismatch(InvalidArgument):
    """weights, locations and scales do not have the same length."""


class NumericDomainError(ArithmeticError, ValueError):
    """The mixture density is zero, negative or NaN where its logarithm is needed."""
