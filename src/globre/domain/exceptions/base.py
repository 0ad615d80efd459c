"""Base exceptions for globre domain."""


class GlobreError(Exception):
    """Root exception for all globre errors.

    All domain exceptions inherit from this.
    Allows catching all globre-specific errors.
    """
