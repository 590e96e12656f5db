"""Base exceptions for dichecks domain."""


class DIChecksError(Exception):
    """Root exception for all dichecks errors.

    All domain exceptions inherit from this.
    Duplicate findings are never raised: they are results.
    """
