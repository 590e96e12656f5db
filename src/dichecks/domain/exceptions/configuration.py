"""Configuration exceptions."""

from dichecks.domain.exceptions.base import DIChecksError


class ConfigurationError(DIChecksError):
    """Invalid check option.

    Raised when an option value cannot be interpreted.
    FAIL-FIRST: a misspelled boolean must not silently disable a check.

    Attributes:
        option: Option key (must not be empty)
        reason: Why the value is invalid (must not be empty)
    """

    def __init__(self, option: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not option:
            raise ValueError("option must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.option = option
        self.reason = reason
        super().__init__(f"Invalid option '{option}': {reason}")
