"""Domain exceptions."""

from dichecks.domain.exceptions.base import DIChecksError
from dichecks.domain.exceptions.configuration import ConfigurationError
from dichecks.domain.exceptions.parsing import ASTError, ParsingError

__all__ = [
    "DIChecksError",
    "ConfigurationError",
    "ParsingError",
    "ASTError",
]
