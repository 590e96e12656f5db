"""Domain enumerations."""

from enum import Enum, auto


class Severity(Enum):
    """Diagnostic severity."""

    ERROR = auto()  # build fails
    WARNING = auto()  # build passes, warning shown
    NOTE = auto()  # informational


class InjectionKind(Enum):
    """How a field receives its dependency.

    The kind never takes part in identity comparison: a direct
    injection and a wrapped one of the same target are duplicates.
    """

    DIRECT = auto()  # instance created before it is needed
    PROVIDER = auto()  # new instance on every get()
    LAZY = auto()  # created on first use, then reused
