"""Application services."""

from dichecks.application.services.processor import DIChecksProcessor

__all__ = ["DIChecksProcessor"]
