"""dichecks - duplicate dependency injection detection for class hierarchies."""

__version__ = "0.1.0"

from dichecks.application.services.processor import DIChecksProcessor
from dichecks.domain.model.configuration import DIChecksConfig
from dichecks.presentation.api import check_sources

__all__ = ["DIChecksConfig", "DIChecksProcessor", "check_sources", "__version__"]
