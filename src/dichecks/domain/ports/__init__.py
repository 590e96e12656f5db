"""Ports: contracts between the core and its host."""

from dichecks.domain.ports.check import DICheckProtocol
from dichecks.domain.ports.reporter import ReporterProtocol
from dichecks.domain.ports.type_model import TypeModelProtocol

__all__ = [
    "DICheckProtocol",
    "ReporterProtocol",
    "TypeModelProtocol",
]
