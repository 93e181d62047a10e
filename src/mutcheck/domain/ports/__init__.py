"""Ports: protocols users implement to plug into mutcheck."""

from mutcheck.domain.ports.reporter import ErrorReporterProtocol, ReporterProtocol

__all__ = ["ErrorReporterProtocol", "ReporterProtocol"]
