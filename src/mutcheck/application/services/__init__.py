"""Application services."""

from mutcheck.application.services.checker import ViewPureChecker, check_source_units

__all__ = ["ViewPureChecker", "check_source_units"]
