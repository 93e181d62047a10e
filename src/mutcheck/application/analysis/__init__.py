"""Mutability analysis: classifier, diagnostic policy and body walker."""

from mutcheck.application.analysis.classifier import classify
from mutcheck.application.analysis.walker import MutabilityWalker, WalkResult

__all__ = ["MutabilityWalker", "WalkResult", "classify"]
