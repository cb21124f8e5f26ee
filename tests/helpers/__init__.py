"""Test helpers for hoist.

This package provides utilities for testing feature discovery:
- Fakes: Evaluator and container stand-ins for host collaborators
- Assertions: Order-insensitive descriptor assertions
"""

from .assertions import assert_feature_names, feature_names, get_feature
from .fakes import CountingContainer, FailingContainer, FakeEvaluator

__all__ = [
    # Fakes
    "FakeEvaluator",
    "CountingContainer",
    "FailingContainer",
    # Assertions
    "assert_feature_names",
    "feature_names",
    "get_feature",
]
