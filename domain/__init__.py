"""Cell Signal Domain Layer.

This package contains the core business logic organized by bounded contexts:
- coverage: Radio signal strength readings, level classification
"""

# Imports alphabetized per project style (isort)
from domain import coverage

__all__ = ["coverage"]
