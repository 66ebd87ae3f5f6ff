"""Core business logic.

Modules:
- calculator: GPA aggregation and grade scale lookups (pure functions)
- models: Course and Semester records
"""

__all__ = [
    "calculator",
    "models",
]
