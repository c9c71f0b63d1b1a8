"""
Core module for shared domain infrastructure.

This module contains:
- Entity validation, name uniqueness and hierarchy checks
- Domain events and the in-process event bus
- Observability middleware, metrics and health views
"""
