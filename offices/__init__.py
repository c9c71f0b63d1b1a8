"""
Offices module - offices owned by a franchise.

This module handles:
- Office entity and domain events
- Office repository (port)
- Office infrastructure (Django ORM adapter)
- Office use cases
"""
