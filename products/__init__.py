"""
Products module - products stocked by an office.

This module handles:
- Product entity, domain events and top-stock selection
- Product repository (port)
- Product infrastructure (Django ORM adapter)
- Product use cases
"""
