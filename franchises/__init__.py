"""
Franchises module - root of the franchise/office/product hierarchy.

This module handles:
- Franchise entity and domain events
- Franchise repository (port)
- Franchise infrastructure (Django ORM adapter)
- Franchise use cases
"""
