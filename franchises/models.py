"""
Django model registration for the franchises app.
"""

from franchises.infrastructure.models import Franchise  # noqa: F401
