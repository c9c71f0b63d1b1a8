"""
App configuration for Franchise Stock Service.
"""

import logging
import os
import sys

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)

# Management commands that never serve requests
_SKIP_OBSERVABILITY_COMMANDS = {
    "migrate",
    "makemigrations",
    "collectstatic",
    "shell",
    "check",
    "createsuperuser",
}


class FranchiseStockServiceConfig(AppConfig):
    """App configuration for FranchiseStockService."""

    name = "FranchiseStockService"
    verbose_name = "Franchise Stock Service"

    _initialized = False

    def ready(self):
        """Called when Django starts."""
        from core.infrastructure.event_handlers import register_event_handlers

        register_event_handlers()

        if FranchiseStockServiceConfig._initialized or not self._wants_observability():
            return

        from core.instrumentation import setup_opentelemetry

        logger.info("Setting up observability...")
        setup_opentelemetry()
        FranchiseStockServiceConfig._initialized = True
        logger.info("Observability setup complete")

    @staticmethod
    def _wants_observability() -> bool:
        if not getattr(settings, "OTEL_ENABLED", False):
            return False
        if len(sys.argv) > 1 and sys.argv[1] in _SKIP_OBSERVABILITY_COMMANDS:
            return False
        # Django's autoreloader parent process
        return os.environ.get("RUN_MAIN") != "false"
