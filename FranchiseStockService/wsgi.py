"""
WSGI config for FranchiseStockService project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "FranchiseStockService.settings.dev")

application = get_wsgi_application()
