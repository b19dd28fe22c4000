# pbs_portal/asgi.py
"""
ASGI config for the PBS portal.

Exposes the ASGI callable as a module-level variable named
``application`` for Daphne, Uvicorn or Hypercorn.
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pbs_portal.settings")

#: The ASGI application callable used by ASGI servers
application = get_asgi_application()
