# pbs_portal/wsgi.py
"""
WSGI config for the PBS portal.

Exposes the WSGI callable as a module-level variable named
``application`` for Gunicorn, uWSGI or ``runserver``.

For more details, see:
https://docs.djangoproject.com/en/stable/howto/deployment/wsgi/
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pbs_portal.settings")

#: The WSGI application callable used by WSGI servers
application = get_wsgi_application()
