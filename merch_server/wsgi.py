"""
WSGI config for merch_server project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'merch_server.settings.development')

application = get_wsgi_application()
