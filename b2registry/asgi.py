"""
ASGI config for the B2 registry project.

Only plain HTTP is served; every endpoint is a synchronous
request/response cycle.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "b2registry.settings")

application = get_asgi_application()
