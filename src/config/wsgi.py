"""WSGI entrypoint for the catalog service.

Connecting to the product store is an explicit startup step here, so a
misconfigured store fails the process before it serves requests.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.store import connect_store  # noqa: E402

connect_store()
