"""WSGI entry point (e.g. `gunicorn conference_site.wsgi:app`)."""
from conference_site.startup import create_app

app = create_app()
