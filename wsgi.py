"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 1 -b 0.0.0.0:8000 wsgi:app
"""

from advent_roulette import create_app

app = create_app()
