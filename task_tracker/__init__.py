"""Multi-user task tracker: owner-scoped task service behind a Flask API."""

__version__ = "1.0.0"
