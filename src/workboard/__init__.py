# src/workboard/__init__.py

"""In-memory users/projects/tasks HTTP API."""

__version__ = "1.0.0"
