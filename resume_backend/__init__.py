"""Résumé records backend: work history and education CRUD over SQLite."""

__version__ = "0.1.0"
