"""Pokebattle: a small HTTP API for managing Pokemon and resolving battles."""

__version__ = "1.0.0"
