"""
feedproxy - RSS/Atom filtering proxy

A FastAPI-based service that fetches a remote feed, keeps the items whose
titles pass a regex or skip-word filter, and re-emits them as RSS 2.0.
"""

__version__ = "1.0.0"

__all__ = []
