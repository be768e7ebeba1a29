# src/commentbox/__init__.py
"""Commentbox: blog posts with moderated, threaded comments."""

__version__ = "0.1.0"
