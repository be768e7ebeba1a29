"""Operational scripts for Commentbox."""
