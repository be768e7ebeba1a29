# src/commentbox/services/__init__.py
"""Business logic services for the Commentbox application."""

from .moderation import ModerationService
from .threads import ThreadNode, ThreadService, assemble_thread

__all__ = [
    "ModerationService",
    "ThreadNode",
    "ThreadService",
    "assemble_thread",
]
