"""Core configuration, error taxonomy and moderation rules."""
