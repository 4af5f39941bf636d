"""Banned-term moderation."""
