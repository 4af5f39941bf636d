"""Moderation audit trail for the admin surface."""
