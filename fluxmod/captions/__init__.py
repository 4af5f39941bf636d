"""Template-based caption suggestions."""
