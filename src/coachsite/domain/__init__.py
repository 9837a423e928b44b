"""Domain layer for homepage content."""
