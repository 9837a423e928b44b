"""Identity infrastructure: persistence and outbound email."""
