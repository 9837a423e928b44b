"""Application commands (state-changing use cases)."""
