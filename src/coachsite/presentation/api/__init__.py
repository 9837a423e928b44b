"""HTTP API for the Coachsite backend."""
