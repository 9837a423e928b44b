"""Operator command line for the Coachsite backend."""
