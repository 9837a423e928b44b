"""Coachsite - website builder backend for coaching institutes.

Coaches configure homepage content (banners, testimonials) for their own
white-labeled sites; administrators manage the coach accounts. Identity
concerns live in coachsite_identity, configuration in coachsite_config.
"""

__version__ = "0.1.0"
