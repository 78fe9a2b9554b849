"""Tutor directory: a teacher and course web service and its HTML front end."""

__version__ = "0.1.0"