"""Newsdesk: paginated news listing service."""

__version__ = "0.1.0"
