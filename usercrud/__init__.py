"""JSON HTTP service for creating, reading, updating and deleting user records."""

__version__ = "0.1.0"