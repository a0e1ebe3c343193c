"""Live progress tracker for the API Quest exercise."""

__version__ = "1.0.0"
