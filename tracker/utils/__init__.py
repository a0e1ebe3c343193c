"""Helpers shared by services and transport."""
