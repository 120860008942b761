"""Pygame host for the card widget."""
