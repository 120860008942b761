"""Pytest fixtures for pygame host tests."""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_init():
    """Initialize pygame once for the UI tests."""
    pygame.init()
    yield
    pygame.quit()
