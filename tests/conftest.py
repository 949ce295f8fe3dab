"""Shared fixtures: headless pygame and small hand-made levels."""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from circle_levels import DEFAULT_LEGEND, LevelDefinition, MarkerSpec


def make_definition(
    grid,
    markers=(),
    player_start=(1, 1),
    name: str = "Test Level",
    legend=None,
) -> LevelDefinition:
    """Build a LevelDefinition from plain tuples ``(row, col, color)``."""
    return LevelDefinition(
        name=name,
        legend=DEFAULT_LEGEND if legend is None else legend,
        grid=tuple(grid),
        player_start=player_start,
        markers=tuple(MarkerSpec(r, c, color) for r, c, color in markers),
    )


@pytest.fixture(autouse=True)
def _pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture()
def corridor() -> LevelDefinition:
    """A 3x6 level: one floor corridor along row 1."""
    return make_definition(
        [
            "######",
            "#....#",
            "######",
        ],
        markers=[(1, 2, (255, 0, 0)), (1, 4, (0, 0, 255))],
        player_start=(1, 1),
        name="Corridor",
    )
