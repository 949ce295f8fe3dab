from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


# Tile kinds (what each legend character means)
class TileKind(Enum):
    WALL = "wall"
    FLOOR = "floor"


@dataclass(frozen=True)
class MarkerSpec:
    row: int
    col: int
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class LevelDefinition:
    name: str
    legend: Dict[str, TileKind]
    grid: Tuple[str, ...]
    player_start: Tuple[int, int]  # (row, col)
    markers: Tuple[MarkerSpec, ...]


DEFAULT_LEGEND = {"#": TileKind.WALL, ".": TileKind.FLOOR}

LEVELS = (
    LevelDefinition(
        name="Level 1",
        legend=DEFAULT_LEGEND,
        grid=(
            "################",
            "#....#.....#...#",
            "#.##.#.###.#.#.#",
            "#.#..#...#...#.#",
            "#.#.####.###.#.#",
            "#.....#...#....#",
            "###.#.#.###.##.#",
            "#...#...#...#..#",
            "#.#####.#.###..#",
            "#..............#",
            "################",
        ),
        player_start=(1, 1),
        markers=(
            MarkerSpec(1, 2, (255, 0, 0)),
            MarkerSpec(5, 4, (0, 0, 255)),
            MarkerSpec(8, 13, (0, 200, 0)),
        ),
    ),
    LevelDefinition(
        name="Level 2",
        legend=DEFAULT_LEGEND,
        grid=(
            "################",
            "#..#.......#...#",
            "#..#.#####.#.#.#",
            "#....#...#...#.#",
            "####.#.#.#####.#",
            "#....#.#.....#.#",
            "#.####.#####.#.#",
            "#......#...#...#",
            "#.######.#.###.#",
            "#........#.....#",
            "################",
        ),
        player_start=(1, 1),
        markers=(
            MarkerSpec(1, 14, (255, 255, 0)),
            MarkerSpec(7, 2, (255, 0, 255)),
            MarkerSpec(9, 10, (0, 255, 255)),
            MarkerSpec(8, 8, (255, 120, 0)),  # (8, 9) is a wall
        ),
    ),
)
