import logging
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import pygame

from circle_levels import LEVELS, LevelDefinition, TileKind

logger = logging.getLogger(__name__)

# Constants
TILE_SIZE = 32
FPS = 60
CAPTION = "Circle Maze"
HUD_FONT_SIZE = 20
MARKER_SCALE = 0.6
PLAYER_INSET = 6
PLAYER_CORNER_RADIUS = 6

# Colors
BACKGROUND_COLOR = (240, 240, 240)
WALL_COLOR = (30, 50, 60)
FLOOR_COLOR = (230, 230, 230)
PLAYER_COLOR = (255, 180, 0)
TEXT_COLOR = (0, 0, 0)

# Row / column deltas for each direction
DIR_DELTA = {
    "up":    (-1,  0),
    "down":  ( 1,  0),
    "left":  ( 0, -1),
    "right": ( 0,  1),
}

DIRECTION_KEYS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}


# Game States
class GameState(Enum):
    PLAYING = "playing"
    ALL_COMPLETE = "all_complete"


class Marker:
    def __init__(self, row: int, col: int, color: Tuple[int, int, int]):
        self.row = row
        self.col = col
        self.color = color
        self.collected = False


class Level:
    def __init__(self, definition: LevelDefinition, tile_size: int = TILE_SIZE):
        self.ts = tile_size
        self.grid: List[List[TileKind]] = []
        self.markers: List[Marker] = []
        self.load(definition)

    def load(self, definition: LevelDefinition):
        """Build the tile grid and markers from a level definition"""
        self.definition = definition

        # Unknown characters are floor
        self.grid = [
            [definition.legend.get(ch, TileKind.FLOOR) for ch in row]
            for row in definition.grid
        ]

        # Markers off the grid or on a wall snap to the first floor tile
        self.markers = []
        for source in definition.markers:
            row, col = source.row, source.col
            if self.is_wall(row, col):
                row, col = self.first_floor()
                logger.warning(
                    "%s: marker at (%s, %s) is not on a floor tile, moved to (%s, %s)",
                    definition.name, source.row, source.col, row, col,
                )
            self.markers.append(Marker(row, col, source.color))

        logger.info("Loaded %s: %sx%s, %s circles",
                    definition.name, self.rows(), self.cols(), len(self.markers))

    def first_floor(self) -> Tuple[int, int]:
        """Return the first floor tile in row-major order"""
        for r in range(self.rows()):
            for c in range(self.cols()):
                if self._tile_at(r, c) is TileKind.FLOOR:
                    return r, c
        return 1, 1

    def _tile_at(self, r: int, c: int) -> Optional[TileKind]:
        row = self.grid[r]
        return row[c] if c < len(row) else None

    def rows(self) -> int:
        return len(self.grid)

    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def pixel_width(self) -> int:
        return self.cols() * self.ts

    def pixel_height(self) -> int:
        return self.rows() * self.ts

    def is_wall(self, r: int, c: int) -> bool:
        """Cells outside the grid count as walls"""
        if r < 0 or c < 0 or r >= self.rows() or c >= self.cols():
            return True
        return self._tile_at(r, c) is TileKind.WALL

    def circles_left(self) -> int:
        return sum(1 for marker in self.markers if not marker.collected)

    def all_circles_collected(self) -> bool:
        return all(marker.collected for marker in self.markers)

    def try_collect_circle(self, r: int, c: int):
        """Collect every uncollected marker on (r, c)"""
        for marker in self.markers:
            if not marker.collected and marker.row == r and marker.col == c:
                marker.collected = True

    def draw(self, screen):
        """Draw the level"""
        # Draw tiles
        for r in range(self.rows()):
            for c in range(self.cols()):
                color = WALL_COLOR if self.is_wall(r, c) else FLOOR_COLOR
                pygame.draw.rect(screen, color, (c * self.ts, r * self.ts, self.ts, self.ts))

        # Draw markers on top
        diameter = int(self.ts * MARKER_SCALE)
        for marker in self.markers:
            if marker.collected:
                continue
            marker_rect = pygame.Rect(0, 0, diameter, diameter)
            marker_rect.center = (
                marker.col * self.ts + self.ts // 2,
                marker.row * self.ts + self.ts // 2,
            )
            pygame.draw.ellipse(screen, marker.color, marker_rect)


class Player:
    def __init__(self, row: int, col: int, tile_size: int = TILE_SIZE):
        self.row = row
        self.col = col
        self.ts = tile_size

    def move(self, dr: int, dc: int, level: Level):
        """Step one cell unless the target is a wall, collecting on arrival"""
        nr = self.row + dr
        nc = self.col + dc
        if level.is_wall(nr, nc):
            return
        self.row = nr
        self.col = nc
        level.try_collect_circle(self.row, self.col)

    def draw(self, screen):
        """Draw the player"""
        pygame.draw.rect(
            screen,
            PLAYER_COLOR,
            (
                self.col * self.ts + PLAYER_INSET,
                self.row * self.ts + PLAYER_INSET,
                self.ts - 2 * PLAYER_INSET,
                self.ts - 2 * PLAYER_INSET,
            ),
            border_radius=PLAYER_CORNER_RADIUS,
        )


class Game:
    def __init__(self, levels: Sequence[LevelDefinition] = LEVELS):
        pygame.init()
        pygame.display.set_caption(CAPTION)
        self.clock = pygame.time.Clock()
        self.running = True
        self.font = pygame.font.Font(None, HUD_FONT_SIZE)
        self.screen: Optional[pygame.Surface] = None

        self.levels = list(levels)
        self.current_level_index = 0
        self.level: Optional[Level] = None
        self.player: Optional[Player] = None
        self.state = GameState.PLAYING

        self.start_run()

    def start_run(self):
        """Set up the first level and place the player"""
        if not self.levels:
            logger.error("No levels to play!")
            self.state = GameState.ALL_COMPLETE
            # No window ever opens, so nothing else could end run()
            self.running = False
            return

        definition = self.levels[0]
        self.level = Level(definition, TILE_SIZE)
        self.player = Player(definition.player_start[0], definition.player_start[1], TILE_SIZE)
        self.load_level(0)
        self.state = GameState.PLAYING

    def load_level(self, index: int):
        """Reload the shared level and reposition the player"""
        self.current_level_index = index
        definition = self.levels[index]
        self.level.load(definition)
        self.resize_surface()
        self.player.row, self.player.col = definition.player_start
        self.level.try_collect_circle(self.player.row, self.player.col)

    def resize_surface(self):
        width = max(1, self.level.pixel_width())
        height = max(1, self.level.pixel_height())
        self.screen = pygame.display.set_mode((width, height))

    def handle_direction(self, direction: str):
        """Move the player one cell in a named direction"""
        if self.state != GameState.PLAYING or direction not in DIR_DELTA:
            return
        dr, dc = DIR_DELTA[direction]
        self.player.move(dr, dc, self.level)

    def handle_key(self, key: int):
        direction = DIRECTION_KEYS.get(key)
        if direction:
            self.handle_direction(direction)

    def handle_events(self):
        """Handle window and keyboard events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                else:
                    self.handle_key(event.key)

    def draw_text(self, text: str, x: int, y: int, align: str = "left"):
        surface = self.font.render(text, True, TEXT_COLOR)
        if align == "center":
            rect = surface.get_rect(center=(x, y))
        else:
            rect = surface.get_rect(topleft=(x, y))
        self.screen.blit(surface, rect)

    def draw_ui(self):
        """Draw the level name and circles left"""
        self.draw_text(self.level.definition.name, 8, 6)
        self.draw_text(f"Circles left: {self.level.circles_left()}", 8, 24)

    def draw_all_complete(self):
        width, height = self.screen.get_size()
        self.draw_text("All levels complete", width // 2, height // 2, align="center")

    def draw_frame(self):
        """Render one frame, then advance or finish if the level is cleared"""
        if self.state != GameState.PLAYING:
            return

        self.screen.fill(BACKGROUND_COLOR)
        self.level.draw(self.screen)
        self.player.draw(self.screen)
        self.draw_ui()

        if not self.level.all_circles_collected():
            return

        if self.current_level_index < len(self.levels) - 1:
            logger.info("%s complete! Moving to level %s",
                        self.level.definition.name, self.current_level_index + 2)
            self.load_level(self.current_level_index + 1)
        else:
            self.draw_all_complete()
            self.state = GameState.ALL_COMPLETE
            logger.info("All levels complete!")

    def run(self):
        """Main game loop"""
        while self.running:
            self.handle_events()

            # The last frame stays up once every level is done
            if self.state == GameState.PLAYING:
                self.draw_frame()
                pygame.display.flip()

            self.clock.tick(FPS)

        pygame.quit()


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main():
    configure_logging()
    game = Game()
    game.run()


if __name__ == "__main__":
    main()
