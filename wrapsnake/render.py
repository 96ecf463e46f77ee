import pygame

CELL_SIZE = 24
HUD_HEIGHT = 40

# Colors (R, G, B)
BG_TOP = (18, 26, 38)
BG_BOTTOM = (9, 14, 22)
GRID_LINE = (30, 44, 61)
HEAD_COLOR = (112, 224, 120)
BODY_COLOR = (66, 168, 90)
FOOD_COLOR = (255, 140, 0)
FOOD_INNER = (255, 200, 130)
WHITE = (240, 240, 240)
SHADOW = (0, 0, 0)
HUD_FONT_SIZE = 22


def window_size(width, height):
    """Pixel size of the window for a grid of width x height cells."""
    return width * CELL_SIZE, height * CELL_SIZE + HUD_HEIGHT


def get_ui_font(size):
    """Load a preferred UI font, then fall back safely to pygame default."""
    preferred = ["Bahnschrift", "Segoe UI", "Arial"]
    for name in preferred:
        path = pygame.font.match_font(name)
        if path:
            return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


def grid_rect(cell, padding=0):
    """Return a pixel rectangle for a grid cell, below the HUD strip."""
    x, y = cell
    return pygame.Rect(
        x * CELL_SIZE + padding,
        HUD_HEIGHT + y * CELL_SIZE + padding,
        CELL_SIZE - padding * 2,
        CELL_SIZE - padding * 2,
    )


class Renderer:
    """Draws board snapshots onto a pygame surface."""

    def __init__(self, surface, font=None):
        self.surface = surface
        self.font = font if font is not None else get_ui_font(HUD_FONT_SIZE)
        self._background = None

    def draw(self, snapshot):
        self.surface.blit(self._get_background(snapshot), (0, 0))

        for cell in snapshot.snake[1:]:
            pygame.draw.rect(self.surface, BODY_COLOR, grid_rect(cell, padding=1), border_radius=5)
        self._draw_head(snapshot)

        # Food is drawn last so it stays visible where it overlaps the snake.
        for cell in snapshot.foods:
            self._draw_food(cell)

        self._draw_hud(snapshot)

    def _get_background(self, snapshot):
        """Gradient and grid lines, rendered once and reused every frame."""
        if self._background is not None:
            return self._background

        width, height = self.surface.get_size()
        background = pygame.Surface((width, height))
        for y in range(height):
            t = y / height
            r = int(BG_TOP[0] + (BG_BOTTOM[0] - BG_TOP[0]) * t)
            g = int(BG_TOP[1] + (BG_BOTTOM[1] - BG_TOP[1]) * t)
            b = int(BG_TOP[2] + (BG_BOTTOM[2] - BG_TOP[2]) * t)
            pygame.draw.line(background, (r, g, b), (0, y), (width, y))

        for x in range(0, snapshot.width * CELL_SIZE + 1, CELL_SIZE):
            pygame.draw.line(background, GRID_LINE, (x, HUD_HEIGHT), (x, height), 1)
        for y in range(HUD_HEIGHT, height + 1, CELL_SIZE):
            pygame.draw.line(background, GRID_LINE, (0, y), (width, y), 1)

        self._background = background
        return background

    def _draw_food(self, cell):
        rect = grid_rect(cell, padding=2)
        center = rect.center
        radius = rect.width // 2
        pygame.draw.circle(self.surface, FOOD_COLOR, center, radius)
        pygame.draw.circle(self.surface, FOOD_INNER, (center[0] - 3, center[1] - 3), max(2, radius // 3))

    def _draw_head(self, snapshot):
        head_rect = grid_rect(snapshot.head, padding=1)
        pygame.draw.rect(self.surface, HEAD_COLOR, head_rect, border_radius=5)

        # Eyes on the leading edge so the heading is easy to read.
        cx, cy = head_rect.center
        eye_offset = 4
        dx, dy = snapshot.heading
        if dx:
            eyes = [(cx + dx * eye_offset, cy - 3), (cx + dx * eye_offset, cy + 3)]
        else:
            eyes = [(cx - 3, cy + dy * eye_offset), (cx + 3, cy + dy * eye_offset)]
        for ex, ey in eyes:
            pygame.draw.circle(self.surface, SHADOW, (ex, ey), 2)

    def _draw_hud(self, snapshot):
        bar = pygame.Rect(0, 0, self.surface.get_width(), HUD_HEIGHT)
        panel = pygame.Surface(bar.size, pygame.SRCALPHA)
        panel.fill((0, 0, 0, 120))
        self.surface.blit(panel, bar.topleft)

        left = self.font.render(f"Score: {snapshot.score}", True, WHITE)
        right_label = f"Size: {len(snapshot.snake)}"
        if snapshot.rounds_played:
            right_label += f"  |  Last round: {snapshot.last_round_score}"
        right = self.font.render(right_label, True, WHITE)

        self.surface.blit(left, (12, bar.centery - left.get_height() // 2))
        self.surface.blit(right, (bar.right - 12 - right.get_width(), bar.centery - right.get_height() // 2))
