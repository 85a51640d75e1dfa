import pygame

from analysis import find_mismatched_edges
from constants import (
    GRID_SIZE, LABEL_COUNT, LABEL_COLORS, TILE_SIZE, TILE_GAP, REGION_SPACING,
    BUTTON_HEIGHT, STATUS_HEIGHT, FPS, COLOR_BACKGROUND, COLOR_GRID_BG,
    COLOR_GRID_BORDER, COLOR_TILE_BORDER, COLOR_MISMATCH, COLOR_TEXT,
    COLOR_TILE_ID, COLOR_BUTTON, COLOR_BUTTON_HOVER, COLOR_BANNER_BG,
    COLOR_BANNER_BORDER, STATUS_PLAYING, STATUS_SOLVED,
)
from generator import seed_sequence
from session import GameSession
from utils import get_grid_cell_from_point

MIN_WINDOW_WIDTH = 360

# =============================================================================
# FUNÇÕES AUXILIARES
# =============================================================================

def label_color(label):
    """Palette colour of a label. Labels above 9 wrap around the palette."""
    return LABEL_COLORS[1 + (label - 1) % (len(LABEL_COLORS) - 1)]


def text_color_for(background):
    """Black on light colours, white on dark ones."""
    r, g, b = background
    return (0, 0, 0) if r * 0.299 + g * 0.587 + b * 0.114 > 186 else (255, 255, 255)


class Button:
    def __init__(self, rect, text, action, font):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.action = action
        self.font = font

    def draw(self, screen):
        hovered = self.rect.collidepoint(pygame.mouse.get_pos())
        pygame.draw.rect(screen, COLOR_BUTTON_HOVER if hovered else COLOR_BUTTON, self.rect, border_radius=6)
        text_surface = self.font.render(self.text, True, (255, 255, 255))
        screen.blit(text_surface, text_surface.get_rect(center=self.rect.center))

    def handle_click(self, pos):
        if self.rect.collidepoint(pos):
            self.action()
            return True
        return False


class InteractiveBoard:
    def __init__(self, rows=GRID_SIZE, cols=GRID_SIZE, label_count=LABEL_COUNT, seed=None):
        pygame.init()
        self.rows, self.cols, self.label_count = rows, cols, label_count
        self.seeds = seed_sequence(seed)

        self.session = GameSession(on_change=self.on_session_change)
        self.status = "Click 'New Game' to begin."
        self.mismatches = []
        self.show_banner = False

        self._setup_dynamic_layout()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Tetravex Puzzle Game (Rotation Mode)")
        self.clock = pygame.time.Clock()

        self.font_label = pygame.font.Font(None, 28)
        self.font_id = pygame.font.Font(None, 14)
        self.font_ui = pygame.font.Font(None, 24)
        self.font_banner = pygame.font.Font(None, 40)

        self.new_game_button = Button(self.button_rect, "New Game", self.new_game, self.font_ui)
        self.new_game()

    def _setup_dynamic_layout(self):
        """Calcula o tamanho e a posição de todos os elementos da UI a partir do tamanho da grade."""
        self.grid_width = self.cols * TILE_SIZE + (self.cols - 1) * TILE_GAP
        self.grid_height = self.rows * TILE_SIZE + (self.rows - 1) * TILE_GAP

        self.window_width = max(self.grid_width + 2 * REGION_SPACING, MIN_WINDOW_WIDTH)
        self.window_height = self.grid_height + BUTTON_HEIGHT + STATUS_HEIGHT + 4 * REGION_SPACING

        self.grid_origin = ((self.window_width - self.grid_width) // 2, REGION_SPACING)
        self.grid_rect = pygame.Rect(self.grid_origin, (self.grid_width, self.grid_height))

        button_y = self.grid_rect.bottom + REGION_SPACING
        self.button_rect = pygame.Rect(REGION_SPACING, button_y, self.window_width - 2 * REGION_SPACING, BUTTON_HEIGHT)
        self.status_pos = (self.window_width // 2, button_y + BUTTON_HEIGHT + REGION_SPACING + STATUS_HEIGHT // 2)

    def cell_rect(self, row, col):
        return pygame.Rect(
            self.grid_origin[0] + col * (TILE_SIZE + TILE_GAP),
            self.grid_origin[1] + row * (TILE_SIZE + TILE_GAP),
            TILE_SIZE, TILE_SIZE
        )

    def get_grid_cell_from_mouse(self, mouse_pos):
        return get_grid_cell_from_point(mouse_pos, self.grid_origin, TILE_SIZE, TILE_GAP, self.rows, self.cols)

    # --- Game state ---

    def new_game(self):
        self.session.new_game(self.rows, self.cols, self.label_count, seed=next(self.seeds))

    def on_session_change(self, session):
        self.mismatches = find_mismatched_edges(session.grid)
        solved = session.is_solved()
        self.status = STATUS_SOLVED if solved else STATUS_PLAYING
        self.show_banner = solved

    def handle_click(self, pos):
        if self.new_game_button.handle_click(pos):
            return
        if self.show_banner:
            self.show_banner = False
            return
        cell = self.get_grid_cell_from_mouse(pos)
        if cell:
            self.session.rotate(*cell)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                return False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_n:
                self.new_game()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(event.pos)
        return True

    # --- Drawing ---

    def draw(self):
        self.screen.fill(COLOR_BACKGROUND)
        self.draw_grid()
        self.new_game_button.draw(self.screen)
        status_surface = self.font_ui.render(self.status, True, COLOR_TEXT)
        self.screen.blit(status_surface, status_surface.get_rect(center=self.status_pos))
        self.draw_banner()
        pygame.display.flip()

    def draw_grid(self):
        pygame.draw.rect(self.screen, COLOR_GRID_BG, self.grid_rect.inflate(2 * TILE_GAP, 2 * TILE_GAP))
        pygame.draw.rect(self.screen, COLOR_GRID_BORDER, self.grid_rect.inflate(2 * TILE_GAP, 2 * TILE_GAP), 2)
        for r, row in enumerate(self.session.grid):
            for c, tile in enumerate(row):
                self.draw_tile(tile, self.cell_rect(r, c))
        self.draw_mismatches()

    def draw_tile(self, tile, rect):
        cx, cy = rect.center
        corners = {
            'tl': rect.topleft, 'tr': rect.topright,
            'br': rect.bottomright, 'bl': rect.bottomleft,
        }
        # Um triângulo por lado: dois cantos + centro
        quadrants = [
            (tile.top, (corners['tl'], corners['tr'], (cx, cy)), (cx, rect.top + 22)),
            (tile.right, (corners['tr'], corners['br'], (cx, cy)), (rect.right - 20, cy)),
            (tile.bottom, (corners['br'], corners['bl'], (cx, cy)), (cx, rect.bottom - 22)),
            (tile.left, (corners['bl'], corners['tl'], (cx, cy)), (rect.left + 20, cy)),
        ]
        for label, points, text_center in quadrants:
            color = label_color(label)
            pygame.draw.polygon(self.screen, color, points)
            text = self.font_label.render(str(label), True, text_color_for(color))
            self.screen.blit(text, text.get_rect(center=text_center))

        pygame.draw.circle(self.screen, COLOR_BACKGROUND, (cx, cy), 4)
        id_text = self.font_id.render(f"ID:{tile.id}", True, COLOR_TILE_ID)
        self.screen.blit(id_text, id_text.get_rect(midbottom=(cx, rect.bottom - 1)))
        pygame.draw.rect(self.screen, COLOR_TILE_BORDER, rect, 2)

    def draw_mismatches(self):
        for (r1, c1), (r2, c2) in self.mismatches:
            first, second = self.cell_rect(r1, c1), self.cell_rect(r2, c2)
            if r2 > r1:
                y = (first.bottom + second.top) // 2
                pygame.draw.line(self.screen, COLOR_MISMATCH, (first.left, y), (first.right, y), 3)
            else:
                x = (first.right + second.left) // 2
                pygame.draw.line(self.screen, COLOR_MISMATCH, (x, first.top), (x, first.bottom), 3)

    def draw_banner(self):
        if not self.show_banner:
            return
        text = self.font_banner.render("Puzzle Solved!", True, COLOR_TEXT)
        banner_rect = text.get_rect(center=self.grid_rect.center).inflate(40, 30)
        pygame.draw.rect(self.screen, COLOR_BANNER_BG, banner_rect, border_radius=8)
        pygame.draw.rect(self.screen, COLOR_BANNER_BORDER, banner_rect, 2, 8)
        self.screen.blit(text, text.get_rect(center=banner_rect.center))

    def run(self):
        running = True
        while running:
            running = self.handle_events()
            self.draw()
            self.clock.tick(FPS)
        pygame.quit()
