"""Pygame-based board renderer with a clickable move list."""

try:
    from GameSession import HistoryIndexError
    from engine import win_detector
except ImportError:
    from Gomoku_Replay.GameSession import HistoryIndexError
    from Gomoku_Replay.engine import win_detector


class BoardLayout:
    """Pixel geometry of the window: status panel on top, board below, move list on the right."""

    PANEL_HEIGHT = 80
    MARGIN = 20
    LIST_WIDTH = 240
    LIST_ROW_HEIGHT = 28

    def __init__(self, board_size, window_size=800):
        self.board_size = board_size
        self.window_size = window_size
        self.width = window_size + self.LIST_WIDTH
        self.height = window_size

        board_px = window_size - self.PANEL_HEIGHT - 2 * self.MARGIN
        self.tile_size = board_px // board_size
        self.board_px = self.tile_size * board_size
        self.board_origin = (
            (window_size - self.board_px) // 2,
            self.PANEL_HEIGHT + (window_size - self.PANEL_HEIGHT - self.board_px) // 2,
        )
        self.list_origin = (window_size, self.PANEL_HEIGHT)
        self.visible_rows = (self.height - self.PANEL_HEIGHT) // self.LIST_ROW_HEIGHT

    def cell_rect(self, row, col):
        ox, oy = self.board_origin
        return (ox + col * self.tile_size, oy + row * self.tile_size, self.tile_size, self.tile_size)

    def cell_center(self, row, col):
        x, y, w, h = self.cell_rect(row, col)
        return x + w / 2, y + h / 2

    def cell_at(self, pos):
        """Map a pixel position to (row, col), or None outside the board."""
        mx, my = pos
        ox, oy = self.board_origin
        if not (ox <= mx < ox + self.board_px and oy <= my < oy + self.board_px):
            return None
        return int((my - oy) // self.tile_size), int((mx - ox) // self.tile_size)

    def first_visible(self, current_move, total):
        """Index of the top move-list row so that the current move stays on screen."""
        if total <= self.visible_rows:
            return 0
        first = current_move - self.visible_rows + 1
        return max(0, min(first, total - self.visible_rows))

    def move_row_rect(self, slot):
        lx, ly = self.list_origin
        return (lx, ly + slot * self.LIST_ROW_HEIGHT, self.LIST_WIDTH, self.LIST_ROW_HEIGHT)

    def move_at(self, pos, current_move, total):
        """Map a click inside the move list to a history index, or None."""
        mx, my = pos
        lx, ly = self.list_origin
        if not (lx <= mx < lx + self.LIST_WIDTH and ly <= my < self.height):
            return None
        slot = int((my - ly) // self.LIST_ROW_HEIGHT)
        if slot >= self.visible_rows:
            return None
        index = self.first_visible(current_move, total) + slot
        return index if index < total else None


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_WOOD = (209, 179, 135)
    COLOR_GRID = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_X = (30, 30, 30)
    COLOR_O = (250, 250, 250)
    COLOR_RED = (200, 0, 0)
    COLOR_HIGHLIGHT = (90, 70, 45)

    def __init__(self, board_size, window_size=800):
        import pygame

        self._pygame = pygame
        self.layout = BoardLayout(board_size, window_size)

        pygame.init()
        self.screen = pygame.display.set_mode((self.layout.width, self.layout.height))
        pygame.display.set_caption("Gomoku Replay")

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 24)

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_grid(self):
        pygame = self._pygame
        ox, oy = self.layout.board_origin
        size_px = self.layout.board_px
        pygame.draw.rect(self.screen, self.COLOR_WOOD, pygame.Rect(ox, oy, size_px, size_px))
        for i in range(self.layout.board_size + 1):
            offset = i * self.layout.tile_size
            pygame.draw.line(self.screen, self.COLOR_GRID, (ox, oy + offset), (ox + size_px, oy + offset), 1)
            pygame.draw.line(self.screen, self.COLOR_GRID, (ox + offset, oy), (ox + offset, oy + size_px), 1)

    def _draw_marks(self, board):
        pygame = self._pygame
        inset = self.layout.tile_size * 0.22
        for r, row in enumerate(board.rows):
            for c, mark in enumerate(row):
                if mark is None:
                    continue
                x, y, w, h = self.layout.cell_rect(r, c)
                if mark.value == "X":
                    pygame.draw.line(self.screen, self.COLOR_X, (x + inset, y + inset), (x + w - inset, y + h - inset), 3)
                    pygame.draw.line(self.screen, self.COLOR_X, (x + w - inset, y + inset), (x + inset, y + h - inset), 3)
                else:
                    center = self.layout.cell_center(r, c)
                    pygame.draw.circle(self.screen, self.COLOR_O, center, w / 2 - inset, 3)

    def _draw_winning_line(self, board):
        line = win_detector.winning_line(board)
        if not line:
            return
        start = self.layout.cell_center(*line[0])
        end = self.layout.cell_center(*line[-1])
        self._pygame.draw.line(self.screen, self.COLOR_RED, start, end, 4)

    def _draw_info_panel(self, status):
        panel_rect = self._pygame.Rect(0, 0, self.layout.width, self.layout.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)
        self._draw_text(status, self.font_large, self.COLOR_TEXT, (self.layout.window_size / 2, self.layout.PANEL_HEIGHT / 2))

    def _draw_move_list(self, view):
        total = len(view.move_list)
        first = self.layout.first_visible(view.current_move, total)
        for slot in range(self.layout.visible_rows):
            index = first + slot
            if index >= total:
                break
            _, label = view.move_list[index]
            x, y, w, h = self.layout.move_row_rect(slot)
            if index == view.current_move:
                self._pygame.draw.rect(self.screen, self.COLOR_HIGHLIGHT, self._pygame.Rect(x, y, w, h))
            self._draw_text(f"{index + 1}. {label}", self.font_small, self.COLOR_TEXT, (x + w / 2, y + h / 2))

    def render(self, view):
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_grid()
        self._draw_marks(view.board)
        self._draw_winning_line(view.board)
        self._draw_info_panel(view.status)
        self._draw_move_list(view)
        self._pygame.display.flip()

    def handle_click(self, session, pos):
        """Dispatch a mouse click to play() or jump_to(); returns True if state changed."""
        coords = self.layout.cell_at(pos)
        if coords:
            return session.play(*coords)

        index = self.layout.move_at(pos, session.current_move, len(session.history))
        if index is None:
            return False
        try:
            session.jump_to(index)
        except HistoryIndexError:
            return False
        return True

    def run(self, session):
        pygame = self._pygame
        self.render(session.current_view())
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if self.handle_click(session, event.pos):
                        self.render(session.current_view())
            pygame.time.delay(10)

    def close(self):
        self._pygame.quit()
