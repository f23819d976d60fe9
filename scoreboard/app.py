"""Pygame scoreboard: name entry, point buttons, serve marker, undo/redo."""

try:
    import pygame
except ImportError:
    pygame = None

from scoring import game as games
from scoring.types import OngoingGame, Player
from scoreboard.layout import game_rows, is_leading, player_order
from scoreboard.session import ScoreboardSession

# Window dimensions
WIN_W = 520
WIN_H = 560

# Colors
BG_COLOR = (12, 12, 22)
CARD_BG = (26, 26, 46)
PANEL_BG = (22, 33, 62)
ACCENT = (233, 69, 96)
TEXT_WHITE = (224, 224, 224)
TEXT_DIM = (136, 136, 136)
DISABLED = (60, 60, 80)
BUTTON_BG = (42, 42, 74)
FIELD_BG = (30, 30, 52)
PADDLE_RED = (200, 40, 40)
PADDLE_WOOD = (150, 100, 50)
NET_YELLOW = (255, 217, 61)
LEFT_COLOR = (78, 205, 196)
RIGHT_COLOR = (233, 69, 96)

PLAYER_COLORS = {Player.LEFT: LEFT_COLOR, Player.RIGHT: RIGHT_COLOR}

MARGIN = 24
HEADER_H = 42


def _draw_button(surface, rect, label, font, enabled=True, color=BUTTON_BG):
    pygame.draw.rect(surface, color if enabled else DISABLED, rect, border_radius=6)
    txt = font.render(label, True, TEXT_WHITE if enabled else TEXT_DIM)
    surface.blit(txt, (rect.centerx - txt.get_width() // 2, rect.centery - txt.get_height() // 2))


def _draw_paddle(surface, center):
    """Serve marker: a small paddle next to the server's button."""
    x, y = center
    pygame.draw.line(surface, PADDLE_WOOD, (x, y + 4), (x + 6, y + 12), 4)
    pygame.draw.circle(surface, PADDLE_RED, (x - 1, y - 1), 7)


def _draw_header(screen, fonts, hint):
    pygame.draw.rect(screen, CARD_BG, (0, 0, WIN_W, HEADER_H))
    pygame.draw.line(screen, ACCENT, (0, HEADER_H - 1), (WIN_W, HEADER_H - 1), 2)
    screen.blit(fonts["title"].render("RINKIPINGIS", True, TEXT_WHITE), (12, 13))
    txt = fonts["header"].render(hint, True, TEXT_DIM)
    screen.blit(txt, (WIN_W - txt.get_width() - 10, 17))


def _draw_entry(screen, fonts, session, field_rects, start_rect):
    for player, rect in field_rects.items():
        active = session.active_field is player
        label = "Left" if player is Player.LEFT else "Right"
        screen.blit(fonts["sm"].render(label, True, TEXT_DIM), (rect.x, rect.y - 18))
        pygame.draw.rect(screen, FIELD_BG, rect, border_radius=4)
        pygame.draw.rect(screen, ACCENT if active else BUTTON_BG, rect, 2, border_radius=4)
        value = session.left_name if player is Player.LEFT else session.right_name
        if active:
            value += "_"
        screen.blit(fonts["lg"].render(value, True, TEXT_WHITE), (rect.x + 8, rect.y + 8))
    _draw_button(screen, start_rect, "Start", fonts["lg"], color=ACCENT)


def _draw_match(screen, fonts, session, point_rects, undo_rect, redo_rect):
    history = session.history
    match = history.current
    col_l = MARGIN + 40
    col_r = WIN_W // 2 + 40
    py = HEADER_H + 16

    # Names
    screen.blit(fonts["lg"].render(session.player_name(Player.LEFT), True, LEFT_COLOR), (col_l, py))
    screen.blit(fonts["lg"].render(session.player_name(Player.RIGHT), True, RIGHT_COLOR), (col_r, py))
    py += 30

    # Finished games and match score
    rows = game_rows(match)
    if rows:
        for left, right in rows:
            _draw_score_row(screen, fonts["md"], left, right, col_l, col_r, py)
            py += 20
        pygame.draw.line(screen, TEXT_DIM, (MARGIN, py + 2), (WIN_W - MARGIN, py + 2), 2)
        py += 10
        _draw_score_row(screen, fonts["lg"], *match.score, col_l, col_r, py)
        py += 30

    # Current game controls, in display order
    game = match.current_game
    if games.is_deuce(game):
        screen.blit(fonts["md"].render("DEUCE", True, NET_YELLOW), (MARGIN, point_rects[0].y - 22))
    for rect, player in zip(point_rects, player_order(match)):
        label = f"{session.player_name(player)}  {games.points(game, player)}"
        _draw_button(screen, rect, label, fonts["lg"], color=PLAYER_COLORS[player])
        if isinstance(game, OngoingGame) and game.serve is player:
            _draw_paddle(screen, (rect.x - 14, rect.centery))

    _draw_button(screen, undo_rect, "Undo", fonts["md"], enabled=history.can_undo)
    _draw_button(screen, redo_rect, "Redo", fonts["md"], enabled=history.can_redo)


def _draw_score_row(screen, font, left, right, col_l, col_r, py):
    font.set_bold(is_leading(left, right))
    screen.blit(font.render(str(left), True, TEXT_WHITE), (col_l, py))
    font.set_bold(is_leading(right, left))
    screen.blit(font.render(str(right), True, TEXT_WHITE), (col_r, py))
    font.set_bold(False)
    screen.blit(font.render("-", True, TEXT_DIM), ((col_l + col_r) // 2, py))


def run_app(session: ScoreboardSession = None):
    """Launch the pygame scoreboard window."""
    if pygame is None:
        print("ERROR: pygame is not installed. Run: pip install pygame")
        return

    session = session or ScoreboardSession()

    pygame.init()
    screen = pygame.display.set_mode((WIN_W, WIN_H))
    pygame.display.set_caption("Rinkipingis")
    clock = pygame.time.Clock()

    fonts = {
        "header": pygame.font.SysFont("monospace", 11),
        "title": pygame.font.SysFont("monospace", 15, bold=True),
        "sm": pygame.font.SysFont("monospace", 12),
        "md": pygame.font.SysFont("monospace", 16),
        "lg": pygame.font.SysFont("monospace", 20),
    }

    field_w = WIN_W - MARGIN * 2
    field_rects = {
        Player.LEFT: pygame.Rect(MARGIN, HEADER_H + 50, field_w, 40),
        Player.RIGHT: pygame.Rect(MARGIN, HEADER_H + 130, field_w, 40),
    }
    start_rect = pygame.Rect(MARGIN, HEADER_H + 200, 140, 40)

    button_w = (WIN_W - MARGIN * 2 - 40) // 2
    point_rects = [
        pygame.Rect(MARGIN + 20, WIN_H - 150, button_w, 56),
        pygame.Rect(MARGIN + 40 + button_w, WIN_H - 150, button_w, 56),
    ]
    undo_rect = pygame.Rect(MARGIN, WIN_H - 76, 100, 34)
    redo_rect = pygame.Rect(MARGIN + 112, WIN_H - 76, 100, 34)

    running = True
    while running:
        clock.tick(30)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif not session.started:
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_TAB:
                        session.switch_field()
                    elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        session.start()
                    elif event.key == pygame.K_BACKSPACE:
                        session.backspace()
                    elif event.unicode and event.unicode.isprintable():
                        session.type_text(event.unicode)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    for player, rect in field_rects.items():
                        if rect.collidepoint(event.pos) and session.active_field is not player:
                            session.switch_field()
                    if start_rect.collidepoint(event.pos):
                        session.start()
            else:
                shown = player_order(session.history.current)
                ctrl = pygame.key.get_mods() & pygame.KMOD_CTRL
                if event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_q, pygame.K_ESCAPE):
                        running = False
                    elif event.key == pygame.K_z and ctrl or event.key == pygame.K_u:
                        session.undo()
                    elif event.key == pygame.K_y and ctrl or event.key == pygame.K_r:
                        session.redo()
                    elif event.key in (pygame.K_a, pygame.K_LEFT):
                        session.point(shown[0])
                    elif event.key in (pygame.K_l, pygame.K_RIGHT):
                        session.point(shown[1])
                    elif event.key == pygame.K_n:
                        session.restart()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    for rect, player in zip(point_rects, shown):
                        if rect.collidepoint(event.pos):
                            session.point(player)
                    if undo_rect.collidepoint(event.pos) and session.history.can_undo:
                        session.undo()
                    elif redo_rect.collidepoint(event.pos) and session.history.can_redo:
                        session.redo()

        # ---- DRAW ----
        screen.fill(BG_COLOR)
        if session.started:
            _draw_header(screen, fonts, "A/L:point  U:undo  R:redo  N:new  Q:quit")
            _draw_match(screen, fonts, session, point_rects, undo_rect, redo_rect)
        else:
            _draw_header(screen, fonts, "TAB:switch  ENTER:start  ESC:quit")
            _draw_entry(screen, fonts, session, field_rects, start_rect)

        # Status line
        pygame.draw.rect(screen, PANEL_BG, (0, WIN_H - 28, WIN_W, 28))
        screen.blit(fonts["sm"].render(session.message, True, TEXT_DIM), (10, WIN_H - 21))

        pygame.display.flip()

    pygame.quit()
