import pygame

from .app import AppStatus
from .config import (
    ACTIVE_COLOR, BACKGROUND_COLOR, BAR_SPACING, COMPARE_COLOR, UI_BORDER,
    UI_GREEN, UI_KEY, UI_PANEL, UI_RED, UI_SUBTEXT, UI_TEXT, UI_VALUE,
    WINDOW_HEIGHT, WINDOW_WIDTH,
)

# ============================================================
# ========================= LAYOUT ===========================
# ============================================================

PAD       = 12
CHART_H   = int(WINDOW_HEIGHT * 0.8)
PANEL_Y   = CHART_H + PAD // 2
PANEL_H   = WINDOW_HEIGHT - PANEL_Y - PAD
PANEL_W   = (WINDOW_WIDTH - 3 * PAD) // 2
LINE_H    = 16

CONTROLS = [
    ("Space", "Start/Pause"),
    ("R",     "Reset"),
    ("S",     "Shuffle & Reset"),
    ("↑/↓",   "Speed Up/Down"),
    ("←/→",   "Decrease/Increase bars"),
    ("1/2",   "Bubble/Quick sort"),
    ("M",     "Sound On/Off"),
    ("Q/Esc", "Quit"),
]

STATUS_COLORS = {
    AppStatus.RUNNING:   UI_KEY,
    AppStatus.PAUSED:    UI_RED,
    AppStatus.COMPLETED: UI_GREEN,
}


def build_fonts():
    def tf(names, sz):
        for n in names:
            try: return pygame.font.SysFont(n, sz)
            except (OSError, pygame.error): pass
        return pygame.font.SysFont(None, sz)
    mono = ["Consolas", "Courier New", "Lucida Console"]
    sans = ["Segoe UI", "Tahoma", "Arial"]
    return dict(title=tf(sans, 15), small=tf(sans, 13), mono_sm=tf(mono, 13))


def value_to_color(value, max_value):
    r = value / max_value
    if r < 0.25: return (0, int(255 * r * 4), 255)
    if r < 0.5:  return (0, 255, int(255 * (1 - (r - 0.25) * 4)))
    if r < 0.75: return (int(255 * (r - 0.5) * 4), 255, 0)
    return (255, int(255 * (1 - (r - 0.75) * 4)), 0)


def bar_color(i, value, max_value, current, compared):
    if i in current:  return ACTIVE_COLOR
    if i in compared: return COMPARE_COLOR
    return value_to_color(value, max_value)


def draw_bars(s, bars, current, comparisons):
    if not bars:
        return
    compared = {k for pair in comparisons for k in pair}
    n  = len(bars)
    mv = max(max(bars), 1)
    bw = WINDOW_WIDTH / n
    for i, v in enumerate(bars):
        h = (v / mv) * (CHART_H - 2 * PAD)
        c = bar_color(i, v, mv, current, compared)
        pygame.draw.rect(s, c, (i * bw, CHART_H - h, max(1, bw - BAR_SPACING), h))


def _panel(s, fonts, x, title):
    rect = pygame.Rect(x, PANEL_Y, PANEL_W, PANEL_H)
    pygame.draw.rect(s, UI_PANEL,  rect, border_radius=7)
    pygame.draw.rect(s, UI_BORDER, rect, 1, border_radius=7)
    t = fonts['title'].render(title, True, UI_TEXT)
    s.blit(t, (rect.centerx - t.get_width() // 2, rect.y + 4))
    return rect


def draw_controls(s, fonts, x):
    rect = _panel(s, fonts, x, "Controls")
    col_w = PANEL_W // 2
    for n, (key, what) in enumerate(CONTROLS):
        cx = rect.x + PAD + (n // 4) * col_w
        cy = rect.y + 26 + (n % 4) * LINE_H
        k = fonts['mono_sm'].render(key, True, UI_KEY)
        s.blit(k, (cx, cy))
        s.blit(fonts['small'].render(f" - {what}", True, UI_SUBTEXT), (cx + k.get_width(), cy))


def draw_info(s, fonts, x, app):
    rect  = _panel(s, fonts, x, "Information")
    algo  = app.get_current_algorithm()
    stats = algo.stats()
    rows = [
        ("Algorithm",   algo.name(),                UI_VALUE),
        ("Bars",        str(len(app.bars)),         UI_VALUE),
        ("Status",      app.app_status.value,       STATUS_COLORS[app.app_status]),
        ("Speed",       f"{app.speed}ms",           UI_KEY),
        ("Steps",       str(stats["steps"]),        UI_VALUE),
        ("Comparisons", str(stats["comparisons"]),  UI_VALUE),
        ("Sound",       "on" if app.sound_on else "off", UI_SUBTEXT),
    ]
    col_w = PANEL_W // 2
    for n, (label, value, color) in enumerate(rows):
        cx = rect.x + PAD + (n // 4) * col_w
        cy = rect.y + 26 + (n % 4) * LINE_H
        lt = fonts['small'].render(f"{label}: ", True, UI_SUBTEXT)
        s.blit(lt, (cx, cy))
        s.blit(fonts['small'].render(value, True, color), (cx + lt.get_width(), cy))


def draw_app(s, fonts, app):
    algo = app.get_current_algorithm()
    s.fill(BACKGROUND_COLOR)
    draw_bars(s, algo.get_data(), algo.get_current_indices(), algo.get_comparisons())
    draw_controls(s, fonts, PAD)
    draw_info(s, fonts, 2 * PAD + PANEL_W, app)
    pygame.display.flip()
