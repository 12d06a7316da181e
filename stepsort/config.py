import json
import os

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH   = 1100
WINDOW_HEIGHT  = 680
TICK_FPS       = 30

MIN_BARS       = 10
MAX_BARS       = 100
DEFAULT_BARS   = 50

MIN_SPEED_MS     = 1
MAX_SPEED_MS     = 1000
SPEED_STEP_MS    = 20
DEFAULT_SPEED_MS = 100

BACKGROUND_COLOR = (5, 5, 10)
ACTIVE_COLOR     = (255, 60, 60)
COMPARE_COLOR    = (255, 200, 60)
BAR_SPACING      = 1

ENABLE_SOUND  = True
FREQ_LOW      = 120.0
FREQ_HIGH     = 960.0
SAMPLE_RATE   = 44100
CHUNK_SIZE    = 512
MAX_VOICES    = 16
# samples a stolen voice gets to fade out
VOICE_STEAL_FADE = 64

# Tone envelope, in seconds
SOUND_SUSTAIN = 0.12
SOUND_ATTACK  = 0.010
SOUND_RELEASE = 0.050

# ============================================================
# ========================= UI THEME =========================
# ============================================================

UI_PANEL   = (14, 14,  22)
UI_BORDER  = (38,  38,  58)
UI_TEXT    = (215, 215, 228)
UI_SUBTEXT = (105, 105, 130)
UI_KEY     = (255, 210,  60)
UI_VALUE   = (80,  200, 230)
UI_GREEN   = (60,  200, 100)
UI_RED     = (255,  90,  90)

# ============================================================
# ===================== PERSISTED SETTINGS ===================
# ============================================================

SETTINGS_PATH = os.environ.get(
    "STEPSORT_SETTINGS",
    os.path.join(os.path.expanduser("~"), ".stepsort", "settings.json"),
)


def _clamp(v, lo, hi):
    return max(lo, min(hi, v))


class Settings:
    """Last-used size, speed, algorithm and sound toggle, kept between runs."""

    def __init__(self, path=None):
        self.path      = path or SETTINGS_PATH
        self.size      = DEFAULT_BARS
        self.speed_ms  = DEFAULT_SPEED_MS
        self.algorithm = 0
        self.sound     = ENABLE_SOUND

    @classmethod
    def load(cls, path=None):
        s = cls(path)
        if not os.path.exists(s.path):
            return s
        try:
            with open(s.path) as f:
                d = json.load(f)
            s.size      = _clamp(int(d.get("size", s.size)), MIN_BARS, MAX_BARS)
            s.speed_ms  = _clamp(int(d.get("speed_ms", s.speed_ms)), MIN_SPEED_MS, MAX_SPEED_MS)
            s.algorithm = max(0, int(d.get("algorithm", s.algorithm)))
            sound = d.get("sound", s.sound)
            if isinstance(sound, bool):
                s.sound = sound
        except (OSError, ValueError, TypeError, AttributeError) as e:
            print(f"Settings load error ({s.path}): {e}")
            return cls(path)
        return s

    def save(self):
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(self.as_dict(), f, indent=2)
        except OSError as e:
            print(f"Settings save error ({self.path}): {e}")

    def as_dict(self) -> dict:
        return dict(
            size=self.size,
            speed_ms=self.speed_ms,
            algorithm=self.algorithm,
            sound=self.sound,
        )
