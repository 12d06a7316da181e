import math
import threading
import time

import numpy as np
import pygame

from .config import (
    CHUNK_SIZE, FREQ_HIGH, FREQ_LOW, MAX_VOICES, SAMPLE_RATE,
    SOUND_ATTACK, SOUND_RELEASE, SOUND_SUSTAIN, VOICE_STEAL_FADE,
)

TWO_PI = 2.0 * math.pi

# ============================================================
# ======================= TONE ENGINE ========================
# ============================================================
#
# Every compared bar fires a short sine voice whose pitch follows the bar's
# value. Voices are mixed per chunk with numpy and queued on a dedicated
# mixer channel from a background thread, so the tick loop never waits on
# audio.
#
# Envelope per voice (raised cosine at both ends):
#   attack:  0.5 * (1 - cos(pi * t / A))
#   release: 0.5 * (1 + cos(pi * (t - start) / R))
#
# Past MAX_VOICES the oldest ringing voice is not cut off: its remaining life
# is clamped to VOICE_STEAL_FADE samples so the release still runs.


class _Voice:
    __slots__ = ('freq', 'phase', 'age', 'length', 'release')

    def __init__(self, freq, length, release):
        self.freq    = freq
        self.phase   = 0.0
        self.age     = 0
        self.length  = length
        self.release = release

    def ringing(self) -> bool:
        return self.length - self.age > VOICE_STEAL_FADE


class ToneEngine:
    def __init__(self, sample_rate=SAMPLE_RATE, chunk_size=CHUNK_SIZE):
        self.sample_rate = sample_rate
        self.chunk_size  = chunk_size
        self.attack      = max(1, int(SOUND_ATTACK  * sample_rate))
        self.release     = max(1, int(SOUND_RELEASE * sample_rate))
        self.length      = int(SOUND_SUSTAIN * sample_rate) + self.attack + self.release
        self._voices     = []
        self._lock       = threading.Lock()
        self._running    = False
        self._thread     = None
        self._channel    = None

    def start(self):
        self._channel = pygame.mixer.Channel(0)
        self._running = True
        self._thread  = threading.Thread(target=self._loop, daemon=True)
        self._thread.start()

    def stop(self):
        self._running = False
        if self._channel:
            self._channel.stop()

    def voice_count(self) -> int:
        with self._lock:
            return len(self._voices)

    def ringing_count(self) -> int:
        with self._lock:
            return sum(1 for v in self._voices if v.ringing())

    def trigger(self, value: int, max_value: int):
        """Start a voice pitched linearly between FREQ_LOW and FREQ_HIGH."""
        ratio = value / max(1, max_value)
        freq  = FREQ_LOW + ratio * (FREQ_HIGH - FREQ_LOW)
        with self._lock:
            ringing = [v for v in self._voices if v.ringing()]
            if len(ringing) >= MAX_VOICES:
                oldest = ringing[0]
                oldest.release = min(VOICE_STEAL_FADE, oldest.release)
                oldest.length  = oldest.age + oldest.release
            self._voices.append(_Voice(freq, self.length, self.release))

    def render_chunk(self) -> np.ndarray:
        """Mix one chunk of all live voices into a float64 buffer in [-1, 1]."""
        buf = np.zeros(self.chunk_size, dtype=np.float64)
        idx = np.arange(self.chunk_size, dtype=np.float64)

        with self._lock:
            alive = []
            for v in self._voices:
                t      = idx + v.age
                phases = (v.phase + idx * (v.freq / self.sample_rate)) % 1.0
                wave   = np.sin(TWO_PI * phases)

                env = np.ones(self.chunk_size, dtype=np.float64)
                a = t < self.attack
                env[a] = 0.5 * (1.0 - np.cos(math.pi * t[a] / self.attack))
                rel_start = v.length - v.release
                r = t >= rel_start
                env[r] = 0.5 * (1.0 + np.cos(math.pi * (t[r] - rel_start) / v.release))
                env[t >= v.length] = 0.0

                buf += wave * env

                v.phase = (v.phase + self.chunk_size * (v.freq / self.sample_rate)) % 1.0
                v.age  += self.chunk_size
                if v.age < v.length:
                    alive.append(v)
            self._voices = alive
            n_voices = max(1, len(alive))

        buf /= math.sqrt(n_voices)
        return np.clip(buf, -1.0, 1.0)

    def _loop(self):
        chunk_secs = self.chunk_size / self.sample_rate
        while self._running:
            pcm    = (self.render_chunk() * 32767 * 0.8).astype(np.int16)
            stereo = np.column_stack((pcm, pcm))
            snd    = pygame.mixer.Sound(buffer=stereo.tobytes())
            while self._channel.get_queue() is not None and self._running:
                time.sleep(0.001)
            if self._running:
                self._channel.queue(snd)
            time.sleep(chunk_secs * 0.75)


def start_tone_engine():
    """Open the mixer and start a ToneEngine; None when no audio device is usable."""
    try:
        pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, CHUNK_SIZE)
        pygame.mixer.init()
    except pygame.error as e:
        print(f"Sound disabled: {e}")
        return None
    engine = ToneEngine()
    engine.start()
    return engine
