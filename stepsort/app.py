import enum
import random
import time

import pygame

from .algorithms import make_algorithms
from .config import (
    MAX_BARS, MAX_SPEED_MS, MIN_BARS, MIN_SPEED_MS, SPEED_STEP_MS,
    WINDOW_HEIGHT, WINDOW_WIDTH, Settings,
)
from .events import EventHandler


class AppStatus(enum.Enum):
    RUNNING   = "Running"
    PAUSED    = "Paused"
    COMPLETED = "Completed"


class App:
    """
    Host around the active algorithm slot.

    Owns the bar values, the keyboard-driven configuration and the step gate:
    a tick only advances the algorithm while RUNNING and once `speed`
    milliseconds have passed since the previous step.
    """

    def __init__(self, settings=None, rng=None, clock=time.monotonic, sound=None):
        self.settings   = settings or Settings()
        self.rng        = rng or random.Random()
        self.clock      = clock
        self.sound      = sound
        self.sound_on   = self.settings.sound
        self.running    = True
        self.algorithms = make_algorithms()
        self.current_algorithm = min(self.settings.algorithm, len(self.algorithms) - 1)
        self.app_status = AppStatus.PAUSED
        self.speed      = self.settings.speed_ms
        self.last_step  = self.clock()
        self.bars       = list(range(1, self.settings.size + 1))
        self.shuffle_data()
        self.reset_algorithm()

    # ------------------------------------------------------------------ state

    def get_current_algorithm(self):
        return self.algorithms[self.current_algorithm]

    def shuffle_data(self):
        self.rng.shuffle(self.bars)

    def reset_algorithm(self):
        self.get_current_algorithm().reset_with_data(list(self.bars))
        self.app_status = AppStatus.PAUSED

    def reset(self):
        self.reset_algorithm()

    def shuffle_data_and_reset(self):
        self.shuffle_data()
        self.reset_algorithm()

    def quit(self):
        self.running = False

    def toggle_running(self):
        if self.app_status == AppStatus.RUNNING:
            self.app_status = AppStatus.PAUSED
        elif self.app_status == AppStatus.PAUSED:
            self.app_status = AppStatus.RUNNING
            self.last_step  = self.clock()
        else:
            self.shuffle_data_and_reset()

    def select_algorithm(self, index):
        if 0 <= index < len(self.algorithms):
            self.current_algorithm = index
            self.reset_algorithm()

    def increase_length(self):
        if len(self.bars) >= MAX_BARS:
            return
        self.bars.append(len(self.bars) + 1)
        self.shuffle_data_and_reset()

    def decrease_length(self):
        if len(self.bars) <= MIN_BARS:
            return
        self.bars.remove(max(self.bars))
        self.shuffle_data_and_reset()

    def increase_speed(self):
        if self.speed == MIN_SPEED_MS:
            return
        if self.speed == SPEED_STEP_MS:
            self.speed = MIN_SPEED_MS
            return
        self.speed = max(MIN_SPEED_MS, self.speed - SPEED_STEP_MS)

    def decrease_speed(self):
        if self.speed == MIN_SPEED_MS:
            self.speed = SPEED_STEP_MS
            return
        self.speed = min(MAX_SPEED_MS, self.speed + SPEED_STEP_MS)

    def toggle_sound(self):
        self.sound_on = not self.sound_on

    # ------------------------------------------------------------------ events

    def tick(self, now=None):
        if self.app_status != AppStatus.RUNNING:
            return
        now = self.clock() if now is None else now
        if (now - self.last_step) * 1000 < self.speed:
            return

        algo = self.get_current_algorithm()
        if algo.step():
            self.app_status = AppStatus.COMPLETED
        self.last_step = now

        comps = algo.get_comparisons()
        if comps and self.sound and self.sound_on:
            data = algo.get_data()
            self.sound.trigger(data[comps[0][0]], max(data))

    def handle_key(self, key, mod=0):
        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.quit()
        elif key == pygame.K_c and mod & pygame.KMOD_CTRL:
            self.quit()
        elif key == pygame.K_SPACE:
            self.toggle_running()
        elif key == pygame.K_r:
            self.reset()
        elif key == pygame.K_s:
            self.shuffle_data_and_reset()
        elif key == pygame.K_m:
            self.toggle_sound()
        elif key == pygame.K_RIGHT:
            self.increase_length()
        elif key == pygame.K_LEFT:
            self.decrease_length()
        elif key == pygame.K_UP:
            self.increase_speed()
        elif key == pygame.K_DOWN:
            self.decrease_speed()
        elif pygame.K_1 <= key <= pygame.K_9:
            self.select_algorithm(key - pygame.K_1)

    def handle_event(self, ev):
        if ev.kind == "tick":
            self.tick()
        elif ev.kind == "key":
            self.handle_key(ev.key, ev.mod)
        elif ev.kind == "quit":
            self.quit()

    def store_settings(self):
        self.settings.size      = len(self.bars)
        self.settings.speed_ms  = self.speed
        self.settings.algorithm = self.current_algorithm
        self.settings.sound     = self.sound_on
        self.settings.save()

    # ------------------------------------------------------------------ main loop

    def run(self):
        from .sound import start_tone_engine
        from .ui import build_fonts, draw_app

        pygame.init()
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("StepSort")
        fonts = build_fonts()
        if self.sound is None:
            self.sound = start_tone_engine()
        events = EventHandler()

        try:
            while self.running:
                draw_app(screen, fonts, self)
                self.handle_event(events.next())
        finally:
            events.stop()
            self.store_settings()
            if self.sound:
                self.sound.stop()
            pygame.quit()
