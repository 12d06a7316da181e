from dataclasses import dataclass

import pygame

from .config import TICK_FPS

TICK_EVENT = pygame.USEREVENT + 1


@dataclass
class Event:
    kind: str            # "tick" | "key" | "quit"
    key:  int = 0
    mod:  int = 0


class EventHandler:
    """
    Single consumer view over periodic ticks and keyboard input.

    pygame's timer thread posts TICK_EVENT into the same queue that carries
    window and keyboard events, so next() sees both in arrival order.
    """

    def __init__(self, fps=TICK_FPS):
        self.interval_ms = max(1, int(round(1000 / fps)))
        pygame.time.set_timer(TICK_EVENT, self.interval_ms)

    def stop(self):
        pygame.time.set_timer(TICK_EVENT, 0)

    def next(self) -> Event:
        while True:
            ev = translate(pygame.event.wait())
            if ev is not None:
                return ev


def translate(ev):
    """Map a pygame event to an Event, or None for events the app ignores."""
    if ev.type == TICK_EVENT:
        return Event("tick")
    if ev.type == pygame.QUIT:
        return Event("quit")
    if ev.type == pygame.KEYDOWN:
        return Event("key", key=ev.key, mod=ev.mod)
    return None
