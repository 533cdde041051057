"""Pacing policies used between units of work."""

import time
from abc import ABC, abstractmethod


class Pacer(ABC):
    """Decides how to wait before the next request."""

    @abstractmethod
    def wait(self, ms: int) -> None:
        pass


class SleepPacer(Pacer):
    """Fixed delay: blocks the calling thread for the requested time."""

    def wait(self, ms: int) -> None:
        if ms > 0:
            time.sleep(ms / 1000)


class NoPacer(Pacer):
    """Does not wait. Records requested delays so callers can inspect them."""

    def __init__(self) -> None:
        self.waits: list[int] = []

    def wait(self, ms: int) -> None:
        self.waits.append(ms)
