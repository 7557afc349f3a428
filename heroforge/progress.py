"""
heroforge/progress.py  ·  cosmetic progress bar

The bar does not measure real work: a ticker nudges it forward at a fixed
interval and it stalls below 100 until the generation actually finishes.
"""
from __future__ import annotations

import asyncio
from typing import Callable, Optional

PROGRESS_CEILING = 95       # ticks never go past this
MIN_STEP, MAX_STEP = 1, 5

LOADING_MESSAGES = [
    "Gathering arcane energies...",
    "Consulting ancient scrolls...",
    "Shaping the hero's form...",
    "Inscribing the final runes...",
    "A legend is born!",
]


def loading_message(progress: int) -> str:
    if progress < 25:
        return LOADING_MESSAGES[0]
    if progress < 50:
        return LOADING_MESSAGES[1]
    if progress < 75:
        return LOADING_MESSAGES[2]
    if progress < 100:
        return LOADING_MESSAGES[3]
    return LOADING_MESSAGES[4]


def next_progress(progress: int, step: int) -> int:
    """Advance ``progress`` by ``step`` without crossing the ceiling."""
    if progress >= PROGRESS_CEILING:
        return progress
    return min(progress + step, PROGRESS_CEILING)


class ProgressTicker:
    """Calls ``on_tick`` every ``interval`` seconds until cancelled."""

    def __init__(self, on_tick: Callable[[], None], interval: float):
        self.on_tick = on_tick
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run())

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.on_tick()
