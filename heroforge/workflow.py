"""
heroforge/workflow.py  ·  one character generation attempt, start to finish

States: idle -> loading -> (success | failure) -> idle.

``generate`` suspends twice: once on the joined image/trait requests and
once on the short settle delay that keeps "100%" on screen. In-flight
requests are never aborted; an attempt that was superseded (by ``reset`` or
a newer attempt) simply drops whatever it gets back.
"""
from __future__ import annotations

import asyncio
import logging
import random
from typing import Awaitable, Callable, List, Optional

from . import state as st
from .config import PROGRESS_TICK_SECONDS, SETTLE_DELAY_SECONDS
from .dice import roll_attributes
from .generator import generate_character_image, generate_character_traits
from .models import AppState, CharacterDraft
from .progress import MAX_STEP, MIN_STEP, ProgressTicker
from .prompts import build_image_prompt, build_traits_prompt
from .randomizer import randomize_draft

logger = logging.getLogger("heroforge.workflow")

ImageFn  = Callable[[str], Awaitable[str]]
TraitsFn = Callable[[str], Awaitable[List[str]]]


CANCELLED = "Generation was cancelled."


async def _no_traits() -> List[str]:
    return []


async def _call(fn, prompt: str):
    return await fn(prompt)


class GenerationWorkflow:
    def __init__(
        self,
        image_fn: Optional[ImageFn] = None,
        traits_fn: Optional[TraitsFn] = None,
        rng: Optional[random.Random] = None,
        tick_interval: float = PROGRESS_TICK_SECONDS,
        settle_delay: float = SETTLE_DELAY_SECONDS,
        draft: Optional[CharacterDraft] = None,
    ):
        self.image_fn  = image_fn or generate_character_image
        self.traits_fn = traits_fn or generate_character_traits
        self.rng = rng or random.Random()
        self.settle_delay = settle_delay
        self.state = AppState(draft=draft or CharacterDraft())
        self._ticker = ProgressTicker(self._tick, tick_interval)
        self._attempt = 0

    # ────────── read ──────────
    def snapshot(self) -> AppState:
        return self.state

    @property
    def ticking(self) -> bool:
        return self._ticker.running

    # ────────── form ──────────
    def update_draft(self, **changes) -> AppState:
        if self.state.is_loading:
            return self.state
        self.state = st.update_draft(self.state, **changes)
        return self.state

    def randomize(self) -> AppState:
        if self.state.is_loading:
            return self.state
        self.state = st.replace_draft(self.state, randomize_draft(self.rng))
        return self.state

    def reset(self) -> AppState:
        self._attempt += 1
        self._ticker.cancel()
        self.state = st.reset(self.state)
        logger.info("form reset")
        return self.state

    # ────────── generation ──────────
    def _tick(self) -> None:
        self.state = st.advance_progress(self.state, self.rng.randint(MIN_STEP, MAX_STEP))

    def _current(self, attempt: int) -> bool:
        return attempt == self._attempt

    async def generate(self) -> AppState:
        if not st.can_start(self.state):
            logger.debug("generate ignored (loading=%s, name=%r)",
                         self.state.is_loading, self.state.draft.name)
            return self.state

        self._attempt += 1
        attempt = self._attempt
        draft = self.state.draft
        self.state = st.begin_generation(self.state)
        self._ticker.start()
        logger.info("generating %s the %s %s (traits=%s)", draft.name, draft.race,
                    draft.character_class, draft.include_random_traits)

        # service calls start inside gather, so a synchronous raise still
        # lands in the joined await
        image_call = _call(self.image_fn, build_image_prompt(draft))
        if draft.include_random_traits:
            traits_call = _call(self.traits_fn, build_traits_prompt(draft))
        else:
            traits_call = _no_traits()

        cancelled = False
        try:
            image_b64, traits = await asyncio.gather(image_call, traits_call)
        except asyncio.CancelledError:
            cancelled = True
            logger.warning("character generation cancelled")
            if self._current(attempt):
                self.state = st.complete_failure(
                    self.state, st.describe_failure(RuntimeError(CANCELLED)))
            raise
        except Exception as exc:
            logger.exception("character generation failed")
            if self._current(attempt):
                self.state = st.complete_failure(self.state, st.describe_failure(exc))
        else:
            if self._current(attempt):
                self.state = st.complete_success(
                    self.state,
                    image_b64,
                    roll_attributes(self.rng),
                    traits if draft.include_random_traits else None,
                )
                logger.info("generated %s", draft.name)
        finally:
            if self._current(attempt):
                self._ticker.cancel()
                self.state = st.settle(self.state)
                if cancelled:
                    self.state = st.finish_loading(self.state)

        if not self._current(attempt):
            return self.state

        try:
            await asyncio.sleep(self.settle_delay)
        finally:
            if self._current(attempt):
                self.state = st.finish_loading(self.state)
        return self.state
