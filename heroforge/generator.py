"""
heroforge/generator.py  ·  portrait + trait calls to the OpenAI API
"""
from __future__ import annotations

import json
import logging
import re
from functools import lru_cache
from typing import List

from openai import AsyncOpenAI

from .config import IMAGE_MODEL, IMAGE_SIZE, LLM_MODEL

logger = logging.getLogger("heroforge.generator")

STYLE_HINT = (
    "You are a fantasy tabletop RPG assistant. "
    "Answer with strict JSON only, no commentary."
)


class GenerationError(RuntimeError):
    """The service answered, but not with something we can use."""


@lru_cache(maxsize=1)
def get_client() -> AsyncOpenAI:
    return AsyncOpenAI()


# ────────── tolerant JSON parser ──────────
def _safe_json_parse(text: str) -> dict:
    """
    Most forgiving JSON extraction:
    1. unwrap ```json ``` fences
    2. drop lines starting with // or #
    3. turn bare newlines and tabs into spaces
    4. fall back to the first {...}
    """
    cleaned = re.sub(r"```(?:json)?", "", text, flags=re.I).strip()
    cleaned = re.sub(r"^\s*(//|#).*$", "", cleaned, flags=re.M)
    cleaned = cleaned.replace("\n", " ").replace("\t", " ")

    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        m = re.search(r"\{.*\}", cleaned)
        if m:
            return json.loads(m.group())
        raise


# ────────── portrait ──────────
async def generate_character_image(prompt: str) -> str:
    """Return the portrait as a base64-encoded JPEG."""
    logger.debug("image request model=%s size=%s", IMAGE_MODEL, IMAGE_SIZE)
    resp = await get_client().images.generate(
        model         = IMAGE_MODEL,
        prompt        = prompt,
        n             = 1,
        size          = IMAGE_SIZE,
        output_format = "jpeg",
    )
    if not resp.data or not resp.data[0].b64_json:
        raise GenerationError("No image was generated.")
    return resp.data[0].b64_json


# ────────── traits ──────────
async def generate_character_traits(prompt: str) -> List[str]:
    logger.debug("traits request model=%s", LLM_MODEL)
    resp = await get_client().chat.completions.create(
        model    = LLM_MODEL,
        messages = [
            {"role": "system", "content": STYLE_HINT},
            {"role": "user",   "content": prompt},
        ],
        response_format = {"type": "json_object"},
        max_tokens      = 60,
        temperature     = 0.9,
    )
    try:
        data = _safe_json_parse(resp.choices[0].message.content or "")
    except json.JSONDecodeError as exc:
        raise GenerationError("Could not read traits from the response.") from exc

    traits = data.get("traits") if isinstance(data, dict) else None
    if not isinstance(traits, list):
        raise GenerationError("The response did not include any traits.")
    return [str(t).strip() for t in traits if str(t).strip()]
