"""
heroforge/prompts.py  ·  prompt templates sent to the generation service
"""
from jinja2 import Template

from .models import CharacterDraft

IMAGE_PROMPT = Template(
    "High-quality, detailed fantasy character portrait of a majestic "
    "{{ race }} {{ character_class }}. The character has {{ special_elements }}. "
    "Art style: digital painting, epic fantasy, D&D character art, high detail, "
    "cinematic lighting, photorealistic."
)

TRAITS_PROMPT = Template(
    'Generate an object with a "traits" property, which is an array of 3 distinct, '
    "one-word personality traits for a {{ race }} {{ character_class }}. "
    "Examples: Brave, Cautious, Greedy, Loyal, Impulsive."
)


def build_image_prompt(draft: CharacterDraft) -> str:
    return IMAGE_PROMPT.render(
        race             = draft.race,
        character_class  = draft.character_class,
        special_elements = draft.special_elements,
    )


def build_traits_prompt(draft: CharacterDraft) -> str:
    return TRAITS_PROMPT.render(race=draft.race, character_class=draft.character_class)
