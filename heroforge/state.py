"""
heroforge/state.py  ·  pure transitions over AppState

Each function takes a snapshot and returns a new one; nothing here touches
timers or the network.
"""
from __future__ import annotations

from .models import AppState, AttributeBlock, CharacterDraft, GenerationResult
from .progress import next_progress

IMAGE_DATA_PREFIX = "data:image/jpeg;base64,"
UNKNOWN_ERROR     = "An unknown error occurred. Please try again."


def can_start(state: AppState) -> bool:
    return bool(state.draft.name.strip()) and not state.is_loading


def begin_generation(state: AppState) -> AppState:
    return state.model_copy(update={
        "is_loading": True,
        "progress"  : 0,
        "result"    : GenerationResult(),
    })


def advance_progress(state: AppState, step: int) -> AppState:
    if not state.is_loading:
        return state
    return state.model_copy(update={"progress": next_progress(state.progress, step)})


def complete_success(
    state: AppState,
    image_b64: str,
    attributes: AttributeBlock,
    traits: list[str] | None = None,
) -> AppState:
    return state.model_copy(update={
        "result": GenerationResult(
            image      = IMAGE_DATA_PREFIX + image_b64,
            attributes = attributes,
            traits     = list(traits) if traits else None,
        ),
    })


def complete_failure(state: AppState, message: str) -> AppState:
    return state.model_copy(update={"result": GenerationResult(error=message)})


def settle(state: AppState) -> AppState:
    """Pin the bar at 100 once the attempt is over, whatever the outcome."""
    return state.model_copy(update={"progress": 100})


def finish_loading(state: AppState) -> AppState:
    return state.model_copy(update={"is_loading": False})


def reset(state: AppState) -> AppState:
    return AppState(draft=state.draft)


def update_draft(state: AppState, **changes) -> AppState:
    draft = CharacterDraft.model_validate({**state.draft.model_dump(), **changes})
    return state.model_copy(update={"draft": draft})


def replace_draft(state: AppState, draft: CharacterDraft) -> AppState:
    return state.model_copy(update={"draft": draft})


def describe_failure(exc: BaseException) -> str:
    detail = str(exc).strip() or UNKNOWN_ERROR
    return f"Failed to generate character: {detail}"
