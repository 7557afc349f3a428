"""
Tests for the pure AppState transitions and the progress helpers.
"""
import pytest
from pydantic import ValidationError

from heroforge import state as st
from heroforge.models import AppState, AttributeBlock, CharacterDraft, GenerationResult
from heroforge.progress import LOADING_MESSAGES, PROGRESS_CEILING, loading_message, next_progress

STATS = AttributeBlock(
    strength=10, dexterity=11, constitution=12, intelligence=13, wisdom=14, charisma=15,
)


class TestGuard:
    def test_can_start_idle_with_name(self):
        assert st.can_start(AppState())

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_cannot_start(self, name):
        assert not st.can_start(AppState(draft=CharacterDraft(name=name)))

    def test_loading_cannot_start(self):
        assert not st.can_start(AppState(is_loading=True))


class TestTransitions:
    def test_begin_clears_previous_result(self):
        before = AppState(progress=100, result=GenerationResult(error="boom"))
        after = st.begin_generation(before)
        assert after.is_loading
        assert after.progress == 0
        assert after.result == GenerationResult()
        assert before.result.error == "boom"

    def test_advance_only_while_loading(self):
        idle = AppState(progress=10)
        assert st.advance_progress(idle, 5) is idle
        loading = AppState(is_loading=True, progress=10)
        assert st.advance_progress(loading, 5).progress == 15

    def test_success_prefixes_image_and_keeps_traits(self):
        s = st.complete_success(AppState(is_loading=True), "QUJD", STATS, ["Brave", "Loyal"])
        assert s.result.image == "data:image/jpeg;base64,QUJD"
        assert s.result.attributes == STATS
        assert s.result.traits == ["Brave", "Loyal"]
        assert s.result.error is None

    def test_success_drops_empty_traits(self):
        s = st.complete_success(AppState(is_loading=True), "QUJD", STATS, [])
        assert s.result.traits is None

    def test_failure_clears_image(self):
        s = AppState(result=GenerationResult(image="data:image/jpeg;base64,x"))
        s = st.complete_failure(s, "Failed to generate character: nope")
        assert s.result.image is None
        assert s.result.attributes is None
        assert s.result.traits is None
        assert s.result.error == "Failed to generate character: nope"

    def test_settle_then_finish(self):
        s = st.settle(AppState(is_loading=True, progress=40))
        assert s.progress == 100 and s.is_loading
        s = st.finish_loading(s)
        assert not s.is_loading

    def test_reset_keeps_draft_only(self):
        draft = CharacterDraft(name="Lyra Winterfall")
        s = AppState(draft=draft, is_loading=True, progress=60,
                     result=GenerationResult(error="x"))
        assert st.reset(s) == AppState(draft=draft)

    def test_update_draft_validates(self):
        s = st.update_draft(AppState(), name="Wren Blackwood", include_random_traits=True)
        assert s.draft.name == "Wren Blackwood"
        assert s.draft.include_random_traits is True
        assert s.draft.race == "Human"
        with pytest.raises(ValidationError):
            st.update_draft(AppState(), include_random_traits="sometimes")

    def test_states_are_frozen(self):
        with pytest.raises(ValidationError):
            AppState().progress = 5


class TestFailureMessage:
    def test_uses_exception_text(self):
        assert st.describe_failure(RuntimeError("quota exceeded")) == (
            "Failed to generate character: quota exceeded"
        )

    def test_falls_back_to_generic(self):
        assert st.describe_failure(RuntimeError()) == (
            "Failed to generate character: An unknown error occurred. Please try again."
        )


class TestProgress:
    def test_next_progress_caps_at_ceiling(self):
        assert next_progress(0, 5) == 5
        assert next_progress(93, 5) == PROGRESS_CEILING
        assert next_progress(PROGRESS_CEILING, 1) == PROGRESS_CEILING

    @pytest.mark.parametrize("progress, index", [
        (0, 0), (24, 0), (25, 1), (49, 1), (50, 2), (74, 2), (75, 3), (99, 3), (100, 4),
    ])
    def test_loading_message_thresholds(self, progress, index):
        assert loading_message(progress) == LOADING_MESSAGES[index]

    def test_state_exposes_loading_message(self):
        assert AppState(progress=100).model_dump()["loading_message"] == "A legend is born!"

    def test_progress_bounds_validated(self):
        with pytest.raises(ValidationError):
            AppState(progress=101)
