from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .progress import loading_message

Score = Annotated[int, Field(ge=3, le=18)]


class CharacterDraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Valerius"
    race: str = "Human"
    character_class: str = "Paladin"
    special_elements: str = "Glowing golden eyes, ornate silver armor"
    include_random_traits: bool = False


class AttributeBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    strength: Score                     # ★ 3d6 each
    dexterity: Score
    constitution: Score
    intelligence: Score
    wisdom: Score
    charisma: Score


class GenerationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    image: str | None = None            # data URL
    attributes: AttributeBlock | None = None
    traits: list[str] | None = None
    error: str | None = None


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    draft: CharacterDraft = CharacterDraft()
    is_loading: bool = False
    progress: int = Field(default=0, ge=0, le=100)
    result: GenerationResult = GenerationResult()

    @computed_field
    @property
    def loading_message(self) -> str:
        return loading_message(self.progress)
